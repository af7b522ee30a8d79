# xmlite

`xmlite` is a small XML parser with no runtime dependencies. It reads UTF-8
source one character at a time and checks the markup as it goes. It builds a
tree of nodes from elements, attributes and text. Comments are checked and
then dropped.

## Parsing a document

```python
from xmlite.parser import Parser, parse_document

parser = Parser(None)
document = parse_document(b'<greeting lang="en">Hello</greeting>', parser)

root = document.root
print(str(root.name))                      # greeting
for attribute in root.attributes:
    print(str(attribute.name), str(attribute.value))   # lang en
for node in root.iter():
    print(node)
```

`parse_document(source)` creates a default `Parser` when none is given.
`Parser.parse(source)` does the same job. A parser can be reused for more
than one document. The source may be `bytes`, `bytearray`, `memoryview` or
`str`. A `str` is first encoded with the parser's source converter. Empty
input raises `ArgumentError`.

The result is a `Document` with these fields:

- `root`: the root `Node`.
- `version`: always `XmlVersion.V1_0`.
- `allocator`: the parser's allocator.
- `dst_converter`: the parser's string converter.

`Document.string_iterator(string)` yields the scalar values of an `XmlString`
and decodes them with the document's converter.

## The tree

`xmlite.node.Node` has these fields:

- `type`: a `NodeType`, one of `EMPTY`, `MIXED`, `TEXT` or `COMMENT`.
- `name`.
- `parent`.
- `attributes`: a list of `Attribute` objects, each with a `name` and a `value`.
- `children`.
- `text`.
- `comment`.

An element starts out `EMPTY` and becomes `MIXED` once it gets its first
child. Character data becomes a `TEXT` child. `Node.append_child()` adds an
empty child element. `Node.iter()` yields a node and all the nodes below it
in document order. `Node.tree_memory_size()` estimates the storage that a
subtree holds. It adds up the child and attribute slots, which grow by
doubling, and the capacity of every string in the subtree.

All names, values and text are `XmlString` objects
(`xmlite.xmlstring`). An `XmlString` is a growable string stored in a chosen
encoding:

- `len()` counts characters.
- `size` counts encoded bytes.
- Iterating over it yields scalar values.
- `str()` gives Python text.
- It compares equal to another `XmlString` with the same bytes, or to an
  equal `str`.

## What is accepted

The parser accepts:

- elements, including self-closing `<a/>`, whose end tags must match their
  start tags;
- attributes with double-quoted values;
- character data inside the root element;
- comments `<!-- ... -->`.

CR and CR LF line ends are read as LF.

It raises `ParseError` for these:

- entity and character references (`&...;`), in text or in attribute values;
- single-quoted attribute values;
- `<` inside an attribute value;
- the XML declaration and processing instructions (`<?...?>`);
- `<!DOCTYPE ...>` and CDATA sections;
- a second top-level element;
- any character data outside the root element, including white space before
  or after it;
- unclosed or mismatched tags.

Comments before and after the root element are accepted.

## Errors

Every error is a subclass of `xmlite.errors.XmlError`:

| Error             | Raised when                                                    |
|-------------------|----------------------------------------------------------------|
| `ParseError`      | the markup is not well formed                                  |
| `ArgumentError`   | an argument is missing, empty or out of range, or a UTF-8 lead byte is invalid |
| `LengthError`     | the input ends in the middle of a character, or the parse command stack overflows |
| `SurrogateError`  | a UTF-16 surrogate is encoded or decoded                       |
| `OverlongError`   | a UTF-8 sequence uses more bytes than it needs                 |
| `DecodeError`     | a continuation byte is invalid or a scalar is above U+10FFFF   |
| `EncodeError`     | defined for encoding failures; not raised by the package itself |
| `AllocationError` | defined for storage failures; not raised by the package itself |

## Parser options

`ParserAttributes` holds these settings:

- `allocator`: defaults to a `StdAllocator`.
- `src_converter`: the converter for the source. Defaults to UTF-8.
- `dst_converter`: the converter for stored strings. Defaults to UTF-8.
- `whitespace_policy`: a `WhitespacePolicy` flag.
- `string_interning_policy`: a `StringInterningPolicy` flag.
- `comment_policy`: a `CommentPolicy` flag.

The parser keeps the three policy flags, but they do not change parsing yet.
White space is never stripped, strings are not shared, and comments are
never kept in the tree. The allocator is handed on to the `Document`, but
tree storage is not drawn from it.

## Allocators

`xmlite.alloc` provides allocators that hand out `bytearray` blocks
through `malloc`, `realloc` and `free`:

- `StdAllocator` works directly on byte arrays.
- `DebugAllocator` wraps another allocator, or its own `StdAllocator` when
  given none. It records every live block and the bytes that pass through it.

```python
from xmlite.alloc import DebugAllocator

allocator = DebugAllocator(None)
block = allocator.malloc(100)
block = allocator.realloc(block, 200)
allocator.free(block)
print(allocator.metrics())   # DebugMetrics(bytes_allocated=300, bytes_freed=300)
```

Freeing or resizing a block that the allocator did not hand out raises
`ArgumentError`.

## Lower-level pieces

- `xmlite.encoding`: `encode_utf8`, `decode_utf8`, the `EncodingConverter`
  base class and `Utf8Converter`. The decoder checks for surrogates, overlong
  forms and bad continuation bytes.
- `xmlite.chars`: the XML character classes (`is_name_start_character`,
  `is_name_character`, `is_whitespace`, `is_character` and others) on integer
  scalars.
- `xmlite.reader`:
  - `SourceReader` reads scalars from a byte source, turns CR and CR LF into
    LF, and returns NUL at the end of the input.
  - `CommandStack` is the bounded stack of `Command` steps that drives the
    parser.

## What it does not do

There is no command-line tool. The package does not write trees back out as
XML, validate against a DTD or schema, or expand entities.