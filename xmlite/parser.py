"""Well-formedness parser building a document tree from encoded bytes."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from .alloc import Allocator, StdAllocator
from .chars import (
    AMPERSAND,
    EQUAL,
    EXCLAMATION,
    GREATER_THAN,
    HYPHEN,
    LESS_THAN,
    NUL,
    QUOTE,
    SLASH,
    is_character,
    is_name_character,
    is_name_start_character,
    is_whitespace,
)
from .encoding import UTF8, EncodingConverter
from .errors import ArgumentError, ParseError
from .node import Attribute, Node, NodeType
from .reader import Command, CommandStack, CommandType, SourceReader
from .xmlstring import XmlString


class WhitespacePolicy(enum.IntFlag):
    """Which white space in character data may be stripped."""

    STRIP_NONE = 0x0
    STRIP_LEADING = 0x1
    STRIP_TRAILING = 0x2
    STRIP_LEADING_TRAILING = 0x3
    STRIP_CONTENT = 0x4
    STRIP_ALL = 0x7


class StringInterningPolicy(enum.IntFlag):
    """Which strings may be shared between nodes."""

    NONE = 0x0
    TAG_NAMES = 0x1
    ATTRIB_NAMES = 0x2
    ATTRIB_VALUES = 0x4


class CommentPolicy(enum.IntFlag):
    """Which comments are kept in the tree."""

    PRESERVE_NONE = 0x0
    PRESERVE_LEADING = 0x1
    PRESERVE_DOCUMENT = 0x2
    PRESERVE_TRAILING = 0x4
    PRESERVE_ALL = 0x7


class XmlVersion(enum.Enum):
    """XML language version of a document."""

    V1_0 = "1.0"
    V1_1 = "1.1"


@dataclass
class ParserAttributes:
    """Settings for a Parser; missing converters and allocator get defaults."""

    allocator: Allocator | None = None
    src_converter: EncodingConverter | None = UTF8
    dst_converter: EncodingConverter | None = UTF8
    whitespace_policy: WhitespacePolicy = WhitespacePolicy.STRIP_NONE
    string_interning_policy: StringInterningPolicy = StringInterningPolicy.NONE
    comment_policy: CommentPolicy = CommentPolicy.PRESERVE_NONE


@dataclass
class Document:
    """A parsed document and the settings it was parsed with."""

    root: Node | None = None
    version: XmlVersion = XmlVersion.V1_0
    allocator: Allocator | None = None
    dst_converter: EncodingConverter = UTF8
    error: XmlString = field(default_factory=XmlString)

    def string_iterator(self, string: XmlString) -> Iterator[int]:
        """Yield the scalar values of a string from this document."""
        if string is None:
            raise ArgumentError("no string to iterate")
        return self._scalars(string.encoded())

    def _scalars(self, data: bytes) -> Iterator[int]:
        view = memoryview(data)
        position = 0
        while position < len(view):
            scalar, used = self.dst_converter.decode(view[position:])
            position += used
            yield scalar


def _store_in(target: object, attribute: str) -> Callable[[Parser, Command], None]:
    def store(parser: Parser, command: Command) -> None:
        setattr(target, attribute, command.string)

    return store


def _show(scalar: int) -> str:
    return repr(chr(scalar))


class Parser:
    """Parses documents into trees; one parser may parse many documents."""

    def __init__(self, attributes: ParserAttributes | None = None) -> None:
        if attributes is None:
            attributes = ParserAttributes()
        self.owns_allocator = attributes.allocator is None
        self.allocator: Allocator = (
            attributes.allocator if attributes.allocator is not None else StdAllocator()
        )
        self.src_converter: EncodingConverter = attributes.src_converter or UTF8
        self.dst_converter: EncodingConverter = attributes.dst_converter or UTF8
        self.whitespace_policy = attributes.whitespace_policy
        self.string_interning_policy = attributes.string_interning_policy
        self.comment_policy = attributes.comment_policy
        self._stack = CommandStack()
        self._reader = SourceReader(b"", self.src_converter)
        self._root: Node | None = None
        self._node: Node | None = None
        self._scratch = XmlString(self.dst_converter)
        self._handlers: dict[CommandType, Callable[[Command], None]] = {
            CommandType.CHARACTER: self._character,
            CommandType.WHITESPACE: self._whitespace,
            CommandType.QUOTES: self._quotes,
            CommandType.NAME: self._name,
            CommandType.TAG_OR_CONTENT: self._tag_or_content,
            CommandType.TAG_TYPE: self._tag_type,
            CommandType.TAG_META: self._tag_meta,
            CommandType.ATTRIB_VALUE: self._attrib_value,
            CommandType.CONTENT: self._content,
            CommandType.COMMENT: self._comment,
        }

    def parse(self, source: bytes | bytearray | memoryview | str) -> Document:
        """Parse a whole document and return it.

        Raises ParseError for malformed input, ArgumentError for empty
        input, and the decoder's errors for badly encoded bytes.
        """
        data = self._source_bytes(source)
        if not data:
            raise ArgumentError("empty source")
        self._reader = SourceReader(data, self.src_converter)
        self._stack = CommandStack()
        self._root = None
        self._node = None
        self._scratch.clear()
        while not self._reader.at_end():
            self._push(CommandType.TAG_OR_CONTENT)
            self._process()
        if self._node is not None:
            raise ParseError(f"unclosed tag: {self._node.name}")
        return Document(
            root=self._root,
            allocator=self.allocator,
            dst_converter=self.dst_converter,
        )

    def _source_bytes(self, source) -> bytes:
        if source is None:
            raise ArgumentError("no source given")
        if isinstance(source, str):
            return b"".join(self.src_converter.encode(ord(c)) for c in source)
        if isinstance(source, (bytes, bytearray, memoryview)):
            return bytes(source)
        raise ArgumentError(f"cannot parse a {type(source).__name__}")

    def _process(self) -> None:
        while len(self._stack):
            command = self._stack.pop()
            handler = self._handlers.get(command.type)
            if handler is None:
                raise ParseError(f"unexpected command: {command.type}")
            handler(command)
            if command.on_parse is not None:
                command.on_parse(self, command)

    def _push(self, kind: CommandType, **details) -> None:
        self._stack.push(Command(kind, **details))

    def _expect_character(self, character: int, on_parse=None) -> None:
        self._push(CommandType.CHARACTER, character=character, on_parse=on_parse)

    def _consume_whitespace(self) -> None:
        self._push(CommandType.WHITESPACE, required=False)

    def _character(self, command: Command) -> None:
        found = self._reader.read()
        if found != command.character:
            raise ParseError(
                f"expected {_show(command.character)}; got {_show(found)}"
            )
        self._reader.consume()

    def _whitespace(self, command: Command) -> None:
        occurrences = 0
        while is_whitespace(self._reader.read()):
            occurrences += 1
            self._reader.consume()
        if occurrences == 0 and command.required:
            raise ParseError(f"expected ' '; got {_show(self._reader.character)}")

    def _quotes(self, command: Command) -> None:
        if self._reader.read() != QUOTE:
            raise ParseError("expected '\"' character")

    def _name(self, command: Command) -> None:
        reader = self._reader
        self._scratch.clear()
        while is_name_character(reader.read()):
            self._scratch.append(reader.character)
            reader.consume()
        command.string = self._scratch.copy()

    def _tag_or_content(self, command: Command) -> None:
        reader = self._reader
        found = reader.read()
        if found == LESS_THAN:
            reader.consume()
            self._push(CommandType.TAG_TYPE)
            return
        if found == AMPERSAND:
            raise ParseError("unexpected '&' in document")
        if found == NUL and not reader.at_end():
            raise ParseError("unexpected NUL character in document")
        parent = self._node
        if parent is None:
            raise ParseError("unexpected content outside root tag")
        node = parent.append_child()
        node.type = NodeType.TEXT
        self._push(CommandType.CONTENT, on_parse=_store_in(node, "text"))

    def _tag_type(self, command: Command) -> None:
        reader = self._reader
        found = reader.read()
        if is_name_start_character(found):
            if self._root is None:
                node = Node()
                self._root = node
            else:
                parent = self._node
                if parent is None:
                    raise ParseError("unexpected tag outside of root element")
                node = parent.append_child()
            node.type = NodeType.EMPTY
            self._node = node
            self._push(CommandType.TAG_META)
            self._consume_whitespace()
            self._push(CommandType.NAME, on_parse=_store_in(node, "name"))
        elif found == SLASH:
            self._scratch.clear()
            reader.consume()
            self._expect_character(GREATER_THAN, on_parse=Parser._end_tag)
            self._consume_whitespace()
            self._push(CommandType.NAME)
        elif found == EXCLAMATION:
            reader.consume()
            self._push(CommandType.COMMENT)
            self._expect_character(HYPHEN)
            self._expect_character(HYPHEN)
        else:
            raise ParseError(f"expected tag: got {_show(found)}")

    def _end_tag(self, command: Command) -> None:
        node = self._node
        if node is None:
            raise ParseError(f"unexpected closing tag: </{self._scratch}>")
        if self._scratch != node.name:
            raise ParseError(
                f"expected closing tag for <{node.name}>: got </{self._scratch}>"
            )
        self._node = node.parent

    def _tag_meta(self, command: Command) -> None:
        reader = self._reader
        found = reader.read()
        if found == GREATER_THAN:
            reader.consume()
        elif found == SLASH:
            reader.consume()
            self._expect_character(GREATER_THAN)
            self._node = self._node.parent
        elif is_name_start_character(found):
            attribute = Attribute()
            self._node.attributes.append(attribute)
            self._push(CommandType.TAG_META)
            self._consume_whitespace()
            self._push(
                CommandType.ATTRIB_VALUE, on_parse=_store_in(attribute, "value")
            )
            self._push(CommandType.QUOTES)
            self._consume_whitespace()
            self._expect_character(EQUAL)
            self._consume_whitespace()
            self._push(CommandType.NAME, on_parse=_store_in(attribute, "name"))
        else:
            raise ParseError(f"expected '>' or attribute: got {_show(found)}")

    def _attrib_value(self, command: Command) -> None:
        reader = self._reader
        end = reader.character
        self._scratch.clear()
        reader.consume()
        while (found := reader.read()) != end:
            if reader.at_end():
                raise ParseError("unterminated attribute value")
            if found == LESS_THAN:
                raise ParseError("unexpected '<' inside attribute")
            if found == AMPERSAND:
                raise ParseError("unexpected '&' inside attribute")
            self._scratch.append(found)
            reader.consume()
        reader.consume()
        command.string = self._scratch.copy()

    def _content(self, command: Command) -> None:
        reader = self._reader
        self._scratch.clear()
        while (found := reader.read()) not in (NUL, LESS_THAN, AMPERSAND):
            self._scratch.append(found)
            reader.consume()
        command.string = self._scratch.copy()

    def _comment(self, command: Command) -> None:
        reader = self._reader
        had_hyphen = False
        while is_character(found := reader.read()):
            if found == HYPHEN:
                if had_hyphen:
                    reader.consume()
                    self._expect_character(GREATER_THAN)
                    return
                had_hyphen = True
            else:
                had_hyphen = False
            reader.consume()
        raise ParseError(f"unexpected character in comment: {_show(found)}")


def parse_document(source, parser: Parser | None = None) -> Document:
    """Parse source with the given parser, or with a default one."""
    if parser is None:
        parser = Parser()
    return parser.parse(source)