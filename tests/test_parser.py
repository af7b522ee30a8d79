import pytest

from xmlite.alloc import DebugAllocator
from xmlite.errors import ArgumentError, DecodeError, OverlongError, ParseError
from xmlite.node import NodeType
from xmlite.parser import (
    Parser,
    ParserAttributes,
    XmlVersion,
    parse_document,
)


def _child_names(node):
    return [str(child.name) for child in node.children if child.type is not NodeType.TEXT]


def test_single_empty_element():
    document = parse_document(b"<a></a>")
    assert str(document.root.name) == "a"
    assert document.root.type is NodeType.EMPTY
    assert document.root.children == []


def test_self_closing_root():
    document = parse_document(b"<root/>")
    assert str(document.root.name) == "root"
    assert document.root.type is NodeType.EMPTY


def test_nested_elements_and_text():
    root = parse_document(b"<a><b>x</b>y</a>").root
    assert root.type is NodeType.MIXED
    assert len(root.children) == 2
    b, text = root.children
    assert str(b.name) == "b"
    assert b.parent is root
    assert b.children[0].type is NodeType.TEXT
    assert str(b.children[0].text) == "x"
    assert text.type is NodeType.TEXT
    assert str(text.text) == "y"


def test_attributes_with_spacing():
    root = parse_document(b'<a x="1" y = "two"/>').root
    pairs = [(str(a.name), str(a.value)) for a in root.attributes]
    assert pairs == [("x", "1"), ("y", "two")]


def test_empty_attribute_value():
    root = parse_document(b'<a x=""></a>').root
    assert str(root.attributes[0].value) == ""
    assert len(root.attributes[0].value) == 0


def test_single_quoted_attribute_rejected():
    with pytest.raises(ParseError):
        parse_document(b"<a x='1'/>")


def test_less_than_inside_attribute_rejected():
    with pytest.raises(ParseError):
        parse_document(b'<a x="<"/>')


def test_ampersand_in_content_rejected():
    with pytest.raises(ParseError):
        parse_document(b"<a>x &amp; y</a>")


def test_unterminated_attribute_rejected():
    with pytest.raises(ParseError):
        parse_document(b'<a x="1')


def test_comments_are_skipped():
    root = parse_document(b"<a><!-- hi --><b/></a>").root
    assert _child_names(root) == ["b"]


def test_comment_before_root():
    root = parse_document(b"<!--c--><a/>").root
    assert str(root.name) == "a"


def test_unterminated_comment_rejected():
    with pytest.raises(ParseError):
        parse_document(b"<a><!-- x")


def test_mismatched_closing_tag():
    with pytest.raises(ParseError, match="expected closing tag"):
        parse_document(b"<a></b>")


def test_unclosed_tag():
    with pytest.raises(ParseError, match="unclosed tag"):
        parse_document(b"<a><b></b>")


def test_whitespace_in_closing_tag():
    root = parse_document(b"<a></a >").root
    assert str(root.name) == "a"


@pytest.mark.parametrize("source", [b"text", b"<a/>\n", b" <a/>"])
def test_content_outside_root_rejected(source):
    with pytest.raises(ParseError, match="outside root"):
        parse_document(source)


def test_second_root_rejected():
    with pytest.raises(ParseError, match="outside of root"):
        parse_document(b"<a/><b/>")


def test_processing_instruction_rejected():
    with pytest.raises(ParseError, match="expected tag"):
        parse_document(b"<a><?x?></a>")


@pytest.mark.parametrize("source", [b"", None])
def test_missing_source(source):
    with pytest.raises(ArgumentError):
        parse_document(source)


def test_text_and_bytes_sources_agree():
    from_text = parse_document('<é a="ü">ö</é>').root
    from_bytes = parse_document('<é a="ü">ö</é>'.encode("utf-8")).root
    assert str(from_text.name) == str(from_bytes.name) == "é"
    assert str(from_text.attributes[0].value) == "ü"
    assert str(from_bytes.children[0].text) == "ö"


def test_line_endings_normalised():
    root = parse_document(b"<a>x\r\ny\rz</a>").root
    assert str(root.children[0].text) == "x\ny\nz"


def test_invalid_continuation_byte():
    with pytest.raises(DecodeError):
        parse_document(b"<a>\xc3\x28</a>")


def test_overlong_encoding():
    with pytest.raises(OverlongError):
        parse_document(b"<a>\xc0\x80</a>")


def test_parser_is_reusable():
    parser = Parser()
    first = parser.parse(b"<a>1</a>")
    second = parser.parse(b"<b>2</b>")
    assert str(first.root.name) == "a"
    assert str(second.root.name) == "b"
    assert first.root is not second.root
    assert str(first.root.children[0].text) == "1"


def test_deep_nesting():
    depth = 200
    source = "".join(f"<n{i}>" for i in range(depth)) + "".join(
        f"</n{i}>" for i in reversed(range(depth))
    )
    root = parse_document(source).root
    assert sum(1 for _ in root.iter()) == depth


def test_document_defaults_and_iterator():
    document = parse_document(b"<ab/>")
    assert document.version is XmlVersion.V1_0
    assert list(document.string_iterator(document.root.name)) == [ord("a"), ord("b")]


def test_string_iterator_requires_string():
    document = parse_document(b"<a/>")
    with pytest.raises(ArgumentError):
        document.string_iterator(None)


def test_custom_allocator_is_used():
    allocator = DebugAllocator()
    parser = Parser(ParserAttributes(allocator=allocator))
    assert parser.allocator is allocator
    assert parser.owns_allocator is False
    assert parser.parse(b"<a/>").allocator is allocator


def test_default_parser_owns_allocator():
    assert Parser().owns_allocator is True


def test_tree_memory_size_grows_with_content():
    small = parse_document(b"<doc><item>a</item></doc>").root
    large = parse_document(
        b'<doc><item k="v">a</item><item k="w">bbbb</item><item>c</item></doc>'
    ).root
    assert small.tree_memory_size() > 0
    assert large.tree_memory_size() > small.tree_memory_size()


def test_whitespace_text_node_preserved():
    root = parse_document(b"<a> </a>").root
    assert [str(c.text) for c in root.children] == [" "]