import pytest

from xmlite.encoding import UTF8, EncodingConverter, Utf8Converter, decode_utf8, encode_utf8
from xmlite.errors import ArgumentError, DecodeError, LengthError, OverlongError, SurrogateError

SAMPLES = [0x00, 0x41, 0x7F, 0x80, 0x7FF, 0x800, 0xD7FF, 0xE000, 0xFFFF, 0x10000, 0x10FFFF]


@pytest.mark.parametrize("scalar", SAMPLES)
def test_encode_matches_standard_codec(scalar):
    assert encode_utf8(scalar) == chr(scalar).encode("utf-8")


@pytest.mark.parametrize("scalar", SAMPLES)
def test_round_trip(scalar):
    encoded = encode_utf8(scalar)
    assert decode_utf8(encoded) == (scalar, len(encoded))


def test_round_trip_dense_range():
    for scalar in range(0, 0x3000, 7):
        if 0xD800 <= scalar <= 0xDFFF:
            continue
        encoded = encode_utf8(scalar)
        assert decode_utf8(encoded + b"trailing") == (scalar, len(encoded))


def test_decode_reads_only_first_sequence():
    data = "é<x>".encode("utf-8")
    scalar, size = decode_utf8(data)
    assert chr(scalar) == "é"
    assert data[size:] == b"<x>"


def test_decode_accepts_memoryview():
    data = memoryview("a€".encode("utf-8"))
    scalar, size = decode_utf8(data[1:])
    assert chr(scalar) == "€"
    assert size == len("€".encode("utf-8"))


@pytest.mark.parametrize("scalar", [0xD800, 0xDBFF, 0xDC00, 0xDFFF])
def test_encode_surrogate_rejected(scalar):
    with pytest.raises(SurrogateError):
        encode_utf8(scalar)


@pytest.mark.parametrize("scalar", [0x110000, -1])
def test_encode_out_of_range(scalar):
    with pytest.raises(ArgumentError):
        encode_utf8(scalar)


@pytest.mark.parametrize(
    "data, error",
    [
        (b"", ArgumentError),
        (b"\x80", ArgumentError),
        (b"\xff", ArgumentError),
        (b"\xf8\x80\x80\x80\x80", ArgumentError),
        (b"\xc3", LengthError),
        (b"\xe2\x82", LengthError),
        (b"\xf0\x9f\x98", LengthError),
        (b"\xc3\x28", DecodeError),
        (b"\xe2\x28\xa1", DecodeError),
        (b"\xf0\x9f\x28\x80", DecodeError),
        (b"\xc0\x80", OverlongError),
        (b"\xc1\xbf", OverlongError),
        (b"\xe0\x80\xaf", OverlongError),
        (b"\xf0\x80\x80\xaf", OverlongError),
        (b"\xed\xa0\x80", SurrogateError),
        (b"\xed\xbf\xbf", SurrogateError),
        (b"\xf4\x90\x80\x80", DecodeError),
    ],
)
def test_decode_errors(data, error):
    with pytest.raises(error):
        decode_utf8(data)


def test_converter_delegates_to_functions():
    converter = Utf8Converter()
    for scalar in SAMPLES:
        encoded = converter.encode(scalar)
        assert encoded == encode_utf8(scalar)
        assert converter.decode(encoded) == (scalar, len(encoded))


def test_shared_instance_round_trips_text():
    text = "<a b='ü'>日本\U0001F600</a>"
    data = text.encode("utf-8")
    decoded = []
    pos = 0
    while pos < len(data):
        scalar, size = UTF8.decode(data[pos:])
        decoded.append(chr(scalar))
        pos += size
    assert "".join(decoded) == text
    assert b"".join(UTF8.encode(ord(ch)) for ch in text) == data


def test_abstract_converter_cannot_be_instantiated():
    with pytest.raises(TypeError):
        EncodingConverter()