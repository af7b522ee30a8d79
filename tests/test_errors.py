import pytest

from xmlite.encoding import decode_utf8, encode_utf8
from xmlite.errors import (
    AllocationError,
    ArgumentError,
    DecodeError,
    EncodeError,
    LengthError,
    OverlongError,
    ParseError,
    SurrogateError,
    XmlError,
)


def _build_all(message=None):
    if message is None:
        return [
            ParseError(),
            ArgumentError(),
            LengthError(),
            AllocationError(),
            SurrogateError(),
            OverlongError(),
            DecodeError(),
            EncodeError(),
        ]
    return [
        ParseError(message),
        ArgumentError(message),
        LengthError(message),
        AllocationError(message),
        SurrogateError(message),
        OverlongError(message),
        DecodeError(message),
        EncodeError(message),
    ]


def test_errors_carry_their_numbers_and_message():
    errors = _build_all("bad input here")
    assert [err.code for err in errors] == [-1, -2, -3, -4, -5, -6, -7, -8]
    assert all(str(err) == "bad input here" for err in errors)
    assert all(isinstance(err, XmlError) for err in errors)


def test_raised_error_is_caught_as_base():
    with pytest.raises(XmlError) as info:
        decode_utf8(b"\xc3\x28")
    assert isinstance(info.value, DecodeError)
    assert info.value.code == -7


def test_numbers_are_distinct_from_each_other_and_base():
    numbers = [err.code for err in _build_all("x")]
    assert len(set(numbers)) == len(numbers)
    assert XmlError("x").code not in numbers


def test_default_message_is_used_without_argument():
    for err in _build_all():
        assert str(err) == type(err).default_message
        assert str(err) != ""


def test_decoder_errors_carry_their_numbers():
    with pytest.raises(XmlError) as info:
        decode_utf8(b"\xc3\x28")
    assert info.value.code == -7

    with pytest.raises(XmlError) as info:
        decode_utf8(b"\xc0\x80")
    assert info.value.code == -6


def test_encoder_surrogate_error_carries_number():
    with pytest.raises(XmlError) as info:
        encode_utf8(0xD800)
    assert info.value.code == -5