"""Conversion between scalar values and their encoded bytes."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .errors import ArgumentError, DecodeError, LengthError, OverlongError, SurrogateError

_MAX_SCALAR = 0x10FFFF


def _is_surrogate(scalar: int) -> bool:
    return 0xD800 <= scalar <= 0xDFFF


def encode_utf8(scalar: int) -> bytes:
    """Encode one scalar value as UTF-8.

    Raises SurrogateError for surrogates and ArgumentError for values
    outside the Unicode range.
    """
    if scalar < 0:
        raise ArgumentError(f"negative scalar: {scalar}")
    if scalar <= 0x7F:
        return bytes((scalar,))
    if scalar <= 0x7FF:
        return bytes(((scalar >> 6) | 0xC0, (scalar & 0x3F) | 0x80))
    if scalar <= 0xFFFF:
        if _is_surrogate(scalar):
            raise SurrogateError(f"cannot encode surrogate U+{scalar:04X}")
        return bytes(
            (
                (scalar >> 12) | 0xE0,
                ((scalar >> 6) & 0x3F) | 0x80,
                (scalar & 0x3F) | 0x80,
            )
        )
    if scalar <= _MAX_SCALAR:
        return bytes(
            (
                (scalar >> 18) | 0xF0,
                ((scalar >> 12) & 0x3F) | 0x80,
                ((scalar >> 6) & 0x3F) | 0x80,
                (scalar & 0x3F) | 0x80,
            )
        )
    raise ArgumentError(f"scalar out of range: 0x{scalar:X}")


def _sequence_length(lead: int) -> int:
    if lead & 0x80 == 0:
        return 1
    if lead & 0xE0 == 0xC0:
        return 2
    if lead & 0xF0 == 0xE0:
        return 3
    if lead & 0xF8 == 0xF0:
        return 4
    raise ArgumentError(f"invalid lead byte: 0x{lead:02X}")


_LEAD_MASKS = {1: 0x7F, 2: 0x1F, 3: 0x0F, 4: 0x07}
_MINIMUMS = {1: 0x00, 2: 0x80, 3: 0x800, 4: 0x10000}


def decode_utf8(data) -> tuple[int, int]:
    """Decode the first scalar of a UTF-8 byte sequence.

    Returns the scalar and the number of bytes it used. Only the bytes of
    that first sequence are examined.
    """
    if len(data) == 0:
        raise ArgumentError("no data to decode")
    lead = data[0]
    size = _sequence_length(lead)
    if size > len(data):
        raise LengthError(f"need {size} bytes, have {len(data)}")
    scalar = lead & _LEAD_MASKS[size]
    for offset in range(1, size):
        byte = data[offset]
        if byte & 0xC0 != 0x80:
            raise DecodeError(f"invalid continuation byte: 0x{byte:02X}")
        scalar = (scalar << 6) | (byte & 0x3F)
    if scalar < _MINIMUMS[size]:
        raise OverlongError(f"overlong {size}-byte encoding of U+{scalar:04X}")
    if size == 3 and _is_surrogate(scalar):
        raise SurrogateError(f"encoded surrogate U+{scalar:04X}")
    if scalar > _MAX_SCALAR:
        raise DecodeError(f"scalar out of range: 0x{scalar:X}")
    return scalar, size


class EncodingConverter(ABC):
    """Turns scalar values into bytes and back for one encoding."""

    @abstractmethod
    def encode(self, scalar: int) -> bytes:
        """Return the encoded bytes of one scalar value."""

    @abstractmethod
    def decode(self, data) -> tuple[int, int]:
        """Return the first scalar in data and the number of bytes it used."""


class Utf8Converter(EncodingConverter):
    """UTF-8 converter."""

    def encode(self, scalar: int) -> bytes:
        return encode_utf8(scalar)

    def decode(self, data) -> tuple[int, int]:
        return decode_utf8(data)

    def __repr__(self) -> str:
        return "Utf8Converter()"


UTF8 = Utf8Converter()