"""Growable strings held in an encoded form."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .encoding import UTF8, EncodingConverter


class XmlString:
    """A sequence of scalar values stored as encoded bytes.

    The length counts scalar values; the encoded size counts bytes.
    """

    __slots__ = ("_encoding", "_data", "_length", "_capacity")

    def __init__(self, encoding: EncodingConverter = UTF8) -> None:
        self._encoding = encoding
        self._data = bytearray()
        self._length = 0
        self._capacity = 0

    @classmethod
    def from_scalars(
        cls, scalars: Iterable[int], encoding: EncodingConverter = UTF8
    ) -> XmlString:
        """Build a string from scalar values."""
        string = cls(encoding)
        for scalar in scalars:
            string.append(scalar)
        return string

    @classmethod
    def from_str(cls, text: str, encoding: EncodingConverter = UTF8) -> XmlString:
        """Build a string from Python text."""
        return cls.from_scalars(map(ord, text), encoding)

    @property
    def encoding(self) -> EncodingConverter:
        """The converter used to store the characters."""
        return self._encoding

    @property
    def size(self) -> int:
        """Number of encoded bytes."""
        return len(self._data)

    @property
    def capacity(self) -> int:
        """Bytes reserved for the string, grown by doubling."""
        return self._capacity

    def append(self, character: int) -> None:
        """Encode one scalar and add it to the end.

        Errors from the encoder propagate and leave the string unchanged.
        """
        encoded = self._encoding.encode(character)
        needed = len(self._data) + len(encoded)
        if needed > self._capacity:
            capacity = self._capacity or 1
            while capacity < needed:
                capacity *= 2
            self._capacity = capacity
        self._data += encoded
        self._length += 1

    def copy(self) -> XmlString:
        """Return an independent copy sized exactly to its contents."""
        duplicate = XmlString(self._encoding)
        duplicate._data = bytearray(self._data)
        duplicate._length = self._length
        duplicate._capacity = len(self._data)
        return duplicate

    def clear(self) -> None:
        """Remove every character, keeping the reserved capacity."""
        self._data.clear()
        self._length = 0

    def encoded(self) -> bytes:
        """Return the encoded bytes."""
        return bytes(self._data)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[int]:
        view = memoryview(self._data)
        position = 0
        while position < len(view):
            scalar, used = self._encoding.decode(view[position:])
            position += used
            yield scalar

    def __str__(self) -> str:
        return "".join(map(chr, self))

    def __repr__(self) -> str:
        return f"XmlString({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, XmlString):
            return self._data == other._data
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]