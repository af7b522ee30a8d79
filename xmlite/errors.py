"""Exceptions raised by the XML reader, one per failure kind."""

from __future__ import annotations


class XmlError(Exception):
    """Base class for every error raised by the package."""

    code: int = 0
    default_message: str = "xml error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class ParseError(XmlError):
    """The document is not well formed."""

    code = -1
    default_message = "parse error"


class ArgumentError(XmlError):
    """A function was given an argument it cannot work with."""

    code = -2
    default_message = "invalid argument"


class LengthError(XmlError):
    """The input ended before a complete unit could be read."""

    code = -3
    default_message = "input too short"


class AllocationError(XmlError):
    """Memory for a buffer could not be obtained."""

    code = -4
    default_message = "allocation failed"


class SurrogateError(XmlError):
    """A UTF-16 surrogate code point was met where a scalar value is needed."""

    code = -5
    default_message = "surrogate code point"


class OverlongError(XmlError):
    """A scalar was encoded with more bytes than it needs."""

    code = -6
    default_message = "overlong encoding"


class DecodeError(XmlError):
    """The input bytes are not a valid encoding of a scalar value."""

    code = -7
    default_message = "invalid encoded data"


class EncodeError(XmlError):
    """A scalar value could not be encoded."""

    code = -8
    default_message = "cannot encode scalar"