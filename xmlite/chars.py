"""Character classes from the XML grammar, on integer scalar values."""

from __future__ import annotations

NUL = 0x00
TAB = 0x09
LF = 0x0A
CR = 0x0D
SPACE = 0x20
EXCLAMATION = 0x21
QUOTE = 0x22
AMPERSAND = 0x26
APOSTROPHE = 0x27
HYPHEN = 0x2D
PERIOD = 0x2E
SLASH = 0x2F
COLON = 0x3A
LESS_THAN = 0x3C
EQUAL = 0x3D
GREATER_THAN = 0x3E
UNDERSCORE = 0x5F
MIDDLEDOT = 0xB7

_WHITESPACE = frozenset({TAB, LF, CR, SPACE})

_NAME_START_RANGES = (
    (0x000C0, 0x000D6),
    (0x000D8, 0x000F6),
    (0x000F8, 0x002FF),
    (0x00370, 0x0037D),
    (0x0037F, 0x01FFF),
    (0x0200C, 0x0200D),
    (0x02070, 0x0218F),
    (0x02C00, 0x02FEF),
    (0x03001, 0x0D7FF),
    (0x0F900, 0x0FDCF),
    (0x0FDF0, 0x0FFFD),
    (0x10000, 0xEFFFF),
)


def is_alpha(scalar: int) -> bool:
    """True for ASCII letters."""
    return 0x41 <= scalar <= 0x5A or 0x61 <= scalar <= 0x7A


def is_numeric(scalar: int) -> bool:
    """True for ASCII digits."""
    return 0x30 <= scalar <= 0x39


def is_alphanumeric(scalar: int) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(scalar) or is_numeric(scalar)


def is_whitespace(scalar: int) -> bool:
    """True for the four XML white-space characters."""
    return scalar in _WHITESPACE


def is_character(scalar: int) -> bool:
    """True for scalars allowed anywhere in an XML document (the Char rule)."""
    if scalar in (TAB, CR, LF):
        return True
    return (
        0x20 <= scalar <= 0xD7FF
        or 0xE000 <= scalar <= 0xFFFD
        or 0x10000 <= scalar <= 0x10FFFF
    )


def is_name_start_character(scalar: int) -> bool:
    """True for scalars that may begin an XML name."""
    if scalar in (COLON, UNDERSCORE) or is_alpha(scalar):
        return True
    return any(low <= scalar <= high for low, high in _NAME_START_RANGES)


def is_name_character(scalar: int) -> bool:
    """True for scalars that may appear after the first one in an XML name."""
    if scalar in (HYPHEN, PERIOD, MIDDLEDOT):
        return True
    return (
        is_name_start_character(scalar)
        or is_numeric(scalar)
        or 0x0300 <= scalar <= 0x036F
        or 0x203F <= scalar <= 0x2040
    )