"""Parse command stack and character reader used by the parser."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .chars import CR, LF, NUL
from .encoding import UTF8, EncodingConverter
from .errors import LengthError
from .xmlstring import XmlString

STACK_SIZE = 64


class CommandType(enum.Enum):
    """The kinds of work the parser schedules."""

    CHARACTER = enum.auto()
    WHITESPACE = enum.auto()
    QUOTES = enum.auto()
    NAME = enum.auto()
    TAG_OR_CONTENT = enum.auto()
    TAG_TYPE = enum.auto()
    TAG_META = enum.auto()
    ATTRIB_VALUE = enum.auto()
    CONTENT = enum.auto()
    COMMENT = enum.auto()


@dataclass
class Command:
    """One scheduled parsing step.

    character is the scalar a CHARACTER step expects, required tells a
    WHITESPACE step whether at least one space is needed, and string is the
    target a NAME, ATTRIB_VALUE or CONTENT step fills. on_parse runs after
    the step succeeds.
    """

    type: CommandType
    on_parse: Callable[[Any, Command], None] | None = None
    required: bool = False
    character: int = 0
    string: XmlString | None = None


class CommandStack:
    """Bounded last-in first-out stack of parse commands."""

    def __init__(self, capacity: int = STACK_SIZE) -> None:
        self._capacity = capacity
        self._commands: list[Command] = []

    @property
    def capacity(self) -> int:
        """Most commands the stack can hold."""
        return self._capacity

    def push(self, command: Command) -> None:
        """Put a command on top; raises LengthError when the stack is full."""
        if len(self._commands) >= self._capacity:
            raise LengthError("parse command stack overflow")
        self._commands.append(command)

    def pop(self) -> Command:
        """Remove and return the top command; raises LengthError when empty."""
        if not self._commands:
            raise LengthError("parse command stack is empty")
        return self._commands.pop()

    def __len__(self) -> int:
        return len(self._commands)


class SourceReader:
    """Reads scalar values one at a time from encoded input.

    A read does not move past the character; consume does. Carriage
    returns are reported as line feeds, and a line feed straight after a
    carriage return is skipped. At the end of input NUL is returned.
    """

    def __init__(self, data: bytes, converter: EncodingConverter = UTF8) -> None:
        self._data = memoryview(bytes(data))
        self._converter = converter
        self._position = 0
        self._advance = 0
        self._had_cr = False
        self._character = NUL

    @property
    def position(self) -> int:
        """Byte offset of the next unconsumed character."""
        return self._position

    @property
    def character(self) -> int:
        """The scalar returned by the last read."""
        return self._character

    def read(self) -> int:
        """Decode the character at the current position and return it."""
        while True:
            if self._position >= len(self._data):
                self._character = NUL
                self._advance = 0
                return NUL
            try:
                scalar, size = self._converter.decode(self._data[self._position :])
            except LengthError:
                self._character = NUL
                raise
            if scalar == CR:
                self._had_cr = True
                scalar = LF
            elif scalar == LF:
                if self._had_cr:
                    self._had_cr = False
                    self._position += size
                    self._advance = 0
                    continue
            else:
                self._had_cr = False
            self._character = scalar
            self._advance = size
            return scalar

    def consume(self) -> None:
        """Move past the character returned by the last read."""
        self._position += self._advance
        self._advance = 0

    def at_end(self) -> bool:
        """True once every byte of the input has been consumed."""
        return self._position >= len(self._data)