"""Memory allocators handing out byte blocks, with an accounting variant."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .errors import ArgumentError


def _check_size(size: int) -> None:
    if size < 0:
        raise ArgumentError(f"negative block size: {size}")


class Allocator(ABC):
    """Source of resizable byte blocks."""

    @abstractmethod
    def malloc(self, size: int) -> bytearray:
        """Return a new zero-filled block of size bytes."""

    @abstractmethod
    def realloc(self, block: bytearray | None, size: int) -> bytearray:
        """Resize block to size bytes, keeping its leading contents.

        A block of None is allocated afresh.
        """

    @abstractmethod
    def free(self, block: bytearray) -> None:
        """Give a block back to the allocator."""


class StdAllocator(Allocator):
    """Allocator backed directly by Python byte arrays."""

    def malloc(self, size: int) -> bytearray:
        _check_size(size)
        return bytearray(size)

    def realloc(self, block: bytearray | None, size: int) -> bytearray:
        if block is None:
            return self.malloc(size)
        _check_size(size)
        current = len(block)
        if size < current:
            del block[size:]
        elif size > current:
            block.extend(bytes(size - current))
        return block

    def free(self, block: bytearray) -> None:
        if block is None:
            raise ArgumentError("cannot free a missing block")
        block.clear()

    def __repr__(self) -> str:
        return "StdAllocator()"


@dataclass(frozen=True)
class DebugMetrics:
    """Running byte totals recorded by a DebugAllocator."""

    bytes_allocated: int = 0
    bytes_freed: int = 0

    @property
    def outstanding(self) -> int:
        """Bytes allocated and not yet freed."""
        return self.bytes_allocated - self.bytes_freed


class DebugAllocator(Allocator):
    """Allocator that records every block and the bytes passed through it.

    It wraps another allocator; with none given it uses a StdAllocator of
    its own.
    """

    def __init__(self, allocator: Allocator | None = None) -> None:
        self._allocator = allocator if allocator is not None else StdAllocator()
        self._owning = allocator is None
        self._blocks: dict[int, tuple[bytearray, int]] = {}
        self._bytes_allocated = 0
        self._bytes_freed = 0

    @property
    def allocator(self) -> Allocator:
        """The allocator that does the real work."""
        return self._allocator

    @property
    def owning(self) -> bool:
        """True when the wrapped allocator was created by this one."""
        return self._owning

    @property
    def live_blocks(self) -> int:
        """Number of blocks handed out and not freed."""
        return len(self._blocks)

    def _lookup(self, block: bytearray) -> int:
        entry = self._blocks.get(id(block))
        if entry is None or entry[0] is not block:
            raise ArgumentError("block was not allocated by this allocator")
        return entry[1]

    def malloc(self, size: int) -> bytearray:
        block = self._allocator.malloc(size)
        self._blocks[id(block)] = (block, size)
        self._bytes_allocated += size
        return block

    def realloc(self, block: bytearray | None, size: int) -> bytearray:
        if block is None:
            return self.malloc(size)
        old_size = self._lookup(block)
        new_block = self._allocator.realloc(block, size)
        if new_block is not block:
            del self._blocks[id(block)]
        self._blocks[id(new_block)] = (new_block, size)
        self._bytes_allocated += size
        self._bytes_freed += old_size
        return new_block

    def free(self, block: bytearray) -> None:
        if block is None:
            raise ArgumentError("cannot free a missing block")
        size = self._lookup(block)
        del self._blocks[id(block)]
        self._bytes_freed += size
        self._allocator.free(block)

    def metrics(self) -> DebugMetrics:
        """Return the byte totals recorded so far."""
        return DebugMetrics(self._bytes_allocated, self._bytes_freed)

    def __repr__(self) -> str:
        return f"DebugAllocator({self._allocator!r})"