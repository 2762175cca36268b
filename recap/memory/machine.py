"""
Memory machine for the future Recap bytecode VM.

Only the storage exists so far: a machine owns a fixed-capacity buffer of
memory cells that is sized once and never grows. There are no instructions
yet.
"""

import logging
from enum import Enum
from typing import Generic, Iterator, List, Optional, TypeVar


logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_CAPACITY = 100


class MemoryCell(Enum):
    """Contents of a machine memory cell. No cell kinds are defined yet."""


class MachineError(Exception):
    """Base class for machine failures."""


class MemoryFullError(MachineError):
    pass


class MemoryEmptyError(MachineError):
    pass


class FixedBuffer(Generic[T]):
    """
    A vector with a capacity fixed at construction.

    Storage is allocated up front; pushing past capacity is an error rather
    than a reallocation.
    """

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._slots: List[Optional[T]] = [None] * capacity
        self._length = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def is_full(self) -> bool:
        return self._length == len(self._slots)

    def push(self, value: T) -> None:
        if self.is_full:
            raise MemoryFullError(f"buffer is full ({self.capacity} cells)")
        self._slots[self._length] = value
        self._length += 1

    def pop(self) -> T:
        if not self._length:
            raise MemoryEmptyError("buffer is empty")
        self._length -= 1
        value = self._slots[self._length]
        self._slots[self._length] = None
        return value

    def clear(self) -> None:
        for i in range(self._length):
            self._slots[i] = None
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index: int) -> T:
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("buffer index out of range")
        return self._slots[index]

    def __iter__(self) -> Iterator[T]:
        for i in range(self._length):
            yield self._slots[i]

    def __repr__(self) -> str:
        return f"FixedBuffer({self._length}/{self.capacity})"


class Machine:
    """A Recap machine. For now it only has memory."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        self.memory: FixedBuffer[MemoryCell] = FixedBuffer(capacity)
        logger.debug("machine created with %d memory cells", capacity)

    def __repr__(self) -> str:
        return f"Machine(memory={self.memory!r})"
