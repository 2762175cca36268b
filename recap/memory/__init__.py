"""
Recap Memory System

Fixed-capacity storage for the (not yet implemented) bytecode machine.

Author: xwest
"""

from .machine import (
    Machine, MemoryCell, FixedBuffer, MachineError, MemoryFullError,
    MemoryEmptyError, DEFAULT_CAPACITY
)

__all__ = [
    'Machine', 'MemoryCell', 'FixedBuffer',
    'MachineError', 'MemoryFullError', 'MemoryEmptyError',
    'DEFAULT_CAPACITY',
]
