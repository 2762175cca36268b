"""
Tests for the fixed-capacity machine memory.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from recap.memory import (
    Machine, MemoryCell, FixedBuffer, MachineError, MemoryFullError,
    MemoryEmptyError, DEFAULT_CAPACITY
)


class TestFixedBuffer(unittest.TestCase):

    def setUp(self):
        self.buffer = FixedBuffer(3)

    def test_starts_empty(self):
        self.assertEqual(len(self.buffer), 0)
        self.assertEqual(self.buffer.capacity, 3)
        self.assertFalse(self.buffer.is_full)

    def test_push_pop_order(self):
        for value in (1, 2, 3):
            self.buffer.push(value)
        self.assertTrue(self.buffer.is_full)
        self.assertEqual(list(self.buffer), [1, 2, 3])
        self.assertEqual(self.buffer.pop(), 3)
        self.assertEqual(self.buffer.pop(), 2)
        self.assertEqual(len(self.buffer), 1)

    def test_capacity_is_fixed(self):
        for value in range(3):
            self.buffer.push(value)
        with self.assertRaises(MemoryFullError):
            self.buffer.push(99)
        self.assertEqual(self.buffer.capacity, 3)

    def test_pop_empty(self):
        with self.assertRaises(MemoryEmptyError):
            self.buffer.pop()

    def test_errors_share_a_base(self):
        self.assertTrue(issubclass(MemoryFullError, MachineError))
        self.assertTrue(issubclass(MemoryEmptyError, MachineError))

    def test_indexing(self):
        self.buffer.push("a")
        self.buffer.push("b")
        self.assertEqual(self.buffer[0], "a")
        self.assertEqual(self.buffer[-1], "b")
        with self.assertRaises(IndexError):
            self.buffer[2]

    def test_clear(self):
        self.buffer.push(1)
        self.buffer.clear()
        self.assertEqual(len(self.buffer), 0)
        self.assertEqual(list(self.buffer), [])

    def test_zero_capacity(self):
        buffer = FixedBuffer(0)
        self.assertTrue(buffer.is_full)
        with self.assertRaises(MemoryFullError):
            buffer.push(1)

    def test_negative_capacity(self):
        with self.assertRaises(ValueError):
            FixedBuffer(-1)


class TestMachine(unittest.TestCase):

    def test_default_memory(self):
        machine = Machine()
        self.assertEqual(machine.memory.capacity, DEFAULT_CAPACITY)
        self.assertEqual(len(machine.memory), 0)

    def test_custom_capacity(self):
        self.assertEqual(Machine(7).memory.capacity, 7)

    def test_no_cell_kinds_yet(self):
        self.assertEqual(list(MemoryCell), [])


if __name__ == '__main__':
    unittest.main()
