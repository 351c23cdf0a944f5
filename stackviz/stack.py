#!/usr/bin/env python3

"""
Stack Engine

A bounded, resizable last-in-first-out container.  This is the data structure
being taught, so it is kept deliberately plain: a list, with the end of the
list being the top of the stack.

Misuse (pushing onto a full stack, popping an empty one, shrinking below one
slot) is part of what the visualiser demonstrates, so it is never raised as an
exception.  Every operation instead hands back a Result, which carries a
success flag, a message suitable for showing to the user, and a value where
the operation produces one.

Shrinking the capacity below the number of stored items keeps the oldest
items and discards the newest ones.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from collections import namedtuple
from .constants import DEFAULT_CAPACITY, MIN_CAPACITY

Result = namedtuple("Result", ["success", "message", "value"], defaults=[None])


class StackError(Exception):
    pass


class Stack:
    def __init__(self, capacity=DEFAULT_CAPACITY):
        if capacity < MIN_CAPACITY:
            raise StackError("Capacity must be at least {}".format(MIN_CAPACITY))

        self.items = []
        self._capacity = capacity

    @property
    def capacity(self):
        return self._capacity

    def push(self, value):
        if len(self.items) >= self._capacity:
            return Result(False, "Stack Overflow! Cannot push to full stack.")

        self.items.append(value)
        return Result(True, 'Pushed "{}" to stack'.format(value))

    def pop(self):
        if not self.items:
            return Result(False, "Stack Underflow! Cannot pop from empty stack.")

        value = self.items.pop()
        return Result(True, 'Popped "{}" from stack'.format(value), value)

    def peek(self):
        if not self.items:
            return Result(False, "Stack is empty! Nothing to peek.")

        value = self.items[-1]
        return Result(True, 'Top value is "{}"'.format(value), value)

    def clear(self):
        self.items = []
        return Result(True, "Stack cleared successfully")

    def resize(self, new_capacity):
        if new_capacity < MIN_CAPACITY:
            return Result(False, "Capacity must be at least {}".format(MIN_CAPACITY))

        old_capacity = self._capacity
        self._capacity = new_capacity

        if len(self.items) > new_capacity:
            # Drop from the new capacity onwards, i.e. the most recently pushed items go first
            removed = len(self.items) - new_capacity
            del self.items[new_capacity:]
            return Result(
                True, "Resized from {} to {}. Removed {} items.".format(old_capacity, new_capacity, removed), removed
            )

        return Result(True, "Resized from {} to {}".format(old_capacity, new_capacity), 0)

    def size(self):
        return len(self.items)

    def is_empty(self):
        return not self.items

    def is_full(self):
        return len(self.items) == self._capacity

    def get_top_index(self):
        return len(self.items) - 1

    def get_items(self):
        # Hand out a copy, so callers can't alter the stack behind its back
        return list(self.items)
