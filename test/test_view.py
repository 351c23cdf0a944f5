#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from stackviz.constants import EMPTY_GLYPH
from stackviz.stack import Stack
from stackviz.view import build_view, format_array, format_listing, pointer_offset, pointer_row


class TestView(unittest.TestCase):
    def setUp(self):
        self.stack = Stack(5)

    def test_view_empty(self):
        view = build_view(self.stack)
        self.assertEqual(5, len(view.blocks))
        self.assertTrue(all(not block.filled for block in view.blocks))
        self.assertTrue(all(block.text == EMPTY_GLYPH for block in view.blocks))
        self.assertEqual(("0", "1", "2", "3", "4"), view.labels)
        self.assertEqual(-1, view.top_index)
        self.assertEqual(0, view.size)
        self.assertEqual("Size: 0", view.size_text)
        self.assertEqual("", view.array_text)
        self.assertEqual(5, view.pointer_row)

    def test_view_partly_filled(self):
        self.stack.push("A")
        self.stack.push("B")
        view = build_view(self.stack)
        self.assertEqual(["A", "B", EMPTY_GLYPH, EMPTY_GLYPH, EMPTY_GLYPH], [block.text for block in view.blocks])
        self.assertEqual([True, True, False, False, False], [block.filled for block in view.blocks])
        self.assertEqual([0, 1, 2, 3, 4], [block.index for block in view.blocks])
        self.assertEqual(1, view.top_index)
        self.assertEqual(2, view.size)
        self.assertEqual(5, view.capacity)
        self.assertEqual('"A", "B"', view.array_text)
        self.assertEqual(3, view.pointer_row)

    def test_view_follows_resize(self):
        self.stack.resize(2)
        view = build_view(self.stack)
        self.assertEqual(2, len(view.blocks))
        self.assertEqual(("0", "1"), view.labels)

    def test_pointer_offset(self):
        # Empty: just below the bottom block
        self.assertEqual(5 * 52, pointer_offset(5, -1))
        # Centre of the top item, counting down from the top of the column
        self.assertEqual(4 * 52 + 24, pointer_offset(5, 0))
        self.assertEqual(2 * 52 + 24, pointer_offset(5, 2))
        self.assertEqual(24, pointer_offset(5, 4))
        self.assertEqual(2 * 12 + 5, pointer_offset(3, 0, block_size=10, block_margin=2))

    def test_pointer_row(self):
        self.assertEqual(3, pointer_row(3, -1))
        self.assertEqual(2, pointer_row(3, 0))
        self.assertEqual(0, pointer_row(3, 2))

    def test_format_array(self):
        self.assertEqual("", format_array([]))
        self.assertEqual('"X"', format_array(["X"]))
        self.assertEqual('"A", "B", "C"', format_array(["A", "B", "C"]))

    def test_format_listing(self):
        self.assertEqual('[0]: "A", [1]: "B"', format_listing(["A", "B"]))
