#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from stackviz.constants import FIELD_CAPACITY, FIELD_VALUE, THEME_DARK, THEME_LIGHT
from stackviz.session import SessionState


class TestSessionState(unittest.TestCase):
    def test_session_defaults(self):
        state = SessionState()
        self.assertEqual(5, state.stack.capacity)
        self.assertTrue(state.stack.is_empty())
        self.assertFalse(state.animating)
        self.assertFalse(state.dark_mode)
        self.assertEqual(THEME_LIGHT, state.theme)
        self.assertEqual("", state.value_text)
        self.assertEqual("", state.capacity_text)
        self.assertIsNone(state.focus)

    def test_session_dark_theme(self):
        state = SessionState(3, THEME_DARK)
        self.assertTrue(state.dark_mode)
        self.assertEqual(THEME_DARK, state.theme)
        self.assertEqual(3, state.stack.capacity)

    def test_session_fields(self):
        state = SessionState()
        state.set_field(FIELD_VALUE, "A")
        state.set_field(FIELD_CAPACITY, "7")
        self.assertEqual("A", state.value_text)
        self.assertEqual("7", state.capacity_text)

    def test_session_focus_cycle(self):
        state = SessionState()
        self.assertEqual(FIELD_VALUE, state.next_focus())
        state.focus = FIELD_VALUE
        self.assertEqual(FIELD_CAPACITY, state.next_focus())
        state.focus = FIELD_CAPACITY
        self.assertIsNone(state.next_focus())
