#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import io
import unittest
from contextlib import redirect_stdout
from stackviz.constants import FIELD_VALUE
from stackviz.debugger import Debugger
from stackviz.session import SessionState


class TestDebugger(unittest.TestCase):
    def setUp(self):
        self.debugger = Debugger()
        self.state = SessionState(4)
        self.state.stack.push("A")
        self.state.stack.push("B")
        self.state.last_operation = 'Pushed "B" to stack'

    def test_debugger_live(self):
        self.assertFalse(self.debugger.is_live())
        self.debugger.set_live(True)
        self.assertTrue(self.debugger.is_live())

    def test_debugger_debug(self):
        self.assertEqual(
            'Action: push Cap: 4 Top: 1 Size: 2 Items: ["A", "B"] Last: Pushed "B" to stack',
            self.debugger.debug(self.state, "push")
        )

    def test_debugger_debug_empty(self):
        self.assertIn("Top: -1 Size: 0 Items: []", self.debugger.debug(SessionState(), "clear"))

    def test_debugger_debug_verbose(self):
        self.state.set_field(FIELD_VALUE, "C")
        self.state.focus = FIELD_VALUE
        lines = self.debugger.debug(self.state, "push", verbose=True).split("\n")
        self.assertEqual(2, len(lines))
        self.assertEqual("Theme: light Fields: value='C' capacity='' focus=value Busy: False", lines[1])

    def test_debugger_output(self):
        output = io.StringIO()

        with redirect_stdout(output):
            self.debugger.output(self.state, "pop")

        self.assertTrue(output.getvalue().startswith("Action: pop Cap: 4"))
