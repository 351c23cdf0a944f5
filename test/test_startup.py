#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest import mock
from stackviz import StartupError, main
from stackviz.constants import THEME_DARK, THEME_KEY


class TestStartup(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.args = {
            "capacity": None,
            "renderer": "null",
            "scale": None,
            "theme": None,
            "settings": os.path.join(self.temp_dir.name, "settings.json"),
            "seed": 1,
            "debug": False
        }

    def tearDown(self):
        self.temp_dir.cleanup()

    def _run_main(self, run):
        with mock.patch("stackviz.Controller.run", autospec=True, side_effect=run), redirect_stdout(io.StringIO()):
            main(self.args)

    def test_startup_bad_capacity(self):
        for capacity in 0, 21:
            self.args["capacity"] = capacity

            with redirect_stdout(io.StringIO()):
                self.assertRaises(StartupError, main, self.args)

    def test_startup_null_session(self):
        sessions = []

        def run(controller):
            controller.start()
            sessions.append(controller)

        self.args["capacity"] = 7
        self._run_main(run)
        controller = sessions[0]
        self.assertEqual(7, controller.state.stack.capacity)
        self.assertEqual("light", controller.state.theme)
        self.assertEqual("Application initialized", controller.state.last_operation)
        self.assertFalse(controller.debugger.is_live())

    def test_startup_saved_theme(self):
        with open(self.args["settings"], "w", encoding="utf-8") as f:
            json.dump({THEME_KEY: THEME_DARK}, f)

        sessions = []
        self._run_main(sessions.append)
        self.assertTrue(sessions[0].state.dark_mode)

    def test_startup_theme_override(self):
        sessions = []
        self.args["theme"] = THEME_DARK
        self._run_main(sessions.append)
        self.assertTrue(sessions[0].state.dark_mode)
        self.assertFalse(os.path.exists(self.args["settings"]))
