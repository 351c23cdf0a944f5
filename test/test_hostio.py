#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import json
import os
import tempfile
import unittest
from stackviz.constants import THEME_DARK, THEME_KEY, THEME_LIGHT
from stackviz.hostio import Settings, SettingsError


class TestSettings(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.filename = os.path.join(self.temp_dir.name, "settings.json")

    def tearDown(self):
        self.temp_dir.cleanup()

    def _write(self, text):
        with open(self.filename, "w", encoding="utf-8") as f:
            f.write(text)

    def test_settings_file_missing(self):
        settings = Settings(self.filename)
        settings.load()
        self.assertEqual({}, settings.values)
        self.assertIsNone(settings.load_warning)
        self.assertEqual(THEME_LIGHT, settings.load_theme())

    def test_settings_save_and_reload(self):
        settings = Settings(self.filename)
        settings.load()
        settings.save_theme(THEME_DARK)

        with open(self.filename, "r", encoding="utf-8") as f:
            self.assertEqual({THEME_KEY: THEME_DARK}, json.load(f))

        reloaded = Settings(self.filename)
        reloaded.load()
        self.assertEqual(THEME_DARK, reloaded.load_theme())

    def test_settings_light_theme(self):
        self._write(json.dumps({THEME_KEY: THEME_LIGHT}))
        settings = Settings(self.filename)
        settings.load()
        self.assertEqual(THEME_LIGHT, settings.load_theme())

    def test_settings_unknown_theme(self):
        self._write(json.dumps({THEME_KEY: "purple"}))
        settings = Settings(self.filename)
        settings.load()
        self.assertEqual(THEME_LIGHT, settings.load_theme())

    def test_settings_corrupt_file(self):
        self._write("{not json")
        settings = Settings(self.filename)
        settings.load()
        self.assertEqual({}, settings.values)
        self.assertIn(self.filename, settings.load_warning)

        # The next save replaces it
        settings.save_theme(THEME_DARK)
        reloaded = Settings(self.filename)
        reloaded.load()
        self.assertEqual(THEME_DARK, reloaded.load_theme())

    def test_settings_not_a_mapping(self):
        self._write("[1, 2, 3]")
        settings = Settings(self.filename)
        settings.load()
        self.assertEqual({}, settings.values)
        self.assertIsNotNone(settings.load_warning)

    def test_settings_keeps_other_keys(self):
        self._write(json.dumps({"other": 1}))
        settings = Settings(self.filename)
        settings.load()
        settings.save_theme(THEME_LIGHT)
        reloaded = Settings(self.filename)
        reloaded.load()
        self.assertEqual({"other": 1, THEME_KEY: THEME_LIGHT}, reloaded.values)

    def test_settings_save_failure(self):
        settings = Settings(os.path.join(self.temp_dir.name, "missing_dir", "settings.json"))
        settings.load()
        self.assertRaises(SettingsError, settings.save_theme, THEME_DARK)
