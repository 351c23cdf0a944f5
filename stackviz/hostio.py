#!/usr/bin/env python3

"""
Host I/O Functionality

Keeps the small amount of state that survives between sessions.  At present
that is only the chosen colour theme, stored as a single key/value pair in a
JSON file in the user's home directory.

The settings are read once at startup and written back whenever a value is
changed.  A missing file simply means nothing has been saved yet.  A damaged
file is reported and then ignored, and will be replaced the next time a
setting is saved.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import json
from os import path
from .constants import THEME_DARK, THEME_KEY, THEME_LIGHT

DEFAULT_SETTINGS_FILE = path.join(path.expanduser("~"), ".stackvisualizer.json")


class SettingsError(Exception):
    pass


class Settings:
    def __init__(self, filename=None):
        self.filename = DEFAULT_SETTINGS_FILE if filename is None else filename
        self.values = {}
        self.load_warning = None

    def load(self):
        try:
            with open(self.filename, "r", encoding="utf-8") as f:
                values = json.load(f)
        except FileNotFoundError:
            values = {}
        except (OSError, ValueError) as e:
            # Not worth refusing to start over
            self.load_warning = "Ignoring unreadable settings file {}: {}".format(self.filename, e)
            values = {}

        if not isinstance(values, dict):
            self.load_warning = "Ignoring settings file {}: not a key/value mapping".format(self.filename)
            values = {}

        self.values = values

    def get(self, key, default=None):
        return self.values.get(key, default)

    def set(self, key, value):
        self.values[key] = value
        self.save()

    def save(self):
        try:
            with open(self.filename, "w", encoding="utf-8") as f:
                json.dump(self.values, f, indent=2, sort_keys=True)
        except OSError as e:
            raise SettingsError("Could not save settings to {}: {}".format(self.filename, e)) from None

    def load_theme(self):
        # Anything other than an explicit dark setting means the light theme
        return THEME_DARK if self.get(THEME_KEY) == THEME_DARK else THEME_LIGHT

    def save_theme(self, theme):
        self.set(THEME_KEY, theme)
