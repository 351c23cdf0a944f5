#!/usr/bin/env python3

"""
Session State

Everything that belongs to one run of the visualiser, gathered in one object
so nothing has to live in module globals: the stack itself, whether a
mutating action is in progress, the theme, the last operation text, and the
two text fields along with which of them has keyboard focus.

Only the Controller should change any of this.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import DEFAULT_CAPACITY, FIELD_CAPACITY, FIELD_ORDER, FIELD_VALUE, THEME_DARK, THEME_LIGHT
from .stack import Stack


class SessionState:
    def __init__(self, capacity=DEFAULT_CAPACITY, theme=THEME_LIGHT):
        self.stack = Stack(capacity)
        self.animating = False
        self.dark_mode = (theme == THEME_DARK)
        self.last_operation = ""
        self.fields = {FIELD_VALUE: "", FIELD_CAPACITY: ""}
        self.focus = None

    @property
    def theme(self):
        return THEME_DARK if self.dark_mode else THEME_LIGHT

    @property
    def value_text(self):
        return self.fields[FIELD_VALUE]

    @property
    def capacity_text(self):
        return self.fields[FIELD_CAPACITY]

    def set_field(self, field, text):
        self.fields[field] = text

    def next_focus(self):
        # Cycles through each field in turn, then back to no focus at all
        if self.focus is None:
            return FIELD_ORDER[0]

        position = FIELD_ORDER.index(self.focus) + 1
        return FIELD_ORDER[position] if position < len(FIELD_ORDER) else None
