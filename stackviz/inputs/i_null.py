#!/usr/bin/env python3

"""
Null Input Plugin

Serves as a base class for other Input plugins.  Can be used on its own if zero
input functionality is required, or to drive a session from code (the tests do
this) by posting events directly.

Plugins turn whatever their framework delivers into two kinds of event:
    * ("key", name)     - a printable character, or one of 'enter',
                          'backspace', 'tab' or 'escape'
    * ("click", target) - the button action or field name under the mouse, as
                          reported by the renderer (None if nothing was hit)

Events are collected by process_messages() and handed over in arrival order by
get_events().
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from ..constants import EVENT_CLICK, EVENT_KEY


class InputsError(Exception):
    pass


class Inputs:
    def __init__(self, renderer):
        self.renderer = renderer
        self.events = []

    def post_event(self, kind, target):
        if kind not in (EVENT_KEY, EVENT_CLICK):
            raise InputsError("Unknown event kind '{}'".format(kind))

        self.events.append((kind, target))

    def post_key(self, key):
        self.post_event(EVENT_KEY, key)

    def post_click(self, x, y):
        # Let the renderer decide what lies under the pointer, since only it knows the layout
        self.post_event(EVENT_CLICK, self.renderer.hit_test(x, y))

    def process_messages(self):
        return False  # Don't exit the program

    def get_events(self):
        events = self.events
        self.events = []
        return events

    def shutdown(self):
        pass
