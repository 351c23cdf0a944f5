#!/usr/bin/env python3

"""
Null Renderer Plugin

This serves as a base class for other rendering plugins.

This module can be used on its own as a Renderer plugin if you only want to see
debug output, or to run a session headlessly.  It remembers the last Screen it
was asked to draw, so the result of a session can still be inspected.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class RendererError(Exception):
    pass


class Renderer:
    def __init__(self, scale=None, **kwargs):  # pylint: disable=unused-argument
        self.scale = scale
        self.title = None
        self.screen = None

    def draw(self, screen):
        self.screen = screen

    def refresh_display(self):
        pass

    def set_title(self, title):
        self.title = title

    def hit_test(self, x, y):  # pylint: disable=unused-argument
        return None  # Nothing is on screen to be clicked

    def shutdown(self):
        pass
