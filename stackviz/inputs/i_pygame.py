#!/usr/bin/env python3

"""
PyGame Input Plugin

Reads the PyGame event queue, turning key presses into key events and left
mouse clicks into click events.  Note that the check should not be called more
often than 60Hz, as constantly checking the queue is time consuming.

Printable characters are taken from the key event's Unicode text, so shifted
characters and keyboard layouts are handled by SDL rather than here.

If the window is closed, then this will control shutting PyGame down too, so
any linked Renderer must be able to handle that.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .i_null import Inputs as InputsBase
from ..constants import KEY_BACKSPACE, KEY_ENTER, KEY_ESCAPE, KEY_TAB

LEFT_MOUSE_BUTTON = 1


class Inputs(InputsBase):
    def __init__(self, renderer):
        self.special_keys = {
            pygame.K_RETURN:    KEY_ENTER,
            pygame.K_KP_ENTER:  KEY_ENTER,
            pygame.K_BACKSPACE: KEY_BACKSPACE,
            pygame.K_TAB:       KEY_TAB,
            pygame.K_ESCAPE:    KEY_ESCAPE
        }

        self.pygame_methods = {
            pygame.QUIT:            self._pygame_quit,
            pygame.KEYDOWN:         self._pygame_keydown,
            pygame.MOUSEBUTTONDOWN: self._pygame_mousedown
        }

        super().__init__(renderer)

    def process_messages(self):
        # Call PyGame method based on fast dictionary lookup of event
        quit_program = False

        for event in pygame.event.get():
            pygame_method = self.pygame_methods.get(event.type)

            if pygame_method and pygame_method(event):  # Check via short circuit that we don't have 'None'
                quit_program = True  # Process more events, even if planning to quit

        return quit_program

    def _pygame_quit(self, _):
        return True

    def _pygame_keydown(self, event):
        special_key = self.special_keys.get(event.key)

        if special_key is not None:
            self.post_key(special_key)
        elif event.unicode and event.unicode.isprintable():
            self.post_key(event.unicode)

        return False

    def _pygame_mousedown(self, event):
        if event.button == LEFT_MOUSE_BUTTON:
            self.post_click(*event.pos)

        return False
