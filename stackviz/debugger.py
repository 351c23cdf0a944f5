#!/usr/bin/env python3

"""
Session Debugger

If enabled, this will output a line after each action handled:
    * Action - The action that was just carried out
    * Cap    - Stack capacity
    * Top    - Top index (-1 if empty)
    * Size   - Number of items held
    * Items  - Stack contents, oldest first
    * Last   - Last operation text

If verbose output is requested, the following are added on a second line:
    * Theme  - Current colour theme
    * Fields - Contents of the value and capacity fields, and which has focus
    * Busy   - Whether a mutating action is in progress
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .view import format_array


class Debugger:
    def __init__(self):
        self.live = False

    def debug(self, state, action, verbose=False):
        stack = state.stack
        debug_str = "Action: {} Cap: {} Top: {} Size: {} Items: [{}] Last: {}".format(
            action, stack.capacity, stack.get_top_index(), stack.size(), format_array(stack.get_items()),
            state.last_operation
        )

        if verbose:
            debug_str += "\nTheme: {} Fields: value={!r} capacity={!r} focus={} Busy: {}".format(
                state.theme, state.value_text, state.capacity_text, state.focus, state.animating
            )

        return debug_str

    def set_live(self, enabled):
        self.live = enabled

    def is_live(self):
        return self.live

    def output(self, state, action):
        print(self.debug(state, action))
