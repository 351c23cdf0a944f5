#!/usr/bin/env python3

"""
Curses Renderer Plugin

Draws the visualiser in a standard Linux-style TTY Terminal, the Windows
Command Prompt, or PowerShell.

Each block takes one line, with its index to the left and the top pointer to
the right, and slot 0 at the bottom as usual.  The status panel sits to the
right of the column, the two text fields and a key reminder along the bottom,
and toasts down the right-hand edge in their style's colour.

If the terminal is too small, anything that doesn't fit is clipped rather than
raising an error.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import curses
from time import perf_counter
from .r_null import Renderer as RendererBase
from ..constants import (
    APP_NAME, FIELD_CAPACITY, FIELD_VALUE, STYLE_DEFAULT, STYLE_ERROR, STYLE_SUCCESS, STYLE_WARNING, THEME_DARK
)

BLOCK_WIDTH = 11
COLUMN_TOP = 2
STATUS_X = 34
TOAST_WIDTH = 36
HELP_TEXT = "Tab: fields  Enter: submit  p:pop k:peek c:clear r:random d:display t:theme  Esc: quit"

# Colour pair numbers
PAIR_TEXT = 1
PAIR_FILLED = 2
PAIR_GLOW = 3
PAIR_POINTER = 4

TOAST_PAIRS = {
    STYLE_DEFAULT: 5,
    STYLE_SUCCESS: 6,
    STYLE_WARNING: 7,
    STYLE_ERROR:   8
}


class Renderer(RendererBase):
    def __init__(self, scale=None, **kwargs):
        self.curses_screen = curses.initscr()
        self.theme = None

        try:
            curses.curs_set(0)
        except curses.error:
            pass  # Not every terminal can hide the cursor

        curses.noecho()
        curses.cbreak()
        self.curses_screen.keypad(True)
        self.use_colour = curses.has_colors()

        if self.use_colour:
            curses.start_color()  # Only needed if not B/W
            curses.use_default_colors()
            curses.init_pair(PAIR_FILLED, curses.COLOR_WHITE, curses.COLOR_BLUE)
            curses.init_pair(PAIR_GLOW, curses.COLOR_BLACK, curses.COLOR_YELLOW)
            curses.init_pair(PAIR_POINTER, curses.COLOR_RED, -1)
            curses.init_pair(TOAST_PAIRS[STYLE_DEFAULT], curses.COLOR_WHITE, curses.COLOR_CYAN)
            curses.init_pair(TOAST_PAIRS[STYLE_SUCCESS], curses.COLOR_BLACK, curses.COLOR_GREEN)
            curses.init_pair(TOAST_PAIRS[STYLE_WARNING], curses.COLOR_BLACK, curses.COLOR_YELLOW)
            curses.init_pair(TOAST_PAIRS[STYLE_ERROR], curses.COLOR_WHITE, curses.COLOR_RED)

        super().__init__(scale, **kwargs)

    def _set_theme(self, theme):
        # Only the plain text colours follow the theme.  Blocks and toasts look the same in both
        if theme == self.theme:
            return

        self.theme = theme

        if self.use_colour:
            if theme == THEME_DARK:
                curses.init_pair(PAIR_TEXT, curses.COLOR_WHITE, curses.COLOR_BLACK)
            else:
                curses.init_pair(PAIR_TEXT, curses.COLOR_BLACK, curses.COLOR_WHITE)

            self.curses_screen.bkgd(" ", curses.color_pair(PAIR_TEXT))

    def _attr(self, pair, fallback=curses.A_NORMAL):
        return curses.color_pair(pair) if self.use_colour else fallback

    def _put(self, y, x, text, attr=curses.A_NORMAL):
        # Clip to the terminal, since Curses raises an error for anything written off screen
        screen_height, screen_width = self.curses_screen.getmaxyx()

        if y < 0 or y >= screen_height or x >= screen_width:
            return

        text = text[:screen_width - x]

        try:
            self.curses_screen.addstr(y, x, text, attr)
        except curses.error:
            pass  # Writing the bottom-right cell moves the cursor off screen, but still draws

    def draw(self, screen):
        super().draw(screen)
        self._set_theme(screen.theme)
        self.curses_screen.erase()
        _, screen_width = self.curses_screen.getmaxyx()
        self._put(0, 0, APP_NAME.ljust(screen_width), curses.A_REVERSE)

        if screen.view is not None:
            last_row = self._draw_column(screen)
            self._draw_status(screen)
        else:
            last_row = COLUMN_TOP

        self._draw_controls(screen, last_row + 2)
        self._draw_toasts(screen, screen_width)

    def _draw_column(self, screen):
        view = screen.view
        block_x = 5

        if screen.shaking and int(perf_counter() * 20) % 2:
            block_x += 1

        for block in view.blocks:
            y = COLUMN_TOP + view.capacity - 1 - block.index
            self._put(y, 0, view.labels[block.index].rjust(3))

            if block.index in screen.glowing:
                attr = self._attr(PAIR_GLOW, curses.A_REVERSE | curses.A_BOLD)
            elif block.filled:
                attr = self._attr(PAIR_FILLED, curses.A_REVERSE)
            else:
                attr = curses.A_DIM

            self._put(y, block_x, "[{}]".format(block.text[:BLOCK_WIDTH - 2].center(BLOCK_WIDTH - 2)), attr)

        # The pointer row is one past the column when the stack is empty
        self._put(
            COLUMN_TOP + view.pointer_row, block_x + BLOCK_WIDTH + 2, "<- Top", self._attr(PAIR_POINTER, curses.A_BOLD)
        )
        return COLUMN_TOP + view.capacity

    def _draw_status(self, screen):
        view = screen.view
        lines = [
            "Capacity:  {}".format(view.capacity),
            "Top Index: {}".format(view.top_index),
            "Size:      {}".format(view.size),
            "",
            "Array ({})".format(view.size_text),
            "[{}]".format(view.array_text),
            "",
            "Last Operation:"
        ]

        for line_num, line in enumerate(lines):
            self._put(COLUMN_TOP + line_num, STATUS_X, line)

        # Wrap the last operation over as many lines as it needs
        _, screen_width = self.curses_screen.getmaxyx()
        wrap_width = max(10, screen_width - STATUS_X - 1)
        last_operation = screen.last_operation
        y = COLUMN_TOP + len(lines)

        while last_operation:
            self._put(y, STATUS_X, last_operation[:wrap_width], curses.A_DIM)
            last_operation = last_operation[wrap_width:]
            y += 1

    def _draw_controls(self, screen, y):
        x = 0

        for field, caption in ((FIELD_VALUE, "Value: "), (FIELD_CAPACITY, "Capacity: ")):
            focused = (screen.focus == field)
            self._put(y, x, caption)
            x += len(caption)
            text = "[{}{}]".format(screen.fields[field], "_" if focused else "")
            self._put(y, x, text, curses.A_REVERSE if focused else curses.A_UNDERLINE)
            x += len(text) + 3

        self._put(y + 2, 0, HELP_TEXT, curses.A_DIM)

    def _draw_toasts(self, screen, screen_width):
        x = max(0, screen_width - TOAST_WIDTH - 1)
        y = COLUMN_TOP

        for toast in screen.toasts:
            attr = self._attr(TOAST_PAIRS[toast.style], curses.A_REVERSE)

            if toast.exiting:
                attr |= curses.A_DIM

            self._put(y, x, " {} ".format(toast.title)[:TOAST_WIDTH].ljust(TOAST_WIDTH), attr | curses.A_BOLD)
            self._put(y + 1, x, " {} ".format(toast.message)[:TOAST_WIDTH].ljust(TOAST_WIDTH), attr)
            y += 3

    def refresh_display(self):
        self.curses_screen.refresh()

    def shutdown(self):
        # Put the terminal back the way it was
        self.curses_screen.keypad(False)
        curses.nocbreak()
        curses.echo()

        try:
            curses.curs_set(1)
        except curses.error:
            pass

        curses.endwin()
        super().shutdown()

    # No Superclass for these Curses-specific methods

    def get_curses_screen(self):
        return self.curses_screen
