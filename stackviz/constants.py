#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

# App identification
APP_NAME = "Stack Visualizer"
APP_VERSION = "1.0.0"
APP_COPYRIGHT = "Copyright (C) 2022 Gregory Maynard-Hoare, licensed under GNU Affero General Public License v3.0"
APP_INTRO = "{} V{} -- ".format(APP_NAME, APP_VERSION)

# Stack limits.  The engine itself only enforces the lower bound; the upper bound is a UI restriction
DEFAULT_CAPACITY = 5
MIN_CAPACITY = 1
MAX_CAPACITY = 20

# Shown in slots that do not hold a value yet
EMPTY_GLYPH = "—"

# Values picked from when randomising the stack
RANDOM_SYMBOLS = ["A", "B", "C", "X", "Y", "Z", "1", "2", "3", "★", "♦", "♠"]

# Longest text accepted by either input field
INPUT_MAX_LENGTH = 16

# Theme persistence
THEME_KEY = "stack-visualizer-theme"
THEME_DARK = "dark"
THEME_LIGHT = "light"

# Toast styles
STYLE_DEFAULT = "default"
STYLE_SUCCESS = "success"
STYLE_WARNING = "warning"
STYLE_ERROR = "error"
TOAST_STYLES = (STYLE_DEFAULT, STYLE_SUCCESS, STYLE_WARNING, STYLE_ERROR)

# Transient timings, in seconds
TOAST_VISIBLE_TIME = 3.0
TOAST_EXIT_TIME = 0.3
SHAKE_TIME = 0.5
GLOW_TIME = 0.5

# Block geometry in pixels.  Pointer offsets are measured from the top of the column
BLOCK_SIZE = 48
BLOCK_MARGIN = 4

# Main loop frequency
DISPLAY_FREQ = 60.0
DISPLAY_INTERVAL = 1.0 / DISPLAY_FREQ

# Input event kinds
EVENT_KEY = "key"
EVENT_CLICK = "click"

# Special key names.  Anything else sent as a key event is a single printable character
KEY_ENTER = "enter"
KEY_BACKSPACE = "backspace"
KEY_TAB = "tab"
KEY_ESCAPE = "escape"

# Text fields which can hold keyboard focus
FIELD_VALUE = "value"
FIELD_CAPACITY = "capacity"
FIELD_ORDER = (FIELD_VALUE, FIELD_CAPACITY)

# Actions, shared by buttons and shortcuts
ACTION_PUSH = "push"
ACTION_POP = "pop"
ACTION_PEEK = "peek"
ACTION_CLEAR = "clear"
ACTION_RESIZE = "resize"
ACTION_RANDOMIZE = "randomize"
ACTION_DISPLAY_ALL = "display_all"
ACTION_THEME = "theme"

# Button captions, in the order they are laid out
BUTTONS = [
    (ACTION_PUSH,        "Push"),
    (ACTION_POP,         "Pop"),
    (ACTION_PEEK,        "Peek"),
    (ACTION_CLEAR,       "Clear"),
    (ACTION_RESIZE,      "Resize"),
    (ACTION_RANDOMIZE,   "Randomize"),
    (ACTION_DISPLAY_ALL, "Display All"),
    (ACTION_THEME,       "Theme")
]

# Keyboard shortcuts, active only while no text field has focus.  p/k/c match the browser version, the rest stand in
# for buttons a terminal cannot click
SHORTCUTS = {
    "p": ACTION_POP,
    "k": ACTION_PEEK,
    "c": ACTION_CLEAR,
    "r": ACTION_RANDOMIZE,
    "d": ACTION_DISPLAY_ALL,
    "t": ACTION_THEME
}
