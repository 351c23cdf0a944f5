#!/usr/bin/env python3

"""
Session Controller

Turns user intents (button clicks, keyboard shortcuts, and text typed into the
two input fields) into calls on the stack, then reports what happened via the
last operation text and a toast, and asks the Display to re-render.

Actions which change the stack (push, pop, clear, resize and randomise) are
guarded by the session's 'animating' flag, so a second activation arriving
while one is being handled is ignored.  Peek and display-all only read the
stack, so they are not guarded.

Invalid input never reaches the stack: an empty push value or an unusable
capacity is rejected here with a warning toast.  Everything the stack itself
refuses comes back as a failed Result, and is shown as an error toast plus a
shake of the block column.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import re
from functools import wraps
from random import Random
from time import perf_counter, sleep
from .constants import (
    ACTION_CLEAR, ACTION_DISPLAY_ALL, ACTION_PEEK, ACTION_POP, ACTION_PUSH, ACTION_RANDOMIZE, ACTION_RESIZE,
    ACTION_THEME, APP_INTRO, DISPLAY_INTERVAL, EVENT_CLICK, EVENT_KEY, FIELD_CAPACITY, FIELD_ORDER, FIELD_VALUE,
    INPUT_MAX_LENGTH, KEY_BACKSPACE, KEY_ENTER, KEY_ESCAPE, KEY_TAB, MAX_CAPACITY, MIN_CAPACITY, RANDOM_SYMBOLS,
    SHORTCUTS, STYLE_DEFAULT, STYLE_ERROR, STYLE_SUCCESS, STYLE_WARNING
)
from .hostio import SettingsError
from .inputs.i_null import InputsError
from .view import format_listing

# Leading decimal integer, ignoring anything after it, as a browser's parseInt() would read it.  ASCII digits only
LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_capacity(text):
    match = LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def mutating(action):
    # Ignore the action entirely if another mutating action is still in progress
    @wraps(action)
    def guarded(self, *args, **kwargs):
        if self.state.animating:
            return None

        self.state.animating = True

        try:
            return action(self, *args, **kwargs)
        finally:
            self.state.animating = False

    return guarded


class Controller:
    def __init__(self, state, display, notifier, scheduler, inputs, settings, debugger, rng=None):
        self.state = state
        self.display = display
        self.notifier = notifier
        self.scheduler = scheduler
        self.inputs = inputs
        self.settings = settings
        self.debugger = debugger
        self.rng = Random() if rng is None else rng

        self.actions = {
            ACTION_PUSH:        self.push_value,
            ACTION_POP:         self.pop_value,
            ACTION_PEEK:        self.peek_value,
            ACTION_CLEAR:       self.clear_stack,
            ACTION_RESIZE:      self.resize_stack,
            ACTION_RANDOMIZE:   self.randomize_stack,
            ACTION_DISPLAY_ALL: self.display_all,
            ACTION_THEME:       self.toggle_theme
        }

    def start(self):
        self.render()
        self.update_last_operation("Application initialized")

    def run(self):
        self.start()
        next_display_update_time = 0

        while True:
            this_time = perf_counter()

            if this_time >= next_display_update_time:
                if self.inputs.process_messages():
                    return

                for event in self.inputs.get_events():
                    if self.handle_event(event):
                        return

                self.scheduler.run_due(this_time)
                self.display.refresh_display(self.state)
                next_display_update_time = this_time + DISPLAY_INTERVAL
            else:
                # Nothing happens between frames, so there is no reason to spin
                sleep(next_display_update_time - this_time)

    # Presentation helpers

    def render(self):
        self.display.render(self.state.stack)

    def notify(self, title, message, style=STYLE_DEFAULT):
        self.notifier.show(title, message, style)

    def update_last_operation(self, message):
        self.state.last_operation = message

    def perform(self, action):
        result = self.actions[action]()

        if self.debugger.is_live():
            self.debugger.output(self.state, action)

        return result

    # Event dispatch

    def handle_event(self, event):
        # Returns True if the program should quit
        kind, target = event

        if kind == EVENT_KEY:
            return self._handle_key(target)

        if kind == EVENT_CLICK:
            self._handle_click(target)
            return False

        raise InputsError(
            "Session halted.\n\n{}Debug info:\n{}\n\nUnknown event kind '{}'.".format(
                APP_INTRO, self.debugger.debug(self.state, "???", verbose=True), kind
            )
        )

    def _handle_key(self, key):
        state = self.state
        focus = state.focus

        if focus is None:
            if key == KEY_ESCAPE:
                return True

            if key == KEY_TAB:
                state.focus = state.next_focus()
                return False

            action = SHORTCUTS.get(key.lower()) if len(key) == 1 else None

            if action is not None:
                self.perform(action)

            return False

        if key == KEY_ESCAPE:
            state.focus = None
        elif key == KEY_TAB:
            state.focus = state.next_focus()
        elif key == KEY_ENTER:
            self.perform(ACTION_PUSH if focus == FIELD_VALUE else ACTION_RESIZE)
        elif key == KEY_BACKSPACE:
            state.set_field(focus, state.fields[focus][:-1])
        elif len(key) == 1 and key.isprintable() and len(state.fields[focus]) < INPUT_MAX_LENGTH:
            state.set_field(focus, state.fields[focus] + key)

        return False

    def _handle_click(self, target):
        if target in FIELD_ORDER:
            self.state.focus = target
            return

        # Clicking anywhere else takes focus away from the fields, as a browser would
        self.state.focus = None

        if target in self.actions:
            self.perform(target)

    # Actions

    @mutating
    def push_value(self):
        value = self.state.value_text.strip()

        if not value:
            self.notify("Invalid Input", "Please enter a value to push", STYLE_WARNING)
            return None

        result = self.state.stack.push(value)
        self.update_last_operation(result.message)

        if result.success:
            self.state.set_field(FIELD_VALUE, "")
            self.notify("Success", result.message, STYLE_SUCCESS)
            self.render()
        else:
            self.notify("Error", result.message, STYLE_ERROR)
            self.display.shake()

        return result

    @mutating
    def pop_value(self):
        result = self.state.stack.pop()
        self.update_last_operation(result.message)

        if result.success:
            self.notify("Success", result.message, STYLE_SUCCESS)
        else:
            self.notify("Error", result.message, STYLE_ERROR)
            self.display.shake()

        self.render()
        return result

    def peek_value(self):
        stack = self.state.stack
        result = stack.peek()
        self.update_last_operation(result.message)

        if result.success:
            self.notify("Peek", result.message, STYLE_DEFAULT)
            self.display.glow(stack.get_top_index())
        else:
            self.notify("Error", result.message, STYLE_ERROR)

        # The stack hasn't changed, so there is nothing to re-render
        return result

    @mutating
    def clear_stack(self):
        result = self.state.stack.clear()
        self.update_last_operation(result.message)
        self.notify("Success", result.message, STYLE_SUCCESS)
        self.render()
        return result

    @mutating
    def resize_stack(self):
        new_capacity = parse_capacity(self.state.capacity_text)

        if not new_capacity or new_capacity < MIN_CAPACITY or new_capacity > MAX_CAPACITY:
            self.notify(
                "Invalid Input", "Capacity must be between {} and {}".format(MIN_CAPACITY, MAX_CAPACITY), STYLE_WARNING
            )
            return None

        result = self.state.stack.resize(new_capacity)
        self.update_last_operation(result.message)
        self.state.set_field(FIELD_CAPACITY, "")
        self.notify("Success", result.message, STYLE_SUCCESS)
        self.render()
        return result

    @mutating
    def randomize_stack(self):
        stack = self.state.stack
        stack.clear()
        push_count = self.rng.randint(1, stack.capacity)

        for _ in range(push_count):
            stack.push(self.rng.choice(RANDOM_SYMBOLS))

        self.update_last_operation("Randomized stack with {} items".format(push_count))
        self.notify("Randomized", "Added {} random items to stack".format(push_count), STYLE_DEFAULT)
        self.render()
        return push_count

    def display_all(self):
        items = self.state.stack.get_items()

        if not items:
            self.notify("Empty Stack", "Stack is empty - nothing to display", STYLE_WARNING)
            self.update_last_operation("Display all: Stack is empty")
            return None

        items_list = format_listing(items)
        self.update_last_operation("Display all: {}".format(items_list))
        self.notify("Stack Contents", "All items: {}".format(items_list), STYLE_DEFAULT)
        return items_list

    def toggle_theme(self):
        self.state.dark_mode = not self.state.dark_mode

        try:
            self.settings.save_theme(self.state.theme)
        except SettingsError as e:
            # The new theme still applies for the rest of this session
            self.notify("Theme Not Saved", str(e), STYLE_WARNING)

        return self.state.theme
