#!/usr/bin/env python3

"""
Curses TTY Terminal Input Plugin

Uses a thread to trap Terminal inputs and redirects them to the visualiser.
Reading a character blocks, so doing it on the main thread would stop the
display (and any toasts or cues) from updating while waiting for a key.

Terminals have no mouse pointer here, so only key events are produced.  The
function keys Curses reports as numbers are translated into the key names
shared by every plugin, and anything unrecognised is dropped.

We will quit if CTRL+C (char 3) is detected.  ESC is passed on like any other
key, since it is also used to leave a text field.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import curses
import queue
from threading import Thread
from .i_null import Inputs as InputsBase
from ..constants import KEY_BACKSPACE, KEY_ENTER, KEY_ESCAPE, KEY_TAB

CHAR_CTRL_C = "\x03"

# Characters and Curses key codes with a name of their own
NAMED_KEYS = {
    "\n":                 KEY_ENTER,
    "\r":                 KEY_ENTER,
    "\t":                 KEY_TAB,
    "\x1b":               KEY_ESCAPE,
    "\x08":               KEY_BACKSPACE,
    "\x7f":               KEY_BACKSPACE,
    curses.KEY_ENTER:     KEY_ENTER,
    curses.KEY_BACKSPACE: KEY_BACKSPACE
}


def translate_key(key):
    named_key = NAMED_KEYS.get(key)

    if named_key is not None:
        return named_key

    if isinstance(key, str) and key.isprintable():
        return key

    return None


# For thread safety, use proper queues to exchange information, avoiding shared variables.
def input_thread(thread_quitter_queue, input_queue, curses_screen):
    while thread_quitter_queue.empty():
        # This blocks the thread from proceeding, so it won't get the quit message until at least one key is pressed.
        # However, if set as a daemon thread, it should be terminated when the main thread shuts down.
        try:
            key = curses_screen.get_wch()
        except curses.error:
            continue  # Interrupted, e.g. by a terminal resize

        if key == CHAR_CTRL_C:
            input_queue.put(None, block=True)
            break

        key_name = translate_key(key)

        if key_name is not None:
            try:
                input_queue.put(key_name, block=False)
            except queue.Full:
                pass


class Inputs(InputsBase):
    def __init__(self, renderer):
        super().__init__(renderer)

        self.thread_quitter_queue = queue.Queue(1)  # Used to inform the thread it should quit
        self.input_queue = queue.Queue(64)
        self.thread = Thread(
            target=input_thread,
            args=(
                self.thread_quitter_queue,
                self.input_queue,
                renderer.get_curses_screen()
            )
        )
        # Terminate the thread when the main program quits (even if currently waiting for a keypress)
        self.thread.daemon = True
        self.thread.start()

    def process_messages(self):
        # Move any keys pressed over to the event list
        while True:
            try:
                # Blocking here would lock up the main thread if nothing was pressed
                key_pressed = self.input_queue.get(block=False)
            except queue.Empty:
                break
            else:
                if key_pressed is None:
                    return True

                self.post_key(key_pressed)

        return False

    def shutdown(self):
        try:
            self.thread_quitter_queue.put(None, block=False)
        except queue.Full:
            # Something else has already requested the thread quits
            pass

        # Don't wait for the thread to quit (because this is likely to happen after a keypress)
        super().shutdown()
