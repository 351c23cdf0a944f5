#!/usr/bin/env python3

"""
Display

Sits between the controller and whichever renderer plugin is in use, much as
a framebuffer would.  It holds the most recently built StackView, and only
replaces it when render() is called after the stack changes.  On every frame,
refresh_display() hands the renderer a Screen, which combines that view with
the short-lived presentation state: toasts, the shake and glow cues, the
last operation text, the input fields, and the theme.

Cues switch themselves off again via the Scheduler.  They only touch the
presentation state held here, never the stack.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from collections import namedtuple
from .constants import APP_NAME, GLOW_TIME, SHAKE_TIME
from .view import build_view

Screen = namedtuple(
    "Screen", ["view", "theme", "last_operation", "fields", "focus", "toasts", "shaking", "glowing"]
)


class Display:
    def __init__(self, renderer, scheduler, notifier):
        self.renderer = renderer
        self.scheduler = scheduler
        self.notifier = notifier
        self.view = None
        self.shaking = False
        self.glowing = set()
        self.renderer.set_title(APP_NAME)

    def render(self, stack):
        # Rebuild everything from the engine; no attempt is made to work out what changed
        self.view = build_view(stack)
        return self.view

    def shake(self):
        self.shaking = True
        self.scheduler.call_later(SHAKE_TIME, self._stop_shake)

    def _stop_shake(self):
        self.shaking = False

    def glow(self, index):
        # Only blocks already on screen can glow
        if self.view is None or not 0 <= index < len(self.view.blocks):
            return False

        self.glowing.add(index)
        self.scheduler.call_later(GLOW_TIME, lambda: self.glowing.discard(index))
        return True

    def get_screen(self, state):
        return Screen(
            view=self.view,
            theme=state.theme,
            last_operation=state.last_operation,
            fields=dict(state.fields),
            focus=state.focus,
            toasts=self.notifier.get_toasts(),
            shaking=self.shaking,
            glowing=frozenset(self.glowing)
        )

    def refresh_display(self, state):
        self.renderer.draw(self.get_screen(state))
        self.renderer.refresh_display()
