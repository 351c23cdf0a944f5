#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from stackviz.constants import APP_NAME, FIELD_VALUE, THEME_DARK
from stackviz.display import Display
from stackviz.notifications import Notifier
from stackviz.renderers.r_null import Renderer
from stackviz.scheduler import Scheduler
from stackviz.session import SessionState


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class TestDisplay(unittest.TestCase):
    def setUp(self):
        self.clock = FakeClock()
        self.scheduler = Scheduler(self.clock)
        self.notifier = Notifier(self.scheduler)
        self.renderer = Renderer()
        self.display = Display(self.renderer, self.scheduler, self.notifier)
        self.state = SessionState(4)

    def _advance(self, seconds):
        self.clock.now += seconds
        self.scheduler.run_due()

    def test_display_sets_title(self):
        self.assertEqual(APP_NAME, self.renderer.title)

    def test_display_render_rebuilds(self):
        first = self.display.render(self.state.stack)
        self.state.stack.push("A")
        self.assertIs(first, self.display.view)
        second = self.display.render(self.state.stack)
        self.assertIsNot(first, second)
        self.assertEqual(1, second.size)

    def test_display_refresh_draws_screen(self):
        self.display.render(self.state.stack)
        self.state.dark_mode = True
        self.state.last_operation = "Application initialized"
        self.state.set_field(FIELD_VALUE, "abc")
        self.state.focus = FIELD_VALUE
        self.notifier.show("Peek", "Message")
        self.display.refresh_display(self.state)
        screen = self.renderer.screen
        self.assertIs(self.display.view, screen.view)
        self.assertEqual(THEME_DARK, screen.theme)
        self.assertEqual("Application initialized", screen.last_operation)
        self.assertEqual("abc", screen.fields[FIELD_VALUE])
        self.assertEqual(FIELD_VALUE, screen.focus)
        self.assertEqual(1, len(screen.toasts))
        self.assertFalse(screen.shaking)
        self.assertEqual(frozenset(), screen.glowing)

    def test_display_screen_fields_are_copied(self):
        self.display.render(self.state.stack)
        screen = self.display.get_screen(self.state)
        self.state.set_field(FIELD_VALUE, "changed")
        self.assertEqual("", screen.fields[FIELD_VALUE])

    def test_display_shake(self):
        self.display.shake()
        self.assertTrue(self.display.get_screen(self.state).shaking)
        self._advance(0.25)
        self.assertTrue(self.display.shaking)
        self._advance(0.25)
        self.assertFalse(self.display.shaking)

    def test_display_glow(self):
        self.state.stack.push("A")
        self.state.stack.push("B")
        self.display.render(self.state.stack)
        self.assertTrue(self.display.glow(1))
        self.assertEqual(frozenset([1]), self.display.get_screen(self.state).glowing)
        self._advance(0.5)
        self.assertEqual(frozenset(), self.display.get_screen(self.state).glowing)

    def test_display_glow_out_of_range(self):
        self.assertFalse(self.display.glow(0))  # Nothing rendered yet
        self.display.render(self.state.stack)
        self.assertFalse(self.display.glow(-1))
        self.assertFalse(self.display.glow(4))
        self.assertEqual(0, self.scheduler.pending())
