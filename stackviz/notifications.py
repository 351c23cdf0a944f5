#!/usr/bin/env python3

"""
Toast Notifications

Short-lived messages shown on top of the visualisation.  Each has a title, a
description, and a style (default, success, warning or error), which the
renderers turn into a colour.

A toast is fully visible for a few seconds, then spends a fraction of a second
leaving (renderers can fade or slide it out), and is then removed.  Both steps
are driven by the shared Scheduler.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import STYLE_DEFAULT, TOAST_EXIT_TIME, TOAST_STYLES, TOAST_VISIBLE_TIME


class NotificationError(Exception):
    pass


class Toast:
    def __init__(self, title, message, style):
        self.title = title
        self.message = message
        self.style = style
        self.exiting = False

    def __repr__(self):
        return "Toast({!r}, {!r}, {!r})".format(self.title, self.message, self.style)


class Notifier:
    def __init__(self, scheduler, visible_time=TOAST_VISIBLE_TIME, exit_time=TOAST_EXIT_TIME):
        self.scheduler = scheduler
        self.visible_time = visible_time
        self.exit_time = exit_time
        self.toasts = []

    def show(self, title, message, style=STYLE_DEFAULT):
        if style not in TOAST_STYLES:
            raise NotificationError("Unknown toast style '{}'".format(style))

        toast = Toast(title, message, style)
        self.toasts.append(toast)
        self.scheduler.call_later(self.visible_time, lambda: self._begin_exit(toast))
        return toast

    def _begin_exit(self, toast):
        toast.exiting = True
        self.scheduler.call_later(self.exit_time, lambda: self._remove(toast))

    def _remove(self, toast):
        if toast in self.toasts:
            self.toasts.remove(toast)

    def get_toasts(self):
        return list(self.toasts)
