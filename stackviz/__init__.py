#!/usr/bin/env python3

"""
Main Startup Module

Simply call main(args) to start the visualiser, replacing args with a
dictionary of options.  This can be done via the Terminal or GUI.

All options must be supplied.  Defaults can be specified with a 'None'.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from random import Random
from .constants import APP_INTRO, APP_COPYRIGHT, DEFAULT_CAPACITY, MAX_CAPACITY, MIN_CAPACITY
from .controller import Controller
from .debugger import Debugger
from .display import Display
from .hostio import Settings
from .notifications import Notifier
from .scheduler import Scheduler
from .session import SessionState


class StartupError(Exception):
    pass


def main(args):
    print("".join((APP_INTRO, APP_COPYRIGHT)))

    capacity = DEFAULT_CAPACITY if args["capacity"] is None else args["capacity"]

    if capacity < MIN_CAPACITY or capacity > MAX_CAPACITY:
        raise StartupError("Capacity must be between {} and {}.".format(MIN_CAPACITY, MAX_CAPACITY))

    opt_renderer = args["renderer"]
    auto_select_renderer = opt_renderer is None  # If necessary, try PyGame first, then Curses.

    # flake8: noqa: F401
    if auto_select_renderer or opt_renderer == "pygame":
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import pygame
        except ImportError:
            if auto_select_renderer:
                opt_renderer = "curses"
            else:
                raise StartupError(
                    "PyGame does not appear to be installed."
                )
        else:
            opt_renderer = "pygame"
            from .inputs.i_pygame import Inputs
            from .renderers.r_pygame import Renderer

    if opt_renderer == "curses":
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import curses
        except ImportError:
            if auto_select_renderer:
                raise StartupError(
                    "Neither PyGame nor Curses (or Windows-Curses) appear to be installed."
                )

            raise StartupError(
                "Curses (or Windows-Curses) does not appear to be installed."
            )
        else:
            from .inputs.i_curses import Inputs
            from .renderers.r_curses import Renderer

    if opt_renderer == "null":
        # pylint: disable=import-outside-toplevel
        from .inputs.i_null import Inputs
        from .renderers.r_null import Renderer

    # Read the saved theme, unless one was requested for this session only
    settings = Settings(args["settings"])
    settings.load()

    if settings.load_warning:
        print(settings.load_warning)

    theme = settings.load_theme() if args["theme"] is None else args["theme"]

    # The session owns the one and only stack
    state = SessionState(capacity, theme)

    # Set up debugger and live output if necessary
    debugger = Debugger()
    debugger.set_live(args["debug"])

    # Set up the rendering system, and link inputs to it in case the renderer provides them too
    renderer = Renderer(scale=args["scale"])
    inputs = Inputs(renderer)

    scheduler = Scheduler()
    notifier = Notifier(scheduler)
    display = Display(renderer, scheduler, notifier)
    rng = Random(args["seed"])
    controller = Controller(state, display, notifier, scheduler, inputs, settings, debugger, rng)

    try:
        controller.run()
    finally:
        # The session has ended, so shut down the rendering framework.  __del__ cannot be relied upon when using PyPy
        inputs.shutdown()
        renderer.shutdown()
