#!/usr/bin/env python3

__author__ = "Gregory Maynard-Hoare"
__copyright__ = "Copyright (C) 2024 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"
__version__ = "1.0.0"

from argparse import ArgumentParser
from stackviz import main
from stackviz.constants import DEFAULT_CAPACITY, MAX_CAPACITY, MIN_CAPACITY, THEME_DARK, THEME_LIGHT


def parse_args():
    parser = ArgumentParser(description="Interactive visualiser for a fixed-capacity array-backed stack")
    parser.add_argument(
        "-c", "--capacity", type=int,
        help="set the starting capacity of the stack, from {} to {} (default {})".format(
            MIN_CAPACITY, MAX_CAPACITY, DEFAULT_CAPACITY
        )
    )
    parser.add_argument(
        "-r", "--renderer", choices=["pygame", "curses", "null"],
        help="set the rendering and input systems (pygame by default if available, otherwise curses)"
    )
    parser.add_argument(
        "-s", "--scale", type=int,
        help="set the window width in PyGame mode (default 800).  Ignored in Curses mode"
    )
    parser.add_argument(
        "-t", "--theme", choices=[THEME_LIGHT, THEME_DARK],
        help="use this colour theme for the session instead of the saved one, without saving it"
    )
    parser.add_argument(
        "--settings",
        help="read and save settings in this file instead of ~/.stackvisualizer.json"
    )
    parser.add_argument(
        "--seed", type=int,
        help="seed the random number generator used by Randomize, for repeatable sessions"
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", default=False,
        help="print the stack state after every action.  Only visible in PyGame and Null renderers"
    )
    return parser.parse_args()  # Can call sys.exit(2) if args are incorrect


def run():
    # It is possible to start the visualiser from a GUI by calling main with a dictionary
    main(vars(parse_args()))


if __name__ == "__main__":
    run()
