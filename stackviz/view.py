#!/usr/bin/env python3

"""
Stack View

Turns the current state of a Stack into everything that needs drawing: one
block and one index label per capacity slot, where the top-of-stack pointer
sits, and the status text.  Nothing here is cached or diffed.  A new view is
built from scratch every time the stack is re-rendered, so the picture can
never drift away from the engine.

Slot 0 is the bottom of the stack.  Renderers draw the column bottom-to-top,
so slot 0 ends up on the lowest row.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from collections import namedtuple
from .constants import BLOCK_MARGIN, BLOCK_SIZE, EMPTY_GLYPH

Block = namedtuple("Block", ["index", "text", "filled"])

StackView = namedtuple(
    "StackView", ["blocks", "labels", "pointer_row", "capacity", "top_index", "size", "size_text", "array_text"]
)


def pointer_offset(capacity, top_index, block_size=BLOCK_SIZE, block_margin=BLOCK_MARGIN):
    # Distance in pixels from the top of the column down to the pointer
    block_step = block_size + block_margin

    if top_index < 0:
        # Point just below the bottom block
        return capacity * block_step

    # Centre of the top item
    return (capacity - 1 - top_index) * block_step + block_size // 2


def pointer_row(capacity, top_index):
    # Same as the above, counted in whole rows for character-cell displays
    if top_index < 0:
        return capacity

    return capacity - 1 - top_index


def format_array(items):
    if not items:
        return ""

    return '"{}"'.format('", "'.join(str(item) for item in items))


def format_listing(items):
    return ", ".join('[{}]: "{}"'.format(index, item) for index, item in enumerate(items))


def build_view(stack):
    items = stack.get_items()
    capacity = stack.capacity
    size = len(items)
    top_index = stack.get_top_index()
    blocks = []

    for slot in range(capacity):
        if slot < size:
            blocks.append(Block(slot, str(items[slot]), True))
        else:
            blocks.append(Block(slot, EMPTY_GLYPH, False))

    return StackView(
        blocks=tuple(blocks),
        labels=tuple(str(slot) for slot in range(capacity)),
        pointer_row=pointer_row(capacity, top_index),
        capacity=capacity,
        top_index=top_index,
        size=size,
        size_text="Size: {}".format(size),
        array_text=format_array(items)
    )
