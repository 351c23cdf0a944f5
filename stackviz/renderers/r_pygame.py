#!/usr/bin/env python3

"""
PyGame Renderer Plugin

Draws the visualiser into an SDL window via PyGame.  The window is split into
the stack column on the left (index labels, blocks and the top pointer), the
status panel on the right, and the input fields and buttons along the bottom.
Toasts are stacked in the top-right corner.

Blocks shrink to fit when the capacity is too large for the column at full
size, so the pointer is positioned with the same block-size arithmetic the
view uses, scaled to match.

Everything is redrawn on each refresh.  At 60Hz and a few dozen shapes, this is
far cheaper than tracking which parts changed.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from math import sin
from time import perf_counter
import pygame
from .r_null import RendererError, Renderer as RendererBase
from ..constants import (
    APP_NAME, BLOCK_MARGIN, BLOCK_SIZE, BUTTONS, FIELD_CAPACITY, FIELD_VALUE, STYLE_DEFAULT, STYLE_ERROR,
    STYLE_SUCCESS, STYLE_WARNING, THEME_DARK, THEME_LIGHT
)
from ..view import pointer_offset

DEFAULT_WINDOW_WIDTH = 800
MIN_WINDOW_WIDTH = 640
FONT_SIZE = 22
SMALL_FONT_SIZE = 18
BLOCK_WIDTH = 140
TOAST_WIDTH = 300
SHAKE_AMPLITUDE = 6
SHAKE_SPEED = 40.0

# Colours per theme, looked up by role
PALETTES = {
    THEME_LIGHT: {
        "background": (0xF4, 0xF5, 0xF7),
        "text":       (0x22, 0x22, 0x22),
        "muted":      (0x77, 0x77, 0x77),
        "filled":     (0x3B, 0x82, 0xF6),
        "block_text": (0xFF, 0xFF, 0xFF),
        "empty":      (0xE2, 0xE4, 0xE8),
        "outline":    (0xAA, 0xAE, 0xB5),
        "glow":       (0xF5, 0xC5, 0x18),
        "pointer":    (0xDD, 0x55, 0x55),
        "field":      (0xFF, 0xFF, 0xFF),
        "focus":      (0x3B, 0x82, 0xF6),
        "button":     (0xDD, 0xDF, 0xE4)
    },
    THEME_DARK: {
        "background": (0x1B, 0x1D, 0x22),
        "text":       (0xEE, 0xEE, 0xEE),
        "muted":      (0x99, 0x99, 0x99),
        "filled":     (0x25, 0x63, 0xEB),
        "block_text": (0xFF, 0xFF, 0xFF),
        "empty":      (0x2C, 0x2F, 0x36),
        "outline":    (0x4A, 0x4E, 0x57),
        "glow":       (0xF5, 0xC5, 0x18),
        "pointer":    (0xEE, 0x66, 0x66),
        "field":      (0x26, 0x29, 0x30),
        "focus":      (0x60, 0xA5, 0xFA),
        "button":     (0x33, 0x37, 0x40)
    }
}

TOAST_COLOURS = {
    STYLE_DEFAULT: (0x47, 0x55, 0x69),
    STYLE_SUCCESS: (0x16, 0xA3, 0x4A),
    STYLE_WARNING: (0xD9, 0x77, 0x06),
    STYLE_ERROR:   (0xDC, 0x26, 0x26)
}


class Renderer(RendererBase):
    def __init__(self, scale=None, **kwargs):
        if scale is None:
            scale = DEFAULT_WINDOW_WIDTH  # Default window width if not supplied, or set to default

        if scale < MIN_WINDOW_WIDTH:
            raise RendererError("Window width must be at least {} pixels.".format(MIN_WINDOW_WIDTH))

        pygame.display.init()
        pygame.font.init()
        self.width = scale
        self.height = scale * 3 // 4
        self.display_surface = pygame.display.set_mode((self.width, self.height))
        self.font = pygame.font.Font(None, FONT_SIZE)
        self.small_font = pygame.font.Font(None, SMALL_FONT_SIZE)
        self.column_top = 60
        self.column_bottom = self.height - 150
        self.controls = self._layout_controls()
        super().__init__(scale, **kwargs)

    def _layout_controls(self):
        # Fields and buttons never move, so their positions are worked out once
        controls = {}
        row_y = self.height - 130
        controls[FIELD_VALUE] = pygame.Rect(110, row_y, 200, 30)
        controls[FIELD_CAPACITY] = pygame.Rect(430, row_y, 80, 30)
        columns = 4
        button_width = (self.width - 40 - 10 * (columns - 1)) // columns

        for button_num, (action, _) in enumerate(BUTTONS):
            x = 20 + (button_num % columns) * (button_width + 10)
            y = row_y + 45 + (button_num // columns) * 40
            controls[action] = pygame.Rect(x, y, button_width, 32)

        return controls

    def draw(self, screen):
        super().draw(screen)
        palette = PALETTES[screen.theme]
        surface = self.display_surface
        surface.fill(palette["background"])
        self._blit_text(self.font, APP_NAME, palette["text"], (20, 20))

        if screen.view is not None:
            self._draw_column(screen, palette)
            self._draw_status(screen, palette)

        self._draw_controls(screen, palette)
        self._draw_toasts(screen)

    def _block_geometry(self, capacity):
        # Full size blocks if they fit, otherwise scale them down together with their margins
        column_height = self.column_bottom - self.column_top
        full_step = BLOCK_SIZE + BLOCK_MARGIN

        if capacity * full_step <= column_height:
            return BLOCK_SIZE, BLOCK_MARGIN

        step = column_height / capacity
        block_margin = max(1, round(step * BLOCK_MARGIN / full_step))
        return max(1, int(step) - block_margin), block_margin

    def _draw_column(self, screen, palette):
        view = screen.view
        block_size, block_margin = self._block_geometry(view.capacity)
        block_step = block_size + block_margin
        label_x = 30
        block_x = 70

        if screen.shaking:
            block_x += int(SHAKE_AMPLITUDE * sin(perf_counter() * SHAKE_SPEED))

        for block in view.blocks:
            # Slot 0 sits at the bottom of the column
            y = self.column_top + (view.capacity - 1 - block.index) * block_step
            rect = pygame.Rect(block_x, y, BLOCK_WIDTH, block_size)

            if block.filled:
                pygame.draw.rect(self.display_surface, palette["filled"], rect, border_radius=6)
                text_colour = palette["block_text"]
            else:
                pygame.draw.rect(self.display_surface, palette["empty"], rect, border_radius=6)
                pygame.draw.rect(self.display_surface, palette["outline"], rect, 1, border_radius=6)
                text_colour = palette["muted"]

            if block.index in screen.glowing:
                pygame.draw.rect(self.display_surface, palette["glow"], rect.inflate(6, 6), 3, border_radius=8)

            self._blit_text(self.font, block.text, text_colour, rect.center, centre=True)
            label_centre = (label_x, y + block_size // 2)
            self._blit_text(self.small_font, view.labels[block.index], palette["muted"], label_centre, centre=True)

        # Arrow pointing left at the top item, or just below the column when empty
        pointer_y = self.column_top + pointer_offset(view.capacity, view.top_index, block_size, block_margin)
        arrow_x = 70 + BLOCK_WIDTH + 12
        pygame.draw.polygon(
            self.display_surface, palette["pointer"],
            [(arrow_x, pointer_y), (arrow_x + 12, pointer_y - 8), (arrow_x + 12, pointer_y + 8)]
        )
        self._blit_text(self.small_font, "Top", palette["pointer"], (arrow_x + 18, pointer_y - 7))

    def _draw_status(self, screen, palette):
        view = screen.view
        x = self.width // 2 - 40
        y = self.column_top
        lines = [
            ("Capacity", str(view.capacity)),
            ("Top Index", str(view.top_index)),
            ("Size", str(view.size))
        ]

        for caption, value in lines:
            self._blit_text(self.font, "{}: {}".format(caption, value), palette["text"], (x, y))
            y += 28

        y += 10
        self._blit_text(self.font, "Array ({})".format(view.size_text), palette["text"], (x, y))
        y += 26
        y = self._blit_wrapped(self.small_font, "[{}]".format(view.array_text), palette["muted"], x, y)
        y += 16
        self._blit_text(self.font, "Last Operation", palette["text"], (x, y))
        self._blit_wrapped(self.small_font, screen.last_operation, palette["muted"], x, y + 26)

    def _draw_controls(self, screen, palette):
        for field, caption in ((FIELD_VALUE, "Value:"), (FIELD_CAPACITY, "Capacity:")):
            rect = self.controls[field]
            self._blit_text(self.font, caption, palette["text"], (rect.x - 90, rect.y + 7))
            pygame.draw.rect(self.display_surface, palette["field"], rect, border_radius=4)
            focused = (screen.focus == field)
            outline = palette["focus"] if focused else palette["outline"]
            pygame.draw.rect(self.display_surface, outline, rect, 2 if focused else 1, border_radius=4)
            text = screen.fields[field] + ("|" if focused else "")
            self._blit_text(self.font, text, palette["text"], (rect.x + 6, rect.y + 7))

        for action, caption in BUTTONS:
            rect = self.controls[action]
            pygame.draw.rect(self.display_surface, palette["button"], rect, border_radius=4)
            self._blit_text(self.font, caption, palette["text"], rect.center, centre=True)

    def _draw_toasts(self, screen):
        x = self.width - TOAST_WIDTH - 20
        y = 20

        for toast in screen.toasts:
            toast_surface = pygame.Surface((TOAST_WIDTH, 56), pygame.SRCALPHA)
            pygame.draw.rect(toast_surface, TOAST_COLOURS[toast.style], toast_surface.get_rect(), border_radius=6)
            toast_surface.blit(self.font.render(toast.title, True, (0xFF, 0xFF, 0xFF)), (10, 8))
            message = self._fit_text(self.small_font, toast.message, TOAST_WIDTH - 20)
            toast_surface.blit(self.small_font.render(message, True, (0xFF, 0xFF, 0xFF)), (10, 32))

            if toast.exiting:
                toast_surface.set_alpha(110)

            self.display_surface.blit(toast_surface, (x, y))
            y += 64

    def _blit_text(self, font, text, colour, position, centre=False):
        text_surface = font.render(text, True, colour)

        if centre:
            position = text_surface.get_rect(center=position).topleft

        self.display_surface.blit(text_surface, position)

    def _blit_wrapped(self, font, text, colour, x, y):
        # Word wrap to the right edge of the window, returning the y position after the last line
        max_width = self.width - x - 20
        line = ""

        for word in text.split(" "):
            candidate = word if not line else line + " " + word

            if line and font.size(candidate)[0] > max_width:
                self._blit_text(font, line, colour, (x, y))
                y += font.get_linesize()
                line = word
            else:
                line = candidate

        if line:
            self._blit_text(font, line, colour, (x, y))
            y += font.get_linesize()

        return y

    def _fit_text(self, font, text, max_width):
        if font.size(text)[0] <= max_width:
            return text

        while text and font.size(text + "...")[0] > max_width:
            text = text[:-1]

        return text + "..."

    def refresh_display(self):
        pygame.display.flip()

    def set_title(self, title):
        pygame.display.set_caption(title)
        super().set_title(title)

    def hit_test(self, x, y):
        for target, rect in self.controls.items():
            if rect.collidepoint(x, y):
                return target

        return None

    def shutdown(self):
        # PyGame currently segfaults if display.quit is called via __del__
        pygame.font.quit()
        pygame.display.quit()
        super().shutdown()
