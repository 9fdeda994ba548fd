"""Screen listing the controls."""

import pygame

from blockfall.constants import (
    COLOR_BLUE,
    COLOR_WHITE,
    COLOR_YELLOW,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Color,
)

TITLE = "HELP"
FOOTER = "Press ENTER to return"

HELP_LINES: tuple[tuple[str, str], ...] = (
    ("P:", "Pause/Resume game"),
    ("M:", "Mute/Unmute sound"),
    ("Left/Right:", "Move tetromino"),
    ("Up:", "Rotate tetromino"),
    ("Down:", "Move down"),
    ("Space:", "Drop tetromino"),
    ("Esc:", "Exit game"),
    ("R:", "Replay after game over"),
)

_LINE_SPACING = 40
_MAX_TEXT_WIDTH = SCREEN_WIDTH - 20


class HelpScreen:
    """Draws the list of keys and what they do."""

    def __init__(self, font: pygame.font.Font) -> None:
        self.font = font

    def lines(self) -> list[tuple[str, str]]:
        """The (key, description) pairs shown, top to bottom."""
        return list(HELP_LINES)

    def _draw_centered(self, surface: pygame.Surface, text: str, color: Color, center_x: int, y: int) -> None:
        rendered = self.font.render(text, False, color)
        width = min(rendered.get_width(), _MAX_TEXT_WIDTH)
        surface.blit(
            rendered,
            (center_x - width // 2, y),
            pygame.Rect(0, 0, width, rendered.get_height()),
        )

    def render(self, surface: pygame.Surface) -> None:
        """Draw the title, one line per control and the return hint."""
        center_x = SCREEN_WIDTH // 2
        base_y = SCREEN_HEIGHT // 4
        self._draw_centered(surface, TITLE, COLOR_YELLOW, center_x, base_y)

        y = base_y
        for key, description in self.lines():
            y += _LINE_SPACING
            key_surface = self.font.render(key, False, COLOR_YELLOW)
            desc_surface = self.font.render(description, False, COLOR_WHITE)
            start_x = center_x - (key_surface.get_width() + desc_surface.get_width()) // 2
            surface.blit(key_surface, (start_x, y))
            surface.blit(desc_surface, (start_x + key_surface.get_width(), y))

        self._draw_centered(surface, FOOTER, COLOR_BLUE, center_x, y + _LINE_SPACING)