"""Title menu: choosing between playing and the help screen."""

from enum import Enum, auto
from pathlib import Path

import pygame

from blockfall.constants import (
    COLOR_BLUE,
    COLOR_CYAN,
    COLOR_GREEN,
    COLOR_MAGENTA,
    COLOR_RED,
    COLOR_WHITE,
    COLOR_YELLOW,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Color,
    Key,
)

DEFAULT_BACKGROUND = Path("assets") / "background.png"

TITLE = "TETRIS"
TITLE_COLORS: tuple[Color, ...] = (
    COLOR_BLUE,
    COLOR_RED,
    COLOR_GREEN,
    COLOR_MAGENTA,
    COLOR_YELLOW,
    COLOR_CYAN,
)
MENU_ITEMS = ("PLAY", "HELP")
INSTRUCTIONS = "Use UP/DOWN to select, ENTER to confirm"

_MAX_TEXT_WIDTH = SCREEN_WIDTH - 20


class MenuState(Enum):
    """Which screen the game is showing."""

    MAIN_MENU = auto()
    HELP_SCREEN = auto()
    PLAYING = auto()


def _draw_text(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    color: Color,
    x: int,
    y: int,
    align: str = "left",
    max_width: int = _MAX_TEXT_WIDTH,
) -> None:
    rendered = font.render(text, False, color)
    width = min(rendered.get_width(), max_width)
    left = x - width // 2 if align == "center" else x
    surface.blit(rendered, (left, y), pygame.Rect(0, 0, width, rendered.get_height()))


def _load_background(source: "pygame.Surface | str | Path | None") -> pygame.Surface | None:
    if source is None or isinstance(source, pygame.Surface):
        return source
    try:
        return pygame.image.load(str(source))
    except (pygame.error, FileNotFoundError, OSError):
        return None


class Menu:
    """Main menu state machine and its drawing.

    ``background`` may be an already loaded surface or the path of an image;
    an image that cannot be loaded is simply not drawn.
    """

    def __init__(self, background: "pygame.Surface | str | Path | None" = DEFAULT_BACKGROUND) -> None:
        self.background = _load_background(background)
        self.state = MenuState.MAIN_MENU
        self.selected_item = 0

    def handle_key(self, key: Key) -> MenuState:
        """React to a key press and return the state afterwards."""
        if self.state is MenuState.MAIN_MENU:
            if key in (Key.UP, Key.DOWN):
                self.selected_item = 1 if self.selected_item == 0 else 0
            elif key is Key.RETURN:
                self.state = MenuState.PLAYING if self.selected_item == 0 else MenuState.HELP_SCREEN
        elif self.state is MenuState.HELP_SCREEN:
            if key is Key.RETURN:
                self.state = MenuState.MAIN_MENU
        return self.state

    def render(
        self,
        surface: pygame.Surface,
        font_small: pygame.font.Font,
        font_large: pygame.font.Font,
    ) -> None:
        """Draw the main menu; nothing is drawn in any other state."""
        if self.state is not MenuState.MAIN_MENU:
            return

        if self.background is not None:
            scaled = pygame.transform.scale(self.background, (SCREEN_WIDTH, SCREEN_HEIGHT))
            surface.blit(scaled, (0, 0))

        letters = [
            (letter, color, min(font_large.size(letter)[0], _MAX_TEXT_WIDTH))
            for letter, color in zip(TITLE, TITLE_COLORS)
        ]
        current_x = (SCREEN_WIDTH - sum(width for _, _, width in letters)) // 2
        for letter, color, width in letters:
            _draw_text(surface, font_large, letter, color, current_x, SCREEN_HEIGHT // 4)
            current_x += width

        center_x = SCREEN_WIDTH // 2
        for index, item in enumerate(MENU_ITEMS):
            color = COLOR_RED if index == self.selected_item else COLOR_WHITE
            _draw_text(surface, font_small, item, color, center_x, SCREEN_HEIGHT // 2 + 40 * index, "center")
        _draw_text(surface, font_small, INSTRUCTIONS, COLOR_BLUE, center_x, SCREEN_HEIGHT // 2 + 100, "center")