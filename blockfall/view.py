"""Drawing of the whole game screen for each frame."""

import pygame

from blockfall.constants import (
    BLOCK_SIZE,
    COLOR_BLACK,
    COLOR_GAME_OVER_BG,
    COLOR_GRID_BORDER,
    COLOR_RED,
    COLOR_WHITE,
    COLOR_YELLOW,
    GRID_BORDER_THICKNESS,
    GRID_OFFSET_X,
    GRID_OFFSET_Y,
    GRID_PIXEL_HEIGHT,
    GRID_PIXEL_WIDTH,
    INFO_TEXT_OFFSET_X,
    INFO_TEXT_OFFSET_Y,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Color,
)
from blockfall.game import Game
from blockfall.help_screen import HelpScreen
from blockfall.menu import MenuState

_MAX_TEXT_WIDTH = SCREEN_WIDTH - 20
_PANEL_PADDING = 20
_INFO_LINE_SPACING = 40


class GameView:
    """Draws menus, the playing field, the info panel and the overlays onto a surface."""

    def __init__(
        self,
        surface: pygame.Surface,
        font_small: pygame.font.Font,
        font_large: pygame.font.Font,
        help_screen: HelpScreen | None = None,
    ) -> None:
        self.surface = surface
        self.font_small = font_small
        self.font_large = font_large
        self.help_screen = help_screen if help_screen is not None else HelpScreen(font_small)

    def render_text(
        self,
        text: str,
        color: Color,
        x: int,
        y: int,
        align: str = "left",
        max_width: int = _MAX_TEXT_WIDTH,
    ) -> pygame.Rect:
        """Draw text in the small font and return the area it occupies.

        With ``align="center"`` the text is centred on ``x``; text wider than
        ``max_width`` is cut off.
        """
        rendered = self.font_small.render(text, False, color)
        width = min(rendered.get_width(), max_width)
        left = x - width // 2 if align == "center" else x
        dest = pygame.Rect(left, y, width, rendered.get_height())
        self.surface.blit(rendered, dest.topleft, pygame.Rect(0, 0, width, rendered.get_height()))
        return dest

    def _draw_panel(self, lines: list[tuple[str, Color]]) -> pygame.Rect:
        rendered = [self.font_small.render(text, False, color) for text, color in lines]
        width = max(r.get_width() for r in rendered) + 2 * _PANEL_PADDING
        height = sum(r.get_height() for r in rendered) + _PANEL_PADDING * (len(rendered) + 1)
        frame = pygame.Rect((SCREEN_WIDTH - width) // 2, (SCREEN_HEIGHT - height) // 2, width, height)
        pygame.draw.rect(self.surface, COLOR_GAME_OVER_BG, frame)
        pygame.draw.rect(self.surface, COLOR_WHITE, frame, 1)
        y = frame.y + _PANEL_PADDING
        for line in rendered:
            self.surface.blit(line, (frame.x + (width - line.get_width()) // 2, y))
            y += line.get_height() + _PANEL_PADDING
        return frame

    def _draw_border(self) -> None:
        border = pygame.Rect(
            GRID_OFFSET_X - GRID_BORDER_THICKNESS,
            GRID_OFFSET_Y - GRID_BORDER_THICKNESS,
            GRID_PIXEL_WIDTH + 2 * GRID_BORDER_THICKNESS,
            GRID_PIXEL_HEIGHT + 2 * GRID_BORDER_THICKNESS,
        )
        for _ in range(GRID_BORDER_THICKNESS):
            pygame.draw.rect(self.surface, COLOR_GRID_BORDER, border, 1)
            border.inflate_ip(-2, -2)

    def _render_playing(self, game: Game) -> None:
        game.grid.render(self.surface)

        text_x = INFO_TEXT_OFFSET_X + 10
        base_y = INFO_TEXT_OFFSET_Y

        if game.running and not game.show_game_over:
            game.current.render(self.surface, game.piece_x, game.piece_y, True)
            game.next_piece.render(
                self.surface,
                text_x // BLOCK_SIZE,
                (base_y + 4 * _INFO_LINE_SPACING) // BLOCK_SIZE,
                False,
            )

        self._draw_border()

        self.render_text(f"Sound: {'Off' if game.muted else 'On'}", COLOR_WHITE, 10, 10)
        info = (
            f"Best: {game.high_score}",
            f"Score: {game.score}",
            f"Level: {game.level}",
            "Next:",
        )
        for index, text in enumerate(info):
            self.render_text(text, COLOR_WHITE, text_x, base_y + index * _INFO_LINE_SPACING)

        if game.paused and game.game_started and not game.show_game_over:
            self._draw_panel([("PAUSED", COLOR_YELLOW), ("Press P to Resume", COLOR_WHITE)])

        if game.expire_high_score_banner():
            self._draw_panel([("New High Score!", COLOR_WHITE)])

        if game.show_game_over and not game.show_new_high_score:
            self._draw_panel(
                [
                    ("GAME OVER", COLOR_RED),
                    ("Press R to Replay", COLOR_WHITE),
                    ("Press Enter to Return to Menu", COLOR_WHITE),
                ]
            )

    def render(self, game: Game) -> None:
        """Draw one frame for the game's current screen."""
        self.surface.fill(COLOR_BLACK)
        state = game.menu.state
        if state is MenuState.MAIN_MENU:
            game.menu.render(self.surface, self.font_small, self.font_large)
        elif state is MenuState.HELP_SCREEN:
            self.help_screen.render(self.surface)
        elif state is MenuState.PLAYING:
            self._render_playing(game)