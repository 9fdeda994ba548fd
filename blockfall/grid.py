"""The playing field: settled blocks, collisions and line clearing."""

import pygame

from blockfall.constants import (
    BLOCK_SIZE,
    COLOR_BLUE,
    COLOR_CYAN,
    COLOR_GREEN,
    COLOR_ORANGE,
    COLOR_PURPLE,
    COLOR_RED,
    COLOR_WHITE,
    COLOR_YELLOW,
    GRID_HEIGHT,
    GRID_OFFSET_X,
    GRID_OFFSET_Y,
    GRID_WIDTH,
)
from blockfall.tetromino import Tetromino

_PALETTE = (
    COLOR_CYAN,
    COLOR_BLUE,
    COLOR_ORANGE,
    COLOR_YELLOW,
    COLOR_GREEN,
    COLOR_PURPLE,
    COLOR_RED,
)


class Grid:
    """A GRID_WIDTH by GRID_HEIGHT field of settled cells; 0 means empty."""

    def __init__(self) -> None:
        self._rows = [[0] * GRID_WIDTH for _ in range(GRID_HEIGHT)]

    def cell(self, x: int, y: int) -> int:
        """Value at column x, row y."""
        if not (0 <= x < GRID_WIDTH and 0 <= y < GRID_HEIGHT):
            raise IndexError(f"cell ({x}, {y}) is outside the grid")
        return self._rows[y][x]

    def is_collision(self, tetromino: Tetromino, x: int, y: int) -> bool:
        """Whether the piece placed with its box at (x, y) hits a wall, the floor or a block.

        Cells above the top edge are allowed.
        """
        for tx, ty, _ in tetromino.cells():
            gx, gy = x + tx, y + ty
            if gx < 0 or gx >= GRID_WIDTH or gy >= GRID_HEIGHT:
                return True
            if gy >= 0 and self._rows[gy][gx] != 0:
                return True
        return False

    def merge(self, tetromino: Tetromino, x: int, y: int) -> None:
        """Settle the piece into the grid; cells outside the grid are dropped."""
        for tx, ty, value in tetromino.cells():
            gx, gy = x + tx, y + ty
            if 0 <= gx < GRID_WIDTH and 0 <= gy < GRID_HEIGHT:
                self._rows[gy][gx] = value

    def clear_lines(self) -> int:
        """Remove full rows, shift the rows above down, and return how many were removed."""
        kept = [row for row in self._rows if not all(row)]
        cleared = GRID_HEIGHT - len(kept)
        self._rows = [[0] * GRID_WIDTH for _ in range(cleared)] + kept
        return cleared

    def render(self, surface: pygame.Surface) -> None:
        """Draw every settled block."""
        for y, row in enumerate(self._rows):
            for x, value in enumerate(row):
                if value:
                    rect = pygame.Rect(
                        GRID_OFFSET_X + x * BLOCK_SIZE,
                        GRID_OFFSET_Y + y * BLOCK_SIZE,
                        BLOCK_SIZE,
                        BLOCK_SIZE,
                    )
                    pygame.draw.rect(surface, _PALETTE[value - 1], rect)
                    pygame.draw.rect(surface, COLOR_WHITE, rect, 1)