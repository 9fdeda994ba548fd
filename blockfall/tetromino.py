"""The seven falling pieces, their rotations and their drawing."""

from collections.abc import Iterator
from enum import IntEnum

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
    GRID_OFFSET_X,
    GRID_OFFSET_Y,
    Color,
)


class TetrominoType(IntEnum):
    """Piece kinds, in the order their colours are indexed."""

    I = 0  # noqa: E741
    J = 1
    L = 2
    O = 3  # noqa: E741
    S = 4
    T = 5
    Z = 6


_SHAPES: dict[TetrominoType, tuple[tuple[int, ...], ...]] = {
    TetrominoType.I: ((0, 0, 0, 0), (1, 1, 1, 1), (0, 0, 0, 0), (0, 0, 0, 0)),
    TetrominoType.J: ((1, 0, 0), (1, 1, 1), (0, 0, 0)),
    TetrominoType.L: ((0, 0, 1), (1, 1, 1), (0, 0, 0)),
    TetrominoType.O: ((1, 1), (1, 1)),
    TetrominoType.S: ((0, 1, 1), (1, 1, 0), (0, 0, 0)),
    TetrominoType.T: ((0, 1, 0), (1, 1, 1), (0, 0, 0)),
    TetrominoType.Z: ((1, 1, 0), (0, 1, 1), (0, 0, 0)),
}

_COLORS: dict[TetrominoType, Color] = {
    TetrominoType.I: COLOR_CYAN,
    TetrominoType.J: COLOR_BLUE,
    TetrominoType.L: COLOR_ORANGE,
    TetrominoType.O: COLOR_YELLOW,
    TetrominoType.S: COLOR_GREEN,
    TetrominoType.T: COLOR_PURPLE,
    TetrominoType.Z: COLOR_RED,
}


class Tetromino:
    """A piece of a given kind in one of four rotations."""

    def __init__(self, kind: TetrominoType = TetrominoType.I, rotation: int = 0) -> None:
        self.kind = TetrominoType(kind)
        self.rotation = rotation % 4

    def __repr__(self) -> str:
        return f"Tetromino({self.kind.name}, rotation={self.rotation})"

    @property
    def size(self) -> int:
        """Side length of the piece's square bounding box."""
        return len(_SHAPES[self.kind][0])

    @property
    def color(self) -> Color:
        return _COLORS[self.kind]

    def rotate(self) -> None:
        """Turn the piece a quarter turn clockwise."""
        self.rotation = (self.rotation + 1) % 4

    def cell(self, x: int, y: int) -> int:
        """Value of the box cell at (x, y) in the current rotation; 0 outside the box."""
        size = self.size
        if not (0 <= x < size and 0 <= y < size):
            return 0
        shape = _SHAPES[self.kind]
        if self.rotation == 0:
            return shape[y][x]
        if self.rotation == 1:
            return shape[size - x - 1][y]
        if self.rotation == 2:
            return shape[size - y - 1][size - x - 1]
        return shape[x][size - y - 1]

    def cells(self) -> Iterator[tuple[int, int, int]]:
        """Yield (x, y, value) for every occupied cell, row by row."""
        size = self.size
        for y in range(size):
            for x in range(size):
                value = self.cell(x, y)
                if value:
                    yield x, y, value

    def render(
        self,
        surface: pygame.Surface,
        offset_x: int,
        offset_y: int,
        apply_grid_offset: bool = True,
    ) -> None:
        """Draw the piece with its top-left box corner at the given block position."""
        for x, y, _ in self.cells():
            px = (offset_x + x) * BLOCK_SIZE
            py = (offset_y + y) * BLOCK_SIZE
            if apply_grid_offset:
                px += GRID_OFFSET_X
                py += GRID_OFFSET_Y
            rect = pygame.Rect(px, py, BLOCK_SIZE, BLOCK_SIZE)
            pygame.draw.rect(surface, self.color, rect)
            pygame.draw.rect(surface, COLOR_WHITE, rect, 1)