import pygame
import pytest

from blockfall.constants import (
    BLOCK_SIZE,
    COLOR_BLACK,
    COLOR_CYAN,
    GRID_HEIGHT,
    GRID_OFFSET_X,
    GRID_OFFSET_Y,
    GRID_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from blockfall.grid import Grid
from blockfall.tetromino import Tetromino, TetrominoType


def all_cells(grid):
    return [grid.cell(x, y) for y in range(GRID_HEIGHT) for x in range(GRID_WIDTH)]


def test_new_grid_is_empty():
    assert set(all_cells(Grid())) == {0}


def test_cell_outside_grid_raises():
    grid = Grid()
    with pytest.raises(IndexError):
        grid.cell(GRID_WIDTH, 0)
    with pytest.raises(IndexError):
        grid.cell(0, -1)


def test_spawn_position_is_free():
    assert Grid().is_collision(Tetromino(TetrominoType.I), 3, 0) is False


def test_walls_and_floor_collide():
    grid = Grid()
    piece = Tetromino(TetrominoType.O)
    assert grid.is_collision(piece, -1, 0) is True
    assert grid.is_collision(piece, GRID_WIDTH - 1, 0) is True
    assert grid.is_collision(piece, 0, GRID_HEIGHT - 1) is True
    assert grid.is_collision(piece, GRID_WIDTH - piece.size, GRID_HEIGHT - piece.size) is False


def test_above_top_is_allowed():
    assert Grid().is_collision(Tetromino(TetrominoType.O), 4, -1) is False


def test_merge_sets_cells_and_blocks_further_pieces():
    grid = Grid()
    piece = Tetromino(TetrominoType.O)
    grid.merge(piece, 4, GRID_HEIGHT - 2)
    assert grid.cell(4, GRID_HEIGHT - 1) == piece.cell(0, 0)
    assert grid.cell(5, GRID_HEIGHT - 2) == piece.cell(1, 1)
    assert grid.is_collision(piece, 4, GRID_HEIGHT - 3) is True
    assert grid.is_collision(piece, 0, GRID_HEIGHT - 2) is False


def test_merge_drops_cells_outside_grid():
    grid = Grid()
    piece = Tetromino(TetrominoType.O)
    grid.merge(piece, 0, -1)
    assert grid.cell(0, 0) == piece.cell(0, 1)
    assert sum(1 for value in all_cells(grid) if value) == piece.size


def test_clear_lines_on_empty_grid():
    assert Grid().clear_lines() == 0


def test_clear_single_line_shifts_rows_down():
    grid = Grid()
    bar = Tetromino(TetrominoType.I)
    block = Tetromino(TetrominoType.O)
    bottom = GRID_HEIGHT - 1
    grid.merge(bar, 0, bottom - 1)
    grid.merge(bar, 4, bottom - 1)
    grid.merge(block, 8, bottom - 1)
    assert grid.clear_lines() == 1
    assert grid.cell(8, bottom) == block.cell(0, 0)
    assert grid.cell(9, bottom) == block.cell(1, 0)
    assert grid.cell(0, bottom) == 0
    assert grid.cell(8, bottom - 1) == 0


def test_clear_two_lines_empties_grid():
    grid = Grid()
    bar = Tetromino(TetrominoType.I)
    bottom = GRID_HEIGHT - 1
    for row in (bottom - 1, bottom):
        grid.merge(bar, 0, row - 1)
        grid.merge(bar, 4, row - 1)
    grid.merge(Tetromino(TetrominoType.O), 8, bottom - 1)
    assert grid.clear_lines() == 2
    assert set(all_cells(grid)) == {0}


def test_render_draws_settled_blocks():
    grid = Grid()
    grid.merge(Tetromino(TetrominoType.O), 0, 0)
    surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    grid.render(surface)
    centre = (GRID_OFFSET_X + BLOCK_SIZE // 2, GRID_OFFSET_Y + BLOCK_SIZE // 2)
    assert surface.get_at(centre) == COLOR_CYAN
    empty = (GRID_OFFSET_X + 5 * BLOCK_SIZE, GRID_OFFSET_Y + 5 * BLOCK_SIZE)
    assert surface.get_at(empty) == COLOR_BLACK