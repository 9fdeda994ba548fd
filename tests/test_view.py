import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pygame
import pytest

from blockfall.bag import TetrominoBag
from blockfall.constants import (
    BLOCK_SIZE,
    COLOR_BLACK,
    COLOR_GAME_OVER_BG,
    COLOR_RED,
    COLOR_WHITE,
    COLOR_YELLOW,
    GRID_BORDER_THICKNESS,
    GRID_OFFSET_X,
    GRID_OFFSET_Y,
    HIGH_SCORE_DISPLAY_TIME,
    INFO_TEXT_OFFSET_X,
    INFO_TEXT_OFFSET_Y,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Key,
)
from blockfall.game import Game
from blockfall.menu import Menu, MenuState
from blockfall.sound import Sound
from blockfall.view import GameView


class _StubMusic:
    def load(self, path):
        pass

    def play(self, loops=0):
        pass

    def pause(self):
        pass

    def unpause(self):
        pass


class _StubMixer:
    def __init__(self):
        self.music = _StubMusic()

    def init(self, **kwargs):
        pass

    def quit(self):
        pass


def _pixel(surface, x, y):
    return tuple(surface.get_at((x, y)))


@pytest.fixture
def clock():
    return [10_000]


@pytest.fixture
def view():
    pygame.init()
    pygame.font.init()
    surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), 0, 32)
    small = pygame.font.Font(None, 24)
    large = pygame.font.Font(None, 80)
    yield GameView(surface, small, large)
    pygame.quit()


@pytest.fixture
def game(tmp_path, clock):
    return Game(
        sound=Sound(tmp_path, mixer=_StubMixer()),
        bag=TetrominoBag(random.Random(1)),
        menu=Menu(background=None),
        clock=lambda: clock[0],
        high_score_path=tmp_path / "highscore.txt",
    )


@pytest.fixture
def playing(game):
    game.menu.state = MenuState.PLAYING
    game.restart()
    return game


def test_render_text_left_aligned_starts_at_x(view):
    rect = view.render_text("Score: 0", COLOR_WHITE, 40, 60)
    assert rect.x == 40
    assert rect.y == 60
    assert rect.width > 0


def test_render_text_centered_on_x(view):
    rect = view.render_text("PLAYING FIELD", COLOR_WHITE, 200, 20, "center")
    assert abs(rect.centerx - 200) <= 1


def test_render_text_is_cut_to_max_width(view):
    rect = view.render_text("A rather long line of text", COLOR_WHITE, 0, 0, "left", 5)
    assert rect.width == 5


_PLAY_AREA = [
    (x, y)
    for x in range(SCREEN_WIDTH // 2 - 60, SCREEN_WIDTH // 2 + 60)
    for y in range(SCREEN_HEIGHT // 2, SCREEN_HEIGHT // 2 + 25)
]


def test_main_menu_highlights_play(view, game):
    assert game.menu.state == MenuState.MAIN_MENU
    view.render(game)
    colors = {_pixel(view.surface, x, y) for x, y in _PLAY_AREA}
    assert COLOR_RED in colors


def test_help_screen_does_not_highlight_play(view, game):
    game.menu.state = MenuState.HELP_SCREEN
    view.render(game)
    colors = {_pixel(view.surface, x, y) for x, y in _PLAY_AREA}
    assert COLOR_RED not in colors
    assert game.menu.state == MenuState.HELP_SCREEN


def test_playing_screen_draws_border(view, playing):
    view.render(playing)
    assert _pixel(view.surface, GRID_OFFSET_X - GRID_BORDER_THICKNESS, GRID_OFFSET_Y) == COLOR_WHITE
    assert _pixel(view.surface, GRID_OFFSET_X - 1, GRID_OFFSET_Y) == COLOR_WHITE


def test_current_piece_is_drawn_on_the_grid(view, playing):
    view.render(playing)
    piece = playing.current
    for x, y, _ in piece.cells():
        px = GRID_OFFSET_X + (playing.piece_x + x) * BLOCK_SIZE + BLOCK_SIZE // 2
        py = GRID_OFFSET_Y + (playing.piece_y + y) * BLOCK_SIZE + BLOCK_SIZE // 2
        assert _pixel(view.surface, px, py) == piece.color


def test_next_piece_is_drawn_beside_the_info(view, playing):
    view.render(playing)
    piece = playing.next_piece
    bx = (INFO_TEXT_OFFSET_X + 10) // BLOCK_SIZE
    by = (INFO_TEXT_OFFSET_Y + 160) // BLOCK_SIZE
    for x, y, _ in piece.cells():
        px = (bx + x) * BLOCK_SIZE + BLOCK_SIZE // 2
        py = (by + y) * BLOCK_SIZE + BLOCK_SIZE // 2
        assert _pixel(view.surface, px, py) == piece.color


def test_settled_blocks_are_drawn(view, playing):
    playing.grid.merge(playing.current, 0, 18)
    view.render(playing)
    drawn = [
        _pixel(
            view.surface,
            GRID_OFFSET_X + x * BLOCK_SIZE + BLOCK_SIZE // 2,
            GRID_OFFSET_Y + (18 + y) * BLOCK_SIZE + BLOCK_SIZE // 2,
        )
        for x, y, _ in playing.current.cells()
    ]
    assert drawn
    assert all(color == playing.current.color for color in drawn)


def test_pause_overlay_covers_screen_centre(view, playing):
    centre = (SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2)
    view.render(playing)
    assert _pixel(view.surface, *centre) == COLOR_BLACK

    playing.handle_key(Key.P)
    view.render(playing)
    assert _pixel(view.surface, *centre) in {COLOR_GAME_OVER_BG, COLOR_YELLOW, COLOR_WHITE}


def test_game_over_hides_piece_and_shows_panel(view, playing):
    playing.running = False
    playing.show_game_over = True
    view.render(playing)
    piece = playing.current
    for x, y, _ in piece.cells():
        px = GRID_OFFSET_X + (playing.piece_x + x) * BLOCK_SIZE + BLOCK_SIZE // 2
        py = GRID_OFFSET_Y + (playing.piece_y + y) * BLOCK_SIZE + BLOCK_SIZE // 2
        assert _pixel(view.surface, px, py) == COLOR_BLACK
    centre = _pixel(view.surface, SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2)
    assert centre in {COLOR_GAME_OVER_BG, COLOR_RED, COLOR_WHITE}


def test_high_score_banner_stays_within_display_time(view, playing, clock):
    playing.running = False
    playing.show_new_high_score = True
    playing.new_high_score_time = clock[0]
    clock[0] += HIGH_SCORE_DISPLAY_TIME
    view.render(playing)
    assert playing.show_new_high_score is True
    assert playing.show_game_over is False


def test_high_score_banner_gives_way_to_game_over(view, playing, clock):
    playing.running = False
    playing.show_new_high_score = True
    playing.new_high_score_time = clock[0]
    clock[0] += HIGH_SCORE_DISPLAY_TIME + 1
    view.render(playing)
    assert playing.show_new_high_score is False
    assert playing.is_game_over() is True