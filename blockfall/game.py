"""Game state: the falling piece, scoring, levels, pausing and game over."""

import time
from collections.abc import Callable
from pathlib import Path

from blockfall.bag import TetrominoBag
from blockfall.constants import (
    GRID_WIDTH,
    HIGH_SCORE_DISPLAY_TIME,
    LINES_PER_LEVEL,
    MAX_LEVEL,
    Key,
    drop_interval,
)
from blockfall.grid import Grid
from blockfall.menu import Menu, MenuState
from blockfall.sound import Sound
from blockfall.tetromino import Tetromino

DEFAULT_HIGH_SCORE_PATH = Path("highscore.txt")


def _monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


class Game:
    """Everything the game knows between frames, driven by key presses and ticks.

    ``clock`` returns the current time in milliseconds; the sound player,
    piece bag and menu can be supplied, otherwise defaults are created.
    """

    def __init__(
        self,
        sound: Sound | None = None,
        bag: TetrominoBag | None = None,
        menu: Menu | None = None,
        clock: Callable[[], int] | None = None,
        high_score_path: str | Path = DEFAULT_HIGH_SCORE_PATH,
    ) -> None:
        self.clock = clock if clock is not None else _monotonic_ms
        self.sound = sound if sound is not None else Sound()
        self.bag = bag if bag is not None else TetrominoBag()
        self.menu = menu if menu is not None else Menu()
        self.high_score_path = Path(high_score_path)

        self.running = True
        self.paused = False
        self.muted = False
        self.game_started = False
        self.show_new_high_score = False
        self.show_game_over = False
        self.new_high_score_time = 0

        self.grid = Grid()
        self.score = 0
        self.high_score = 0
        self.level = 1
        self.lines_cleared = 0

        self.current = Tetromino()
        self.next_piece = Tetromino()
        self.piece_x = 0
        self.piece_y = 0
        self.last_drop_time = self.clock()

        self.load_high_score()
        self.next_piece = self.bag.next_tetromino()
        self._spawn()
        if not self.muted:
            self.sound.play_intro_music(self.muted)

    def load_high_score(self) -> None:
        """Read the best score from disk; a missing or unreadable file means 0."""
        try:
            text = self.high_score_path.read_text(encoding="utf-8")
        except OSError:
            self.high_score = 0
            return
        try:
            self.high_score = int(text.split()[0])
        except (IndexError, ValueError):
            self.high_score = 0

    def save_high_score(self) -> None:
        """Write the best score to disk; failures are ignored."""
        try:
            self.high_score_path.write_text(str(self.high_score), encoding="utf-8")
        except OSError:
            pass

    def _spawn(self) -> None:
        self.current = self.next_piece
        self.next_piece = self.bag.next_tetromino()
        self.piece_x = GRID_WIDTH // 2 - self.current.size // 2
        self.piece_y = 0
        self.last_drop_time = self.clock()

    def restart(self) -> None:
        """Start a fresh round on an empty grid."""
        self.running = True
        self.paused = False
        self.score = 0
        self.level = 1
        self.lines_cleared = 0
        self.piece_x = GRID_WIDTH // 2 - self.current.size // 2
        self.piece_y = 0
        self.last_drop_time = self.clock()

        self.grid = Grid()
        self.show_new_high_score = False
        self.show_game_over = False
        self.game_started = True

        self.next_piece = self.bag.next_tetromino()
        self._spawn()

        if not self.muted and self.game_started:
            self.sound.resume_background_music(self.muted)

    def _collides(self, dx: int = 0, dy: int = 0) -> bool:
        return self.grid.is_collision(self.current, self.piece_x + dx, self.piece_y + dy)

    def _end_round(self, now: int) -> None:
        if self.score > self.high_score:
            self.high_score = self.score
            self.show_new_high_score = True
            self.new_high_score_time = now
            self.sound.play_new_high_score_sound(self.muted)
            self.save_high_score()
        self.running = False

    def _toggle_mute_in_menu(self) -> None:
        self.muted = not self.muted
        if self.muted:
            self.sound.pause_background_music()
        else:
            self.sound.play_intro_music(self.muted)

    def handle_key(self, key: Key) -> None:
        """React to one key press."""
        if self.menu.state in (MenuState.MAIN_MENU, MenuState.HELP_SCREEN):
            self.menu.handle_key(key)
            if self.menu.state is MenuState.PLAYING:
                self.game_started = True
                self.running = True
                self.sound.play_start_sound(self.muted)
                if not self.muted:
                    self.sound.play_background_music(self.muted)
                self.restart()
            if key is Key.M:
                self._toggle_mute_in_menu()
            return

        if not self.game_started:
            return

        if key is Key.P and self.running:
            self.paused = not self.paused
            if self.paused:
                self.sound.pause_background_music()
            elif not self.muted:
                self.sound.resume_background_music(self.muted)
            return

        if key is Key.M:
            self.muted = not self.muted
            if self.muted:
                self.sound.pause_background_music()
            elif not self.paused:
                self.sound.resume_background_music(self.muted)
            return

        if self.paused:
            return

        if key is Key.LEFT:
            if not self._collides(dx=-1):
                self.piece_x -= 1
                self.sound.play_move_sound(self.muted)
        elif key is Key.RIGHT:
            if not self._collides(dx=1):
                self.piece_x += 1
                self.sound.play_move_sound(self.muted)
        elif key is Key.DOWN:
            if not self._collides(dy=1):
                self.piece_y += 1
                self.sound.play_move_sound(self.muted)
        elif key is Key.UP:
            self.current.rotate()
            if self._collides():
                for _ in range(3):
                    self.current.rotate()
            else:
                self.sound.play_rotate_sound(self.muted)
        elif key is Key.SPACE:
            while not self._collides(dy=1):
                self.piece_y += 1
            self.sound.play_drop_sound(self.muted)
        elif key is Key.ESCAPE:
            if self.running:
                self.grid.merge(self.current, self.piece_x, self.piece_y)
                self._end_round(self.clock())
        elif key is Key.RETURN:
            if not self.running and self.show_game_over:
                self.menu.state = MenuState.MAIN_MENU
                self.sound.play_intro_music(self.muted)
                self.restart()
        elif key is Key.R:
            if not self.running and self.show_game_over:
                self.restart()
                self.running = True
                self.sound.play_start_sound(self.muted)
                if not self.muted:
                    self.sound.play_background_music(self.muted)

    def update(self) -> None:
        """Advance the game by one tick: drop, land, clear lines, detect game over."""
        now = self.clock()
        if not self.running and not self.show_game_over and not self.show_new_high_score:
            self.show_game_over = True
            self.sound.play_game_over_sound(self.muted)
            self.sound.pause_background_music()

        if (
            not self.game_started
            or not self.running
            or self.paused
            or self.menu.state is not MenuState.PLAYING
        ):
            return

        if now - self.last_drop_time <= drop_interval(self.level):
            return

        if self._collides(dy=1):
            self.grid.merge(self.current, self.piece_x, self.piece_y)
            self.sound.play_land_sound(self.muted)
            lines = self.grid.clear_lines()
            self.score += lines * 100 * self.level
            if lines > 0:
                self.lines_cleared += lines
                self.level = min(1 + self.lines_cleared // LINES_PER_LEVEL, MAX_LEVEL)
                self.sound.play_score_sound(self.muted)
            if self.running:
                self._spawn()
                if self._collides():
                    self._end_round(now)
        else:
            self.piece_y += 1
        self.last_drop_time = now

    def expire_high_score_banner(self) -> bool:
        """Return whether the new-high-score banner is still showing.

        Once its display time has passed, the banner gives way to the
        game-over screen.
        """
        if not self.show_new_high_score:
            return False
        if self.clock() - self.new_high_score_time <= HIGH_SCORE_DISPLAY_TIME:
            return True
        self.show_new_high_score = False
        self.show_game_over = True
        self.sound.play_game_over_sound(self.muted)
        self.sound.pause_background_music()
        return False

    def is_game_over(self) -> bool:
        return self.show_game_over