"""Window setup and the main event loop."""

import argparse
import sys
from pathlib import Path

import pygame

from blockfall.constants import SCREEN_HEIGHT, SCREEN_WIDTH, Key
from blockfall.game import DEFAULT_HIGH_SCORE_PATH, Game
from blockfall.menu import Menu
from blockfall.sound import Sound
from blockfall.view import GameView

WINDOW_TITLE = "Tetris"
FONT_FILE = "PressStart2P-Regular.ttf"
SMALL_FONT_SIZE = 24
LARGE_FONT_SIZE = 80
FRAME_DELAY_MS = 16

_KEYS = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_RETURN: Key.RETURN,
    pygame.K_p: Key.P,
    pygame.K_m: Key.M,
    pygame.K_r: Key.R,
}


def translate_key(pygame_key: int) -> Key | None:
    """Map a pygame key code to a game key, or None if the game ignores it."""
    return _KEYS.get(pygame_key)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="blockfall", description="Falling-blocks puzzle game.")
    parser.add_argument("--assets", default="assets", help="directory holding fonts, sounds and images")
    parser.add_argument(
        "--high-score-file",
        default=str(DEFAULT_HIGH_SCORE_PATH),
        help="file the best score is kept in",
    )
    return parser.parse_args(argv)


def _run(game: Game, view: GameView) -> None:
    quit_requested = False
    while not quit_requested:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_requested = True
            elif event.type == pygame.KEYDOWN:
                key = translate_key(event.key)
                if key is not None:
                    game.handle_key(key)

        if not game.is_game_over():
            game.update()

        view.render(game)
        pygame.display.flip()
        pygame.time.wait(FRAME_DELAY_MS)


def main(argv: list[str] | None = None) -> int:
    """Open the window and play until it is closed; return the exit status."""
    args = _parse_args(argv)
    assets = Path(args.assets)

    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        except pygame.error as exc:
            print(f"cannot open window: {exc}", file=sys.stderr)
            return 1
        pygame.display.set_caption(WINDOW_TITLE)

        font_path = assets / "fonts" / FONT_FILE
        try:
            font_small = pygame.font.Font(str(font_path), SMALL_FONT_SIZE)
            font_large = pygame.font.Font(str(font_path), LARGE_FONT_SIZE)
        except (OSError, pygame.error) as exc:
            print(f"cannot open font {font_path}: {exc}", file=sys.stderr)
            return 1

        with Sound(assets / "mix") as sound:
            game = Game(
                sound=sound,
                menu=Menu(assets / "background.png"),
                high_score_path=args.high_score_file,
            )
            _run(game, GameView(screen, font_small, font_large))
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())