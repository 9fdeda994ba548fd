"""Board geometry, colours, timing and the keys the game reacts to."""

from enum import Enum, auto

Color = tuple[int, int, int, int]

BLOCK_SIZE = 30

GRID_WIDTH = 10
GRID_HEIGHT = 20

INFO_PANEL_WIDTH = 300

SCREEN_WIDTH = GRID_WIDTH * BLOCK_SIZE + INFO_PANEL_WIDTH + 150
SCREEN_HEIGHT = GRID_HEIGHT * BLOCK_SIZE + 100

GRID_PIXEL_WIDTH = GRID_WIDTH * BLOCK_SIZE
GRID_PIXEL_HEIGHT = GRID_HEIGHT * BLOCK_SIZE

GRID_OFFSET_X = 50
GRID_OFFSET_Y = (SCREEN_HEIGHT - GRID_PIXEL_HEIGHT) // 2

INFO_TEXT_OFFSET_X = GRID_WIDTH * BLOCK_SIZE + GRID_OFFSET_X + 30
INFO_TEXT_OFFSET_Y = GRID_OFFSET_Y

GRID_BORDER_THICKNESS = 5

COLOR_BLACK: Color = (0, 0, 0, 255)
COLOR_WHITE: Color = (255, 255, 255, 255)
COLOR_RED: Color = (255, 0, 0, 255)
COLOR_BLUE: Color = (0, 0, 255, 255)
COLOR_CYAN: Color = (0, 255, 255, 255)
COLOR_ORANGE: Color = (255, 165, 0, 255)
COLOR_YELLOW: Color = (255, 255, 0, 255)
COLOR_GREEN: Color = (0, 255, 0, 255)
COLOR_PURPLE: Color = (128, 0, 128, 255)
COLOR_MAGENTA: Color = (255, 0, 255, 255)
COLOR_GRID_BORDER: Color = COLOR_WHITE
COLOR_GAME_OVER_BG: Color = (100, 100, 100, 255)

BASE_DROP_INTERVAL = 800
DROP_INTERVAL_DECREMENT = 100
MIN_DROP_INTERVAL = 30
LINES_PER_LEVEL = 4
MAX_LEVEL = 10
HIGH_SCORE_DISPLAY_TIME = 3000


class Key(Enum):
    """Keys the menu and the game respond to."""

    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    SPACE = auto()
    ESCAPE = auto()
    RETURN = auto()
    P = auto()
    M = auto()
    R = auto()


def drop_interval(level: int) -> int:
    """Milliseconds between automatic drops at the given level."""
    return max(MIN_DROP_INTERVAL, BASE_DROP_INTERVAL - (level - 1) * DROP_INTERVAL_DECREMENT)