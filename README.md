# blockfall

A falling-block puzzle game built with pygame. Pieces are dealt from a shuffled
bag that holds each of the seven shapes once. Clearing rows scores points and
raises the level. Each level makes the pieces fall faster. The best score is
kept between sessions.

## Installing

```
pip install .
```

## Playing

```
blockfall
```

The window is titled "Tetris". The command takes two options:

| Option                    | Default         | Meaning                                        |
|---------------------------|-----------------|------------------------------------------------|
| `--assets DIR`            | `assets`        | Directory that holds the fonts, sounds and image |
| `--high-score-file FILE`  | `highscore.txt` | File where the best score is kept              |

The assets directory is expected to contain:

- `fonts/PressStart2P-Regular.ttf` is required. If the font cannot be opened,
  the command prints an error and exits with status 1. It does the same if the
  window cannot be opened.
- `mix/` holds the music and sound effects: `intro_music.mp3`,
  `background_music.mp3`, `start_sound.mp3`, `move_sound.mp3`,
  `rotate_sound.mp3`, `drop_sound.mp3`, `land_sound.mp3`, `score_sound.mp3`,
  `highscore_sound.mp3` and `gameover_sound.mp3`. These are optional. A missing
  file, or an audio device that cannot be opened, only means silence.
- `background.png` is the optional menu background.

The main menu has two entries, PLAY and HELP. Use Up/Down to pick one and
Enter to confirm it. On the help screen, Enter takes you back to the menu.
M turns sound off and on in the menus as well.

### Keys during a game

| Key          | Action                                  |
|--------------|-----------------------------------------|
| Left / Right | Move the piece                          |
| Up           | Rotate the piece (undone if it would collide) |
| Down         | Move the piece down one row             |
| Space        | Drop the piece as far as it goes        |
| P            | Pause or resume                         |
| M            | Turn sound off or on                    |
| Esc          | End the current game                    |
| R            | Play again after game over              |
| Enter        | Return to the menu after game over      |

### Scoring

Each cleared row is worth `100 × level`. The level is
`1 + rows cleared // 4`, with a maximum of 10. At level 1 a piece falls one row
every 800 ms. Each level shortens that interval by 100 ms, down to a minimum of
30 ms.

A game is over when a new piece collides as soon as it appears, or when Esc is
pressed. If the score beats the stored best, three things happen:

- the new best is written to the high-score file straight away;
- a "New High Score!" banner is shown for three seconds;
- the game-over screen follows the banner.

## Using the game logic from code

The pieces, the grid and the game state work without a display:

```python
from blockfall.bag import TetrominoBag
from blockfall.grid import Grid

grid = Grid()
bag = TetrominoBag()
piece = bag.next_tetromino()
if not grid.is_collision(piece, 3, 0):
    grid.merge(piece, 3, 0)
cleared = grid.clear_lines()
```

- `blockfall.tetromino.Tetromino` is one piece. Its `rotate()` turns it a
  quarter turn clockwise, `cell(x, y)` reads one cell of its bounding box, and
  `cells()` yields the occupied cells.
- `blockfall.bag.TetrominoBag` accepts an optional `random.Random`, so its
  deals can be repeated.
- `blockfall.game.Game` holds the whole game state. It reacts to
  `blockfall.constants.Key` values passed to `handle_key` and drops the piece
  on `update`. It accepts a `clock` callable that returns milliseconds, along
  with its own sound player, bag, menu and high-score path.
- `blockfall.view.GameView` draws a game onto a pygame surface.
- `blockfall.app.translate_key` maps pygame key codes to `Key` values.

## Tests

```
pip install .[test]
pytest
```