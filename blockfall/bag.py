"""Shuffled bag that deals each piece kind once per round."""

import random

from blockfall.tetromino import Tetromino, TetrominoType

_BAG_ORDER = (
    TetrominoType.I,
    TetrominoType.O,
    TetrominoType.T,
    TetrominoType.S,
    TetrominoType.Z,
    TetrominoType.J,
    TetrominoType.L,
)


class TetrominoBag:
    """Deals pieces from a shuffled set of all seven kinds, refilling when empty."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._kinds: list[TetrominoType] = []
        self._fill()

    def _fill(self) -> None:
        self._kinds = list(_BAG_ORDER)
        self._rng.shuffle(self._kinds)

    def next_tetromino(self) -> Tetromino:
        """Take the next piece, refilling the bag first if it is empty."""
        if not self._kinds:
            self._fill()
        return Tetromino(self._kinds.pop())

    def is_empty(self) -> bool:
        return not self._kinds