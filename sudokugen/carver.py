"""Blank out cells of a solved board until only the requested clues remain."""

from __future__ import annotations

import numpy as np

from .grid import SIZE
from .randomizer import make_rng, random_cell


def carve_puzzle(board: np.ndarray, clue_count: int,
                 rng: np.random.Generator | None = None) -> np.ndarray:
    """
    Remove random cells in place until `clue_count` non-zero cells are left.

    Cells are drawn with replacement; drawing an already empty cell is a
    retry and does not count. Running this on a board that already has
    `clue_count` clues or fewer changes nothing.
    """
    if not 0 <= clue_count <= SIZE * SIZE:
        raise ValueError(f"Clue count must be between 0 and 81, got {clue_count}")
    if rng is None:
        rng = make_rng()

    remaining = int(np.count_nonzero(board)) - clue_count
    while remaining > 0:
        r, c = random_cell(rng)
        if board[r, c] != 0:
            board[r, c] = 0
            remaining -= 1

    return board
