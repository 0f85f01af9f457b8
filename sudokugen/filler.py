"""
Randomized backtracking that fills an empty board with a complete solution.
"""

from __future__ import annotations

import numpy as np

from .constraints import _is_valid
from .randomizer import make_rng, shuffled_digits


def _find_empty(board: np.ndarray):
    positions = np.argwhere(board == 0)
    if positions.size == 0:
        return None
    return tuple(int(p) for p in positions[0])


def fill_completely(board: np.ndarray, rng: np.random.Generator | None = None,
                    step_counter: list[int] | None = None) -> bool:
    """
    In-place randomized fill. Returns True if the board was completed.

    Empty cells are visited in row-major order; each one tries the digits
    in a fresh random order and undoes its placement when the rest of the
    board cannot be completed. A board with no valid completion is left
    unchanged and False is returned.
    """
    if rng is None:
        rng = make_rng()
    if step_counter is None:
        step_counter = [0]

    empty = _find_empty(board)
    if empty is None:
        return True

    r, c = empty
    for val in shuffled_digits(rng):
        if _is_valid(board, r, c, val):
            board[r, c] = val
            step_counter[0] += 1
            if fill_completely(board, rng, step_counter):
                return True
            board[r, c] = 0

    return False
