"""Row/column/box uniqueness check for a single placement."""

import numpy as np

from .grid import SIZE, as_grid, box_cell, check_cell, check_value


def _is_valid(board: np.ndarray, row: int, col: int, val: int) -> bool:
    for i in range(SIZE):
        if i != col and board[row, i] == val:
            return False
        if i != row and board[i, col] == val:
            return False
        br, bc = box_cell(row, col, i)
        if (br, bc) != (row, col) and board[br, bc] == val:
            return False
    return True


def is_placement_valid(board: np.ndarray, row: int, col: int, value: int) -> bool:
    """
    Return True if `value` can go at (row, col) without repeating a digit
    elsewhere in the same row, column or 3x3 box.

    Raises:
        ValueError: for a board that is not 9x9 digits 0-9, coordinates
            outside 0-8 or a value outside 1-9
    """
    check_cell(row, col)
    check_value(value)
    return _is_valid(as_grid(board), row, col, value)
