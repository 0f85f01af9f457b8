"""
Board inspection: duplicate detection, mistake detection against a known
solution, and win detection.

All checks are read-only. Grids may be numpy arrays or nested lists.
"""

from __future__ import annotations

import numpy as np

from .grid import SIZE, BOX, as_grid, box_cell, check_cell


def has_conflict(board, row: int, col: int) -> bool:
    """
    True if the digit at (row, col) repeats anywhere in its row, column or box.

    Empty cells never conflict.
    """
    check_cell(row, col)
    return _has_conflict(as_grid(board), row, col)


def _has_conflict(board: np.ndarray, row: int, col: int) -> bool:
    value = board[row, col]
    if value == 0:
        return False

    for i in range(SIZE):
        if i != col and board[row, i] == value:
            return True
        if i != row and board[i, col] == value:
            return True

    for i in range(SIZE):
        r, c = box_cell(row, col, i)
        if (r, c) != (row, col) and board[r, c] == value:
            return True

    return False


def is_solved(board, solution) -> bool:
    """
    Exact match against the stored solution.

    A board that satisfies the rules but differs from `solution` (possible
    when the puzzle is ambiguous) is not considered solved.
    """
    return bool(np.array_equal(as_grid(board), as_grid(solution)))


def is_wrong_entry(board, solution, row: int, col: int) -> bool:
    """Help-mode check: a filled cell that disagrees with the solution."""
    check_cell(row, col)
    value = as_grid(board)[row, col]
    return bool(value != 0 and value != as_grid(solution)[row, col])


def conflict_mask(board) -> np.ndarray:
    """Boolean 9x9 array marking every cell for which has_conflict is True."""
    board = as_grid(board)
    mask = np.zeros((SIZE, SIZE), dtype=bool)
    for r in range(SIZE):
        for c in range(SIZE):
            mask[r, c] = _has_conflict(board, r, c)
    return mask


def mistake_mask(board, solution) -> np.ndarray:
    board = as_grid(board)
    solution = as_grid(solution)
    return (board != 0) & (board != solution)


def entry_error_mask(current, original, solution=None) -> np.ndarray:
    """
    Player entries to highlight as wrong; given clues are never flagged.

    With a `solution` (help mode) an entry is wrong when it differs from it,
    otherwise when it duplicates a digit in its row, column or box.
    """
    if solution is None:
        mask = conflict_mask(current)
    else:
        mask = mistake_mask(current, solution)
    return mask & (as_grid(original) == 0)


def _duplicates(values) -> bool:
    vals = [int(v) for v in values if v != 0]
    return len(vals) != len(set(vals))


def validate_grid(board) -> tuple[bool, str]:
    """Check for duplicate digits in every unit; report the first offender."""
    board = as_grid(board)
    for i in range(SIZE):
        if _duplicates(board[i, :]):
            return False, f"Row {i+1} has duplicate digit"
        if _duplicates(board[:, i]):
            return False, f"Column {i+1} has duplicate digit"

    for br in range(BOX):
        for bc in range(BOX):
            block = board[br*BOX:(br+1)*BOX, bc*BOX:(bc+1)*BOX].ravel()
            if _duplicates(block):
                return False, f"3x3 block ({br+1},{bc+1}) has duplicate digit"

    return True, ""


def is_valid_solution(board) -> bool:
    """A complete board where every row, column and box holds 1-9 once."""
    board = as_grid(board)
    if np.count_nonzero(board) != SIZE * SIZE:
        return False
    ok, _ = validate_grid(board)
    return ok


def find_overwritten_givens(original, current) -> list[dict]:
    """List cells where a given clue of `original` was changed in `current`."""
    original = as_grid(original)
    current = as_grid(current)
    issues = []
    for r, c in np.argwhere((original != 0) & (current != original)):
        issues.append({
            "cell": (int(r), int(c)),
            "given": int(original[r, c]),
            "found": int(current[r, c]),
        })
    return issues
