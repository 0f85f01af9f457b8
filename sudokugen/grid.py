"""Board representation helpers shared by the generator, analyzer and renderers."""

from __future__ import annotations

import operator

import numpy as np

SIZE = 9
BOX = 3
DIGITS = tuple(range(1, 10))


def empty_grid() -> np.ndarray:
    """Return a fresh 9x9 board of zeros."""
    return np.zeros((SIZE, SIZE), dtype=np.int8)


def as_grid(board) -> np.ndarray:
    """
    Convert a nested sequence (or array) into a validated 9x9 integer board.

    Raises:
        ValueError: if the shape is not 9x9 or any value is outside 0-9
    """
    try:
        grid = np.asarray(board)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Board must be a 9x9 grid of integers: {exc}") from exc

    if grid.shape != (SIZE, SIZE):
        raise ValueError(f"Board must be 9x9, got shape {grid.shape}")
    if grid.dtype.kind not in "iu":
        raise ValueError(f"Board must contain integers, got dtype {grid.dtype}")
    if grid.min() < 0 or grid.max() > 9:
        raise ValueError("Board values must be in the range 0-9")
    return grid.astype(np.int8)


def to_list(grid: np.ndarray) -> list[list[int]]:
    """Serialize a board as 9 row lists of plain ints."""
    return [[int(v) for v in row] for row in grid]


def _as_index(value, what: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise ValueError(f"{what} must be an integer, got {value!r}") from None


def check_cell(row, col) -> None:
    row, col = _as_index(row, "Row"), _as_index(col, "Column")
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise ValueError(f"Cell ({row}, {col}) is outside the 9x9 board")


def check_value(value) -> None:
    if _as_index(value, "Value") not in DIGITS:
        raise ValueError(f"Value {value} is not a digit 1-9")


def box_cell(row: int, col: int, i: int) -> tuple[int, int]:
    """Return the i-th cell (0-8) of the 3x3 box containing (row, col)."""
    return BOX * (row // BOX) + i // BOX, BOX * (col // BOX) + i % BOX


def count_clues(grid: np.ndarray) -> int:
    return int(np.count_nonzero(grid))


def format_board(board, empty: str = ".") -> str:
    """Text grid with `|` between boxes and a dashed rule under every third row."""
    out = []
    for r, row in enumerate(as_grid(board)):
        cells = [str(int(v)) if v else empty for v in row]
        bands = [" ".join(cells[i:i + BOX]) for i in range(0, SIZE, BOX)]
        text = " | ".join(bands)
        out.append(text)
        if r % BOX == BOX - 1 and r != SIZE - 1:
            out.append("-" * len(text))
    return "\n".join(out)
