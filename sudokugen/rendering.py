"""
Draw a board as an image with OpenCV.

Given clues are drawn in dark grey, player entries in blue and flagged
entries (conflicts, or mistakes in help mode) in red.
"""

from __future__ import annotations

from typing import Optional

import cv2
import numpy as np

from .grid import SIZE, BOX, as_grid

# BGR
GIVEN_COLOR = (40, 40, 40)
ENTRY_COLOR = (200, 80, 30)
ERROR_COLOR = (30, 30, 220)
LINE_COLOR = (120, 120, 120)
BOX_LINE_COLOR = (0, 0, 0)
BACKGROUND = (255, 255, 255)


def render_board_image(board, original=None, errors: Optional[np.ndarray] = None,
                       cell_size: int = 50, margin: int = 10) -> np.ndarray:
    """
    Render a 9x9 board onto a white BGR canvas.

    Args:
        board: grid to draw (0 = empty)
        original: puzzle as generated; its non-zero cells are drawn as givens.
            Defaults to `board`, i.e. every digit is treated as a given.
        errors: optional 9x9 boolean mask of entries to draw in red
        cell_size: side of one cell in pixels
        margin: blank border around the grid in pixels

    Returns:
        np.ndarray of shape (H, W, 3), dtype uint8
    """
    board = as_grid(board)
    original = board if original is None else as_grid(original)
    if errors is None:
        errors = np.zeros((SIZE, SIZE), dtype=bool)

    side = SIZE * cell_size + 2 * margin
    canvas = np.full((side, side, 3), BACKGROUND, dtype=np.uint8)

    for i in range(SIZE + 1):
        offset = margin + i * cell_size
        thick = i % BOX == 0
        color = BOX_LINE_COLOR if thick else LINE_COLOR
        width = 3 if thick else 1
        cv2.line(canvas, (margin, offset), (side - margin, offset), color, width)
        cv2.line(canvas, (offset, margin), (offset, side - margin), color, width)

    font = cv2.FONT_HERSHEY_SIMPLEX
    scale = cell_size / 55.0
    for r in range(SIZE):
        for c in range(SIZE):
            val = int(board[r, c])
            if val == 0:
                continue
            if original[r, c] != 0:
                color = GIVEN_COLOR
            elif errors[r, c]:
                color = ERROR_COLOR
            else:
                color = ENTRY_COLOR
            text = str(val)
            size, _ = cv2.getTextSize(text, font, scale, 2)
            x = margin + c * cell_size + (cell_size - size[0]) // 2
            y = margin + r * cell_size + (cell_size + size[1]) // 2
            cv2.putText(canvas, text, (x, y), font, scale, color, 2, cv2.LINE_AA)

    return canvas


def save_board_image(path, board, original=None, errors=None, cell_size: int = 50) -> str:
    """Render and write the board to `path`; returns the path written."""
    image = render_board_image(board, original, errors, cell_size)
    if not cv2.imwrite(str(path), image):
        raise ValueError(f"Could not write image to {path}")
    return str(path)
