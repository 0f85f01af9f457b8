"""
Live game state over a generated puzzle.

Holds the board as first generated (`original`), the board the player is
editing (`current`) and the `solution`, each as an independent copy, plus
the display flags an interactive grid needs.
"""

from __future__ import annotations

import re
from typing import Optional

import numpy as np

from .analyzer import entry_error_mask, find_overwritten_givens, has_conflict, is_solved, is_wrong_entry
from .difficulty import Difficulty
from .generator import GeneratedPuzzle, generate
from .grid import DIGITS, check_cell
from .rendering import render_board_image

WIN_MESSAGE = "Congratulations! You've solved the Sudoku!"
_LEADING_INT = re.compile(r"\s*[+-]?\d+")


def parse_entry(value) -> int:
    """
    Read player input the way a text box would: the leading integer of a
    string ("3a" -> 3), the integer part of a number. Anything that is not
    a digit 1-9 becomes 0 (empty).
    """
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        num = int(match.group()) if match else 0
    elif isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(value, bool):
        num = int(value) if np.isfinite(value) else 0
    else:
        num = 0
    return num if num in DIGITS else 0


class GameSession:
    """
    One game in progress.

    Given clues can never be overwritten; every edit re-checks the win
    state against the stored solution.
    """

    def __init__(self, pair: GeneratedPuzzle, rng: Optional[np.random.Generator] = None):
        self.rng = rng
        self._load(pair)

    @classmethod
    def new(cls, difficulty="easy", rng: Optional[np.random.Generator] = None) -> "GameSession":
        return cls(generate(difficulty, rng), rng)

    def _load(self, pair: GeneratedPuzzle):
        self.difficulty = pair.difficulty
        self.original = pair.puzzle.copy()
        self.current = pair.puzzle.copy()
        self.solution = pair.solution.copy()
        self.show_solution = False
        self.help_mode = False
        self.selected: Optional[tuple[int, int]] = None
        self.win_message = ""

    def new_game(self, difficulty=None):
        """Replace the puzzle with a fresh one and reset every flag."""
        if difficulty is None:
            difficulty = self.difficulty
        self._load(generate(Difficulty.parse(difficulty), self.rng))

    def is_given(self, row: int, col: int) -> bool:
        check_cell(row, col)
        return bool(self.original[row, col] != 0)

    def set_cell(self, row: int, col: int, value) -> None:
        """
        Write a player entry. Anything that is not a digit 1-9 clears the cell.

        Raises:
            ValueError: when (row, col) holds a given clue
        """
        check_cell(row, col)
        updated = self.current.copy()
        updated[row, col] = parse_entry(value)
        overwritten = find_overwritten_givens(self.original, updated)
        if overwritten:
            issue = overwritten[0]
            raise ValueError(f"Cell {issue['cell']} is a given clue ({issue['given']}) and cannot be changed")
        self.current = updated
        self._update_win_state()

    def clear_cell(self, row: int, col: int) -> None:
        self.set_cell(row, col, 0)

    def select(self, row: int, col: int) -> None:
        """Select an editable cell; clicks on given clues are ignored."""
        if not self.is_given(row, col):
            self.selected = (row, col)

    def reveal_selected(self) -> None:
        """Fill the selected cell from the solution and drop the selection."""
        if self.selected is None:
            return
        row, col = self.selected
        self.current[row, col] = self.solution[row, col]
        self.selected = None
        self._update_win_state()

    def toggle_solution(self) -> bool:
        self.show_solution = not self.show_solution
        return self.show_solution

    def toggle_help(self) -> bool:
        self.help_mode = not self.help_mode
        return self.help_mode

    def displayed_board(self) -> np.ndarray:
        return self.solution if self.show_solution else self.current

    def cell_is_error(self, row: int, col: int) -> bool:
        """
        Whether an entry should be highlighted as wrong.

        In help mode an entry is wrong when it differs from the solution;
        otherwise when it duplicates a digit in its row, column or box.
        """
        if self.is_given(row, col):
            return False
        if self.help_mode:
            return is_wrong_entry(self.current, self.solution, row, col)
        return has_conflict(self.current, row, col)

    def error_mask(self) -> np.ndarray:
        solution = self.solution if self.help_mode else None
        return entry_error_mask(self.current, self.original, solution)

    def render(self, cell_size: int = 50) -> np.ndarray:
        """Image of the displayed board with wrong entries in red."""
        if self.show_solution:
            return render_board_image(self.solution, self.original, cell_size=cell_size)
        return render_board_image(self.current, self.original, self.error_mask(), cell_size)

    def is_solved(self) -> bool:
        return is_solved(self.current, self.solution)

    def _update_win_state(self):
        self.win_message = WIN_MESSAGE if self.is_solved() else ""
