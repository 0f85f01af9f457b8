"""Tests for the placement checker."""

import numpy as np
import pytest

from sudokugen.constraints import is_placement_valid
from sudokugen.grid import empty_grid


class TestPlacement:
    def test_empty_board_accepts_everything(self):
        grid = empty_grid()
        assert all(is_placement_valid(grid, 4, 4, v) for v in range(1, 10))

    def test_row_column_and_box_conflicts(self):
        grid = empty_grid()
        grid[0, 8] = 5
        grid[8, 1] = 6
        grid[2, 2] = 7
        assert not is_placement_valid(grid, 0, 0, 5)
        assert not is_placement_valid(grid, 0, 1, 6)
        assert not is_placement_valid(grid, 1, 1, 7)
        assert is_placement_valid(grid, 1, 1, 5)

    def test_target_cell_is_not_counted(self, solved_grid):
        assert is_placement_valid(solved_grid, 0, 0, 5)
        assert not is_placement_valid(solved_grid, 0, 0, 3)

    def test_accepts_nested_lists(self, solved_grid):
        board = solved_grid.tolist()
        board[0][0] = 0
        assert is_placement_valid(board, 0, 0, 5)
        assert not is_placement_valid(board, 0, 0, 1)

    def test_transpose_symmetry(self, rng):
        grid = empty_grid()
        for _ in range(25):
            r, c = rng.integers(0, 9, size=2)
            grid[r, c] = rng.integers(1, 10)
        transposed = grid.T.copy()
        for r in range(9):
            for c in range(9):
                for v in range(1, 10):
                    assert is_placement_valid(grid, r, c, v) == is_placement_valid(transposed, c, r, v)

    @pytest.mark.parametrize("row,col,value", [(-1, 0, 1), (0, 9, 1), (9, 0, 1), (0, 0, 0), (0, 0, 10)])
    def test_out_of_range_fails_fast(self, row, col, value):
        with pytest.raises(ValueError):
            is_placement_valid(np.zeros((9, 9), dtype=np.int8), row, col, value)

    @pytest.mark.parametrize("row,col,value", [(1.5, 0, 1), (0, "2", 1), (0, 0, 2.0), (None, 0, 1)])
    def test_non_integer_arguments_fail_fast(self, row, col, value):
        with pytest.raises(ValueError):
            is_placement_valid(np.zeros((9, 9), dtype=np.int8), row, col, value)

    @pytest.mark.parametrize("board", [[[1, 1]], np.zeros((9, 8), dtype=int), np.full((9, 9), 0.5)])
    def test_malformed_board_fails_fast(self, board):
        with pytest.raises(ValueError):
            is_placement_valid(board, 0, 0, 1)
