"""Tests for board helpers and difficulty presets."""

import numpy as np
import pytest

from sudokugen.difficulty import Difficulty
from sudokugen.grid import as_grid, box_cell, check_cell, check_value, count_clues, empty_grid, format_board, to_list


class TestGridHelpers:
    def test_empty_grid(self):
        grid = empty_grid()
        assert grid.shape == (9, 9)
        assert count_clues(grid) == 0

    def test_box_cell_enumerates_box(self):
        cells = {box_cell(4, 7, i) for i in range(9)}
        assert cells == {(r, c) for r in range(3, 6) for c in range(6, 9)}

    def test_as_grid_round_trips_lists(self, solved_grid):
        assert to_list(as_grid(to_list(solved_grid))) == to_list(solved_grid)
        assert all(type(v) is int for row in to_list(solved_grid) for v in row)

    @pytest.mark.parametrize("bad", [
        [[0] * 9] * 8,
        [[0] * 8] * 9,
        [[10] + [0] * 8] + [[0] * 9] * 8,
        [[-1] + [0] * 8] + [[0] * 9] * 8,
        [[0.5] * 9] * 9,
    ])
    def test_as_grid_rejects_bad_boards(self, bad):
        with pytest.raises(ValueError):
            as_grid(bad)

    def test_format_board(self):
        grid = empty_grid()
        grid[0, 0] = 7
        lines = format_board(grid).splitlines()
        assert len(lines) == 11
        assert lines[0].startswith("7 . . |")
        assert set(lines[3]) == {"-"}


class TestDifficulty:
    def test_clue_counts(self):
        assert Difficulty.EASY.clue_count == 40
        assert Difficulty.MEDIUM.clue_count == 32
        assert Difficulty.HARD.clue_count == 24

    def test_parse(self):
        assert Difficulty.parse("Hard") is Difficulty.HARD
        assert Difficulty.parse(Difficulty.EASY) is Difficulty.EASY
        assert Difficulty.MEDIUM.label == "Medium"

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            Difficulty.parse("expert")


class TestCellChecks:
    @pytest.mark.parametrize("row,col", [(1.5, 0), (0, "1"), (None, 2)])
    def test_non_integer_coordinates(self, row, col):
        with pytest.raises(ValueError):
            check_cell(row, col)

    def test_numpy_integers_accepted(self):
        check_cell(np.int64(8), np.uint8(0))
        check_value(np.int8(9))
