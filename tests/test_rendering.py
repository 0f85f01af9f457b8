"""Tests for board images and PDF packs."""

import cv2
import numpy as np
import pytest

from sudokugen.generator import generate_many
from sudokugen.pdf_export import default_filename, export_pdf, render_pages
from sudokugen.rendering import ERROR_COLOR, render_board_image, save_board_image


class TestBoardImage:
    def test_image_shape(self, solved_grid):
        image = render_board_image(solved_grid, cell_size=40, margin=10)
        assert image.shape == (380, 380, 3)
        assert image.dtype == np.uint8

    def test_error_cells_drawn_in_red(self, solved_grid):
        original = solved_grid.copy()
        original[0, 0] = 0
        errors = np.zeros((9, 9), dtype=bool)
        errors[0, 0] = True
        image = render_board_image(solved_grid, original, errors, cell_size=50, margin=10)
        cell = image[10:60, 10:60].reshape(-1, 3).astype(int)
        reddish = (cell[:, 2] > 150) & (cell[:, 0] < 100) & (cell[:, 1] < 100)
        assert reddish.any()
        assert ERROR_COLOR[2] > 150

    def test_empty_board_has_only_lines(self):
        image = render_board_image(np.zeros((9, 9), dtype=int), cell_size=50, margin=10)
        centre = image[15:55, 15:55]
        assert (centre == 255).all()

    def test_save_board_image(self, solved_grid, tmp_path):
        path = save_board_image(tmp_path / "board.png", solved_grid)
        assert cv2.imread(path) is not None


class TestPdfExport:
    def test_default_filename(self):
        assert default_filename("hard", 6) == "sudoku-hard-6-pack.pdf"

    def test_six_puzzles_fit_one_page(self, solved_grid):
        assert len(render_pages([solved_grid] * 6, "Sudoku Puzzles (Easy)")) == 1
        assert len(render_pages([solved_grid] * 7, "Sudoku Puzzles (Easy)")) == 2

    def test_export_pack(self, rng, tmp_path):
        pairs = generate_many("hard", 6, rng)
        path = export_pdf(pairs, "hard", tmp_path / default_filename("hard", 6))
        data = (tmp_path / "sudoku-hard-6-pack.pdf").read_bytes()
        assert path.endswith("sudoku-hard-6-pack.pdf")
        assert data.startswith(b"%PDF")

    def test_export_accepts_serialized_pairs(self, rng, tmp_path):
        pairs = [p.to_dict() for p in generate_many("easy", 2, rng)]
        path = export_pdf(pairs, "easy", tmp_path / "pack.pdf")
        assert (tmp_path / "pack.pdf").exists()
        assert path.endswith("pack.pdf")

    def test_export_nothing(self, tmp_path):
        with pytest.raises(ValueError):
            export_pdf([], "easy", tmp_path / "empty.pdf")
