"""
Source of randomness for generation.

Every generation call takes an explicit ``numpy.random.Generator`` so a
fixed seed reproduces the same puzzle.
"""

from __future__ import annotations

import numpy as np

from .grid import DIGITS


def make_rng(seed: int | None = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def shuffled_digits(rng: np.random.Generator) -> list[int]:
    """Uniformly shuffled permutation of the digits 1-9."""
    return [int(d) for d in rng.permutation(DIGITS)]


def random_cell(rng: np.random.Generator) -> tuple[int, int]:
    row, col = rng.integers(0, 9, size=2)
    return int(row), int(col)
