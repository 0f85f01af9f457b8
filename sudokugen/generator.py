"""
Puzzle generation: fill a board, keep it as the solution, carve a copy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from .carver import carve_puzzle
from .difficulty import Difficulty
from .filler import fill_completely
from .grid import count_clues, empty_grid, to_list
from .randomizer import make_rng


class GenerationError(RuntimeError):
    """The filler could not complete an empty board."""


@dataclass(frozen=True, eq=False)
class GeneratedPuzzle:
    """A puzzle and the solution it was carved from. Each owns its own array."""

    puzzle: np.ndarray
    solution: np.ndarray
    difficulty: Difficulty
    steps: int = 0

    @property
    def clue_count(self) -> int:
        return count_clues(self.puzzle)

    def to_dict(self) -> dict:
        return {
            "difficulty": self.difficulty.value,
            "puzzle": to_list(self.puzzle),
            "solution": to_list(self.solution),
        }


def generate(difficulty="easy", rng: Optional[np.random.Generator] = None) -> GeneratedPuzzle:
    """Generate one puzzle/solution pair at the given difficulty."""
    difficulty = Difficulty.parse(difficulty)
    if rng is None:
        rng = make_rng()

    board = empty_grid()
    steps = [0]
    if not fill_completely(board, rng, steps):
        raise GenerationError("Backtracking failed to fill an empty board")

    solution = board.copy()
    puzzle = carve_puzzle(board.copy(), difficulty.clue_count, rng)
    return GeneratedPuzzle(puzzle=puzzle, solution=solution,
                           difficulty=difficulty, steps=steps[0])


def generate_many(difficulty="easy", count: int = 6,
                  rng: Optional[np.random.Generator] = None,
                  should_cancel: Optional[Callable[[], bool]] = None) -> list[GeneratedPuzzle]:
    """
    Generate `count` independent pairs.

    `should_cancel` is polled before each puzzle; once it returns True the
    pairs produced so far are returned.
    """
    if isinstance(count, bool) or not isinstance(count, (int, np.integer)) or count < 1:
        raise ValueError(f"Count must be a positive integer, got {count!r}")
    difficulty = Difficulty.parse(difficulty)
    if rng is None:
        rng = make_rng()

    pairs = []
    for _ in range(int(count)):
        if should_cancel is not None and should_cancel():
            break
        pairs.append(generate(difficulty, rng))
    return pairs


class PuzzleGenerator:
    """
    Generator bound to one random stream.

    Two instances created with the same seed produce the same sequence of
    puzzles.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.rng = make_rng(seed)

    def generate(self, difficulty="easy") -> GeneratedPuzzle:
        return generate(difficulty, self.rng)

    def generate_many(self, difficulty="easy", count: int = 6,
                      should_cancel: Optional[Callable[[], bool]] = None) -> list[GeneratedPuzzle]:
        return generate_many(difficulty, count, self.rng, should_cancel)
