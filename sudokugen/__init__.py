"""
Sudoku Generator

This package contains modules for:
- Full-grid generation by randomized backtracking
- Clue removal at a chosen difficulty
- Board validation and win detection
- Game session state, board images and printable PDF packs
"""

from .analyzer import has_conflict, is_solved
from .constraints import is_placement_valid
from .difficulty import Difficulty
from .generator import GeneratedPuzzle, GenerationError, PuzzleGenerator, generate, generate_many
from .session import GameSession

__version__ = "1.0.0"

__all__ = [
    "Difficulty",
    "GameSession",
    "GeneratedPuzzle",
    "GenerationError",
    "PuzzleGenerator",
    "generate",
    "generate_many",
    "has_conflict",
    "is_placement_valid",
    "is_solved",
]
