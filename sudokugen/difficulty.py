"""Difficulty presets: how many clues survive carving."""

from enum import Enum


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def clue_count(self) -> int:
        return CLUE_COUNTS[self]

    @property
    def label(self) -> str:
        """Capitalized name used on printed sheets."""
        return self.value.capitalize()

    @classmethod
    def parse(cls, value) -> "Difficulty":
        """Accept a Difficulty or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown difficulty {value!r} (expected one of: {choices})") from None


CLUE_COUNTS = {
    Difficulty.EASY: 40,
    Difficulty.MEDIUM: 32,
    Difficulty.HARD: 24,
}
