"""Shared constants and enumerations for the crossword generator."""

from __future__ import annotations

from enum import Enum


class Orientation(str, Enum):
    """Word orientations supported by the grid."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"

    @classmethod
    def from_flag(cls, horizontal: int) -> "Orientation":
        return cls.HORIZONTAL if horizontal else cls.VERTICAL

    @property
    def flag(self) -> int:
        """Numeric form used in hashes and listings (1 horizontal, 0 vertical)."""
        return 1 if self is Orientation.HORIZONTAL else 0


DEFAULT_EMPTY_SPACE = "·"
PLACEHOLDER = "."

# Re-rolls allowed when the random pick lands on an already used word.
MAX_PICK_ROLLS = 100

SERIAL_CHARACTERS = "1234567890ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DEFAULT_SERIAL_SIZE = 8
