"""Data models supporting the crossword generator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .constants import Orientation


@dataclass
class Cell:
    """A single grid cell: its letter and which orientations run through it."""

    letter: str
    vertical: bool = False
    horizontal: bool = False

    def has_orientation(self, orientation: Orientation) -> bool:
        if orientation == Orientation.HORIZONTAL:
            return self.horizontal
        return self.vertical


@dataclass
class Placement:
    """A word written into the grid."""

    word_id: int
    word: str
    orientation: Orientation
    x: int
    y: int

    @property
    def horizontal(self) -> bool:
        return self.orientation == Orientation.HORIZONTAL

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        """``(x, y)`` coordinates covered by the word, first letter first."""
        if self.horizontal:
            return [(self.x + i, self.y) for i in range(self.length)]
        return [(self.x, self.y + i) for i in range(self.length)]

    def covers(self, x: int, y: int) -> bool:
        if self.horizontal:
            return self.y == y and self.x <= x < self.x + self.length
        return self.x == x and self.y <= y < self.y + self.length

    def crosses(self, other: "Placement") -> bool:
        """True when ``other`` is perpendicular and shares a cell with this word."""
        if self.word == other.word or self.orientation == other.orientation:
            return False
        if self.horizontal:
            return (
                self.x <= other.x < self.x + self.length
                and other.y <= self.y < other.y + other.length
            )
        return (
            self.y <= other.y < self.y + self.length
            and other.x <= self.x < other.x + other.length
        )
