"""Grid representation and helper utilities."""

from __future__ import annotations

import copy
from typing import List, Optional, Set

from ..core.constants import DEFAULT_EMPTY_SPACE, Orientation
from ..core.models import Cell, Placement
from ..data.normalization import normalize_letter


class Grid:
    """A candidate crossword: cells, placed words and cached selection metrics.

    Coordinates are ``(x, y)`` with ``x`` the column and ``y`` the row; cells
    are stored row-major as ``cells[y][x]``.
    """

    def __init__(self, width: int, height: int, empty_space: str = DEFAULT_EMPTY_SPACE) -> None:
        self.width = width
        self.height = height
        self.empty_space = empty_space
        self.cells: List[List[Cell]] = [
            [Cell(empty_space) for _ in range(width)] for _ in range(height)
        ]
        self.placements: List[Placement] = []
        self.used_word_ids: Set[int] = set()

        # Search state
        self.finished = False
        self.border_filled = False

        # Filled in by the selector
        self.hash: Optional[int] = None
        self.crossing_count = 0
        self.isolated_count = 0
        self.fill_count = 0
        self.score = 0.0

    def clone(self) -> "Grid":
        return copy.deepcopy(self)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        return self.cells[y][x]

    def letter(self, x: int, y: int) -> str:
        return self.cells[y][x].letter

    def is_empty(self, x: int, y: int) -> bool:
        return self.cells[y][x].letter == self.empty_space

    def placements_at(self, x: int, y: int) -> List[Placement]:
        return [placement for placement in self.placements if placement.covers(x, y)]

    def count_filled(self) -> int:
        return sum(
            1 for row in self.cells for cell in row if cell.letter != self.empty_space
        )

    # ------------------------------------------------------------------
    # Word placement
    # ------------------------------------------------------------------
    def place(self, word_id: int, word: str, orientation: Orientation, x: int, y: int) -> Placement:
        """Write ``word`` starting at ``(x, y)``.

        Feasibility is the caller's responsibility; letters are stored without
        accents so crossings compare plain characters.
        """

        placement = Placement(word_id=word_id, word=word, orientation=orientation, x=x, y=y)
        for index, (cx, cy) in enumerate(placement.cells):
            cell = self.cells[cy][cx]
            cell.letter = normalize_letter(word[index])
            if placement.horizontal:
                cell.horizontal = True
            else:
                cell.vertical = True
        self.placements.append(placement)
        self.used_word_ids.add(word_id)
        return placement
