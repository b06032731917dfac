"""Deterministic completion pass over the empty runs of a grid."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Set, Tuple

from ..core.constants import Orientation
from ..data.dictionary import Constraint
from ..utils.logger import get_logger
from .grid import Grid

if TYPE_CHECKING:
    from ..data.dictionary import CompiledDictionary


LOGGER = get_logger(__name__)


@dataclass
class Run:
    """A maximal stretch of free cells that can host a crossing word."""

    x: int
    y: int
    size: int
    orientation: Orientation

    def endpoints(self) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        if self.orientation == Orientation.HORIZONTAL:
            return (self.x, self.y), (self.x + self.size - 1, self.y)
        return (self.x, self.y), (self.x, self.y + self.size - 1)


class SpaceFiller:
    """Greedily writes words into the longest free runs until none accepts a word.

    A run grows from an empty cell in both directions and stops at the grid
    edge, at a parallel word (backing off two cells so the words do not
    touch), at a cell with a filled side neighbour, or on a perpendicular word.
    Only runs ending on a perpendicular word are kept, so every word written
    here crosses something.
    """

    def __init__(self, compilation: CompiledDictionary, rng: random.Random, ignored: Set[int]) -> None:
        self.compilation = compilation
        self.rng = rng
        self.ignored = ignored

    def fill(self, grid: Grid) -> Grid:
        placed = 0
        while self._fill_once(grid):
            placed += 1
        LOGGER.debug("Completion pass added %s words", placed)
        return grid

    def _fill_once(self, grid: Grid) -> bool:
        runs = self.find_runs(grid)
        runs.sort(key=lambda run: run.size, reverse=True)
        for run in runs:
            candidates = self.compilation.candidates(
                run.size,
                self._endpoint_constraints(grid, run),
                (self.ignored, grid.used_word_ids),
            )
            if not candidates:
                continue
            word_id = candidates[int(self.rng.random() * len(candidates))]
            grid.place(word_id, self.compilation.words[word_id], run.orientation, run.x, run.y)
            return True
        return False

    # ------------------------------------------------------------------
    # Run discovery
    # ------------------------------------------------------------------
    def find_runs(self, grid: Grid) -> List[Run]:
        runs: List[Run] = []
        for x in range(grid.width):
            for y in range(grid.height):
                if not grid.is_empty(x, y):
                    continue
                for orientation in (Orientation.HORIZONTAL, Orientation.VERTICAL):
                    run = self._run_through(grid, x, y, orientation)
                    if run is not None:
                        runs.append(run)
        return runs

    def _run_through(self, grid: Grid, x: int, y: int, orientation: Orientation) -> Optional[Run]:
        start, start_crossing = self._scan(grid, x, y, orientation, -1)
        end, end_crossing = self._scan(grid, x, y, orientation, 1)
        if not (start_crossing or end_crossing) or start >= end:
            return None
        if orientation == Orientation.HORIZONTAL:
            return Run(x=start, y=y, size=end + 1 - start, orientation=orientation)
        return Run(x=x, y=start, size=end + 1 - start, orientation=orientation)

    @staticmethod
    def _scan(grid: Grid, x: int, y: int, orientation: Orientation, step: int) -> Tuple[int, bool]:
        """Walk from ``(x, y)`` along ``orientation``; return the last usable position.

        The flag tells whether the walk stopped on a perpendicular word.
        """

        horizontal = orientation == Orientation.HORIZONTAL
        across = Orientation.VERTICAL if horizontal else Orientation.HORIZONTAL
        limit = grid.width if horizontal else grid.height
        position = x if horizontal else y
        while True:
            if position < 0 or position >= limit:
                return position - step, False
            cx, cy = (position, y) if horizontal else (x, position)
            cell = grid.cell(cx, cy)
            if cell.has_orientation(orientation):
                return position - 2 * step, False
            if cell.has_orientation(across):
                return position, True
            sides = ((cx, cy - 1), (cx, cy + 1)) if horizontal else ((cx - 1, cy), (cx + 1, cy))
            if any(grid.contains(sx, sy) and not grid.is_empty(sx, sy) for sx, sy in sides):
                return position - step, False
            position += step

    @staticmethod
    def _endpoint_constraints(grid: Grid, run: Run) -> List[Constraint]:
        (sx, sy), (ex, ey) = run.endpoints()
        constraints: List[Constraint] = []
        if not grid.is_empty(sx, sy):
            constraints.append((0, grid.letter(sx, sy)))
        if not grid.is_empty(ex, ey):
            constraints.append((run.size - 1, grid.letter(ex, ey)))
        return constraints
