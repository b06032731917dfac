"""Randomized single-word placement with bounded retries."""

from __future__ import annotations

import math
import random
from typing import TYPE_CHECKING, List, Optional, Set, Tuple

from ..core.constants import MAX_PICK_ROLLS, Orientation
from ..data.dictionary import Constraint
from ..utils.logger import get_logger
from .grid import Grid

if TYPE_CHECKING:
    from .generator import GeneratorConfig


LOGGER = get_logger(__name__)


class CandidatePlacer:
    """Adds exactly one word to a grid, or marks the grid as finished.

    Every attempt draws an orientation, a length and a start position from
    the generator RNG and then checks the span against the grid. Failed
    attempts are counted; after ``finish_at`` failures the grid first leaves
    the border stage (when ``words_on_border`` is enabled) and on the next
    exhaustion becomes ``finished``.

    While the border stage lasts, one coordinate is pinned to an edge of the
    grid. Once the placed letters exceed ``words_on_border`` times the
    perimeter, positions are free but every new word must cross an existing
    one.
    """

    def __init__(self, config: GeneratorConfig, rng: random.Random, ignored: Set[int]) -> None:
        self.config = config
        self.compilation = config.compilation
        self.rng = rng
        self.ignored = ignored

    def place(self, grid: Grid) -> Grid:
        attempt = 0
        while not grid.finished:
            attempt += 1
            if attempt == self.config.finish_at:
                if self._border_stage(grid):
                    LOGGER.debug(
                        "Leaving border stage after %s failed attempts (%s words)",
                        attempt,
                        len(grid.placements),
                    )
                    grid.border_filled = True
                    attempt = 0
                else:
                    LOGGER.debug("Grid finished with %s words", len(grid.placements))
                    grid.finished = True
                    break
            if self._attempt(grid):
                break
        return grid

    # ------------------------------------------------------------------
    # Attempt
    # ------------------------------------------------------------------
    def _attempt(self, grid: Grid) -> bool:
        orientation = Orientation.from_flag(int(self.rng.random() * 2))
        length = self._target_length(grid, orientation)
        x, y = self._start_position(grid, orientation, length)

        if not self._ends_are_free(grid, orientation, length, x, y):
            return False
        constraints = self._crossing_constraints(grid, orientation, length, x, y)
        if constraints is None:
            return False
        if not constraints and self._crossing_required(grid):
            return False

        candidates = self.compilation.candidates(
            length, constraints, (self.ignored, grid.used_word_ids)
        )
        if not candidates:
            return False
        word_id = self._pick(grid, candidates)
        if word_id is None:
            return False

        grid.place(word_id, self.compilation.words[word_id], orientation, x, y)
        self._update_border_state(grid)
        return True

    def _border_stage(self, grid: Grid) -> bool:
        return bool(self.config.words_on_border) and not grid.border_filled

    def _crossing_required(self, grid: Grid) -> bool:
        return bool(self.config.words_on_border) and grid.border_filled

    def _target_length(self, grid: Grid, orientation: Orientation) -> int:
        count = self.compilation.bucket_count
        span = grid.width if orientation == Orientation.HORIZONTAL else grid.height
        shrink = math.floor(len(grid.placements) * self.config.minimum_length_factor)
        floor_length = max(2, min(grid.width, grid.height, count // 3 - 1) - shrink)
        return max(floor_length, int(self.rng.random() * min(span, count)))

    def _start_position(self, grid: Grid, orientation: Orientation, length: int) -> Tuple[int, int]:
        rand = self.rng.random
        horizontal = orientation == Orientation.HORIZONTAL
        if self._border_stage(grid):
            if horizontal:
                x = int(rand() * (grid.width - length))
                y = int(rand() * 2) * (grid.height - 1)
            else:
                x = int(rand() * 2) * (grid.width - 1)
                y = int(rand() * (grid.height - length))
        elif horizontal:
            x = int(rand() * (grid.width - length))
            y = int(rand() * grid.height)
        else:
            x = int(rand() * grid.width)
            y = int(rand() * (grid.height - length))
        return x, y

    # ------------------------------------------------------------------
    # Feasibility
    # ------------------------------------------------------------------
    @staticmethod
    def _ends_are_free(grid: Grid, orientation: Orientation, length: int, x: int, y: int) -> bool:
        if orientation == Orientation.HORIZONTAL:
            if x > 0 and not grid.is_empty(x - 1, y):
                return False
            if x < grid.width - length and not grid.is_empty(x + length, y):
                return False
        else:
            if y > 0 and not grid.is_empty(x, y - 1):
                return False
            if y < grid.height - length and not grid.is_empty(x, y + length):
                return False
        return True

    @staticmethod
    def _crossing_constraints(
        grid: Grid, orientation: Orientation, length: int, x: int, y: int
    ) -> Optional[List[Constraint]]:
        """Return the letters the new word must match, or None when the span is unusable.

        Words touching the span from the side must be crossed by it; a
        neighbour that is merely adjacent would create an unclued run.
        """

        horizontal = orientation == Orientation.HORIZONTAL
        adjacent: Set[int] = set()
        crossing: Set[int] = set()
        constraints: List[Constraint] = []
        for index in range(length):
            cx, cy = (x + index, y) if horizontal else (x, y + index)
            cell = grid.cell(cx, cy)
            if cell.has_orientation(orientation):
                return None

            if horizontal:
                neighbours = [(cx, cy - 1), (cx, cy + 1)]
            else:
                neighbours = [(cx - 1, cy), (cx + 1, cy)]
            for nx, ny in neighbours:
                if grid.contains(nx, ny):
                    adjacent.update(p.word_id for p in grid.placements_at(nx, ny))
            crossing.update(p.word_id for p in grid.placements_at(cx, cy))

            if not grid.is_empty(cx, cy):
                constraints.append((index, cell.letter))

        if adjacent - crossing:
            return None
        return constraints

    # ------------------------------------------------------------------
    # Selection & bookkeeping
    # ------------------------------------------------------------------
    def _pick(self, grid: Grid, candidates: List[int]) -> Optional[int]:
        for _ in range(MAX_PICK_ROLLS):
            word_id = candidates[int(self.rng.random() * len(candidates))]
            if word_id not in grid.used_word_ids:
                return word_id
        return None

    def _update_border_state(self, grid: Grid) -> None:
        if not self._border_stage(grid):
            return
        perimeter = (grid.width + grid.height) * 2
        placed_letters = sum(placement.length for placement in grid.placements)
        grid.border_filled = placed_letters / perimeter > self.config.words_on_border
        if grid.border_filled:
            LOGGER.debug(
                "Border covered with %s letters over a %s-cell perimeter",
                placed_letters,
                perimeter,
            )
