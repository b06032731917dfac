"""Population scoring, deduplication and ranking."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple

from ..utils.logger import get_logger
from .grid import Grid


LOGGER = get_logger(__name__)

ScoreFunction = Callable[[int, int, int], float]


def default_score(filled: int, crossings: int, isolated: int) -> float:
    """Reward filled cells and crossings, heavily penalize isolated words."""

    return (filled * 4 + 2 * crossings) / (1 + isolated * 4)


def hash_code(text: str) -> int:
    """32-bit signed rolling string hash (``h = 31 * h + code``)."""

    value = 0
    for char in text:
        value = ((value << 5) - value + ord(char)) & 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def placement_signature(grid: Grid) -> str:
    return "".join(
        f"{p.word}_{p.orientation.flag}_{p.x}_{p.y}" for p in grid.placements
    )


def count_crossings(grid: Grid) -> Tuple[int, int]:
    """Return ``(crossings, isolated)`` for the grid's placements.

    Crossings are counted from both words of each crossing pair.
    """

    crossings = 0
    isolated = 0
    for placement in grid.placements:
        hits = sum(1 for other in grid.placements if placement.crosses(other))
        if hits == 0:
            isolated += 1
        crossings += hits
    return crossings, isolated


class PopulationSelector:
    """Scores a batch of grids and keeps the best distinct ones."""

    def __init__(self, score_function: ScoreFunction = default_score, selected: int = 22) -> None:
        self.score_function = score_function
        self.selected = selected

    def evaluate(self, grid: Grid) -> Grid:
        grid.hash = hash_code(placement_signature(grid))
        grid.crossing_count, grid.isolated_count = count_crossings(grid)
        grid.fill_count = grid.count_filled()
        grid.score = self.score_function(grid.fill_count, grid.crossing_count, grid.isolated_count)
        return grid

    def select(self, grids: Sequence[Grid], count: Optional[int] = None) -> List[Grid]:
        limit = self.selected if count is None else count
        for grid in grids:
            self.evaluate(grid)

        seen = set()
        unique: List[Grid] = []
        for grid in grids:
            if grid.hash in seen:
                continue
            seen.add(grid.hash)
            unique.append(grid)

        # sort is stable, ties keep their input order
        unique.sort(key=lambda grid: grid.score, reverse=True)
        selected = unique[: max(limit, 0)]
        if selected:
            LOGGER.debug(
                "Selected %s of %s grids (%s distinct), best score %.2f",
                len(selected),
                len(grids),
                len(unique),
                selected[0].score,
            )
        return selected
