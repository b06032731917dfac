"""Deterministic rule validation for generated crosswords."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Set, Tuple

from ..core.exceptions import ValidationError
from ..data.normalization import normalize_letter
from ..utils.logger import get_logger
from .grid import Grid


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Checks the structural invariants every accepted placement must keep."""

    def validate(self, grid: Grid) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_bounds(grid)
            self._check_unique_words(grid)
            self._check_letters(grid)
            self._check_no_parallel_overlap(grid)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_bounds(self, grid: Grid) -> None:
        for placement in grid.placements:
            for x, y in placement.cells:
                if not grid.contains(x, y):
                    raise ValidationError(
                        f"Word '{placement.word}' leaves the grid at ({x},{y})"
                    )

    def _check_unique_words(self, grid: Grid) -> None:
        seen: Set[int] = set()
        for placement in grid.placements:
            if placement.word_id in seen:
                raise ValidationError(f"Duplicate word '{placement.word}'")
            seen.add(placement.word_id)

    def _check_letters(self, grid: Grid) -> None:
        """Every cell agrees with every word written through it, crossings included."""
        for placement in grid.placements:
            for index, (x, y) in enumerate(placement.cells):
                expected = normalize_letter(placement.word[index])
                if grid.letter(x, y) != expected:
                    raise ValidationError(
                        f"Letter conflict at ({x},{y}): '{grid.letter(x, y)}' "
                        f"vs '{expected}' of '{placement.word}'"
                    )

    def _check_no_parallel_overlap(self, grid: Grid) -> None:
        owners: Dict[Tuple[int, int, bool], str] = {}
        for placement in grid.placements:
            for x, y in placement.cells:
                key = (x, y, placement.horizontal)
                if key in owners:
                    raise ValidationError(
                        f"Words '{owners[key]}' and '{placement.word}' overlap at ({x},{y})"
                    )
                owners[key] = placement.word
