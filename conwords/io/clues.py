"""Clue selection and the structured export of a finished grid."""

from __future__ import annotations

import json
import random
from typing import Any, Dict, List, Optional

from ..core.models import Placement
from ..data.dictionary import CompiledDictionary
from ..engine.grid import Grid


def listing_order(grid: Grid) -> List[Placement]:
    """Horizontal words first, then vertical ones, each in reading order."""

    return sorted(
        grid.placements,
        key=lambda p: (0 if p.horizontal else 1, p.y, p.x),
    )


class ClueSelector:
    """Picks the displayed clue of a word among its cross-referenced strings."""

    def __init__(self, compilation: CompiledDictionary, rng: random.Random) -> None:
        self.compilation = compilation
        self.rng = rng

    def pick(self, placement: Placement) -> Optional[str]:
        options = self.compilation.clue_options(placement.word_id)
        if not options:
            return None
        return options[int(self.rng.random() * len(options))]

    def question_records(self, grid: Grid) -> List[Dict[str, Any]]:
        """Return ``{x, y, horizontal, word, question}`` records in placement order.

        Clues are drawn in listing order so rendering and export of the same
        grid consume the RNG identically.
        """

        questions = {id(p): self.pick(p) for p in listing_order(grid)}
        return [
            {
                "x": p.x,
                "y": p.y,
                "horizontal": p.horizontal,
                "word": p.word,
                "question": questions[id(p)],
            }
            for p in grid.placements
        ]


def to_json(records: List[Dict[str, Any]]) -> str:
    return json.dumps(records, ensure_ascii=False, indent=2)
