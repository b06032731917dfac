"""One generation of the clone-mutate-select loop."""

from __future__ import annotations

from typing import List, Sequence, Union

from ..core.exceptions import PopulationError
from .grid import Grid
from .placer import CandidatePlacer
from .selector import PopulationSelector

Population = Union[Grid, Sequence[Grid]]


def as_population(grids: Population) -> List[Grid]:
    if isinstance(grids, Grid):
        return [grids]
    return list(grids)


class IterationEngine:
    """Produces the next generation from the survivors of the previous one.

    Candidate ``i`` of ``solutions`` clones source ``len(population) * i //
    solutions``, so every survivor is reused about equally often. Sources
    are never mutated.
    """

    def __init__(
        self,
        placer: CandidatePlacer,
        selector: PopulationSelector,
        solutions: int,
        words: int,
    ) -> None:
        self.placer = placer
        self.selector = selector
        self.solutions = solutions
        self.words = words

    def advance(self, grids: Population) -> List[Grid]:
        population = as_population(grids)
        if not population:
            raise PopulationError("Cannot iterate an empty population")

        candidates: List[Grid] = []
        for index in range(self.solutions):
            source = population[len(population) * index // self.solutions]
            candidate = source.clone()
            for _ in range(self.words):
                candidate = self.placer.place(candidate)
            candidates.append(candidate)
        return self.selector.select(candidates)
