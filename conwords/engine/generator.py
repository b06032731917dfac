"""Main crossword generator orchestration.

A run is a (mu, lambda) style search over grid snapshots:

  1. ``generate`` seeds the RNG and returns an empty grid.
  2. ``iterate`` clones the survivors, adds words to each clone and keeps
     the best distinct candidates. The caller repeats it for N generations.
  3. ``fill_empty_spaces`` runs the deterministic completion pass once the
     randomized search stalls.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Set

from ..core.constants import DEFAULT_EMPTY_SPACE, DEFAULT_SERIAL_SIZE, SERIAL_CHARACTERS
from ..core.exceptions import ConfigurationError
from ..data.dictionary import CompiledDictionary
from ..utils.logger import get_logger
from .filler import SpaceFiller
from .grid import Grid
from .iteration import IterationEngine, Population, as_population
from .placer import CandidatePlacer
from .selector import PopulationSelector, ScoreFunction, default_score


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    compilation: Optional[CompiledDictionary] = None
    width: int = 24
    height: int = 22
    empty_space: str = DEFAULT_EMPTY_SPACE
    words_per_iteration: int = 2
    solutions_per_iteration: int = 33
    selected_solutions: int = 22
    words_on_border: float = 0.9
    minimum_length_factor: float = 1
    finish_at: int = 600
    score_function: ScoreFunction = default_score

    def validate(self) -> None:
        if self.compilation is None:
            raise ConfigurationError("A compiled dictionary must be passed as 'compilation'")
        if self.width < 2 or self.height < 2:
            raise ConfigurationError(
                f"Grid must be at least 2x2, got {self.width}x{self.height}"
            )
        if len(self.empty_space) != 1:
            raise ConfigurationError("empty_space must be a single character")
        if self.finish_at < 1:
            raise ConfigurationError("finish_at must be positive")
        if self.solutions_per_iteration < 1 or self.selected_solutions < 1:
            raise ConfigurationError("solutions_per_iteration and selected_solutions must be positive")
        if self.words_per_iteration < 0:
            raise ConfigurationError("words_per_iteration cannot be negative")
        if not 0 <= self.words_on_border <= 1:
            raise ConfigurationError("words_on_border must be between 0 and 1")


def generate_serial(rng: Optional[random.Random] = None, length: int = DEFAULT_SERIAL_SIZE) -> str:
    """Return a random alphanumeric seed string."""

    rng = rng or random.Random()
    return "".join(
        SERIAL_CHARACTERS[int(rng.random() * len(SERIAL_CHARACTERS))] for _ in range(length)
    )


class CrosswordGenerator:
    """High-level orchestrator over a compiled dictionary."""

    def __init__(self, config: GeneratorConfig) -> None:
        config.validate()
        self.config = config
        self.compilation: CompiledDictionary = config.compilation
        self.rng = random.Random()
        self.seed: Optional[str] = None
        # Word ids never placed by this generator until cleared
        self.ignored: Set[int] = set()

        self.selector = PopulationSelector(config.score_function, config.selected_solutions)
        self.placer = CandidatePlacer(config, self.rng, self.ignored)
        self.filler = SpaceFiller(self.compilation, self.rng, self.ignored)
        self.engine = IterationEngine(
            self.placer,
            self.selector,
            solutions=config.solutions_per_iteration,
            words=config.words_per_iteration,
        )

    # ------------------------------------------------------------------
    # Public entrypoints
    # ------------------------------------------------------------------
    def generate(self, seed: Optional[object] = None) -> Grid:
        """Reseed the RNG and return an empty grid.

        Without ``seed`` a random 8-character serial is used; the value in
        effect is kept in :attr:`seed` so the run can be reproduced.
        """

        self.seed = str(seed) if seed is not None else generate_serial()
        self.rng.seed(self.seed)
        LOGGER.info(
            "Starting %sx%s crossword with seed %s",
            self.config.width,
            self.config.height,
            self.seed,
        )
        return Grid(self.config.width, self.config.height, self.config.empty_space)

    def iterate(self, grids: Population) -> List[Grid]:
        return self.engine.advance(grids)

    def fill_empty_spaces(self, grids: Population) -> List[Grid]:
        population = as_population(grids)
        for grid in population:
            self.filler.fill(grid)
        return self.selector.select(population)

    def ignore_words(self, word_ids: Iterable[int]) -> None:
        self.ignored.update(word_ids)

    def clear_ignored(self) -> None:
        self.ignored.clear()
