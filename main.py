"""CLI entrypoint for the stochastic crossword generator."""

from __future__ import annotations

import argparse
from pathlib import Path

from conwords.core.exceptions import ConwordsError, DictionaryLoadError
from conwords.data.dictionary import compile_dictionaries
from conwords.data.loader import load_dictionaries
from conwords.engine.generator import CrosswordGenerator, GeneratorConfig
from conwords.engine.validator import GridValidator
from conwords.io.clues import ClueSelector, to_json
from conwords.utils.logger import configure_logging, get_logger
from conwords.utils.pretty import format_solutions


LOGGER = get_logger("cli")

DEFAULTS = GeneratorConfig()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate crosswords from synonym dictionaries by evolutionary search",
    )
    parser.add_argument(
        "dictionaries",
        nargs="+",
        type=Path,
        metavar="DICTIONARY",
        help="JSON files, each an array of [word, synonym, description, ...] entries",
    )
    parser.add_argument("--width", type=int, default=DEFAULTS.width, help="Grid width in cells")
    parser.add_argument("--height", type=int, default=DEFAULTS.height, help="Grid height in cells")
    parser.add_argument("--iterations", type=int, default=60, help="Number of generations to run")
    parser.add_argument("--seed", type=str, default=None, help="Seed string for reproducible runs")
    parser.add_argument(
        "--words-per-iteration",
        type=int,
        default=DEFAULTS.words_per_iteration,
        help="Words added to every candidate per generation",
    )
    parser.add_argument(
        "--solutions-per-iteration",
        type=int,
        default=DEFAULTS.solutions_per_iteration,
        help="Candidates produced per generation",
    )
    parser.add_argument(
        "--selected-solutions",
        type=int,
        default=DEFAULTS.selected_solutions,
        help="Candidates kept for the next generation",
    )
    parser.add_argument(
        "--words-on-border",
        type=float,
        default=DEFAULTS.words_on_border,
        help="Perimeter coverage (0-1) to reach before filling the interior; 0 disables",
    )
    parser.add_argument(
        "--minimum-length-factor",
        type=float,
        default=DEFAULTS.minimum_length_factor,
        help="How fast the minimum word length drops as words are placed",
    )
    parser.add_argument(
        "--finish-at",
        type=int,
        default=DEFAULTS.finish_at,
        help="Failed attempts before a candidate escalates or stops",
    )
    parser.add_argument("--no-fill", action="store_true", help="Skip the final completion pass")
    parser.add_argument("--questions", action="store_true", help="List the clues under the grid")
    parser.add_argument("--output", type=Path, help="Optional path to JSON clue export")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.iterations < 0:
        parser.error("--iterations cannot be negative")

    try:
        dictionaries = load_dictionaries(args.dictionaries)
    except DictionaryLoadError as exc:
        parser.error(str(exc))

    compilation = compile_dictionaries(
        dictionaries,
        lambda percent: LOGGER.debug("Compiling dictionaries: %s%%", percent),
    )
    LOGGER.info(
        "Compiled %s words and %s phrases (longest word %s)",
        len(compilation.words),
        len(compilation.phrases),
        compilation.max_length,
    )

    config = GeneratorConfig(
        compilation=compilation,
        width=args.width,
        height=args.height,
        words_per_iteration=args.words_per_iteration,
        solutions_per_iteration=args.solutions_per_iteration,
        selected_solutions=args.selected_solutions,
        words_on_border=args.words_on_border,
        minimum_length_factor=args.minimum_length_factor,
        finish_at=args.finish_at,
    )
    try:
        generator = CrosswordGenerator(config)
    except ConwordsError as exc:
        parser.error(str(exc))

    population = [generator.generate(args.seed)]
    for iteration in range(1, args.iterations + 1):
        population = generator.iterate(population)
        best = population[0]
        LOGGER.info(
            "Iteration %s: crosses=%s isolated=%s fill=%.0f%%",
            iteration,
            best.crossing_count,
            best.isolated_count,
            100 * best.fill_count / (best.width * best.height),
        )

    if not args.no_fill:
        LOGGER.info("Completing empty spaces")
        population = generator.fill_empty_spaces(population)

    validation = GridValidator().validate(population[0])
    for message in validation.messages:
        LOGGER.warning("Grid check: %s", message)

    # Clues are drawn once so the listing and the export agree
    records = None
    if args.questions or args.output:
        records = ClueSelector(compilation, generator.rng).question_records(population[0])
    print(
        format_solutions(
            population,
            questions=[records] if args.questions else None,
            seed=generator.seed,
        )
    )

    if args.output:
        args.output.write_text(to_json(records), encoding="utf-8")
        LOGGER.info("Clues written to %s", args.output)


if __name__ == "__main__":  # pragma: no cover
    main()
