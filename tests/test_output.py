import io
import json
import random
import unittest

from conwords.core.constants import Orientation
from conwords.data.dictionary import compile_dictionaries
from conwords.engine.grid import Grid
from conwords.engine.selector import PopulationSelector
from conwords.io.clues import ClueSelector, listing_order, to_json
from conwords.utils.pretty import (HORIZONTAL_LAYER, VERTICAL_LAYER, format_grid, format_questions,
                                   format_solutions, format_summary, pad, pretty_print_solutions)


def sample_grid() -> Grid:
    grid = Grid(5, 5)
    grid.place(0, "CAT", Orientation.HORIZONTAL, 0, 0)
    grid.place(1, "COW", Orientation.VERTICAL, 0, 0)
    return PopulationSelector().evaluate(grid)


class PadTests(unittest.TestCase):
    def test_pads_and_truncates(self) -> None:
        self.assertEqual(pad("ab", 4), "ab  ")
        self.assertEqual(pad("abcdef", 3), "abc")
        self.assertEqual(pad("abc", 3), "abc")

    def test_non_strings_become_placeholder(self) -> None:
        self.assertEqual(pad(None, 4), ".")
        self.assertEqual(pad(12, 4), ".")


class GridFormattingTests(unittest.TestCase):
    def test_letters_layer(self) -> None:
        grid = Grid(3, 2)
        grid.place(0, "CAT", Orientation.HORIZONTAL, 0, 0)
        self.assertEqual(
            format_grid(grid).split("\n"),
            ["    0 0 0 ", "    0 1 2 ", "", "00  C A T ", "01  · · · "],
        )

    def test_coverage_layers(self) -> None:
        grid = sample_grid()
        vertical = format_grid(grid, VERTICAL_LAYER).split("\n")
        horizontal = format_grid(grid, HORIZONTAL_LAYER).split("\n")
        self.assertEqual(vertical[3], "00  # · · · · ")
        self.assertEqual(horizontal[3], "00  # # # · · ")
        self.assertEqual(horizontal[4], "01  · · · · · ")

    def test_summary(self) -> None:
        summary = format_summary(sample_grid(), "ABC").split("\n")
        self.assertEqual(summary[0], "SUMMARY (ABC)")
        self.assertIn("SIZE: 5x5", summary)
        self.assertIn("CROSSES: 2", summary)
        self.assertIn("ISOLATED WORDS: 0", summary)
        self.assertIn("FILL: 5 20%", summary)
        self.assertTrue(summary[-1].startswith("SCORE: "))


class ClueTests(unittest.TestCase):
    def setUp(self) -> None:
        self.compilation = compile_dictionaries(
            [[["CAT", "feline"], ["COW", "bovine", "cattle"], ["OWL"]]]
        )
        self.clues = ClueSelector(self.compilation, random.Random("CLUES"))

    def test_listing_order(self) -> None:
        grid = Grid(5, 5)
        grid.place(1, "COW", Orientation.VERTICAL, 0, 0)
        grid.place(2, "OWL", Orientation.HORIZONTAL, 0, 1)
        grid.place(0, "CAT", Orientation.HORIZONTAL, 2, 0)
        self.assertEqual([p.word for p in listing_order(grid)], ["CAT", "OWL", "COW"])

    def test_pick_draws_among_options(self) -> None:
        grid = sample_grid()
        self.assertEqual(self.clues.pick(grid.placements[0]), "feline")
        self.assertIn(self.clues.pick(grid.placements[1]), ("bovine", "cattle"))

    def test_word_without_options_has_no_clue(self) -> None:
        grid = Grid(5, 5)
        grid.place(2, "OWL", Orientation.HORIZONTAL, 0, 0)
        self.assertIsNone(self.clues.pick(grid.placements[0]))

    def test_question_records_follow_placement_order(self) -> None:
        records = self.clues.question_records(sample_grid())
        self.assertEqual([r["word"] for r in records], ["CAT", "COW"])
        self.assertEqual(
            records[0], {"x": 0, "y": 0, "horizontal": True, "word": "CAT", "question": "feline"}
        )
        self.assertFalse(records[1]["horizontal"])

    def test_same_seed_picks_same_clues(self) -> None:
        first = ClueSelector(self.compilation, random.Random("SAME")).question_records(sample_grid())
        second = ClueSelector(self.compilation, random.Random("SAME")).question_records(sample_grid())
        self.assertEqual(first, second)

    def test_to_json_keeps_accents(self) -> None:
        text = to_json([{"x": 0, "y": 0, "horizontal": True, "word": "CANCIÓN", "question": None}])
        self.assertIn("CANCIÓN", text)
        self.assertEqual(json.loads(text)[0]["question"], None)

    def test_format_questions(self) -> None:
        text = format_questions(self.clues.question_records(sample_grid()))
        horizontal, vertical = text.split("\n\n")
        self.assertEqual(horizontal, "HORIZONTAL:\n0000:CAT: feline")
        self.assertTrue(vertical.startswith("VERTICAL:\n0000:COW: "))


class SolutionFormattingTests(unittest.TestCase):
    def test_empty_population_renders_nothing(self) -> None:
        self.assertEqual(format_solutions([]), "")

    def test_side_by_side_columns(self) -> None:
        first, second = sample_grid(), sample_grid()
        lines = format_solutions([first, second], visible_solutions=2, seed="XYZ").split("\n")
        # each grid gets a column of max(26, 5 * 2 + 5) characters
        self.assertEqual(len(lines[3]), 52)
        self.assertTrue(lines[3].startswith("00  C A T · · "))
        self.assertEqual(lines[3][26:40], "00  C A T · · ")

    def test_questions_and_summary_follow_grid(self) -> None:
        compilation = compile_dictionaries([[["CAT", "feline"], ["COW", "bovine"]]])
        clues = ClueSelector(compilation, random.Random("OUT"))
        grid = sample_grid()
        text = format_solutions([grid], questions=[clues.question_records(grid)], seed="XYZ")
        self.assertIn("HORIZONTAL:\n0000:CAT: feline", text)
        self.assertIn("VERTICAL:\n0000:COW: bovine", text)
        self.assertIn("SUMMARY (XYZ)", text)

    def test_pretty_print_writes_to_stream(self) -> None:
        stream = io.StringIO()
        pretty_print_solutions([sample_grid()], stream=stream, seed="XYZ")
        self.assertIn("SUMMARY (XYZ)", stream.getvalue())


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
