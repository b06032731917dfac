import unittest

from conwords.core.constants import Orientation
from conwords.core.exceptions import ValidationError
from conwords.core.models import Placement
from conwords.engine.grid import Grid
from conwords.engine.validator import GridValidator


class GridTests(unittest.TestCase):
    def test_cells_are_independent(self) -> None:
        grid = Grid(4, 3)
        grid.cell(0, 0).letter = "A"
        grid.cell(0, 0).vertical = True
        self.assertTrue(grid.is_empty(1, 0))
        self.assertTrue(grid.is_empty(0, 1))
        self.assertFalse(grid.cell(3, 2).vertical)
        self.assertEqual(len(grid.cells), 3)
        self.assertEqual(len(grid.cells[0]), 4)

    def test_place_sets_flags_and_strips_accents(self) -> None:
        grid = Grid(6, 6)
        grid.place(7, "ÁRBOL", Orientation.HORIZONTAL, 1, 2)
        self.assertEqual("".join(grid.letter(x, 2) for x in range(1, 6)), "ARBOL")
        self.assertTrue(all(grid.cell(x, 2).horizontal for x in range(1, 6)))
        self.assertFalse(grid.cell(1, 2).vertical)
        self.assertEqual(grid.used_word_ids, {7})
        self.assertEqual(grid.placements[0].word, "ÁRBOL")
        self.assertEqual(grid.count_filled(), 5)

    def test_clone_is_deep(self) -> None:
        grid = Grid(5, 5)
        grid.place(0, "CAT", Orientation.VERTICAL, 0, 0)
        clone = grid.clone()
        clone.place(1, "ANT", Orientation.HORIZONTAL, 0, 1)
        self.assertEqual(len(grid.placements), 1)
        self.assertEqual(grid.used_word_ids, {0})
        self.assertTrue(grid.is_empty(1, 1))
        self.assertFalse(grid.cell(0, 1).horizontal)

    def test_placements_at(self) -> None:
        grid = Grid(5, 5)
        grid.place(0, "CAT", Orientation.VERTICAL, 0, 0)
        grid.place(1, "ANT", Orientation.HORIZONTAL, 0, 1)
        self.assertEqual([p.word for p in grid.placements_at(0, 1)], ["CAT", "ANT"])
        self.assertEqual([p.word for p in grid.placements_at(2, 1)], ["ANT"])
        self.assertEqual(grid.placements_at(4, 4), [])


class PlacementTests(unittest.TestCase):
    def test_crosses_requires_perpendicular_overlap(self) -> None:
        down = Placement(0, "CAT", Orientation.VERTICAL, 0, 0)
        across = Placement(1, "ANT", Orientation.HORIZONTAL, 0, 1)
        apart = Placement(2, "DOG", Orientation.HORIZONTAL, 1, 4)
        parallel = Placement(3, "COW", Orientation.VERTICAL, 1, 0)
        self.assertTrue(down.crosses(across))
        self.assertTrue(across.crosses(down))
        self.assertFalse(down.crosses(apart))
        self.assertFalse(down.crosses(parallel))

    def test_cells(self) -> None:
        placement = Placement(0, "SEA", Orientation.VERTICAL, 2, 1)
        self.assertEqual(placement.cells, [(2, 1), (2, 2), (2, 3)])
        self.assertTrue(placement.covers(2, 3))
        self.assertFalse(placement.covers(2, 4))


class ValidatorTests(unittest.TestCase):
    def test_consistent_grid_passes(self) -> None:
        grid = Grid(5, 5)
        grid.place(0, "CAT", Orientation.VERTICAL, 0, 0)
        grid.place(1, "ANT", Orientation.HORIZONTAL, 0, 1)
        self.assertTrue(GridValidator().validate(grid).ok)

    def test_letter_conflict_is_reported(self) -> None:
        grid = Grid(5, 5)
        grid.place(0, "CAT", Orientation.VERTICAL, 0, 0)
        grid.place(1, "ANT", Orientation.HORIZONTAL, 0, 1)
        grid.cell(0, 1).letter = "E"
        result = GridValidator().validate(grid)
        self.assertFalse(result.ok)
        self.assertIn("Letter conflict", result.messages[0])

    def test_parallel_overlap_is_reported(self) -> None:
        grid = Grid(5, 5)
        grid.place(0, "TEA", Orientation.HORIZONTAL, 0, 0)
        grid.place(1, "EAR", Orientation.HORIZONTAL, 1, 0)
        result = GridValidator().validate(grid)
        self.assertFalse(result.ok)
        self.assertIn("overlap", result.messages[0])

    def test_checks_raise_validation_error(self) -> None:
        grid = Grid(3, 3)
        grid.placements.append(Placement(0, "LONG", Orientation.HORIZONTAL, 0, 0))
        with self.assertRaises(ValidationError):
            GridValidator()._check_bounds(grid)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
