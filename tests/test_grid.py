import random
import unittest

from wordsearch.core.constants import ALPHABET, DIRECTIONS, EMPTY, Direction
from wordsearch.core.exceptions import PlacementError
from wordsearch.engine.grid import LetterGrid


class LetterGridPlacementTests(unittest.TestCase):
    def test_rejects_runs_leaving_the_board(self) -> None:
        grid = LetterGrid(5)
        self.assertFalse(grid.can_place("HORSE", (0, 1), Direction.RIGHT))
        self.assertFalse(grid.can_place("CAT", (1, 1), Direction.UP_LEFT))
        self.assertTrue(grid.can_place("HORSE", (4, 4), Direction.LEFT))

    def test_crossing_requires_matching_letter(self) -> None:
        grid = LetterGrid(5)
        grid.place_word("CAT", (0, 0), Direction.RIGHT)
        self.assertTrue(grid.can_place("ANT", (0, 1), Direction.DOWN))
        self.assertFalse(grid.can_place("OWL", (0, 1), Direction.DOWN))

    def test_place_word_records_positions_in_letter_order(self) -> None:
        grid = LetterGrid(6)
        placed = grid.place_word("SUN", (4, 1), Direction.UP_RIGHT)
        self.assertEqual(placed.positions, ((4, 1), (3, 2), (2, 3)))
        self.assertEqual([grid.cell(r, c) for r, c in placed.positions], ["S", "U", "N"])

    def test_place_word_raises_on_conflict(self) -> None:
        grid = LetterGrid(4)
        grid.place_word("DOG", (0, 0), Direction.DOWN)
        with self.assertRaises(PlacementError):
            grid.place_word("CAT", (0, 0), Direction.RIGHT)

    def test_random_placement_gives_up_after_budget(self) -> None:
        grid = LetterGrid(3)
        self.assertIsNone(grid.try_random_placement("ABCD", random.Random(0), max_attempts=50))

    def test_random_placement_covers_all_directions(self) -> None:
        seen = set()
        for seed in range(200):
            placed = LetterGrid(5).try_random_placement("ABC", random.Random(seed), max_attempts=200)
            seen.add(placed.direction)
        self.assertEqual(seen, set(DIRECTIONS))

    def test_fill_empty_leaves_no_blank_cells(self) -> None:
        grid = LetterGrid(4)
        grid.place_word("FUN", (1, 0), Direction.RIGHT)
        filled = grid.fill_empty(random.Random(3))
        self.assertEqual(filled, 13)
        self.assertEqual(list(grid.empty_cells()), [])
        for row in grid.freeze():
            for letter in row:
                self.assertNotEqual(letter, EMPTY)
                self.assertIn(letter, ALPHABET)
        self.assertEqual("".join(grid.freeze()[1][:3]), "FUN")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
