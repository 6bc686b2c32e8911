import threading
import unittest

from helpers import sample_puzzle

from wordsearch.core.constants import CellState, SelectionState
from wordsearch.core.models import WordSearchResult
from wordsearch.engine.session import PuzzleSession

CAT = [(0, 0), (0, 1), (0, 2)]
DOG = [(1, 0), (1, 1), (1, 2)]
SUN = [(2, 0), (2, 1), (2, 2)]


class SelectionStateTests(unittest.TestCase):
    def setUp(self) -> None:
        self.session = PuzzleSession(sample_puzzle())

    def test_begin_starts_a_fresh_path(self) -> None:
        self.session.begin_selection(3, 3)
        self.session.begin_selection(0, 0)
        self.assertEqual(self.session.state, SelectionState.SELECTING)
        self.assertEqual(self.session.selection, ((0, 0),))

    def test_extend_skips_repeated_cell(self) -> None:
        self.session.begin_selection(0, 0)
        self.session.extend_selection(0, 0)
        self.session.extend_selection(0, 1)
        self.session.extend_selection(0, 1)
        self.assertEqual(self.session.selection, ((0, 0), (0, 1)))

    def test_extend_while_idle_is_ignored(self) -> None:
        self.session.extend_selection(0, 1)
        self.assertEqual(self.session.selection, ())
        self.assertEqual(self.session.state, SelectionState.IDLE)

    def test_end_while_idle_is_ignored(self) -> None:
        self.assertIsNone(self.session.end_selection())
        self.assertEqual(self.session.found_words, ())

    def test_end_clears_path_and_returns_to_idle(self) -> None:
        self.session.begin_selection(3, 3)
        self.session.extend_selection(2, 3)
        self.assertIsNone(self.session.end_selection())
        self.assertEqual(self.session.selection, ())
        self.assertEqual(self.session.state, SelectionState.IDLE)

    def test_cancel_discards_without_matching(self) -> None:
        self.session.begin_selection(*CAT[0])
        for cell in CAT[1:]:
            self.session.extend_selection(*cell)
        self.session.cancel_selection()
        self.assertEqual(self.session.state, SelectionState.IDLE)
        self.assertEqual(self.session.selection, ())
        self.assertEqual(self.session.found_words, ())


class VerificationTests(unittest.TestCase):
    def setUp(self) -> None:
        self.session = PuzzleSession(sample_puzzle())
        self.found = []
        self.completions = 0
        self.session.on_found(self.found.append)
        self.session.on_complete(self._complete)

    def _complete(self) -> None:
        self.completions += 1

    def test_forward_selection_finds_word(self) -> None:
        self.assertEqual(self.session.select(CAT), "CAT")
        self.assertEqual(self.session.found_words, ("CAT",))
        self.assertEqual(self.found, ["CAT"])
        self.assertEqual(self.session.selection, ())

    def test_reversed_selection_finds_word(self) -> None:
        self.assertEqual(self.session.select(list(reversed(DOG))), "DOG")

    def test_repeat_selection_does_not_double_count(self) -> None:
        self.session.select(CAT)
        self.assertIsNone(self.session.select(CAT))
        self.assertEqual(self.session.found_words, ("CAT",))
        self.assertEqual(self.found, ["CAT"])

    def test_unplaced_word_is_not_found(self) -> None:
        # ACT is spelled along the bottom row but was never placed.
        self.assertIsNone(self.session.select([(3, 0), (3, 1), (3, 2)]))
        self.assertEqual(self.session.found_words, ())

    def test_bent_path_does_not_match(self) -> None:
        self.assertIsNone(self.session.select([(0, 0), (0, 1), (1, 1)]))

    def test_superstring_selection_does_not_match(self) -> None:
        self.assertIsNone(self.session.select(CAT + [(0, 3)]))
        self.assertEqual(self.session.found_words, ())

    def test_off_board_cells_do_not_match(self) -> None:
        self.assertIsNone(self.session.select([(0, 0), (0, 1), (0, 2), (0, 9)]))
        self.assertEqual(self.session.selection, ())

    def test_completion_flips_on_last_word(self) -> None:
        self.session.select(CAT)
        self.session.select(SUN)
        self.assertFalse(self.session.is_complete())
        self.assertEqual(self.completions, 0)
        self.session.select(DOG)
        self.assertTrue(self.session.is_complete())
        self.assertEqual(self.completions, 1)
        self.assertEqual(self.session.remaining_words, [])

    def test_verify_mid_gesture(self) -> None:
        self.session.begin_selection(*SUN[0])
        self.session.extend_selection(*SUN[1])
        self.assertIsNone(self.session.verify())
        self.session.extend_selection(*SUN[2])
        self.assertEqual(self.session.verify(), "SUN")

    def test_complete_listener_fires_once_per_puzzle(self) -> None:
        self.session.select(CAT)
        self.session.select(DOG)
        self.session.begin_selection(*SUN[0])
        for cell in SUN[1:]:
            self.session.extend_selection(*cell)
        self.assertEqual(self.session.verify(), "SUN")
        self.assertIsNone(self.session.verify())
        self.assertIsNone(self.session.end_selection())
        self.assertEqual(self.completions, 1)
        self.assertEqual(self.found, ["CAT", "DOG", "SUN"])

    def test_concurrent_verify_completes_once(self) -> None:
        completions = []
        session = PuzzleSession(sample_puzzle())
        session.on_complete(lambda: completions.append(threading.get_ident()))
        session.select(CAT)
        session.select(DOG)
        session.begin_selection(*SUN[0])
        for cell in SUN[1:]:
            session.extend_selection(*cell)

        results = []
        barrier = threading.Barrier(8)

        def race() -> None:
            barrier.wait()
            results.append(session.verify())

        threads = [threading.Thread(target=race) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        self.assertEqual([r for r in results if r is not None], ["SUN"])
        self.assertEqual(len(completions), 1)
        self.assertTrue(session.is_complete())


class CellStateTests(unittest.TestCase):
    def test_three_exclusive_states(self) -> None:
        session = PuzzleSession(sample_puzzle())
        session.select(CAT)
        session.begin_selection(0, 0)
        session.extend_selection(1, 0)
        self.assertEqual(session.cell_state(0, 0), CellState.SELECTED)
        self.assertEqual(session.cell_state(1, 0), CellState.SELECTED)
        self.assertEqual(session.cell_state(0, 2), CellState.FOUND)
        self.assertEqual(session.cell_state(2, 2), CellState.UNFOUND)

    def test_jsonable_snapshot(self) -> None:
        session = PuzzleSession(sample_puzzle())
        session.select(DOG)
        snapshot = session.to_jsonable()
        self.assertEqual(snapshot["found_words"], ["DOG"])
        self.assertEqual(snapshot["remaining_words"], ["CAT", "SUN"])
        self.assertFalse(snapshot["complete"])
        self.assertEqual(snapshot["state"], "IDLE")


class PuzzleLifecycleTests(unittest.TestCase):
    def test_completion_counts_placed_words(self) -> None:
        puzzle = sample_puzzle()
        partial = WordSearchResult(
            grid=puzzle.grid,
            placed_words=puzzle.placed_words[:2],
            requested_words=puzzle.requested_words,
        )
        session = PuzzleSession(partial)
        self.assertIsNone(session.select(SUN))
        session.select(CAT)
        self.assertFalse(session.is_complete())
        session.select(DOG)
        self.assertTrue(session.is_complete())

    def test_empty_puzzle_is_vacuously_complete(self) -> None:
        empty = WordSearchResult(grid=(("A", "B", "C"),) * 3, placed_words=())
        session = PuzzleSession(empty)
        self.assertTrue(session.is_complete())
        self.assertIsNone(session.select([(0, 0), (0, 1), (0, 2)]))

    def test_new_puzzle_starts_with_fresh_state(self) -> None:
        session = PuzzleSession.new_puzzle(["cat", "dog", "sun"], size=8, seed=5)
        self.assertEqual(session.puzzle.size, 8)
        self.assertEqual(session.found_words, ())
        for placed in session.puzzle.placed_words:
            self.assertEqual(session.select(placed.positions), placed.word)
        self.assertTrue(session.is_complete())

        regenerated = PuzzleSession.new_puzzle(["cat", "dog", "sun"], size=8, seed=6)
        self.assertEqual(regenerated.found_words, ())
        self.assertFalse(regenerated.is_complete())


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
