"""Interactive solving state for one word search puzzle.

A session owns the gesture selection and the set of found words for a single
generated puzzle. Input events arrive as ``begin``/``extend``/``end`` calls
(pointer down, move and up); a completed gesture is checked against the
placed words in both reading directions. Out-of-order events are ignored
rather than raised, since pointer streams routinely deliver stray moves and
releases.
"""

from __future__ import annotations

import threading
from typing import Callable, Iterable, List, Optional, Tuple

from ..core.constants import DEFAULT_GRID_SIZE, CellState, SelectionState
from ..core.models import Position, WordSearchResult
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

FoundListener = Callable[[str], None]
CompleteListener = Callable[[], None]


class PuzzleSession:
    """Tracks the selection gesture and found words for a puzzle."""

    def __init__(self, puzzle: WordSearchResult) -> None:
        self.puzzle = puzzle
        self.state = SelectionState.IDLE
        self._selection: List[Position] = []
        self._found: List[str] = []
        self._targets = set(puzzle.words)
        self._found_listeners: List[FoundListener] = []
        self._complete_listeners: List[CompleteListener] = []
        self._lock = threading.Lock()

    @classmethod
    def new_puzzle(cls, words: Iterable[str], size: int = DEFAULT_GRID_SIZE, **options) -> "PuzzleSession":
        """Generate a fresh puzzle and open a session on it."""

        from .generator import generate

        return cls(generate(words, size=size, **options))

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------
    def on_found(self, listener: FoundListener) -> None:
        self._found_listeners.append(listener)

    def on_complete(self, listener: CompleteListener) -> None:
        self._complete_listeners.append(listener)

    # ------------------------------------------------------------------
    # Gesture events
    # ------------------------------------------------------------------
    def begin_selection(self, row: int, col: int) -> None:
        with self._lock:
            self._selection = [(row, col)]
            self.state = SelectionState.SELECTING

    def extend_selection(self, row: int, col: int) -> None:
        with self._lock:
            if self.state != SelectionState.SELECTING:
                return
            if self._selection and self._selection[-1] == (row, col):
                return
            self._selection.append((row, col))

    def end_selection(self) -> Optional[str]:
        """Finish the gesture and return the newly found word, if any."""

        with self._lock:
            if self.state != SelectionState.SELECTING:
                return None
            self.state = SelectionState.IDLE
            try:
                match, completed = self._verify_locked()
            finally:
                self._selection = []
        if match is not None:
            self._notify(match, completed)
        return match

    def cancel_selection(self) -> None:
        with self._lock:
            self.state = SelectionState.IDLE
            self._selection = []

    def select(self, cells: Iterable[Position]) -> Optional[str]:
        """Replay a whole gesture over ``cells``."""

        cells = list(cells)
        if not cells:
            return None
        self.begin_selection(*cells[0])
        for row, col in cells[1:]:
            self.extend_selection(row, col)
        return self.end_selection()

    # ------------------------------------------------------------------
    # Verification
    # ------------------------------------------------------------------
    def verify(self) -> Optional[str]:
        """Check the current selection without ending the gesture."""

        with self._lock:
            match, completed = self._verify_locked()
        if match is not None:
            self._notify(match, completed)
        return match

    def _verify_locked(self) -> Tuple[Optional[str], bool]:
        """Return the newly found word and whether that find completed the puzzle."""

        candidate = self._selected_text()
        if candidate is None:
            return None, False
        reversed_candidate = candidate[::-1]
        for word in (candidate, reversed_candidate):
            if word in self._targets and word not in self._found:
                self._found.append(word)
                LOGGER.debug("Found %s (%d/%d)", word, len(self._found), len(self.puzzle.placed_words))
                return word, self.is_complete()
        return None, False

    def _selected_text(self) -> Optional[str]:
        size = self.puzzle.size
        letters = []
        for row, col in self._selection:
            if not (0 <= row < size and 0 <= col < size):
                return None
            letters.append(self.puzzle.letter(row, col))
        return "".join(letters)

    def _notify(self, word: str, completed: bool) -> None:
        for listener in self._found_listeners:
            listener(word)
        if completed:
            LOGGER.info("Puzzle complete: all %d words found", len(self._found))
            for listener in self._complete_listeners:
                listener()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_complete(self) -> bool:
        return len(self._found) == len(self.puzzle.placed_words)

    @property
    def selection(self) -> Tuple[Position, ...]:
        return tuple(self._selection)

    @property
    def found_words(self) -> Tuple[str, ...]:
        return tuple(self._found)

    @property
    def remaining_words(self) -> List[str]:
        return [word for word in self.puzzle.words if word not in self._found]

    def cell_state(self, row: int, col: int) -> CellState:
        if (row, col) in self._selection:
            return CellState.SELECTED
        for placed in self.puzzle.placed_words:
            if placed.word in self._found and (row, col) in placed.positions:
                return CellState.FOUND
        return CellState.UNFOUND

    def to_jsonable(self) -> dict:
        return {
            "state": self.state.value,
            "selection": [list(cell) for cell in self._selection],
            "found_words": list(self._found),
            "remaining_words": self.remaining_words,
            "complete": self.is_complete(),
        }
