"""Letter grid representation and placement helpers."""

from __future__ import annotations

import random
from typing import Iterator, List, Optional, Tuple

from ..core.constants import ALPHABET, DIRECTIONS, EMPTY, Bounds, Direction
from ..core.exceptions import PlacementError
from ..core.models import FrozenGrid, PlacedWord, Position
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class LetterGrid:
    """Mutable square board used while a puzzle is being laid out."""

    def __init__(self, size: int) -> None:
        self.size = size
        self.bounds = Bounds(size)
        self.cells: List[List[str]] = [[EMPTY for _ in range(size)] for _ in range(size)]

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    @staticmethod
    def line(start: Position, direction: Direction, length: int) -> Tuple[Position, ...]:
        row, col = start
        dr, dc = direction.step
        return tuple((row + dr * i, col + dc * i) for i in range(length))

    def fits(self, start: Position, direction: Direction, length: int) -> bool:
        """Whether a run of ``length`` cells from ``start`` stays on the board."""

        row, col = start
        dr, dc = direction.step
        end_row = row + dr * (length - 1)
        end_col = col + dc * (length - 1)
        return self.bounds.contains(row, col) and self.bounds.contains(end_row, end_col)

    # ------------------------------------------------------------------
    # Word placement
    # ------------------------------------------------------------------
    def can_place(self, word: str, start: Position, direction: Direction) -> bool:
        if not self.fits(start, direction, len(word)):
            return False
        for letter, (row, col) in zip(word, self.line(start, direction, len(word))):
            existing = self.cells[row][col]
            if existing != EMPTY and existing != letter:
                return False
        return True

    def place_word(self, word: str, start: Position, direction: Direction) -> PlacedWord:
        if not self.can_place(word, start, direction):
            raise PlacementError(f"Cannot place {word!r} at {start} going {direction.value}")
        positions = self.line(start, direction, len(word))
        for letter, (row, col) in zip(word, positions):
            self.cells[row][col] = letter
        return PlacedWord(word=word, positions=positions, direction=direction)

    def try_random_placement(
        self,
        word: str,
        rng: random.Random,
        max_attempts: int,
    ) -> Optional[PlacedWord]:
        """Sample random direction/start pairs until one fits or attempts run out."""

        for attempt in range(max_attempts):
            direction = rng.choice(DIRECTIONS)
            start = (rng.randrange(self.size), rng.randrange(self.size))
            if self.can_place(word, start, direction):
                LOGGER.debug("Placed %s at %s %s after %d attempts", word, start, direction.value, attempt + 1)
                return self.place_word(word, start, direction)
        return None

    def fill_empty(self, rng: random.Random) -> int:
        """Replace every empty cell with a random letter and return how many were filled."""

        blanks = list(self.empty_cells())
        for row, col in blanks:
            self.cells[row][col] = rng.choice(ALPHABET)
        return len(blanks)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def cell(self, row: int, col: int) -> str:
        return self.cells[row][col]

    def empty_cells(self) -> Iterator[Position]:
        for r in range(self.size):
            for c in range(self.size):
                if self.cells[r][c] == EMPTY:
                    yield r, c

    def freeze(self) -> FrozenGrid:
        return tuple(tuple(row) for row in self.cells)
