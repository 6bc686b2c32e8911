"""Data models supporting the word search engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .constants import Direction

Position = Tuple[int, int]
FrozenGrid = Tuple[Tuple[str, ...], ...]


@dataclass(frozen=True)
class PlacedWord:
    """A word written into the grid with its cells in letter order."""

    word: str
    positions: Tuple[Position, ...]
    direction: Direction

    @property
    def start(self) -> Position:
        return self.positions[0]

    def to_jsonable(self) -> dict:
        return {
            "word": self.word,
            "positions": [list(pos) for pos in self.positions],
            "direction": self.direction.value,
        }


@dataclass(frozen=True)
class WordSearchResult:
    """Immutable outcome of one generation call."""

    grid: FrozenGrid
    placed_words: Tuple[PlacedWord, ...]
    requested_words: Tuple[str, ...] = ()
    dropped_words: Tuple[str, ...] = ()
    seed: Optional[int] = None

    @property
    def size(self) -> int:
        return len(self.grid)

    @property
    def words(self) -> List[str]:
        return [placed.word for placed in self.placed_words]

    @property
    def placement_ratio(self) -> float:
        eligible = len(self.placed_words) + len(self.dropped_words)
        return len(self.placed_words) / eligible if eligible else 0.0

    def letter(self, row: int, col: int) -> str:
        return self.grid[row][col]

    def to_jsonable(self) -> dict:
        return {
            "size": self.size,
            "grid": [list(row) for row in self.grid],
            "words": self.words,
            "placed_words": [placed.to_jsonable() for placed in self.placed_words],
            "dropped_words": list(self.dropped_words),
            "seed": self.seed,
        }


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str] = field(default_factory=list)
