"""Shared constants and enumerations for the word search engine."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


DEFAULT_GRID_SIZE = 14
MIN_WORD_LENGTH = 3
MAX_PLACEMENT_ATTEMPTS = 200
ALPHABET = string.ascii_uppercase
EMPTY = ""

FALLBACK_WORDS: Tuple[str, ...] = ("MAGIC", "AYLA", "BAYLA", "FUN")


class Direction(str, Enum):
    """The eight lattice lines a word may be written along."""

    RIGHT = "RIGHT"
    DOWN = "DOWN"
    DOWN_RIGHT = "DOWN_RIGHT"
    LEFT = "LEFT"
    UP = "UP"
    UP_LEFT = "UP_LEFT"
    DOWN_LEFT = "DOWN_LEFT"
    UP_RIGHT = "UP_RIGHT"

    @property
    def step(self) -> Tuple[int, int]:
        return _STEPS[self]

    @classmethod
    def from_step(cls, dr: int, dc: int) -> "Direction":
        for direction, step in _STEPS.items():
            if step == (dr, dc):
                return direction
        raise ValueError(f"Not a unit lattice step: {(dr, dc)}")


_STEPS = {
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.DOWN_RIGHT: (1, 1),
    Direction.LEFT: (0, -1),
    Direction.UP: (-1, 0),
    Direction.UP_LEFT: (-1, -1),
    Direction.DOWN_LEFT: (1, -1),
    Direction.UP_RIGHT: (-1, 1),
}

DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)


class PlacementStrategy(str, Enum):
    """How the generator searches for word positions."""

    RANDOM = "random"
    CPSAT = "cpsat"


class SelectionState(str, Enum):
    """Gesture state of a puzzle session."""

    IDLE = "IDLE"
    SELECTING = "SELECTING"


class CellState(str, Enum):
    """Mutually exclusive highlight states of a board cell."""

    SELECTED = "SELECTED"
    FOUND = "FOUND"
    UNFOUND = "UNFOUND"


@dataclass(frozen=True)
class Bounds:
    """Simple square bounds helper."""

    size: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size
