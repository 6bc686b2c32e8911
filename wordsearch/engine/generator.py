"""Word search grid generation.

Words are normalized, laid out on an empty square board, and every cell left
over is filled with a random letter. Words that cannot be fit are dropped
from the puzzle rather than failing the whole generation.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from ..core.constants import (DEFAULT_GRID_SIZE, MAX_PLACEMENT_ATTEMPTS,
                              MIN_WORD_LENGTH, PlacementStrategy)
from ..core.exceptions import PlacementError
from ..core.models import PlacedWord, WordSearchResult
from ..data.normalization import normalize_words
from ..utils.logger import get_logger
from .grid import LetterGrid


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    size: int = DEFAULT_GRID_SIZE
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS
    min_word_length: int = MIN_WORD_LENGTH
    seed: Optional[int] = None
    sort_by_length: bool = False
    strategy: PlacementStrategy | str = PlacementStrategy.RANDOM
    solver_timeout_seconds: float = 5.0

    def __post_init__(self) -> None:
        if self.size < 3:
            raise ValueError(f"Grid size must be at least 3, got {self.size}")
        if self.min_word_length < MIN_WORD_LENGTH:
            raise ValueError(f"min_word_length must be at least {MIN_WORD_LENGTH}, got {self.min_word_length}")
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be positive")
        self.strategy = PlacementStrategy(self.strategy)


class WordSearchGenerator:
    """Lays out candidate words on a square letter board."""

    def __init__(self, config: Optional[GeneratorConfig] = None, rng: Optional[random.Random] = None) -> None:
        self.config = config or GeneratorConfig()
        self.rng = rng or random.Random(self.config.seed)

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, words: Iterable[str]) -> WordSearchResult:
        requested = tuple(w for w in words if isinstance(w, str))
        candidates = normalize_words(requested, self.config.size, self.config.min_word_length)
        # A repeated word would be unfindable twice and block completion.
        candidates = list(dict.fromkeys(candidates))
        if self.config.sort_by_length:
            # Stable sort keeps input order among equal lengths.
            candidates.sort(key=len, reverse=True)

        grid = LetterGrid(self.config.size)
        if self.config.strategy == PlacementStrategy.CPSAT:
            try:
                placed, dropped = self._place_with_solver(grid, candidates)
            except PlacementError as exc:
                LOGGER.warning("Solver placement failed, using random placement: %s", exc)
                grid = LetterGrid(self.config.size)
                placed, dropped = self._place_randomly(grid, candidates)
        else:
            placed, dropped = self._place_randomly(grid, candidates)

        filler = grid.fill_empty(self.rng)
        LOGGER.info(
            "Placed %d/%d words on %dx%d grid (%d filler letters)",
            len(placed),
            len(candidates),
            self.config.size,
            self.config.size,
            filler,
        )
        if dropped:
            LOGGER.info("Dropped words: %s", ", ".join(dropped))

        return WordSearchResult(
            grid=grid.freeze(),
            placed_words=tuple(placed),
            requested_words=requested,
            dropped_words=tuple(dropped),
            seed=self.config.seed,
        )

    # ------------------------------------------------------------------
    # Placement strategies
    # ------------------------------------------------------------------
    def _place_randomly(
        self, grid: LetterGrid, words: Sequence[str]
    ) -> Tuple[List[PlacedWord], List[str]]:
        placed: List[PlacedWord] = []
        dropped: List[str] = []
        for word in words:
            result = grid.try_random_placement(word, self.rng, self.config.max_attempts)
            if result is None:
                LOGGER.debug("Dropping %s after %d attempts", word, self.config.max_attempts)
                dropped.append(word)
                continue
            placed.append(result)
        return placed, dropped

    def _place_with_solver(
        self, grid: LetterGrid, words: Sequence[str]
    ) -> Tuple[List[PlacedWord], List[str]]:
        from .solver import solve_placements

        chosen = solve_placements(
            words,
            self.config.size,
            self.rng,
            timeout=self.config.solver_timeout_seconds,
        )
        if chosen is None:
            raise PlacementError("CP-SAT returned no feasible layout")

        by_index = {index: (start, direction) for index, start, direction in chosen}
        placed: List[PlacedWord] = []
        dropped: List[str] = []
        for index, word in enumerate(words):
            if index not in by_index:
                LOGGER.debug("Solver left %s unplaced", word)
                dropped.append(word)
                continue
            start, direction = by_index[index]
            placed.append(grid.place_word(word, start, direction))
        return placed, dropped


def generate(
    words: Iterable[str],
    size: int = DEFAULT_GRID_SIZE,
    rng: Optional[random.Random] = None,
    **options,
) -> WordSearchResult:
    """Build a word search from ``words`` on a ``size`` x ``size`` board.

    Never raises for any word list; an empty or fully filtered list yields a
    board of random letters with no placed words.
    """

    config = GeneratorConfig(size=size, **options)
    return WordSearchGenerator(config, rng=rng).generate(words)
