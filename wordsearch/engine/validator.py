"""Deterministic rule validation for generated word searches."""

from __future__ import annotations

from typing import List

from ..core.constants import ALPHABET, Direction
from ..core.exceptions import ValidationError
from ..core.models import PlacedWord, ValidationResult, WordSearchResult
from ..data.normalization import normalize_words
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class GridValidator:
    """Runs deterministic validation over a finished puzzle."""

    def validate(self, result: WordSearchResult) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_square(result)
            self._check_letters_valid(result)
            self._check_placements(result)
            self._check_words_requested(result)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_square(self, result: WordSearchResult) -> None:
        size = result.size
        for r, row in enumerate(result.grid):
            if len(row) != size:
                raise ValidationError(f"Row {r} has {len(row)} cells, expected {size}")

    def _check_letters_valid(self, result: WordSearchResult) -> None:
        for r, row in enumerate(result.grid):
            for c, letter in enumerate(row):
                if len(letter) != 1 or letter not in ALPHABET:
                    raise ValidationError(f"Invalid letter {letter!r} at ({r},{c})")

    def _check_placements(self, result: WordSearchResult) -> None:
        for placed in result.placed_words:
            if len(placed.positions) != len(placed.word):
                raise ValidationError(f"{placed.word} has {len(placed.positions)} positions")
            spelled = "".join(result.letter(r, c) for r, c in placed.positions)
            if spelled != placed.word:
                raise ValidationError(f"{placed.word} reads as {spelled} on the grid")
            if not self._is_straight_line(placed):
                raise ValidationError(f"{placed.word} does not follow a single direction")

    def _check_words_requested(self, result: WordSearchResult) -> None:
        eligible = set(normalize_words(result.requested_words, result.size))
        for placed in result.placed_words:
            if placed.word not in eligible:
                raise ValidationError(f"{placed.word} was not among the requested words")

    @staticmethod
    def _is_straight_line(placed: PlacedWord) -> bool:
        if len(placed.positions) < 2:
            return True
        (r0, c0), (r1, c1) = placed.positions[:2]
        try:
            traced = Direction.from_step(r1 - r0, c1 - c0)
        except ValueError:
            return False
        if traced != placed.direction:
            return False
        dr, dc = traced.step
        start_row, start_col = placed.start
        return all(
            pos == (start_row + dr * i, start_col + dc * i)
            for i, pos in enumerate(placed.positions)
        )
