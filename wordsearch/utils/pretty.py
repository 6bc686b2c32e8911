"""Pretty-print helpers for word search grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Optional

from ..core.constants import CellState

if TYPE_CHECKING:
    from ..core.models import WordSearchResult
    from ..engine.session import PuzzleSession


# Found letters are lowercased, selected letters bracketed.
def cell_symbol(letter: str, state: CellState = CellState.UNFOUND) -> str:
    if state == CellState.SELECTED:
        return f"[{letter}]"
    if state == CellState.FOUND:
        return letter.lower()
    return letter


def format_grid(result: WordSearchResult, session: Optional[PuzzleSession] = None) -> str:
    width = result.size
    header_cells = [f"{c:>3}" for c in range(width)]
    lines = ["    " + "".join(header_cells)]
    lines.append("    " + "-" * (3 * width))
    for r, row in enumerate(result.grid):
        symbols = [
            cell_symbol(letter, session.cell_state(r, c) if session else CellState.UNFOUND)
            for c, letter in enumerate(row)
        ]
        row_render = "".join(f"{symbol:>3}" for symbol in symbols)
        lines.append(f"{r:>2} |{row_render}")
    return "\n".join(lines)


def format_word_list(result: WordSearchResult, session: Optional[PuzzleSession] = None) -> str:
    found = set(session.found_words) if session else set()
    rendered = [f"~{word}~" if word in found else word for word in result.words]
    return "Words to find: " + (" ".join(rendered) if rendered else "(none)")


def pretty_print_puzzle(
    result: WordSearchResult,
    session: Optional[PuzzleSession] = None,
    *,
    label: str | None = None,
    stream=None,
) -> None:
    """Print the grid and the words to find in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(result, session), file=stream)
    print(format_word_list(result, session), file=stream)


def print_puzzle_stats(result: WordSearchResult, *, stream=None) -> None:
    """Print placement statistics for a generated puzzle."""

    stream = stream or sys.stdout
    total_cells = result.size * result.size
    covered = {pos for placed in result.placed_words for pos in placed.positions}
    directions = Counter(placed.direction.value for placed in result.placed_words)
    lengths = [len(word) for word in result.words]

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {result.size} x {result.size} ({total_cells} cells)", file=stream)
    print(f"  Word cells:    {len(covered)} ({len(covered) / total_cells * 100:.0f}%)", file=stream)

    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Placed:        {len(result.placed_words)} ({result.placement_ratio * 100:.0f}% of eligible)", file=stream)
    if result.dropped_words:
        print(f"  Dropped:       {', '.join(result.dropped_words)}", file=stream)
    if lengths:
        print(f"  Length range:  {min(lengths)}-{max(lengths)} (avg {sum(lengths) / len(lengths):.1f})", file=stream)
        dist_parts = [f"{name}:{count}" for name, count in sorted(directions.items())]
        print(f"  Directions:    {' '.join(dist_parts)}", file=stream)

    if result.seed is not None:
        print(file=stream)
        print(f"Seed: {result.seed}", file=stream)
