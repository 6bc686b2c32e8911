"""CLI entrypoint for the word search generator."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, TextIO

from wordsearch.core.constants import DEFAULT_GRID_SIZE, PlacementStrategy
from wordsearch.core.models import Position
from wordsearch.data.theme import (ChildProfile, FallbackWordProvider, ProfileWordProvider,
                                   UserWordListProvider, WordListOutput, WordProvider,
                                   merge_word_providers)
from wordsearch.engine.generator import GeneratorConfig, WordSearchGenerator
from wordsearch.engine.session import PuzzleSession
from wordsearch.engine.validator import GridValidator
from wordsearch.utils.logger import configure_logging, get_logger
from wordsearch.utils.pretty import pretty_print_puzzle, print_puzzle_stats

LOGGER = get_logger("wordsearch.cli")


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def parse_path(line: str) -> List[Position]:
    """Parse ``"r,c r,c ..."`` into a list of cells; raises ValueError on bad input."""
    cells: List[Position] = []
    for token in line.split():
        row, _, col = token.partition(",")
        cells.append((int(row), int(col)))
    return cells


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate and play personalized word search puzzles",
    )
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Explicit candidate words",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    parser.add_argument("--name", type=str, default="", help="Child's name")
    parser.add_argument("--age", type=str, default="", help="Child's age")
    parser.add_argument("--animal", type=str, default="", help="Favorite animal")
    parser.add_argument("--color", type=str, default="", help="Favorite color")
    parser.add_argument("--food", type=str, default="", help="Favorite food")
    parser.add_argument("--hobby", type=str, default="", help="Favorite hobby")
    parser.add_argument("--limit", type=int, default=20, help="Maximum candidate words to request")
    parser.add_argument("--size", type=int, default=DEFAULT_GRID_SIZE, help="Grid size in cells")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--strategy",
        type=str,
        choices=[s.value for s in PlacementStrategy],
        default=PlacementStrategy.RANDOM.value,
        help="Word placement strategy",
    )
    parser.add_argument(
        "--sort-by-length",
        action="store_true",
        help="Place longer words first to raise the placement rate",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument("--pretty", action="store_true", help="Print the grid and stats instead of JSON")
    parser.add_argument(
        "--play",
        action="store_true",
        help="Solve interactively: each stdin line is a path of row,col cells",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def build_primary_provider(args: argparse.Namespace, profile: ChildProfile) -> Optional[WordProvider]:
    user_words: List[str] = []
    if args.words:
        user_words.extend(args.words)
    if args.words_file:
        user_words.extend(parse_words_file(args.words_file))

    if user_words:
        return UserWordListProvider(user_words)
    if profile.name or profile.interests():
        return ProfileWordProvider(seed=args.seed)
    return None


def collect_words(primary: Optional[WordProvider], profile: ChildProfile, limit: int) -> WordListOutput:
    """Ask ``primary`` for words; the fallback list is used only when it yields none."""
    candidates = merge_word_providers(primary, [], profile, target=limit)
    if not candidates.words:
        LOGGER.warning("No candidate words from %s, using the fallback list", candidates.source)
        candidates = merge_word_providers(None, [FallbackWordProvider()], profile, target=limit)
    return candidates


def play(session: PuzzleSession, lines: Iterable[str], stream: TextIO) -> None:
    """Feed gesture paths to ``session`` until the puzzle is complete or input ends."""
    session.on_found(lambda word: print(f"Found {word}!", file=stream))
    session.on_complete(lambda: print("You found every word!", file=stream))
    pretty_print_puzzle(session.puzzle, session, stream=stream)
    if session.is_complete():
        return
    for line in lines:
        line = line.strip()
        if not line:
            continue
        try:
            cells = parse_path(line)
        except ValueError:
            print(f"Could not read path {line!r}; use 'row,col row,col ...'", file=stream)
            continue
        if session.select(cells) is None:
            print("No word there, try again.", file=stream)
        pretty_print_puzzle(session.puzzle, session, stream=stream)
        if session.is_complete():
            return


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.size < 3:
        parser.error("--size must be at least 3")
    if args.limit < 1:
        parser.error("--limit must be positive")

    profile = ChildProfile(
        name=args.name,
        age=args.age,
        favorite_animal=args.animal,
        favorite_color=args.color,
        favorite_food=args.food,
        hobby=args.hobby,
    )
    primary = build_primary_provider(args, profile)
    candidates = collect_words(primary, profile, args.limit)
    LOGGER.info("Using %d candidate words from %s", len(candidates.words), candidates.source)

    config = GeneratorConfig(
        size=args.size,
        seed=args.seed,
        sort_by_length=args.sort_by_length,
        strategy=args.strategy,
    )
    result = WordSearchGenerator(config).generate(candidates.words)
    validation = GridValidator().validate(result)
    if not result.placed_words:
        LOGGER.warning("No words could be placed; the puzzle has nothing to find")

    if args.play:
        play(PuzzleSession(result), sys.stdin, sys.stdout)
        return

    if args.pretty:
        pretty_print_puzzle(result)
        print_puzzle_stats(result)
        return

    payload: Dict[str, Any] = result.to_jsonable()
    payload["source"] = candidates.source
    payload["validation"] = validation.messages

    output_text = json.dumps(payload, ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)


if __name__ == "__main__":  # pragma: no cover
    main()
