"""Word search puzzle generator and interactive solver.

This package exposes the public API surface via:

- ``wordsearch.engine.generator.generate``: lays words out on a letter grid.
- ``wordsearch.engine.session.PuzzleSession``: tracks gestures and found words.
- ``wordsearch.data.theme`` helpers: candidate word providers.
"""

from .core.models import PlacedWord, WordSearchResult
from .engine.generator import GeneratorConfig, WordSearchGenerator, generate
from .engine.session import PuzzleSession

__all__ = [
    "GeneratorConfig",
    "PlacedWord",
    "PuzzleSession",
    "WordSearchGenerator",
    "WordSearchResult",
    "generate",
]

__version__ = "0.1.0"
