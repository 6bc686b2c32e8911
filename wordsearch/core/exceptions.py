"""Custom exception hierarchy for the word search engine."""


class WordSearchError(Exception):
    """Base exception for word search failures."""


class WordProviderError(WordSearchError):
    """Raised when a word provider cannot supply candidate words."""


class PlacementError(WordSearchError):
    """Raised when a placement strategy cannot produce a layout."""


class ValidationError(WordSearchError):
    """Raised when the puzzle integrity checks fail."""
