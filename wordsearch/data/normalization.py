"""Shared helpers for word normalization."""

from __future__ import annotations

import re
from typing import Iterable, List

from ..core.constants import MIN_WORD_LENGTH

WORD_RE = re.compile(r"[^A-Z]")


def clean_word(text: str) -> str:
    """Return ``text`` uppercased with every character outside A-Z removed."""

    if not text:
        return ""
    return WORD_RE.sub("", text.upper())


def normalize_words(
    words: Iterable[str],
    size: int,
    min_length: int = MIN_WORD_LENGTH,
) -> List[str]:
    """Clean ``words`` and keep those that fit on a ``size`` board.

    Input order is preserved since earlier words get the first placement
    attempts.
    """

    normalized: List[str] = []
    for raw in words:
        if not isinstance(raw, str):
            continue
        cleaned = clean_word(raw)
        if min_length <= len(cleaned) <= size:
            normalized.append(cleaned)
    return normalized


__all__ = ["clean_word", "normalize_words"]
