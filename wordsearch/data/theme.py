"""Candidate word sources for personalized puzzles."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol, Sequence

from ..core.constants import FALLBACK_WORDS
from ..core.exceptions import WordProviderError
from ..utils.logger import get_logger
from .normalization import clean_word


LOGGER = get_logger(__name__)


@dataclass
class ChildProfile:
    """Personalization fields collected from the child."""

    name: str = ""
    age: str = ""
    favorite_animal: str = ""
    favorite_color: str = ""
    favorite_food: str = ""
    hobby: str = ""

    def interests(self) -> List[str]:
        return [
            value
            for value in (self.favorite_animal, self.favorite_color, self.favorite_food, self.hobby)
            if value
        ]


@dataclass
class WordListOutput:
    """Wraps provider results with the source that produced them."""

    words: List[str] = field(default_factory=list)
    source: str = "unknown"


class WordProvider(Protocol):
    """Protocol implemented by all candidate word providers."""

    def generate(self, profile: ChildProfile, limit: int = 20) -> WordListOutput:
        ...


class UserWordListProvider:
    """Returns a caller-supplied list of words."""

    def __init__(self, raw_words: Sequence[str]) -> None:
        self._words = [item.strip() for item in raw_words if item and item.strip()]

    def generate(self, profile: ChildProfile, limit: int = 20) -> WordListOutput:
        return WordListOutput(words=list(self._words), source="user")


class FallbackWordProvider:
    """Last-resort list used when nothing else produced words."""

    def generate(self, profile: ChildProfile, limit: int = 20) -> WordListOutput:
        return WordListOutput(words=list(FALLBACK_WORDS)[:limit], source="fallback")


DEFAULT_INTEREST_BUCKETS: Dict[str, List[str]] = {
    "animal": [
        "PAWS", "TAIL", "FUR", "NEST", "ZOO", "FARM", "JUNGLE", "SAFARI",
        "WILD", "ROAR", "FEATHER", "BURROW", "CUB", "PUPPY", "KITTEN",
    ],
    "color": [
        "RAINBOW", "PAINT", "CRAYON", "BRIGHT", "SHADE", "GLITTER",
        "SPARKLE", "BRUSH", "CANVAS", "PRISM",
    ],
    "food": [
        "SNACK", "PICNIC", "LUNCH", "TASTY", "YUMMY", "KITCHEN", "SPOON",
        "PLATE", "BAKE", "TREAT", "FEAST",
    ],
    "hobby": [
        "PLAY", "GAME", "TEAM", "PRACTICE", "FRIENDS", "PARK", "FUN",
        "SKILL", "MUSIC", "DANCE", "JUMP",
    ],
    "magic": [
        "MAGIC", "WAND", "WISH", "STAR", "DREAM", "CASTLE", "DRAGON",
        "FAIRY", "SPELL", "MOON", "CLOUD", "SMILE",
    ],
}


class ProfileWordProvider:
    """Builds a themed word list locally from a child's profile.

    The profile fields themselves come first, followed by words drawn from
    the interest buckets, so the child's own answers get placement priority.
    """

    def __init__(
        self,
        buckets: Optional[Dict[str, List[str]]] = None,
        seed: Optional[int] = None,
    ) -> None:
        source = buckets or DEFAULT_INTEREST_BUCKETS
        self.buckets = {key: [w.upper() for w in words if w] for key, words in source.items()}
        self.rng = random.Random(seed)

    def generate(self, profile: ChildProfile, limit: int = 20) -> WordListOutput:
        if not profile.name and not profile.interests():
            raise WordProviderError("Profile has no name or interests to build words from")

        personal: List[str] = []
        for value in [profile.name, *profile.interests()]:
            # Multi-word answers ("ice cream") contribute each word separately.
            personal.extend(part for part in value.split() if part)

        themed: List[str] = []
        bucket_keys = ["animal", "color", "food", "hobby"]
        fields = [profile.favorite_animal, profile.favorite_color, profile.favorite_food, profile.hobby]
        for key, value in zip(bucket_keys, fields):
            if value:
                themed.extend(self.buckets.get(key, []))
        themed.extend(self.buckets.get("magic", []))
        self.rng.shuffle(themed)

        results = [w.upper() for w in personal + themed][:limit]
        LOGGER.info("Profile provider produced %s words for %s", len(results), profile.name or "anonymous")
        return WordListOutput(words=results, source="profile")


def merge_word_providers(
    primary: Optional[WordProvider],
    fallbacks: Sequence[WordProvider],
    profile: ChildProfile,
    target: int = 20,
) -> WordListOutput:
    """Attempt primary provider, cascaded fallbacks, and deduplicate results."""

    collected: List[str] = []
    seen: set[str] = set()
    sources: List[str] = []

    def extend(output: WordListOutput) -> None:
        added = False
        for word in output.words:
            key = clean_word(word)
            if not key or key in seen:
                continue
            collected.append(word)
            seen.add(key)
            added = True
            if len(collected) >= target:
                break
        if added:
            sources.append(output.source)

    providers = ([primary] if primary else []) + list(fallbacks)
    for provider in providers:
        if len(collected) >= target:
            break
        try:
            extend(provider.generate(profile, limit=target))
        except Exception as exc:
            LOGGER.warning("Word provider %s failed: %s", type(provider).__name__, exc)

    return WordListOutput(words=collected[:target], source="+".join(sources) or "none")
