from wordsearch.core.constants import Direction
from wordsearch.core.models import PlacedWord, WordSearchResult

# C A T X
# D O G Y
# S U N Z
# A C T Q
SAMPLE_GRID = (
    ("C", "A", "T", "X"),
    ("D", "O", "G", "Y"),
    ("S", "U", "N", "Z"),
    ("A", "C", "T", "Q"),
)


def sample_puzzle() -> WordSearchResult:
    return WordSearchResult(
        grid=SAMPLE_GRID,
        placed_words=(
            PlacedWord("CAT", ((0, 0), (0, 1), (0, 2)), Direction.RIGHT),
            PlacedWord("DOG", ((1, 0), (1, 1), (1, 2)), Direction.RIGHT),
            PlacedWord("SUN", ((2, 0), (2, 1), (2, 2)), Direction.RIGHT),
        ),
        requested_words=("cat", "dog", "sun"),
    )
