"""Fuzzy matching for the emoji selection list."""

from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")

# Bonus points awarded on top of the base score for each matched character.
MATCH_SCORE = 1
CONSECUTIVE_BONUS = 4
WORD_START_BONUS = 3


def fuzzy_score(query: str, text: str) -> int | None:
    """Score how well ``query`` matches ``text`` as a subsequence.

    Matching is case-insensitive. Returns None when the characters of the query
    do not all appear in order in ``text``. Higher scores mean better matches:
    consecutive characters and characters at the start of a word count more.
    An empty query matches everything with a score of 0.
    """
    query = query.strip().lower()
    if not query:
        return 0

    haystack = text.lower()
    score = 0
    position = 0
    previous = -2
    for char in query:
        if char == " ":
            continue
        found = haystack.find(char, position)
        if found == -1:
            return None

        score += MATCH_SCORE
        if found == previous + 1:
            score += CONSECUTIVE_BONUS
        if found == 0 or not haystack[found - 1].isalnum():
            score += WORD_START_BONUS

        previous = found
        position = found + 1

    return score


def fuzzy_filter(query: str, items: Iterable[T], key=str) -> list[T]:
    """Return the items matching ``query``, best match first.

    Items with equal scores keep their original order.
    """
    scored: list[tuple[int, int, T]] = []
    for index, item in enumerate(items):
        score = fuzzy_score(query, key(item))
        if score is not None:
            scored.append((-score, index, item))

    scored.sort(key=lambda entry: (entry[0], entry[1]))
    return [item for _, _, item in scored]


def window(items: Sequence[T], offset: int, size: int) -> tuple[int, list[T]]:
    """Clamp ``offset`` to the valid range and return the visible slice."""
    if size < 1:
        raise ValueError("window size must be at least 1")

    max_offset = max(len(items) - size, 0)
    offset = min(max(offset, 0), max_offset)
    return offset, list(items[offset : offset + size])
