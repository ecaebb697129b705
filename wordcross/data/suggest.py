"""Suggest dictionary words that can be spelled from a set of letters."""

from __future__ import annotations

from collections import Counter
from typing import List

from .dictionary import WordDictionary


def suggest_words(
    letters: str,
    dictionary: WordDictionary,
    min_length: int = 4,
    max_length: int = 8,
    limit: int = 20,
) -> List[str]:
    """Return dictionary words spelled with a sub-multiset of ``letters``.

    Each letter may be used as often as it appears in ``letters``. When more
    than ``limit`` words qualify, the longest are kept (ties alphabetical).
    The result is sorted alphabetically.
    """

    available = Counter(letters.strip().lower())
    if not available:
        return []

    upper = min(max_length, sum(available.values()))
    matches: List[str] = []
    for length in range(min_length, upper + 1):
        for word in dictionary.iter_length(length):
            needed = Counter(word)
            if all(available[char] >= count for char, count in needed.items()):
                matches.append(word)

    if len(matches) > limit:
        matches.sort(key=lambda word: (-len(word), word))
        matches = matches[:limit]
    return sorted(matches)
