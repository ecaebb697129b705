"""Validation and normalization of submitted word lists."""

from __future__ import annotations

from typing import Iterable, List

from ..core.constants import WORD_MIN_LENGTH, WORDS_MAX_COUNT, WORDS_MIN_COUNT
from ..core.exceptions import WordListError


def split_words(raw: str) -> List[str]:
    """Split a comma-separated string, dropping blank entries."""

    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def validate_words(words: Iterable[str]) -> List[str]:
    """Check the list shape and return the words upper-cased."""

    entries = [word.strip() for word in words if word and word.strip()]
    if len(entries) < WORDS_MIN_COUNT:
        raise WordListError(f"need at least {WORDS_MIN_COUNT} words")
    if len(entries) > WORDS_MAX_COUNT:
        raise WordListError(f"should not be more than {WORDS_MAX_COUNT} words")
    for word in entries:
        if len(word) < WORD_MIN_LENGTH:
            raise WordListError(
                f"invalid word: {word}, word should not be less than {WORD_MIN_LENGTH} letters"
            )
    return [word.upper() for word in entries]


def parse_word_list(raw: str) -> List[str]:
    return validate_words(split_words(raw))


__all__ = ["parse_word_list", "split_words", "validate_words"]
