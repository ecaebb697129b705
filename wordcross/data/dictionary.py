"""Read-only word dictionary used for suggestions."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Iterator, List, Set

from ..core.exceptions import DictionaryLoadError
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class DictionaryConfig:
    """Configuration for dictionary loading."""

    path: Path | str
    encoding: str = "utf-8"


class WordDictionary:
    """Immutable set of lower-case words, indexed by length.

    Built once and then shared freely; nothing mutates it after construction.
    """

    def __init__(self, words: Iterable[str]) -> None:
        cleaned = {word.strip().lower() for word in words if word and word.strip()}
        self._words: FrozenSet[str] = frozenset(cleaned)
        by_length: Dict[int, Set[str]] = defaultdict(set)
        for word in self._words:
            by_length[len(word)].add(word)
        self._words_by_length: Dict[int, FrozenSet[str]] = {
            length: frozenset(entries) for length, entries in by_length.items()
        }

    @classmethod
    def from_config(cls, config: DictionaryConfig) -> "WordDictionary":
        source = Path(config.path)
        if not source.exists():
            raise DictionaryLoadError(f"Missing dictionary file: {source}")
        try:
            lines: List[str] = source.read_text(encoding=config.encoding).splitlines()
        except (OSError, UnicodeDecodeError) as exc:
            raise DictionaryLoadError(f"Cannot read dictionary {source}: {exc}") from exc
        dictionary = cls(lines)
        LOGGER.info("Loaded dictionary %s with %s words", source, len(dictionary))
        return dictionary

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "WordDictionary":
        return cls(words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def iter_length(self, length: int) -> Iterable[str]:
        return self._words_by_length.get(length, frozenset())
