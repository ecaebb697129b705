"""Word-cross builder: lays a short word list out as a crossword-style grid.

This package exposes the public API surface via:

- ``wordcross.engine.generator.CrossBuilder``: sizes the grid and drives attempts.
- ``wordcross.engine.generator.build_board`` / ``try_build``: one-call builds.
- ``wordcross.data.dictionary.WordDictionary`` and
  ``wordcross.data.suggest.suggest_words``: letter-set word suggestions.
"""

from .core.models import Board, Placement, Position
from .engine.generator import BuilderConfig, CrossBuilder, build_board, try_build
from .data.dictionary import DictionaryConfig, WordDictionary
from .data.suggest import suggest_words

__all__ = [
    "Board",
    "BuilderConfig",
    "CrossBuilder",
    "DictionaryConfig",
    "Placement",
    "Position",
    "WordDictionary",
    "build_board",
    "suggest_words",
    "try_build",
]

__version__ = "0.1.0"
