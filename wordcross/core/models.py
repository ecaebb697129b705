"""Data models supporting the word-cross builder."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .constants import Direction


@dataclass
class Cell:
    """Represents a grid cell with placement metadata."""

    letter: Optional[str] = None
    is_start: bool = False
    is_end: bool = False
    has_crossing: bool = False

    def is_empty(self) -> bool:
        return self.letter is None

    def clear(self) -> None:
        self.letter = None
        self.is_start = False
        self.is_end = False
        self.has_crossing = False


@dataclass(frozen=True)
class Position:
    """Location of a word's first letter plus its direction."""

    x: int
    y: int
    direction: Direction

    def cells(self, length: int) -> List[Tuple[int, int]]:
        dx, dy = self.direction.step
        return [(self.x + dx * i, self.y + dy * i) for i in range(length)]

    def shifted(self, dx: int, dy: int) -> "Position":
        return Position(self.x - dx, self.y - dy, self.direction)


@dataclass
class Placement:
    """A word committed to the grid at a given position."""

    word: str
    position: Position

    @property
    def cells(self) -> List[Tuple[int, int]]:
        return self.position.cells(len(self.word))

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "w": self.word,
            "x": self.position.x,
            "y": self.position.y,
            "d": int(self.position.direction),
        }


@dataclass
class Board:
    """Final trimmed layout returned to callers."""

    width: int
    height: int
    words: List[Placement] = field(default_factory=list)

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "words": [placement.to_jsonable() for placement in self.words],
        }
