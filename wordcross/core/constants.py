"""Shared constants and enumerations for the word-cross builder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple


WORDS_MIN_COUNT = 3
WORDS_MAX_COUNT = 20
WORD_MIN_LENGTH = 4

BOARD_MAX_WIDTH = 18
BOARD_MAX_HEIGHT = 16

HORIZONTAL_CROSSING_BONUS = 3
VERTICAL_CROSSING_BONUS = 4


class Direction(IntEnum):
    """Word directions supported by the grid; the value is the wire ``d``."""

    HORIZONTAL = 0
    VERTICAL = 1

    @property
    def step(self) -> Tuple[int, int]:
        return (1, 0) if self is Direction.HORIZONTAL else (0, 1)


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    width: int
    height: int

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height
