"""Heuristic scoring of legal candidate placements."""

from __future__ import annotations

from ..core.constants import HORIZONTAL_CROSSING_BONUS, VERTICAL_CROSSING_BONUS, Direction
from ..core.models import Position
from .grid import CellGrid


def score_position(grid: CellGrid, position: Position, word: str) -> int:
    """Score a legal placement; higher is better.

    Longer words, words nearer the middle of the grid and words that cross
    more letters score higher. Vertical crossings earn slightly more than
    horizontal ones, and a word lying on a border row or column is penalised.
    """

    length = len(word)
    if position.direction is Direction.HORIZONTAL:
        index, extent, bonus = position.y, grid.height, HORIZONTAL_CROSSING_BONUS
    else:
        index, extent, bonus = position.x, grid.width, VERTICAL_CROSSING_BONUS

    distance = index + 1
    if distance * 2 > extent:
        distance = extent - distance

    score = length * distance // 2
    crossings = sum(1 for cell in grid.span(position, length) if not cell.is_empty())
    score += bonus * crossings
    if index == 0 or index == extent - 1:
        score -= length // 2
    return score
