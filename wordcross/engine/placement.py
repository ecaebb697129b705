"""Candidate search and the per-attempt greedy placement loop."""

from __future__ import annotations

import random
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from ..core.constants import Direction
from ..core.models import Placement, Position
from ..utils.logger import get_logger
from .constraints import is_legal
from .grid import CellGrid
from .scoring import score_position


LOGGER = get_logger(__name__)


def iter_positions(grid: CellGrid, length: int) -> Iterator[Position]:
    """Yield every in-bounds position in scan order: horizontals first, row by row."""

    for y in range(grid.height):
        for x in range(grid.width - length + 1):
            yield Position(x, y, Direction.HORIZONTAL)
    for y in range(grid.height - length + 1):
        for x in range(grid.width):
            yield Position(x, y, Direction.VERTICAL)


def best_position(grid: CellGrid, word: str) -> Tuple[Optional[Position], int]:
    """Return the highest-scoring legal position for ``word``.

    Only a strictly greater score replaces the current best, so ties go to
    the first position in scan order. Border placements can score below
    zero and still qualify. Returns ``(None, -1)`` when no position is legal.
    """

    best: Optional[Position] = None
    best_score = -1
    for position in iter_positions(grid, len(word)):
        if not is_legal(grid, position, word):
            continue
        score = score_position(grid, position, word)
        if best is None or score > best_score:
            best = position
            best_score = score
    return best, best_score


def attempt(
    words: Sequence[str], grid: CellGrid, rng: random.Random
) -> Optional[List[Placement]]:
    """Run one randomized greedy attempt over ``words`` on a cleared ``grid``.

    Each round every unplaced word gets its best position; the word with the
    top score is committed, ties between words broken by ``rng``. Returns the
    placements in commit order, or ``None`` as soon as some unplaced word has
    no legal position left.
    """

    order = list(words)
    rng.shuffle(order)
    grid.clear()

    remaining = list(range(len(order)))
    placements: List[Placement] = []

    while remaining:
        candidates: Dict[int, Tuple[Position, int]] = {}
        for index in remaining:
            position, score = best_position(grid, order[index])
            if position is None:
                LOGGER.debug(
                    "No legal position for %s after %s placements", order[index], len(placements)
                )
                return None
            candidates[index] = (position, score)

        top = max(score for _, score in candidates.values())
        tied = [index for index in remaining if candidates[index][1] == top]
        choice = tied[rng.randrange(len(tied))] if len(tied) > 1 else tied[0]

        position, _ = candidates[choice]
        placements.append(grid.place_word(order[choice], position))
        remaining.remove(choice)

    return placements
