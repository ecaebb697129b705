"""Word-cross build orchestration.

The builder sizes a grid from the word list, then runs randomized greedy
attempts (:func:`wordcross.engine.placement.attempt`) against it:

  1. A failed attempt is discarded; after ``attempts_per_size`` failures the
     grid grows by one column or row, alternating, up to the maximum bounds.
  2. A successful attempt is accepted once every word crosses another word,
     or once ``successes_per_size`` successes were seen at this size. The
     most recent success is kept, then trimmed.
"""

from __future__ import annotations

import math
import random
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..core.constants import BOARD_MAX_HEIGHT, BOARD_MAX_WIDTH
from ..core.exceptions import BudgetExhaustedError, CrosswordError, SearchExhaustedError
from ..core.models import Board, Placement
from ..data.normalization import parse_word_list
from ..utils.logger import get_logger
from ..utils.pretty import format_grid
from .grid import CellGrid
from .placement import attempt


LOGGER = get_logger(__name__)


@dataclass
class BuilderConfig:
    max_width: int = BOARD_MAX_WIDTH
    max_height: int = BOARD_MAX_HEIGHT
    attempts_per_size: int = 100
    successes_per_size: int = 10
    seed: Optional[int] = None
    max_attempts: Optional[int] = None
    time_budget_seconds: Optional[float] = None


def initial_size(words: Sequence[str], max_width: int, max_height: int) -> Tuple[int, int]:
    """Estimate a starting grid size from the letter count and word lengths."""

    lengths = [len(word) for word in words]
    letter_count = sum(lengths)
    longest = max(lengths)
    shortest = min(lengths)

    area = math.ceil(letter_count * 1.5)
    side = math.ceil(math.sqrt(area))
    width = max(longest, side)
    height = min(side, math.ceil(area / width))
    height = max(height, shortest)
    return min(width, max_width), min(height, max_height)


def is_fully_crossed(grid: CellGrid, placements: Sequence[Placement]) -> bool:
    """Return ``True`` when every placed word has a crossing cell in its span."""

    for placement in placements:
        span = grid.span(placement.position, len(placement.word))
        if not any(cell.has_crossing for cell in span):
            return False
    return True


class CrossBuilder:
    """Sizes the grid and drives attempts until a layout is accepted."""

    def __init__(
        self,
        words: Sequence[str],
        config: Optional[BuilderConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        if not words:
            raise CrosswordError("Cannot build a layout without words")
        self.words: List[str] = list(words)
        self.config = config or BuilderConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.grid = CellGrid(1, 1)
        self.placements: List[Placement] = []
        self.attempts = 0
        self._grow_width = True

    @property
    def size(self) -> Tuple[int, int]:
        return self.grid.size

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def build(self) -> bool:
        """Search for a layout; return ``False`` when the bounds are exhausted.

        Raises :class:`BudgetExhaustedError` when a configured attempt or time
        budget runs out first.
        """

        config = self.config
        started = time.monotonic()
        self._init_grid(*initial_size(self.words, config.max_width, config.max_height))
        self.attempts = 0
        self._grow_width = True
        successes = 0
        failures = 0

        while True:
            self._check_budget(started)
            self.attempts += 1
            placements = attempt(self.words, self.grid, self.rng)
            if placements is not None:
                successes += 1
                crossed = is_fully_crossed(self.grid, placements)
                LOGGER.debug(
                    "Attempt %s placed all words (success %s, fully crossed: %s)",
                    self.attempts,
                    successes,
                    crossed,
                )
                if not crossed and successes < config.successes_per_size:
                    continue
                self._accept(placements)
                LOGGER.info(
                    "Build OK after %s attempts, cost %.3fs\n%s",
                    self.attempts,
                    time.monotonic() - started,
                    format_grid(self.grid),
                )
                return True

            failures += 1
            if failures < config.attempts_per_size:
                continue
            if not self._grow():
                LOGGER.info(
                    "Build failed after %s attempts, cost %.3fs",
                    self.attempts,
                    time.monotonic() - started,
                )
                return False
            successes = 0
            failures = 0

    def board(self) -> Board:
        if not self.placements:
            raise CrosswordError("No accepted layout; call build() first")
        width, height = self.size
        return Board(width=width, height=height, words=list(self.placements))

    # ------------------------------------------------------------------
    # Sizing
    # ------------------------------------------------------------------
    def _init_grid(self, width: int, height: int) -> None:
        LOGGER.info("Grid size %sx%s", width, height)
        self.grid = CellGrid(width, height)

    def _grow(self) -> bool:
        width, height = self.size
        max_width, max_height = self.config.max_width, self.config.max_height
        if width >= max_width and height >= max_height:
            return False
        if self._grow_width and width < max_width:
            width += 1
        elif height < max_height:
            height += 1
        else:
            width += 1
        self._grow_width = not self._grow_width
        self._init_grid(width, height)
        return True

    def _check_budget(self, started: float) -> None:
        max_attempts = self.config.max_attempts
        if max_attempts is not None and self.attempts >= max_attempts:
            raise BudgetExhaustedError(f"Attempt budget of {max_attempts} exhausted")
        budget = self.config.time_budget_seconds
        if budget is not None and time.monotonic() - started > budget:
            raise BudgetExhaustedError(f"Time budget of {budget:.1f}s exhausted")

    def _accept(self, placements: List[Placement]) -> None:
        dx, dy = self.grid.trim()
        self.placements = [
            Placement(word=p.word, position=p.position.shifted(dx, dy)) for p in placements
        ]


def build_board(
    words: Sequence[str],
    config: Optional[BuilderConfig] = None,
    rng: Optional[random.Random] = None,
) -> Board:
    """Build a trimmed board holding every word, or raise :class:`SearchExhaustedError`."""

    builder = CrossBuilder(words, config=config, rng=rng)
    if not builder.build():
        raise SearchExhaustedError(
            f"No layout found for {len(builder.words)} words within "
            f"{builder.config.max_width}x{builder.config.max_height}"
        )
    return builder.board()


def try_build(
    words: Sequence[str],
    config: Optional[BuilderConfig] = None,
    rng: Optional[random.Random] = None,
) -> Tuple[Optional[Board], bool]:
    """Return ``(board, True)`` on success and ``(None, False)`` on exhaustion."""

    try:
        return build_board(words, config=config, rng=rng), True
    except SearchExhaustedError as exc:
        LOGGER.warning("Build failed: %s", exc)
        return None, False


def build_board_from_text(raw: str, config: Optional[BuilderConfig] = None) -> Board:
    """Validate a comma-separated word list and build its board."""

    return build_board(parse_word_list(raw), config=config)
