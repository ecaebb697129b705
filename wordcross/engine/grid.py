"""Letter grid representation, placement and trimming."""

from __future__ import annotations

from typing import List, Tuple

from ..core.constants import Bounds
from ..core.exceptions import PlacementError
from ..core.models import Cell, Placement, Position
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

EMPTY_SYMBOL = "_"


class CellGrid:
    """Encapsulates the letter grid with placement helpers.

    Cells are stored row-major as ``cells[y][x]``.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.cells: List[List[Cell]] = [[Cell() for _ in range(width)] for _ in range(height)]

    @property
    def width(self) -> int:
        return len(self.cells[0])

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def bounds(self) -> Bounds:
        return Bounds(width=self.width, height=self.height)

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def cell(self, x: int, y: int) -> Cell:
        return self.cells[y][x]

    def is_occupied(self, x: int, y: int) -> bool:
        return self.cells[y][x].letter is not None

    def span(self, position: Position, length: int) -> List[Cell]:
        return [self.cells[y][x] for x, y in position.cells(length)]

    def rows(self) -> List[str]:
        return ["".join(cell.letter or EMPTY_SYMBOL for cell in row) for row in self.cells]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def clear(self) -> None:
        for row in self.cells:
            for cell in row:
                cell.clear()

    def place_word(self, word: str, position: Position) -> Placement:
        """Write ``word`` at ``position`` and flag start, end and crossing cells.

        Only bounds and letter agreement are enforced here; the adjacency
        rules live in :mod:`wordcross.engine.constraints`.
        """

        if not word:
            raise PlacementError("Cannot place an empty word")
        coords = position.cells(len(word))
        bounds = self.bounds
        for index, (x, y) in enumerate(coords):
            if not bounds.contains(x, y):
                raise PlacementError(f"Word {word} extends outside grid at {(x, y)}")
            existing = self.cells[y][x].letter
            if existing is not None and existing != word[index]:
                raise PlacementError(
                    f"Letter conflict at {(x, y)}: {existing} vs {word[index]}"
                )

        for index, (x, y) in enumerate(coords):
            cell = self.cells[y][x]
            if cell.letter is not None:
                cell.has_crossing = True
            else:
                cell.letter = word[index]
        first_x, first_y = coords[0]
        last_x, last_y = coords[-1]
        self.cells[first_y][first_x].is_start = True
        self.cells[last_y][last_x].is_end = True
        return Placement(word=word, position=position)

    # ------------------------------------------------------------------
    # Trimming
    # ------------------------------------------------------------------
    def trim(self) -> Tuple[int, int]:
        """Strip empty border rows and columns until every border holds a letter.

        Returns the number of leading columns and rows removed so callers
        can re-base coordinates onto the trimmed grid.
        """

        removed_cols = 0
        removed_rows = 0
        while True:
            changed = False
            if self.height > 1 and self._row_is_empty(0):
                self.cells = self.cells[1:]
                removed_rows += 1
                changed = True
            if self.height > 1 and self._row_is_empty(self.height - 1):
                self.cells = self.cells[:-1]
                changed = True
            if self.width > 1 and self._column_is_empty(0):
                self.cells = [row[1:] for row in self.cells]
                removed_cols += 1
                changed = True
            if self.width > 1 and self._column_is_empty(self.width - 1):
                self.cells = [row[:-1] for row in self.cells]
                changed = True
            if not changed:
                break
        if removed_cols or removed_rows:
            LOGGER.debug(
                "Trimmed grid to %sx%s (offset %s,%s)",
                self.width,
                self.height,
                removed_cols,
                removed_rows,
            )
        return removed_cols, removed_rows

    def _row_is_empty(self, y: int) -> bool:
        return all(cell.letter is None for cell in self.cells[y])

    def _column_is_empty(self, x: int) -> bool:
        return all(row[x].letter is None for row in self.cells)
