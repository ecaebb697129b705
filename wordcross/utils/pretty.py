"""Pretty-print helpers for grids and boards."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List, Optional

from ..engine.grid import EMPTY_SYMBOL

if TYPE_CHECKING:
    from ..core.models import Board
    from ..engine.grid import CellGrid


EMPTY = "."


def board_rows(board: Board) -> List[str]:
    """Rebuild the letter rows of a board from its placements."""

    rows = [[EMPTY] * board.width for _ in range(board.height)]
    for placement in board.words:
        for letter, (x, y) in zip(placement.word, placement.cells):
            rows[y][x] = letter
    return ["".join(row) for row in rows]


def format_rows(rows: List[str]) -> str:
    width = len(rows[0]) if rows else 0
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(rows):
        row_render = " ".join(f"{symbol:>2}" for symbol in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def format_grid(grid: CellGrid) -> str:
    return format_rows([row.replace(EMPTY_SYMBOL, EMPTY) for row in grid.rows()])


def pretty_print_board(board: Board, *, label: Optional[str] = None, stream=None) -> None:
    """Print a board in a human-friendly format, followed by its word list."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_rows(board_rows(board)), file=stream)
    print(file=stream)
    print(f"Size: {board.width} x {board.height}, {len(board.words)} words", file=stream)
    for placement in board.words:
        direction = placement.position.direction.name.lower()
        print(
            f"  {placement.word:<20} ({placement.position.x},{placement.position.y}) {direction}",
            file=stream,
        )
