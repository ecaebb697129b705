"""Legality checks for candidate word positions.

Every function here is pure: it reads the grid and never mutates it. A
candidate is legal when all of the following hold:

- the span lies inside the grid;
- no letter sits right before the first or right after the last cell, in the
  word's own direction;
- the span never covers two consecutive pre-existing letters;
- on each adjacent parallel line (extended one cell past both ends) no two
  consecutive cells are occupied, the line above/left touches no word end and
  the line below/right touches no word start;
- every pre-existing letter in the span equals the word's letter there.
"""

from __future__ import annotations

from ..core.constants import Direction
from ..core.models import Position
from .grid import CellGrid


def within_bounds(grid: CellGrid, position: Position, length: int) -> bool:
    if position.x < 0 or position.y < 0:
        return False
    if position.direction is Direction.HORIZONTAL:
        return position.x + length <= grid.width and position.y < grid.height
    return position.y + length <= grid.height and position.x < grid.width


# The checks below index ``grid.cells`` directly and assume the span itself is
# inside the grid; ``is_legal`` runs ``within_bounds`` first.


def no_pre_post(grid: CellGrid, position: Position, length: int) -> bool:
    dx, dy = position.direction.step
    cells = grid.cells
    width, height = grid.width, grid.height
    before = (position.x - dx, position.y - dy)
    after = (position.x + dx * length, position.y + dy * length)
    for x, y in (before, after):
        if 0 <= x < width and 0 <= y < height and cells[y][x].letter is not None:
            return False
    return True


def no_inner_run(grid: CellGrid, position: Position, length: int) -> bool:
    """Reject spans covering two consecutive letters; separated crossings are fine."""

    dx, dy = position.direction.step
    cells = grid.cells
    x, y = position.x, position.y
    run = 0
    for _ in range(length):
        if cells[y][x].letter is None:
            run = 0
        else:
            run += 1
            if run > 1:
                return False
        x += dx
        y += dy
    return True


def no_parallel_adjacency(grid: CellGrid, position: Position, length: int) -> bool:
    """Check both neighbouring lines.

    Touching cells are counted per consecutive run, so one line may touch
    several separated cells as long as none of them ends (above/left) or
    starts (below/right) a word.
    """

    return _line_is_clear(grid, position, length, -1, forbid_start=False) and _line_is_clear(
        grid, position, length, 1, forbid_start=True
    )


def crossing_letters_match(grid: CellGrid, position: Position, word: str) -> bool:
    dx, dy = position.direction.step
    cells = grid.cells
    x, y = position.x, position.y
    for letter in word:
        existing = cells[y][x].letter
        if existing is not None and existing != letter:
            return False
        x += dx
        y += dy
    return True


def is_legal(grid: CellGrid, position: Position, word: str) -> bool:
    length = len(word)
    return (
        within_bounds(grid, position, length)
        and no_pre_post(grid, position, length)
        and no_inner_run(grid, position, length)
        and no_parallel_adjacency(grid, position, length)
        and crossing_letters_match(grid, position, word)
    )


# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------
def _line_is_clear(
    grid: CellGrid, position: Position, length: int, offset: int, forbid_start: bool
) -> bool:
    """Scan the line ``offset`` steps across the span, one cell past each end."""

    dx, dy = position.direction.step
    line_x = position.x + dy * offset
    line_y = position.y + dx * offset
    width, height = grid.width, grid.height
    if not (0 <= line_x < width and 0 <= line_y < height):
        return True

    cells = grid.cells
    run = 0
    for step in range(-1, length + 1):
        x = line_x + dx * step
        y = line_y + dy * step
        if not (0 <= x < width and 0 <= y < height):
            continue
        cell = cells[y][x]
        if cell.letter is None:
            run = 0
            continue
        if cell.is_start if forbid_start else cell.is_end:
            return False
        run += 1
        if run > 1:
            return False
    return True
