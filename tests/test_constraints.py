import unittest

from wordcross.core.constants import Direction
from wordcross.core.models import Position
from wordcross.engine.constraints import (
    crossing_letters_match,
    is_legal,
    no_inner_run,
    no_parallel_adjacency,
    no_pre_post,
    within_bounds,
)
from wordcross.engine.grid import CellGrid
from wordcross.engine.scoring import score_position

H = Direction.HORIZONTAL
V = Direction.VERTICAL


def grid_with_host(x: int = 0, y: int = 2) -> CellGrid:
    grid = CellGrid(8, 8)
    grid.place_word("HOST", Position(x, y, H))
    return grid


class ConstraintTests(unittest.TestCase):
    def test_vertical_crossing_on_matching_letter_is_legal(self) -> None:
        grid = grid_with_host()
        self.assertTrue(is_legal(grid, Position(2, 2, V), "SHOT"))

    def test_crossing_letter_mismatch_is_rejected(self) -> None:
        grid = grid_with_host()
        self.assertFalse(crossing_letters_match(grid, Position(2, 1, V), "SHOT"))
        self.assertFalse(is_legal(grid, Position(2, 1, V), "SHOT"))

    def test_within_bounds(self) -> None:
        grid = CellGrid(8, 8)
        self.assertTrue(within_bounds(grid, Position(4, 0, H), 4))
        self.assertFalse(within_bounds(grid, Position(5, 0, H), 4))
        self.assertFalse(within_bounds(grid, Position(0, 5, V), 4))
        self.assertFalse(is_legal(grid, Position(5, 0, H), "HOST"))

    def test_letter_right_before_start_is_rejected(self) -> None:
        grid = grid_with_host()
        self.assertFalse(no_pre_post(grid, Position(4, 2, H), 4))
        self.assertTrue(no_pre_post(grid, Position(5, 2, H), 3))

    def test_letter_right_after_end_is_rejected(self) -> None:
        grid = grid_with_host(x=4)
        self.assertFalse(no_pre_post(grid, Position(0, 2, H), 4))

    def test_vertical_letter_right_after_end_is_rejected(self) -> None:
        grid = CellGrid(8, 8)
        grid.place_word("SHOT", Position(2, 3, V))
        self.assertFalse(no_pre_post(grid, Position(2, 0, V), 3))
        self.assertTrue(no_pre_post(grid, Position(2, 0, V), 2))

    def test_run_of_two_existing_letters_is_rejected(self) -> None:
        grid = CellGrid(8, 8)
        grid.place_word("HOST", Position(0, 2, H))
        grid.place_word("MOST", Position(0, 3, H))
        self.assertFalse(no_inner_run(grid, Position(1, 0, V), 6))
        self.assertTrue(no_inner_run(grid, Position(1, 0, V), 3))

    def test_separated_existing_letters_may_both_be_crossed(self) -> None:
        grid = CellGrid(8, 8)
        grid.place_word("HOST", Position(0, 1, H))
        grid.place_word("MOST", Position(0, 3, H))
        self.assertTrue(no_inner_run(grid, Position(1, 0, V), 5))
        self.assertTrue(is_legal(grid, Position(1, 0, V), "TOTOM"))

    def test_parallel_line_may_touch_separated_inner_cells(self) -> None:
        grid = CellGrid(8, 8)
        grid.place_word("HOST", Position(1, 0, V))
        grid.place_word("MINT", Position(4, 0, V))
        # Row 2 holds S and N, inner letters of two separate vertical words.
        self.assertTrue(no_parallel_adjacency(grid, Position(0, 1, H), 6))
        self.assertTrue(no_parallel_adjacency(grid, Position(0, 3, H), 6))

    def test_flush_parallel_word_is_rejected(self) -> None:
        grid = grid_with_host()
        self.assertFalse(no_parallel_adjacency(grid, Position(0, 3, H), 4))
        self.assertFalse(no_parallel_adjacency(grid, Position(0, 1, H), 4))

    def test_word_below_touching_an_end_is_rejected(self) -> None:
        grid = grid_with_host()
        self.assertFalse(no_parallel_adjacency(grid, Position(4, 3, H), 4))

    def test_word_above_touching_a_start_is_rejected(self) -> None:
        grid = CellGrid(8, 8)
        grid.place_word("MINT", Position(3, 3, V))
        self.assertFalse(no_parallel_adjacency(grid, Position(4, 2, H), 4))

    def test_word_above_touching_an_end_diagonally_is_allowed(self) -> None:
        grid = grid_with_host()
        self.assertTrue(no_parallel_adjacency(grid, Position(4, 1, H), 4))

    def test_vertical_word_beside_an_end_is_rejected(self) -> None:
        grid = grid_with_host()
        self.assertFalse(no_parallel_adjacency(grid, Position(4, 0, V), 4))

    def test_vertical_word_beside_a_start_is_rejected(self) -> None:
        grid = grid_with_host(x=1)
        self.assertFalse(no_parallel_adjacency(grid, Position(0, 0, V), 4))


class ScoringTests(unittest.TestCase):
    def test_horizontal_score_prefers_central_rows(self) -> None:
        grid = CellGrid(5, 5)
        self.assertEqual(score_position(grid, Position(0, 1, H), "HOST"), 4)
        self.assertEqual(score_position(grid, Position(0, 2, H), "HOST"), 4)
        self.assertEqual(score_position(grid, Position(0, 3, H), "HOST"), 2)

    def test_border_rows_are_penalised(self) -> None:
        grid = CellGrid(5, 5)
        self.assertEqual(score_position(grid, Position(0, 0, H), "HOST"), 0)
        self.assertEqual(score_position(grid, Position(0, 4, H), "HOST"), -2)

    def test_vertical_score_uses_column_distance(self) -> None:
        grid = CellGrid(5, 5)
        self.assertEqual(score_position(grid, Position(2, 0, V), "HOST"), 4)
        self.assertEqual(score_position(grid, Position(0, 0, V), "HOST"), 0)

    def test_vertical_crossing_earns_four(self) -> None:
        grid = grid_with_host()
        self.assertEqual(score_position(grid, Position(2, 2, V), "SHOT"), 10)

    def test_horizontal_crossing_earns_three(self) -> None:
        grid = CellGrid(8, 8)
        grid.place_word("SHOT", Position(2, 0, V))
        self.assertEqual(score_position(grid, Position(1, 2, H), "MOOD"), 9)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
