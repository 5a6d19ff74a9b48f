"""
Unit tests for the four-in-a-row window evaluator.

Tests verify:
1. Each direction is counted on its own
2. Overlapping windows are counted independently (five in a row scores 2)
3. Opponent tokens break windows
4. Empty boards score 0 and the positional value is antisymmetric
"""

import sys
from pathlib import Path

import numpy as np

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from connect4_search.game.connect_four import Connect4Board
from connect4_search.engine.evaluator import (
    count_fours,
    positional_value,
    DIRECTIONS,
    HORIZONTAL,
    VERTICAL,
    DIAGONAL_DOWN,
    DIAGONAL_UP,
)


def board_with(cells, owner=1, rows=6, cols=7):
    grid = np.zeros((rows, cols), dtype=np.int8)
    for row, col in cells:
        grid[row, col] = owner
    return Connect4Board.from_array(grid)


class TestDirections:
    """Each direction scanned independently and combined."""

    def test_horizontal(self):
        board = board_with([(5, 0), (5, 1), (5, 2), (5, 3)])
        assert count_fours(board, 1, directions=(HORIZONTAL,)) == 1
        assert count_fours(board, 1, directions=(VERTICAL, DIAGONAL_DOWN, DIAGONAL_UP)) == 0
        assert count_fours(board, 1) == 1

    def test_vertical(self):
        board = board_with([(2, 6), (3, 6), (4, 6), (5, 6)])
        assert count_fours(board, 1, directions=(VERTICAL,)) == 1
        assert count_fours(board, 1) == 1

    def test_diagonal_down_right(self):
        board = board_with([(2, 0), (3, 1), (4, 2), (5, 3)])
        assert count_fours(board, 1, directions=(DIAGONAL_DOWN,)) == 1
        assert count_fours(board, 1, directions=(DIAGONAL_UP,)) == 0
        assert count_fours(board, 1) == 1

    def test_diagonal_up_right(self):
        board = board_with([(5, 3), (4, 4), (3, 5), (2, 6)])
        assert count_fours(board, 1, directions=(DIAGONAL_UP,)) == 1
        assert count_fours(board, 1, directions=(DIAGONAL_DOWN,)) == 0
        assert count_fours(board, 1) == 1

    def test_combined_directions(self):
        # Vertical in column 0 plus horizontal along the bottom sharing (5, 0)
        cells = [(2, 0), (3, 0), (4, 0), (5, 0), (5, 1), (5, 2), (5, 3)]
        board = board_with(cells)
        assert count_fours(board, 1, directions=(HORIZONTAL,)) == 1
        assert count_fours(board, 1, directions=(VERTICAL,)) == 1
        assert count_fours(board, 1) == 2

    def test_full_board_of_one_owner(self):
        board = Connect4Board.from_array(np.ones((6, 7), dtype=np.int8))
        # 6 rows x 4 windows + 7 columns x 3 windows + 2 diagonals x (3 x 4)
        assert count_fours(board, 1) == 24 + 21 + 12 + 12
        assert count_fours(board, 2) == 0


class TestOverlap:
    """Overlapping windows each count once."""

    def test_five_in_a_row_scores_two(self):
        board = board_with([(5, c) for c in range(5)])
        assert count_fours(board, 1) == 2

    def test_full_row_scores_four(self):
        board = board_with([(0, c) for c in range(7)])
        assert count_fours(board, 1) == 4

    def test_full_column_scores_three(self):
        board = board_with([(r, 3) for r in range(6)])
        assert count_fours(board, 1) == 3

    def test_three_is_not_enough(self):
        board = board_with([(5, 0), (5, 1), (5, 2)])
        assert count_fours(board, 1) == 0


class TestOwnership:
    """Only windows fully owned by the player count."""

    def test_opponent_token_breaks_window(self):
        grid = np.zeros((6, 7), dtype=np.int8)
        grid[5, :5] = 1
        grid[5, 2] = 2
        board = Connect4Board.from_array(grid)
        assert count_fours(board, 1) == 0
        assert count_fours(board, 2) == 0

    def test_counts_are_per_player(self):
        grid = np.zeros((6, 7), dtype=np.int8)
        grid[5, :4] = 1
        grid[4, :5] = 2
        board = Connect4Board.from_array(grid)
        assert count_fours(board, 1) == 1
        assert count_fours(board, 2) == 2
        assert positional_value(board, 1, 2) == -1
        assert positional_value(board, 2, 1) == 1


class TestSymmetry:
    """Empty boards and perspective swaps."""

    def test_empty_board_is_zero(self):
        board = Connect4Board()
        for player_id in (1, 2):
            assert count_fours(board, player_id) == 0
        assert positional_value(board, 1, 2) == 0
        assert positional_value(board, 2, 1) == 0

    def test_antisymmetric_on_random_boards(self):
        rng = np.random.default_rng(7)
        for _ in range(20):
            board = Connect4Board.from_array(rng.integers(0, 3, size=(6, 7)))
            assert positional_value(board, 1, 2) == -positional_value(board, 2, 1)

    def test_small_boards_have_no_windows(self):
        board = Connect4Board.from_array(np.ones((3, 3), dtype=np.int8))
        assert count_fours(board, 1) == 0

    def test_narrow_board_counts_only_vertical(self):
        board = Connect4Board.from_array(np.ones((5, 2), dtype=np.int8))
        assert count_fours(board, 1) == 2 * 2

    def test_all_directions_listed(self):
        assert set(DIRECTIONS) == {HORIZONTAL, VERTICAL, DIAGONAL_DOWN, DIAGONAL_UP}
