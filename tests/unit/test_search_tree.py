"""
Unit tests for the lazily expanded search tree.
"""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from connect4_search.game.connect_four import Connect4Board
from connect4_search.engine.search_tree import SearchNode, applied_move, ROOT_MOVE
from connect4_search.engine.move_selector import center_distance, prefer_center


class TestAppliedMove:
    """Scoped move/unmove."""

    def test_move_visible_inside_block(self):
        board = Connect4Board()
        with applied_move(board, 3, 1):
            assert board.get(5, 3) == 1
        assert board == Connect4Board()

    def test_reverted_on_exception(self):
        board = Connect4Board()
        board.move(0, 2)
        before = board.copy()
        with pytest.raises(RuntimeError):
            with applied_move(board, 0, 1):
                raise RuntimeError("boom")
        assert board == before


class TestSearchNode:
    """Expansion order, idempotence and snapshot ownership."""

    def test_root_owns_a_copy(self):
        board = Connect4Board()
        root = SearchNode.root(board)
        assert root.move == ROOT_MOVE
        root.board.move(0, 1)
        assert board == Connect4Board()

    def test_expand_in_column_order(self):
        root = SearchNode.root(Connect4Board())
        children = root.expand(1)
        assert [child.move for child in children] == list(range(7))
        for child in children:
            assert child.board.get(5, child.move) == 1
            assert child.board.num_empty_cells() == 41

    def test_expand_skips_full_columns(self):
        board = Connect4Board(rows=2, cols=4)
        for player_id in (1, 2):
            board.move(1, player_id)
        root = SearchNode.root(board)
        assert [child.move for child in root.expand(2)] == [0, 2, 3]

    def test_expand_once(self):
        root = SearchNode.root(Connect4Board())
        first = root.expand(1)
        again = root.expand(2)
        assert again is first
        assert len(root.children) == 7
        assert all(child.board.get(5, child.move) == 1 for child in root.children)

    def test_expand_restores_board(self):
        board = Connect4Board()
        board.move(3, 1)
        board.move(3, 2)
        root = SearchNode.root(board)
        before = root.board.copy()
        root.expand(1)
        assert root.board == before

    def test_children_are_independent(self):
        root = SearchNode.root(Connect4Board())
        children = root.expand(1)
        children[0].board.move(0, 2)
        assert children[1].board.get(4, 0) == 0
        assert children[1].board.get(5, 0) == 0

    def test_terminal_and_leaf(self):
        board = Connect4Board(rows=1, cols=2)
        root = SearchNode.root(board)
        assert root.is_leaf()
        assert not root.is_terminal()
        root.expand(1)
        assert not root.is_leaf()
        child = root.children[0]
        child.expand(2)
        assert child.children[0].is_terminal()

    def test_size(self):
        root = SearchNode.root(Connect4Board())
        assert root.size() == 1
        for child in root.expand(1):
            child.expand(2)
        assert root.size() == 1 + 7 + 49


class TestMoveSelector:
    """Centre tie-break policy."""

    def test_center_distance(self):
        assert [center_distance(col, 7) for col in range(7)] == [3, 2, 1, 0, 1, 2, 3]
        assert [center_distance(col, 6) for col in range(6)] == [3, 2, 1, 0, 1, 2]

    def test_closer_candidate_wins(self):
        assert prefer_center(0, 3, 7) == 3
        assert prefer_center(3, 6, 7) == 3

    def test_equal_distance_keeps_current(self):
        assert prefer_center(2, 4, 7) == 2
        assert prefer_center(4, 2, 7) == 4
