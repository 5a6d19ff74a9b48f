"""
Lazily expanded game tree used by the iterative-deepening search.

Every node owns a snapshot of its board, so sibling branches never observe
each other's moves. Children are created on first visit and kept for the rest
of one search, letting deeper passes reuse the shallower tree.
"""

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Optional

ROOT_MOVE = -1


@contextmanager
def applied_move(board, col: int, player_id: int):
    """
    Play a move for the duration of a with-block.

    The move is taken back on exit, also when the block raises, so the board
    always returns to the state it had on entry.
    """
    board.move(col, player_id)
    try:
        yield board
    finally:
        board.unmove(col, player_id)


@dataclass
class SearchNode:
    """One board state reached from the root by a sequence of moves."""
    move: int
    board: object
    children: list = field(default_factory=list)
    chosen_move: int = ROOT_MOVE
    value: Optional[int] = None

    @classmethod
    def root(cls, board):
        """Root node holding a private copy of the live board."""
        return cls(ROOT_MOVE, board.copy())

    def is_leaf(self) -> bool:
        return not self.children

    def is_terminal(self) -> bool:
        return self.board.is_full()

    def expand(self, player_id: int) -> list:
        """
        Create one child per open column, in ascending column order.

        Args:
            player_id: Side to move at this node

        Returns:
            The children (unchanged if the node was already expanded)
        """
        if self.children:
            return self.children

        for col in range(self.board.num_cols()):
            if self.board.is_column_full(col):
                continue
            with applied_move(self.board, col, player_id):
                self.children.append(SearchNode(col, self.board.copy()))

        return self.children

    def size(self) -> int:
        """Number of nodes in this subtree, including this one."""
        count = 0
        stack = [self]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children)
        return count
