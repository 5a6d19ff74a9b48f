"""
Iterative-deepening minimax / alpha-beta search over a lazily built game tree.

For one move the engine:
1. Snapshots the board into a root node and expands it one ply
2. Searches depth 1, 2, 3... until the arbitrator says time is up or the
   depth would exceed the number of empty cells
3. Publishes the root's chosen column to the arbitrator after every pass,
   including a pass cut short by the deadline

Algorithm overview:

    def search(node, depth, alpha, beta, maximizing):
        if depth == 0 or node.is_terminal() or time_up():
            return evaluate(node)

        node.expand(me if maximizing else opponent)   # once per node

        best = None
        for child in node.children:                   # ascending column order
            value = search(child, depth - 1, alpha, beta, not maximizing)
            if value improves best:
                best, node.chosen_move = value, child.move
            elif value == best:
                node.chosen_move = prefer_center(node.chosen_move, child.move)
            tighten alpha (max) or beta (min)
            if alpha > beta:
                break                                 # pruning variant only
        return best

The deadline is polled at every node. Once it expires, every remaining node
returns its static value, so the running pass unwinds quickly and its partial
decision is still published.
"""

import logging
import math
import time
from dataclasses import dataclass
from typing import Optional

from connect4_search.engine.evaluator import positional_value
from connect4_search.engine.move_selector import prefer_center
from connect4_search.engine.search_tree import SearchNode, ROOT_MOVE

logger = logging.getLogger(__name__)


class InvalidCallError(ValueError):
    """A search entry point was called in a state where no move can be made."""


@dataclass
class SearchResult:
    """Result of one iterative-deepening search."""
    best_move: int
    score: Optional[int]
    depth_reached: int
    nodes_searched: int
    time_ms: int
    interrupted: bool
    tree_size: int


class TreeSearchEngine:
    """
    Minimax search engine with optional alpha-beta pruning.

    With pruning disabled every child of every visited node is searched; with
    pruning enabled the engine returns the same root value and the same column
    while visiting a subset of those nodes.
    """

    def __init__(self, player_id: int, opponent_id: int, pruning: bool = True, evaluator=None):
        """
        Args:
            player_id: Id of the searching (maximizing) player
            opponent_id: Id of the other player
            pruning: Enable alpha-beta cutoffs
            evaluator: (board, player_id, opponent_id) -> int, defaults to positional_value
        """
        self.player_id = player_id
        self.opponent_id = opponent_id
        self.pruning = pruning
        self.evaluator = evaluator if evaluator is not None else positional_value

        self.nodes_searched = 0
        self.stopped = False

    def search(self, board, arbitrator) -> SearchResult:
        """
        Main search entry point with iterative deepening.

        Args:
            board: Live board; it is copied, never modified
            arbitrator: Deadline oracle receiving every intermediate decision

        Returns:
            SearchResult describing the last published decision

        Raises:
            InvalidCallError: If the board is already full
        """
        if board.is_full():
            raise InvalidCallError("Error: the board is full!")

        start = time.perf_counter()
        self.nodes_searched = 0
        self.stopped = False

        root = SearchNode.root(board)
        root.expand(self.player_id)

        depth = 1
        depth_reached = 0
        empty_cells = board.num_empty_cells()
        while not arbitrator.is_time_up() and depth <= empty_cells:
            self._search_node(root, depth, -math.inf, math.inf, True, arbitrator)
            # Nothing to report if the deadline hit before any root child was searched
            if root.chosen_move != ROOT_MOVE:
                arbitrator.set_move(root.chosen_move)

            if not self.stopped:
                depth_reached = depth
            logger.debug(
                "depth %d%s: column %d value %s after %d nodes",
                depth, " (interrupted)" if self.stopped else "",
                root.chosen_move, root.value, self.nodes_searched,
            )
            depth += 1

        return SearchResult(
            best_move=root.chosen_move,
            score=root.value,
            depth_reached=depth_reached,
            nodes_searched=self.nodes_searched,
            time_ms=int((time.perf_counter() - start) * 1000),
            interrupted=self.stopped,
            tree_size=root.size(),
        )

    def _search_node(self, node, depth, alpha, beta, maximizing, arbitrator) -> int:
        """
        Back up the value of node searched to the given remaining depth.

        Args:
            node: Tree node to evaluate
            depth: Remaining plies
            alpha: Best value the maximizer is already assured of
            beta: Best value the minimizer is already assured of
            maximizing: True when the searching player is to move at node
            arbitrator: Deadline oracle

        Returns:
            Backed-up value from the searching player's perspective
        """
        self.nodes_searched += 1

        if arbitrator.is_time_up():
            # Static value only; node.value keeps the last backed-up result
            self.stopped = True
            return self._evaluate(node)

        if depth == 0 or node.is_terminal():
            node.value = self._evaluate(node)
            return node.value

        node.expand(self.player_id if maximizing else self.opponent_id)
        cols = node.board.num_cols()

        value = None
        for child in node.children:
            child_value = self._search_node(child, depth - 1, alpha, beta, not maximizing, arbitrator)

            if value is None or (child_value > value if maximizing else child_value < value):
                value = child_value
                node.chosen_move = child.move
            elif child_value == value:
                node.chosen_move = prefer_center(node.chosen_move, child.move, cols)

            if not self.pruning:
                continue

            if maximizing:
                alpha = max(alpha, value)
            else:
                beta = min(beta, value)

            # Strict cutoff, not alpha >= beta: with >= a pruned subtree can
            # return a bound equal to the best value, the centre tie-break
            # then takes it for a real tie and alpha-beta may pick a different
            # column than plain minimax. Do not relax to >=.
            if alpha > beta:
                break

        node.value = value
        return value

    def _evaluate(self, node) -> int:
        return self.evaluator(node.board, self.player_id, self.opponent_id)
