"""
Game-tree search engine for Connect Four.

This module contains the search components:
- Four-in-a-row window counting evaluator
- Lazily expanded search tree with scoped move/unmove
- Centre-column tie-break policy
- Iterative-deepening minimax and alpha-beta search
- Deadline oracles (arbitrators)
"""

from connect4_search.engine.evaluator import count_fours, positional_value, DIRECTIONS
from connect4_search.engine.move_selector import center_distance, prefer_center
from connect4_search.engine.search_tree import SearchNode, applied_move, ROOT_MOVE
from connect4_search.engine.tree_search import TreeSearchEngine, SearchResult, InvalidCallError
from connect4_search.engine.arbitrator import (
    Arbitrator,
    TimedArbitrator,
    PassLimitArbitrator,
    TimeUpError,
)

__all__ = [
    'count_fours',
    'positional_value',
    'DIRECTIONS',
    'center_distance',
    'prefer_center',
    'SearchNode',
    'applied_move',
    'ROOT_MOVE',
    'TreeSearchEngine',
    'SearchResult',
    'InvalidCallError',
    'Arbitrator',
    'TimedArbitrator',
    'PassLimitArbitrator',
    'TimeUpError',
]
