"""
connect4_search: iterative-deepening minimax and alpha-beta players for Connect Four.
"""

__version__ = "0.1"
