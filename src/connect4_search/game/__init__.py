from connect4_search.game.board import Board
from connect4_search.game.connect_four import Connect4Board

__all__ = ['Board', 'Connect4Board']
