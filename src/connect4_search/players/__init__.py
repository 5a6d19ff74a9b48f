from connect4_search.players.player import Player, opponent_of, NUM_PLAYERS
from connect4_search.players.search_player import SearchPlayer, AlphaBetaPlayer, MinimaxPlayer
from connect4_search.players.greedy_player import GreedyPlayer

PLAYERS = {
    'alphabeta': AlphaBetaPlayer,
    'minimax': MinimaxPlayer,
    'greedy': GreedyPlayer,
}

__all__ = [
    'Player',
    'opponent_of',
    'NUM_PLAYERS',
    'SearchPlayer',
    'AlphaBetaPlayer',
    'MinimaxPlayer',
    'GreedyPlayer',
    'PLAYERS',
]
