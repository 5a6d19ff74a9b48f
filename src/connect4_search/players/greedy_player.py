import numpy as np

from connect4_search.players.player import Player, require_open_board


class GreedyPlayer(Player):
    """
    Baseline player that drops its token into a uniformly random open column.

    The random source is injectable, so games against it can be replayed.
    """

    def __init__(self, rng=None, seed=None):
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def name(self):
        return "Greedo"

    def init(self, player_id, msec_per_move, rows, cols):
        pass

    def calc_move(self, board, opp_move_col, arbitrator):
        require_open_board(board)
        valid_moves = [col for col in range(board.num_cols()) if board.is_valid_move(col)]
        arbitrator.set_move(int(self.rng.choice(valid_moves)))
