from abc import ABC, abstractmethod

from connect4_search.engine.tree_search import InvalidCallError

NUM_PLAYERS = 2


def opponent_of(player_id, num_players=NUM_PLAYERS):
    """Id of the other player under the 1..num_players numbering."""
    return num_players + 1 - player_id


class Player(ABC):
    """
    Abstract Base Class for a Connect Four player strategy.

    The match driver calls init() once per game, then calc_move() on every turn.
    A strategy reports its decision through the arbitrator and may do so
    several times; the last reported column is played.
    """

    @abstractmethod
    def name(self):
        """
        Returns the display name of the player.
        """
        pass

    @abstractmethod
    def init(self, player_id, msec_per_move, rows, cols):
        """
        Prepares the player for a game, before any call to calc_move().
        """
        pass

    @abstractmethod
    def calc_move(self, board, opp_move_col, arbitrator):
        """
        Chooses a column for the current board and reports it via arbitrator.set_move().
        """
        pass

    def decide(self, board, arbitrator, opp_move_col=-1):
        """Run calc_move() and return the column it reported (None if it reported nothing)."""
        self.calc_move(board, opp_move_col, arbitrator)
        return arbitrator.move


def require_open_board(board):
    if board.is_full():
        raise InvalidCallError("Error: the board is full!")
