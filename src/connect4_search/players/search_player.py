"""
Connect Four players driven by the iterative-deepening tree search.
"""

from connect4_search.engine.tree_search import TreeSearchEngine, InvalidCallError
from connect4_search.players.player import Player, opponent_of


class SearchPlayer(Player):
    """
    Player that runs a fresh TreeSearchEngine on every turn.

    The search tree lives only for one calc_move() call; nothing is carried
    over between turns.
    """

    pruning = True
    display_name = "Search"

    def __init__(self, evaluator=None):
        self.evaluator = evaluator
        self.player_id = None
        self.opponent_id = None
        self.msec_per_move = None
        self.rows = None
        self.cols = None
        self.last_result = None

    def name(self):
        return self.display_name

    def init(self, player_id, msec_per_move, rows, cols):
        """
        Initialize the player for a new game.

        Args:
            player_id: Integer identifier of this player (1 or 2)
            msec_per_move: Time allowed for each move
            rows: Number of rows in the board
            cols: Number of columns in the board
        """
        self.player_id = player_id
        self.opponent_id = opponent_of(player_id)
        self.msec_per_move = msec_per_move
        self.rows = rows
        self.cols = cols
        self.last_result = None

    def calc_move(self, board, opp_move_col, arbitrator):
        """
        Search the position and report the best column found so far after each depth.

        Args:
            board: Current board (not modified)
            opp_move_col: Column of the opponent's last move, -1 on the first move
            arbitrator: Deadline oracle for this move

        Raises:
            InvalidCallError: If init() was not called or the board is full
        """
        if self.player_id is None:
            raise InvalidCallError(f"{self.name()}: init() must be called before calc_move()")

        engine = TreeSearchEngine(
            self.player_id,
            self.opponent_id,
            pruning=self.pruning,
            evaluator=self.evaluator,
        )
        self.last_result = engine.search(board, arbitrator)


class AlphaBetaPlayer(SearchPlayer):
    """Iterative-deepening alpha-beta player."""
    pruning = True
    display_name = "AlphaBeta"


class MinimaxPlayer(SearchPlayer):
    """Iterative-deepening plain minimax player, searching every child."""
    pruning = False
    display_name = "MiniMax"
