"""
Match driver: plays Connect Four games between two Player strategies.

A game runs until the board is full. Each player's score is the number of
four-in-a-row windows it owns on the final board; the higher score wins.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from tqdm import tqdm

from connect4_search.config_connect4 import BOARD_CONFIG, SEARCH_CONFIG, MATCH_CONFIG
from connect4_search.engine.arbitrator import TimedArbitrator, PassLimitArbitrator, TimeUpError
from connect4_search.engine.evaluator import count_fours
from connect4_search.game.connect_four import Connect4Board
from connect4_search.players.player import opponent_of

logger = logging.getLogger(__name__)

DRAW = 0


@dataclass
class GameRecord:
    """Outcome of a single game."""
    moves: list[int]
    scores: dict
    winner: int
    names: dict


@dataclass
class SeriesResult:
    """Aggregate outcome of a series between two players."""
    name_a: str
    name_b: str
    wins_a: int = 0
    wins_b: int = 0
    draws: int = 0
    games: list = field(default_factory=list)


def make_arbitrator_factory(msec_per_move: int, pass_limit: Optional[int] = None):
    """
    Fresh arbitrator per move: a fixed pass count if pass_limit is set, else a clock.

    A clock needs a positive budget: an unbounded TimedArbitrator lets the
    search run to the number of empty cells, which never finishes on a full-size board.
    """
    if pass_limit is not None:
        return lambda: PassLimitArbitrator(pass_limit)
    if msec_per_move <= 0:
        raise ValueError(f"msec_per_move must be positive without a pass limit, got {msec_per_move}")
    return lambda: TimedArbitrator(msec_per_move)


def play_game(
    first,
    second,
    rows: int = BOARD_CONFIG['rows'],
    cols: int = BOARD_CONFIG['cols'],
    msec_per_move: int = SEARCH_CONFIG['msec_per_move'],
    arbitrator_factory=None,
    overrun_tolerance_ms: float = MATCH_CONFIG['overrun_tolerance_ms'],
) -> GameRecord:
    """
    Play one game; first moves as player 1, second as player 2.

    Returns:
        GameRecord with the column sequence, final scores and winner (0 for draw)

    Raises:
        TimeUpError: If a player reports no move
        ValueError: If a player reports an illegal column
    """
    if arbitrator_factory is None:
        arbitrator_factory = make_arbitrator_factory(msec_per_move, SEARCH_CONFIG['pass_limit'])

    players = {1: first, 2: second}
    for player_id, player in players.items():
        player.init(player_id, msec_per_move, rows, cols)

    board = Connect4Board(rows, cols)
    moves = []
    last_col = -1
    current = 1

    while not board.is_full():
        player = players[current]
        arbitrator = arbitrator_factory()
        player.calc_move(board.copy(), last_col, arbitrator)

        col = arbitrator.move
        if col is None:
            raise TimeUpError(f"{player.name()} (player {current}) reported no move")
        if not board.is_valid_move(col):
            raise ValueError(f"{player.name()} (player {current}) reported illegal column {col}")

        if isinstance(arbitrator, TimedArbitrator):
            overrun = arbitrator.overrun_ms()
            if overrun > overrun_tolerance_ms:
                logger.warning("%s overran its budget by %.1f ms", player.name(), overrun)

        board.move(col, current)
        moves.append(col)
        last_col = col
        current = opponent_of(current)

    scores = {player_id: count_fours(board, player_id) for player_id in players}
    if scores[1] > scores[2]:
        winner = 1
    elif scores[2] > scores[1]:
        winner = 2
    else:
        winner = DRAW

    logger.debug("game over: scores %s, winner %s", scores, winner)
    return GameRecord(
        moves=moves,
        scores=scores,
        winner=winner,
        names={player_id: player.name() for player_id, player in players.items()},
    )


def run_series(
    player_a,
    player_b,
    num_games: int = MATCH_CONFIG['num_games'],
    swap_sides: bool = MATCH_CONFIG['swap_sides'],
    progress: bool = True,
    **game_kwargs,
) -> SeriesResult:
    """
    Play num_games games between two players, alternating the first move if swap_sides.

    Extra keyword arguments are forwarded to play_game().
    """
    result = SeriesResult(name_a=player_a.name(), name_b=player_b.name())

    for game_num in tqdm(range(num_games), desc="Games", ncols=80, disable=not progress):
        a_first = not swap_sides or game_num % 2 == 0
        if a_first:
            record = play_game(player_a, player_b, **game_kwargs)
            a_id = 1
        else:
            record = play_game(player_b, player_a, **game_kwargs)
            a_id = 2

        if record.winner == DRAW:
            result.draws += 1
        elif record.winner == a_id:
            result.wins_a += 1
        else:
            result.wins_b += 1
        result.games.append(record)

    return result
