#!/usr/bin/env python3
"""
Play Connect Four against the search engine.
You play X (player 1) or O (player 2); the game ends when the board is full and
the player owning more four-in-a-row windows wins.
"""
import sys
import argparse
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / 'src'))

from connect4_search.config_connect4 import BOARD_CONFIG, SEARCH_CONFIG
from connect4_search.engine.evaluator import count_fours
from connect4_search.players import Player, AlphaBetaPlayer, MinimaxPlayer, opponent_of
from connect4_search.tournament import play_game, make_arbitrator_factory


class HumanPlayer(Player):
    """Reads moves from the terminal."""

    def name(self):
        return "Human"

    def init(self, player_id, msec_per_move, rows, cols):
        self.player_id = player_id

    def calc_move(self, board, opp_move_col, arbitrator):
        print()
        print(board)
        if opp_move_col >= 0:
            print(f"AI played column {opp_move_col}")
        print(f"Score  you: {count_fours(board, self.player_id)}  AI: {count_fours(board, opponent_of(self.player_id))}")

        while True:
            raw = input(f"Your move (0-{board.num_cols() - 1}): ").strip()
            if raw.isdigit() and board.is_valid_move(int(raw)):
                arbitrator.set_move(int(raw))
                return
            print("❌ Invalid column, try again")


def main():
    parser = argparse.ArgumentParser(description="Play Connect Four vs the search engine")
    parser.add_argument('--second', action='store_true', help='let the AI move first')
    parser.add_argument('--minimax', action='store_true', help='play plain minimax instead of alpha-beta')
    parser.add_argument('--msec', type=int, default=SEARCH_CONFIG['msec_per_move'])
    args = parser.parse_args()
    if args.msec <= 0:
        parser.error("--msec must be positive")

    print("=" * 60)
    print("🎮 Connect Four - Play vs AI")
    print("=" * 60)

    human = HumanPlayer()
    ai = MinimaxPlayer() if args.minimax else AlphaBetaPlayer()
    first, second = (ai, human) if args.second else (human, ai)

    # The human is never timed out: its arbitrator is only consulted by the AI.
    record = play_game(
        first,
        second,
        rows=BOARD_CONFIG['rows'],
        cols=BOARD_CONFIG['cols'],
        msec_per_move=args.msec,
        arbitrator_factory=make_arbitrator_factory(args.msec),
        overrun_tolerance_ms=float('inf'),
    )

    print()
    print(f"Final score: {record.names[1]} {record.scores[1]} - {record.scores[2]} {record.names[2]}")
    if record.winner == 0:
        print("Draw 🤝")
    else:
        print(f"{record.names[record.winner]} wins 🏆")


if __name__ == "__main__":
    main()
