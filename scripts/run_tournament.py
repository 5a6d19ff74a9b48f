#!/usr/bin/env python3
"""Head-to-head series between two Connect Four players.

Examples:
  python scripts/run_tournament.py alphabeta minimax --games 4 --msec 200
  python scripts/run_tournament.py alphabeta greedy --pass-limit 3

Outputs:
  - Progress and a summary table on stdout
  - A timestamped copy of the output in logs/tournament/
"""

import sys
import argparse
import logging
from pathlib import Path
from datetime import datetime

from rich.console import Console
from rich.table import Table

# repo root assumed to be parent of this file's folder
BASE_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BASE_DIR / 'src'))

from connect4_search.config_connect4 import BOARD_CONFIG, SEARCH_CONFIG, MATCH_CONFIG, PATHS
from connect4_search.players import PLAYERS, GreedyPlayer
from connect4_search.tournament import run_series, make_arbitrator_factory


class Tee:
    def __init__(self, *files):
        self.files = files
    def write(self, data):
        for f in self.files:
            f.write(data)
            f.flush()
    def flush(self):
        for f in self.files:
            f.flush()
    def isatty(self):
        return False


def setup_logging(tag: str, verbose: bool):
    log_dir = BASE_DIR / PATHS.logs
    log_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime('%Y%m%d_%H%M%S')
    log_path = log_dir / f'{tag}_{ts}.log'
    log_file = open(log_path, 'w')
    sys.stdout = Tee(sys.__stdout__, log_file)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
        stream=sys.stdout,
    )
    print(f"📝 Logging to: {log_path}")
    return log_path, log_file


def build_player(kind: str, seed: int):
    if kind == 'greedy':
        return GreedyPlayer(seed=seed)
    return PLAYERS[kind]()


def print_summary(result):
    table = Table(title=f"{result.name_a} vs {result.name_b}")
    table.add_column("Player")
    table.add_column("Wins", justify="right")
    table.add_column("Draws", justify="right")
    table.add_column("Losses", justify="right")
    table.add_row(result.name_a, str(result.wins_a), str(result.draws), str(result.wins_b))
    table.add_row(result.name_b, str(result.wins_b), str(result.draws), str(result.wins_a))
    Console(file=sys.stdout).print(table)


def main():
    parser = argparse.ArgumentParser(description="Run a Connect Four series between two players")
    parser.add_argument('player_a', choices=sorted(PLAYERS))
    parser.add_argument('player_b', choices=sorted(PLAYERS))
    parser.add_argument('--games', type=int, default=MATCH_CONFIG['num_games'])
    parser.add_argument('--msec', type=int, default=SEARCH_CONFIG['msec_per_move'],
                        help='milliseconds per move')
    parser.add_argument('--pass-limit', type=int, default=SEARCH_CONFIG['pass_limit'],
                        help='fixed number of search depths per move instead of a clock')
    parser.add_argument('--rows', type=int, default=BOARD_CONFIG['rows'])
    parser.add_argument('--cols', type=int, default=BOARD_CONFIG['cols'])
    parser.add_argument('--no-swap', action='store_true', help='player_a always moves first')
    parser.add_argument('--seed', type=int, default=MATCH_CONFIG['seed'])
    parser.add_argument('--verbose', action='store_true', help='log every search pass')
    args = parser.parse_args()
    if args.pass_limit is None and args.msec <= 0:
        parser.error("--msec must be positive unless --pass-limit is given")

    tag = f"{args.player_a}_vs_{args.player_b}"
    log_path, log_file = setup_logging(tag, args.verbose)

    print("=" * 60)
    print(f"🥊 {args.player_a} vs {args.player_b}: {args.games} games on {args.rows}x{args.cols}")
    if args.pass_limit is not None:
        print(f"   {args.pass_limit} search passes per move")
    else:
        print(f"   {args.msec} ms per move")
    print("=" * 60)

    player_a = build_player(args.player_a, args.seed)
    player_b = build_player(args.player_b, args.seed + 1)

    result = run_series(
        player_a,
        player_b,
        num_games=args.games,
        swap_sides=not args.no_swap,
        rows=args.rows,
        cols=args.cols,
        msec_per_move=args.msec,
        arbitrator_factory=make_arbitrator_factory(args.msec, args.pass_limit),
        overrun_tolerance_ms=MATCH_CONFIG['overrun_tolerance_ms'],
    )

    for i, record in enumerate(result.games, 1):
        first, second = record.names[1], record.names[2]
        outcome = "Draw 🤝" if record.winner == 0 else f"{record.names[record.winner]} wins 🏆"
        print(f"Game {i}: {first} (X) {record.scores[1]} - {record.scores[2]} {second} (O)  {outcome}")

    print()
    print_summary(result)
    log_file.close()


if __name__ == "__main__":
    main()
