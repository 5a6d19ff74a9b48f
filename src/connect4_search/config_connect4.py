"""
Configuration for Connect Four engine matches.
"""

from dataclasses import dataclass


# Board Configuration
BOARD_CONFIG = {
    'rows': 6,
    'cols': 7,
}

# Search Configuration
SEARCH_CONFIG = {
    'msec_per_move': 1000,              # Wall-clock budget per move
    'pass_limit': None,                 # Fixed number of depth passes instead of a clock (reproducible)
}

# Match Configuration
MATCH_CONFIG = {
    'num_games': 10,
    'swap_sides': True,                 # Alternate who moves first
    'overrun_tolerance_ms': 50,         # Overruns beyond this are logged as warnings
    'seed': 0,                          # Seed for random baseline players
}

# Paths Configuration
@dataclass
class PathConfig:
    logs: str = "logs/tournament"

PATHS = PathConfig()
