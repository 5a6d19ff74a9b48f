"""
Static positional evaluation for Connect Four boards.

A position is scored by counting every window of four consecutive cells, in
any of the four line directions, that is entirely owned by one player. Windows
overlap freely: five in a row contains two such windows and scores 2.

    value(board) = count_fours(board, me) - count_fours(board, opponent)
"""

import numpy as np

WINDOW = 4

# (row step, column step) for horizontal, vertical and the two diagonals.
# Row 0 is the top of the board, so (1, 1) runs down-right and (-1, 1) up-right.
HORIZONTAL = (0, 1)
VERTICAL = (1, 0)
DIAGONAL_DOWN = (1, 1)
DIAGONAL_UP = (-1, 1)

DIRECTIONS = (HORIZONTAL, VERTICAL, DIAGONAL_DOWN, DIAGONAL_UP)


def _count_windows(mask: np.ndarray, d_row: int, d_col: int, length: int = WINDOW) -> int:
    """
    Count windows of `length` True cells along one direction of a boolean mask.

    Each shifted slice covers every valid window start; AND-ing the shifted
    slices leaves True exactly where a full window begins.
    """
    rows, cols = mask.shape
    span = length - 1
    n_rows = rows - span * abs(d_row)
    n_cols = cols - span * abs(d_col)
    if n_rows <= 0 or n_cols <= 0:
        return 0

    row0 = span if d_row < 0 else 0
    col0 = span if d_col < 0 else 0

    hits = np.ones((n_rows, n_cols), dtype=bool)
    for k in range(length):
        r = row0 + k * d_row
        c = col0 + k * d_col
        hits &= mask[r:r + n_rows, c:c + n_cols]
    return int(np.count_nonzero(hits))


def count_fours(board, player_id: int, directions=DIRECTIONS) -> int:
    """
    Number of four-cell windows owned entirely by player_id.

    Args:
        board: Any Board adapter
        player_id: Player whose alignments are counted
        directions: Subset of DIRECTIONS to scan (all four by default)

    Returns:
        Total window count over the requested directions
    """
    mask = board.to_array() == player_id
    return sum(_count_windows(mask, d_row, d_col) for d_row, d_col in directions)


def positional_value(board, player_id: int, opponent_id: int) -> int:
    """Alignment count of player_id minus that of opponent_id."""
    return count_fours(board, player_id) - count_fours(board, opponent_id)
