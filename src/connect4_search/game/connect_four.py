import numpy as np
from connect4_search.game.board import Board


class Connect4Board(Board):
    """
    Connect Four board backed by a numpy grid.

    Board: rows x cols (6 x 7 by default), row 0 is the top row.
    Moves: a column index; the token falls to the lowest empty row.
    Cells hold Board.EMPTY (0) or the owning player's id (1 or 2).
    """

    def __init__(self, rows=6, cols=7):
        if rows < 1 or cols < 1:
            raise ValueError(f"Board dimensions must be positive, got {rows}x{cols}")
        self.grid = np.zeros((rows, cols), dtype=np.int8)

    @classmethod
    def from_array(cls, grid):
        """
        Build a board from an existing (rows, cols) array of cell owners.

        The array is copied, so later changes to either side stay independent.
        Gravity is not checked: callers are trusted to pass stacked columns.
        """
        grid = np.asarray(grid)
        if grid.ndim != 2:
            raise ValueError(f"Expected a 2-D grid, got shape {grid.shape}")
        board = cls(grid.shape[0], grid.shape[1])
        board.grid[:, :] = grid
        return board

    def __repr__(self):
        return f"Connect4Board({self.num_rows()}x{self.num_cols()}, empty={self.num_empty_cells()})"

    def __str__(self):
        symbols = {self.EMPTY: '.', 1: 'X', 2: 'O'}
        lines = [' '.join(str(col) for col in range(self.num_cols()))]
        for row in self.grid:
            lines.append(' '.join(symbols.get(int(cell), '?') for cell in row))
        return '\n'.join(lines)

    def __eq__(self, other):
        if not isinstance(other, Connect4Board):
            return NotImplemented
        return self.grid.shape == other.grid.shape and bool(np.array_equal(self.grid, other.grid))

    __hash__ = None

    def num_rows(self):
        return self.grid.shape[0]

    def num_cols(self):
        return self.grid.shape[1]

    def get(self, row, col):
        return int(self.grid[row, col])

    def copy(self):
        return Connect4Board.from_array(self.grid)

    def to_array(self):
        return self.grid.copy()

    def is_column_full(self, col):
        return bool(self.grid[0, col] != self.EMPTY)

    def is_full(self):
        return not np.any(self.grid[0, :] == self.EMPTY)

    def num_empty_cells(self):
        return int(np.count_nonzero(self.grid == self.EMPTY))

    def column_height(self, col):
        """Number of tokens stacked in the given column."""
        return int(np.count_nonzero(self.grid[:, col] != self.EMPTY))

    def move(self, col, player_id):
        """
        Apply gravity-based move: drop a token in column to lowest empty row.

        Args:
            col: Column index (0 to cols-1)
            player_id: Id of the player owning the token (non-zero)

        Returns:
            Row index where the token landed
        """
        self._check_column(col)
        if player_id == self.EMPTY:
            raise ValueError("Cannot move for the empty player id")

        for row in range(self.num_rows() - 1, -1, -1):
            if self.grid[row, col] == self.EMPTY:
                self.grid[row, col] = player_id
                return row

        raise ValueError(f"Column {col} is full")

    def unmove(self, col, player_id):
        """
        Take back the top token of a column.

        Returns:
            Row index that was cleared
        """
        self._check_column(col)

        for row in range(self.num_rows()):
            owner = self.grid[row, col]
            if owner == self.EMPTY:
                continue
            if owner != player_id:
                raise ValueError(f"Top token of column {col} belongs to player {owner}, not {player_id}")
            self.grid[row, col] = self.EMPTY
            return row

        raise ValueError(f"Column {col} is empty")

    def _check_column(self, col):
        if not 0 <= col < self.num_cols():
            raise ValueError(f"Column {col} out of range 0..{self.num_cols() - 1}")
