from abc import ABC, abstractmethod
import numpy as np


class Board(ABC):
    """
    Abstract board adapter consumed by the search engine.

    A board is a rows x cols grid of cells, each EMPTY or owned by a player id.
    Subclasses provide the storage and the gravity rules; the queries below are
    derived from the primitives and may be overridden for speed.
    """

    EMPTY = 0

    @abstractmethod
    def num_rows(self):
        """
        Returns the number of rows in the grid.
        """
        pass

    @abstractmethod
    def num_cols(self):
        """
        Returns the number of columns in the grid.
        """
        pass

    @abstractmethod
    def get(self, row, col):
        """
        Returns the owner of the cell at (row, col), or EMPTY.
        """
        pass

    @abstractmethod
    def move(self, col, player_id):
        """
        Drops a token for player_id into the given column.
        """
        pass

    @abstractmethod
    def unmove(self, col, player_id):
        """
        Removes the token player_id last dropped into the given column.
        """
        pass

    @abstractmethod
    def copy(self):
        """
        Returns an independent snapshot of the board.
        """
        pass

    @abstractmethod
    def is_column_full(self, col):
        """
        Returns True if no more tokens fit into the given column.
        """
        pass

    def is_valid_move(self, col):
        return 0 <= col < self.num_cols() and not self.is_column_full(col)

    def is_full(self):
        return all(self.is_column_full(col) for col in range(self.num_cols()))

    def num_empty_cells(self):
        return sum(
            1
            for row in range(self.num_rows())
            for col in range(self.num_cols())
            if self.get(row, col) == self.EMPTY
        )

    def to_array(self):
        """Cell owners as a (rows, cols) numpy array."""
        return np.array(
            [[self.get(row, col) for col in range(self.num_cols())] for row in range(self.num_rows())],
            dtype=np.int8,
        )
