"""
board.py - Board representation for Connect Four

This module implements the Board class: a rectangular grid with column-fill
semantics. Counters always land in the lowest empty row of a column, so the
occupied cells of every column form a contiguous run starting at row 0
(the bottom row). A per-column index of the next free row is maintained
alongside the grid so that landing rows are found in O(1).
"""

import numpy as np
from typing import List, Optional

from connect4_engine.debug import debug
from connect4_engine.exceptions import (ColumnFull, InvalidDimensions,
                                        NoSuchCell, NoSuchColumn)
from connect4_engine.utils import (DEFAULT_COLUMNS, DEFAULT_ROWS, Coordinate,
                                   Player, is_positive_int)


class Board:
    """
    A Connect Four grid addressed by (column, row), row 0 at the bottom.

    The grid is stored as a numpy array of shape (rows, columns) holding
    Player values, so ``grid[row, column]`` is the cell at (column, row).
    """

    def __init__(self, columns: int = DEFAULT_COLUMNS, rows: int = DEFAULT_ROWS):
        if not is_positive_int(columns) or not is_positive_int(rows):
            raise InvalidDimensions(columns, rows)

        self.columns = columns
        self.rows = rows
        self.grid = np.full((rows, columns), Player.EMPTY.value, dtype=np.int8)
        self.next_available_row: List[Optional[int]] = [0] * columns
        debug.trace(f"Created {columns}x{rows} board", "board")

    def copy(self) -> 'Board':
        """Create an independent copy of this board."""
        new_board = Board(self.columns, self.rows)
        new_board.grid = self.grid.copy()
        new_board.next_available_row = list(self.next_available_row)
        return new_board

    def in_bounds(self, column: int, row: int) -> bool:
        return 0 <= column < self.columns and 0 <= row < self.rows

    def _check_column(self, column: int) -> None:
        if not isinstance(column, (int, np.integer)) or isinstance(column, bool) \
                or not 0 <= column < self.columns:
            raise NoSuchColumn(column, self.columns)

    def is_column_full(self, column: int) -> bool:
        self._check_column(column)
        return self.next_available_row[column] is None

    def is_full(self) -> bool:
        """True when no empty cell remains anywhere on the board."""
        return all(row is None for row in self.next_available_row)

    def playable_columns(self) -> List[int]:
        return [col for col, row in enumerate(self.next_available_row) if row is not None]

    def place(self, column: int, player: Player) -> Coordinate:
        """
        Drop a counter into a column.

        Args:
            column: The column to drop into (0-indexed, from the left)
            player: The counter to place

        Returns:
            The (column, row) coordinate the counter landed on

        Raises:
            NoSuchColumn: column is outside the board
            ColumnFull: column has no empty cell left
        """
        if player == Player.EMPTY:
            raise ValueError("Cannot place an empty counter")
        self._check_column(column)

        row = self.next_available_row[column]
        if row is None:
            raise ColumnFull(column)

        self.grid[row, column] = player.value
        self.next_available_row[column] = row + 1 if row + 1 < self.rows else None
        debug.trace(f"Placed {player.name} at ({column}, {row})", "board")
        return int(column), row

    def get(self, column: int, row: int) -> Player:
        """Return the occupant of a cell (Player.EMPTY when empty)."""
        if not self.in_bounds(column, row):
            raise NoSuchCell(column, row)
        return Player(int(self.grid[row, column]))

    def update_next_rows(self) -> None:
        """Recompute the next-available-row index from the grid."""
        next_rows: List[Optional[int]] = []
        for col in range(self.columns):
            empty_rows = np.flatnonzero(self.grid[:, col] == Player.EMPTY.value)
            next_rows.append(int(empty_rows[0]) if len(empty_rows) else None)
        self.next_available_row = next_rows

    def get_state(self) -> np.ndarray:
        """Copy of the grid, shape (rows, columns), row 0 at the bottom."""
        return self.grid.copy()

    def to_string(self) -> str:
        """
        Deterministic serialization of the board.

        The top row is printed first and the bottom row last. Empty cells are
        'x', Player.ONE is '0' and Player.TWO is '1'.
        """
        return "\n".join(
            "".join(Player(int(value)).symbol for value in self.grid[row])
            for row in range(self.rows - 1, -1, -1)
        )

    @classmethod
    def from_string(cls, text: str) -> 'Board':
        """
        Build a board from the output of to_string().

        Raises:
            ValueError: unknown symbols, ragged rows, or a counter floating
                above an empty cell
        """
        lines = [line.strip() for line in text.strip().splitlines()]
        if not lines or any(len(line) != len(lines[0]) for line in lines):
            raise ValueError("Board text must be non-empty and rectangular")

        board = cls(len(lines[0]), len(lines))
        for row, line in enumerate(reversed(lines)):
            for col, symbol in enumerate(line):
                board.grid[row, col] = Player.from_symbol(symbol).value

        for col in range(board.columns):
            cells = board.grid[:, col]
            occupied = np.flatnonzero(cells != Player.EMPTY.value)
            if len(occupied) and occupied[-1] + 1 != len(occupied):
                raise ValueError(f"Column {col} has a counter above an empty cell")

        board.update_next_rows()
        return board

    def render(self, highlight: Optional[set] = None) -> str:
        """
        Render the board as boxed ASCII art, top row first.

        Args:
            highlight: Optional set of coordinates drawn as '*'
        """
        highlight = highlight or set()
        width = self.columns * 2 - 1
        result = ["|" + "-" * width + "|"]

        for row in range(self.rows - 1, -1, -1):
            cells = []
            for col in range(self.columns):
                if (col, row) in highlight:
                    cells.append("*")
                else:
                    cells.append(str(Player(int(self.grid[row, col]))))
            result.append("|" + " ".join(cells) + "|")

        result.append("|" + "-" * width + "|")
        result.append("|" + " ".join(str(col % 10) for col in range(self.columns)) + "|")
        return "\n".join(result)

    def __str__(self) -> str:
        return self.render()

    # Mutable grid compared by value
    __hash__ = None

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (self.columns == other.columns and self.rows == other.rows
                and np.array_equal(self.grid, other.grid))
