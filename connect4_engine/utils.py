"""
utils.py - Constants and enumerations shared across connect4_engine

Coordinates are (column, row) tuples. Row 0 is the bottom row of the board
and column 0 the leftmost column.
"""

import numpy as np
from enum import Enum, auto
from typing import Tuple

# Default board configuration
DEFAULT_COLUMNS = 7
DEFAULT_ROWS = 6
DEFAULT_CONNECT_N = 4  # Number of counters in a row to win

# Serialization characters
EMPTY_SYMBOL = "x"

Coordinate = Tuple[int, int]


class Player(Enum):
    """Enumeration representing the two counters and the empty cell."""
    EMPTY = 0
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> 'Player':
        """Get the opposing counter."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    @property
    def symbol(self) -> str:
        """Character used by the board serialization."""
        if self == Player.EMPTY:
            return EMPTY_SYMBOL
        return str(self.value - 1)

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Player':
        for player in cls:
            if player.symbol == symbol:
                return player
        raise ValueError(f"Unknown board symbol: {symbol!r}")

    def __str__(self):
        if self == Player.EMPTY:
            return " "
        elif self == Player.ONE:
            return "X"
        else:
            return "O"


class GameResult(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        return self != GameResult.IN_PROGRESS

    @classmethod
    def win_for(cls, player: Player) -> 'GameResult':
        if player == Player.ONE:
            return cls.PLAYER_ONE_WIN
        elif player == Player.TWO:
            return cls.PLAYER_TWO_WIN
        raise ValueError(f"{player} cannot win a game")


class Direction(Enum):
    """The four axes a winning line can run along, as (d_column, d_row)."""
    HORIZONTAL = (1, 0)
    VERTICAL = (0, 1)
    DIAGONAL = (1, 1)       # bottom-left to top-right
    ANTI_DIAGONAL = (1, -1)  # top-left to bottom-right

    @property
    def vector(self) -> Coordinate:
        return self.value

    def step(self, coordinate: Coordinate, distance: int = 1) -> Coordinate:
        """Move `distance` cells from `coordinate` along this direction."""
        d_col, d_row = self.value
        return coordinate[0] + d_col * distance, coordinate[1] + d_row * distance


def is_positive_int(value) -> bool:
    """True for integers (numpy included, bools excluded) that are at least 1."""
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool) and value >= 1
