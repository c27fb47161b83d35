import pytest

from connect4_engine.debug import debug, DebugLevel
from connect4_engine.game.board import Board
from connect4_engine.game.rules import ConnectFourGame
from connect4_engine.utils import Player


@pytest.fixture(autouse=True)
def reset_debug():
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[], log_file="")


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def game():
    return ConnectFourGame()


@pytest.fixture
def make_board():
    """Build a board from column strings written bottom-up, e.g. ["01", "", "1"]."""
    def _make(columns, rows=6):
        board = Board(len(columns), rows)
        for col, cells in enumerate(columns):
            for symbol in cells:
                board.place(col, Player.from_symbol(symbol))
        return board
    return _make
