"""
connect4_engine - A turn-based Connect Four engine

This package provides the board representation, win detection and the game
engine for Connect Four on any rectangular grid, plus a Gymnasium
environment and a terminal interface built on top of the engine.
"""

# Version number
__version__ = '0.1.0'

from connect4_engine.exceptions import (Connect4Error, InvalidDimensions, NoSuchColumn,
                                        NoSuchCell, ColumnFull, GameAlreadyOver)
from connect4_engine.utils import Player, GameResult, Direction

__all__ = ['Connect4Error', 'InvalidDimensions', 'NoSuchColumn', 'NoSuchCell',
           'ColumnFull', 'GameAlreadyOver', 'Player', 'GameResult', 'Direction']
