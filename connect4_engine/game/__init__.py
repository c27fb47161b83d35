"""
connect4_engine.game - Core game mechanics for Connect Four

This package contains the board representation, win detection
and the game engine.
"""

from connect4_engine.game.board import Board
from connect4_engine.game.winlines import WinningLine, find_winning_lines
from connect4_engine.game.rules import ConnectFourGame, ConnectFourEnv

__all__ = ['Board', 'WinningLine', 'find_winning_lines', 'ConnectFourGame', 'ConnectFourEnv']
