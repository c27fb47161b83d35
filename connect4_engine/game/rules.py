"""
rules.py - Game engine and Gymnasium environment for Connect Four

This module provides:
1. ConnectFourGame, the engine that owns a Board, tracks whose turn it is,
   validates and applies moves, and runs win detection after each move
2. ConnectFourEnv, a gymnasium-compatible wrapper that lets an external
   driver step a game through the standard reset/step interface
"""

import numpy as np
import gymnasium as gym
from gymnasium import spaces
from typing import Any, Dict, List, Optional, Set, Tuple, Union

from connect4_engine.debug import debug
from connect4_engine.exceptions import ColumnFull, GameAlreadyOver, NoSuchColumn
from connect4_engine.game.board import Board
from connect4_engine.game.winlines import WinningLine, find_winning_lines
from connect4_engine.utils import (DEFAULT_COLUMNS, DEFAULT_CONNECT_N, DEFAULT_ROWS,
                                   Coordinate, GameResult, Player, is_positive_int)


class ConnectFourGame:
    """
    Connect Four game engine.

    The engine is the only owner of its Board. Callers read state through the
    query methods (which hand out copies) and change it only through
    drop_counter() and reset().
    """

    def __init__(self, columns: int = DEFAULT_COLUMNS, rows: int = DEFAULT_ROWS,
                 number_to_win: int = DEFAULT_CONNECT_N,
                 starting_player: Player = Player.ONE):
        if not is_positive_int(number_to_win):
            raise ValueError(f"number_to_win must be a positive integer, got {number_to_win!r}")
        if starting_player not in (Player.ONE, Player.TWO):
            raise ValueError(f"Starting player must be ONE or TWO, got {starting_player}")

        self._board = Board(columns, rows)
        self.number_to_win = number_to_win
        self.starting_player = starting_player
        self._new_game()
        debug.debug(f"New {columns}x{rows} game, connect {number_to_win}, "
                    f"{starting_player.name} starts", "game")

    def _new_game(self) -> None:
        self.current_player = self.starting_player
        self.last_move: Optional[Coordinate] = None
        self.game_result = GameResult.IN_PROGRESS
        self._winning_lines: List[WinningLine] = []
        self.moves_made = 0

    # Queries

    @property
    def columns(self) -> int:
        return self._board.columns

    @property
    def rows(self) -> int:
        return self._board.rows

    @property
    def board(self) -> Board:
        """A copy of the current board."""
        return self._board.copy()

    @property
    def next_available_row(self) -> List[Optional[int]]:
        return list(self._board.next_available_row)

    @property
    def winner(self) -> Optional[Player]:
        if self.game_result == GameResult.PLAYER_ONE_WIN:
            return Player.ONE
        elif self.game_result == GameResult.PLAYER_TWO_WIN:
            return Player.TWO
        return None

    @property
    def winning_lines(self) -> List[WinningLine]:
        return list(self._winning_lines)

    @property
    def winning_line(self) -> Optional[WinningLine]:
        return self._winning_lines[0] if self._winning_lines else None

    @property
    def winning_cells(self) -> Set[Coordinate]:
        """Union of the cells of every winning line."""
        return {cell for line in self._winning_lines for cell in line}

    def is_game_over(self) -> bool:
        return self.game_result.is_game_over()

    def is_draw(self) -> bool:
        return self.game_result == GameResult.DRAW

    def get_cell(self, column: int, row: int) -> Player:
        return self._board.get(column, row)

    def get_state(self) -> np.ndarray:
        return self._board.get_state()

    def is_column_playable(self, column: int) -> bool:
        """True when a counter could be dropped into the column right now."""
        return self.is_valid_move(column)

    def is_valid_move(self, column: int) -> bool:
        if self.is_game_over():
            return False
        try:
            return not self._board.is_column_full(column)
        except NoSuchColumn:
            return False

    def get_valid_moves(self) -> List[int]:
        if self.is_game_over():
            return []
        return self._board.playable_columns()

    # Commands

    def drop_counter(self, column: int) -> Coordinate:
        """
        Drop the current player's counter into a column.

        Args:
            column: Column to drop into (0-indexed)

        Returns:
            The (column, row) the counter landed on

        Raises:
            GameAlreadyOver: the game has been won or drawn
            NoSuchColumn: column is outside the board
            ColumnFull: column has no empty cell left
        """
        if self.is_game_over():
            debug.debug(f"Rejected move in column {column}: game is over", "game")
            raise GameAlreadyOver(self.game_result)
        if self._board.is_column_full(column):
            debug.debug(f"Rejected move in column {column}: column is full", "game")
            raise ColumnFull(column)

        player = self.current_player
        coordinate = self._board.place(column, player)
        self.last_move = coordinate
        self.moves_made += 1
        debug.debug(f"{player.name} dropped into column {column}, landed on row {coordinate[1]}",
                    "game")

        debug.start_timer("win_check")
        self._winning_lines = find_winning_lines(self._board, coordinate, self.number_to_win)
        debug.end_timer("win_check", "game")

        if self._winning_lines:
            self.game_result = GameResult.win_for(player)
            debug.info(f"{player.name} wins with move at {coordinate}", "game")
        elif self._board.is_full():
            self.game_result = GameResult.DRAW
            debug.info("Game ends in a draw", "game")
        else:
            self.current_player = player.other()

        return coordinate

    def reset(self) -> bool:
        """
        Start a new game with the same dimensions and starting player.

        Only allowed once the game is over.

        Returns:
            True if the game was reset, False if a game is still in progress
        """
        if not self.is_game_over():
            debug.debug("Reset ignored: game in progress", "game")
            return False

        self._board = Board(self.columns, self.rows)
        self._new_game()
        debug.debug("Game reset", "game")
        return True

    # Presentation helpers

    def to_string(self) -> str:
        return self._board.to_string()

    def render(self, highlight_winning_line: bool = False) -> str:
        highlight = self.winning_cells if highlight_winning_line else None
        return self._board.render(highlight)

    def __str__(self) -> str:
        return self.render()


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Both players act through the same environment; each step drops a counter
    for whichever player's turn it is. Rewards are given to the player who
    made the move.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None,
                 columns: int = DEFAULT_COLUMNS, rows: int = DEFAULT_ROWS,
                 number_to_win: int = DEFAULT_CONNECT_N):
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")
        debug.debug("Initializing ConnectFourEnv", "env")

        self.columns = columns
        self.rows = rows
        self.number_to_win = number_to_win
        self.render_mode = render_mode

        self.action_space = spaces.Discrete(columns)
        # One cell per board position holding 0 (empty), 1 or 2
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(rows, columns), dtype=np.int8
        )

        self.game = ConnectFourGame(columns, rows, number_to_win)

        self.reward_win = 1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01  # Small negative reward to encourage faster solutions

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)

        # A gym reset has to work mid-game, so start from a fresh engine
        self.game = ConnectFourGame(self.columns, self.rows, self.number_to_win)

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Drop a counter for the player to move.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        debug.debug(f"Environment step with action {action}", "env")
        action = int(action)

        if not self.game.is_valid_move(action):
            debug.warning(f"Invalid action: {action}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        self.game.drop_counter(action)

        reward = self.reward_step
        terminated = self.game.is_game_over()
        if self.game.winner is not None:
            reward = self.reward_win
        elif self.game.is_draw():
            reward = self.reward_draw

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[Union[str, np.ndarray]]:
        if self.render_mode == "ascii":
            return self.game.render(highlight_winning_line=True)
        elif self.render_mode == "human":
            print(self.game.render(highlight_winning_line=True))
        return None

    def _get_observation(self) -> np.ndarray:
        return self.game.get_state()

    def _get_info(self) -> Dict[str, Any]:
        valid_moves = self.game.get_valid_moves()
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.game.current_player.value,
            'game_result': self.game.game_result.name,
            'moves_made': self.game.moves_made,
            'winning_lines': [list(line.cells) for line in self.game.winning_lines],
            'last_move': self.game.last_move,
        }
