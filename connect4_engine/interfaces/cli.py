"""
cli.py - Command-line interface for the Connect Four engine

This module provides a terminal front end for the engine: two players can
play against each other, a move list can be replayed and printed, and the
engine can be benchmarked on random games.
"""

import argparse
import random
import sys
from typing import List, Optional

from connect4_engine.debug import debug
from connect4_engine.exceptions import ColumnFull, Connect4Error, GameAlreadyOver, NoSuchColumn
from connect4_engine.game.rules import ConnectFourGame
from connect4_engine.utils import DEFAULT_COLUMNS, DEFAULT_CONNECT_N, DEFAULT_ROWS, Player

QUIT = 'q'
RESET = 'r'


class SimpleCLI:
    """Simple command-line interface for Connect Four."""

    def __init__(self):
        self.game: Optional[ConnectFourGame] = None
        self.args = None

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(description='Connect Four engine CLI')
        parser.add_argument('--columns', type=int, default=DEFAULT_COLUMNS,
                            help='Number of columns on the board')
        parser.add_argument('--rows', type=int, default=DEFAULT_ROWS,
                            help='Number of rows on the board')
        parser.add_argument('--connect', type=int, default=DEFAULT_CONNECT_N,
                            help='Counters in a row needed to win')
        parser.add_argument('--debug-level', default=None,
                            choices=['none', 'error', 'warning', 'info', 'debug', 'trace'],
                            help='Logging verbosity (leaves the current level alone when omitted)')
        parser.add_argument('--log-file', default=None, help='Also write logs to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        subparsers.add_parser('play', help='Play a two-player game interactively')

        render_parser = subparsers.add_parser('render', help='Replay moves and print the board')
        render_parser.add_argument('--moves', type=str, default='',
                                   help='Comma-separated column numbers, e.g. 3,3,4')
        render_parser.add_argument('--pretty', action='store_true',
                                   help='Draw the boxed board instead of the compact form')

        benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark random games')
        benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                      help='Number of games to play')
        benchmark_parser.add_argument('--seed', type=int, default=None,
                                      help='Random seed for reproducible games')

        self.args = parser.parse_args(argv)

        if self.args.debug_level:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def new_game(self) -> ConnectFourGame:
        return ConnectFourGame(self.args.columns, self.args.rows, self.args.connect)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI and return a process exit code."""
        if not self.args:
            self.parse_args(argv)

        try:
            self.game = self.new_game()
        except (Connect4Error, ValueError) as e:
            print(f"Error: {e}")
            return 2

        if self.args.command == 'play':
            self.play_game()
        elif self.args.command == 'render':
            return self.render_moves()
        elif self.args.command == 'benchmark':
            self.benchmark()
        else:
            print("Please specify a command. Use --help for options.")
            return 1
        return 0

    def play_game(self) -> None:
        """Play a Connect Four game between two people at the same terminal."""
        last_column = self.game.columns - 1
        print("Starting a new Connect Four game!")
        print(f"Enter a column number (0-{last_column}) to drop a counter.")
        print(f"Other commands: '{QUIT}' to quit, '{RESET}' to play again once a game is over.")
        print(self.game.render())

        while True:
            command = self.read_command()
            if command is None:
                continue
            if command == QUIT:
                print("Quitting game.")
                return
            if command == RESET:
                if self.game.reset():
                    print("New game.")
                    print(self.game.render())
                else:
                    print("Finish the current game before starting a new one.")
                continue

            try:
                self.game.drop_counter(command)
            except GameAlreadyOver:
                print(f"The game is over. Enter '{RESET}' to play again or '{QUIT}' to quit.")
                continue
            except ColumnFull as e:
                print(f"Column {e.column} is full, try again.")
                continue
            except NoSuchColumn as e:
                print(f"Column {e.column} does not exist, try again.")
                continue

            print(self.game.render(highlight_winning_line=True))
            if self.game.is_game_over():
                self.announce_result()

    def read_command(self):
        """
        Read one command from the current player.

        Returns:
            A column number, QUIT, RESET, or None for unreadable input
        """
        if self.game.is_game_over():
            prompt = f"Play again? ({RESET}/{QUIT}): "
        else:
            prompt = f"Player {self.game.current_player} move: "

        try:
            user_input = input(prompt).strip().lower()
        except EOFError:
            return QUIT

        if user_input in (QUIT, RESET):
            return user_input
        try:
            return int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or command.")
            return None

    def announce_result(self) -> None:
        winner = self.game.winner
        if winner is None:
            print("It's a draw!")
        else:
            lines = self.game.winning_lines
            print(f"Player {winner} wins with {len(lines)} winning line(s)!")

    def render_moves(self) -> int:
        """Replay the --moves list and print the resulting board."""
        try:
            moves = [int(c) for c in self.args.moves.split(',') if c.strip()]
        except ValueError:
            print(f"Could not parse moves: {self.args.moves}")
            return 2

        for i, column in enumerate(moves):
            try:
                self.game.drop_counter(column)
            except Connect4Error as e:
                print(f"Move {i + 1} (column {column}) rejected: {e}")
                return 1

        if self.args.pretty:
            print(self.game.render(highlight_winning_line=True))
        else:
            print(self.game.to_string())

        if self.game.winner is not None:
            print(f"Winner: {self.game.winner.name}")
            for line in self.game.winning_lines:
                print(f"  {line.direction.name.lower()}: {list(line.cells)}")
        elif self.game.is_draw():
            print("Draw")
        return 0

    def benchmark(self) -> None:
        """Play random games and report how fast the engine runs."""
        rng = random.Random(self.args.seed)
        iterations = max(1, self.args.iterations)
        print(f"Running benchmark with {iterations} games...")

        results = {Player.ONE: 0, Player.TWO: 0, None: 0}
        total_moves = 0

        debug.start_timer("game_simulation")
        for _ in range(iterations):
            game = self.new_game()
            while not game.is_game_over():
                game.drop_counter(rng.choice(game.get_valid_moves()))
            results[game.winner] += 1
            total_moves += game.moves_made
        simulation_time = debug.end_timer("game_simulation", "cli")

        print(f"Played {iterations} games with {total_moves} total moves: "
              f"{simulation_time:.6f} seconds total, "
              f"{simulation_time / iterations * 1000:.6f} ms per game, "
              f"{simulation_time / max(1, total_moves) * 1000:.6f} ms per move")
        print(f"Player ONE wins: {results[Player.ONE]}, Player TWO wins: {results[Player.TWO]}, "
              f"draws: {results[None]}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
