"""
exceptions.py - Errors raised by the Connect Four engine

Every error here is caused by caller input or by the game state; none of
them signal an internal fault, and raising one never changes engine state.
"""


class Connect4Error(Exception):
    """Base class for all engine errors."""


class InvalidDimensions(Connect4Error, ValueError):
    def __init__(self, columns, rows):
        self.columns = columns
        self.rows = rows
        super().__init__(f"Board dimensions must be positive integers, got {columns}x{rows}")


class NoSuchColumn(Connect4Error, IndexError):
    def __init__(self, column, columns):
        self.column = column
        self.columns = columns
        super().__init__(f"Column {column} does not exist (board has {columns} columns)")


class NoSuchCell(Connect4Error, IndexError):
    def __init__(self, column, row):
        self.column = column
        self.row = row
        super().__init__(f"Cell ({column}, {row}) is outside the board")


class ColumnFull(Connect4Error):
    def __init__(self, column):
        self.column = column
        super().__init__(f"Column {column} is full")


class GameAlreadyOver(Connect4Error):
    def __init__(self, result=None):
        self.result = result
        super().__init__("The game is over, reset it to play again")
