"""
winlines.py - Win detection for Connect Four

Win detection only looks at the cells running through the counter that was
just placed: for each of the four directions it walks outward both ways and
collects the contiguous run of same-coloured counters.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from connect4_engine.debug import debug
from connect4_engine.game.board import Board
from connect4_engine.utils import (DEFAULT_CONNECT_N, Coordinate, Direction, Player,
                                   is_positive_int)


@dataclass(frozen=True)
class WinningLine:
    """A maximal run of one player's counters along a single direction."""
    player: Player
    direction: Direction
    cells: Tuple[Coordinate, ...]  # ordered from the negative end to the positive end

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.cells)

    def __contains__(self, coordinate) -> bool:
        return tuple(coordinate) in self.cells


def _walk(board: Board, origin: Coordinate, direction: Direction,
          sign: int, player: Player) -> List[Coordinate]:
    cells = []
    column, row = direction.step(origin, sign)
    while board.in_bounds(column, row) and board.get(column, row) == player:
        cells.append((column, row))
        column, row = direction.step((column, row), sign)
    return cells


def count_in_direction(board: Board, coordinate: Coordinate,
                       direction: Direction) -> Tuple[Coordinate, ...]:
    """
    Collect the contiguous run through `coordinate` along one direction.

    Returns:
        The run's cells ordered from the negative end to the positive end,
        or an empty tuple when the cell is empty
    """
    column, row = coordinate
    player = board.get(column, row)
    if player == Player.EMPTY:
        return ()

    backwards = _walk(board, (column, row), direction, -1, player)
    forwards = _walk(board, (column, row), direction, 1, player)
    return tuple(reversed(backwards)) + ((column, row),) + tuple(forwards)


def find_winning_lines(board: Board, coordinate: Coordinate,
                       number_to_win: int = DEFAULT_CONNECT_N) -> List[WinningLine]:
    """
    Find every winning line passing through a cell.

    Args:
        board: The board to inspect
        coordinate: (column, row) of the counter just placed
        number_to_win: Minimum run length that counts as a win

    Returns:
        One WinningLine per direction whose run is at least number_to_win
        long, in Direction order. Empty when there is no win.
    """
    if not is_positive_int(number_to_win):
        raise ValueError(f"number_to_win must be a positive integer, got {number_to_win!r}")

    column, row = coordinate
    player = board.get(column, row)
    if player == Player.EMPTY:
        return []

    lines = []
    for direction in Direction:
        cells = count_in_direction(board, coordinate, direction)
        if len(cells) >= number_to_win:
            debug.debug(f"{player.name} has {len(cells)} in a row {direction.name.lower()} "
                        f"through {coordinate}", "winlines")
            lines.append(WinningLine(player, direction, cells))
    return lines
