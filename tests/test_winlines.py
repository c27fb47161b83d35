"""Tests for win detection around a placed counter"""
import pytest

from connect4_engine.game.winlines import WinningLine, count_in_direction, find_winning_lines
from connect4_engine.utils import Direction, Player


class TestFindWinningLines:

    def test_vertical(self, make_board):
        board = make_board(["0", "0", "1", "0", "1111", "0", "0"])
        lines = find_winning_lines(board, (4, 1))
        assert lines == [WinningLine(Player.TWO, Direction.VERTICAL,
                                     ((4, 0), (4, 1), (4, 2), (4, 3)))]

    def test_horizontal(self, make_board):
        board = make_board(["0", "0", "1", "010", "1101", "010", "000"])
        lines = find_winning_lines(board, (6, 2))
        assert len(lines) == 1
        assert lines[0].player == Player.ONE
        assert lines[0].direction == Direction.HORIZONTAL
        assert lines[0].cells == ((3, 2), (4, 2), (5, 2), (6, 2))

    def test_diagonal(self, make_board):
        board = make_board(["0", "0", "1", "010", "1110", "0101", "000"])
        lines = find_winning_lines(board, (2, 0))
        assert [line.direction for line in lines] == [Direction.DIAGONAL]
        assert lines[0].cells == ((2, 0), (3, 1), (4, 2), (5, 3))

    def test_anti_diagonal(self, make_board):
        board = make_board(["0", "0", "11001", "0001", "1110", "0101", "000"])
        lines = find_winning_lines(board, (3, 3))
        assert [line.direction for line in lines] == [Direction.ANTI_DIAGONAL]
        assert lines[0].cells == ((2, 4), (3, 3), (4, 2), (5, 1))

    def test_same_line_found_from_any_cell(self, make_board):
        board = make_board(["0", "0", "11001", "0001", "1110", "0101", "000"])
        for cell in [(2, 4), (4, 2), (5, 1)]:
            assert find_winning_lines(board, cell) == find_winning_lines(board, (3, 3))

    def test_multiple_lines_at_once(self, make_board):
        board = make_board(["0", "0", "11011", "0001", "1111", "0001", "000"])
        lines = find_winning_lines(board, (4, 3))
        assert [line.direction for line in lines] == [Direction.HORIZONTAL, Direction.VERTICAL]
        assert lines[0].cells == ((2, 3), (3, 3), (4, 3), (5, 3))
        assert lines[1].cells == ((4, 0), (4, 1), (4, 2), (4, 3))

    def test_long_run_is_not_truncated(self, make_board):
        board = make_board(["0", "0", "1", "0", "111111", "0", "0"])
        lines = find_winning_lines(board, (4, 3))
        assert len(lines) == 1
        assert len(lines[0]) == 6
        assert list(lines[0]) == [(4, row) for row in range(6)]

    def test_six_in_a_row_horizontally(self, make_board):
        board = make_board(["1", "1", "1", "1", "1", "1", "0"], rows=1)
        lines = find_winning_lines(board, (0, 0))
        assert lines[0].cells == tuple((col, 0) for col in range(6))
        assert (6, 0) not in lines[0]

    def test_three_is_not_a_win(self, make_board):
        board = make_board(["000", "1", "1", "1"])
        assert find_winning_lines(board, (0, 2)) == []
        assert find_winning_lines(board, (3, 0)) == []

    def test_opponent_counter_breaks_run(self, make_board):
        board = make_board(["0", "0", "1", "0", "0"], rows=1)
        assert find_winning_lines(board, (4, 0)) == []

    def test_empty_cell_has_no_lines(self, board):
        assert find_winning_lines(board, (3, 0)) == []

    def test_custom_number_to_win(self, make_board):
        board = make_board(["00", "1", "1"], rows=3)
        assert find_winning_lines(board, (0, 1), number_to_win=2)[0].cells == ((0, 0), (0, 1))
        assert find_winning_lines(board, (0, 1), number_to_win=3) == []

    def test_single_counter_wins_every_direction_with_connect_one(self, make_board):
        board = make_board(["0"], rows=1)
        lines = find_winning_lines(board, (0, 0), number_to_win=1)
        assert [line.direction for line in lines] == list(Direction)
        assert all(line.cells == ((0, 0),) for line in lines)

    @pytest.mark.parametrize("number_to_win", [0, "4", 3.5])
    def test_invalid_number_to_win(self, board, number_to_win):
        with pytest.raises(ValueError):
            find_winning_lines(board, (0, 0), number_to_win=number_to_win)


class TestCountInDirection:

    def test_walk_stops_at_board_edge(self, make_board):
        board = make_board(["0", "10", "110", "1110"])
        assert count_in_direction(board, (1, 1), Direction.DIAGONAL) == \
            ((0, 0), (1, 1), (2, 2), (3, 3))
        assert count_in_direction(board, (3, 3), Direction.VERTICAL) == ((3, 3),)
        assert count_in_direction(board, (0, 0), Direction.ANTI_DIAGONAL) == ((0, 0),)

    def test_empty_cell(self, board):
        assert count_in_direction(board, (0, 0), Direction.HORIZONTAL) == ()

    def test_direction_vectors(self):
        assert Direction.HORIZONTAL.vector == (1, 0)
        assert Direction.VERTICAL.vector == (0, 1)
        assert Direction.DIAGONAL.vector == (1, 1)
        assert Direction.ANTI_DIAGONAL.vector == (1, -1)
        assert Direction.ANTI_DIAGONAL.step((2, 2), -2) == (0, 4)
