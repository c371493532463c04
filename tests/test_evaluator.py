"""Tests for win and draw detection."""

import numpy as np
import pytest

from connectfour.game.evaluator import (candidate_lines, check_for_win,
                                        find_winning_line, is_top_row_full,
                                        line_direction)
from connectfour.utils import ROWS, COLS, Direction, Player


def grid_with(cells, player=Player.ONE):
    grid = np.zeros((ROWS, COLS), dtype=int)
    for row, col in cells:
        grid[row, col] = player.value
    return grid


def test_horizontal_win():
    grid = grid_with([(5, 0), (5, 1), (5, 2), (5, 3)])
    assert check_for_win(grid, Player.ONE)
    assert not check_for_win(grid, Player.TWO)
    assert find_winning_line(grid, Player.ONE) == [(5, 0), (5, 1), (5, 2), (5, 3)]


def test_vertical_win():
    grid = grid_with([(2, 0), (3, 0), (4, 0), (5, 0)])
    assert check_for_win(grid, Player.ONE)
    assert not check_for_win(grid, Player.TWO)


def test_diagonal_down_right_win():
    grid = grid_with([(2, 0), (3, 1), (4, 2), (5, 3)])
    assert check_for_win(grid, Player.ONE)
    line = find_winning_line(grid, Player.ONE)
    assert line_direction(line) == Direction.DIAGONAL_DOWN_RIGHT


def test_diagonal_down_left_win():
    grid = grid_with([(2, 3), (3, 2), (4, 1), (5, 0)])
    assert check_for_win(grid, Player.ONE)
    line = find_winning_line(grid, Player.ONE)
    assert line == [(2, 3), (3, 2), (4, 1), (5, 0)]
    assert line_direction(line) == Direction.DIAGONAL_DOWN_LEFT


def test_player_two_win():
    grid = grid_with([(0, 3), (0, 4), (0, 5), (0, 6)], Player.TWO)
    assert check_for_win(grid, Player.TWO)
    assert not check_for_win(grid, Player.ONE)


@pytest.mark.parametrize("cells", [
    [(5, 0), (5, 1), (5, 2)],                 # three in a row
    [(5, 0), (5, 1), (5, 3), (5, 4)],         # broken sequence
    [(3, 6), (4, 6), (5, 6), (5, 5)],         # corner shape
    [(2, 1), (3, 0), (4, 6), (5, 5)],         # would wrap past column 0
    [(5, 4), (5, 5), (5, 6), (4, 0)],         # would wrap past column 6
])
def test_no_win(cells):
    assert not check_for_win(grid_with(cells), Player.ONE)
    assert find_winning_line(grid_with(cells), Player.ONE) is None


def test_mixed_players_do_not_win():
    grid = grid_with([(5, 0), (5, 1), (5, 2)])
    grid[5, 3] = Player.TWO.value
    assert not check_for_win(grid, Player.ONE)
    assert not check_for_win(grid, Player.TWO)


def test_empty_grid_has_no_winner():
    grid = np.zeros((ROWS, COLS), dtype=int)
    assert not check_for_win(grid, Player.ONE)
    assert not check_for_win(grid, Player.TWO)


def test_full_board_without_lines():
    a = [1, 1, 2, 2, 1, 1, 2]
    b = [2, 2, 1, 1, 2, 2, 1]
    grid = np.array([a, b, a, b, a, b])
    assert is_top_row_full(grid)
    assert not check_for_win(grid, Player.ONE)
    assert not check_for_win(grid, Player.TWO)


def test_top_row_full():
    grid = np.ones((ROWS, COLS), dtype=int)
    assert is_top_row_full(grid)
    grid[0, 4] = 0
    assert not is_top_row_full(grid)
    assert not is_top_row_full(np.zeros((ROWS, COLS), dtype=int))


def test_candidate_lines():
    lines = list(candidate_lines(2, 3))
    assert lines == [
        [(2, 3), (2, 4), (2, 5), (2, 6)],
        [(2, 3), (3, 3), (4, 3), (5, 3)],
        [(2, 3), (3, 4), (4, 5), (5, 6)],
        [(2, 3), (3, 2), (4, 1), (5, 0)],
    ]


def test_line_direction_rejects_bent_lines():
    with pytest.raises(ValueError):
        line_direction([(0, 0), (2, 1), (4, 2), (5, 3)])
