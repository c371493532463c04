"""
evaluator.py - Win and draw detection for Connect Four

The win check is a plain scan: every cell of the grid is used as an anchor,
four candidate lines of CONNECT_N cells are built from it, and a line wins
when every cell is on the board and owned by the player. The board is small
and the check runs once per move, so nothing is cached between calls.
"""

from typing import Iterator, List, Optional

import numpy as np

from connectfour.debug import debug
from connectfour.utils import (ROWS, COLS, CONNECT_N, DIRECTION_VECTORS,
                               Coord, Direction, Player, is_valid_position)


def candidate_lines(row: int, col: int) -> Iterator[List[Coord]]:
    """
    Build the candidate lines anchored at a cell.

    Yields one line per direction (horizontal, vertical, diagonal down-right,
    diagonal down-left). Coordinates may fall outside the board; callers
    are expected to bounds-check.
    """
    for dr, dc in DIRECTION_VECTORS.values():
        yield [(row + i * dr, col + i * dc) for i in range(CONNECT_N)]


def _is_match(grid: np.ndarray, line: List[Coord], player: Player) -> bool:
    return all(is_valid_position(r, c) and grid[r, c] == player.value for r, c in line)


def find_winning_line(grid: np.ndarray, player: Player) -> Optional[List[Coord]]:
    """
    Find the first line of CONNECT_N cells owned by a player.

    Args:
        grid: The game grid
        player: The player to check for

    Returns:
        The cells of the line as (row, col) pairs, or None if there is none
    """
    for row in range(ROWS):
        for col in range(COLS):
            for line in candidate_lines(row, col):
                if _is_match(grid, line, player):
                    debug.trace(f"Winning line for player {player}: {line}", "evaluator")
                    return line
    return None


def check_for_win(grid: np.ndarray, player: Player) -> bool:
    """Check whether a player has CONNECT_N in a row anywhere on the grid."""
    return find_winning_line(grid, player) is not None


def is_top_row_full(grid: np.ndarray) -> bool:
    # Pieces stack from the bottom, so a full top row means a full board
    return bool(np.all(grid[0] != Player.EMPTY.value))


def line_direction(line: List[Coord]) -> Direction:
    """Name the direction a line runs in (used for announcements)."""
    (r0, c0), (r1, c1) = line[0], line[1]
    step = (r1 - r0, c1 - c0)
    for direction, vector in DIRECTION_VECTORS.items():
        if vector == step:
            return direction
    raise ValueError(f"Not a straight line: {line}")
