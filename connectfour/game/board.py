"""
board.py - Game state and move application for Connect Four

This module implements the GameState value and the transitions on it:
starting a new game, finding where a dropped piece lands, and applying a
move. A GameState is never mutated; apply_move returns a new value, or the
same value when the move is illegal.
"""

from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

import numpy as np

from connectfour.debug import debug
from connectfour.game.evaluator import check_for_win, is_top_row_full
from connectfour.utils import (ROWS, COLS, Player, GameResult,
                               empty_grid, is_valid_column)


@dataclass(frozen=True, eq=False)
class GameState:
    """
    Snapshot of one game: grid, player to move, and status.

    The grid is stored as a read-only array so that renderers can inspect it
    without being able to change it.
    """
    grid: np.ndarray
    active_player: Player = Player.ONE
    status: GameResult = GameResult.IN_PROGRESS
    last_move: Optional[Tuple[int, int]] = None
    moves_made: int = 0

    def __post_init__(self):
        grid = np.array(self.grid, dtype=int)
        if grid.shape != (ROWS, COLS):
            raise ValueError(f"Grid must have shape {(ROWS, COLS)}, got {grid.shape}")
        grid.setflags(write=False)
        object.__setattr__(self, 'grid', grid)

    def is_game_over(self) -> bool:
        return self.status.is_game_over()

    def same_as(self, other: 'GameState') -> bool:
        """True if both states hold the same grid, player and status."""
        return (np.array_equal(self.grid, other.grid)
                and self.active_player == other.active_player
                and self.status == other.status)


def new_game() -> GameState:
    """Create a fresh game: empty grid, player one to move, in progress."""
    debug.debug("Starting new game", "board")
    return GameState(grid=empty_grid())


def find_landing_row(grid: np.ndarray, column: int) -> Optional[int]:
    """
    Find the row a piece dropped into a column settles in.

    Args:
        grid: The game grid
        column: The column to drop into (0-indexed)

    Returns:
        The lowest empty row in the column, or None if the column is full

    Raises:
        ValueError: If the column is outside the board
    """
    if not is_valid_column(column):
        raise ValueError(f"Column {column} out of range 0-{COLS - 1}")

    for row in range(ROWS - 1, -1, -1):
        if grid[row, column] == Player.EMPTY.value:
            return row
    return None


def is_valid_move(state: GameState, column: int) -> bool:
    """
    Check if a move is legal without raising.

    Returns:
        False for a finished game, an out-of-range column or a full column
    """
    if state.is_game_over():
        return False
    if not is_valid_column(column):
        return False
    return state.grid[0, column] == Player.EMPTY.value


def get_valid_moves(state: GameState) -> List[int]:
    """Columns that can still take a piece; empty once the game is over."""
    if state.is_game_over():
        return []
    return [col for col in range(COLS) if state.grid[0, col] == Player.EMPTY.value]


def apply_move(state: GameState, column: int) -> GameState:
    """
    Drop the active player's piece into a column.

    Args:
        state: The current game state
        column: The column to play (0-indexed)

    Returns:
        The new state, or ``state`` itself when the game is over or the
        column is full

    Raises:
        ValueError: If the column is outside the board
    """
    if state.is_game_over():
        debug.debug(f"Ignoring move in column {column}: game is over ({state.status.name})", "board")
        return state

    row = find_landing_row(state.grid, column)
    if row is None:
        debug.debug(f"Ignoring move in column {column}: column is full", "board")
        return state

    player = state.active_player
    grid = state.grid.copy()
    grid[row, column] = player.value
    debug.trace(f"Player {player} placed at ({row}, {column})", "board")

    # Win is checked before draw
    debug.start_timer("win_check")
    if check_for_win(grid, player):
        status = GameResult.won_by(player)
        next_player = player
        debug.info(f"Player {player} wins with move at ({row}, {column})", "board")
    elif is_top_row_full(grid):
        status = GameResult.DRAW
        next_player = player
        debug.info("Game ends in a draw", "board")
    else:
        status = GameResult.IN_PROGRESS
        next_player = player.other()
    debug.end_timer("win_check", "board")

    return replace(state,
                   grid=grid,
                   active_player=next_player,
                   status=status,
                   last_move=(row, column),
                   moves_made=state.moves_made + 1)
