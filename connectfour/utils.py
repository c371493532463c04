"""
utils.py - Constants, enumerations and helpers for the Connect Four engine

This module provides the fixed board dimensions, the Player and GameResult
enumerations, direction vectors for line scanning, and ASCII rendering of a
grid.
"""

from enum import Enum, auto
from typing import Iterable, Optional, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win

# Presentation constants
DROP_FRAME_DELAY = 0.06  # seconds per row while a piece falls
ANSI_RESET = "\033[0m"
ANSI_REVERSE = "\033[7m"
PIECE_COLORS = {
    1: "\033[31m",  # Red
    2: "\033[33m",  # Yellow
}

Coord = Tuple[int, int]  # (row, col)


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    @property
    def symbol(self) -> str:
        return {Player.EMPTY: ".", Player.ONE: "X", Player.TWO: "O"}[self]

    def __str__(self):
        return str(self.value)


class GameResult(Enum):
    """Status of a game: in progress, won by one player, or drawn."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS

    @property
    def winner(self) -> Optional[Player]:
        if self == GameResult.PLAYER_ONE_WIN:
            return Player.ONE
        if self == GameResult.PLAYER_TWO_WIN:
            return Player.TWO
        return None

    @classmethod
    def won_by(cls, player: Player) -> 'GameResult':
        if player == Player.ONE:
            return cls.PLAYER_ONE_WIN
        if player == Player.TWO:
            return cls.PLAYER_TWO_WIN
        raise ValueError(f"No win result for {player!r}")


class Direction(Enum):
    """Directions a candidate line extends from its anchor cell."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# Direction vectors (row, col); rows grow downwards
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < ROWS and 0 <= col < COLS


def is_valid_column(col: int) -> bool:
    return 0 <= col < COLS


def empty_grid() -> np.ndarray:
    return np.zeros((ROWS, COLS), dtype=int)


def parse_position(position: str) -> np.ndarray:
    """
    Parse a comma-separated list of ROWS * COLS cell values into a grid.

    Cells are listed row by row from the top. Raises ValueError for a wrong
    number of cells or values outside 0-2.
    """
    try:
        cells = [int(c) for c in position.split(',')]
    except ValueError:
        raise ValueError("Position must be comma-separated integers") from None

    if len(cells) != ROWS * COLS:
        raise ValueError(f"Position string must have {ROWS * COLS} values, got {len(cells)}")
    if any(c not in (0, 1, 2) for c in cells):
        raise ValueError("Cell values must be 0 (empty), 1 or 2")

    return np.array(cells, dtype=int).reshape(ROWS, COLS)


def _cell_text(value: int, color: bool) -> str:
    text = Player(int(value)).symbol
    if color and value in PIECE_COLORS:
        return f"{PIECE_COLORS[value]}{text}{ANSI_RESET}"
    return text


def render_board_ascii(board: np.ndarray,
                       highlight: Optional[Iterable[Coord]] = None,
                       color: bool = False) -> str:
    """
    Render the board as ASCII art.

    Args:
        board: The game grid
        highlight: Cells to show in reverse video (e.g. the winning line)
        color: Whether to colour pieces with ANSI escapes

    Returns:
        ASCII representation of the board
    """
    marked = set(highlight) if highlight else set()
    border = "+" + "-" * (COLS * 2 + 1) + "+"

    result = [border]
    for row in range(ROWS):
        cells = []
        for col in range(COLS):
            text = _cell_text(board[row, col], color)
            if (row, col) in marked:
                text = f"{ANSI_REVERSE}{text}{ANSI_RESET}" if color else text.lower()
            cells.append(text)
        result.append("| " + " ".join(cells) + " |")
    result.append(border)
    result.append("  " + " ".join(str(i) for i in range(COLS)))

    return "\n".join(result)
