"""
rules.py - Game session management for Connect Four

This module provides:
1. MoveEvent, a description of what a single input did to the game
2. ConnectFourGame, the session object front ends talk to
"""

from dataclasses import dataclass, field
from typing import List, Optional

from connectfour.debug import debug
from connectfour.game.board import (GameState, new_game, apply_move,
                                    get_valid_moves)
from connectfour.game.evaluator import find_winning_line, line_direction
from connectfour.utils import Coord, GameResult, Player, render_board_ascii


@dataclass(frozen=True)
class MoveEvent:
    """
    Outcome of one column choice.

    ``row`` is None and ``accepted`` is False when the move was ignored
    because the column was full or the game had already ended.
    """
    accepted: bool
    column: int
    row: Optional[int]
    player: Player
    status: GameResult
    state: GameState = field(repr=False)
    winning_line: List[Coord] = field(default_factory=list)

    @property
    def is_game_over(self) -> bool:
        return self.status.is_game_over()


def status_message(state: GameState) -> str:
    """Announcement for the current status, or the turn indicator."""
    if state.status == GameResult.DRAW:
        return "Game Over - Tie!"
    winner = state.status.winner
    if winner is not None:
        return f"Player {winner} won!"
    return f"Current player: {state.active_player}"


class ConnectFourGame:
    """
    High-level Connect Four game session.

    Holds the single GameState of a session and turns column choices into
    MoveEvents, so that any front end can render from the event alone.
    """

    def __init__(self):
        debug.debug("Initializing ConnectFourGame", "game")
        self._state = new_game()

    @property
    def state(self) -> GameState:
        return self._state

    def reset(self) -> GameState:
        """Throw away the current game and start a new one."""
        debug.debug("Resetting game", "game")
        self._state = new_game()
        return self._state

    def play(self, column: int) -> MoveEvent:
        """
        Play the active player's piece in a column.

        Args:
            column: Column to place a piece (0-indexed)

        Returns:
            MoveEvent describing the placed cell and the resulting status

        Raises:
            ValueError: If the column is outside the board
        """
        before = self._state
        player = before.active_player
        after = apply_move(before, column)

        if after is before:
            debug.debug(f"Move in column {column} not accepted", "game")
            return MoveEvent(accepted=False, column=column, row=None, player=player,
                             status=before.status, state=before)

        self._state = after
        row = after.last_move[0]

        winning_line = []
        if after.status.winner is not None:
            winning_line = find_winning_line(after.grid, player) or []
            if winning_line:
                debug.info(f"Player {player} won with a "
                           f"{line_direction(winning_line).name.lower()} line", "game")

        return MoveEvent(accepted=True, column=column, row=row, player=player,
                         status=after.status, state=after, winning_line=winning_line)

    def is_game_over(self) -> bool:
        return self._state.is_game_over()

    def get_winner(self) -> Optional[Player]:
        """The winning player, or None if no winner yet or a draw."""
        return self._state.status.winner

    def get_current_player(self) -> Player:
        return self._state.active_player

    def get_valid_moves(self) -> List[int]:
        return get_valid_moves(self._state)

    def winning_line(self) -> List[Coord]:
        winner = self.get_winner()
        if winner is None:
            return []
        return find_winning_line(self._state.grid, winner) or []

    def render(self, color: bool = False) -> str:
        """
        Render the game as a string.

        The winning line, if any, is highlighted.
        """
        return render_board_ascii(self._state.grid, highlight=self.winning_line(), color=color)
