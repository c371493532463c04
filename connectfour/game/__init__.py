"""
connectfour.game - Core game mechanics for Connect Four

This package contains the game state machine, the win/draw evaluator and
the game session used by front ends.
"""

from connectfour.game.board import (GameState, new_game, find_landing_row,
                                    apply_move, is_valid_move, get_valid_moves)
from connectfour.game.evaluator import check_for_win, find_winning_line, is_top_row_full
from connectfour.game.rules import ConnectFourGame, MoveEvent, status_message

__all__ = ['GameState', 'new_game', 'find_landing_row', 'apply_move',
           'is_valid_move', 'get_valid_moves', 'check_for_win',
           'find_winning_line', 'is_top_row_full', 'ConnectFourGame',
           'MoveEvent', 'status_message']
