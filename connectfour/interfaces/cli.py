"""
cli.py - Command-line interface for playing and inspecting Connect Four

This module provides a hot-seat terminal game with animated drops, a
position inspector, and a small benchmark of the rules engine.
"""

import argparse
import random
import sys
from typing import List, Optional

import numpy as np

from connectfour.debug import debug, DebugLevel
from connectfour.game.board import new_game, apply_move, find_landing_row
from connectfour.game.evaluator import find_winning_line, is_top_row_full
from connectfour.game.rules import ConnectFourGame, MoveEvent, status_message
from connectfour.interfaces.animation import DropAnimation
from connectfour.utils import (COLS, Player, parse_position,
                               render_board_ascii)

# Special command codes returned by get_human_move
QUIT = -1
NEW_GAME = -2

CLEAR_SCREEN = "\033[2J\033[H"


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Connect Four CLI')
    parser.add_argument('--debug', action='store_true', help='Shortcut for --debug-level debug')
    parser.add_argument('--debug-level', default='info',
                        choices=[level.name.lower() for level in DebugLevel],
                        help='Logging level')
    parser.add_argument('--log-file', type=str, help='Also write log messages to this file')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    play_parser = subparsers.add_parser('play', help='Play a two-player game in the terminal')
    play_parser.add_argument('--no-animation', action='store_true', help='Do not animate drops')
    play_parser.add_argument('--no-color', action='store_true', help='Plain ASCII pieces')

    show_parser = subparsers.add_parser('show', help='Inspect a board position')
    show_parser.add_argument('--position', type=str, required=True,
                             help='Comma-separated cell values (0, 1, 2), top row first')

    benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark the rules engine')
    benchmark_parser.add_argument('--iterations', type=positive_int, default=1000,
                                  help='Number of iterations for benchmarking')

    return parser


def configure_debug(args: argparse.Namespace) -> None:
    """Configure the debug manager from parsed arguments."""
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    else:
        debug.set_from_string(args.debug_level)
    debug.configure(log_file=args.log_file)


class SimpleCLI:
    """Simple command-line interface for Connect Four."""

    def __init__(self, input_func=input):
        self.game = ConnectFourGame()
        self.args = None
        self._input = input_func
        self.color = True
        self.animation = None

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and apply the debug settings."""
        self.args = build_parser().parse_args(argv)
        configure_debug(self.args)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI based on the parsed arguments."""
        if not self.args:
            self.parse_args(argv)

        if self.args.command == 'play':
            self.color = not self.args.no_color
            if not self.args.no_animation:
                self.animation = DropAnimation(self._draw_frame)
            self.play_game()
        elif self.args.command == 'show':
            return self.show_position()
        elif self.args.command == 'benchmark':
            self.benchmark()
        else:
            print("Please specify a command. Use --help for options.")
            return 1
        return 0

    def _draw(self, highlight=None) -> None:
        print(render_board_ascii(self.game.state.grid, highlight=highlight, color=self.color))
        print(status_message(self.game.state))

    def _draw_frame(self, grid: np.ndarray) -> None:
        print(CLEAR_SCREEN + render_board_ascii(grid, color=self.color))

    def _show_move(self, event: MoveEvent) -> None:
        if self.animation is not None:
            self.animation.play(event.state.grid, event.row, event.column, event.player)
        self._draw(highlight=event.winning_line)

    def play_game(self) -> None:
        """Play a hot-seat Connect Four game until the user quits."""
        print("Starting a new Connect Four game!")
        print(f"Enter a column number (0-{COLS - 1}) to drop a piece.")
        print("Other commands: 'n' for a new game, 'q' to quit.")

        self.game.reset()
        self._draw()

        while True:
            move = self.get_human_move()

            if move is None:
                continue
            if move == QUIT:
                print("Quitting game.")
                return
            if move == NEW_GAME:
                self.game.reset()
                print("New game started.")
                self._draw()
                continue

            # Finished games take no more moves
            if self.game.is_game_over():
                print(status_message(self.game.state))
                print("Enter 'n' for a new game or 'q' to quit.")
                continue

            event = self.game.play(move)
            if not event.accepted:
                print(f"Column {move} is full.")
                continue

            self._show_move(event)
            if event.is_game_over:
                print("Enter 'n' for a new game or 'q' to quit.")

    def get_human_move(self) -> Optional[int]:
        """
        Read one command from the player.

        Returns:
            Column index, QUIT, NEW_GAME, or None if the input was invalid
        """
        player = self.game.get_current_player()
        try:
            user_input = self._input(f"Player {player} move (0-{COLS - 1}, n/q): ").strip().lower()
        except EOFError:
            return QUIT

        if user_input in ('q', 'quit'):
            return QUIT
        if user_input in ('n', 'new'):
            return NEW_GAME

        try:
            move = int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or a command.")
            return None

        if not 0 <= move < COLS:
            print(f"Column must be between 0 and {COLS - 1}.")
            return None
        return move

    def show_position(self) -> int:
        """Print an analysis of the position given with --position."""
        try:
            grid = parse_position(self.args.position)
        except ValueError as e:
            print(f"Error parsing position: {e}")
            return 1

        print("Loaded position:")
        print(render_board_ascii(grid))

        has_win = False
        for player in (Player.ONE, Player.TWO):
            line = find_winning_line(grid, player)
            if line:
                print(f"Win for player {player}: {line}")
                has_win = True
        if not has_win:
            print("No win detected for any player")

        if is_top_row_full(grid):
            print("Top row is full")
        else:
            empty_count = int(np.sum(grid == Player.EMPTY.value))
            print(f"Empty spaces: {empty_count}")

        landing = {col: find_landing_row(grid, col) for col in range(COLS)}
        print(f"Valid moves: {[col for col, row in landing.items() if row is not None]}")
        return 0

    def benchmark(self) -> None:
        """Benchmark new games, move application, win scans and rendering."""
        iterations = self.args.iterations
        print(f"Running benchmark with {iterations} iterations...")

        debug.start_timer("new_game")
        for _ in range(iterations):
            new_game()
        elapsed = debug.end_timer("new_game")
        print(f"New game: {elapsed:.6f} seconds total, "
              f"{elapsed / iterations * 1000:.6f} ms per game")

        state = new_game()
        moves_made = 0
        debug.start_timer("moves")
        for _ in range(iterations):
            col = random.randrange(COLS)
            after = apply_move(state, col)
            if after is not state:
                moves_made += 1
            state = new_game() if after.is_game_over() else after
        elapsed = debug.end_timer("moves")
        print(f"Applying {moves_made} moves: {elapsed:.6f} seconds total, "
              f"{elapsed / max(moves_made, 1) * 1000:.6f} ms per move")

        game = ConnectFourGame()
        games_played = 0
        total_moves = 0
        debug.start_timer("game_simulation")
        for _ in range(max(iterations // 10, 1)):
            game.reset()
            while not game.is_game_over():
                game.play(random.choice(game.get_valid_moves()))
                total_moves += 1
            games_played += 1
        elapsed = debug.end_timer("game_simulation")
        print(f"Played {games_played} games with {total_moves} total moves: "
              f"{elapsed:.6f} seconds total, "
              f"{elapsed / games_played * 1000:.6f} ms per game")

        debug.start_timer("rendering")
        for _ in range(iterations):
            game.render()
        elapsed = debug.end_timer("rendering")
        print(f"Rendering board {iterations} times: {elapsed:.6f} seconds total")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
