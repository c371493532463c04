"""
env.py - Gymnasium front end for Connect Four

ConnectFourEnv exposes a game session through the gymnasium.Env API so that
scripts and test harnesses can drive a game one column at a time. Both
players act through the same environment; the observation is the grid.
"""

from typing import Dict, Optional, Tuple, Union

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connectfour.debug import debug
from connectfour.game.rules import ConnectFourGame, MoveEvent
from connectfour.utils import ROWS, COLS, Player

CELL_PIXELS = 50
PIECE_RADIUS = 20

BOARD_RGB = (0, 0, 128)
CELL_RGB = {
    Player.EMPTY.value: (0, 0, 0),
    Player.ONE.value: (255, 0, 0),
    Player.TWO.value: (255, 255, 0),
}


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    An illegal move is a no-op: the observation does not change, the reward
    is 0 and ``info['accepted']`` is False. ``terminated`` stays False for a
    full column and True once the game has ended.
    """

    metadata = {'render_modes': ['ascii', 'human', 'rgb_array'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None):
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        debug.debug("Initializing ConnectFourEnv", "env")
        self.action_space = spaces.Discrete(COLS)
        self.observation_space = spaces.Box(low=0, high=2, shape=(ROWS, COLS), dtype=np.int8)

        self.game = ConnectFourGame()
        self.render_mode = render_mode
        self.last_event: Optional[MoveEvent] = None

        self.reward_win = 1.0
        self.reward_other = 0.0

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """Start a new game and return the first observation."""
        super().reset(seed=seed)
        debug.debug("Resetting environment", "env")

        self.game.reset()
        self.last_event = None

        if self.render_mode == "human":
            self.render()
        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Play the active player's piece in column ``action``.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        event = self.game.play(int(action))
        self.last_event = event

        info = self._get_info()
        info['accepted'] = event.accepted
        if not event.accepted:
            debug.debug(f"Action {action} ignored", "env")
            return self._get_observation(), self.reward_other, event.is_game_over, False, info

        reward = self.reward_win if event.status.winner is not None else self.reward_other
        if event.is_game_over:
            debug.info(f"Game over: {event.status.name}", "env")

        if self.render_mode == "human":
            self.render()
        return self._get_observation(), reward, event.is_game_over, False, info

    def render(self) -> Optional[Union[str, np.ndarray]]:
        """Render the current state according to ``render_mode``."""
        if self.render_mode is None:
            return None
        if self.render_mode == "ascii":
            return self.game.render()
        if self.render_mode == "human":
            print(self.game.render())
            return None
        return self._render_rgb()

    def _render_rgb(self) -> np.ndarray:
        frame = np.zeros((ROWS * CELL_PIXELS, COLS * CELL_PIXELS, 3), dtype=np.uint8)
        frame[:, :] = BOARD_RGB

        # Disc mask shared by every cell
        offsets = np.arange(CELL_PIXELS) - CELL_PIXELS // 2
        disc = (offsets[:, None] ** 2 + offsets[None, :] ** 2) <= PIECE_RADIUS ** 2

        grid = self.game.state.grid
        for row in range(ROWS):
            for col in range(COLS):
                cell = frame[row * CELL_PIXELS:(row + 1) * CELL_PIXELS,
                             col * CELL_PIXELS:(col + 1) * CELL_PIXELS]
                cell[disc] = CELL_RGB[int(grid[row, col])]
        return frame

    def _get_observation(self) -> np.ndarray:
        return self.game.state.grid.astype(np.int8)

    def _get_info(self) -> Dict:
        state = self.game.state
        valid_moves = self.game.get_valid_moves()
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': state.active_player.value,
            'game_result': state.status.name,
            'moves_made': state.moves_made,
            'winning_line': self.game.winning_line(),
            'last_move': state.last_move,
        }
