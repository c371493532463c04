"""
animation.py - Cosmetic piece-drop animation for terminal front ends

A dropped piece is shown falling one row at a time from the top of its
column to its landing row. Frames are plain grids, so any renderer can draw
them. The game state is already updated when an animation starts; playback
only affects what is on screen.
"""

import time
from typing import Callable, Iterator, Optional

import numpy as np

from connectfour.debug import debug
from connectfour.utils import DROP_FRAME_DELAY, Player


def drop_frames(grid: np.ndarray, row: int, column: int, player: Player) -> Iterator[np.ndarray]:
    """
    Yield grids showing a piece falling into ``(row, column)``.

    ``grid`` may already contain the landed piece; it is cleared from the
    frames until the final one.
    """
    base = np.array(grid, dtype=int)
    base[row, column] = Player.EMPTY.value

    for falling_row in range(row + 1):
        frame = base.copy()
        frame[falling_row, column] = player.value
        yield frame


class DropAnimation:
    """Plays drop frames through a render callback with a fixed delay."""

    def __init__(self, render: Callable[[np.ndarray], None],
                 frame_delay: float = DROP_FRAME_DELAY,
                 sleep: Optional[Callable[[float], None]] = None):
        self.render = render
        self.frame_delay = frame_delay
        self._sleep = sleep or time.sleep

    def play(self, grid: np.ndarray, row: int, column: int, player: Player) -> int:
        """
        Render every frame of a drop.

        Returns:
            Number of frames rendered
        """
        debug.trace(f"Animating drop to ({row}, {column})", "animation")
        frames = 0
        for frame in drop_frames(grid, row, column, player):
            if frames:
                self._sleep(self.frame_delay)
            self.render(frame)
            frames += 1
        return frames
