"""Tests for the Gymnasium front end."""

import numpy as np
import pytest

from connectfour.interfaces.env import ConnectFourEnv
from connectfour.utils import ROWS, COLS


def test_reset_returns_empty_board():
    env = ConnectFourEnv()
    observation, info = env.reset(seed=0)

    assert observation.shape == (ROWS, COLS)
    assert observation.dtype == np.int8
    assert not observation.any()
    assert env.observation_space.contains(observation)
    assert info['valid_moves'] == list(range(COLS))
    assert info['current_player'] == 1
    assert info['game_result'] == 'IN_PROGRESS'


def test_step_drops_a_piece():
    env = ConnectFourEnv()
    env.reset()
    observation, reward, terminated, truncated, info = env.step(3)

    assert observation[ROWS - 1, 3] == 1
    assert reward == 0.0
    assert not terminated
    assert not truncated
    assert info['accepted']
    assert info['current_player'] == 2
    assert info['last_move'] == (ROWS - 1, 3)


def test_win_ends_the_episode():
    env = ConnectFourEnv()
    env.reset()
    for action in [0, 1, 0, 1, 0, 1]:
        env.step(action)
    observation, reward, terminated, truncated, info = env.step(0)

    assert reward == 1.0
    assert terminated
    assert info['game_result'] == 'PLAYER_ONE_WIN'
    assert info['winning_line'] == [(2, 0), (3, 0), (4, 0), (5, 0)]
    assert info['valid_moves'] == []


def test_full_column_is_a_no_op():
    env = ConnectFourEnv()
    env.reset()
    for _ in range(ROWS):
        env.step(4)
    before = env._get_observation()

    observation, reward, terminated, truncated, info = env.step(4)
    assert not info['accepted']
    assert reward == 0.0
    assert not terminated
    assert np.array_equal(observation, before)
    assert info['moves_made'] == ROWS


def test_rgb_render():
    env = ConnectFourEnv(render_mode="rgb_array")
    env.reset()
    env.step(0)
    env.step(6)
    frame = env.render()

    assert frame.shape == (ROWS * 50, COLS * 50, 3)
    assert tuple(frame[0, 0]) == (0, 0, 128)
    assert tuple(frame[5 * 50 + 25, 25]) == (255, 0, 0)
    assert tuple(frame[5 * 50 + 25, 6 * 50 + 25]) == (255, 255, 0)
    assert tuple(frame[25, 25]) == (0, 0, 0)


def test_ascii_render():
    env = ConnectFourEnv(render_mode="ascii")
    env.reset()
    env.step(2)
    assert "X" in env.render()
    assert ConnectFourEnv().render() is None


def test_unknown_render_mode():
    with pytest.raises(ValueError):
        ConnectFourEnv(render_mode="pixels")


def test_moves_after_the_end_stay_terminated():
    env = ConnectFourEnv()
    env.reset()
    for action in [0, 1, 0, 1, 0, 1, 0]:
        env.step(action)
    before = env._get_observation()

    observation, reward, terminated, truncated, info = env.step(3)
    assert not info['accepted']
    assert reward == 0.0
    assert terminated
    assert not truncated
    assert np.array_equal(observation, before)
