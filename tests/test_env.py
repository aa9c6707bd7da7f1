import numpy as np
import pytest

from paddleball.constants import PADDLE_SPEED
from paddleball.env import ArcadeEnv


@pytest.fixture
def pong_env():
    env = ArcadeEnv({"game": "pong"})
    env.reset()
    return env


@pytest.fixture
def breakout_env():
    env = ArcadeEnv({"game": "breakout"})
    env.reset()
    return env


def test_reset_returns_observation_in_space(pong_env):
    obs, info = pong_env.reset()
    assert obs.shape == (5,) and obs.dtype == np.float32
    assert pong_env.observation_space.contains(obs)
    assert info["player_score"] == info["computer_score"] == 0


def test_pong_actions_move_player_vertically(pong_env):
    y = pong_env.state.player.y
    pong_env.step(1)
    assert pong_env.state.player.y == y - PADDLE_SPEED
    pong_env.step(2)
    pong_env.step(2)
    assert pong_env.state.player.y == y + PADDLE_SPEED


def test_breakout_actions_move_player_horizontally_and_clip(breakout_env):
    x = breakout_env.state.player.x
    breakout_env.step(2)
    assert breakout_env.state.player.x == x + PADDLE_SPEED

    breakout_env.state.player.x = 3
    breakout_env.step(1)
    assert breakout_env.state.player.x == 0


def test_move_pointer_accounts_for_surface_offset(breakout_env):
    breakout_env.move_pointer(400, surface_offset=100)
    assert breakout_env.state.player.x == 250


def test_player_point_is_rewarded(pong_env):
    s = pong_env.state
    s.ball.x, s.ball.y = 695, 225
    s.ball.velocity_x, s.ball.velocity_y = 5, 0
    _, reward, terminated, _, info = pong_env.step(0)
    assert reward == 1.0 and terminated
    assert info["player_score"] == 1


def test_missed_ball_is_penalised(pong_env):
    s = pong_env.state
    s.ball.x, s.ball.y = 8, 400
    s.ball.velocity_x, s.ball.velocity_y = -5, 0
    _, reward, terminated, _, info = pong_env.step(0)
    assert reward == -1.0 and terminated
    assert info["computer_score"] == 1


def test_block_destroyed_is_rewarded(breakout_env):
    ball = breakout_env.state.ball
    ball.x, ball.y = 140, 170
    ball.velocity_x, ball.velocity_y = 0, -5
    _, reward, terminated, _, info = breakout_env.step(0)
    assert reward == 1.0 and not terminated
    assert info["blocks_left"] == 59


def test_lost_ball_ends_breakout_episode(breakout_env):
    ball = breakout_env.state.ball
    ball.x, ball.y = 100, 695
    ball.velocity_x, ball.velocity_y = 5, 5
    _, reward, terminated, _, _ = breakout_env.step(0)
    assert reward == -1.0 and terminated


def test_idle_steps_truncate():
    env = ArcadeEnv({"game": "pong", "max_idle_steps": 0})
    env.reset()
    *_, truncated, _ = env.step(0)
    assert truncated


def test_unknown_game():
    with pytest.raises(ValueError):
        ArcadeEnv({"game": "snake"})


def test_game_name_comes_from_the_strategy():
    assert ArcadeEnv({}).game == "breakout"
    env = ArcadeEnv({"game": "pong"})
    assert env.game == env.step_strategy.game == "pong"


def test_pong_velocity_is_scaled_by_the_ball_speed_cap():
    env = ArcadeEnv({"game": "pong", "max_ball_speed": 20})
    obs, _ = env.reset()
    assert env.velocity_scale == env.state.ball.max_speed == 20
    assert obs[3] == pytest.approx(5 / 20)
