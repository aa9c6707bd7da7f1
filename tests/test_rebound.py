import math

import pytest

from paddleball.errors import ConfigurationError
from paddleball.geometry import Paddle, RoundBall, SquareBall
from paddleball.rebound import (
    BOTTOM, LEFT, RIGHT, TOP,
    accelerate, normalized_offset, rebound_from_paddle, reflect_x, reflect_y,
)

SPEED = 5
MAX_ANGLE = 45


@pytest.fixture
def paddle():
    return Paddle(250, 638, 100, 12)


def ball_at(centre_x):
    return SquareBall(centre_x - 5.5, 630, 11, 11)


def test_centred_hit_goes_straight_up(paddle):
    vx, vy = rebound_from_paddle(ball_at(300), paddle, MAX_ANGLE, SPEED, BOTTOM)
    assert vx == 0
    assert vy == -SPEED


@pytest.mark.parametrize("centre_x", [250, 262.5, 290, 300, 333, 350])
def test_speed_and_angle_bound(paddle, centre_x):
    vx, vy = rebound_from_paddle(ball_at(centre_x), paddle, MAX_ANGLE, SPEED, BOTTOM)
    assert math.hypot(vx, vy) == pytest.approx(SPEED)
    assert vy < 0
    angle = math.degrees(math.atan2(abs(vx), abs(vy)))
    assert angle <= MAX_ANGLE + 1e-9


def test_paddle_end_gives_max_angle(paddle):
    vx, vy = rebound_from_paddle(ball_at(350), paddle, MAX_ANGLE, SPEED, BOTTOM)
    assert vx == pytest.approx(SPEED * math.sin(math.radians(45)))
    assert vy == pytest.approx(-SPEED * math.cos(math.radians(45)))

    vx, _ = rebound_from_paddle(ball_at(250), paddle, MAX_ANGLE, SPEED, BOTTOM)
    assert vx < 0


def test_offset_beyond_paddle_is_clamped(paddle):
    far = ball_at(400)
    assert normalized_offset(far, paddle, BOTTOM) == 1.0
    vx, vy = rebound_from_paddle(far, paddle, MAX_ANGLE, SPEED, BOTTOM)
    assert math.degrees(math.atan2(vx, -vy)) == pytest.approx(MAX_ANGLE)


def test_unclamped_offset_can_exceed_max_angle(paddle):
    far = ball_at(400)
    assert normalized_offset(far, paddle, BOTTOM, clamp=False) == 2.0
    vx, vy = rebound_from_paddle(far, paddle, MAX_ANGLE, SPEED, BOTTOM, clamp=False)
    assert math.degrees(math.atan2(vx, -vy)) > MAX_ANGLE


def test_top_paddle_sends_ball_down(paddle):
    _, vy = rebound_from_paddle(ball_at(300), paddle, MAX_ANGLE, SPEED, TOP)
    assert vy == SPEED


def test_side_paddles_send_ball_across():
    left = Paddle(10, 100, 15, 150)
    right = Paddle(675, 100, 15, 150)
    ball = RoundBall(40, 175, 10)
    assert rebound_from_paddle(ball, left, MAX_ANGLE, SPEED, LEFT) == (SPEED, 0)
    assert rebound_from_paddle(ball, right, MAX_ANGLE, SPEED, RIGHT) == (-SPEED, 0)

    ball.y = 250       # below centre → leaves downwards
    vx, vy = rebound_from_paddle(ball, left, MAX_ANGLE, SPEED, LEFT)
    assert vx > 0 and vy > 0


def test_zero_width_paddle_fails_fast():
    flat = Paddle(250, 638, 0, 12)
    with pytest.raises(ConfigurationError):
        rebound_from_paddle(ball_at(250), flat, MAX_ANGLE, SPEED, BOTTOM)


def test_zero_height_side_paddle_fails_fast():
    flat = Paddle(10, 100, 15, 0)
    with pytest.raises(ConfigurationError):
        rebound_from_paddle(RoundBall(30, 100, 10), flat, MAX_ANGLE, SPEED, LEFT)


def test_unknown_side(paddle):
    with pytest.raises(ValueError):
        rebound_from_paddle(ball_at(300), paddle, MAX_ANGLE, SPEED, "diagonal")


def test_accelerate_caps_speed():
    ball = RoundBall(0, 0, 10, speed=9.9, max_speed=10)
    accelerate(ball, 0.25)
    assert ball.speed == 10
    ball = RoundBall(0, 0, 10, speed=5, max_speed=10)
    accelerate(ball, 0.25)
    assert ball.speed == 5.25


def test_round_ball_speed_is_curbed_on_creation():
    assert RoundBall(0, 0, 10, speed=20, max_speed=10).speed == 10


def test_reflect_inverts_one_component():
    ball = SquareBall(0, 0, 11, 11, velocity_x=3, velocity_y=-4)
    reflect_x(ball)
    assert (ball.velocity_x, ball.velocity_y) == (-3, -4)
    reflect_y(ball)
    assert (ball.velocity_x, ball.velocity_y) == (-3, 4)
