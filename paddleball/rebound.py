"""
paddleball.rebound
==================
How a ball changes direction.

Paddle hits re-orient the ball: the further from the paddle centre the ball
lands, the steeper it leaves, up to ``max_angle_deg`` from the paddle normal.
Walls and blocks only mirror one velocity component.
"""

from __future__ import annotations

import math

from paddleball.errors import ConfigurationError
from paddleball.geometry import Rect

# Which wall a paddle guards – decides the axis of the offset and the
# direction the ball is sent back in.
TOP, BOTTOM, LEFT, RIGHT = "top", "bottom", "left", "right"
SIDES = (TOP, BOTTOM, LEFT, RIGHT)


def normalized_offset(ball, paddle: Rect, side: str, clamp: bool = True) -> float:
    """Contact offset from the paddle centre, scaled so the paddle ends are ±1."""
    if side in (TOP, BOTTOM):
        offset = ball.centre_x - paddle.centre_x
        half_extent = paddle.width / 2
    else:
        offset = ball.centre_y - paddle.centre_y
        half_extent = paddle.height / 2

    if half_extent <= 0:
        raise ConfigurationError(
            f"paddle half-extent must be positive, got {half_extent}"
        )

    norm = offset / half_extent
    if clamp:
        norm = max(-1.0, min(1.0, norm))
    return norm


def rebound_from_paddle(
    ball,
    paddle: Rect,
    max_angle_deg: float,
    speed: float,
    side: str,
    clamp: bool = True,
) -> tuple[float, float]:
    """
    Return the ``(velocity_x, velocity_y)`` a ball leaves *paddle* with.

    *side* is the wall the paddle guards. The returned vector always has norm
    *speed*; only its direction depends on where the ball struck.
    """
    if side not in SIDES:
        raise ValueError(f"Unknown paddle side '{side}'")

    angle = math.radians(max_angle_deg) * normalized_offset(ball, paddle, side, clamp)
    along = speed * math.cos(angle)      # away from the guarded wall
    across = speed * math.sin(angle)     # towards the side the ball struck

    if side == BOTTOM:
        return across, -along
    if side == TOP:
        return across, along
    if side == LEFT:
        return along, across
    return -along, across


def accelerate(ball, increment: float) -> None:
    """Add *increment* to a round ball's speed, capped at its max speed."""
    ball.speed += increment
    ball.curb_speed()


def reflect_x(ball) -> None:
    ball.velocity_x = -ball.velocity_x


def reflect_y(ball) -> None:
    ball.velocity_y = -ball.velocity_y
