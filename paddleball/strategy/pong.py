from __future__ import annotations

import logging

from .base import StepStrategy
from paddleball.collision import overlaps
from paddleball.constants import *
from paddleball.geometry import Paddle
from paddleball.rebound import LEFT, RIGHT, accelerate, rebound_from_paddle, reflect_y
from paddleball.state import PongState, new_pong_state

log = logging.getLogger(__name__)


def select_focus_paddle(ball, paddles: tuple[Paddle, Paddle], midpoint: float) -> Paddle:
    """The paddle guarding the half of the field the ball is in (left wins below *midpoint*)."""
    left, right = paddles
    return left if ball.x < midpoint else right


class PongStepStrategy(StepStrategy):
    """
    Player on the left, computer on the right.

    Side walls score, top and bottom walls bounce. Every paddle hit speeds the
    ball up by ``speed_increment`` until ``max_ball_speed``.
    """

    game = "pong"
    player_axis = "y"

    def __init__(self, cfg=None):
        super().__init__(cfg)
        self.max_rebound_angle = self.cfg.get("max_rebound_angle", MAX_REBOUND_ANGLE)
        self.clamp_rebound = self.cfg.get("clamp_rebound", True)
        self.speed_increment = self.cfg.get("speed_increment", SPEED_INCREMENT)
        self.computer_speed = self.cfg.get("computer_speed", COMPUTER_SPEED)

    def new_state(self) -> PongState:
        return new_pong_state(self.cfg)

    # ------------------------------------------------------------------ main
    def execute(self, state: PongState) -> dict:
        events = {"paddle_hit": False, "scored": None}
        ball = state.ball

        # 1. Integrate
        ball.move()

        # 2. Side walls are goals
        if ball.left < 0:
            state.computer_score += 1
            events["scored"] = "computer"
        elif ball.right > state.width:
            state.player_score += 1
            events["scored"] = "player"
        if events["scored"]:
            log.debug("%s scores – %d:%d", events["scored"],
                      state.player_score, state.computer_score)
            state.reset_ball()

        # 3. Top/bottom walls bounce, then push the ball back inside
        self.resolve_walls(state)

        # 4. Focus paddle
        paddle = select_focus_paddle(ball, state.paddles, state.midpoint)
        if overlaps(ball, paddle):
            accelerate(ball, self.speed_increment)
            side = LEFT if paddle is state.player else RIGHT
            ball.velocity_x, ball.velocity_y = rebound_from_paddle(
                ball, paddle, self.max_rebound_angle, ball.speed, side,
                clamp=self.clamp_rebound,
            )
            events["paddle_hit"] = True

        # 5. Computer closes a fixed fraction of the gap to the ball
        track_ball(state.computer, ball, self.computer_speed)

        return events

    @staticmethod
    def resolve_walls(state: PongState) -> None:
        ball = state.ball
        if ball.top < 0:
            reflect_y(ball)
            while ball.top < 0:
                ball.y += 1
        elif ball.bottom > state.height:
            reflect_y(ball)
            while ball.bottom > state.height:
                ball.y -= 1


def track_ball(paddle: Paddle, ball, rate: float) -> None:
    paddle.y += rate * (ball.y - paddle.centre_y)
