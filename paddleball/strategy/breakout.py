from __future__ import annotations

import logging

from .base import StepStrategy
from paddleball.collision import overlaps
from paddleball.constants import *
from paddleball.rebound import BOTTOM, rebound_from_paddle, reflect_x, reflect_y
from paddleball.state import BreakoutState, new_breakout_state

log = logging.getLogger(__name__)


class BreakoutStepStrategy(StepStrategy):
    """
    Single paddle at the bottom, a board of blocks at the top.

    ▸ side walls and the top wall mirror the ball
    ▸ losing the ball through the bottom restarts the round with a full board
    ▸ at most one block is destroyed per tick – the first hit in board order
    ▸ an empty board is a win; the ball keeps moving regardless
    """

    game = "breakout"
    player_axis = "x"

    def __init__(self, cfg=None):
        super().__init__(cfg)
        self.max_rebound_angle = self.cfg.get("max_rebound_angle", MAX_REBOUND_ANGLE)
        self.clamp_rebound = self.cfg.get("clamp_rebound", True)

    def new_state(self) -> BreakoutState:
        return new_breakout_state(self.cfg)

    # ------------------------------------------------------------------ main
    def execute(self, state: BreakoutState) -> dict:
        events = {"paddle_hit": False, "blocks_destroyed": 0, "ball_lost": False}
        ball = state.ball
        was_won = state.won

        # 1. Integrate
        ball.move()

        # 2. Paddle (before the walls: a wall flip overrides the rebound)
        if overlaps(ball, state.player):
            ball.velocity_x, ball.velocity_y = rebound_from_paddle(
                ball, state.player, self.max_rebound_angle, state.ball_speed,
                BOTTOM, clamp=self.clamp_rebound,
            )
            events["paddle_hit"] = True

        # 3. Side walls
        if ball.left < 0 or ball.right > state.width:
            reflect_x(ball)

        # 4. Top wall bounces, bottom exit restarts the round
        if ball.top < 0:
            reflect_y(ball)
        elif ball.bottom > state.height:
            state.reset_round()
            events["ball_lost"] = True

        # 5. Blocks
        if self._break_block(state):
            events["blocks_destroyed"] = 1

        # 6. Terminal check
        events["won"] = state.won
        if state.won and not was_won:
            log.info("breakout board cleared")
        return events

    @staticmethod
    def _break_block(state: BreakoutState) -> bool:
        """Remove the first block the ball overlaps, scanning a snapshot of the board."""
        hit = next(
            (i for i, block in enumerate(list(state.blocks)) if overlaps(state.ball, block)),
            None,
        )
        if hit is None:
            return False
        del state.blocks[hit]
        reflect_y(state.ball)
        log.debug("block %d destroyed, %d left", hit, len(state.blocks))
        return True
