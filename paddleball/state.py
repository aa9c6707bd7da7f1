"""
paddleball.state
================
Explicit per-game state.

Each game owns one state object. The simulation step mutates it in place and
resets replace its fields; nothing lives in module globals.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from paddleball.constants import *
from paddleball.errors import ConfigurationError
from paddleball.geometry import Block, Paddle, RoundBall, SquareBall

log = logging.getLogger(__name__)


def _require_positive(**values: float) -> None:
    for name, value in values.items():
        if value <= 0:
            raise ConfigurationError(f"{name} must be positive, got {value}")


# ===========================================================================
# Breakout
# ===========================================================================
def create_block_rows(width: float, blocks_per_row: int = BLOCKS_PER_ROW,
                      row_colours=ROW_COLOURS, block_height: float = BLOCK_HEIGHT,
                      top_offset: float = TOP_OFFSET) -> list[Block]:
    """Seed a full board: one row per colour, blocks spanning the whole width."""
    _require_positive(blocks_per_row=blocks_per_row, block_height=block_height)
    block_width = width / blocks_per_row
    return [
        Block(col * block_width, row * block_height + top_offset,
              block_width, block_height, colour)
        for row, colour in enumerate(row_colours)
        for col in range(blocks_per_row)
    ]


@dataclass
class BreakoutState:
    width: float
    height: float
    player: Paddle
    ball: SquareBall
    blocks: list[Block]
    ball_speed: float = BALL_SPEED
    block_layout: dict = field(default_factory=dict)

    @property
    def centre(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2

    @property
    def won(self) -> bool:
        return not self.blocks

    def reset_round(self) -> None:
        """Respawn every block and serve the ball again from the centre."""
        self.blocks = create_block_rows(self.width, **self.block_layout)
        self.ball.x, self.ball.y = self.centre
        self.ball.velocity_x = self.ball_speed
        self.ball.velocity_y = self.ball_speed
        log.debug("breakout round reset – %d blocks", len(self.blocks))


def new_breakout_state(cfg: dict | None = None) -> BreakoutState:
    cfg = cfg or {}
    width = cfg.get("width", BREAKOUT_WIDTH)
    height = cfg.get("height", BREAKOUT_HEIGHT)
    paddle_w = cfg.get("paddle_width", BREAKOUT_PADDLE_WIDTH)
    paddle_h = cfg.get("paddle_height", BREAKOUT_PADDLE_HEIGHT)
    diameter = cfg.get("ball_diameter", BALL_DIAMETER)
    speed = cfg.get("ball_speed", BALL_SPEED)
    _require_positive(width=width, height=height, paddle_width=paddle_w,
                      paddle_height=paddle_h, ball_diameter=diameter,
                      ball_speed=speed)

    layout = {
        "blocks_per_row": cfg.get("blocks_per_row", BLOCKS_PER_ROW),
        "row_colours": cfg.get("row_colours", ROW_COLOURS),
        "block_height": cfg.get("block_height", BLOCK_HEIGHT),
        "top_offset": cfg.get("top_offset", TOP_OFFSET),
    }

    player = Paddle(width / 2 - paddle_w / 2,
                    height - paddle_h - cfg.get("wall_gap", WALL_GAP),
                    paddle_w, paddle_h, RED)
    ball = SquareBall(width / 2, height / 2, diameter, diameter, RED,
                      velocity_x=speed, velocity_y=speed)
    return BreakoutState(width, height, player, ball,
                         create_block_rows(width, **layout),
                         ball_speed=speed, block_layout=layout)


# ===========================================================================
# Pong
# ===========================================================================
@dataclass
class PongState:
    width: float
    height: float
    player: Paddle           # left
    computer: Paddle         # right
    ball: RoundBall
    initial_speed: float = BALL_SPEED
    player_score: int = 0
    computer_score: int = 0

    @property
    def midpoint(self) -> float:
        return self.width / 2

    @property
    def paddles(self) -> tuple[Paddle, Paddle]:
        return self.player, self.computer

    def reset_ball(self) -> None:
        """Serve from the centre at the initial speed, heading down-right."""
        ball = self.ball
        ball.x, ball.y = self.width / 2, self.height / 2
        ball.speed = self.initial_speed
        ball.curb_speed()
        ball.velocity_x = ball.velocity_y = ball.speed


def new_pong_state(cfg: dict | None = None) -> PongState:
    cfg = cfg or {}
    width = cfg.get("width", PONG_WIDTH)
    height = cfg.get("height", PONG_HEIGHT)
    paddle_w = cfg.get("paddle_width", PONG_PADDLE_WIDTH)
    paddle_h = cfg.get("paddle_height", PONG_PADDLE_HEIGHT)
    radius = cfg.get("ball_radius", BALL_RADIUS)
    speed = cfg.get("ball_speed", BALL_SPEED)
    max_speed = cfg.get("max_ball_speed", MAX_BALL_SPEED)
    gap = cfg.get("wall_gap", PONG_WALL_GAP)
    _require_positive(width=width, height=height, paddle_width=paddle_w,
                      paddle_height=paddle_h, ball_radius=radius,
                      ball_speed=speed, max_ball_speed=max_speed)
    if 2 * radius + 1 > height:
        # overlap correction could never push the ball back inside
        raise ConfigurationError(
            f"ball diameter {2 * radius} does not fit a field of height {height}"
        )

    paddle_y = height / 2 - paddle_h / 2
    player = Paddle(gap, paddle_y, paddle_w, paddle_h, WHITE)
    computer = Paddle(width - paddle_w - gap, paddle_y, paddle_w, paddle_h, WHITE)
    ball = RoundBall(width / 2, height / 2, radius, WHITE,
                     speed=speed, max_speed=max_speed)
    ball.velocity_x = ball.velocity_y = ball.speed
    return PongState(width, height, player, computer, ball, initial_speed=speed)
