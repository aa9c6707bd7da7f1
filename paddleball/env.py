"""
paddleball.env
==============
Gymnasium-style wrapper around one paddle game (breakout or pong).

Key features
------------
* ``cfg["game"]`` picks the rules – anything registered in
  :mod:`paddleball.strategy`.
* Three discrete actions move the player paddle (stay / towards lower
  coordinates / towards higher coordinates); :meth:`ArcadeEnv.move_pointer`
  lets a mouse drive it instead.
* Vector (5-float) observations; optional pygame rendering in ``human`` or
  ``rgb_array`` mode.
"""

from __future__ import annotations

import logging
import os

import gymnasium as gym
import numpy as np
import pygame
import pygame.surfarray
from gymnasium.spaces import Box, Discrete

from paddleball.constants import *
from paddleball.render import SCENES, PygameRenderer
from paddleball.strategy import make as make_strategy

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Surface ➔ RGB helper (H, W, 3)
# ---------------------------------------------------------------------------
def _rgb(surface: pygame.Surface) -> np.ndarray:
    arr = pygame.surfarray.array3d(surface)      # (W, H, 3)
    return np.transpose(arr, (1, 0, 2))          # (H, W, 3)


# ===========================================================================
# Environment
# ===========================================================================
class ArcadeEnv(gym.Env):
    metadata = {
        "render_modes": ["none", "human", "rgb_array"],
        "render_fps": FPS,
    }

    # ----------------------------------------------------------------------
    # ctor / reset
    # ----------------------------------------------------------------------
    def __init__(self, cfg: dict | None = None):
        super().__init__()
        cfg = cfg or {}

        self.render_mode    = cfg.get("render_mode", "none")
        self.paddle_speed   = cfg.get("paddle_speed", PADDLE_SPEED)
        self.max_idle_steps = cfg.get("max_idle_steps", 600)

        # --- strategy (step logic) ----------------------------------------
        self.step_strategy = make_strategy(cfg.get("game", "breakout"), cfg)
        self.game = self.step_strategy.game
        self.state = self.step_strategy.new_state()   # validates cfg eagerly
        self.velocity_scale = (
            self.state.ball.max_speed if self.game == "pong"
            else self.state.ball_speed
        )

        # --- gym spaces ---------------------------------------------------
        self.action_space = Discrete(3)
        self.observation_space = Box(
            low = np.array([-1]*5, dtype=np.float32),
            high= np.array([1]*5,  dtype=np.float32),
            dtype=np.float32,
        )

        self.steps_since_last_hit = 0
        self._init_pygame_surfaces()

    # ----------------------------------------------------------------------
    # pygame init
    # ----------------------------------------------------------------------
    def _init_pygame_surfaces(self):
        size = (int(self.state.width), int(self.state.height))
        if self.render_mode == "human":
            os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"
            pygame.init()
            self.screen = pygame.display.set_mode(size)
            pygame.display.set_caption(self.game.capitalize())
            self.clock = pygame.time.Clock()
            self._screen = self.screen          # draw directly to display
        elif self.render_mode == "rgb_array":
            self.screen = self.clock = None
            self._screen = pygame.Surface(size)
        else:
            self.screen = self.clock = self._screen = None
        self.renderer = PygameRenderer(self._screen) if self._screen is not None else None

    # ----------------------------------------------------------------------
    # observation & info helpers
    # ----------------------------------------------------------------------
    def _get_obs(self) -> np.ndarray:
        s = self.state
        w2, h2 = s.width / 2, s.height / 2
        if self.step_strategy.player_axis == "x":
            paddle = (s.player.centre_x - w2) / w2
        else:
            paddle = (s.player.centre_y - h2) / h2
        obs = np.array(
            [
                paddle,
                (s.ball.centre_x - w2) / w2,
                (s.ball.centre_y - h2) / h2,
                s.ball.velocity_x / self.velocity_scale,
                s.ball.velocity_y / self.velocity_scale,
            ],
            dtype=np.float32,
        )
        return np.clip(obs, -1.0, 1.0)

    def _get_info(self) -> dict:
        s = self.state
        if self.game == "pong":
            return {"player_score": s.player_score, "computer_score": s.computer_score,
                    "ball_speed": s.ball.speed}
        return {"blocks_left": len(s.blocks), "won": s.won}

    def reset(self, *, seed=None, options=None):
        super().reset(seed=seed)
        self.state = self.step_strategy.new_state()
        self.steps_since_last_hit = 0
        log.debug("%s env reset", self.game)
        return self._get_obs(), self._get_info()

    # ----------------------------------------------------------------------
    # input
    # ----------------------------------------------------------------------
    def _apply_action(self, action: int):
        s, p = self.state, self.state.player
        delta = {0: 0, 1: -self.paddle_speed, 2: self.paddle_speed}[int(action)]
        if self.step_strategy.player_axis == "x":
            p.x = float(np.clip(p.x + delta, 0, s.width - p.width))
        else:
            p.y = float(np.clip(p.y + delta, 0, s.height - p.height))

    def move_pointer(self, coord: float, surface_offset: float = 0.0):
        """Centre the player paddle on a pointer coordinate along its axis."""
        self.state.player.follow_pointer(coord, surface_offset,
                                         self.step_strategy.player_axis)

    # ----------------------------------------------------------------------
    # public step
    # ----------------------------------------------------------------------
    def step(self, action: int):
        self._apply_action(action)
        events = self.step_strategy.execute(self.state)

        self.steps_since_last_hit += 1
        if events["paddle_hit"]:
            self.steps_since_last_hit = 0

        reward, terminated = 0.0, False
        if self.game == "pong":
            if events["scored"] == "player":
                reward, terminated = 1.0, True
            elif events["scored"] == "computer":
                reward, terminated = -1.0, True
        else:
            reward += events["blocks_destroyed"]
            if events["ball_lost"]:
                reward -= 1.0
                terminated = True
            elif events["won"]:
                terminated = True

        truncated = self.steps_since_last_hit > self.max_idle_steps

        if self.render_mode == "human":
            self.render()

        info = self._get_info()
        info["events"] = events
        return self._get_obs(), reward, terminated, truncated, info

    # ----------------------------------------------------------------------
    # render (handles pointer + quit)
    # ----------------------------------------------------------------------
    def _draw(self):
        SCENES[self.game](self.state, self.renderer)

    def render(self):
        if self.render_mode == "human":
            axis = 0 if self.step_strategy.player_axis == "x" else 1
            for e in pygame.event.get():
                if e.type == pygame.MOUSEMOTION:
                    self.move_pointer(e.pos[axis])
                elif e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE:
                    pygame.event.post(pygame.event.Event(pygame.QUIT))
                elif e.type == pygame.QUIT:
                    self.close()
                    raise SystemExit

        if self.renderer is None:
            return None
        self._draw()

        if self.render_mode == "human":
            pygame.display.flip()
            self.clock.tick(self.metadata["render_fps"])
        elif self.render_mode == "rgb_array":
            return _rgb(self._screen).copy()

    # ----------------------------------------------------------------------
    # close
    # ----------------------------------------------------------------------
    def close(self):
        if self.screen is not None:
            pygame.display.quit()
            pygame.quit()
            self.screen = None
