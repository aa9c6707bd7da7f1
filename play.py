#!/usr/bin/env python3
"""
play.py – run breakout or pong.

Interactive (default): opens a pygame window, the mouse steers the player
paddle, Escape quits.

Headless: ``--headless --ticks N`` runs N ticks without a window, steering
the player paddle with a simple follow-the-ball policy, and prints the
result.

Usage:
  python play.py --game pong
  python play.py --game breakout --headless --ticks 5000
"""
from __future__ import annotations

import argparse
import sys

from paddleball.constants import FPS
from paddleball.env import ArcadeEnv
from paddleball.errors import ConfigurationError
from paddleball.strategy import GAMES
from paddleball.utils.timing import timing


def follow_ball(env: ArcadeEnv) -> int:
    """Action that moves the player paddle towards the ball along its axis."""
    s = env.state
    if env.step_strategy.player_axis == "x":
        gap = s.ball.centre_x - s.player.centre_x
    else:
        gap = s.ball.centre_y - s.player.centre_y
    if abs(gap) < env.paddle_speed:
        return 0
    return 2 if gap > 0 else 1


def summary(env: ArcadeEnv) -> str:
    s = env.state
    if env.game == "pong":
        return f"player {s.player_score} – computer {s.computer_score}"
    return f"{len(s.blocks)} blocks left" + (" – YOU WIN!" if s.won else "")


def run_headless(env: ArcadeEnv, ticks: int):
    env.reset()
    with timing(env.game, ticks=ticks, fps=env.metadata["render_fps"]):
        for _ in range(ticks):
            env.step(follow_ball(env))
    print(f"🏁 {summary(env)}")


def run_interactive(env: ArcadeEnv):
    env.reset()
    print(f"🎮 {env.game}: move the mouse to steer, Escape to quit")
    try:
        while True:
            env.step(0)      # the pointer drives the paddle between ticks
    except SystemExit:
        pass
    print(f"👋 {summary(env)}")


def main(argv=None):
    p = argparse.ArgumentParser(description=__doc__,
                                formatter_class=argparse.RawDescriptionHelpFormatter)
    p.add_argument("--game", choices=GAMES, default="breakout")
    p.add_argument("--fps", type=int, default=FPS,
                   help="Ticks per second in interactive mode")
    p.add_argument("--headless", action="store_true",
                   help="Run without a window")
    p.add_argument("--ticks", type=int, default=3600,
                   help="Number of ticks to simulate with --headless")
    args = p.parse_args(argv)

    cfg = {
        "game": args.game,
        "render_mode": "none" if args.headless else "human",
        # episodes never end on their own when a human is playing
        "max_idle_steps": float("inf"),
    }
    try:
        env = ArcadeEnv(cfg)
    except ConfigurationError as e:
        print(f"❌ Bad configuration: {e}")
        sys.exit(1)
    env.metadata = {**env.metadata, "render_fps": args.fps}

    try:
        if args.headless:
            run_headless(env, args.ticks)
        else:
            run_interactive(env)
    finally:
        env.close()


if __name__ == "__main__":
    main()
