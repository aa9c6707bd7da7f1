from __future__ import annotations
from importlib import import_module

# Bring the ABC into this namespace for type hints
from .base import StepStrategy

# Map game-name → “module:Class” string
_GAMES = {
    "breakout": "paddleball.strategy.breakout:BreakoutStepStrategy",
    "pong":     "paddleball.strategy.pong:PongStepStrategy",
}

GAMES = tuple(_GAMES)


def make(name: str, cfg: dict | None = None) -> StepStrategy:
    """
    Factory: returns an instance of the requested game's StepStrategy.
    """
    try:
        module_path, cls_name = _GAMES[name].split(":")
    except KeyError:
        raise ValueError(f"Unknown game '{name}'") from None
    cls = getattr(import_module(module_path), cls_name)
    return cls(cfg or {})
