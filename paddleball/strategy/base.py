from __future__ import annotations
from abc import ABC, abstractmethod


class StepStrategy(ABC):
    """One game's rules: builds its state and advances it one tick at a time."""

    game: str = ""
    player_axis: str = "x"       # axis the player paddle slides along

    def __init__(self, cfg: dict | None = None):
        self.cfg = cfg or {}

    @abstractmethod
    def new_state(self):
        """Return a freshly seeded state for this game."""

    @abstractmethod
    def execute(self, state) -> dict:
        """Advance *state* by one tick and return the events that happened."""
