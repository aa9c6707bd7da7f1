import pytest

from paddleball.strategy.breakout import BreakoutStepStrategy
from paddleball.strategy.pong import PongStepStrategy


class RecordingRenderer:
    """Stand-in for ``PygameRenderer`` that records every primitive call."""

    def __init__(self):
        self.calls = []

    def fill_rect(self, x, y, w, h, colour):
        self.calls.append(("rect", x, y, w, h, colour))

    def fill_circle(self, x, y, r, colour):
        self.calls.append(("circle", x, y, r, colour))

    def fill_text(self, text, x, y, font, align, colour):
        self.calls.append(("text", text, x, y, font, align, colour))

    # ------------------------------------------------------------
    # Query helpers
    # ------------------------------------------------------------
    def of_kind(self, kind):
        return [c for c in self.calls if c[0] == kind]


@pytest.fixture
def breakout():
    return BreakoutStepStrategy({})


@pytest.fixture
def breakout_state(breakout):
    """Default 600×700 board: paddle at x=250..350, y=638; ball at (300, 350)."""
    return breakout.new_state()


@pytest.fixture
def pong():
    return PongStepStrategy({})


@pytest.fixture
def pong_state(pong):
    """Default 700×450 field: paddles 15×150 at y=150; ball r=10 at (350, 225)."""
    return pong.new_state()


@pytest.fixture
def recorder():
    return RecordingRenderer()
