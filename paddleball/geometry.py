"""
paddleball.geometry
===================
Axis-aligned shapes shared by every game.

Shapes store only their anchor and extent; the edges (``left``, ``right``,
``top``, ``bottom``) and centres are always derived, so moving a shape is a
matter of changing ``x``/``y`` and nothing else.

* :class:`Rect`   – anchored at its top-left corner.
* :class:`Circle` – anchored at its centre.
"""

from __future__ import annotations

from dataclasses import dataclass

from paddleball.constants import WHITE

Colour = tuple[int, int, int]


# ---------------------------------------------------------------------------
# Primitive shapes
# ---------------------------------------------------------------------------
@dataclass
class Rect:
    x: float
    y: float
    width: float
    height: float
    colour: Colour = WHITE

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def centre_x(self) -> float:
        return self.x + self.width / 2

    @property
    def centre_y(self) -> float:
        return self.y + self.height / 2


@dataclass
class Circle:
    x: float
    y: float
    radius: float
    colour: Colour = WHITE

    @property
    def left(self) -> float:
        return self.x - self.radius

    @property
    def right(self) -> float:
        return self.x + self.radius

    @property
    def top(self) -> float:
        return self.y - self.radius

    @property
    def bottom(self) -> float:
        return self.y + self.radius

    @property
    def centre_x(self) -> float:
        return self.x

    @property
    def centre_y(self) -> float:
        return self.y


# ---------------------------------------------------------------------------
# Game entities
# ---------------------------------------------------------------------------
class Paddle(Rect):
    """A rectangle the player (or the computer) steers."""

    def follow_pointer(self, pointer: float, surface_offset: float = 0.0,
                       axis: str = "x") -> None:
        """Centre the paddle on a pointer coordinate given in screen space."""
        local = pointer - surface_offset
        if axis == "x":
            self.x = local - self.width / 2
        else:
            self.y = local - self.height / 2


Block = Rect


@dataclass
class SquareBall(Rect):
    """Breakout ball: a square bounding box with a velocity."""

    velocity_x: float = 0.0
    velocity_y: float = 0.0

    def move(self) -> None:
        self.x += self.velocity_x
        self.y += self.velocity_y


@dataclass
class RoundBall(Circle):
    """Pong ball: a circle whose speed grows with every paddle hit."""

    velocity_x: float = 0.0
    velocity_y: float = 0.0
    speed: float = 0.0
    max_speed: float = float("inf")

    def __post_init__(self):
        self.curb_speed()

    def move(self) -> None:
        self.x += self.velocity_x
        self.y += self.velocity_y

    def curb_speed(self) -> None:
        self.speed = min(self.speed, self.max_speed)
