from __future__ import annotations

from typing import Protocol


class Bounded(Protocol):
    left: float
    right: float
    top: float
    bottom: float


def overlaps(a: Bounded, b: Bounded) -> bool:
    """
    True iff the two axis-aligned boxes intersect.

    Inequalities are strict: boxes that merely share an edge do not collide.
    """
    return (
        a.right > b.left
        and a.bottom > b.top
        and a.left < b.right
        and a.top < b.bottom
    )
