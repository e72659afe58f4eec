"""
Geometry helpers shared by the ball, bricks and paddle.

Shapes are plain ``(x, y, w, h)`` tuples with the origin at the top-left
corner. The helpers here are free functions so any object that can produce
a ``Rect`` snapshot can take part in overlap tests.
"""

from typing import NamedTuple


class Rect(NamedTuple):
    """Axis-aligned rectangle, top-left origin."""
    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h


def spans_overlap(start_a: float, end_a: float, start_b: float, end_b: float) -> bool:
    """Check whether two open intervals on one axis overlap.

    Touching edges do not count as an overlap.
    """
    return end_a > start_b and start_a < end_b


def strictly_between(value: float, low: float, high: float) -> bool:
    """Check ``low < value < high``."""
    return low < value < high
