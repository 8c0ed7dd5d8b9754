"""Screen dimensions, points, rectangles and overlap tests."""

from __future__ import annotations

from dataclasses import dataclass

WIN_WIDTH = 1024
WIN_HEIGHT = 768


@dataclass
class Point:
    """A position on screen, in pixels."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle whose origin is its top-left corner."""

    x: float
    y: float
    width: float
    height: float

    def center(self) -> Point:
        """Return the point in the middle of the rectangle."""
        return Point(self.x + self.width / 2, self.y + self.height / 2)


def check_hit(a: Rect, b: Rect) -> bool:
    """Return True when the rectangles overlap or share an edge."""
    return not (
        a.x + a.width < b.x
        or b.x + b.width < a.x
        or a.y + a.height < b.y
        or b.y + b.height < a.y
    )


def intersect_rect(a: Rect, b: Rect) -> bool:
    """Return True when the rectangles overlap by a positive area."""
    x_overlap = a.x < b.x + b.width and b.x < a.x + a.width
    y_overlap = a.y < b.y + b.height and b.y < a.y + a.height
    return x_overlap and y_overlap