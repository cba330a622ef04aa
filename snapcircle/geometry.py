import math
from dataclasses import dataclass
from typing import NamedTuple, Optional


class Point(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle with its origin at the top-left corner."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Negative rect size: {self.width}x{self.height}")

    @property
    def x2(self) -> float:
        return self.x + self.width

    @property
    def y2(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    def inflate(self, amount: float) -> "Rect":
        return Rect(
            self.x - amount,
            self.y - amount,
            self.width + amount * 2,
            self.height + amount * 2,
        )


@dataclass
class Circle:
    x: float
    y: float
    radius: float
    alpha: float = 1.0

    def __post_init__(self):
        if self.radius <= 0:
            raise ValueError(f"Circle radius must be positive, got {self.radius}")

    @property
    def center(self) -> Point:
        return Point(self.x, self.y)


def intersect(a: Rect, b: Rect) -> Optional[Rect]:
    """Return the overlapping area of two rects, or None.

    Rects that only share an edge do not intersect.
    """
    top = max(a.y, b.y)
    right = min(a.x2, b.x2)
    bottom = min(a.y2, b.y2)
    left = max(a.x, b.x)

    width = right - left
    height = bottom - top
    if width > 0 and height > 0:
        return Rect(left, top, width, height)
    return None


def rect_contains_point(rect: Rect, point) -> bool:
    x, y = point
    return rect.x < x < rect.x2 and rect.y < y < rect.y2


def circle_contains_point(circle: Circle, point) -> bool:
    x, y = point
    return math.hypot(x - circle.x, y - circle.y) < circle.radius


def midpoint(a, b) -> Point:
    return Point((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)
