from .geometry import Circle, Point, Rect, circle_contains_point, intersect, rect_contains_point
from .scene import Scene, ease

__all__ = [
    "Circle",
    "Point",
    "Rect",
    "Scene",
    "circle_contains_point",
    "ease",
    "intersect",
    "rect_contains_point",
]
