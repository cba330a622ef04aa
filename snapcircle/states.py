"""Drag states of the circle.

A scene is always in exactly one of these. ``Tethered`` remembers the zone
the drag started from; the others carry no data.
"""
from dataclasses import dataclass
from typing import Union

from .geometry import Rect


@dataclass(frozen=True)
class Idle:
    name = "idle"


@dataclass(frozen=True)
class Tethered:
    original_home: Rect
    name = "tethered"


@dataclass(frozen=True)
class Plucked:
    name = "plucked"


@dataclass(frozen=True)
class Released:
    name = "released"


DragState = Union[Idle, Tethered, Plucked, Released]


def is_dragging(state: DragState) -> bool:
    return isinstance(state, (Tethered, Plucked))
