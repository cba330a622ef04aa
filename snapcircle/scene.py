"""
Scene state shared by the pointer handlers and the frame loop.

Everything the demo mutates lives on one ``Scene``: the circle, the snap
zones, the current home, the drag state and the transient effects. Pointer
handlers (see ``interaction``) change the targets, ``Scene.advance`` moves
the circle toward them once per frame.
"""
from typing import Dict, List, Optional

from . import config
from .geometry import Circle, Point, Rect
from .log import logger
from .states import DragState, Idle, Released, is_dragging


def ease(value: float, target: float) -> float:
    """Move ``value`` half of the way to ``target``."""
    return value + (target - value) / 2


class Ripple:
    def __init__(self, x, y, radius=config.RIPPLE_RADIUS, alpha=config.RIPPLE_ALPHA):
        self.circle = Circle(x, y, radius, alpha)

    def tick(self):
        self.circle.radius += config.RIPPLE_GROWTH
        self.circle.alpha = max(0.0, self.circle.alpha - config.RIPPLE_FADE)
        return self.circle.alpha <= 0


class Scene:
    def __init__(
        self,
        zones: List[Rect],
        circle: Circle,
        home: Optional[Rect] = None,
        variant: config.Variant = config.VARIANTS[config.DEFAULT_VARIANT],
        pluck: Optional[bool] = None,
    ):
        self.zones = list(zones)
        if home is not None:
            if home not in self.zones:
                raise ValueError("Home must be one of the scene zones")
            # handlers compare zones by identity
            home = self.zones[self.zones.index(home)]
        self.circle = circle
        self.home = home
        self.variant = variant
        self.pluck = variant.pluck if pluck is None else pluck

        self.state: DragState = Idle()
        self.drag_target: Optional[Point] = None
        self.hovering = False
        self.hover_expansion = 0.0
        self.bounce: Dict[int, int] = {}
        self.ripples: List[Ripple] = []

    @classmethod
    def create(cls, variant=config.DEFAULT_VARIANT, pluck=None, zones=None):
        if isinstance(variant, str):
            variant = config.get_variant(variant)
        zones = config.default_zones() if zones is None else zones
        circle = Circle(*config.CIRCLE_START, config.CIRCLE_RADIUS)
        return cls(zones, circle, zones[0] if zones else None, variant, pluck)

    @property
    def dragging(self) -> bool:
        return is_dragging(self.state)

    @property
    def target(self) -> Point:
        if self.dragging and self.drag_target is not None:
            return self.drag_target
        if self.home is not None:
            return self.home.center
        return self.circle.center

    @property
    def expansion_target(self) -> float:
        if not self.variant.hover:
            return 0.0
        hovered = self.hovering and not isinstance(self.state, Released)
        return float(config.HOVER_EXPANSION) if hovered or self.dragging else 0.0

    @property
    def rendered_circle(self) -> Circle:
        return Circle(
            self.circle.x,
            self.circle.y,
            self.circle.radius + self.hover_expansion,
            self.circle.alpha,
        )

    def set_state(self, state: DragState) -> None:
        if state != self.state:
            logger.debug("State %s -> %s", self.state.name, state.name)
        self.state = state

    def rehome(self, idx: int) -> None:
        zone = self.zones[idx]
        logger.info("Snapped into zone %d at %s", idx, zone.center)
        self.home = zone
        if self.variant.effects:
            self.bounce[idx] = config.BOUNCE_FRAMES
            self.ripples.append(Ripple(*zone.center))

    def advance(self, ticks: int = 1) -> None:
        if not isinstance(ticks, int) or ticks < 0:
            raise ValueError(f"Tick count must be a non-negative int, got {ticks!r}")
        for _ in range(ticks):
            tx, ty = self.target
            self.circle.x = ease(self.circle.x, tx)
            self.circle.y = ease(self.circle.y, ty)
            self.hover_expansion = ease(self.hover_expansion, self.expansion_target)

            for idx in list(self.bounce):
                self.bounce[idx] -= 1
                if self.bounce[idx] <= 0:
                    del self.bounce[idx]

            if self.ripples:
                self.ripples = [r for r in self.ripples if not r.tick()]
