"""
Pointer handlers: the snap/pluck state machine.

Each handler takes the scene and a surface-local point and updates the
drag state, the drag target and the home zone. Nothing here moves the
circle; that happens in ``Scene.advance``.
"""
from typing import Optional

from .geometry import Point, circle_contains_point, midpoint, rect_contains_point
from .log import logger
from .scene import Scene
from .states import Idle, Plucked, Released, Tethered


def pointer_down(scene: Scene, point) -> None:
    if scene.dragging:
        return
    if circle_contains_point(scene.rendered_circle, point):
        if scene.home is None:
            scene.set_state(Plucked())
        else:
            scene.set_state(Tethered(scene.home))
        logger.debug("Drag started at %s", tuple(point))
    pointer_move(scene, point)


def pointer_move(scene: Scene, point) -> None:
    point = Point(*point)
    scene.hovering = circle_contains_point(scene.rendered_circle, point)

    state = scene.state
    if isinstance(state, Tethered) and scene.pluck:
        if rect_contains_point(state.original_home, point):
            scene.drag_target = midpoint(state.original_home.center, point)
            return
        logger.debug("Plucked out of %s", state.original_home)
        scene.set_state(Plucked())

    if scene.dragging:
        scene.drag_target = point
        _snap(scene, point)
    elif isinstance(scene.state, Released) and not scene.hovering:
        scene.set_state(Idle())


def pointer_up(scene: Scene, point: Optional[Point] = None) -> None:
    if not scene.dragging:
        return
    if scene.variant.drop_assigns_home and point is not None:
        for idx, zone in enumerate(scene.zones):
            if zone is not scene.home and rect_contains_point(zone, point):
                scene.rehome(idx)
    scene.drag_target = None
    scene.set_state(Released())


def pointer_leave(scene: Scene) -> None:
    scene.hovering = False
    pointer_up(scene)


def _snap(scene, point):
    for idx, zone in enumerate(scene.zones):
        if zone is scene.home:
            continue
        if rect_contains_point(zone, point):
            scene.drag_target = zone.center
            scene.rehome(idx)
