import math

import pygame

from . import config
from .geometry import Circle, Rect
from .scene import Scene


def iterate_bounciness(rect: Rect, bounce_time: int) -> Rect:
    """Rect grown by a damped wobble for the remaining bounce frames."""
    factor = (math.sin(bounce_time) + 1) * bounce_time * 0.15
    return rect.inflate(factor)


def layer(w, h):
    return pygame.Surface((max(1, int(w)), max(1, int(h))), pygame.SRCALPHA)


def draw_rect(surface, rect: Rect, color):
    x, y = int(round(rect.x)), int(round(rect.y))
    w, h = int(round(rect.width)), int(round(rect.height))
    if w <= 0 or h <= 0:
        return
    if len(color) == 4:
        s = layer(w, h)
        s.fill(color)
        surface.blit(s, (x, y))
    else:
        pygame.draw.rect(surface, color, pygame.Rect(x, y, w, h))


def draw_circle(surface, circle: Circle, color):
    r = int(round(circle.radius))
    if r <= 0:
        return
    alpha = color[3] if len(color) == 4 else 255
    alpha = int(max(0.0, min(1.0, circle.alpha)) * alpha)
    s = layer(r * 2, r * 2)
    pygame.draw.circle(s, (*color[:3], alpha), (r, r), r)
    surface.blit(s, (int(round(circle.x)) - r, int(round(circle.y)) - r))


def draw_shadow(surface, circle: Circle):
    # concentric rings, faintest outermost, stand in for a blur
    blur = config.SHADOW_BLUR
    r = int(round(circle.radius)) + blur
    s = layer(r * 2, r * 2)
    base = config.COL_SHADOW
    for i in range(blur + 1):
        alpha = int(base[3] * (i + 1) / (blur + 1))
        pygame.draw.circle(s, (*base[:3], alpha), (r, r), r - i)
    x = int(round(circle.x)) - r
    y = int(round(circle.y)) - r + config.SHADOW_OFFSET
    surface.blit(s, (x, y))


def draw_scene(surface, scene: Scene):
    variant = scene.variant
    surface.fill(config.COL_BG)

    if variant.home_ghost and scene.home is not None:
        cx, cy = scene.home.center
        draw_circle(surface, Circle(cx, cy, scene.circle.radius), config.COL_GHOST)

    if variant.previews and scene.dragging:
        for zone in scene.zones:
            cx, cy = zone.center
            draw_circle(surface, Circle(cx, cy, scene.circle.radius), config.COL_PREVIEW)

    for ripple in scene.ripples:
        draw_circle(surface, ripple.circle, config.COL_RIPPLE)

    circle = scene.rendered_circle
    if variant.shadow:
        draw_shadow(surface, circle)
    draw_circle(surface, circle, config.COL_CIRCLE)

    for idx, zone in enumerate(scene.zones):
        bounce_time = scene.bounce.get(idx, 0)
        if bounce_time:
            zone = iterate_bounciness(zone, bounce_time)
        draw_rect(surface, zone, config.COL_ZONE)
