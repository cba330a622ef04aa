import math

import pygame

from . import config
from .geometry import Point
from .interaction import pointer_down, pointer_leave, pointer_move, pointer_up
from .log import logger
from .render import draw_scene
from .scene import Scene

FINGER_EVENTS = (pygame.FINGERDOWN, pygame.FINGERMOTION, pygame.FINGERUP)
MOUSE_EVENTS = (pygame.MOUSEBUTTONDOWN, pygame.MOUSEMOTION, pygame.MOUSEBUTTONUP)


def pointer_from_event(event, size, offset=(0, config.TOP_MARGIN)):
    """Canvas-local integer coordinates of a mouse or finger event.

    Finger events carry positions normalised to the window, so they are
    scaled by the window ``size`` first.
    """
    if event.type in FINGER_EVENTS:
        x, y = event.x * size[0], event.y * size[1]
    elif hasattr(event, "pos"):
        x, y = event.pos
    else:
        return None
    return Point(math.floor(x - offset[0]), math.floor(y - offset[1]))


def dispatch(scene, event, size, offset=(0, config.TOP_MARGIN)):
    if event.type in MOUSE_EVENTS and getattr(event, "touch", False):
        return  # already seen as a finger event

    if event.type == pygame.WINDOWLEAVE:
        pointer_leave(scene)
        return

    point = pointer_from_event(event, size, offset)
    if point is None:
        return

    if (
        event.type == pygame.MOUSEBUTTONDOWN and event.button == 1
    ) or event.type == pygame.FINGERDOWN:
        pointer_down(scene, point)
    elif event.type in (pygame.MOUSEMOTION, pygame.FINGERMOTION):
        pointer_move(scene, point)
    elif (
        event.type == pygame.MOUSEBUTTONUP and event.button == 1
    ) or event.type == pygame.FINGERUP:
        pointer_up(scene, point)


def draw_label(screen, font, scene):
    pluck = "on" if scene.pluck else "off"
    text = f"{scene.variant.title}  |  pluck {pluck}  |  {scene.state.name}"
    img = font.render(text, True, config.COL_LABEL)
    rect = img.get_rect(midleft=(12, config.TOP_MARGIN // 2))
    screen.blit(img, rect)


def run(variant=config.DEFAULT_VARIANT, pluck=None, fps=config.FPS):
    scene = Scene.create(variant, pluck)
    size = (config.WIDTH, config.TOP_MARGIN + config.HEIGHT)

    pygame.init()
    pygame.font.init()
    try:
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption(scene.variant.title)
        clock = pygame.time.Clock()
        font = pygame.font.SysFont(None, 28)
        canvas = pygame.Surface((config.WIDTH, config.HEIGHT))
        logger.info("Window opened: variant %s, pluck %s", scene.variant.name, scene.pluck)

        running = True
        while running:
            clock.tick(fps)
            for e in pygame.event.get():
                if e.type == pygame.QUIT or (
                    e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE
                ):
                    running = False
                    break
                dispatch(scene, e, size)

            scene.advance()

            screen.fill(config.COL_BAR)
            draw_scene(canvas, scene)
            screen.blit(canvas, (0, config.TOP_MARGIN))
            draw_label(screen, font, scene)
            pygame.display.flip()
    finally:
        pygame.display.quit()
        pygame.quit()
        logger.info("Window closed")
    return scene
