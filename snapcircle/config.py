from dataclasses import dataclass

from .geometry import Rect

# ── canvas ─────────────────────────────────────────────────
WIDTH, HEIGHT, FPS = 500, 500, 60
TOP_MARGIN = 40
ZONE_SIZE, ZONE_GAP = 200, 100

CIRCLE_RADIUS = 40
CIRCLE_START = (300, 300)
HOVER_EXPANSION = 10

# ── colours (RGBA) ─────────────────────────────────────────
COL_BG = (34, 34, 40)
COL_BAR = (20, 20, 24)
COL_LABEL = (220, 220, 220)
COL_ZONE = (255, 255, 255, 26)
COL_CIRCLE = (255, 170, 170)
COL_GHOST = (255, 255, 255, 128)
COL_PREVIEW = (255, 255, 255, 40)
COL_SHADOW = (0, 0, 0, 60)
COL_RIPPLE = (255, 170, 170)

SHADOW_OFFSET, SHADOW_BLUR = 6, 8

# ── effects ────────────────────────────────────────────────
BOUNCE_FRAMES = 12
RIPPLE_RADIUS, RIPPLE_ALPHA = 40, 0.4
RIPPLE_GROWTH, RIPPLE_FADE = 4, 0.02


@dataclass(frozen=True)
class Variant:
    name: str
    title: str
    pluck: bool = False
    hover: bool = False
    drop_assigns_home: bool = False
    home_ghost: bool = False
    previews: bool = False
    shadow: bool = False
    effects: bool = False


VARIANTS = {
    "classic": Variant(
        "classic",
        "Snap zones",
        drop_assigns_home=True,
        home_ghost=True,
    ),
    "pluck": Variant(
        "pluck",
        "Snap zones: pluck",
        pluck=True,
        hover=True,
        previews=True,
    ),
    "ripple": Variant(
        "ripple",
        "Snap zones: ripple",
        pluck=True,
        hover=True,
        previews=True,
        shadow=True,
        effects=True,
    ),
}
DEFAULT_VARIANT = "pluck"


def get_variant(name):
    try:
        return VARIANTS[name]
    except KeyError:
        raise ValueError(
            f"Unknown variant {name!r}, expected one of: {', '.join(VARIANTS)}"
        ) from None


def default_zones():
    """2x2 grid of snap zones, first one top-left."""
    step = ZONE_SIZE + ZONE_GAP
    return [
        Rect(col * step, row * step, ZONE_SIZE, ZONE_SIZE)
        for row in range(2)
        for col in range(2)
    ]
