import pytest

from snapcircle import config
from snapcircle.geometry import Circle, Point, Rect
from snapcircle.scene import Ripple, Scene, ease
from snapcircle.states import Idle, Plucked, Released, Tethered


def test_ease_halves_remaining_distance():
    p = ease(0, 10)
    assert p == 5
    p = ease(p, 10)
    assert p == 7.5


def test_ease_never_overshoots():
    p = 0.0
    for _ in range(60):
        p = ease(p, 10)
        assert p <= 10
    assert p == pytest.approx(10)


def test_create_uses_first_zone_as_home():
    scene = Scene.create("classic")
    assert scene.home == config.default_zones()[0]
    assert scene.circle.center == Point(*config.CIRCLE_START)
    assert isinstance(scene.state, Idle)
    assert scene.pluck is False


def test_create_unknown_variant():
    with pytest.raises(ValueError):
        Scene.create("nope")


def test_pluck_override():
    assert Scene.create("classic", pluck=True).pluck is True
    assert Scene.create("pluck", pluck=False).pluck is False


def test_home_must_be_a_zone(zones):
    with pytest.raises(ValueError):
        Scene(zones, Circle(0, 0, 10), Rect(1, 1, 1, 1))


def test_advance_eases_toward_home():
    scene = Scene.create("pluck")
    scene.advance()
    assert scene.circle.center == Point(200, 200)
    scene.advance()
    assert scene.circle.center == Point(150, 150)
    scene.advance(40)
    assert scene.circle.x == pytest.approx(100)
    assert scene.circle.y == pytest.approx(100)


def test_advance_zero_ticks_is_noop(scene):
    before = scene.circle.center
    scene.advance(0)
    assert scene.circle.center == before


@pytest.mark.parametrize("ticks", [-1, 1.5, "2"])
def test_advance_rejects_bad_ticks(scene, ticks):
    with pytest.raises(ValueError):
        scene.advance(ticks)


def test_target_follows_drag_target_only_while_dragging(scene, zones):
    scene.drag_target = Point(10, 10)
    assert scene.target == zones[0].center
    scene.state = Plucked()
    assert scene.target == Point(10, 10)
    scene.state = Released()
    assert scene.target == zones[0].center


def test_target_without_home():
    scene = Scene([], Circle(7, 8, 5))
    assert scene.target == Point(7, 8)
    scene.advance()
    assert scene.circle.center == Point(7, 8)


def test_hover_expansion_grows_and_shrinks(scene):
    scene.hovering = True
    scene.advance()
    assert scene.hover_expansion == config.HOVER_EXPANSION / 2
    scene.advance(30)
    assert scene.hover_expansion == pytest.approx(config.HOVER_EXPANSION)
    assert scene.rendered_circle.radius == pytest.approx(
        config.CIRCLE_RADIUS + config.HOVER_EXPANSION
    )

    scene.hovering = False
    scene.advance(30)
    assert scene.hover_expansion == pytest.approx(0, abs=1e-6)


def test_no_expansion_after_drop_while_hovering(scene, zones):
    scene.hovering = True
    scene.state = Released()
    assert scene.expansion_target == 0
    scene.state = Tethered(zones[0])
    assert scene.expansion_target == config.HOVER_EXPANSION


def test_classic_never_expands(make_scene):
    scene = make_scene("classic")
    scene.hovering = True
    scene.state = Plucked()
    assert scene.expansion_target == 0


def test_rehome_starts_effects(make_scene, zones):
    scene = make_scene("ripple")
    scene.rehome(1)
    assert scene.home is zones[1]
    assert scene.bounce == {1: config.BOUNCE_FRAMES}
    assert len(scene.ripples) == 1
    assert scene.ripples[0].circle.center == zones[1].center


def test_rehome_without_effects(scene, zones):
    scene.rehome(1)
    assert scene.home is zones[1]
    assert scene.bounce == {}
    assert scene.ripples == []


def test_effects_run_out(make_scene, zones):
    scene = make_scene("ripple")
    scene.rehome(1)
    scene.advance()
    assert scene.bounce[1] == config.BOUNCE_FRAMES - 1
    assert scene.ripples[0].circle.radius == config.RIPPLE_RADIUS + config.RIPPLE_GROWTH
    scene.advance(100)
    assert scene.bounce == {}
    assert scene.ripples == []


def test_ripple_fades_out():
    ripple = Ripple(0, 0)
    frames = 0
    while not ripple.tick():
        frames += 1
        assert frames < 100
    assert ripple.circle.alpha == 0
