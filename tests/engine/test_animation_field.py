import math

import pytest

from meshgradient.engine.animation_field import MOTIONS, AnimationParameters, evaluate
from meshgradient.engine.topology import base_positions, point_kinds
from meshgradient.models.enums import AnimationKind, PointKind
from meshgradient.models.geometry import Position

CORNERS = {Position(0.0, 0.0), Position(1.0, 0.0), Position(0.0, 1.0), Position(1.0, 1.0)}


def enabled(kind=AnimationKind.WAVE, speed=1.0, intensity=1.0):
    return AnimationParameters(kind=kind, speed=speed, intensity=intensity, enabled=True)


def test_every_kind_has_a_motion():
    assert set(MOTIONS) == set(AnimationKind)
    for kind, motion in MOTIONS.items():
        assert motion.KIND == kind


def test_wave_3x3_at_t0():
    base = base_positions(3, 3)
    result = evaluate(base, enabled(), now=0.0)

    assert len(result) == 9
    for before, after in zip(base, result):
        if before in CORNERS:
            assert after == before
            continue
        expected_x = min(1.0, max(0.0, before.x + math.sin(before.y * 0.5) * 0.1))
        expected_y = min(1.0, max(0.0, before.y + math.cos(before.x * 0.5) * 0.1))
        assert after.x == pytest.approx(expected_x)
        assert after.y == pytest.approx(expected_y)

    center = result[4]
    assert center.x == pytest.approx(0.5 + math.sin(0.25) * 0.1)
    assert center.y == pytest.approx(0.5 + math.cos(0.25) * 0.1)
    # bottom edge point is pushed past 1 and clamped
    assert result[7].y == 1.0


@pytest.mark.parametrize("kind", list(AnimationKind))
@pytest.mark.parametrize("now", [0.0, 0.37, 2.5, 1000.0])
def test_corners_fixed_and_positions_clamped(kind, now):
    base = base_positions(4, 3)
    result = evaluate(base, enabled(kind, speed=3.0, intensity=2.0), now)

    assert len(result) == len(base)
    for before, after, point_kind in zip(base, result, point_kinds(4, 3)):
        if point_kind == PointKind.CORNER:
            assert after == before
        assert 0.0 <= after.x <= 1.0
        assert 0.0 <= after.y <= 1.0


@pytest.mark.parametrize("kind", list(AnimationKind))
def test_disabled_is_identity(kind):
    base = [Position(0.0, 0.0), Position(0.31, 0.0), Position(0.2, 0.8), Position(1.0, 1.0)]
    params = AnimationParameters(kind=kind, enabled=False)

    result = evaluate(base, params, now=12.0)

    assert result == base
    assert result is not base


def test_explicit_kinds_override_classification():
    # An edge point dragged into a corner coordinate still animates
    base = [Position(0.0, 0.0), Position(1.0, 0.0)]
    kinds = [PointKind.CORNER, PointKind.HORIZONTAL_EDGE]

    result = evaluate(base, enabled(AnimationKind.BOUNCE), now=1.0, kinds=kinds)

    assert result[0] == base[0]
    assert result[1].x == 1.0
    assert result[1].y == pytest.approx(abs(math.sin(1.0 + 0.3)) * 0.1 * 2.0)


def test_kinds_length_must_match_positions():
    base = base_positions(3, 3)

    with pytest.raises(ValueError):
        evaluate(base, enabled(), now=1.0, kinds=point_kinds(3, 3)[:-1])


def test_bounce_never_changes_x():
    base = base_positions(3, 3)
    result = evaluate(base, enabled(AnimationKind.BOUNCE), now=0.8)

    assert [p.x for p in result] == [p.x for p in base]


def test_speed_scales_time():
    base = base_positions(3, 3)
    slow = evaluate(base, enabled(speed=0.5), now=2.0)
    fast = evaluate(base, enabled(speed=1.0), now=1.0)

    for a, b in zip(slow, fast):
        assert a.x == pytest.approx(b.x)
        assert a.y == pytest.approx(b.y)


def test_with_changes_clamps():
    params = AnimationParameters().with_changes(speed=10.0, intensity=0.0, enabled=True)

    assert params.speed == 3.0
    assert params.intensity == 0.1
    assert params.enabled is True
    assert params.kind == AnimationKind.WAVE


def test_with_changes_keeps_omitted_fields():
    params = AnimationParameters(kind=AnimationKind.SPIRAL, speed=2.0, intensity=1.5, enabled=True)
    changed = params.with_changes(kind=AnimationKind.PULSE)

    assert changed.kind == AnimationKind.PULSE
    assert (changed.speed, changed.intensity, changed.enabled) == (2.0, 1.5, True)
