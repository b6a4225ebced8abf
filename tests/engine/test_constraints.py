import pytest

from meshgradient.engine.constraints import constrain, pointer_to_position
from meshgradient.models.enums import PointKind
from meshgradient.models.geometry import Position

PROPOSALS = [
    Position(0.3, 0.6),
    Position(-2.0, 0.5),
    Position(1.7, -0.4),
    Position(5.0, 5.0),
    Position(0.0, 1.0),
    Position(float("nan"), float("nan")),
    Position(float("inf"), float("-inf")),
]


@pytest.mark.parametrize("proposed", PROPOSALS)
def test_corner_never_moves(proposed):
    original = Position(1.0, 0.0)
    assert constrain(original, proposed, PointKind.CORNER) == original


@pytest.mark.parametrize("proposed", PROPOSALS)
def test_vertical_edge_keeps_x(proposed):
    original = Position(0.0, 0.5)
    result = constrain(original, proposed, PointKind.VERTICAL_EDGE)

    assert result.x == 0.0
    assert result.y == min(1.0, max(0.0, proposed.y))


@pytest.mark.parametrize("proposed", PROPOSALS)
def test_horizontal_edge_keeps_y(proposed):
    original = Position(0.5, 1.0)
    result = constrain(original, proposed, PointKind.HORIZONTAL_EDGE)

    assert result.y == 1.0
    assert result.x == min(1.0, max(0.0, proposed.x))


@pytest.mark.parametrize("proposed", PROPOSALS)
def test_interior_stays_in_unit_square(proposed):
    result = constrain(Position(0.5, 0.5), proposed, PointKind.INTERIOR)

    assert 0.0 <= result.x <= 1.0
    assert 0.0 <= result.y <= 1.0
    if 0.0 <= proposed.x <= 1.0 and 0.0 <= proposed.y <= 1.0:
        assert result == proposed


def test_pointer_normalized_by_viewport():
    assert pointer_to_position(200, 75, 400, 300) == Position(0.5, 0.25)


def test_pointer_outside_viewport_is_not_clamped():
    position = pointer_to_position(-40, 600, 400, 300)
    assert position == Position(-0.1, 2.0)
    assert constrain(Position(0.5, 0.5), position, PointKind.INTERIOR) == Position(0.0, 1.0)


@pytest.mark.parametrize("kind,original,expected", [
    (PointKind.INTERIOR, Position(0.5, 0.5), Position(0.0, 0.0)),
    (PointKind.VERTICAL_EDGE, Position(1.0, 0.5), Position(1.0, 0.0)),
    (PointKind.HORIZONTAL_EDGE, Position(0.5, 0.0), Position(0.0, 0.0)),
])
def test_nan_proposal_is_pinned_to_zero(kind, original, expected):
    nan = float("nan")
    assert constrain(original, Position(nan, nan), kind) == expected
