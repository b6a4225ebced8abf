"""
Constraint solver - keeps the mesh topologically valid

Corners never move, edge points slide along their edge, interior points
move freely inside the unit square. Applied on every drag update; the
randomizer follows the same rules.
"""

from meshgradient.models.enums import PointKind
from meshgradient.models.geometry import Position
from meshgradient.utils.colors import clamp01


def constrain(original: Position, proposed: Position, kind: PointKind) -> Position:
    """
    Constrain a proposed position for a point of the given kind

    Args:
        original: Current committed position of the point
        proposed: Requested position (any floats)
        kind: Topological class of the point

    Returns:
        Position in [0, 1]^2 matching original on every pinned axis
    """
    if kind == PointKind.CORNER:
        return original

    if kind == PointKind.VERTICAL_EDGE:
        return Position(original.x, clamp01(proposed.y))

    if kind == PointKind.HORIZONTAL_EDGE:
        return Position(clamp01(proposed.x), original.y)

    return Position(clamp01(proposed.x), clamp01(proposed.y))


def pointer_to_position(px: float, py: float, viewport_width: float, viewport_height: float) -> Position:
    """
    Normalize a pointer location by the viewport size

    The result is not clamped; pass it through constrain() before committing.
    """
    return Position(px / viewport_width, py / viewport_height)
