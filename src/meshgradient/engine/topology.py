"""
Grid topology - base layout and point classification

Maps (width, height) to the evenly spaced default layout and classifies
positions as corner, edge or interior. Width and height must both be >= 2;
GridSizeParam enforces this at the input boundary, so no division-by-zero
check is made here.
"""

from typing import List

from meshgradient.models.enums import PointKind
from meshgradient.models.geometry import Position


def base_positions(width: int, height: int) -> List[Position]:
    """
    Evenly spaced positions, row-major (y outer, x inner)

    Example:
        base_positions(2, 2)
        # [(0, 0), (1, 0), (0, 1), (1, 1)]
    """
    return [
        Position(x / (width - 1), y / (height - 1))
        for y in range(height)
        for x in range(width)
    ]


def _on_boundary(value: float) -> bool:
    return value == 0 or value == 1


def classify(position: Position) -> PointKind:
    """
    Classify a position by exact comparison against 0 and 1 per axis

    Both axes on the boundary -> CORNER
    x only -> VERTICAL_EDGE
    y only -> HORIZONTAL_EDGE
    neither -> INTERIOR
    """
    x_edge = _on_boundary(position.x)
    y_edge = _on_boundary(position.y)

    if x_edge and y_edge:
        return PointKind.CORNER
    if x_edge:
        return PointKind.VERTICAL_EDGE
    if y_edge:
        return PointKind.HORIZONTAL_EDGE
    return PointKind.INTERIOR


def point_kinds(width: int, height: int) -> List[PointKind]:
    """Kind of every grid slot, row-major"""
    return [classify(p) for p in base_positions(width, height)]
