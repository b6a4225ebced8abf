"""
Geometry primitives - normalized positions and grid dimensions
"""

from dataclasses import dataclass
from typing import NamedTuple

from meshgradient.utils.colors import clamp01


class Position(NamedTuple):
    """Normalized 2D position, logically in [0, 1] on both axes"""
    x: float
    y: float

    def clamped(self) -> 'Position':
        return Position(clamp01(self.x), clamp01(self.y))

    def __str__(self) -> str:
        return f"({self.x:.3f}, {self.y:.3f})"


@dataclass(frozen=True)
class GridDimensions:
    """
    Mesh grid size in control points

    Valid range is MIN_SIZE..MAX_SIZE on both axes. The engine treats this as
    a precondition; GridSizeParam clamps user input into range.
    """
    width: int
    height: int

    MIN_SIZE = 2
    MAX_SIZE = 5

    @property
    def point_count(self) -> int:
        return self.width * self.height
