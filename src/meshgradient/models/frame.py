"""
Frame models - immutable snapshots handed to readers

MeshSnapshot: state of the mesh at one instant (base positions)
RenderFrame: what a renderer receives on one tick (possibly animated positions)
"""

import time
from dataclasses import dataclass, field
from typing import Tuple

from meshgradient.models.color import Color
from meshgradient.models.enums import PointKind
from meshgradient.models.geometry import Position


@dataclass(frozen=True)
class MeshSnapshot:
    """Read-only copy of MeshState taken in one step"""
    width: int
    height: int
    ids: Tuple[str, ...]
    positions: Tuple[Position, ...]
    colors: Tuple[Color, ...]
    kinds: Tuple[PointKind, ...]

    def __len__(self) -> int:
        return len(self.positions)


@dataclass(frozen=True)
class RenderFrame:
    """
    Render input contract

    positions and colors are row-major, length width * height.
    """
    width: int
    height: int
    positions: Tuple[Position, ...]
    colors: Tuple[Color, ...]
    smooth: bool
    animated: bool = False
    timestamp: float = field(default_factory=time.time)
