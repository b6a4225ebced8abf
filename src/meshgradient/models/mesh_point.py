"""
MeshPoint - one control point of the mesh
"""

import uuid
from dataclasses import dataclass, field

from meshgradient.models.color import Color
from meshgradient.models.enums import PointKind
from meshgradient.models.geometry import Position


def _new_point_id() -> str:
    return uuid.uuid4().hex


@dataclass
class MeshPoint:
    """
    Control point: position + color

    id is stable across animation frames, drags and recolors. kind is fixed
    when the point is created from its grid slot; position and color are
    mutated in place by MeshState.
    """
    position: Position
    color: Color
    kind: PointKind
    id: str = field(default_factory=_new_point_id)

    @property
    def is_corner(self) -> bool:
        return self.kind.is_corner
