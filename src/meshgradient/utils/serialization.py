"""
Serialization utilities - Central enum and model serialization for JSON API

Provides conversion between:
- Enums <-> Strings (AnimationKind, PointKind, ExportFormat)
- Domain models -> Dicts (Color, MeshPoint, MeshSnapshot, RenderFrame)

Single source of truth for the HTTP surface.
"""

from enum import Enum
from typing import Any, Dict, Optional, Type, TypeVar

from meshgradient.models.color import Color
from meshgradient.models.enums import AnimationKind, ExportFormat
from meshgradient.models.frame import MeshSnapshot, RenderFrame
from meshgradient.models.geometry import Position

T = TypeVar('T', bound=Enum)


class Serializer:
    """Central enum and model serialization for JSON API"""

    # ========================================================================
    # ENUM SERIALIZATION
    # ========================================================================

    @staticmethod
    def enum_to_str(value: Optional[Enum]) -> Optional[str]:
        """Convert any enum to string name"""
        return value.name if value else None

    @staticmethod
    def str_to_enum(value: str, enum_type: Type[T]) -> T:
        """Convert string to enum, raise ValueError if invalid"""
        try:
            return enum_type[value]
        except KeyError:
            raise ValueError(f"Invalid {enum_type.__name__}: {value}")

    @staticmethod
    def str_to_animation_kind(value: str) -> AnimationKind:
        """
        Accepts the enum name ("SPIRAL") or display value ("Spiral"),
        case-insensitive.

        Raises:
            ValueError: Unknown kind
        """
        wanted = str(value).strip().upper()
        for kind in AnimationKind:
            if kind.name == wanted or kind.value.upper() == wanted:
                return kind
        raise ValueError(f"Invalid AnimationKind: {value}")

    @staticmethod
    def str_to_export_format(value: str) -> ExportFormat:
        wanted = str(value).strip().lower()
        for fmt in ExportFormat:
            if fmt.value == wanted:
                return fmt
        raise ValueError(f"Invalid ExportFormat: {value}")

    # ========================================================================
    # MODEL SERIALIZATION
    # ========================================================================

    @staticmethod
    def position_to_list(position: Position) -> list:
        return [position.x, position.y]

    @staticmethod
    def color_to_dict(color: Color) -> Dict[str, Any]:
        """
        Serialize color to dict

        Colors without extractable channels serialize with rgb = None.
        """
        try:
            rgb = list(color.to_rgb())
        except ValueError:
            rgb = None

        return {
            "mode": color.mode.name,
            "rgb": rgb,
            "alpha": color.alpha,
            "preset_name": color.preset_name,
        }

    @staticmethod
    def snapshot_to_dict(snapshot: MeshSnapshot) -> Dict[str, Any]:
        return {
            "width": snapshot.width,
            "height": snapshot.height,
            "points": [
                {
                    "id": point_id,
                    "index": index,
                    "kind": kind.name,
                    "position": Serializer.position_to_list(position),
                    "color": Serializer.color_to_dict(color),
                }
                for index, (point_id, position, color, kind) in enumerate(
                    zip(snapshot.ids, snapshot.positions, snapshot.colors, snapshot.kinds)
                )
            ],
        }

    @staticmethod
    def frame_to_dict(frame: RenderFrame) -> Dict[str, Any]:
        return {
            "width": frame.width,
            "height": frame.height,
            "positions": [Serializer.position_to_list(p) for p in frame.positions],
            "colors": [Serializer.color_to_dict(c) for c in frame.colors],
            "smooth": frame.smooth,
            "animated": frame.animated,
            "timestamp": frame.timestamp,
        }
