"""
Domain models for the mesh gradient editor
"""

from .enums import AnimationKind, PointKind, ColorMode, ExportFormat, EventSource, LogLevel, LogCategory
from .geometry import Position, GridDimensions
from .color import Color
from .mesh_point import MeshPoint
from .frame import MeshSnapshot, RenderFrame
from .events import Event, EventType

__all__ = [
    "AnimationKind",
    "PointKind",
    "ColorMode",
    "ExportFormat",
    "EventSource",
    "LogLevel",
    "LogCategory",
    "Position",
    "GridDimensions",
    "Color",
    "MeshPoint",
    "MeshSnapshot",
    "RenderFrame",
    "Event",
    "EventType",
]
