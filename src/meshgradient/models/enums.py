"""
Enums for the mesh gradient editor
"""

from enum import Enum, auto


class AnimationKind(Enum):
    """
    Animation kinds available for the point field

    Values are the display names shown by the kind picker.
    """
    WAVE = "Wave"
    ROTATE = "Rotate"
    PULSE = "Pulse"
    BOUNCE = "Bounce"
    SPIRAL = "Spiral"


class PointKind(Enum):
    """
    Topological class of a control point

    CORNER: both axes on the boundary, never moves
    VERTICAL_EDGE: x on the boundary (x pinned, y free)
    HORIZONTAL_EDGE: y on the boundary (y pinned, x free)
    INTERIOR: free on both axes
    """
    CORNER = auto()
    VERTICAL_EDGE = auto()
    HORIZONTAL_EDGE = auto()
    INTERIOR = auto()

    @property
    def is_corner(self) -> bool:
        return self is PointKind.CORNER

    @property
    def is_edge(self) -> bool:
        return self in (PointKind.VERTICAL_EDGE, PointKind.HORIZONTAL_EDGE)


class ColorMode(Enum):
    """Color representation modes"""
    RGB = auto()       # Direct normalized channels
    PRESET = auto()    # Named preset from colors.yaml


class ExportFormat(Enum):
    """Textual export formats"""
    SWIFTUI = "swiftui"
    JSON = "json"


class EventSource(Enum):
    """Event source identifiers"""
    EDITOR = auto()
    API = auto()
    TICKER = auto()


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    MESH = auto()        # Point moves, resize, randomize
    ANIMATION = auto()   # Animation params, field evaluation
    COLOR = auto()       # Color presets, recolor
    RENDER = auto()      # Frame ticker, renderers
    EXPORT = auto()      # Textual export
    EVENT = auto()       # Event bus
    API = auto()         # HTTP surface
    SYSTEM = auto()      # Startup, shutdown
