"""
Event system for the mesh editor

Every editor mutation is published as an event so that front ends and
observers can react without holding references to the session.
"""

import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, Optional

from meshgradient.models.enums import EventSource


class EventType(Enum):
    """Event types in the system"""
    MESH_RESIZED = auto()
    POINT_MOVED = auto()
    POINT_RECOLORED = auto()
    COLORS_RANDOMIZED = auto()
    POINTS_RANDOMIZED = auto()
    ANIMATION_CHANGED = auto()
    SMOOTHING_CHANGED = auto()
    MESH_EXPORTED = auto()


@dataclass
class Event:
    """
    Base event

    - type: what happened
    - source: who triggered it
    - data: event-specific payload
    - timestamp: when it happened
    """
    type: EventType
    source: Optional[EventSource] = EventSource.EDITOR
    data: Dict[str, Any] = field(default_factory=dict)
    timestamp: float = field(default_factory=time.time)
