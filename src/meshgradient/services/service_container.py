"""Service Container - Dependency injection container for all core services"""

from dataclasses import dataclass
from typing import Optional

from meshgradient.engine.frame_ticker import FrameTicker
from meshgradient.managers.color_manager import ColorManager
from meshgradient.managers.config_manager import ConfigManager
from meshgradient.services.editor_service import EditorSession
from meshgradient.services.event_bus import EventBus


@dataclass
class ServiceContainer:
    """
    Everything the HTTP surface and the entry point need, in one place.

    - session: the editing session (mesh, animation, smoothing, export)
    - event_bus: pub-sub routing of editor events
    - color_manager: preset lookup
    - config_manager: loaded configuration
    - ticker: per-frame scheduler (absent when running headless)
    """

    session: EditorSession
    event_bus: EventBus
    color_manager: ColorManager
    config_manager: Optional[ConfigManager] = None
    ticker: Optional[FrameTicker] = None
