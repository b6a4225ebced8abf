"""Services layer"""

from .event_bus import EventBus
from .exporter import export_mesh
from .editor_service import EditorSession, ExportResult
from .service_container import ServiceContainer

__all__ = [
    "EventBus",
    "export_mesh",
    "EditorSession",
    "ExportResult",
    "ServiceContainer",
]
