"""
Middleware for EventBus

Middleware = pipeline functions that process events before handlers.
"""

from meshgradient.models.events import Event
from meshgradient.utils.logger import LogCategory, get_logger
from meshgradient.utils.serialization import Serializer

log = get_logger().for_category(LogCategory.EVENT)


def log_middleware(event: Event) -> Event:
    """
    Log all events at debug level

    Usage:
        event_bus.add_middleware(log_middleware)
    """
    source_str = Serializer.enum_to_str(event.source)
    data_str = ", ".join(f"{k}={v}" for k, v in event.data.items()) or "-"

    log.debug(f"Event: {event.type.name} from {source_str} | {data_str}")
    return event
