"""Error event reporting shared by the export flow and the window."""

from app.events.error_bus import (
    ErrorCategory,
    ErrorEvent,
    ErrorEventBus,
    ErrorSeverity,
    get_error_bus,
    publish_error,
)

__all__ = [
    "ErrorCategory",
    "ErrorEvent",
    "ErrorEventBus",
    "ErrorSeverity",
    "get_error_bus",
    "publish_error",
]
