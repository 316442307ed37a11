"""Error reporting bus.

Failures that should reach the user without being raised through Qt slots
(a failed export, for instance) are published here. The main window
subscribes per category and decides how to surface them.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from log_config.logger import get_logger

logger = get_logger(__name__)


class ErrorSeverity(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    EXPORT = "export"
    CONFIG = "config"
    CANVAS = "canvas"
    SYSTEM = "system"


@dataclass
class ErrorEvent:
    """A reported failure and where it came from."""

    category: ErrorCategory
    severity: ErrorSeverity
    message: str
    source: str
    timestamp: float = field(default_factory=time.time)
    exception: Optional[Exception] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        suffix = f" ({type(self.exception).__name__})" if self.exception else ""
        return f"[{self.severity.value.upper()}] {self.category.value}/{self.source}: {self.message}{suffix}"


ErrorHandler = Callable[[ErrorEvent], None]


class ErrorEventBus:
    """Delivers error events to handlers registered per category.

    Handlers registered with ``category=None`` receive every event.
    """

    def __init__(self) -> None:
        self._handlers: Dict[Optional[ErrorCategory], List[ErrorHandler]] = {}
        self._lock = threading.Lock()

    def subscribe(self, handler: ErrorHandler, category: Optional[ErrorCategory] = None) -> None:
        with self._lock:
            self._handlers.setdefault(category, []).append(handler)
        scope = category.value if category is not None else "all"
        logger.debug(f"{_handler_name(handler)} subscribed to {scope} errors")

    def unsubscribe(self, handler: ErrorHandler, category: Optional[ErrorCategory] = None) -> None:
        with self._lock:
            handlers = self._handlers.get(category, [])
            if handler in handlers:
                handlers.remove(handler)

    def publish(self, event: ErrorEvent) -> None:
        """Log ``event`` and hand it to every matching handler.

        A handler that raises is logged and skipped; the remaining handlers
        still run.
        """
        with self._lock:
            targets = list(self._handlers.get(event.category, ())) + list(self._handlers.get(None, ()))

        logger.opt(exception=event.exception).log(event.severity.name, str(event))

        # Outside the lock so handlers may publish in turn
        for handler in targets:
            try:
                handler(event)
            except Exception as e:
                logger.exception(f"Error handler {_handler_name(handler)} failed: {e}")


def _handler_name(handler: ErrorHandler) -> str:
    return getattr(handler, "__name__", repr(handler))


_error_bus: Optional[ErrorEventBus] = None
_bus_lock = threading.Lock()


def get_error_bus() -> ErrorEventBus:
    """Process-wide bus shared by the export flow and the window."""
    global _error_bus
    with _bus_lock:
        if _error_bus is None:
            _error_bus = ErrorEventBus()
    return _error_bus


def publish_error(
    category: ErrorCategory,
    severity: ErrorSeverity,
    message: str,
    source: str,
    exception: Optional[Exception] = None,
    **metadata: Any,
) -> None:
    """Build an ErrorEvent and publish it on the shared bus.

    Args:
        category: Error category
        severity: Error severity
        message: Human-readable description, shown to the user as is
        source: Component reporting the error
        exception: Exception that caused the error, if any
        **metadata: Extra context stored on the event
    """
    get_error_bus().publish(
        ErrorEvent(
            category=category,
            severity=severity,
            message=message,
            source=source,
            exception=exception,
            metadata=metadata,
        )
    )


__all__ = [
    "ErrorCategory",
    "ErrorEvent",
    "ErrorEventBus",
    "ErrorSeverity",
    "get_error_bus",
    "publish_error",
]
