"""Cross-cutting services: event bus and log capture."""

from .event_bus import ChartEvent, Event, EventBus, Subscription  # noqa: F401
from .logging_service import LogEntry, LoggingService  # noqa: F401
