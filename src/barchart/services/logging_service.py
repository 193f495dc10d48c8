"""Logging capture service.

In-process logging handler capturing recent ``barchart.*`` log records into
a ring buffer and emitting ``ChartEvent.LOG_RECORD_ADDED`` on an optional
EventBus, so a host UI can show render diagnostics without tailing files.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from threading import RLock
from typing import Deque, List, Optional

from .event_bus import ChartEvent, EventBus

__all__ = ["LogEntry", "LoggingService"]


@dataclass(frozen=True)
class LogEntry:
    level: str
    name: str
    message: str
    created: float


class _RingBufferHandler(logging.Handler):
    def __init__(self, svc: "LoggingService") -> None:
        super().__init__(level=logging.DEBUG)
        self._svc = svc

    def emit(self, record: logging.LogRecord) -> None:  # noqa: D401
        self._svc._ingest_record(record)


class LoggingService:
    def __init__(
        self,
        capacity: int = 200,
        *,
        logger_name: str = "barchart",
        event_bus: EventBus | None = None,
    ) -> None:
        self._lock = RLock()
        self._entries: Deque[LogEntry] = deque(maxlen=capacity)
        self._handler = _RingBufferHandler(self)
        self._logger_name = logger_name
        self._event_bus = event_bus
        self._attached = False
        self._prev_level: int | None = None

    @property
    def attached(self) -> bool:
        return self._attached

    def attach(self) -> None:
        if self._attached:
            return
        logger = logging.getLogger(self._logger_name)
        logger.addHandler(self._handler)
        self._prev_level = logger.level
        if logger.getEffectiveLevel() > logging.DEBUG:
            logger.setLevel(logging.DEBUG)
        self._attached = True

    def detach(self) -> None:
        if not self._attached:
            return
        logger = logging.getLogger(self._logger_name)
        logger.removeHandler(self._handler)
        if self._prev_level is not None:
            logger.setLevel(self._prev_level)
        self._attached = False

    def _ingest_record(self, record: logging.LogRecord) -> None:
        entry = LogEntry(
            level=record.levelname,
            name=record.name,
            message=record.getMessage(),
            created=record.created,
        )
        with self._lock:
            self._entries.append(entry)
        if self._event_bus is not None:
            self._event_bus.publish(
                ChartEvent.LOG_RECORD_ADDED,
                {"level": entry.level, "name": entry.name, "message": entry.message[:120]},
            )

    def recent(self, limit: Optional[int] = None) -> List[LogEntry]:
        with self._lock:
            data = list(self._entries)
        return data[-limit:] if limit is not None else data

    def filter(self, *, level: str | None = None, name_contains: str | None = None) -> List[LogEntry]:
        out: List[LogEntry] = []
        for e in self.recent():
            if level and e.level != level:
                continue
            if name_contains and name_contains not in e.name:
                continue
            out.append(e)
        return out

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
