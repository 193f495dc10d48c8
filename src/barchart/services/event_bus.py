"""EventBus core.

Lightweight synchronous publish/subscribe used by the chart coordinator to
announce render lifecycle events to host code (status bars, log panels,
tests).

Goals:
 - Decouple the render pipeline from its observers
 - Safe error isolation: one failing handler doesn't break the publish cycle
 - Allow one-shot (once) subscriptions
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from threading import RLock
from time import perf_counter
from typing import Any, Callable, Dict, List

__all__ = ["ChartEvent", "Event", "EventBus", "Subscription"]


class ChartEvent(str, Enum):  # Using str subclass for easier JSON/UI usage
    RENDER_STARTED = "render_started"
    RENDER_COMPLETED = "render_completed"
    RENDER_FAILED = "render_failed"
    TRANSITION_COMPLETED = "transition_completed"
    LOG_RECORD_ADDED = "log_record_added"


@dataclass
class Event:
    name: str  # matches ChartEvent value or custom string
    payload: Any
    timestamp: float


@dataclass
class Subscription:
    event: str
    handler: Callable[[Event], None]
    once: bool
    active: bool = True


class EventBus:
    """Synchronous event dispatcher.

    Handlers are invoked while the lock is NOT held (copy-first strategy) so
    handlers can subscribe/unsubscribe recursively without deadlock.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._subs: Dict[str, List[Subscription]] = {}
        self._errors: List[tuple[Event, BaseException]] = []

    def subscribe(
        self, name: str | ChartEvent, handler: Callable[[Event], None], *, once: bool = False
    ) -> Subscription:
        key = name.value if isinstance(name, ChartEvent) else name
        sub = Subscription(event=key, handler=handler, once=once)
        with self._lock:
            self._subs.setdefault(key, []).append(sub)
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        with self._lock:
            bucket = self._subs.get(sub.event)
            if bucket and sub in bucket:
                bucket.remove(sub)
                if not bucket:
                    self._subs.pop(sub.event, None)
        sub.active = False

    def publish(self, name: str | ChartEvent, payload: Any = None) -> Event:
        key = name.value if isinstance(name, ChartEvent) else name
        evt = Event(name=key, payload=payload, timestamp=perf_counter())
        with self._lock:
            subs = list(self._subs.get(key, ()))
        done: List[Subscription] = []
        for sub in subs:
            if not sub.active:
                continue
            try:
                sub.handler(evt)
            except Exception as exc:  # noqa: BLE001 - isolate handler failures
                self._errors.append((evt, exc))
            else:
                if sub.once:
                    done.append(sub)
        for sub in done:
            self.unsubscribe(sub)
        return evt

    def subscriber_count(self, name: str | ChartEvent) -> int:
        key = name.value if isinstance(name, ChartEvent) else name
        with self._lock:
            return len(self._subs.get(key, ()))

    @property
    def errors(self) -> list[tuple[Event, BaseException]]:
        with self._lock:
            return list(self._errors)
