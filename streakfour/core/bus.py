"""
Event bus carrying the engine's notification stream.

Dispatch is synchronous and in publish order: the engine is single-threaded
and presenters rely on seeing placement, score and round events in sequence.
"""

import logging
from collections import defaultdict, deque
from collections.abc import Callable

from .events import Event, EventType


logger = logging.getLogger(__name__)

Handler = Callable[[Event], None]


class EventBus:
    """
    Simple pub/sub event bus.

    Usage:
        bus = EventBus()
        bus.subscribe(EventType.MOVE_MADE, my_handler)
        bus.publish(Event(type=EventType.MOVE_MADE, data=payload))
    """

    def __init__(self, max_log_size: int = 100) -> None:
        self._handlers: dict[EventType, list[Handler]] = defaultdict(list)
        self._wildcard: list[Handler] = []
        self._event_log: deque[Event] = deque(maxlen=max_log_size)
        self._log_enabled = max_log_size > 0

    def subscribe(self, event_type: EventType, handler: Handler) -> None:
        """Register a handler for an event type."""
        if handler not in self._handlers[event_type]:
            self._handlers[event_type].append(handler)

    def subscribe_all(self, handler: Handler) -> None:
        """Register a handler for every event type."""
        if handler not in self._wildcard:
            self._wildcard.append(handler)

    def unsubscribe(self, event_type: EventType, handler: Handler) -> None:
        """Remove a handler."""
        if handler in self._handlers[event_type]:
            self._handlers[event_type].remove(handler)

    def unsubscribe_all(self, handler: Handler) -> None:
        """Remove a wildcard handler."""
        if handler in self._wildcard:
            self._wildcard.remove(handler)

    def publish(self, event: Event) -> None:
        """Publish an event to its subscribers, then to wildcard subscribers."""
        if self._log_enabled:
            self._event_log.append(event)

        # Copy so handlers may (un)subscribe while being dispatched
        handlers = self._handlers[event.type] + self._wildcard
        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(f"Handler error for {event.type.name}")

    def get_event_log(self, limit: int = 20) -> list[Event]:
        """Get recent events from log."""
        if limit <= 0:
            return []
        return list(self._event_log)[-limit:]

    def clear_log(self) -> None:
        self._event_log.clear()


# ─────────────────────────────────────────────────────────────
# SINGLETON ACCESS
# ─────────────────────────────────────────────────────────────

_bus: EventBus | None = None


def get_event_bus() -> EventBus:
    """Get the process-wide event bus used by the CLI."""
    global _bus
    if _bus is None:
        _bus = EventBus()
    return _bus


def reset_event_bus() -> None:
    """Reset the event bus (for testing)."""
    global _bus
    _bus = None
