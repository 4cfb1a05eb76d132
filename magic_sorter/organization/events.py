"""
Log event stream written by the sorter and read by shells.
"""

import logging
import threading
from collections import deque
from typing import Callable, Deque, List

from ..core.types import LogEvent, LogKind

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 150

EventListener = Callable[[LogEvent], None]


class EventLog:
    """
    Append-only stream of log events.

    Keeps the most recent events up to a fixed capacity, evicting the oldest
    first, and forwards every event to subscribed listeners as it happens.
    Events are mirrored to the python logger.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._events: Deque[LogEvent] = deque(maxlen=capacity)
        self._listeners: List[EventListener] = []
        self._lock = threading.Lock()

    def subscribe(self, listener: EventListener) -> Callable[[], None]:
        """
        Register a listener called for each new event.

        Returns:
            A function that removes the listener again
        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def emit(self, message: str, kind: LogKind = LogKind.INFO) -> LogEvent:
        """
        Append an event and notify listeners.

        A listener that raises is logged and does not stop the others.

        Args:
            message: Human-readable message
            kind: Event kind

        Returns:
            The created event
        """
        event = LogEvent(message=message, kind=kind)
        with self._lock:
            self._events.append(event)
            listeners = list(self._listeners)

        if kind == LogKind.WARNING:
            logger.warning(message)
        else:
            logger.info(message)

        for listener in listeners:
            try:
                listener(event)
            except Exception:
                logger.exception(f"Event listener {listener!r} failed")
        return event

    def recent(self) -> List[LogEvent]:
        """Get the retained events, oldest first."""
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)
