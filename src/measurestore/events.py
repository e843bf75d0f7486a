from __future__ import annotations

import threading

EVENT_PREFIX = "event::"

MEASUREMENT_UPDATED = "event::measurement_updated"
MEASUREMENT_ADDED = "event::measurement_added"

BUILTIN_EVENTS: dict[str, str] = {
    "MEASUREMENT_UPDATED": MEASUREMENT_UPDATED,
    "MEASUREMENT_ADDED": MEASUREMENT_ADDED,
}


def event_token(name: str) -> str:
    return f"{EVENT_PREFIX}{name}"


class EventRegistry:
    """Symbolic event names mapped to their `event::<name>` tokens.

    Subscriptions are validated against the tokens (the values), never the names.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._events: dict[str, str] = dict(BUILTIN_EVENTS)

    def register(self, name: str) -> str:
        token = event_token(name)
        with self._lock:
            self._events[name] = token
        return token

    def snapshot(self) -> dict[str, str]:
        with self._lock:
            return dict(self._events)

    def is_valid(self, event_name: str) -> bool:
        with self._lock:
            return event_name in self._events.values()

    def reset(self) -> None:
        with self._lock:
            self._events = dict(BUILTIN_EVENTS)
