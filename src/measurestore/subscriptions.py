from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Protocol

MeasurementCallback = Callable[[dict[str, Any]], Any]


@dataclass(frozen=True)
class Listener:
    id: str
    callback: MeasurementCallback


class _Unsubscriber(Protocol):
    def _unsubscribe(self, event_name: str, subscriber_id: str, context: str) -> None: ...


@dataclass
class Subscription:
    """Disposer returned by `MeasurementService.subscribe`.

    Calling `unsubscribe()` more than once is harmless.
    """

    event_name: str
    subscriber_id: str
    context: str
    _owner: _Unsubscriber = field(repr=False, compare=False)
    _active: bool = field(default=True, repr=False, compare=False)

    @property
    def active(self) -> bool:
        return self._active

    def unsubscribe(self) -> None:
        if not self._active:
            return
        self._owner._unsubscribe(self.event_name, self.subscriber_id, self.context)
        self._active = False


class SubscriptionTable:
    """`context -> event name -> ordered listeners`.

    Not thread-safe on its own; the owning service holds its lock around every call.
    """

    def __init__(self) -> None:
        self._listeners: dict[str, dict[str, list[Listener] | None]] = {}

    def has_context(self, context: str) -> bool:
        return context in self._listeners

    def ensure_context(self, context: str) -> dict[str, list[Listener] | None]:
        table = self._listeners.get(context)
        if table is None:
            table = {}
            self._listeners[context] = table
        return table

    def add(self, context: str, event_name: str, listener: Listener) -> None:
        table = self.ensure_context(context)
        listeners = table.get(event_name)
        if isinstance(listeners, list):
            listeners.append(listener)
        else:
            table[event_name] = [listener]

    def remove(self, context: str, event_name: str, listener_id: str) -> bool:
        table = self._listeners.get(context)
        if table is None:
            return False
        listeners = table.get(event_name)
        if isinstance(listeners, list):
            table[event_name] = [l for l in listeners if l.id != listener_id]
            return len(table[event_name]) != len(listeners)
        table[event_name] = []
        return False

    def listeners_for(self, context: str, event_name: str) -> tuple[Listener, ...]:
        table = self._listeners.get(context)
        if not table:
            return ()
        listeners = table.get(event_name)
        if not listeners:
            return ()
        return tuple(listeners)

    def clear(self) -> None:
        self._listeners.clear()
