from __future__ import annotations

import copy
import logging
import threading
import time
import uuid
from collections.abc import Mapping
from typing import Any, Callable

from .errors import MeasurementNotFoundError, UnknownContextError, UnsupportedEventError
from .events import MEASUREMENT_ADDED, MEASUREMENT_UPDATED, EventRegistry
from .schema import Measurement, is_valid_measurement
from .subscriptions import Listener, MeasurementCallback, Subscription, SubscriptionTable
from .value_types import ValueType

logger = logging.getLogger(__name__)

DEFAULT_CONTEXT = "all"


def _generate_id() -> str:
    return str(uuid.uuid4())


def _normalize_id(raw: Any) -> str | None:
    """Return `raw` as a usable string id, or None when a fresh one must be generated."""

    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        raw = str(raw)
    if isinstance(raw, str) and raw.strip():
        return raw
    return None


class MeasurementService:
    """Context-partitioned measurement store with synchronous change notifications.

    Records live under `context -> id -> record`. Every write notifies the
    subscribers of that context before returning, while the lock is still held,
    so a callback never sees a record that is not yet readable.
    """

    VALUE_TYPES = ValueType

    def __init__(
        self,
        *,
        id_factory: Callable[[], str] = _generate_id,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._lock = threading.RLock()
        self._measurements: dict[str, dict[str, Measurement]] = {}
        self._listeners = SubscriptionTable()
        self._events = EventRegistry()
        self._id_factory = id_factory
        self._clock = clock
        self._global_revision = 0

    def global_revision(self) -> int:
        with self._lock:
            return self._global_revision

    def get_events(self) -> dict[str, str]:
        return self._events.snapshot()

    def register_event(self, event_name: str) -> str:
        return self._events.register(event_name)

    def contexts(self) -> list[str]:
        with self._lock:
            return list(self._measurements.keys())

    def get_measurements(self, context: str = DEFAULT_CONTEXT) -> list[dict[str, Measurement]]:
        with self._lock:
            by_id = self._measurements.get(context)
            if by_id is None:
                raise UnknownContextError(context)
            return [{mid: copy.deepcopy(m)} for mid, m in by_id.items()]

    def get_measurement(self, measurement_id: str, context: str | None = None) -> Measurement | None:
        with self._lock:
            if context:
                by_id = self._measurements.get(context)
                if by_id is None:
                    raise UnknownContextError(context)
                if measurement_id not in by_id:
                    raise MeasurementNotFoundError(measurement_id, context)
                return copy.deepcopy(by_id[measurement_id])

            # No short-circuit: the last context holding this id wins.
            found: Measurement | None = None
            for by_id in self._measurements.values():
                m = by_id.get(measurement_id)
                if m:
                    found = m
            return copy.deepcopy(found) if found is not None else None

    def add_or_update(self, measurement: Mapping[str, Any], context: str = DEFAULT_CONTEXT) -> str | None:
        """Add a measurement to `context`, or replace the one with the same id.

        Returns the stored id, or None when `measurement` is not a mapping.
        """

        if not is_valid_measurement(measurement):
            logger.warning(
                "Attempting to add or update a invalid measurement in '%s' context. Exiting early.",
                context,
                extra={"context": context},
            )
            return None

        raw_id = measurement.get("id")
        internal_id = _normalize_id(raw_id)
        if internal_id is None:
            internal_id = self._id_factory()
            if raw_id in (None, ""):
                logger.warning(
                    "Measurement ID not set in '%s' context. Using generated UID: %s",
                    context,
                    internal_id,
                    extra={"context": context, "measurement_id": internal_id},
                )
            else:
                logger.warning(
                    "Unusable measurement ID %r in '%s' context. Using generated UID: %s",
                    raw_id,
                    context,
                    internal_id,
                    extra={"context": context, "measurement_id": internal_id},
                )

        new_measurement: Measurement = {
            **copy.deepcopy(dict(measurement)),
            "modifiedTimestamp": int(self._clock()),
            "id": internal_id,
        }

        with self._lock:
            by_id = self._measurements.get(context)
            if by_id is None:
                by_id = {}
                self._measurements[context] = by_id
            self._listeners.ensure_context(context)

            if internal_id in by_id:
                logger.warning(
                    "Measurement already defined in '%s' context. Updating measurement.",
                    context,
                    extra={"context": context, "measurement_id": internal_id},
                )
                event_name = MEASUREMENT_UPDATED
            else:
                logger.info(
                    "Measurement added in '%s' context.",
                    context,
                    extra={"context": context, "measurement_id": internal_id},
                )
                event_name = MEASUREMENT_ADDED

            by_id[internal_id] = new_measurement
            self._global_revision += 1
            self._broadcast_change_locked(internal_id, event_name, context)

        return internal_id

    def _broadcast_change_locked(self, measurement_id: str, event_name: str, context: str) -> None:
        listeners = self._listeners.listeners_for(context, event_name)
        if not listeners:
            return
        stored = self._measurements[context][measurement_id]
        for listener in listeners:
            # Callback errors propagate and skip the remaining listeners.
            listener.callback(copy.deepcopy(stored))

    def subscribe(
        self,
        event_name: str,
        callback: MeasurementCallback,
        context: str = DEFAULT_CONTEXT,
    ) -> Subscription:
        if not callable(callback):
            raise TypeError("callback must be callable")

        listener_id = self._id_factory()
        with self._lock:
            # Validity check and insertion are atomic with respect to reset().
            if not self._events.is_valid(event_name):
                raise UnsupportedEventError(event_name, context)
            logger.info(
                "Subscribing to '%s' event using '%s' context.",
                event_name,
                context,
                extra={"context": context, "event": event_name},
            )
            self._listeners.add(context, event_name, Listener(id=listener_id, callback=callback))
        return Subscription(event_name=event_name, subscriber_id=listener_id, context=context, _owner=self)

    def _unsubscribe(self, event_name: str, subscriber_id: str, context: str) -> None:
        with self._lock:
            if not self._listeners.has_context(context):
                logger.warning(
                    "Unsubscribing from '%s' in unknown '%s' context.",
                    event_name,
                    context,
                    extra={"context": context, "event": event_name},
                )
                return
            self._listeners.remove(context, event_name, subscriber_id)

    def listener_count(self, event_name: str, context: str = DEFAULT_CONTEXT) -> int:
        with self._lock:
            return len(self._listeners.listeners_for(context, event_name))

    def reset(self) -> None:
        with self._lock:
            self._measurements.clear()
            self._listeners.clear()
            self._events.reset()
            self._global_revision += 1


SERVICE = MeasurementService()
