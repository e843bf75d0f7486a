from __future__ import annotations

from .client import MeasurementClient
from .errors import (
    MeasurementNotFoundError,
    MeasurementServiceError,
    UnknownContextError,
    UnsupportedEventError,
)
from .events import MEASUREMENT_ADDED, MEASUREMENT_UPDATED, EventRegistry
from .runner import MeasurementServer, run
from .service import DEFAULT_CONTEXT, SERVICE, MeasurementService
from .subscriptions import Subscription
from .value_types import ValueType

__all__ = [
    "run",
    "MeasurementServer",
    "MeasurementClient",
    "MeasurementService",
    "SERVICE",
    "DEFAULT_CONTEXT",
    "Subscription",
    "EventRegistry",
    "MEASUREMENT_ADDED",
    "MEASUREMENT_UPDATED",
    "ValueType",
    "MeasurementServiceError",
    "UnsupportedEventError",
    "UnknownContextError",
    "MeasurementNotFoundError",
]
