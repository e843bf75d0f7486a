from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

Measurement = dict[str, Any]

MEASUREMENT_SCHEMA_KEYS: tuple[str, ...] = (
    "id",
    "sopInstanceUID",
    "frameOfReferenceUID",
    "referenceSeriesUID",
    "label",
    "description",
    "type",
    "unit",
    "area",
    "points",
    "source",
    "sourceToolType",
)


def unknown_keys(measurement: Mapping[str, Any]) -> list[str]:
    return [str(k) for k in measurement.keys() if k not in MEASUREMENT_SCHEMA_KEYS]


def is_valid_measurement(measurement: object) -> bool:
    """Return whether `measurement` can be written.

    Unknown keys are reported but never reject the record; only non-mappings are refused.
    """

    if not isinstance(measurement, Mapping):
        return False
    for key in unknown_keys(measurement):
        logger.warning("Invalid measurement key: %s", key)
    return True
