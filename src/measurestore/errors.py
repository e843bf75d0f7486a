from __future__ import annotations


class MeasurementServiceError(Exception):
    """Base class for errors raised by the measurement service."""


class UnsupportedEventError(MeasurementServiceError, ValueError):
    def __init__(self, event_name: str, context: str) -> None:
        super().__init__(f"Event {event_name} not supported in '{context}' context.")
        self.event_name = event_name
        self.context = context


class UnknownContextError(MeasurementServiceError, KeyError):
    def __init__(self, context: str) -> None:
        super().__init__(context)
        self.context = context

    def __str__(self) -> str:
        return f"Unknown measurement context: '{self.context}'"


class MeasurementNotFoundError(MeasurementServiceError, KeyError):
    def __init__(self, measurement_id: str, context: str) -> None:
        super().__init__(measurement_id)
        self.measurement_id = measurement_id
        self.context = context

    def __str__(self) -> str:
        return f"Measurement '{self.measurement_id}' not found in '{self.context}' context"
