from __future__ import annotations

import contextlib
from typing import Any, Iterator

import httpx

from .value_types import ValueType


class MeasurementClient:
    """HTTP client for a running measurestore server.

    Pass `http` to reuse an existing `httpx.Client` (for example a FastAPI
    `TestClient`); otherwise a short-lived client is opened per call.
    """

    def __init__(self, base_url: str = "http://127.0.0.1:8000", *, http: httpx.Client | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self._http = http

    @contextlib.contextmanager
    def _client(self, timeout_s: float) -> Iterator[httpx.Client]:
        if self._http is not None:
            yield self._http
            return
        with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
            yield client

    @staticmethod
    def _check(res: httpx.Response, what: str) -> None:
        if res.status_code >= 400:
            raise RuntimeError(f"Failed to {what}: {res.status_code} {res.text}")

    def get_events(self, *, timeout_s: float = 10.0) -> dict[str, str]:
        with self._client(timeout_s) as client:
            res = client.get("/api/events")
            self._check(res, "get events")
            return dict(res.json())

    def register_event(self, name: str, *, timeout_s: float = 10.0) -> str:
        n = str(name).strip()
        if not n:
            raise ValueError("name cannot be empty")

        with self._client(timeout_s) as client:
            res = client.post("/api/events", json={"name": n})
            self._check(res, "register event")
            return str(res.json()["event"])

    def get_value_types(self, *, timeout_s: float = 10.0) -> dict[str, ValueType]:
        with self._client(timeout_s) as client:
            res = client.get("/api/value-types")
            self._check(res, "get value types")
            return {k: ValueType.from_any(v) for k, v in res.json().items()}

    def get_contexts(self, *, timeout_s: float = 10.0) -> list[str]:
        with self._client(timeout_s) as client:
            res = client.get("/api/contexts")
            self._check(res, "get contexts")
            return list(res.json())

    def global_revision(self, *, timeout_s: float = 10.0) -> int:
        with self._client(timeout_s) as client:
            res = client.get("/api/revision")
            self._check(res, "get revision")
            return int(res.json()["globalRevision"])

    def add_or_update(self, measurement: dict[str, Any], context: str = "all", *, timeout_s: float = 10.0) -> str:
        with self._client(timeout_s) as client:
            res = client.put("/api/measurements", params={"context": context}, json=measurement)
            self._check(res, "add or update measurement")
            return str(res.json()["id"])

    def get_measurements(self, context: str = "all", *, timeout_s: float = 10.0) -> list[dict[str, dict[str, Any]]]:
        with self._client(timeout_s) as client:
            res = client.get("/api/measurements", params={"context": context})
            self._check(res, "list measurements")
            return list(res.json())

    def get_measurement(
        self,
        measurement_id: str,
        context: str | None = None,
        *,
        timeout_s: float = 10.0,
    ) -> dict[str, Any] | None:
        params = {"context": context} if context else {}
        with self._client(timeout_s) as client:
            res = client.get(f"/api/measurements/{measurement_id}", params=params)
            if res.status_code == 404:
                return None
            self._check(res, "get measurement")
            return dict(res.json())

    def get_measurement_meta(
        self,
        measurement_id: str,
        context: str | None = None,
        *,
        timeout_s: float = 10.0,
    ) -> dict[str, Any]:
        params = {"context": context} if context else {}
        with self._client(timeout_s) as client:
            res = client.get(f"/api/measurements/{measurement_id}/meta", params=params)
            self._check(res, "get measurement meta")
            return dict(res.json())

    def reset(self, *, timeout_s: float = 10.0) -> None:
        with self._client(timeout_s) as client:
            res = client.post("/api/reset")
            self._check(res, "reset store")
