from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from fastapi import Body, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .errors import MeasurementNotFoundError, UnknownContextError
from .projection import measurement_to_meta
from .service import DEFAULT_CONTEXT, SERVICE, MeasurementService
from .value_types import ValueType


def create_api_app(
    service: MeasurementService | None = None,
    *,
    cors_origins: Sequence[str] | None = None,
) -> FastAPI:
    svc = service if service is not None else SERVICE
    app = FastAPI(title="measurestore", version="0.1.0")

    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(cors_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.get("/healthz")
    def healthz() -> dict[str, bool]:
        return {"ok": True}

    @app.get("/api/revision")
    def revision() -> dict[str, int]:
        # Minimal polling endpoint.
        return {"globalRevision": svc.global_revision()}

    @app.get("/api/events")
    def list_events() -> dict[str, str]:
        return svc.get_events()

    @app.post("/api/events")
    def register_event(body: dict) -> dict[str, Any]:
        name = str(body.get("name", "")).strip()
        if not name:
            raise HTTPException(status_code=400, detail="name is required")
        return {"ok": True, "event": svc.register_event(name)}

    @app.get("/api/value-types")
    def list_value_types() -> dict[str, str]:
        return ValueType.as_dict()

    @app.get("/api/contexts")
    def list_contexts() -> list[str]:
        return svc.contexts()

    @app.get("/api/measurements")
    def list_measurements(context: str = DEFAULT_CONTEXT) -> list[dict[str, Any]]:
        try:
            return svc.get_measurements(context)
        except UnknownContextError as ex:
            raise HTTPException(status_code=404, detail=str(ex))

    @app.put("/api/measurements")
    def add_or_update_measurement(body: Any = Body(...), context: str = DEFAULT_CONTEXT) -> dict[str, str]:
        measurement_id = svc.add_or_update(body, context)
        if measurement_id is None:
            raise HTTPException(status_code=400, detail="Measurement body must be a JSON object")
        return {"id": measurement_id}

    def _require_measurement(measurement_id: str, context: str | None) -> dict[str, Any]:
        try:
            m = svc.get_measurement(measurement_id, context)
        except (UnknownContextError, MeasurementNotFoundError) as ex:
            raise HTTPException(status_code=404, detail=str(ex))
        if m is None:
            raise HTTPException(status_code=404, detail=f"Unknown measurement: {measurement_id}")
        return m

    @app.get("/api/measurements/{measurement_id}")
    def get_measurement(measurement_id: str, context: str | None = None) -> dict[str, Any]:
        return _require_measurement(measurement_id, context)

    @app.get("/api/measurements/{measurement_id}/meta")
    def get_measurement_meta(measurement_id: str, context: str | None = None) -> dict[str, Any]:
        return measurement_to_meta(_require_measurement(measurement_id, context))

    @app.post("/api/reset")
    def reset_store() -> dict[str, bool]:
        svc.reset()
        return {"ok": True}

    return app
