from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from measurestore import MeasurementClient, MeasurementService, ValueType
from measurestore.api import create_api_app


@pytest.fixture()
def mc() -> MeasurementClient:
    app = create_api_app(MeasurementService())
    return MeasurementClient("http://testserver", http=TestClient(app))


def test_client_round_trip(mc: MeasurementClient) -> None:
    mid = mc.add_or_update({"label": "x", "points": [[1, 1], [2, 2]]}, "ctx")

    got = mc.get_measurement(mid, "ctx")
    assert got is not None
    assert got["label"] == "x"
    assert mc.get_measurements("ctx") == [{mid: got}]
    assert mc.get_contexts() == ["ctx"]
    assert mc.global_revision() == 1
    assert mc.get_measurement_meta(mid)["pointCount"] == 2


def test_client_missing_measurement_is_none(mc: MeasurementClient) -> None:
    assert mc.get_measurement("absent") is None


def test_client_raises_on_unknown_context(mc: MeasurementClient) -> None:
    with pytest.raises(RuntimeError, match="404"):
        mc.get_measurements("missing")


def test_client_events_and_value_types(mc: MeasurementClient) -> None:
    assert mc.register_event("measurement_removed") == "event::measurement_removed"
    assert "measurement_removed" in mc.get_events()
    assert mc.get_value_types()["CIRCLE"] is ValueType.CIRCLE

    with pytest.raises(ValueError):
        mc.register_event("")


def test_client_reset(mc: MeasurementClient) -> None:
    mc.add_or_update({"id": "a"})
    mc.reset()
    assert mc.get_contexts() == []
