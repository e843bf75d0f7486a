from __future__ import annotations

import pytest

from measurestore import MeasurementService, ValueType


def test_value_type_values_are_tagged() -> None:
    assert ValueType.ELLIPSE.value == "value_type::ellipse"
    assert MeasurementService.VALUE_TYPES.POLYLINE == "value_type::polyline"
    assert set(ValueType.as_dict()) == {"POLYLINE", "POINT", "ELLIPSE", "MULTIPOINT", "CIRCLE"}


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("value_type::circle", ValueType.CIRCLE),
        ("circle", ValueType.CIRCLE),
        ("Multi-Point", ValueType.MULTIPOINT),
        ("poly_line", ValueType.POLYLINE),
        (ValueType.POINT, ValueType.POINT),
    ],
)
def test_from_any_accepts_aliases(raw: object, expected: ValueType) -> None:
    assert ValueType.from_any(raw) is expected


def test_from_any_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="Unsupported value type"):
        ValueType.from_any("value_type::rectangle")


def test_service_stores_caller_defined_types() -> None:
    svc = MeasurementService()
    mid = svc.add_or_update({"type": "custom::bidirectional"})
    stored = svc.get_measurement(mid, "all")
    assert stored is not None
    assert stored["type"] == "custom::bidirectional"
