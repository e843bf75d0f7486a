from __future__ import annotations

from enum import Enum
from typing import Any


class ValueType(str, Enum):
    """Geometric kind a measurement represents.

    Notes:
    - This is a closed set. It is not extensible at runtime.
    - The service stores whatever `type` a caller logs; these values are only tags.
    """

    POLYLINE = "value_type::polyline"
    POINT = "value_type::point"
    ELLIPSE = "value_type::ellipse"
    MULTIPOINT = "value_type::multipoint"
    CIRCLE = "value_type::circle"

    @classmethod
    def from_any(cls, value: Any) -> "ValueType":
        if isinstance(value, cls):
            return value

        v = str(value).strip().lower()
        if v.startswith("value_type::"):
            v = v[len("value_type::"):]
        v = v.replace("-", "").replace("_", "")
        aliases: dict[str, ValueType] = {
            "polyline": cls.POLYLINE,
            "point": cls.POINT,
            "ellipse": cls.ELLIPSE,
            "multipoint": cls.MULTIPOINT,
            "circle": cls.CIRCLE,
        }
        if v in aliases:
            return aliases[v]

        raise ValueError(f"Unsupported value type: {value!r}")

    @classmethod
    def as_dict(cls) -> dict[str, str]:
        return {member.name: member.value for member in cls}
