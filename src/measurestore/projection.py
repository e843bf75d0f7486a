from __future__ import annotations

from typing import Any

import numpy as np


def points_array(points: Any) -> np.ndarray | None:
    """Coerce a `points` payload into a float64 (n, d) array, or None when it is not one."""

    if points is None:
        return None
    try:
        arr = np.asarray(points, dtype=np.float64)
    except (TypeError, ValueError):
        return None
    if arr.ndim == 1 and arr.size in (2, 3):
        arr = arr.reshape(1, -1)
    if arr.ndim != 2 or arr.shape[1] not in (2, 3):
        return None
    return arr


def bounds_from_points(pos: np.ndarray) -> dict[str, list[float]] | None:
    if pos.size == 0 or not np.all(np.isfinite(pos)):
        return None
    bounds_min = pos.min(axis=0)
    bounds_max = pos.max(axis=0)
    return {"min": bounds_min.tolist(), "max": bounds_max.tolist()}


def measurement_to_meta(m: dict[str, Any]) -> dict[str, Any]:
    pts = points_array(m.get("points"))
    area = m.get("area")
    return {
        "id": m.get("id"),
        "type": m.get("type"),
        "label": m.get("label"),
        "unit": m.get("unit"),
        "area": float(area) if isinstance(area, (int, float)) and not isinstance(area, bool) else None,
        "modifiedTimestamp": m.get("modifiedTimestamp"),
        "pointCount": int(pts.shape[0]) if pts is not None else 0,
        "dimensions": int(pts.shape[1]) if pts is not None else None,
        "bounds": bounds_from_points(pts) if pts is not None else None,
    }
