from __future__ import annotations

import numpy as np

from measurestore.projection import bounds_from_points, measurement_to_meta, points_array


def test_points_array_accepts_2d_and_3d() -> None:
    arr = points_array([[0, 0], [2, 4]])
    assert arr is not None
    assert arr.shape == (2, 2)
    assert arr.dtype == np.float64

    single = points_array([1.0, 2.0, 3.0])
    assert single is not None
    assert single.shape == (1, 3)


def test_points_array_rejects_ragged_or_odd_shapes() -> None:
    assert points_array(None) is None
    assert points_array("abc") is None
    assert points_array([[0, 0, 0, 0]]) is None
    assert points_array([[0, 0], [1, 1, 1]]) is None


def test_bounds_from_points() -> None:
    b = bounds_from_points(np.asarray([[0.0, 5.0], [2.0, -1.0]]))
    assert b == {"min": [0.0, -1.0], "max": [2.0, 5.0]}
    assert bounds_from_points(np.zeros((0, 3))) is None


def test_measurement_meta_summary() -> None:
    meta = measurement_to_meta(
        {
            "id": "m",
            "type": "value_type::polyline",
            "label": "ruler",
            "area": 3,
            "points": [[0, 0, 0], [1, 2, 3]],
            "modifiedTimestamp": 10,
        }
    )
    assert meta["id"] == "m"
    assert meta["pointCount"] == 2
    assert meta["dimensions"] == 3
    assert meta["area"] == 3.0
    assert meta["bounds"] == {"min": [0.0, 0.0, 0.0], "max": [1.0, 2.0, 3.0]}

    empty = measurement_to_meta({"id": "n", "area": True})
    assert empty["pointCount"] == 0
    assert empty["bounds"] is None
    assert empty["area"] is None
