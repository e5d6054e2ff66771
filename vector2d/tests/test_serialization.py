import json
import math

import pytest

from vector2d.serialization import PointSet, load_points, save_points, vector_from_json, vector_to_json
from vector2d.vector import Vector2D


def test_vector_json_round_trip():
    payload = vector_to_json(Vector2D(1.5, -2.0))
    assert payload == {"x": 1.5, "y": -2.0}
    assert vector_from_json(payload) == Vector2D(1.5, -2.0)


def test_vector_from_json_rejects_bad_payloads():
    with pytest.raises(ValueError):
        vector_from_json([1.0, 2.0])
    with pytest.raises(ValueError, match="'y'"):
        vector_from_json({"x": 1.0})


def test_point_set_copies_points():
    source = [Vector2D(1.0, 2.0)]
    point_set = PointSet.from_points(source, metadata={"name": "path"})
    point_set.points[0].x = 9.0
    assert source[0] == Vector2D(1.0, 2.0)


def test_save_and_load_points(tmp_path):
    point_set = PointSet.from_points(
        [Vector2D(0.0, 0.0), Vector2D(3.0, -4.0), Vector2D(math.inf, 1.0)],
        metadata={"units": "px"},
    )
    path = save_points(point_set, tmp_path / "points.json")

    raw = json.loads(path.read_text())
    assert raw["metadata"] == {"units": "px"}
    assert raw["points"][1] == {"x": 3.0, "y": -4.0}

    loaded = load_points(path)
    assert loaded.metadata == {"units": "px"}
    assert loaded.points == point_set.points


def test_load_points_requires_object(tmp_path):
    path = tmp_path / "points.json"
    path.write_text("[]")
    with pytest.raises(ValueError):
        load_points(path)


def test_vector_from_json_rejects_non_numeric_components():
    with pytest.raises(ValueError, match="must be numbers"):
        vector_from_json({"x": None, "y": 1})
    with pytest.raises(ValueError):
        vector_from_json({"x": "east", "y": 1})
