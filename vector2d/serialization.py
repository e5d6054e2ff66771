"""JSON helpers for vectors and point lists."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

from . import config
from .vector import Vector2D


def vector_to_json(value: Vector2D) -> dict[str, float]:
    return {"x": value.x, "y": value.y}


def vector_from_json(payload: Any) -> Vector2D:
    if not isinstance(payload, dict):
        raise ValueError(f"Vector payload must be an object, got {type(payload).__name__}.")
    try:
        return Vector2D(float(payload["x"]), float(payload["y"]))
    except KeyError as exc:
        raise ValueError(f"Vector payload is missing component {exc.args[0]!r}.") from exc
    except TypeError as exc:
        raise ValueError(f"Vector payload components must be numbers: {payload!r}.") from exc


@dataclass
class PointSet:
    """Ordered collection of points plus free-form metadata."""

    points: list[Vector2D] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_points(cls, points: Iterable[Vector2D], metadata: dict[str, Any] | None = None) -> "PointSet":
        return cls(points=[point.clone() for point in points], metadata=dict(metadata or {}))

    def to_json(self) -> dict[str, Any]:
        return {
            "metadata": self.metadata,
            "points": [vector_to_json(point) for point in self.points],
        }

    @classmethod
    def from_json(cls, payload: dict[str, Any]) -> "PointSet":
        return cls(
            points=[vector_from_json(point) for point in payload.get("points", [])],
            metadata=dict(payload.get("metadata", {})),
        )


def save_points(point_set: PointSet, path: str | Path) -> Path:
    points_path = Path(path)
    points_path.write_text(json.dumps(point_set.to_json(), indent=config.DEFAULT_JSON_INDENT, sort_keys=True))
    return points_path


def load_points(path: str | Path) -> PointSet:
    payload = json.loads(Path(path).read_text())
    if not isinstance(payload, dict):
        raise ValueError("Point set JSON must be an object.")
    return PointSet.from_json(payload)
