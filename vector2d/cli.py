"""Command-line inspector for 2D vectors."""

from __future__ import annotations

import argparse
import json
import math
from typing import Sequence

from .vector import Vector2D


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="vector2d", description="Inspect a 2D vector and its relation to another.")
    parser.add_argument("x", type=float, help="X component.")
    parser.add_argument("y", type=float, help="Y component.")
    parser.add_argument(
        "--other",
        type=float,
        nargs=2,
        metavar=("X", "Y"),
        default=None,
        help="Second vector for sum, difference, dot, cross, projection and angle.",
    )
    parser.add_argument("--json", action="store_true", help="Print a single JSON object instead of text; Inf and NaN become null.")
    return parser.parse_args(argv)


def describe(vec: Vector2D, other: Vector2D | None = None) -> dict[str, float | list[float]]:
    report: dict[str, float | list[float]] = {
        "vector": vec.to_array(),
        "length": vec.length,
        "magnitude": vec.magnitude,
        "angle": vec.angle(),
    }
    if other is not None:
        report.update(
            {
                "other": other.to_array(),
                "sum": (vec + other).to_array(),
                "difference": (vec - other).to_array(),
                "dot": vec.dot(other),
                "cross": vec.cross(other),
                "projection": vec.projection(other),
                "angle_to": vec.angle_to(other),
            }
        )
    return report


def _finite_or_none(value: float | list[float]) -> float | list[float | None] | None:
    """Replace Inf/NaN with None so the report stays strict JSON."""
    if isinstance(value, list):
        return [item if math.isfinite(item) else None for item in value]
    return value if math.isfinite(value) else None


def run(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    vec = Vector2D(args.x, args.y)
    other = Vector2D.from_array(args.other) if args.other is not None else None
    report = describe(vec, other)
    if args.json:
        payload = {key: _finite_or_none(value) for key, value in report.items()}
        print(json.dumps(payload, sort_keys=True, allow_nan=False))
        return 0
    for key, value in report.items():
        print(f"{key}: {value}")
    return 0
