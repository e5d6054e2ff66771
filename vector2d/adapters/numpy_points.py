"""numpy conversions for Vector2D."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from ..vector import Vector2D


def from_ndarray(array: np.ndarray) -> Vector2D:
    """Build a vector from a shape ``(2,)`` array."""
    values = np.asarray(array, dtype=np.float64)
    if values.shape != (2,):
        raise ValueError(f"Expected an array of shape (2,), got {values.shape}.")
    return Vector2D(float(values[0]), float(values[1]))


def to_ndarray(vec: Vector2D, dtype: np.dtype | type = np.float64) -> np.ndarray:
    return np.array([vec.x, vec.y], dtype=dtype)


def stack(points: Iterable[Vector2D]) -> np.ndarray:
    """Pack vectors into an ``(N, 2)`` array, one row per point."""
    rows = [(point.x, point.y) for point in points]
    return np.array(rows, dtype=np.float64).reshape(len(rows), 2)


def unstack(array: np.ndarray) -> list[Vector2D]:
    values = np.asarray(array, dtype=np.float64)
    if values.ndim != 2 or values.shape[1] != 2:
        raise ValueError(f"Expected an array of shape (N, 2), got {values.shape}.")
    return [Vector2D(float(row[0]), float(row[1])) for row in values]
