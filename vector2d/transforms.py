"""Free-standing geometry helpers built on Vector2D."""

from __future__ import annotations

from .vector import Vector2D


def rotate_vector(vec: Vector2D, angle_rad: float) -> Vector2D:
    """Return a copy of ``vec`` turned about the origin."""
    return vec.clone().rotate(angle_rad)


def rotate_point(point: Vector2D, origin: Vector2D, angle_rad: float) -> Vector2D:
    """Return ``point`` turned about ``origin``; neither input is modified."""
    offset = (point - origin).rotate(angle_rad)
    offset += origin
    return offset


def lerp(a: Vector2D, b: Vector2D, t: float) -> Vector2D:
    """Linear interpolation; t=0 gives a copy of a, t=1 a copy of b."""
    return a + (b - a) * t


def distance_squared(a: Vector2D, b: Vector2D) -> float:
    return (a - b).length


def distance(a: Vector2D, b: Vector2D) -> float:
    return (a - b).magnitude
