"""pygame conversions for Vector2D."""

from __future__ import annotations

from pygame.math import Vector2

from ..vector import Vector2D


def from_pygame(point: Vector2) -> Vector2D:
    return Vector2D(point.x, point.y)


def to_pygame(vec: Vector2D) -> Vector2:
    return Vector2(vec.x, vec.y)
