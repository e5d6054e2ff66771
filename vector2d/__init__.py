"""2D vector value type and geometry helpers."""

from .serialization import PointSet, load_points, save_points, vector_from_json, vector_to_json
from .transforms import distance, distance_squared, lerp, rotate_point, rotate_vector
from .vector import Vector2D

__all__ = [
    "Vector2D",
    "rotate_vector",
    "rotate_point",
    "lerp",
    "distance",
    "distance_squared",
    "PointSet",
    "vector_to_json",
    "vector_from_json",
    "save_points",
    "load_points",
]
