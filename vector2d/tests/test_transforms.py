import math
import unittest

from vector2d.transforms import distance, distance_squared, lerp, rotate_point, rotate_vector
from vector2d.vector import Vector2D


class TransformTests(unittest.TestCase):
    def test_rotate_vector_quarter_turn(self) -> None:
        rotated = rotate_vector(Vector2D(1.0, 0.0), math.pi / 2)
        self.assertTrue(rotated.is_close(Vector2D(0.0, 1.0)))

    def test_rotate_vector_leaves_input_alone(self) -> None:
        vec = Vector2D(0.0, -2.0)
        rotated = rotate_vector(vec, -math.pi / 2)
        self.assertTrue(rotated.is_close(Vector2D(-2.0, 0.0)))
        self.assertEqual(vec, Vector2D(0.0, -2.0))

    def test_rotate_point_about_origin(self) -> None:
        point = Vector2D(2.0, 1.0)
        pivot = Vector2D(1.0, 1.0)
        rotated = rotate_point(point, pivot, math.pi)
        self.assertTrue(rotated.is_close(Vector2D(0.0, 1.0)))
        self.assertEqual(point, Vector2D(2.0, 1.0))
        self.assertEqual(pivot, Vector2D(1.0, 1.0))

    def test_lerp(self) -> None:
        a = Vector2D(0.0, 10.0)
        b = Vector2D(10.0, 20.0)
        self.assertEqual(lerp(a, b, 0.0), a)
        self.assertEqual(lerp(a, b, 1.0), b)
        self.assertEqual(lerp(a, b, 0.5), Vector2D(5.0, 15.0))
        self.assertEqual(a, Vector2D(0.0, 10.0))

    def test_distance(self) -> None:
        a = Vector2D(1.0, 1.0)
        b = Vector2D(4.0, 5.0)
        self.assertEqual(distance_squared(a, b), 25.0)
        self.assertEqual(distance(a, b), 5.0)


if __name__ == "__main__":
    unittest.main()
