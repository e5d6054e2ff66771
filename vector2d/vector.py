"""2D vector value type with in-place and copy-returning operations."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from numbers import Real
from typing import Union

import numpy as np

from . import config

Operand = Union["Vector2D", float, Sequence[float], np.ndarray]


def _ieee(ufunc: np.ufunc, *args: float) -> float:
    """Evaluate a numpy ufunc on scalars, returning Inf/NaN instead of raising."""
    with np.errstate(all="ignore"):
        return float(ufunc(*args))


@dataclass(eq=False)
class Vector2D:
    """Mutable 2D vector or point.

    Methods that change the vector work in place and return ``self`` so calls
    can be chained. Plain operators (``+``, ``-``, ``*``, ``/``, ``%``, unary
    ``-``) return a new vector; their augmented forms (``+=`` ...) mutate the
    left operand. The right operand may be another vector, a real scalar
    applied to both components, or a two-element sequence or numpy array.

    Numeric edge cases follow IEEE-754: dividing by zero or normalizing the
    zero vector yields Inf/NaN components rather than an exception.

    There is no internal locking; mutating one instance from several threads
    must be synchronized by the caller.
    """

    # numpy defers binary operators to Vector2D instead of broadcasting it.
    __array_ufunc__ = None

    x: float = config.DEFAULT_X
    y: float = config.DEFAULT_Y

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)

    # Construction and mutation

    def set(self, x: float, y: float | None = None) -> Vector2D:
        """Assign both components; with a single argument both become ``x``."""
        if y is None:
            y = x
        self.x = float(x)
        self.y = float(y)
        return self

    def clone(self) -> Vector2D:
        return Vector2D(self.x, self.y)

    def copy_from(self, source: Vector2D) -> Vector2D:
        self.x = source.x
        self.y = source.y
        return self

    # Rounding

    def round(self) -> Vector2D:
        """Round each component to the nearest integer, ties to even."""
        self.x = _ieee(np.rint, self.x)
        self.y = _ieee(np.rint, self.y)
        return self

    def floor(self) -> Vector2D:
        self.x = _ieee(np.floor, self.x)
        self.y = _ieee(np.floor, self.y)
        return self

    def ceil(self) -> Vector2D:
        self.x = _ieee(np.ceil, self.x)
        self.y = _ieee(np.ceil, self.y)
        return self

    def abs(self) -> Vector2D:
        self.x = abs(self.x)
        self.y = abs(self.y)
        return self

    # Length and magnitude

    @property
    def length(self) -> float:
        """Squared length ``x*x + y*y``. See :attr:`magnitude` for the norm."""
        return self.x * self.x + self.y * self.y

    @length.setter
    def length(self, value: float) -> None:
        self.set_length(value)

    def set_length(self, value: float) -> float:
        """Scale both components by ``value / length``.

        Returns ``value``, or ``0.0`` without touching the vector when the
        current squared length is zero.
        """
        current = self.length
        if current == 0:
            return 0.0
        ratio = value / current
        self.x *= ratio
        self.y *= ratio
        return value

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.length)

    @magnitude.setter
    def magnitude(self, value: float) -> None:
        self.polar(value, self.angle())

    # Geometry

    def dot(self, other: Vector2D) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2D) -> float:
        """2D cross product returning a scalar (z-component)."""
        return self.x * other.y - self.y * other.x

    def normalize(self) -> Vector2D:
        """Return a new unit vector; the zero vector gives NaN components."""
        return self / self.magnitude

    def projection(self, axis: Vector2D) -> float:
        """Signed length of this vector along ``axis``."""
        return self.dot(axis.normalize())

    def angle(self) -> float:
        """Direction in radians, in ``(-pi, pi]``."""
        return math.atan2(self.y, self.x)

    def angle_to(self, other: Vector2D) -> float:
        """Signed angle in radians from this vector to ``other``."""
        cos_angle = _ieee(np.minimum, self.normalize().dot(other.normalize()), config.ANGLE_COS_LIMIT)
        angle = _ieee(np.arccos, cos_angle)
        if self.cross(other) < 0:
            angle = -angle
        return angle

    def polar(self, magnitude: float, angle: float) -> Vector2D:
        """Rebuild the components from a magnitude and an angle in radians."""
        self.x = magnitude * _ieee(np.cos, angle)
        self.y = magnitude * _ieee(np.sin, angle)
        return self

    def rotate(self, angle_rad: float) -> Vector2D:
        """Turn the vector by ``angle_rad`` keeping its magnitude."""
        return self.polar(self.magnitude, self.angle() + angle_rad)

    def in_range(self, other: Vector2D, radius: float) -> bool:
        """True when ``other`` lies strictly closer than ``radius``."""
        return (self - other).length < radius * radius

    def is_close(self, other: Vector2D, tolerance: float = config.DEFAULT_TOLERANCE) -> bool:
        return math.isclose(self.x, other.x, rel_tol=0.0, abs_tol=tolerance) and math.isclose(
            self.y, other.y, rel_tol=0.0, abs_tol=tolerance
        )

    # Componentwise min/max

    def min(self, other: Vector2D) -> Vector2D:
        self.x = _ieee(np.minimum, self.x, other.x)
        self.y = _ieee(np.minimum, self.y, other.y)
        return self

    def max(self, other: Vector2D) -> Vector2D:
        self.x = _ieee(np.maximum, self.x, other.x)
        self.y = _ieee(np.maximum, self.y, other.y)
        return self

    @staticmethod
    def min_of(a: Vector2D, b: Vector2D) -> Vector2D:
        return a.clone().min(b)

    @staticmethod
    def max_of(a: Vector2D, b: Vector2D) -> Vector2D:
        return a.clone().max(b)

    # Sign inversion

    def invert_x(self) -> None:
        self.x = -self.x

    def invert_y(self) -> None:
        self.y = -self.y

    def invert_assign(self) -> Vector2D:
        self.x = -self.x
        self.y = -self.y
        return self

    def invert(self) -> Vector2D:
        return self.clone().invert_assign()

    __neg__ = invert

    # Arithmetic

    @classmethod
    def _coerce(cls, other: object) -> tuple[float, float] | None:
        if isinstance(other, Vector2D):
            return other.x, other.y
        if isinstance(other, np.ndarray):
            if other.ndim == 0:
                value = float(other)
                return value, value
            if other.shape != (2,):
                raise ValueError(f"Expected an array of shape (2,), got {other.shape}.")
            vec = cls.from_array(other)
            return vec.x, vec.y
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            vec = cls.from_array(other)
            return vec.x, vec.y
        if isinstance(other, Real):
            value = float(other)
            return value, value
        return None

    def __iadd__(self, other: Operand) -> Vector2D:
        pair = self._coerce(other)
        if pair is None:
            return NotImplemented
        self.x += pair[0]
        self.y += pair[1]
        return self

    def __isub__(self, other: Operand) -> Vector2D:
        pair = self._coerce(other)
        if pair is None:
            return NotImplemented
        self.x -= pair[0]
        self.y -= pair[1]
        return self

    def __imul__(self, other: Operand) -> Vector2D:
        pair = self._coerce(other)
        if pair is None:
            return NotImplemented
        self.x *= pair[0]
        self.y *= pair[1]
        return self

    def __itruediv__(self, other: Operand) -> Vector2D:
        pair = self._coerce(other)
        if pair is None:
            return NotImplemented
        self.x = _ieee(np.true_divide, self.x, pair[0])
        self.y = _ieee(np.true_divide, self.y, pair[1])
        return self

    def __imod__(self, other: Operand) -> Vector2D:
        """Truncated remainder; the result takes the sign of the dividend."""
        pair = self._coerce(other)
        if pair is None:
            return NotImplemented
        self.x = _ieee(np.fmod, self.x, pair[0])
        self.y = _ieee(np.fmod, self.y, pair[1])
        return self

    def __add__(self, other: Operand) -> Vector2D:
        return self.clone().__iadd__(other)

    def __sub__(self, other: Operand) -> Vector2D:
        return self.clone().__isub__(other)

    def __mul__(self, other: Operand) -> Vector2D:
        return self.clone().__imul__(other)

    def __truediv__(self, other: Operand) -> Vector2D:
        return self.clone().__itruediv__(other)

    def __mod__(self, other: Operand) -> Vector2D:
        return self.clone().__imod__(other)

    __radd__ = __add__
    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    __hash__ = None

    # Conversion

    def to_array(self) -> list[float]:
        return [self.x, self.y]

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    @classmethod
    def from_array(cls, values: Sequence[float]) -> Vector2D:
        if len(values) != 2:
            raise ValueError(f"Expected exactly 2 components, got {len(values)}.")
        return cls(values[0], values[1])

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
