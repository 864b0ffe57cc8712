"""2D and 3D vector primitives.

Vectors are value types: arithmetic operators always return new vectors.
The one exception is ``Vector3.normalize``, which rescales in place;
use ``Vector3.normalized`` for a copy.

Degenerate inputs never raise. Dividing by zero, including normalizing a
zero-length vector, follows IEEE-754 and yields ``inf``/``nan`` components.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from kinect_measurements.core.types import Position


def _divide(value: float, divisor: float) -> float:
    """IEEE-754 division: x/0 is +-inf and 0/0 is nan instead of an exception."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(value) / np.float64(divisor))


@dataclass(frozen=True, slots=True)
class Vector2:
    """Immutable 2-component vector."""

    x: float
    y: float

    @classmethod
    def zero(cls) -> Vector2:
        """The additive identity."""
        return cls(0.0, 0.0)

    @property
    def length(self) -> float:
        """Euclidean norm."""
        return math.hypot(self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __mul__(self, value: float) -> Vector2:
        return Vector2(self.x * value, self.y * value)

    __rmul__ = __mul__

    def __truediv__(self, value: float) -> Vector2:
        return Vector2(_divide(self.x, value), _divide(self.y, value))


@dataclass(slots=True)
class Vector3:
    """3-component vector.

    Compared by value like ``Vector2``; mutable only through ``normalize``.
    """

    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> Vector3:
        """The additive identity."""
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_position(cls, position: Position) -> Vector3:
        """Build a vector from a sensor-space position."""
        return cls(position.x, position.y, position.z)

    @property
    def length(self) -> float:
        """Euclidean norm."""
        return math.hypot(self.x, self.y, self.z)

    def normalize(self) -> None:
        """Scale this vector to unit length in place.

        A zero-length vector becomes (nan, nan, nan).
        """
        length = self.length
        self.x = _divide(self.x, length)
        self.y = _divide(self.y, length)
        self.z = _divide(self.z, length)

    def normalized(self) -> Vector3:
        """Return a unit-length copy, leaving this vector unchanged."""
        copy = Vector3(self.x, self.y, self.z)
        copy.normalize()
        return copy

    @staticmethod
    def dot(left: Vector3, right: Vector3) -> float:
        """Dot product of two vectors."""
        return left.x * right.x + left.y * right.y + left.z * right.z

    def as_array(self) -> NDArray[np.float32]:
        """Components as a single-precision numpy array."""
        return np.array([self.x, self.y, self.z], dtype=np.float32)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, value: float) -> Vector3:
        return Vector3(self.x * value, self.y * value, self.z * value)

    __rmul__ = __mul__

    def __truediv__(self, value: float) -> Vector3:
        return Vector3(_divide(self.x, value), _divide(self.y, value), _divide(self.z, value))


def vector2_zero() -> Vector2:
    """Zero 2D vector."""
    return Vector2.zero()


def vector3_zero() -> Vector3:
    """Zero 3D vector."""
    return Vector3.zero()


def length(vector: Vector2 | Vector3) -> float:
    """Euclidean norm of a 2D or 3D vector."""
    return vector.length


def normalize(vector: Vector3) -> None:
    """Normalize a vector in place."""
    vector.normalize()


def dot(left: Vector3, right: Vector3) -> float:
    """Dot product of two 3D vectors."""
    return Vector3.dot(left, right)
