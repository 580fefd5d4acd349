"""Two-dimensional vector arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

Operand = Union["Vector", float, int]


@dataclass(frozen=True)
class Vector:
    """An immutable 2D vector.

    Multiplication and division work component-wise with another vector,
    or uniformly with a scalar.
    """

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Operand) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vector(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other: Operand) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.x / other.x, self.y / other.y)
        if isinstance(other, (int, float)):
            return Vector(self.x / other, self.y / other)
        return NotImplemented

    def __iadd__(self, other: Vector) -> Vector:
        return self.__add__(other)

    def __isub__(self, other: Vector) -> Vector:
        return self.__sub__(other)

    def __imul__(self, other: Operand) -> Vector:
        return self.__mul__(other)

    def __itruediv__(self, other: Operand) -> Vector:
        return self.__truediv__(other)

    def magnitude(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vector:
        """Return a unit vector in the same direction, or the zero vector."""
        mag = self.magnitude()
        if mag == 0:
            return Vector(0.0, 0.0)
        return Vector(self.x / mag, self.y / mag)

    def distance_to(self, other: Vector) -> float:
        """Return the distance between this point and ``other``."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def direction_to(self, other: Vector) -> Vector:
        """Return the unit vector pointing from this point towards ``other``."""
        return (other - self).normalize()