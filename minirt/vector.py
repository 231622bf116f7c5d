"""Three-component vectors and the small geometric helpers built on them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence


@dataclass(frozen=True)
class Vec:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec:
        return Vec(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vec:
        if isinstance(scalar, Vec):
            return NotImplemented
        return Vec(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vec:
        return self.__mul__(scalar)

    def scale(self, scalar: float) -> Vec:
        """Return the vector multiplied component-wise by ``scalar``."""
        return self * scalar

    def dot(self, other: Vec) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def norm(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vec:
        """Return a unit vector in the same direction.

        Raises ZeroDivisionError for the zero vector.
        """
        return self * (1.0 / self.norm())

    def cross(self, other: Vec) -> Vec:
        """Return the cross product with ``other``."""
        return Vec(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


def find_distance(point: Sequence[float]) -> float:
    """Return the distance of an ``(x, y, z)`` point from the origin."""
    x, y, z = point
    return math.sqrt(x**2 + y**2 + z**2)


def scalar_product(first: Sequence[float], second: Sequence[float]) -> float:
    """Return the difference between the origin distances of two points."""
    return find_distance(first) - find_distance(second)