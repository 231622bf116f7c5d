"""Materials, ray hits and the primitive shapes a scene is built from."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Tuple

from minirt.vector import Vec

_PARALLEL_EPSILON = 1e-6


@dataclass(frozen=True)
class Material:
    """Surface response of a shape; the default is the standard, unset one."""

    is_set: bool = False
    albedo: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    refractive_index: float = 0.0
    specular_exponent: float = 0.0
    diffuse_color: Vec = field(default_factory=Vec)


@dataclass(frozen=True)
class Hit:
    """Where a ray met a surface, and what that surface is made of."""

    distance: float
    point: Vec
    normal: Vec
    material: Material = field(default_factory=Material)
    color: Vec = field(default_factory=Vec)


def _nearest_root(a: float, b: float, c: float) -> Optional[float]:
    """Return the smallest non-negative root of ``a*t^2 + b*t + c``, if any."""
    if a == 0:
        return None
    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return None
    root = math.sqrt(discriminant)
    t = (-b - root) / (2 * a)
    if t < 0:
        t = (-b + root) / (2 * a)
    return t if t >= 0 else None


@dataclass
class Sphere:
    """A sphere given by its centre and diameter."""

    center: Vec
    diameter: float
    color: int = 0
    material: Material = field(default_factory=Material)
    normalized_axis: Vec = field(default_factory=Vec)

    def intersect(self, orig: Vec, direction: Vec) -> Optional[Hit]:
        """Return the nearest hit in front of ``orig``, or None."""
        oc = orig - self.center
        a = direction.dot(direction)
        b = 2.0 * oc.dot(direction)
        c = oc.dot(oc) - (self.diameter / 2.0) ** 2
        t = _nearest_root(a, b, c)
        if t is None:
            return None
        point = orig + direction * t
        return Hit(
            distance=t,
            point=point,
            normal=(point - self.center).normalized(),
            material=self.material,
        )


@dataclass
class Plane:
    """An infinite plane through ``center`` with normal ``normalized_axis``."""

    center: Vec
    normalized_axis: Vec
    color: int = 0
    material: Material = field(default_factory=Material)

    def intersect(self, orig: Vec, direction: Vec) -> Optional[Hit]:
        """Return the hit in front of ``orig``, or None if parallel or behind."""
        denominator = self.normalized_axis.dot(direction)
        if abs(denominator) < _PARALLEL_EPSILON:
            return None
        t = (self.center - orig).dot(self.normalized_axis) / denominator
        if t < 0:
            return None
        return Hit(
            distance=t,
            point=orig + direction * t,
            normal=self.normalized_axis,
            material=self.material,
        )


@dataclass
class Cylinder:
    """A cylinder around ``normalized_axis`` through ``center``.

    Intersection treats it as unbounded along its axis; ``height`` is kept
    as scene data.
    """

    center: Vec
    normalized_axis: Vec
    diameter: float
    height: float
    color: int = 0
    material: Material = field(default_factory=Material)

    def intersect(self, orig: Vec, direction: Vec) -> Optional[Hit]:
        """Return the nearest hit on the lateral surface, or None."""
        axis = self.normalized_axis
        oc = orig - self.center
        dir_axis = direction.dot(axis)
        oc_axis = oc.dot(axis)
        a = direction.dot(direction) - dir_axis**2
        b = 2 * (direction.dot(oc) - dir_axis * oc_axis)
        c = oc.dot(oc) - oc_axis**2 - (self.diameter / 2.0) ** 2
        t = _nearest_root(a, b, c)
        if t is None:
            return None
        point = orig + direction * t
        cp = point - self.center
        normal = (cp - axis * cp.dot(axis)).normalized()
        return Hit(distance=t, point=point, normal=normal, material=self.material)