import math

import pytest

from minirt.shapes import Cylinder, Hit, Material, Plane, Sphere
from minirt.vector import Vec


def approx_vec(actual, expected, tol=1e-9):
    return all(math.isclose(a, e, abs_tol=tol) for a, e in zip(actual, expected))


def test_standard_material_is_zeroed():
    material = Material()
    assert material.is_set is False
    assert material.albedo == (0.0, 0.0, 0.0, 0.0)
    assert material.refractive_index == 0.0
    assert material.specular_exponent == 0.0
    assert material.diffuse_color == Vec(0, 0, 0)


def test_hit_default_color_is_black():
    hit = Hit(distance=1.0, point=Vec(1, 0, 0), normal=Vec(1, 0, 0))
    assert hit.color == Vec(0, 0, 0)
    assert hit.material == Material()


def test_sphere_hit_lies_on_surface():
    sphere = Sphere(center=Vec(0, 0, -5), diameter=2.0)
    hit = sphere.intersect(Vec(0, 0, 0), Vec(0, 0, -1))
    assert hit is not None
    assert math.isclose((hit.point - sphere.center).norm(), 1.0)
    assert math.isclose(hit.normal.norm(), 1.0)
    assert math.isclose(hit.distance, hit.point.norm())


def test_sphere_nearest_side_is_returned():
    sphere = Sphere(center=Vec(0, 0, -5), diameter=2.0)
    hit = sphere.intersect(Vec(0, 0, 0), Vec(0, 0, -1))
    assert hit.distance == pytest.approx(4.0)
    assert approx_vec(hit.normal, Vec(0, 0, 1))


def test_sphere_from_inside_hits_far_side():
    sphere = Sphere(center=Vec(0, 0, 0), diameter=4.0)
    hit = sphere.intersect(Vec(0, 0, 0), Vec(1, 0, 0))
    assert hit.distance == pytest.approx(2.0)
    assert approx_vec(hit.normal, Vec(1, 0, 0))


def test_sphere_miss_and_behind():
    sphere = Sphere(center=Vec(0, 0, -5), diameter=2.0)
    assert sphere.intersect(Vec(0, 0, 0), Vec(0, 1, 0)) is None
    assert sphere.intersect(Vec(0, 0, 0), Vec(0, 0, 1)) is None


def test_sphere_hit_carries_material():
    material = Material(is_set=True, albedo=(1.0, 0.5, 0.1, 0.0))
    sphere = Sphere(center=Vec(0, 0, -5), diameter=2.0, material=material)
    hit = sphere.intersect(Vec(0, 0, 0), Vec(0, 0, -1))
    assert hit.material == material


def test_plane_hit_lies_on_plane():
    plane = Plane(center=Vec(0, -1, 0), normalized_axis=Vec(0, 1, 0))
    direction = Vec(0, -1, -1).normalized()
    hit = plane.intersect(Vec(0, 0, 0), direction)
    assert hit is not None
    assert math.isclose((hit.point - plane.center).dot(plane.normalized_axis), 0.0, abs_tol=1e-9)
    assert hit.normal == plane.normalized_axis
    assert math.isclose(hit.distance, hit.point.norm())


def test_plane_parallel_ray_misses():
    plane = Plane(center=Vec(0, -1, 0), normalized_axis=Vec(0, 1, 0))
    assert plane.intersect(Vec(0, 0, 0), Vec(1, 0, 0)) is None


def test_plane_behind_origin_misses():
    plane = Plane(center=Vec(0, -1, 0), normalized_axis=Vec(0, 1, 0))
    assert plane.intersect(Vec(0, 0, 0), Vec(0, 1, 0)) is None


def test_cylinder_hit_on_lateral_surface():
    cylinder = Cylinder(
        center=Vec(0, 0, -5), normalized_axis=Vec(0, 1, 0), diameter=2.0, height=3.0
    )
    direction = Vec(0.1, 0.2, -1).normalized()
    hit = cylinder.intersect(Vec(0, 0, 0), direction)
    assert hit is not None
    cp = hit.point - cylinder.center
    radial = cp - cylinder.normalized_axis * cp.dot(cylinder.normalized_axis)
    assert math.isclose(radial.norm(), 1.0)
    assert math.isclose(hit.normal.dot(cylinder.normalized_axis), 0.0, abs_tol=1e-9)
    assert math.isclose(hit.normal.norm(), 1.0)


def test_cylinder_ray_along_axis_misses():
    cylinder = Cylinder(
        center=Vec(0, 0, -5), normalized_axis=Vec(0, 1, 0), diameter=2.0, height=3.0
    )
    assert cylinder.intersect(Vec(0, 0, -5), Vec(0, 1, 0)) is None


def test_cylinder_miss():
    cylinder = Cylinder(
        center=Vec(0, 0, -5), normalized_axis=Vec(0, 1, 0), diameter=2.0, height=3.0
    )
    assert cylinder.intersect(Vec(0, 0, 0), Vec(1, 0, 0)) is None