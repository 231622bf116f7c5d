"""Ray casting: intersections, lighting and the per-pixel camera rays."""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

from minirt.errors import SceneError
from minirt.scene import Camera, Scene
from minirt.shapes import Hit
from minirt.vector import Vec

MAX_RAY_DEPTH = 4
BACKGROUND = Vec(0.2, 0.7, 0.8)
TOTAL_REFLECTION = Vec(1.0, 0.0, 0.0)
_FAR_AWAY = 1e30


def reflect(incident: Vec, normal: Vec) -> Vec:
    """Mirror ``incident`` about the surface with the given normal."""
    return incident - normal * (2.0 * incident.dot(normal))


def refract(incident: Vec, normal: Vec, eta_t: float, eta_i: float = 1.0) -> Vec:
    """Bend ``incident`` through a surface following Snell's law.

    ``eta_t`` is the refractive index on the far side of the surface and
    ``eta_i`` the one on the near side. A ray leaving the medium is handled
    by flipping the normal and swapping the indices. Total internal
    reflection yields TOTAL_REFLECTION.
    """
    cosi = -max(-1.0, min(1.0, incident.dot(normal)))
    if cosi < 0:
        return refract(incident, -normal, eta_i, eta_t)
    eta = eta_i / eta_t
    k = 1 - eta * eta * (1 - cosi * cosi)
    if k < 0:
        return TOTAL_REFLECTION
    return incident * eta + normal * (eta * cosi - math.sqrt(k))


def scene_intersect(scene: Scene, orig: Vec, direction: Vec) -> Optional[Hit]:
    """Return the nearest hit among the scene's shapes, or None."""
    closest: Optional[Hit] = None
    nearest = _FAR_AWAY
    for shape in scene.objects:
        hit = shape.intersect(orig, direction)
        if hit is not None and hit.distance < nearest:
            nearest = hit.distance
            closest = hit
    return closest


def _is_shadowed(scene: Scene, point: Vec, light_pos: Vec, light_dir: Vec) -> bool:
    blocker = scene_intersect(scene, point, light_dir)
    if blocker is None:
        return False
    return (blocker.point - point).norm() < (light_pos - point).norm()


def light_intensities(scene: Scene, hit: Hit, direction: Vec) -> Tuple[float, float]:
    """Return the summed diffuse and specular intensities at ``hit``.

    Lights whose path to the hit point is blocked by a shape contribute
    nothing.
    """
    diffuse = 0.0
    specular = 0.0
    lights = [scene.light] if scene.light is not None else []
    for light in lights:
        light_dir = (light.position - hit.point).normalized()
        if _is_shadowed(scene, hit.point, light.position, light_dir):
            continue
        diffuse += max(0.0, light_dir.dot(hit.normal))
        highlight = max(0.0, -reflect(-light_dir, hit.normal).dot(direction))
        specular += highlight ** hit.material.specular_exponent
    return diffuse, specular


def shade(
    scene: Scene, hit: Hit, direction: Vec, reflect_color: Vec, refract_color: Vec
) -> Vec:
    """Combine diffuse, specular, reflected and refracted light at ``hit``.

    Every weight starts at 1; a set material scales the light intensities by
    its albedo and replaces the reflection and refraction weights with it.
    """
    diffuse, specular = light_intensities(scene, hit, direction)
    diffuse += 1.0
    specular += 1.0
    reflect_weight = 1.0
    refract_weight = 1.0
    material = hit.material
    if material.is_set:
        diffuse *= material.albedo[0]
        specular *= material.albedo[1]
        reflect_weight = material.albedo[2]
        refract_weight = material.albedo[3]
    return (
        material.diffuse_color * diffuse
        + Vec(1.0, 1.0, 1.0) * specular
        + reflect_color * reflect_weight
        + refract_color * refract_weight
    )


def cast_ray(scene: Scene, orig: Vec, direction: Vec, depth: int = 0) -> Vec:
    """Return the colour seen along a ray.

    Rays past MAX_RAY_DEPTH or that hit nothing see BACKGROUND; a ray that
    hits a shape sees the colour carried by the hit.
    """
    if depth > MAX_RAY_DEPTH:
        return BACKGROUND
    hit = scene_intersect(scene, orig, direction)
    if hit is None:
        return BACKGROUND
    return hit.color


def camera_ray(camera: Camera, x: int, y: int, width: int, height: int) -> Vec:
    """Return the unit direction of the ray through pixel ``(x, y)``.

    The field of view is used as stored on the camera.
    """
    direction = Vec(
        (x + 0.5) - width / 2.0,
        -(y + 0.5) + height / 2.0,
        -height / (2.0 * math.tan(camera.fov / 2.0)),
    )
    return direction.normalized()


def vec_to_color(color: Vec) -> int:
    """Pack a colour with components in [0, 1] into ``0xRRGGBB``."""
    red, green, blue = (int(255.0 * min(1.0, max(0.0, c))) for c in color)
    return (red << 16) | (green << 8) | blue


def trace_rays(scene: Scene, width: int, height: int) -> List[int]:
    """Render the scene; return packed pixel colours in row-major order."""
    camera = scene.camera
    if camera is None:
        raise SceneError("Scene has no camera")
    return [
        vec_to_color(
            cast_ray(scene, camera.view_point, camera_ray(camera, x, y, width, height), 0)
        )
        for y in range(height)
        for x in range(width)
    ]