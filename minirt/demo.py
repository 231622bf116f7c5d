"""Self-contained demo renderer: a fixed scene of spheres written to a PPM file."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from minirt.image import encode_ppm, write_ppm
from minirt.raytrace import reflect, refract
from minirt.vector import Vec

MAX_DEPTH = 4
AMBIENT_LIGHTING = 0.5
CLASSIC_BACKGROUND = Vec(0.2, 0.7, 0.8)
NORMED_BACKGROUND = Vec(AMBIENT_LIGHTING, AMBIENT_LIGHTING, AMBIENT_LIGHTING)
CLASSIC_FOV = 1.05
NORMED_FOV = 1.0
DEFAULT_WIDTH = 1024
DEFAULT_HEIGHT = 768
DEFAULT_OUTPUT = "out.ppm"
_FAR_AWAY = 1e30
_WHITE = Vec(1.0, 1.0, 1.0)


@dataclass(frozen=True)
class DemoMaterial:
    """Phong-style material with diffuse, specular, reflection and refraction weights."""

    refractive_index: float = 1.0
    albedo: Tuple[float, float, float, float] = (1.0, 0.0, 0.0, 0.0)
    diffuse_color: Vec = field(default_factory=Vec)
    specular_exponent: float = 1.0


class _Hit(NamedTuple):
    distance: float
    point: Vec
    normal: Vec
    material: DemoMaterial


@dataclass
class DemoSphere:
    """A sphere given by centre and radius.

    Hits closer than ``min_distance`` are ignored, which keeps secondary rays
    from hitting the surface they start on.
    """

    center: Vec
    radius: float
    material: DemoMaterial
    min_distance: float = 0.001

    def intersect(self, orig: Vec, direction: Vec) -> Optional[_Hit]:
        """Return the nearest hit along a unit ``direction``, or None."""
        to_center = self.center - orig
        tca = to_center.dot(direction)
        d2 = to_center.dot(to_center) - tca * tca
        r2 = self.radius * self.radius
        if d2 > r2:
            return None
        thc = math.sqrt(r2 - d2)
        near, far = tca - thc, tca + thc
        if near > self.min_distance:
            t = near
        elif far > self.min_distance:
            t = far
        else:
            return None
        point = orig + direction * t
        return _Hit(t, point, (point - self.center).normalized(), self.material)


@dataclass
class DemoScene:
    """Spheres, point lights, the colour seen on a miss and the default field of view."""

    spheres: List[DemoSphere] = field(default_factory=list)
    lights: List[Vec] = field(default_factory=list)
    background: Vec = CLASSIC_BACKGROUND
    fov: float = CLASSIC_FOV

    def intersect(self, orig: Vec, direction: Vec) -> Optional[_Hit]:
        """Return the nearest hit among all spheres, or None."""
        closest: Optional[_Hit] = None
        nearest = _FAR_AWAY
        for sphere in self.spheres:
            hit = sphere.intersect(orig, direction)
            if hit is not None and hit.distance < nearest:
                nearest = hit.distance
                closest = hit
        return closest

    def _lighting(self, hit: _Hit, direction: Vec) -> Tuple[float, float]:
        diffuse = 0.0
        specular = 0.0
        for light in self.lights:
            light_dir = (light - hit.point).normalized()
            blocker = self.intersect(hit.point, light_dir)
            if blocker is not None and (
                (blocker.point - hit.point).norm() < (light - hit.point).norm()
            ):
                continue
            diffuse += max(0.0, light_dir.dot(hit.normal))
            highlight = max(0.0, -reflect(-light_dir, hit.normal).dot(direction))
            specular += highlight ** hit.material.specular_exponent
        return diffuse, specular

    def cast_ray(self, orig: Vec, direction: Vec, depth: int = 0) -> Vec:
        """Return the colour seen along a ray, following reflections and refractions."""
        if depth > MAX_DEPTH:
            return self.background
        hit = self.intersect(orig, direction)
        if hit is None:
            return self.background
        material = hit.material
        reflect_dir = reflect(direction, hit.normal).normalized()
        refract_dir = refract(
            direction, hit.normal, material.refractive_index, 1.0
        ).normalized()
        reflect_color = self.cast_ray(hit.point, reflect_dir, depth + 1)
        refract_color = self.cast_ray(hit.point, refract_dir, depth + 1)
        diffuse, specular = self._lighting(hit, direction)
        albedo = material.albedo
        return (
            material.diffuse_color * (diffuse * albedo[0])
            + _WHITE * (specular * albedo[1])
            + reflect_color * albedo[2]
            + refract_color * albedo[3]
        )


def demo_materials() -> Dict[str, DemoMaterial]:
    """Return the named materials the demo scenes are built from."""
    a = AMBIENT_LIGHTING
    return {
        "ivory": DemoMaterial(1.0, (0.9, 0.5, 0.1, 0.0), Vec(0.4, 0.4, 0.3), 50.0),
        "glass": DemoMaterial(1.5, (0.0, 0.9, 0.1, 0.8), Vec(0.6, 0.7, 0.8), 125.0),
        "red_rubber": DemoMaterial(1.0, (1.4, 0.3, 0.0, 0.0), Vec(0.3, 0.1, 0.1), 10.0),
        "mirror": DemoMaterial(1.0, (0.0, 16.0, 0.8, 0.0), Vec(1.0, 1.0, 1.0), 1425.0),
        "none": DemoMaterial(1.0, (1.0, 1.0, 1.0, 1.0), Vec(1.0, 1.0, 1.0), 1.0),
        "invisible": DemoMaterial(a, (a, a, a, a), Vec(a, a, a), a),
    }


_SPHERE_LAYOUT = (
    (Vec(-3.0, 0.0, -16.0), 2.0),
    (Vec(-1.0, -1.5, -12.0), 2.0),
    (Vec(1.5, -0.5, -18.0), 3.0),
    (Vec(7.0, 5.0, -18.0), 4.0),
)
_LIGHTS = (Vec(-20.0, 20.0, 20.0), Vec(30.0, 50.0, -25.0), Vec(30.0, 20.0, 30.0))


def _build(names: Sequence[str], min_distance: float, background: Vec, fov: float) -> DemoScene:
    materials = demo_materials()
    spheres = [
        DemoSphere(center, radius, materials[name], min_distance)
        for (center, radius), name in zip(_SPHERE_LAYOUT, names)
    ]
    return DemoScene(spheres, list(_LIGHTS), background, fov)


def classic_scene() -> DemoScene:
    """Ivory, glass, red rubber and mirror spheres over a sky-blue background."""
    return _build(
        ("ivory", "glass", "red_rubber", "mirror"), 0.001, CLASSIC_BACKGROUND, CLASSIC_FOV
    )


def normed_scene() -> DemoScene:
    """Three invisible spheres and a mirror under grey ambient lighting."""
    return _build(
        ("invisible", "invisible", "invisible", "mirror"), 0.0, NORMED_BACKGROUND, NORMED_FOV
    )


def render(
    scene: DemoScene, width: int, height: int, fov: Optional[float] = None
) -> List[Vec]:
    """Render from the origin looking down -z; return colours in row-major order."""
    if fov is None:
        fov = scene.fov
    depth = -height / (2.0 * math.tan(fov / 2.0))
    origin = Vec()
    return [
        scene.cast_ray(
            origin,
            Vec((i + 0.5) - width / 2.0, -(j + 0.5) + height / 2.0, depth).normalized(),
            0,
        )
        for j in range(height)
        for i in range(width)
    ]


def _positive(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return value


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render a demo scene and write it as a binary PPM file."""
    parser = argparse.ArgumentParser(description="Render a built-in demo scene.")
    parser.add_argument("--scene", choices=("classic", "normed"), default="classic")
    parser.add_argument("--width", type=_positive, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=_positive, default=DEFAULT_HEIGHT)
    parser.add_argument("--output", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)
    scene = classic_scene() if args.scene == "classic" else normed_scene()
    framebuffer = render(scene, args.width, args.height)
    write_ppm(args.output, encode_ppm(framebuffer, args.width, args.height))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())