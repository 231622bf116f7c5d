"""Reading ``.rt`` scene descriptions into a Scene."""

from __future__ import annotations

import os
import re
from typing import Callable, Dict, Iterable, Iterator, Mapping, Optional, Sequence, Tuple

from minirt.errors import (
    EnvironError,
    FilenameError,
    FilePermissionError,
    SceneError,
    UsageError,
)
from minirt.scene import Ambient, Camera, Light, ObjectType, Scene, SceneItem
from minirt.shapes import Cylinder, Plane, Sphere
from minirt.vector import Vec

EXTENSION = ".rt"

VECTOR_LIMITS = (-1.0, 1.0)
RATIO_LIMITS = (0.0, 1.0)
FOV_LIMITS = (0.0, 180.0)

IDENTIFIERS: Dict[str, ObjectType] = {
    "A": ObjectType.AMBIENT,
    "C": ObjectType.CAMERA,
    "L": ObjectType.LIGHT,
    "sp": ObjectType.SPHERE,
    "pl": ObjectType.PLANE,
    "cy": ObjectType.CYLINDER,
}

Limits = Optional[Tuple[float, float]]

_NUMBER = re.compile(r"\s*([+-]?)(\d*)(.*)", re.DOTALL)
_DECIMALS = re.compile(r"\.(\d*)")
_CHANNEL = re.compile(r"\d+")


def parse_float(text: Optional[str]) -> float:
    """Parse a decimal number such as ``-12.5``.

    Leading whitespace and a sign are accepted. After the integer part only a
    fractional part or whitespace may follow; anything after the fractional
    digits is ignored. Raises SceneError for a missing or malformed number.
    """
    if not text:
        raise SceneError("Missing number")
    match = _NUMBER.match(text)
    assert match is not None  # the pattern matches any string
    sign, digits, rest = match.groups()
    decimals = ""
    if rest:
        fraction = _DECIMALS.match(rest)
        if fraction is not None:
            decimals = fraction.group(1)
        elif not rest[0].isspace():
            raise SceneError(f"Invalid number: {text!r}")
    value = float(f"{digits or '0'}.{decimals or '0'}")
    return -value if sign == "-" else value


def _within(value: float, limits: Limits, text: str) -> float:
    if limits is not None:
        low, high = limits
        if not low <= value <= high:
            raise SceneError(f"Value out of range [{low}, {high}]: {text!r}")
    return value


def parse_color(text: Optional[str]) -> int:
    """Parse an ``R,G,B`` triple into a packed ``0xRRGGBB`` integer.

    Each channel must start with a digit; its leading digits are read and
    must lie in 0..255. Raises SceneError otherwise.
    """
    if not text:
        raise SceneError("Missing colour")
    channels = text.split(",")
    if len(channels) != 3:
        raise SceneError(f"Invalid colour: {text!r}")
    color = 0
    for shift, channel in zip((16, 8, 0), channels):
        match = _CHANNEL.match(channel)
        if match is None:
            raise SceneError(f"Invalid colour: {text!r}")
        value = int(match.group())
        if value > 255:
            raise SceneError(f"Colour channel out of range: {text!r}")
        color |= value << shift
    return color


def parse_vector(text: Optional[str], limits: Limits = None) -> Vec:
    """Parse an ``x,y,z`` triple into a Vec, each component within ``limits``.

    Empty components are skipped and components past the third are ignored.
    Raises SceneError for fewer than three valid components.
    """
    if not text:
        raise SceneError("Missing vector")
    components = [part for part in text.split(",") if part]
    if len(components) < 3:
        raise SceneError(f"Invalid vector: {text!r}")
    x, y, z = (_within(parse_float(part), limits, text) for part in components[:3])
    return Vec(x, y, z)


class _Fields:
    """The whitespace-separated fields of one scene line, read in order."""

    def __init__(self, fields: Sequence[str]) -> None:
        self._fields: Iterator[str] = iter(fields)

    def _next(self, what: str) -> str:
        try:
            return next(self._fields)
        except StopIteration:
            raise SceneError(f"Missing {what}") from None

    def number(self, what: str, limits: Limits = None) -> float:
        text = self._next(what)
        return _within(parse_float(text), limits, text)

    def vector(self, what: str, limits: Limits = None) -> Vec:
        return parse_vector(self._next(what), limits)

    def color(self) -> int:
        return parse_color(self._next("colour"))

    def finish(self, item: SceneItem) -> SceneItem:
        extra = list(self._fields)
        if extra:
            raise SceneError(f"Unexpected trailing data: {' '.join(extra)!r}")
        return item


def _sphere(fields: _Fields) -> SceneItem:
    center = fields.vector("sphere centre")
    diameter = fields.number("sphere diameter")
    return fields.finish(Sphere(center=center, diameter=diameter, color=fields.color()))


def _plane(fields: _Fields) -> SceneItem:
    center = fields.vector("plane point")
    axis = fields.vector("plane normal", VECTOR_LIMITS)
    return fields.finish(Plane(center=center, normalized_axis=axis, color=fields.color()))


def _cylinder(fields: _Fields) -> SceneItem:
    center = fields.vector("cylinder centre")
    axis = fields.vector("cylinder axis", VECTOR_LIMITS)
    diameter = fields.number("cylinder diameter")
    height = fields.number("cylinder height")
    return fields.finish(
        Cylinder(
            center=center,
            normalized_axis=axis,
            diameter=diameter,
            height=height,
            color=fields.color(),
        )
    )


def _camera(fields: _Fields) -> SceneItem:
    view_point = fields.vector("camera position")
    orientation = fields.vector("camera orientation")
    fov = fields.number("field of view", FOV_LIMITS)
    return fields.finish(Camera(view_point=view_point, orientation=orientation, fov=fov))


def _ambient(fields: _Fields) -> SceneItem:
    ratio = fields.number("ambient ratio", RATIO_LIMITS)
    return fields.finish(Ambient(ratio=ratio, color=fields.color()))


def _light(fields: _Fields) -> SceneItem:
    position = fields.vector("light position")
    brightness = fields.number("light brightness", RATIO_LIMITS)
    return fields.finish(Light(position=position, brightness=brightness, color=fields.color()))


_BUILDERS: Dict[ObjectType, Callable[[_Fields], SceneItem]] = {
    ObjectType.AMBIENT: _ambient,
    ObjectType.CAMERA: _camera,
    ObjectType.LIGHT: _light,
    ObjectType.SPHERE: _sphere,
    ObjectType.PLANE: _plane,
    ObjectType.CYLINDER: _cylinder,
}


def parse_line(line: str) -> SceneItem:
    """Turn one line of a scene file into a scene parameter or a shape."""
    identifier, *rest = line.split() or [""]
    if not identifier:
        raise SceneError("Empty line")
    kind = IDENTIFIERS.get(identifier)
    if kind is None:
        raise SceneError(f"Unknown identifier: {identifier!r}")
    return _BUILDERS[kind](_Fields(rest))


def parse_scene(lines: Iterable[str]) -> Scene:
    """Build a Scene from the lines of a scene file.

    Blank lines are skipped. Raises SceneError on an invalid line, on a
    repeated scene parameter, or when ambient lighting, camera or light is
    missing.
    """
    scene = Scene()
    for line in lines:
        if not line.strip():
            continue
        scene.add(parse_line(line))
    if not scene.is_complete():
        raise SceneError("Scene needs ambient lighting, a camera and a light")
    return scene


def check_arguments(argv: Sequence[str], environ: Optional[Mapping[str, str]]) -> str:
    """Validate the command-line arguments (program name excluded).

    Returns the scene file name. Raises EnvironError for an empty
    environment, UsageError unless exactly one argument is given, and
    FilenameError unless it ends in ``.rt``.
    """
    if not environ:
        raise EnvironError()
    if len(argv) != 1:
        raise UsageError()
    filename = argv[0]
    if not filename.endswith(EXTENSION):
        raise FilenameError()
    return filename


def load_scene(path: "str | os.PathLike[str]") -> Scene:
    """Read and parse the scene file at ``path``."""
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.readlines()
    except UnicodeDecodeError as exc:
        raise SceneError("Scene file is not valid text") from exc
    except OSError as exc:
        raise FilePermissionError() from exc
    return parse_scene(lines)