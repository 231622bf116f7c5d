"""Scene parameters and the container that holds a parsed scene."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, List, Optional, Union

from minirt.errors import SceneError
from minirt.shapes import Cylinder, Material, Plane, Sphere
from minirt.vector import Vec


class ObjectType(IntEnum):
    """Kinds of entries a scene file can declare."""

    AMBIENT = 65
    CAMERA = 66
    LIGHT = 67
    SPHERE = 68
    PLANE = 69
    CYLINDER = 70
    CONE = 71


@dataclass
class Camera:
    """The point of view the scene is rendered from."""

    type: ClassVar[ObjectType] = ObjectType.CAMERA

    view_point: Vec
    orientation: Vec
    fov: float
    color: int = 0xFFFFFF
    material: Material = field(default_factory=Material)


@dataclass
class Light:
    """A point light source."""

    type: ClassVar[ObjectType] = ObjectType.LIGHT

    position: Vec
    brightness: float
    color: int = 0
    material: Material = field(default_factory=Material)


@dataclass
class Ambient:
    """The ambient lighting of the scene."""

    type: ClassVar[ObjectType] = ObjectType.AMBIENT

    ratio: float
    color: int = 0
    material: Material = field(default_factory=Material)


Shape = Union[Sphere, Plane, Cylinder]
SceneItem = Union[Ambient, Camera, Light, Shape]

_SLOTS = {Ambient: "ambient", Camera: "camera", Light: "light"}
_NAMES = {Ambient: "ambient lighting", Camera: "camera", Light: "light"}


@dataclass
class Scene:
    """The unique scene parameters and the list of shapes to render."""

    ambient: Optional[Ambient] = None
    camera: Optional[Camera] = None
    light: Optional[Light] = None
    objects: List[Shape] = field(default_factory=list)

    def add(self, item: SceneItem) -> None:
        """Place ``item`` in the scene.

        Shapes are appended in order. Scene parameters may each be set once;
        a second one raises SceneError.
        """
        if isinstance(item, (Sphere, Plane, Cylinder)):
            self.objects.append(item)
            return
        slot = _SLOTS.get(type(item))
        if slot is None:
            raise TypeError(f"cannot add {type(item).__name__} to a scene")
        if getattr(self, slot) is not None:
            raise SceneError(f"Duplicate {_NAMES[type(item)]}")
        setattr(self, slot, item)

    def is_complete(self) -> bool:
        """Return True when ambient lighting, a camera and a light are set."""
        return (
            self.light is not None
            and self.camera is not None
            and self.ambient is not None
        )