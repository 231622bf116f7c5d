"""Human-readable dumps of vectors, scene entries and whole scenes."""

from __future__ import annotations

from typing import Optional

from minirt.scene import Ambient, Camera, Light, ObjectType, Scene, SceneItem
from minirt.shapes import Cylinder, Plane, Sphere
from minirt.vector import Vec


def format_vec(label: str, vector: Vec) -> str:
    """Return a one-line description of ``vector``."""
    return f"{label}:\t{vector.x:.2f}, {vector.y:.2f}, {vector.z:.2f})\n"


def format_object(item: SceneItem) -> str:
    """Return a description of a scene parameter or shape."""
    if isinstance(item, Ambient):
        return f"[AMBIENT]:\nlight_ratio: {item.ratio:.2f}\n"
    if isinstance(item, Camera):
        return (
            f"[CAMERA]:\nfov:     {item.fov:.2f}\n"
            + format_vec("view_point", item.view_point)
            + format_vec("orientation", item.orientation)
        )
    if isinstance(item, Light):
        return f"[LIGHT]:\nbrightness: {item.brightness:.2f}\n" + format_vec(
            "position", item.position
        )
    if isinstance(item, Sphere):
        return f"[SPHERE]:\ndiameter: {item.diameter:.2f}\n"
    if isinstance(item, Cylinder):
        return (
            f"[CYLINDER]:\ndiameter: {item.diameter:.2f}\n"
            f"height:  {item.height:.2f}\n"
        )
    if isinstance(item, Plane):
        return f"[UNKNOWN OBJECT TYPE {chr(ObjectType.PLANE)}]\n"
    raise TypeError(f"cannot describe {type(item).__name__}")


def format_scene(scene: Optional[Scene]) -> str:
    """Return the camera, light, ambient lighting and then every shape."""
    if scene is None:
        return ""
    parameters = (scene.camera, scene.light, scene.ambient)
    parts = [format_object(item) for item in parameters if item is not None]
    parts.extend(format_object(shape) for shape in scene.objects)
    parts.append("\n")
    return "".join(parts)