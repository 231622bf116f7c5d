"""Binary PPM (P6) encoding of rendered frames."""

from __future__ import annotations

import os
from typing import Iterable, Sequence, Union

from minirt.vector import Vec


def _header(width: int, height: int) -> bytes:
    return f"P6\n{width} {height}\n255\n".encode("ascii")


def _check_size(count: int, width: int, height: int) -> None:
    if width < 0 or height < 0 or count != width * height:
        raise ValueError(
            f"expected {width * height} pixels for {width}x{height}, got {count}"
        )


def encode_ppm(framebuffer: Sequence[Vec], width: int, height: int) -> bytes:
    """Encode floating-point colours as a P6 image.

    A colour brighter than 1 is scaled down by its largest component.
    """
    _check_size(len(framebuffer), width, height)
    data = bytearray(_header(width, height))
    for color in framebuffer:
        peak = max(1.0, color.x, color.y, color.z)
        data.extend(max(0, min(255, int(255 * c / peak))) for c in color)
    return bytes(data)


def encode_packed_ppm(pixels: Sequence[int], width: int, height: int) -> bytes:
    """Encode packed ``0xRRGGBB`` pixels as a P6 image."""
    _check_size(len(pixels), width, height)
    data = bytearray(_header(width, height))
    for pixel in pixels:
        data.extend(((pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF))
    return bytes(data)


def write_ppm(path: Union[str, "os.PathLike[str]"], data: Iterable[int]) -> None:
    """Write encoded image bytes to ``path``."""
    with open(path, "wb") as handle:
        handle.write(bytes(data))