"""Command-line entry point: render a ``.rt`` scene to a PPM image."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional, Sequence, Tuple

from minirt.errors import MiniRTError
from minirt.image import encode_packed_ppm, write_ppm
from minirt.parser import check_arguments, load_scene
from minirt.raytrace import trace_rays

DEFAULT_WIDTH = 1024
DEFAULT_HEIGHT = 768
WIDTH_VARIABLE = "MINIRT_WIDTH"
HEIGHT_VARIABLE = "MINIRT_HEIGHT"


def _dimension(name: str, default: int) -> int:
    text = os.environ.get(name)
    if text is None:
        return default
    try:
        value = int(text)
    except ValueError:
        raise MiniRTError(f"Invalid screen size in {name}") from None
    if value <= 0:
        raise MiniRTError(f"Invalid screen size in {name}")
    return value


def _screen_size() -> Tuple[int, int]:
    return (
        _dimension(WIDTH_VARIABLE, DEFAULT_WIDTH),
        _dimension(HEIGHT_VARIABLE, DEFAULT_HEIGHT),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render the scene named on the command line next to it as ``.ppm``.

    Returns 0 on success; on error prints the message to stderr and
    returns 1.
    """
    if argv is None:
        argv = sys.argv[1:]
    try:
        filename = check_arguments(list(argv), os.environ)
        scene = load_scene(filename)
        width, height = _screen_size()
        pixels = trace_rays(scene, width, height)
        output = Path(filename).with_suffix(".ppm")
        try:
            write_ppm(output, encode_packed_ppm(pixels, width, height))
        except OSError as exc:
            raise MiniRTError(f"Cannot write {output}: {exc.strerror}") from exc
    except MiniRTError as error:
        sys.stderr.write(str(error))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())