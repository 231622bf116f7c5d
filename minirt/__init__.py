"""Ray tracer for .rt scene files, with a built-in demonstration scene and PPM output."""

__version__ = "0.1.0"