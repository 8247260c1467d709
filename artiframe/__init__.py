"""Scene model for a small 2D graphics editor, with colour, triangulation and tessellation helpers."""

__version__ = "0.1.0"