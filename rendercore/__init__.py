"""Geometry, texture, text, camera and picking helpers for real-time 3D rendering."""

__version__ = "0.1.0"

__all__ = [
    "objloader",
    "vboindexer",
    "tangentspace",
    "texture",
    "text2d",
    "shader",
    "camera",
    "picking",
    "picking_colors",
]