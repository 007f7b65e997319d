"""Polygonal mesh import from CSV cell files and export to AVS UCD ASCII."""

__version__ = "1.0.0"

__all__ = ["cli", "mesh", "ucd"]