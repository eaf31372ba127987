"""Bezier patches, mesh deformations, a shader program cache and small geometry utilities."""

__version__ = "0.1.0"

__all__ = [
    "app",
    "bernstein",
    "bezier",
    "default_program",
    "deformations",
    "geometry",
    "scene",
]