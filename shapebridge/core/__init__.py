"""Core conversion modules for shapebridge."""

__all__ = [
    "coords",
    "geometry_to_shapes",
    "shape_to_geometry",
    "binder",
    "document",
    "config",
    "trace",
    "diagnostics",
]
