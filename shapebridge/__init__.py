"""shapebridge - GeoJSON ↔ map shape conversion."""

__version__ = "0.1.0"
__description__ = "Convert GeoJSON features to map layers of pins, polylines and polygons, and back"

from shapebridge.cli import app, main

__all__ = ["app", "main", "__version__"]
