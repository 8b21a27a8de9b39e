"""
Export direction: map shape -> GeoJSON geometry.

    Pin      -> Point [lon, lat]
    Polygon  -> Polygon with a single ring (rotated like the import side)
    Polyline -> LineString

Every geometry carries an empty "properties" dict. LineString coordinates are
left empty unless ConversionOptions.populate_line_coordinates is set.
"""

from __future__ import annotations

from typing import Callable, Optional

from shapebridge.core.config import DEFAULT_OPTIONS, ConversionOptions
from shapebridge.core.coords import rotate_ring, to_position
from shapebridge.model import Geometry, GeometryCreated, ShapeKind
from shapebridge.protocols import MapShape

GeometrySink = Callable[[GeometryCreated], None]


def shape_to_geometry(
    shape: Optional[MapShape],
    on_geometry_created: Optional[GeometrySink] = None,
    *,
    options: Optional[ConversionOptions] = None,
) -> Optional[Geometry]:
    """
    Create a GeoJSON geometry dict from a map shape.

    The callback receives a GeometryCreated record exactly once per non-null
    geometry, before the geometry is returned.
    """
    if shape is None:
        return None
    options = options or DEFAULT_OPTIONS

    geometry: Optional[Geometry] = None
    points = list(shape.points)

    if shape.kind == ShapeKind.POLYGON:
        ring = [to_position(p) for p in rotate_ring(points)]
        geometry = {"type": "Polygon", "coordinates": [ring], "properties": {}}
    elif shape.kind == ShapeKind.PIN:
        coords = to_position(points[0]) if points else []
        geometry = {"type": "Point", "coordinates": coords, "properties": {}}
    elif shape.kind == ShapeKind.POLYLINE:
        geometry = {"type": "LineString", "coordinates": [], "properties": {}}
        if options.populate_line_coordinates:
            geometry["coordinates"] = [to_position(p) for p in points]

    if geometry is not None and on_geometry_created is not None:
        on_geometry_created(GeometryCreated(geometry=geometry, shape=shape))

    return geometry
