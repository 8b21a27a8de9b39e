"""
Build a GeoJSON FeatureCollection from the layers currently on a map.

One feature per non-empty layer:
- 1 shape  -> the shape's geometry
- 2+ shapes -> a GeometryCollection of the shapes' geometries, in shape order
Layers whose shapes produce no geometry are skipped.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from shapebridge.core.config import ConversionOptions
from shapebridge.core.shape_to_geometry import GeometrySink, shape_to_geometry
from shapebridge.model import FeatureCollection, Geometry
from shapebridge.protocols import MapSurface, ShapeLayer

# Set up logger for debug output
logger = logging.getLogger(__name__)


def _layer_geometry(
    layer: ShapeLayer,
    on_geometry_created: Optional[GeometrySink],
    options: Optional[ConversionOptions],
) -> Optional[Geometry]:
    count = layer.shape_count()
    if count == 0:
        return None

    if count == 1:
        return shape_to_geometry(layer.shape_at(0), on_geometry_created, options=options)

    collection: Geometry = {"type": "GeometryCollection", "geometries": [], "properties": {}}
    for index in range(count):
        geom = shape_to_geometry(layer.shape_at(index), on_geometry_created, options=options)
        if geom is not None:
            collection["geometries"].append(geom)
    return collection


def build_document(
    map_surface: MapSurface,
    on_geometry_created: Optional[GeometrySink] = None,
    *,
    options: Optional[ConversionOptions] = None,
) -> FeatureCollection:
    """
    Get a GeoJSON FeatureCollection based on the layers in the map.

    Args:
        map_surface: Map to read (layer_count/layer_at)
        on_geometry_created: Called with GeometryCreated for each geometry
        options: Conversion options passed through to shape_to_geometry

    Returns:
        FeatureCollection dict (not serialized)
    """
    features: List[Dict[str, Any]] = []

    for index in range(map_surface.layer_count()):
        layer = map_surface.layer_at(index)
        geometry = _layer_geometry(layer, on_geometry_created, options)
        if geometry is None:
            continue
        features.append({"type": "Feature", "geometry": geometry, "properties": {}})

    logger.debug(
        f"Exported {len(features)} feature(s) from {map_surface.layer_count()} layer(s)"
    )
    return {"type": "FeatureCollection", "features": features}
