"""
Diagnostics helpers.

These summarise both sides of a conversion so CLI output and JSONL traces can
be compared at a glance.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, List, Optional, Union

from shapebridge.model import FeatureCollection, Geometry, Shape, ShapeKind, geometry_type_of
from shapebridge.protocols import MapSurface


def map_inventory(map_surface: MapSurface) -> Dict[str, Any]:
    kinds: Counter = Counter()
    empty_layers = 0
    for index in range(map_surface.layer_count()):
        layer = map_surface.layer_at(index)
        if layer.shape_count() == 0:
            empty_layers += 1
        for j in range(layer.shape_count()):
            kinds[ShapeKind(layer.shape_at(j).kind).value] += 1
    return {
        "layer_count": map_surface.layer_count(),
        "empty_layer_count": empty_layers,
        "shape_count": sum(kinds.values()),
        "pin_count": kinds[ShapeKind.PIN.value],
        "polyline_count": kinds[ShapeKind.POLYLINE.value],
        "polygon_count": kinds[ShapeKind.POLYGON.value],
    }


def returned_shape_count(returned: Union[Shape, List[Shape], None]) -> int:
    """Number of shapes in a geometry_to_shapes return value."""
    if returned is None:
        return 0
    if isinstance(returned, list):
        return len(returned)
    return 1


def _walk_geometry_types(geometry: Optional[Geometry], out: List[str]) -> None:
    geom_type = geometry_type_of(geometry)
    if geom_type is None:
        return
    out.append(geom_type)
    if geom_type == "GeometryCollection":
        for member in geometry.get("geometries") or []:
            _walk_geometry_types(member, out)


def document_inventory(feature_collection: Optional[FeatureCollection]) -> Dict[str, Any]:
    """
    Count features and geometry types (nested collection members included).
    """
    features = (feature_collection or {}).get("features") or []
    types: List[str] = []
    null_geometries = 0
    for feature in features:
        geometry = feature.get("geometry")
        if geometry is None:
            null_geometries += 1
            continue
        _walk_geometry_types(geometry, types)
    return {
        "feature_count": len(features),
        "null_geometry_count": null_geometries,
        "geometry_types": dict(sorted(Counter(types).items())),
    }
