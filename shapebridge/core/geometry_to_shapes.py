"""
Import direction: GeoJSON geometry -> map shapes.

Dispatch is on geometry["type"]:

    Point               -> one Pin
    MultiPoint          -> one Pin per position
    LineString          -> one Polyline
    MultiLineString     -> one Polyline per member line
    Polygon             -> one Polygon from the outer ring (holes dropped)
    MultiPolygon        -> one Polygon per member's outer ring
    GeometryCollection  -> recurse over members

Singular kinds fire the callback once, after the shape is built. Plural kinds
fire it once per shape as each one is generated, always with the parent
geometry. Unknown kinds and None return None without touching the callback.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence, Union

from shapebridge.core.config import DEFAULT_OPTIONS, ConversionOptions
from shapebridge.core.coords import rotate_ring, to_lat_long
from shapebridge.model import Geometry, Shape, ShapeKind

ShapeSink = Callable[[Geometry, Shape], None]
ShapeResult = Union[Shape, List[Shape], None]


def _polyline(line: Sequence[Sequence[float]]) -> Shape:
    return Shape(ShapeKind.POLYLINE, [to_lat_long(p) for p in line])


def _polygon(rings: Sequence[Sequence[Sequence[float]]]) -> Optional[Shape]:
    if not rings:
        return None
    outer = [to_lat_long(p) for p in rings[0]]
    return Shape(ShapeKind.POLYGON, rotate_ring(outer))


def _point_shape(geometry: Geometry) -> Optional[Shape]:
    coords = geometry.get("coordinates")
    if not coords:
        return None
    return Shape(ShapeKind.PIN, [to_lat_long(coords)])


def _line_string_shape(geometry: Geometry) -> Shape:
    return _polyline(geometry.get("coordinates") or [])


def _polygon_shape(geometry: Geometry) -> Optional[Shape]:
    return _polygon(geometry.get("coordinates") or [])


def _multi_point_shapes(geometry: Geometry, sink: Optional[ShapeSink]) -> List[Shape]:
    shapes: List[Shape] = []
    for position in geometry.get("coordinates") or []:
        shape = Shape(ShapeKind.PIN, [to_lat_long(position)])
        if sink is not None:
            sink(geometry, shape)
        shapes.append(shape)
    return shapes


def _multi_line_string_shapes(geometry: Geometry, sink: Optional[ShapeSink]) -> List[Shape]:
    shapes: List[Shape] = []
    for line in geometry.get("coordinates") or []:
        shape = _polyline(line)
        if sink is not None:
            sink(geometry, shape)
        shapes.append(shape)
    return shapes


def _multi_polygon_shapes(geometry: Geometry, sink: Optional[ShapeSink]) -> List[Shape]:
    shapes: List[Shape] = []
    for rings in geometry.get("coordinates") or []:
        shape = _polygon(rings)
        if shape is None:
            continue
        if sink is not None:
            sink(geometry, shape)
        shapes.append(shape)
    return shapes


_SINGULAR: Dict[str, Callable[[Geometry], Optional[Shape]]] = {
    "Point": _point_shape,
    "LineString": _line_string_shape,
    "Polygon": _polygon_shape,
}

_PLURAL: Dict[str, Callable[[Geometry, Optional[ShapeSink]], List[Shape]]] = {
    "MultiPoint": _multi_point_shapes,
    "MultiLineString": _multi_line_string_shapes,
    "MultiPolygon": _multi_polygon_shapes,
}


def _collection_shapes(
    geometry: Geometry,
    sink: Optional[ShapeSink],
    options: ConversionOptions,
) -> ShapeResult:
    members = geometry.get("geometries") or []

    if options.collection_results == "all":
        collected: List[Shape] = []
        for member in members:
            shapes = geometry_to_shapes(member, sink, options=options)
            if isinstance(shapes, list):
                collected.extend(shapes)
            elif shapes is not None:
                collected.append(shapes)
        return collected

    # Only the last member's result is returned; earlier ones reach the caller
    # through the sink alone.
    result: ShapeResult = None
    for member in members:
        result = geometry_to_shapes(member, sink, options=options)
    return result


def geometry_to_shapes(
    geometry: Optional[Geometry],
    on_shape_created: Optional[ShapeSink] = None,
    *,
    options: Optional[ConversionOptions] = None,
) -> ShapeResult:
    """
    Create map shapes from a GeoJSON geometry.

    Args:
        geometry: GeoJSON geometry dict (or None)
        on_shape_created: Optional callable(geometry, shape) fired for every
            shape built, before it is returned
        options: Conversion options (defaults to DEFAULT_OPTIONS)

    Returns:
        A Shape for Point/LineString/Polygon, a list of Shapes for the Multi*
        kinds, the GeometryCollection result per options.collection_results,
        or None for missing/unknown geometries.
    """
    if not isinstance(geometry, dict):
        return None
    options = options or DEFAULT_OPTIONS
    geom_type = geometry.get("type")

    if geom_type in _SINGULAR:
        shape = _SINGULAR[geom_type](geometry)
        if shape is not None and on_shape_created is not None:
            on_shape_created(geometry, shape)
        return shape

    if geom_type in _PLURAL:
        return _PLURAL[geom_type](geometry, on_shape_created)

    if geom_type == "GeometryCollection":
        return _collection_shapes(geometry, on_shape_created, options)

    return None
