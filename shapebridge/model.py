"""
Canonical in-memory data model for shapebridge.

Two sides meet here:
- Interchange geometries (GeoJSON): plain dicts as produced by a JSON codec,
  coordinates in [longitude, latitude] order.
- Map shapes: pins, polylines and polygons grouped into layers on a map,
  points stored as (latitude, longitude).

The conversion is intentionally lossy: holes, z values and property bags have
no place in the shape model and are discarded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Literal, NamedTuple, Optional, Union


GeometryType = Literal[
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
]

Geometry = Dict[str, Any]
Feature = Dict[str, Any]
FeatureCollection = Dict[str, Any]
Position = List[float]
"""Position: [lon, lat] (any trailing components such as elevation are ignored)."""


class ShapeKind(str, Enum):
    PIN = "Pin"
    POLYLINE = "Polyline"
    POLYGON = "Polygon"


class LatLong(NamedTuple):
    latitude: float
    longitude: float


@dataclass
class Shape:
    kind: ShapeKind
    points: List[LatLong] = field(default_factory=list)


@dataclass
class Layer:
    """
    Ordered, mutable collection of shapes.
    """

    shapes: List[Shape] = field(default_factory=list)

    def add_shape(self, shape: Shape) -> None:
        self.shapes.append(shape)

    def shape_count(self) -> int:
        return len(self.shapes)

    def shape_at(self, index: int) -> Shape:
        return self.shapes[index]


@dataclass
class ShapeMap:
    """
    Minimal map surface: owns an ordered list of layers.

    Real map widgets can be used instead as long as they expose the same
    add_layer/layer_count/layer_at methods (see shapebridge.protocols).
    """

    layers: List[Layer] = field(default_factory=list)

    def add_layer(self, layer: Layer) -> None:
        self.layers.append(layer)

    def layer_count(self) -> int:
        return len(self.layers)

    def layer_at(self, index: int) -> Layer:
        return self.layers[index]


# Hook records handed to caller-supplied observation callbacks.


@dataclass(frozen=True)
class ShapeCreated:
    geometry: Geometry
    shape: Shape


@dataclass(frozen=True)
class LayerCreated:
    layer: Layer
    feature: Feature
    # What geometry_to_shapes returned for the feature (see collection_results).
    returned: Union[Shape, List[Shape], None] = None


@dataclass(frozen=True)
class GeometryCreated:
    geometry: Geometry
    shape: Shape


def geometry_type_of(geometry: Optional[Geometry]) -> Optional[str]:
    if not isinstance(geometry, dict):
        return None
    return geometry.get("type")
