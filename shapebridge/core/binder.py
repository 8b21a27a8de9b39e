"""
Bind a GeoJSON FeatureCollection onto a map: one layer per feature.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from shapebridge.core.config import ConversionOptions
from shapebridge.core.geometry_to_shapes import ShapeResult, geometry_to_shapes
from shapebridge.model import (
    Feature,
    FeatureCollection,
    Geometry,
    Layer,
    LayerCreated,
    ShapeCreated,
)
from shapebridge.protocols import MapShape, MapSurface, ShapeLayer

# Set up logger for debug output
logger = logging.getLogger(__name__)

LayerHook = Callable[[LayerCreated], None]
ShapeHook = Callable[[ShapeCreated], None]


def add_feature_to_layer(
    feature: Feature,
    layer: ShapeLayer,
    on_shape_created: Optional[ShapeHook] = None,
    *,
    options: Optional[ConversionOptions] = None,
) -> ShapeResult:
    """
    Convert a feature's geometry and append every resulting shape to `layer`.

    The hook sees each shape before it is added to the layer. Returns whatever
    geometry_to_shapes returned; for a GeometryCollection that depends on
    options.collection_results, while the layer always receives every shape.
    """

    def shape_created(geometry: Geometry, shape: MapShape) -> None:
        if on_shape_created is not None:
            on_shape_created(ShapeCreated(geometry=geometry, shape=shape))
        layer.add_shape(shape)

    return geometry_to_shapes(feature.get("geometry"), shape_created, options=options)


def bind_feature_collection(
    map_surface: MapSurface,
    feature_collection: Optional[FeatureCollection],
    on_layer_created: Optional[LayerHook] = None,
    on_shape_created: Optional[ShapeHook] = None,
    *,
    options: Optional[ConversionOptions] = None,
    layer_factory: Callable[[], ShapeLayer] = Layer,
) -> List[ShapeLayer]:
    """
    Add the features of a FeatureCollection to a map.

    Each feature is rendered into its own layer, regardless of how many shapes
    its geometry expands into.

    Args:
        map_surface: Map receiving the layers (add_layer/layer_count/layer_at)
        feature_collection: Deserialized GeoJSON FeatureCollection (or None)
        on_layer_created: Called with LayerCreated once a layer holds all of
            its shapes, before the layer is added to the map
        on_shape_created: Called with ShapeCreated for every shape, before
            the shape is added to its layer
        options: Conversion options passed through to geometry_to_shapes
        layer_factory: Builds an empty layer (defaults to model.Layer)

    Returns:
        The created layers in feature order
    """
    layers: List[ShapeLayer] = []
    if feature_collection is None:
        return layers

    for feature in feature_collection.get("features") or []:
        layer = layer_factory()
        returned = add_feature_to_layer(feature, layer, on_shape_created, options=options)

        if on_layer_created is not None:
            on_layer_created(LayerCreated(layer=layer, feature=feature, returned=returned))

        map_surface.add_layer(layer)
        layers.append(layer)

    if logger.isEnabledFor(logging.DEBUG):
        shape_total = sum(layer.shape_count() for layer in layers)
        logger.debug(f"Bound {len(layers)} feature(s) as layers holding {shape_total} shape(s)")
    return layers
