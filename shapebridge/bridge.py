"""
MapBridge: GeoJSON import/export bound to a single map surface.
"""

from __future__ import annotations

from typing import List, Optional

from shapebridge.core.binder import LayerHook, ShapeHook, bind_feature_collection
from shapebridge.core.config import ConversionOptions
from shapebridge.core.document import build_document
from shapebridge.core.shape_to_geometry import GeometrySink
from shapebridge.model import FeatureCollection
from shapebridge.protocols import MapSurface, ShapeLayer


class MapBridge:
    """Converts between GeoJSON documents and the layers of one map."""

    def __init__(self, map_surface: MapSurface, options: Optional[ConversionOptions] = None):
        self.map = map_surface
        self.options = options

    def add_geojson(
        self,
        feature_collection: Optional[FeatureCollection],
        on_layer_created: Optional[LayerHook] = None,
        on_shape_created: Optional[ShapeHook] = None,
    ) -> List[ShapeLayer]:
        """Render each feature as its own layer on the map; returns the new layers."""
        return bind_feature_collection(
            self.map,
            feature_collection,
            on_layer_created,
            on_shape_created,
            options=self.options,
        )

    def get_geojson(self, on_geometry_created: Optional[GeometrySink] = None) -> FeatureCollection:
        """Build a FeatureCollection from every layer on the map."""
        return build_document(self.map, on_geometry_created, options=self.options)
