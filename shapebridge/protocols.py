"""Protocol definitions for the map collaborators.

The conversion functions only need a handful of methods from the map surface,
its layers and its shapes. Any object providing them can be passed in place of
shapebridge.model.ShapeMap / Layer / Shape.
"""

from typing import Protocol, Sequence

from shapebridge.model import LatLong, ShapeKind


class MapShape(Protocol):
    """Protocol for a renderable shape."""

    @property
    def kind(self) -> ShapeKind:
        """Pin, Polyline or Polygon."""
        ...

    @property
    def points(self) -> Sequence[LatLong]:
        """Ordered (lat, lon) points."""
        ...


class ShapeLayer(Protocol):
    """Protocol for a layer holding shapes."""

    def add_shape(self, shape: MapShape) -> None:
        """Append a shape."""
        ...

    def shape_count(self) -> int:
        """Number of shapes in the layer."""
        ...

    def shape_at(self, index: int) -> MapShape:
        """Shape at a zero-based index."""
        ...


class MapSurface(Protocol):
    """Protocol for the map owning the layers."""

    def add_layer(self, layer: ShapeLayer) -> None:
        """Register a layer on the map."""
        ...

    def layer_count(self) -> int:
        """Number of layers on the map."""
        ...

    def layer_at(self, index: int) -> ShapeLayer:
        """Layer at a zero-based index."""
        ...
