"""
Coordinate axis-order helpers.

Interchange positions are [lon, lat]; shape points are (lat, lon). Every pair
crossing the boundary goes through exactly one of the two functions below.
"""

from __future__ import annotations

from typing import List, Sequence, TypeVar

from shapebridge.model import LatLong, Position

T = TypeVar("T")


def to_lat_long(position: Sequence[float]) -> LatLong:
    """[lon, lat(, ele...)] -> LatLong(lat, lon). Trailing components are dropped."""
    return LatLong(position[1], position[0])


def to_position(point: Sequence[float]) -> Position:
    """(lat, lon) -> [lon, lat]."""
    return [point[1], point[0]]


def rotate_ring(seq: Sequence[T]) -> List[T]:
    """
    Rotate a closed ring the way both conversion directions expect.

    The result starts with the closing element, then walks index 1 through
    n-1: `[seq[n-1], seq[1], ..., seq[n-1]]`. Element 0 is not emitted on its
    own; for a closed ring it equals seq[n-1] so the output is still closed.

    Applying it on import and again on export leaves a closed ring unchanged.
    """
    if not seq:
        return []
    return [seq[-1]] + list(seq[1:])
