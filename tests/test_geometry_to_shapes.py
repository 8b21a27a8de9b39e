"""Unit tests for shapebridge.core.geometry_to_shapes."""

import pytest

from shapebridge.core.config import ConversionOptions
from shapebridge.core.geometry_to_shapes import geometry_to_shapes
from shapebridge.model import Shape, ShapeKind


class Recorder:
    """Collects (geometry, shape) pairs handed to the callback."""

    def __init__(self):
        self.calls = []

    def __call__(self, geometry, shape):
        self.calls.append((geometry, shape))


@pytest.fixture
def recorder():
    return Recorder()


class TestMissingAndUnknown:
    def test_none_returns_none(self, recorder):
        assert geometry_to_shapes(None, recorder) is None
        assert recorder.calls == []

    def test_unknown_type_is_silently_skipped(self, recorder):
        geom = {"type": "Circle", "coordinates": [0, 0], "radius": 5}
        assert geometry_to_shapes(geom, recorder) is None
        assert recorder.calls == []

    def test_callback_is_optional(self):
        shape = geometry_to_shapes({"type": "Point", "coordinates": [1, 2]})
        assert shape.points == [(2, 1)]


class TestPoint:
    def test_point_becomes_pin_with_swapped_axes(self, recorder):
        geom = {"type": "Point", "coordinates": [10, 20]}
        shape = geometry_to_shapes(geom, recorder)

        assert isinstance(shape, Shape)
        assert shape.kind == ShapeKind.PIN
        assert shape.points == [(20, 10)]
        assert shape.points[0].latitude == 20
        assert shape.points[0].longitude == 10

    def test_callback_fires_once_with_geometry(self, recorder):
        geom = {"type": "Point", "coordinates": [10, 20]}
        shape = geometry_to_shapes(geom, recorder)
        assert recorder.calls == [(geom, shape)]
        assert recorder.calls[0][0] is geom


class TestMultiPoint:
    def test_one_pin_per_position(self, recorder):
        geom = {"type": "MultiPoint", "coordinates": [[1, 2], [3, 4], [5, 6]]}
        shapes = geometry_to_shapes(geom, recorder)

        assert [s.kind for s in shapes] == [ShapeKind.PIN] * 3
        assert [s.points for s in shapes] == [[(2, 1)], [(4, 3)], [(6, 5)]]

    def test_callback_gets_parent_geometry_for_each_shape(self, recorder):
        geom = {"type": "MultiPoint", "coordinates": [[1, 2], [3, 4], [5, 6]]}
        shapes = geometry_to_shapes(geom, recorder)

        assert len(recorder.calls) == 3
        assert all(g is geom for g, _ in recorder.calls)
        assert [s for _, s in recorder.calls] == shapes
        assert len({id(s) for _, s in recorder.calls}) == 3

    def test_callback_fires_while_generating(self):
        geom = {"type": "MultiPoint", "coordinates": [[1, 2], [3, 4]]}
        seen = []

        def stop_after_first(geometry, shape):
            seen.append(shape)
            raise RuntimeError("stop")

        with pytest.raises(RuntimeError):
            geometry_to_shapes(geom, stop_after_first)
        assert len(seen) == 1

    def test_empty_multipoint(self, recorder):
        assert geometry_to_shapes({"type": "MultiPoint", "coordinates": []}, recorder) == []
        assert recorder.calls == []


class TestLineString:
    def test_polyline_keeps_order_and_swaps_each_point(self, recorder):
        geom = {"type": "LineString", "coordinates": [[0, 0], [1, 1], [2, 2]]}
        shape = geometry_to_shapes(geom, recorder)

        assert shape.kind == ShapeKind.POLYLINE
        assert shape.points == [(0, 0), (1, 1), (2, 2)]
        assert recorder.calls == [(geom, shape)]

    def test_asymmetric_coordinates(self):
        geom = {"type": "LineString", "coordinates": [[-114.0, 46.0], [-113.5, 46.25]]}
        shape = geometry_to_shapes(geom)
        assert shape.points == [(46.0, -114.0), (46.25, -113.5)]

    def test_multilinestring(self, recorder):
        geom = {
            "type": "MultiLineString",
            "coordinates": [[[0, 1], [2, 3]], [[4, 5], [6, 7], [8, 9]]],
        }
        shapes = geometry_to_shapes(geom, recorder)

        assert [s.kind for s in shapes] == [ShapeKind.POLYLINE, ShapeKind.POLYLINE]
        assert shapes[0].points == [(1, 0), (3, 2)]
        assert shapes[1].points == [(5, 4), (7, 6), (9, 8)]
        assert [(g is geom, s) for g, s in recorder.calls] == [(True, shapes[0]), (True, shapes[1])]


class TestPolygon:
    def test_square_ring(self, recorder):
        geom = {"type": "Polygon", "coordinates": [[[0, 0], [1, 0], [1, 1], [0, 0]]]}
        shape = geometry_to_shapes(geom, recorder)

        assert shape.kind == ShapeKind.POLYGON
        # [swap(ring[3]), swap(ring[1]), swap(ring[2]), swap(ring[3])]
        assert shape.points == [(0, 0), (0, 1), (1, 1), (0, 0)]
        assert recorder.calls == [(geom, shape)]

    def test_rotation_on_open_ring(self):
        geom = {"type": "Polygon", "coordinates": [[[1, 2], [3, 4], [5, 6]]]}
        shape = geometry_to_shapes(geom)
        # ring[0] is not emitted; ring[2] is duplicated at the front.
        assert shape.points == [(6, 5), (4, 3), (6, 5)]

    def test_holes_are_dropped(self):
        geom = {
            "type": "Polygon",
            "coordinates": [
                [[0, 0], [4, 0], [4, 4], [0, 4], [0, 0]],
                [[1, 1], [2, 1], [2, 2], [1, 1]],
            ],
        }
        shape = geometry_to_shapes(geom)
        assert shape.points == [(0, 0), (0, 4), (4, 4), (4, 0), (0, 0)]

    def test_polygon_without_rings(self, recorder):
        assert geometry_to_shapes({"type": "Polygon", "coordinates": []}, recorder) is None
        assert recorder.calls == []

    def test_multipolygon_uses_each_outer_ring(self, recorder):
        geom = {
            "type": "MultiPolygon",
            "coordinates": [
                [[[0, 0], [1, 0], [1, 1], [0, 0]]],
                [[[10, 10], [11, 10], [11, 11], [10, 10]], [[10.2, 10.2], [10.4, 10.2], [10.2, 10.2]]],
            ],
        }
        shapes = geometry_to_shapes(geom, recorder)

        assert [s.kind for s in shapes] == [ShapeKind.POLYGON, ShapeKind.POLYGON]
        assert shapes[0].points == [(0, 0), (0, 1), (1, 1), (0, 0)]
        assert shapes[1].points == [(10, 10), (10, 11), (11, 11), (10, 10)]
        assert len(recorder.calls) == 2
        assert all(g is geom for g, _ in recorder.calls)


class TestGeometryCollection:
    def _two_points(self):
        a = {"type": "Point", "coordinates": [1, 2]}
        b = {"type": "Point", "coordinates": [3, 4]}
        return a, b, {"type": "GeometryCollection", "geometries": [a, b]}

    def test_last_member_wins_by_default(self, recorder):
        a, b, geom = self._two_points()
        result = geometry_to_shapes(geom, recorder)

        assert isinstance(result, Shape)
        assert result.points == [(4, 3)]
        # Both members still reach the callback, each with its own geometry.
        assert [g for g, _ in recorder.calls] == [a, b]
        assert recorder.calls[1][1] is result

    def test_all_mode_returns_every_shape(self, recorder):
        _, _, geom = self._two_points()
        result = geometry_to_shapes(geom, recorder, options=ConversionOptions(collection_results="all"))

        assert [s.points for s in result] == [[(2, 1)], [(4, 3)]]
        assert len(recorder.calls) == 2

    def test_nested_collections(self, recorder):
        inner = {
            "type": "GeometryCollection",
            "geometries": [
                {"type": "MultiPoint", "coordinates": [[5, 6], [7, 8]]},
                {"type": "LineString", "coordinates": [[0, 0], [1, 1]]},
            ],
        }
        geom = {
            "type": "GeometryCollection",
            "geometries": [{"type": "Point", "coordinates": [1, 2]}, inner],
        }

        last = geometry_to_shapes(geom, recorder)
        assert last.kind == ShapeKind.POLYLINE
        assert len(recorder.calls) == 4

        flat = geometry_to_shapes(geom, options=ConversionOptions(collection_results="all"))
        assert [s.kind for s in flat] == [
            ShapeKind.PIN,
            ShapeKind.PIN,
            ShapeKind.PIN,
            ShapeKind.POLYLINE,
        ]

    def test_last_member_unknown_returns_none(self, recorder):
        geom = {
            "type": "GeometryCollection",
            "geometries": [{"type": "Point", "coordinates": [1, 2]}, {"type": "Bogus"}],
        }
        assert geometry_to_shapes(geom, recorder) is None
        assert len(recorder.calls) == 1

    def test_empty_collection(self):
        assert geometry_to_shapes({"type": "GeometryCollection", "geometries": []}) is None
        all_mode = ConversionOptions(collection_results="all")
        assert geometry_to_shapes({"type": "GeometryCollection", "geometries": []}, options=all_mode) == []
