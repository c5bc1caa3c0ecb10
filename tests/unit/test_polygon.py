"""Unit tests for PointList, Polygon and Polyline."""

from unittest.mock import patch

import pytest

from svgeometry.core import classify_polygons
from svgeometry.domain import (
    ConvexHull,
    Point,
    PointList,
    PointRelation,
    Polygon,
    PolygonRelation,
    Polyline,
    graham_scan,
    parse_points,
)
from svgeometry.exceptions import PointListFormatError, PolylineTooShortError


@pytest.fixture
def square() -> Polygon:
    """10x10 square at the origin."""
    return Polygon.from_xml_string("0,0 10,0 10,10 0,10")


class TestParsePoints:
    """Tests for SVG points data parsing."""

    def test_parse(self) -> None:
        assert parse_points("0,0 10,0  10,10") == [Point(0, 0), Point(10, 0), Point(10, 10)]

    def test_parse_blank(self) -> None:
        assert parse_points("  ") == []

    def test_parse_decimals_and_signs(self) -> None:
        assert parse_points("-1.5,2e1") == [Point(-1.5, 20)]

    @pytest.mark.parametrize("text", ["0,0 1", "a,b", "1,2,3", "1,inf", "1,"])
    def test_parse_errors(self, text: str) -> None:
        """Test malformed tokens raise PointListFormatError."""
        with pytest.raises(PointListFormatError):
            parse_points(text)

    def test_error_carries_token(self) -> None:
        with pytest.raises(PointListFormatError) as exc_info:
            parse_points("0,0 x,1")
        assert exc_info.value.token == "x,1"


class TestPointList:
    """Tests for the shared point sequence behavior."""

    def test_sequence_protocol(self) -> None:
        points = PointList([(0, 0), (1, 1), (2, 2)])
        assert len(points) == 3
        assert points[1] == Point(1, 1)
        assert points[-1] == Point(2, 2)
        assert points[:2] == (Point(0, 0), Point(1, 1))
        assert list(points) == [Point(0, 0), Point(1, 1), Point(2, 2)]

    def test_contains_vertex(self) -> None:
        points = PointList([(0, 0), (1, 1)])
        assert points.contains(Point(1, 1))
        assert not points.contains(Point(2, 2))

    def test_to_xml_string(self) -> None:
        assert PointList([(0, 0), (1.5, -2)]).to_xml_string() == "0,0 1.5,-2"

    def test_equality_requires_same_type(self) -> None:
        """Test a Polygon never equals a Polyline with the same points."""
        points = [(0, 0), (10, 0), (10, 10)]
        assert Polygon(points) == Polygon(points)
        assert Polygon(points) != Polyline(points)
        assert hash(Polygon(points)) == hash(Polygon(points))

    def test_order_matters(self) -> None:
        assert Polygon([(0, 0), (1, 0), (1, 1)]) != Polygon([(1, 1), (1, 0), (0, 0)])

    def test_repr(self) -> None:
        assert repr(Polygon([(0, 0), (1, 0)])) == "Polygon('0,0 1,0')"


class TestPolygon:
    """Tests for Polygon class."""

    def test_empty(self) -> None:
        polygon = Polygon.empty()
        assert polygon.is_empty()
        assert polygon.bounding_box.is_none

    def test_edges_include_closing_edge(self, square: Polygon) -> None:
        edges = list(square.edges())
        assert len(edges) == 4
        assert edges[-1] == (Point(0, 10), Point(0, 0))

    def test_is_on_edge(self, square: Polygon) -> None:
        assert square.is_on_edge(Point(10, 5))
        assert square.is_on_edge(Point(0, 0))
        assert not square.is_on_edge(Point(5, 5))

    def test_bounding_box_cached(self, square: Polygon) -> None:
        """Test the bounding box is computed once."""
        box = square.bounding_box
        assert box.upper_left == Point(0, 0)
        assert box.lower_right == Point(10, 10)
        assert square.bounding_box is box

    def test_convex_hull_cached(self) -> None:
        """Test the hull drops the concave vertex and is cached."""
        polygon = Polygon([(0, 0), (10, 0), (5, 2), (10, 10), (0, 10)])
        hull = polygon.convex_hull
        assert isinstance(hull, ConvexHull)
        assert set(hull) == {Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)}
        assert polygon.convex_hull is hull

    def test_hull_computed_at_construction(self) -> None:
        """Test the hull scan runs while building the polygon, not on access."""
        with patch("svgeometry.domain.convex_hull.graham_scan", wraps=graham_scan) as scan:
            polygon = Polygon([(0, 0), (10, 0), (10, 10)])
            assert scan.call_count == 1
            assert len(polygon.convex_hull) == 3
            assert polygon.bounding_box.lower_right == Point(10, 10)
            assert scan.call_count == 1


class TestPointRelation:
    """Tests for Polygon.relation_to_point."""

    @pytest.mark.parametrize(
        "point",
        [
            Point(5, 5),  # centroid
            Point(10, 5),  # edge midpoint
            Point(5, 0),  # edge midpoint
            Point(0, 0),  # vertex
            Point(10, 10),  # vertex
        ],
    )
    def test_inside_including_boundary(self, square: Polygon, point: Point) -> None:
        """Test interior, edge and vertex points classify as INSIDE."""
        assert square.relation_to_point(point) is PointRelation.INSIDE

    @pytest.mark.parametrize("point", [Point(15, 15), Point(-1, 5), Point(5, 10.5)])
    def test_outside(self, square: Polygon, point: Point) -> None:
        assert square.relation_to_point(point) is PointRelation.DISJOINT

    def test_concave_notch(self) -> None:
        """Test a point in the notch of a U shape is outside."""
        u_shape = Polygon([(0, 0), (3, 0), (3, 10), (7, 10), (7, 0), (10, 0), (10, 12), (0, 12)])
        assert u_shape.relation_to_point(Point(5, 5)) is PointRelation.DISJOINT
        assert u_shape.relation_to_point(Point(1, 5)) is PointRelation.INSIDE

    def test_empty_polygon(self) -> None:
        assert Polygon().relation_to_point(Point(0, 0)) is PointRelation.DISJOINT


class TestPolygonRelation:
    """Tests for Polygon.relation_to_polygon."""

    def test_inside(self, square: Polygon) -> None:
        """Test a strictly nested square is INSIDE and every vertex agrees."""
        inner = Polygon.from_xml_string("2,2 8,2 8,8 2,8")
        assert inner.relation_to_polygon(square) is PolygonRelation.INSIDE
        assert all(square.relation_to_point(p) is PointRelation.INSIDE for p in inner)

    def test_outer_to_inner_is_not_inside(self, square: Polygon) -> None:
        """Test the reverse direction does not report COVER directly."""
        inner = Polygon.from_xml_string("2,2 8,2 8,8 2,8")
        assert square.relation_to_polygon(inner) is PolygonRelation.DISJOINT

    def test_disjoint_both_directions(self, square: Polygon) -> None:
        other = Polygon.from_xml_string("15,15 25,15 25,25 15,25")
        assert square.relation_to_polygon(other) is PolygonRelation.DISJOINT
        assert other.relation_to_polygon(square) is PolygonRelation.DISJOINT

    def test_intersect(self, square: Polygon) -> None:
        """Test overlapping squares with crossing edges INTERSECT."""
        other = Polygon.from_xml_string("5,5 15,5 15,15 5,15")
        assert other.relation_to_polygon(square) is PolygonRelation.INTERSECT
        assert square.relation_to_polygon(other) is PolygonRelation.INTERSECT

    def test_shared_edge_is_disjoint(self, square: Polygon) -> None:
        """Test neighbours sharing an edge only touch."""
        neighbour = Polygon.from_xml_string("10,0 20,0 20,10 10,10")
        assert neighbour.relation_to_polygon(square) is PolygonRelation.DISJOINT
        assert square.relation_to_polygon(neighbour) is PolygonRelation.DISJOINT

    def test_inside_touching_boundary(self, square: Polygon) -> None:
        """Test vertices on the target's edges are neutral."""
        corner = Polygon.from_xml_string("0,0 5,0 5,5 0,5")
        assert corner.relation_to_polygon(square) is PolygonRelation.INSIDE

    def test_empty_polygon_is_disjoint(self, square: Polygon) -> None:
        assert Polygon().relation_to_polygon(square) is PolygonRelation.DISJOINT
        assert square.relation_to_polygon(Polygon()) is PolygonRelation.DISJOINT


class TestClassifyPolygons:
    """Tests for the two-way classification used by MultiPolygon."""

    def test_equal_ignores_vertex_order(self, square: Polygon) -> None:
        rotated = Polygon.from_xml_string("10,10 0,10 0,0 10,0")
        assert classify_polygons(rotated, square) is PolygonRelation.EQUAL

    def test_inside_and_cover(self, square: Polygon) -> None:
        inner = Polygon.from_xml_string("2,2 8,2 8,8 2,8")
        assert classify_polygons(inner, square) is PolygonRelation.INSIDE
        assert classify_polygons(square, inner) is PolygonRelation.COVER

    def test_intersect_passes_through(self, square: Polygon) -> None:
        other = Polygon.from_xml_string("5,5 15,5 15,15 5,15")
        assert classify_polygons(other, square) is PolygonRelation.INTERSECT


class TestPolyline:
    """Tests for Polyline class."""

    def test_requires_two_points(self) -> None:
        with pytest.raises(PolylineTooShortError) as exc_info:
            Polyline([(0, 0)])
        assert exc_info.value.point_count == 1

    def test_from_xml_string(self) -> None:
        polyline = Polyline.from_xml_string("0,0 5,5 10,0")
        assert polyline.start == Point(0, 0)
        assert polyline.end == Point(10, 0)

    def test_bounding_box_from_hull(self) -> None:
        polyline = Polyline.from_xml_string("0,0 5,5 10,0 7,1")
        box = polyline.bounding_box
        assert box.upper_left == Point(0, 0)
        assert box.lower_right == Point(10, 5)
