"""Unit tests for polygon merging, flood fill and the region predicates."""

import pytest

from walkable.core import Polygon
from walkable.core.polygon import _trace, _Vertex
from walkable.domain import Point, Ring
from walkable.exceptions import MergeError


def square(x0: int, y0: int, x1: int, y1: int) -> Ring:
    """Counter-clockwise (fill) axis-aligned square."""
    return Ring([Point(x0, y0), Point(x1, y0), Point(x1, y1), Point(x0, y1)])


def hole(x0: int, y0: int, x1: int, y1: int) -> Ring:
    """Clockwise (hole) axis-aligned square."""
    return square(x0, y0, x1, y1).reversed_copy()


def total_doubled_area(polygon: Polygon) -> int:
    return sum(ring.doubled_area() for ring in polygon)


class TestMergeCrossing:
    """Tests for merging rings that cross the existing region."""

    def test_union_of_overlapping_squares(self):
        """Two overlapping fill squares merge into their outline."""
        polygon = Polygon.merged([square(0, 0, 10, 10), square(5, 5, 15, 15)])

        assert len(polygon) == 1
        ring = polygon[0]
        assert not ring.is_hole
        assert set(ring) == {
            Point(0, 0),
            Point(10, 0),
            Point(10, 5),
            Point(15, 5),
            Point(15, 15),
            Point(5, 15),
            Point(5, 10),
            Point(0, 10),
        }
        assert ring.doubled_area() == 350

    def test_union_is_order_independent(self):
        """Merging in the other order yields the same region."""
        polygon = Polygon.merged([square(5, 5, 15, 15), square(0, 0, 10, 10)])

        assert len(polygon) == 1
        assert len(polygon[0]) == 8
        assert polygon[0].doubled_area() == 350

    def test_union_membership(self):
        """Points in either square are inside the union; others are not."""
        polygon = Polygon.merged([square(0, 0, 10, 10), square(5, 5, 15, 15)])

        assert polygon.contains(Point(2, 2))
        assert polygon.contains(Point(12, 12))
        assert polygon.contains(Point(7, 7))
        assert not polygon.contains(Point(12, 2))
        assert not polygon.contains(Point(2, 12))

    def test_difference_produces_l_shape(self):
        """Subtracting an overlapping hole cuts a corner out of the fill."""
        polygon = Polygon()
        polygon.add(square(0, 0, 10, 10))
        polygon.add(hole(5, 5, 15, 15))

        assert len(polygon) == 1
        ring = polygon[0]
        assert set(ring) == {
            Point(0, 0),
            Point(10, 0),
            Point(10, 5),
            Point(5, 5),
            Point(5, 10),
            Point(0, 10),
        }
        assert ring.doubled_area() == 150
        assert polygon.contains(Point(2, 2))
        assert not polygon.contains(Point(7, 7))
        assert not polygon.contains(Point(12, 12))

    def test_overlapping_holes_merge(self):
        """Two crossing holes inside a fill become one hole."""
        polygon = Polygon.merged(
            [square(0, 0, 100, 100), hole(20, 20, 50, 50), hole(40, 40, 70, 70)]
        )

        assert len(polygon) == 2
        holes = [ring for ring in polygon if ring.is_hole]
        assert len(holes) == 1
        assert holes[0].doubled_area() == -3400
        assert polygon.contains(Point(10, 10))
        assert polygon.contains(Point(25, 65))
        assert not polygon.contains(Point(30, 30))
        assert not polygon.contains(Point(45, 45))
        assert not polygon.contains(Point(65, 65))

    def test_hole_flush_with_fill_leaves_no_sliver(self):
        """A hole covering a fill and sharing its edges erases it completely."""
        polygon = Polygon()
        polygon.add(square(90, 20, 100, 50))
        polygon.add(hole(90, 20, 100, 60))

        assert polygon.is_empty()
        assert not polygon.contains(Point(95, 30))
        assert not polygon.contains(Point(90, 20))

    def test_fill_bridges_hole(self):
        """A fill crossing a hole removes the overlap from the hole."""
        polygon = Polygon.merged([square(0, 0, 100, 100), hole(20, 20, 80, 80)])
        polygon.add(square(50, 30, 90, 70))

        assert polygon.contains(Point(60, 50))
        assert not polygon.contains(Point(30, 50))
        assert total_doubled_area(polygon) == 20000 - 7200 + 2 * 30 * 40


class TestMergeNonCrossing:
    """Tests for merging rings that do not cross any existing ring."""

    def test_add_to_empty_polygon(self):
        """The first fill ring becomes the region."""
        polygon = Polygon()
        polygon.add(square(0, 0, 10, 10))
        assert polygon.rings == [square(0, 0, 10, 10)]

    def test_hole_in_empty_polygon_is_dropped(self):
        """Outside every ring is already empty, so a lone hole is a no-op."""
        polygon = Polygon()
        polygon.add(hole(0, 0, 10, 10))
        assert polygon.is_empty()

    def test_disjoint_fills_are_kept(self):
        """Disjoint fill rings both survive."""
        polygon = Polygon.merged([square(0, 0, 10, 10), square(20, 0, 30, 10)])
        assert len(polygon) == 2
        assert polygon.contains(Point(5, 5))
        assert polygon.contains(Point(25, 5))
        assert not polygon.contains(Point(15, 5))

    def test_nested_hole_is_added(self):
        """A hole strictly inside a fill punches through it."""
        polygon = Polygon.merged([square(0, 0, 100, 100), hole(40, 40, 60, 60)])
        assert len(polygon) == 2
        assert polygon.contains(Point(10, 10))
        assert not polygon.contains(Point(50, 50))

    def test_nested_same_polarity_is_noop(self):
        """A fill inside a fill changes nothing."""
        polygon = Polygon.merged([square(0, 0, 100, 100), square(40, 40, 60, 60)])
        assert polygon.rings == [square(0, 0, 100, 100)]

    def test_covering_fill_replaces_contents(self):
        """A fill that covers the existing rings replaces them."""
        polygon = Polygon.merged([square(40, 40, 60, 60), square(0, 0, 100, 100)])
        assert polygon.rings == [square(0, 0, 100, 100)]

    def test_covering_hole_erases_region(self):
        """A hole covering the whole region leaves it empty."""
        polygon = Polygon.merged([square(40, 40, 60, 60), hole(0, 0, 100, 100)])
        assert polygon.is_empty()

    def test_fill_inside_hole_is_island(self):
        """A fill nested in a hole of a fill becomes an island."""
        polygon = Polygon.merged(
            [square(0, 0, 100, 100), hole(20, 20, 80, 80), square(40, 40, 60, 60)]
        )
        assert len(polygon) == 3
        assert polygon.contains(Point(10, 10))
        assert not polygon.contains(Point(30, 30))
        assert polygon.contains(Point(50, 50))

    @pytest.mark.parametrize(
        "ring",
        [
            Ring([]),
            Ring([Point(0, 0), Point(5, 5)]),
            Ring([Point(0, 0), Point(5, 0), Point(10, 0)]),
        ],
    )
    def test_degenerate_ring_is_noop(self, ring):
        """Rings with fewer than 3 vertices or zero area are ignored."""
        polygon = Polygon.merged([square(0, 0, 10, 10)])
        polygon.add(ring)
        assert polygon.rings == [square(0, 0, 10, 10)]

    def test_touching_squares_do_not_cross(self):
        """Squares sharing only a corner stay separate rings."""
        polygon = Polygon.merged([square(0, 0, 10, 10), square(10, 10, 20, 20)])
        assert len(polygon) == 2
        assert total_doubled_area(polygon) == 400

    @pytest.mark.parametrize("small_first", [True, False])
    def test_touching_unequal_squares_are_both_kept(self, small_first):
        """A larger ring touching a smaller one from outside covers nothing."""
        small = Ring.from_tuples([(10, 10), (0, 10), (0, 0), (10, 0)])
        large = square(10, 10, 40, 40)
        rings = [small, large] if small_first else [large, small]

        polygon = Polygon.merged(rings)

        assert len(polygon) == 2
        assert total_doubled_area(polygon) == 2 * (100 + 900)
        assert polygon.contains(Point(5, 5))
        assert polygon.contains(Point(25, 25))
        assert not polygon.contains(Point(25, 5))


class TestFloodFill:
    """Tests for reducing a polygon to one connected component."""

    @pytest.fixture
    def island_region(self):
        """Fill with a hole holding a fill island."""
        return Polygon.merged(
            [square(0, 0, 100, 100), hole(20, 20, 80, 80), square(40, 40, 60, 60)]
        )

    def test_keeps_outer_component(self, island_region):
        """Filling from the outer band drops the island."""
        island_region.flood_fill(Point(10, 10))

        assert len(island_region) == 2
        assert island_region.contains(Point(10, 10))
        assert not island_region.contains(Point(50, 50))
        assert not island_region.contains(Point(30, 30))

    def test_keeps_island(self, island_region):
        """Filling from the island drops the outer band and its hole."""
        island_region.flood_fill(Point(50, 50))

        assert island_region.rings == [square(40, 40, 60, 60)]

    def test_outside_point_empties_region(self, island_region):
        """Nothing contains the point, so nothing is walkable."""
        island_region.flood_fill(Point(200, 200))
        assert island_region.is_empty()

    def test_point_in_hole_keeps_surrounding_ring(self):
        """The smallest fill ring around the point wins, even across a hole."""
        polygon = Polygon.merged([square(0, 0, 100, 100), hole(20, 20, 80, 80)])
        polygon.flood_fill(Point(50, 50))
        assert len(polygon) == 2
        assert not polygon.contains(Point(50, 50))
        assert polygon.contains(Point(10, 10))

    def test_result_is_subset(self, island_region):
        """Every point inside the filled region was inside the original."""
        original = Polygon(list(island_region.rings))
        island_region.flood_fill(Point(10, 10))

        for x in range(-5, 106, 5):
            for y in range(-5, 106, 5):
                point = Point(x, y)
                if island_region.contains(point):
                    assert original.contains(point)


class TestIntersects:
    """Tests for segment intersection against the region boundary."""

    @pytest.fixture
    def region(self):
        return Polygon.merged([square(0, 0, 100, 100)])

    def test_segment_inside(self, region):
        assert not region.intersects(Point(10, 10), Point(90, 90))

    def test_segment_leaving_region(self, region):
        assert region.intersects(Point(50, 50), Point(150, 50))

    def test_endpoint_on_vertex(self, region):
        """Touching the boundary at an endpoint does not count."""
        assert not region.intersects(Point(50, 50), Point(100, 100))

    def test_collinear_with_edge(self, region):
        """A segment running along an edge does not intersect it."""
        assert not region.intersects(Point(0, 0), Point(100, 0))

    def test_grazing_vertex(self, region):
        """Passing through a vertex mid-segment counts."""
        assert region.intersects(Point(90, 110), Point(110, 90))


class TestTransforms:
    """Tests for translating and scaling whole polygons."""

    def test_scale_and_translate(self):
        polygon = Polygon.merged([square(0, 0, 10, 10)])
        moved = (polygon * 4) + Point(1, 1)
        assert moved[0][2] == Point(41, 41)
        assert ((moved - Point(1, 1)) // 4).rings == polygon.rings

    def test_vertices_and_clear(self):
        polygon = Polygon.merged([square(0, 0, 10, 10), square(20, 0, 30, 10)])
        assert len(list(polygon.vertices())) == 8
        polygon.clear()
        assert polygon.is_empty()


class TestTrace:
    """Tests for tracing output loops through a linked vertex sequence."""

    def test_closed_loop(self):
        amplified = [
            _Vertex(Point(0, 0), link=1),
            _Vertex(Point(0, 0)),
            _Vertex(Point(10, 0)),
            _Vertex(Point(0, 10)),
            _Vertex(Point(0, 0), link=0),
        ]
        loops = _trace(amplified, [0])

        assert loops == [Ring.from_tuples([(0, 0), (10, 0), (0, 10)])]
        assert amplified[0].link < 0

    def test_zero_area_loop_is_discarded(self):
        """A loop that doubles back on itself has no area and is dropped."""
        amplified = [
            _Vertex(Point(0, 0), link=1),
            _Vertex(Point(0, 0)),
            _Vertex(Point(10, 0)),
            _Vertex(Point(5, 0)),
            _Vertex(Point(0, 0), link=0),
        ]
        assert _trace(amplified, [0]) == []

    def test_unclosed_trace_raises(self):
        """A sequence without a link back to the start cannot close."""
        amplified = [
            _Vertex(Point(0, 0), link=1),
            _Vertex(Point(0, 0)),
            _Vertex(Point(10, 0)),
            _Vertex(Point(0, 10)),
        ]
        with pytest.raises(MergeError, match="did not close"):
            _trace(amplified, [0])
