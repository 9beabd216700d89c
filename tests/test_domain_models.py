"""Tests for domain models to verify they work correctly."""

import math

import pytest

from bezierflat.domain import CubicSegment, FlattenResult, Point


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        p = Point(100.0, 200.0)
        assert p.to_tuple() == (100.0, 200.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(1.5, -2.25)
        p2 = Point.from_dict(p1.to_dict())
        assert p2 == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_point_hashable(self) -> None:
        """Equal points collapse in a set."""
        assert len({Point(1.0, 2.0), Point(1.0, 2.0), Point(2.0, 1.0)}) == 2

    def test_midpoint(self) -> None:
        """Test midpoint between two points."""
        assert Point(0.0, 0.0).midpoint(Point(4.0, -2.0)) == Point(2.0, -1.0)

    def test_distance_to(self) -> None:
        """Test Euclidean distance."""
        assert Point(0.0, 0.0).distance_to(Point(3.0, 4.0)) == 5.0

    def test_is_finite(self) -> None:
        """NaN and infinity are not finite."""
        assert Point(1.0, 2.0).is_finite()
        assert not Point(math.nan, 0.0).is_finite()
        assert not Point(0.0, math.inf).is_finite()


class TestCubicSegment:
    """Tests for CubicSegment class."""

    @pytest.fixture
    def arch(self) -> CubicSegment:
        return CubicSegment.from_coordinates(0, 0, 3, 4, 7, 4, 10, 0)

    def test_from_coordinates(self, arch: CubicSegment) -> None:
        """Coordinates are assigned to control points in order."""
        assert arch.p0 == Point(0, 0)
        assert arch.p1 == Point(3, 4)
        assert arch.p2 == Point(7, 4)
        assert arch.p3 == Point(10, 0)

    def test_control_points(self, arch: CubicSegment) -> None:
        """Test control point tuple."""
        assert arch.control_points() == (arch.p0, arch.p1, arch.p2, arch.p3)

    def test_point_at_endpoints(self, arch: CubicSegment) -> None:
        """The curve passes through p0 and p3."""
        assert arch.point_at(0.0) == arch.p0
        assert arch.point_at(1.0) == arch.p3

    def test_point_at_midpoint(self, arch: CubicSegment) -> None:
        """Test curve evaluation at t=0.5."""
        mid = arch.point_at(0.5)
        assert mid.x == pytest.approx(5.0)
        assert mid.y == pytest.approx(3.0)

    def test_split_shares_curve_point(self, arch: CubicSegment) -> None:
        """Both halves meet at the point on the curve."""
        left, right = arch.split(0.25)
        expected = arch.point_at(0.25)
        assert left.p3 == right.p0
        assert left.p3.x == pytest.approx(expected.x)
        assert left.p3.y == pytest.approx(expected.y)
        assert left.p0 == arch.p0
        assert right.p3 == arch.p3

    def test_split_halves_trace_original(self, arch: CubicSegment) -> None:
        """Points on the halves lie on the original curve."""
        left, right = arch.split()
        for t in (0.1, 0.5, 0.9):
            on_left = left.point_at(t)
            original = arch.point_at(t / 2)
            assert on_left.x == pytest.approx(original.x)
            assert on_left.y == pytest.approx(original.y)

            on_right = right.point_at(t)
            original = arch.point_at(0.5 + t / 2)
            assert on_right.x == pytest.approx(original.x)
            assert on_right.y == pytest.approx(original.y)

    def test_reversed(self, arch: CubicSegment) -> None:
        """Reversed segment traverses the curve backwards."""
        rev = arch.reversed()
        assert rev.control_points() == tuple(reversed(arch.control_points()))
        p = rev.point_at(0.3)
        q = arch.point_at(0.7)
        assert p.x == pytest.approx(q.x)
        assert p.y == pytest.approx(q.y)

    def test_is_finite(self, arch: CubicSegment) -> None:
        """A single non-finite control point makes the segment non-finite."""
        assert arch.is_finite()
        bad = CubicSegment(arch.p0, Point(math.nan, 1.0), arch.p2, arch.p3)
        assert not bad.is_finite()

    def test_segment_serialization(self, arch: CubicSegment) -> None:
        """Test segment serialization and deserialization."""
        assert CubicSegment.from_dict(arch.to_dict()) == arch


class TestFlattenResult:
    """Tests for FlattenResult class."""

    def test_defaults(self) -> None:
        """An empty result reports no limit exhaustion."""
        result = FlattenResult()
        assert result.points == []
        assert len(result) == 0
        assert not result.limit_reached

    def test_limit_reached(self) -> None:
        """Any limit hit marks the result as limited."""
        result = FlattenResult(points=[Point(1, 1)], max_depth=3, limit_hits=2)
        assert result.limit_reached
        assert len(result) == 1

    def test_to_dict(self) -> None:
        """Test result serialization."""
        result = FlattenResult(points=[Point(1, 2)], max_depth=4, cusp_vertices=1)
        data = result.to_dict()
        assert data["points"] == [{"x": 1, "y": 2}]
        assert data["max_depth"] == 4
        assert data["cusp_vertices"] == 1
        assert data["limit_hits"] == 0
