"""Tests for great-circle position tracking."""

import pytest

from trailcode.path import START_POINT, GeoPoint, Segment
from trailcode.tracker import advance, measure, segments_between, walk


class TestAdvance:
    def test_north_increases_latitude(self):
        moved = advance(START_POINT, 1000, 0)
        assert moved.lat > START_POINT.lat
        assert moved.lon == pytest.approx(START_POINT.lon, abs=1e-9)

    def test_east_increases_longitude(self):
        moved = advance(START_POINT, 1000, 90)
        assert moved.lon > START_POINT.lon

    def test_distance_scale(self):
        # One degree of latitude is ~111.2 km on the mean-radius sphere
        moved = advance(GeoPoint(lon=0.0, lat=0.0), 111_195.08, 0)
        assert moved.lat == pytest.approx(1.0, abs=1e-4)

    def test_returns_new_point(self):
        moved = advance(START_POINT, 5, 45)
        assert moved != START_POINT
        assert START_POINT.lon == -105.11000504292936


class TestMeasure:
    @pytest.mark.parametrize("bearing", [0, 45, 90, 135, 180, 225, 270, 315])
    @pytest.mark.parametrize("distance", [2, 17, 33])
    def test_recovers_rounded_segment(self, distance, bearing):
        moved = advance(START_POINT, distance, bearing)
        seg = measure(START_POINT, moved)
        assert seg.distance == distance
        assert seg.bearing == bearing

    def test_bearing_normalized(self):
        moved = advance(START_POINT, 20, 270)
        seg = measure(START_POINT, moved)
        assert 0 <= seg.bearing < 360

    def test_rounds_to_whole_numbers(self):
        moved = advance(START_POINT, 10.4, 44.6)
        seg = measure(START_POINT, moved)
        assert seg == Segment(distance=10, bearing=45)


class TestWalk:
    def test_path_length(self):
        segments = [Segment(2, 0), Segment(3, 90), Segment(4, 180)]
        path = walk(segments, START_POINT)
        assert len(path.points) == 4
        assert path.start == START_POINT
        assert path.segment_count == 3

    def test_empty_walk(self):
        path = walk([], START_POINT)
        assert path.points == [START_POINT]
        assert segments_between(path) == []

    def test_segments_between_inverts_walk(self):
        segments = [Segment(33.0, 315.0), Segment(2.0, 45.0), Segment(18.0, 180.0)]
        path = walk(segments, START_POINT)
        assert segments_between(path) == segments
