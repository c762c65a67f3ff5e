"""Tests for walking-direction output."""

import pytest

from trailcode.errors import InvalidBearingError
from trailcode.instructions import (
    COMPASS_POINTS,
    compass_direction,
    encode_to_instructions,
    format_instructions,
)
from trailcode.path import Segment


class TestCompassDirection:
    def test_all_octants(self):
        expected = ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]
        assert [compass_direction(b) for b in range(0, 360, 45)] == expected

    def test_float_octant(self):
        assert compass_direction(270.0) == "W"

    @pytest.mark.parametrize(
        "bearing",
        [10, 44.5, 360, -45, 720, float("nan"), float("inf"), float("-inf")],
    )
    def test_non_octant_raises(self, bearing):
        with pytest.raises(InvalidBearingError, match="not a compass octant"):
            compass_direction(bearing)

    def test_mapping_is_complete(self):
        assert sorted(COMPASS_POINTS) == list(range(0, 360, 45))


class TestFormatInstructions:
    def test_single_line(self):
        text = format_instructions([Segment(distance=3.0, bearing=90.0)])
        assert text == "go 3m E totalling 3m\n"

    def test_running_total(self):
        text = format_instructions([Segment(2.0, 0.0), Segment(33.0, 225.0)])
        assert text.splitlines() == [
            "go 2m N totalling 2m",
            "go 33m SW totalling 35m",
        ]

    def test_invalid_bearing_raises(self):
        with pytest.raises(InvalidBearingError):
            format_instructions([Segment(2.0, 12.0)])


class TestEncodeToInstructions:
    def test_one_line_per_byte(self):
        text = encode_to_instructions(b"hello world")
        assert len(text.splitlines()) == 11

    def test_known_bytes(self):
        # index 1 odd: 0 - 45 -> NW; index 2 even: 0 + 90 -> E
        text = encode_to_instructions(b"\x00\x00")
        assert text.splitlines() == [
            "go 2m NW totalling 2m",
            "go 2m E totalling 4m",
        ]

    def test_empty_input(self):
        assert encode_to_instructions(b"") == ""

    def test_every_byte_has_a_direction(self):
        text = encode_to_instructions(bytes(range(256)) * 2)
        assert len(text.splitlines()) == 512
