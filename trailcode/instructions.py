"""Plain-text walking directions for an encoded message.

One line per byte::

    go 3m E totalling 5m

The text is write-only; it cannot be decoded.
"""

from __future__ import annotations

import math

from .codec import encode_bytes
from .errors import InvalidBearingError
from .path import Segment

COMPASS_POINTS: dict[int, str] = {
    0: "N",
    45: "NE",
    90: "E",
    135: "SE",
    180: "S",
    225: "SW",
    270: "W",
    315: "NW",
}


def compass_direction(bearing: float) -> str:
    """Name of the compass octant for ``bearing``.

    Raises:
        InvalidBearingError: If the bearing is not exactly one of
            0, 45, ..., 315 degrees.
    """
    if (
        not math.isfinite(bearing)
        or bearing != int(bearing)
        or int(bearing) not in COMPASS_POINTS
    ):
        raise InvalidBearingError(f"Bearing {bearing} is not a compass octant")
    return COMPASS_POINTS[int(bearing)]


def _meters(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_instructions(segments: list[Segment]) -> str:
    """Render segments as walking directions with a running total."""
    lines: list[str] = []
    total = 0.0
    for seg in segments:
        total += seg.distance
        lines.append(
            f"go {_meters(seg.distance)}m {compass_direction(seg.bearing)} "
            f"totalling {_meters(total)}m"
        )
    return "".join(line + "\n" for line in lines)


def encode_to_instructions(data: bytes) -> str:
    """Encode ``data`` straight to walking directions."""
    return format_instructions(encode_bytes(data))
