"""Byte <-> segment codec.

Maps one byte plus its 1-based sequence index to a (distance, bearing)
segment and back:

- low 5 bits  -> distance in meters, 2..33
- high 3 bits -> compass octant, 0..315 in 45 degree steps
- the bearing is then rotated by ``index * 45`` degrees, clockwise on even
  index blocks and anticlockwise on odd ones, so that repeated byte values
  do not produce identical runs of segments

Both directions work on whole numbers only. Decoding a segment that was not
produced by ``encode_byte`` (a bearing off the 45 degree grid, a distance
outside 2..33) gives an arbitrary byte; nothing here detects that.
"""

from __future__ import annotations

import math

from .path import Segment

OCTANT_DEGREES = 45
DISTANCE_OFFSET = 2
LOW_BITS = 32  # values carried by the distance
PERTURBATION_BLOCK = 100

MIN_DISTANCE = DISTANCE_OFFSET
MAX_DISTANCE = DISTANCE_OFFSET + LOW_BITS - 1


def normalize_bearing(bearing: float) -> float:
    """Wrap a bearing into [0, 360).

    Args:
        bearing: Any finite angle in degrees.

    Returns:
        Equivalent bearing in [0, 360).
    """
    wrapped = math.fmod(bearing, 360.0)
    if wrapped < 0:
        wrapped += 360.0
    # -1e-17 + 360 rounds up to exactly 360.0
    if wrapped >= 360.0:
        wrapped = 0.0
    return wrapped


def _perturbation(index: int) -> int:
    """Signed bearing offset applied at encode time for ``index``."""
    offset = index * OCTANT_DEGREES
    if (index % PERTURBATION_BLOCK) % 2 == 0:
        return offset
    return -offset


def encode_byte(byte: int, index: int) -> Segment:
    """Encode one byte as a segment.

    Args:
        byte: Value in [0, 255].
        index: 1-based position of the byte in the message.

    Returns:
        Segment with an integer distance in [2, 33] and a bearing on the
        45 degree grid.

    Raises:
        ValueError: If byte is outside the single-byte range or index < 1.
    """
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte must be 0-255, got {byte}")
    if index < 1:
        raise ValueError(f"index must be >= 1, got {index}")

    distance = (byte % LOW_BITS) + DISTANCE_OFFSET
    bearing = (byte // LOW_BITS) * OCTANT_DEGREES + _perturbation(index)
    return Segment(distance=float(distance), bearing=normalize_bearing(bearing))


def decode_segment(distance: float, bearing: float, index: int) -> int:
    """Recover the byte carried by a segment.

    ``distance`` and ``bearing`` are expected to be the rounded values
    measured between two path points.

    Args:
        distance: Segment length in meters.
        bearing: Segment bearing in degrees.
        index: 1-based position of the segment in the path.

    Returns:
        The decoded byte. Off-grid input yields an arbitrary value in 0-255.
    """
    unperturbed = normalize_bearing(bearing - _perturbation(index))
    octant = int(unperturbed // OCTANT_DEGREES)
    low = int(math.floor(distance - DISTANCE_OFFSET))
    return (octant * LOW_BITS + low) & 0xFF


def encode_bytes(data: bytes) -> list[Segment]:
    """Encode a whole message, one segment per byte."""
    return [encode_byte(byte, index) for index, byte in enumerate(data, start=1)]


def decode_segments(segments: list[Segment]) -> bytes:
    """Decode segments produced by ``encode_bytes`` (or measured from a path)."""
    return bytes(
        decode_segment(seg.distance, seg.bearing, index)
        for index, seg in enumerate(segments, start=1)
    )
