"""Path encoder for trailcode.

Encoding algorithm:
1. Number the input bytes from 1
2. Map each (byte, index) to a (distance, bearing) segment
3. Walk the segments from the start point, one geodesic step per byte
4. Emit the visited points as a GeoJSON LineString

Step 3 is inherently sequential: each point is computed from the previous
one. The segments themselves depend only on the byte and its index.
"""

from __future__ import annotations

import structlog

from .codec import encode_bytes
from .geojson_models import path_to_geojson
from .path import START_POINT, GeoPoint, Path
from .tracker import walk

logger = structlog.get_logger(__name__)


def encode(data: bytes, start: GeoPoint = START_POINT) -> Path:
    """Encode bytes into a geodesic path.

    Args:
        data: Message to encode. May be empty.
        start: Origin of the walk. Decoding ignores it, but a non-default
            origin must be agreed out of band for the path to be recognised.

    Returns:
        Path of ``len(data) + 1`` points.
    """
    segments = encode_bytes(data)
    path = walk(segments, start)

    logger.debug(
        "encoding_path",
        data_bytes=len(data),
        points=len(path.points),
        total_distance=sum(seg.distance for seg in segments),
    )
    return path


def encode_to_geojson(data: bytes, start: GeoPoint = START_POINT) -> str:
    """Encode bytes straight to a GeoJSON document."""
    return path_to_geojson(encode(data, start))
