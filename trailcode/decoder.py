"""Path decoder for trailcode.

Decodes a path back to the original bytes by:
1. Measuring the rounded distance and bearing between each pair of
   consecutive points
2. Inverting each segment with the codec, using the segment's 1-based
   position as the sequence index

Each segment decodes independently of the others. A path of M points
yields M - 1 bytes; a lone start point yields no bytes.
"""

from __future__ import annotations

import structlog

from .codec import decode_segments
from .geojson_models import path_from_geojson
from .path import Path
from .tracker import segments_between

logger = structlog.get_logger(__name__)


def decode(path: Path) -> bytes:
    """Decode a path into the bytes it carries."""
    segments = segments_between(path)
    data = decode_segments(segments)

    logger.debug("decoding_path", points=len(path.points), data_bytes=len(data))
    return data


def decode_geojson(text: str | bytes) -> bytes:
    """Decode a GeoJSON document produced by ``encode_to_geojson``.

    Raises:
        GeoJSONFormatError: If the document holds no usable path.
    """
    return decode(path_from_geojson(text))
