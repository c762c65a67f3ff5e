"""Position tracking on a spherical Earth.

Bridges segment space and coordinate space. ``advance`` walks forward from a
point (encode side); ``measure`` recovers the segment between two known
points (decode side). Both use great-circle geodesics on a sphere with the
mean Earth radius, i.e. the haversine model.

Measured distances and bearings are rounded to whole numbers: the codec only
ever emits integers, and floating-point geodesics do not return them exactly.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog
from pyproj import Geod

from .codec import normalize_bearing
from .path import GeoPoint, Path, Segment

logger = structlog.get_logger(__name__)

EARTH_RADIUS_M = 6371008.8

# Sphere, not WGS84: the haversine model the paths are defined on
_SPHERE = Geod(a=EARTH_RADIUS_M, b=EARTH_RADIUS_M)


def advance(point: GeoPoint, distance: float, bearing: float) -> GeoPoint:
    """Destination reached from ``point`` along ``bearing`` for ``distance`` meters."""
    lon, lat, _back_az = _SPHERE.fwd(point.lon, point.lat, bearing, distance)
    return GeoPoint(lon=float(lon), lat=float(lat))


def measure(point_a: GeoPoint, point_b: GeoPoint) -> Segment:
    """Rounded great-circle distance and initial bearing from a to b.

    Returns:
        Segment whose distance is a whole number of meters and whose
        bearing is a whole number of degrees in [0, 360).
    """
    az12, _az21, dist = _SPHERE.inv(point_a.lon, point_a.lat, point_b.lon, point_b.lat)
    return Segment(
        distance=float(round(dist)),
        bearing=normalize_bearing(float(round(az12))),
    )


def walk(segments: Iterable[Segment], start: GeoPoint) -> Path:
    """Build a path by applying each segment to the previous point.

    Args:
        segments: Segments in message order.
        start: Origin of the walk.

    Returns:
        Path with one more point than there are segments.
    """
    points = [start]
    current = start
    for seg in segments:
        current = advance(current, seg.distance, seg.bearing)
        points.append(current)

    logger.debug("path_walked", segments=len(points) - 1, start=start.as_pair())
    return Path(points=points)


def segments_between(path: Path) -> list[Segment]:
    """Measure every consecutive pair of points in ``path``."""
    points = path.points
    return [measure(a, b) for a, b in zip(points, points[1:])]
