"""Value types for geodesic paths.

A Path is an ordered list of GeoPoints that starts at a fixed origin and
gains one point per encoded byte. Consecutive points are joined by exactly
one Segment.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# Origin shared by every encode/decode run
START_LON = -105.11000504292936
START_LAT = 40.57187754636834


@dataclass(frozen=True)
class GeoPoint:
    """A position on the Earth's surface.

    Attributes:
        lon: Longitude in degrees.
        lat: Latitude in degrees.
    """

    lon: float
    lat: float

    def as_pair(self) -> list[float]:
        """Return ``[lon, lat]`` in GeoJSON coordinate order."""
        return [self.lon, self.lat]


@dataclass(frozen=True)
class Segment:
    """One step of the walk.

    Attributes:
        distance: Length of the step in meters.
        bearing: Initial bearing in degrees, in [0, 360).
    """

    distance: float
    bearing: float


START_POINT = GeoPoint(lon=START_LON, lat=START_LAT)


@dataclass
class Path:
    """An encoded walk.

    Attributes:
        points: Visited points, origin first.
    """

    points: list[GeoPoint] = field(default_factory=list)

    @property
    def start(self) -> GeoPoint:
        """The origin of the walk.

        Raises:
            ValueError: If the path has no points.
        """
        if not self.points:
            raise ValueError("Path has no points")
        return self.points[0]

    @property
    def segment_count(self) -> int:
        """Number of segments (= number of encoded bytes)."""
        return max(len(self.points) - 1, 0)

    def coordinates(self) -> list[list[float]]:
        """All points as GeoJSON ``[lon, lat]`` pairs."""
        return [p.as_pair() for p in self.points]
