"""GeoJSON document models for encoded paths.

An encoded path is written as a FeatureCollection holding a single Feature
whose geometry is a LineString. Only the first feature's coordinates are
read back; ``properties`` are carried for compatibility and ignored.
"""

from __future__ import annotations

import math
from typing import Any, Literal

import structlog
from pydantic import BaseModel, Field, ValidationError

from .errors import GeoJSONFormatError
from .path import GeoPoint, Path

logger = structlog.get_logger(__name__)


class LineString(BaseModel):
    type: Literal["LineString"] = "LineString"
    coordinates: list[list[float]] = Field(default_factory=list)


class Feature(BaseModel):
    type: Literal["Feature"] = "Feature"
    properties: dict[str, Any] | None = Field(default_factory=dict)
    geometry: LineString


class FeatureCollection(BaseModel):
    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[Feature] = Field(default_factory=list)


def path_to_feature_collection(path: Path) -> FeatureCollection:
    """Wrap a path in a single-feature collection."""
    return FeatureCollection(
        features=[Feature(geometry=LineString(coordinates=path.coordinates()))],
    )


def path_to_geojson(path: Path) -> str:
    """Serialize a path as a GeoJSON string."""
    return path_to_feature_collection(path).model_dump_json()


def path_from_feature_collection(collection: FeatureCollection) -> Path:
    """Extract the path held by the first feature.

    Raises:
        GeoJSONFormatError: If there are no features, no coordinates, or a
            coordinate entry holds fewer than two numbers, a non-finite value,
            or a longitude/latitude outside [-180, 180] / [-90, 90].
    """
    if not collection.features:
        raise GeoJSONFormatError("No features found in this GeoJSON")

    coords = collection.features[0].geometry.coordinates
    if not coords:
        raise GeoJSONFormatError("No coordinates found in this GeoJSON")

    points: list[GeoPoint] = []
    for position, pair in enumerate(coords):
        if len(pair) < 2:
            raise GeoJSONFormatError(
                f"Coordinate {position} has {len(pair)} values, expected [lon, lat]"
            )
        lon, lat = pair[0], pair[1]
        if not (math.isfinite(lon) and math.isfinite(lat)):
            raise GeoJSONFormatError(f"Coordinate {position} is not finite: [{lon}, {lat}]")
        if not (-180.0 <= lon <= 180.0 and -90.0 <= lat <= 90.0):
            raise GeoJSONFormatError(
                f"Coordinate {position} is out of range: [{lon}, {lat}]"
            )
        points.append(GeoPoint(lon=lon, lat=lat))

    if len(collection.features) > 1:
        logger.debug("extra_features_ignored", count=len(collection.features) - 1)

    return Path(points=points)


def path_from_geojson(text: str | bytes) -> Path:
    """Parse a GeoJSON document into a path.

    Raises:
        GeoJSONFormatError: If the document is not valid JSON, does not match
            the FeatureCollection/LineString schema, or holds no path.
    """
    try:
        collection = FeatureCollection.model_validate_json(text)
    except ValidationError as e:
        raise GeoJSONFormatError(f"Failed to parse GeoJSON: {e.error_count()} error(s): {e}") from e
    return path_from_feature_collection(collection)
