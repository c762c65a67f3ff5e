"""Tests for GeoJSON path models."""

import json

import pytest

from trailcode.errors import GeoJSONFormatError
from trailcode.geojson_models import (
    FeatureCollection,
    path_from_feature_collection,
    path_from_geojson,
    path_to_feature_collection,
    path_to_geojson,
)
from trailcode.path import START_POINT, GeoPoint, Path


class TestSerialization:
    def test_single_feature(self):
        collection = path_to_feature_collection(Path(points=[START_POINT]))
        assert collection.type == "FeatureCollection"
        assert len(collection.features) == 1
        assert collection.features[0].geometry.type == "LineString"

    def test_empty_properties(self):
        doc = json.loads(path_to_geojson(Path(points=[START_POINT])))
        assert doc["features"][0]["properties"] == {}

    def test_coordinate_order_is_lon_lat(self):
        doc = json.loads(path_to_geojson(Path(points=[GeoPoint(lon=1.5, lat=-2.5)])))
        assert doc["features"][0]["geometry"]["coordinates"] == [[1.5, -2.5]]

    def test_floats_survive_text(self):
        points = [START_POINT, GeoPoint(lon=-105.11000504292936 + 1e-13, lat=40.571877546368345)]
        parsed = path_from_geojson(path_to_geojson(Path(points=points)))
        for got, want in zip(parsed.points, points):
            assert got.lon == pytest.approx(want.lon, abs=1e-12)
            assert got.lat == pytest.approx(want.lat, abs=1e-12)


class TestParsing:
    def test_integer_coordinates(self):
        text = json.dumps(
            {
                "type": "FeatureCollection",
                "features": [
                    {"type": "Feature", "geometry": {"type": "LineString", "coordinates": [[1, 2]]}}
                ],
            }
        )
        path = path_from_geojson(text)
        assert path.points == [GeoPoint(lon=1.0, lat=2.0)]

    def test_altitude_ignored(self):
        collection = FeatureCollection.model_validate(
            {"features": [{"geometry": {"coordinates": [[1.0, 2.0, 1500.0]]}}]}
        )
        path = path_from_feature_collection(collection)
        assert path.points == [GeoPoint(lon=1.0, lat=2.0)]

    def test_wrong_collection_type(self):
        with pytest.raises(GeoJSONFormatError):
            path_from_geojson('{"type": "Feature", "features": []}')

    def test_no_features(self):
        with pytest.raises(GeoJSONFormatError, match="No features"):
            path_from_feature_collection(FeatureCollection())
