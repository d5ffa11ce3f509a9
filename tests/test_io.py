"""Tests for I/O utilities."""

import json
import tempfile
from pathlib import Path

import geopandas as gpd
import pytest
from shapely.geometry import LineString, Point, Polygon

from buildingify.utils.io import (
    features_to_geodataframe,
    load_geojson,
    save_geojson,
    save_geopackage,
    save_json,
    to_feature,
)

SQUARE = {
    "type": "Feature",
    "properties": {"id": 1, "neighbors": [None, 2, 3], "street_anchors": [[0.0, 0.0]]},
    "geometry": {
        "type": "Polygon",
        "coordinates": [[[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0], [0.0, 0.0]]],
    },
}


class TestGeoJSON:
    """Tests for GeoJSON load/save."""

    def test_save_then_load(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "nested" / "units.geojson"

            save_geojson(path, [SQUARE])
            loaded = load_geojson(path)

            assert loaded == {"type": "FeatureCollection", "features": [SQUARE]}

    def test_load_missing_file(self):
        with pytest.raises(FileNotFoundError):
            load_geojson(Path("does-not-exist.geojson"))

    def test_save_json(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "summary.json"
            save_json(path, {"units": 3})
            assert json.loads(path.read_text()) == {"units": 3}


class TestFeaturesToGeoDataFrame:
    """Tests for features_to_geodataframe."""

    def test_list_properties_stored_as_json(self):
        gdf = features_to_geodataframe([SQUARE])

        assert isinstance(gdf, gpd.GeoDataFrame)
        assert gdf.crs.to_string() == "EPSG:4326"
        assert json.loads(gdf.iloc[0]["neighbors"]) == [None, 2, 3]
        assert gdf.iloc[0].geometry.area == pytest.approx(1.0)

    def test_flatten(self):
        gdf = features_to_geodataframe([SQUARE], flatten={"neighbors": ["a", "b", "c"]})

        assert "neighbors" not in gdf.columns
        assert gdf.iloc[0]["b"] == 2
        assert gdf.iloc[0]["c"] == 3

    def test_empty(self):
        gdf = features_to_geodataframe([])
        assert gdf.empty
        assert gdf.crs.to_string() == "EPSG:4326"


class TestSaveGeopackage:
    """Tests for save_geopackage."""

    def test_writes_layers_and_skips_empty(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "out.gpkg"
            layers = {
                "units": features_to_geodataframe([SQUARE]),
                "nothing": features_to_geodataframe([]),
            }

            result = save_geopackage(path, layers)

            assert result == path
            assert len(gpd.read_file(path, layer="units")) == 1
            assert "nothing" not in gpd.list_layers(path)["name"].tolist()


class TestToFeature:
    """Tests for to_feature."""

    def test_point(self):
        feature = to_feature(Point(1.5, 2.5), {"id": 1})

        assert feature == {
            "type": "Feature",
            "properties": {"id": 1},
            "geometry": {"type": "Point", "coordinates": [1.5, 2.5]},
        }

    def test_line_coordinates_are_lists(self):
        feature = to_feature(LineString([(0.0, 0.0), (1.0, 1.0)]))

        assert feature["properties"] == {}
        assert feature["geometry"]["coordinates"] == [[0.0, 0.0], [1.0, 1.0]]
        assert all(isinstance(c, list) for c in feature["geometry"]["coordinates"])

    def test_polygon_keeps_exact_coordinates(self):
        ring = [[0.1, 0.2], [0.30000000000000004, 0.2], [0.3, 0.7], [0.1, 0.2]]

        feature = to_feature(Polygon(ring))

        assert feature["geometry"]["type"] == "Polygon"
        assert feature["geometry"]["coordinates"] == [ring]
