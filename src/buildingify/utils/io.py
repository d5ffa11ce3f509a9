"""Input/output utilities."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import geopandas as gpd
from shapely.geometry import mapping, shape
from shapely.geometry.base import BaseGeometry


def load_geojson(path: Path) -> dict:
    """Load a GeoJSON file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"GeoJSON file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def save_geojson(path: Path, features: list[dict]) -> None:
    """Save features to a GeoJSON file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump({"type": "FeatureCollection", "features": features}, f)


def save_json(path: Path, data: dict[str, Any]) -> None:
    """Save data to a JSON file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def to_feature(geom: BaseGeometry, props: dict[str, Any] | None = None) -> dict:
    """Convert a Shapely geometry to a GeoJSON feature."""
    geometry = mapping(geom)
    # GeoJSON wants nested lists, shapely hands back tuples
    geometry["coordinates"] = json.loads(json.dumps(geometry["coordinates"]))
    return {"type": "Feature", "properties": props or {}, "geometry": geometry}


def features_to_geodataframe(features: list[dict], flatten: dict[str, list[str]] | None = None):
    """
    Build a WGS84 GeoDataFrame from GeoJSON features.

    Args:
        features: GeoJSON features
        flatten: Property name -> column names; list-valued properties listed
            here are spread over those columns instead of kept as a list

    Returns:
        GeoDataFrame in EPSG:4326. Remaining list or dict properties are stored
        as JSON text so the frame can be written to any OGR driver.
    """
    flatten = flatten or {}
    rows = []
    for feature in features:
        row: dict[str, Any] = {}
        for key, value in (feature.get("properties") or {}).items():
            if key in flatten:
                row.update(zip(flatten[key], value))
            elif isinstance(value, (list, dict)):
                row[key] = json.dumps(value)
            else:
                row[key] = value
        row["geometry"] = shape(feature["geometry"])
        rows.append(row)

    if not rows:
        return gpd.GeoDataFrame(geometry=[], crs="EPSG:4326")
    return gpd.GeoDataFrame(rows, geometry="geometry", crs="EPSG:4326")


def save_geopackage(path: str | Path, layers: dict[str, gpd.GeoDataFrame]) -> Path:
    """Write GeoDataFrames as layers of a GeoPackage, skipping empty ones."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    for layer_name, gdf in layers.items():
        if gdf.empty:
            continue
        gdf.to_file(path, layer=layer_name, driver="GPKG")
    return path
