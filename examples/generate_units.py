"""
Generate Units on a Street Grid
-------------------------------
This example builds a small synthetic street grid, runs buildingify on it and
writes the streets and units as GeoJSON.

Usage:
    python examples/generate_units.py [--output-dir DIR] [--check-overlaps]
"""

import argparse
from pathlib import Path

from buildingify import BuildingifyConfig, buildingify
from buildingify.utils.io import save_geojson

# Lower-left corner of the grid, lng/lat
ORIGIN = (-73.7100, 43.3000)
BLOCK_DEG = 0.0010


def grid_streets(rows=3, cols=3):
    """East-west and north-south streets sharing their crossing vertices."""
    xs = [ORIGIN[0] + i * BLOCK_DEG for i in range(cols + 1)]
    ys = [ORIGIN[1] + j * BLOCK_DEG for j in range(rows + 1)]

    features = []
    for y in ys:
        features.append(_street([[x, y] for x in xs], "residential"))
    for x in xs:
        features.append(_street([[x, y] for y in ys], "tertiary"))
    return {"type": "FeatureCollection", "features": features}


def _street(coordinates, kind):
    return {
        "type": "Feature",
        "properties": {"highway": kind},
        "geometry": {"type": "LineString", "coordinates": coordinates},
    }


def main():
    parser = argparse.ArgumentParser(description="Generate units on a synthetic street grid")
    parser.add_argument("--output-dir", default="outputs/example_units", help="Output directory")
    parser.add_argument("--check-overlaps", action="store_true", help="Reject overlapping units")
    args = parser.parse_args()

    osm_data = grid_streets()
    bounding_box = [
        [ORIGIN[1], ORIGIN[0]],
        [ORIGIN[1] + 3 * BLOCK_DEG, ORIGIN[0] + 3 * BLOCK_DEG],
    ]
    config = BuildingifyConfig(check_unit_overlaps=args.check_overlaps, output_dir=args.output_dir)

    print("=" * 60)
    print("Generating units")
    print("=" * 60)
    result = buildingify(bounding_box, osm_data, config)

    out_dir = Path(config.output_dir)
    save_geojson(out_dir / "streets.geojson", result.street_collection()["features"])
    save_geojson(out_dir / "units.geojson", result.unit_collection()["features"])

    print(f"Streets: {len(result.streets)}")
    print(f"Units: {len(result.units)} ({len(result.removed_unit_ids)} removed)")
    print(f"Output: {out_dir}")


if __name__ == "__main__":
    main()
