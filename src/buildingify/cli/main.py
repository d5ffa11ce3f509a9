"""CLI for buildingify."""

import argparse
import logging
import sys
from pathlib import Path

from buildingify.config import BuildingifyConfig
from buildingify.core.exceptions import BuildingifyError
from buildingify.runner import buildingify
from buildingify.utils.io import load_geojson, save_geojson, save_json


def main():
    """buildingify CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Generate building units along the streets of an OSM GeoJSON extract"
    )
    parser.add_argument(
        "--osm",
        type=str,
        dest="osm_path",
        default=str(Path.cwd() / "osm.geojson"),
        help="GeoJSON FeatureCollection with the area's OSM features",
    )
    parser.add_argument(
        "--bbox",
        type=float,
        nargs=4,
        required=True,
        metavar=("SOUTH", "WEST", "NORTH", "EAST"),
        help="Bounding box corners in lat/lng order",
    )
    parser.add_argument(
        "--out", type=str, default=BuildingifyConfig.output_dir, help="Output directory"
    )
    parser.add_argument(
        "--check-overlaps", action="store_true", help="Reject units overlapping earlier units"
    )
    parser.add_argument(
        "--keep-street-collisions",
        action="store_true",
        help="Keep units that cross a street",
    )
    parser.add_argument("--gpkg", action="store_true", help="Also write units.gpkg")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    if not Path(args.osm_path).exists():
        print(f"✖ OSM file not found: {args.osm_path}", file=sys.stderr)
        sys.exit(1)

    cfg = BuildingifyConfig(
        check_unit_overlaps=args.check_overlaps,
        exclude_street_collisions=not args.keep_street_collisions,
        output_dir=args.out,
    )
    south, west, north, east = args.bbox

    try:
        osm_data = load_geojson(Path(args.osm_path))
        result = buildingify([[south, west], [north, east]], osm_data, cfg)
    except BuildingifyError as e:
        print(f"✖ Generation failed: {e}", file=sys.stderr)
        sys.exit(1)

    out_dir = Path(cfg.output_dir)
    save_geojson(out_dir / "streets.geojson", result.street_collection()["features"])
    save_geojson(out_dir / "units.geojson", result.unit_collection()["features"])
    save_json(
        out_dir / "summary.json",
        {
            "streets": len(result.streets),
            "units": len(result.units),
            "removed_units": result.removed_unit_ids,
        },
    )
    if args.gpkg:
        result.save_geopackage(out_dir / "units.gpkg")

    print(f"✔ {len(result.units)} units along {len(result.streets)} streets: {out_dir}")


if __name__ == "__main__":
    main()
