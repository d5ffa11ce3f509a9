"""Main runner for unit generation along streets."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from buildingify.config import BuildingifyConfig
from buildingify.streets.anchors import BoundingBox, get_unit_anchors
from buildingify.streets.graph import Street, build_street_graph, get_street_features
from buildingify.units.exclusion import units_out_of_streets
from buildingify.units.generator import generate_unit_features
from buildingify.units.models import Unit, UnitStore
from buildingify.utils.io import features_to_geodataframe, save_geopackage

logger = logging.getLogger(__name__)

NEIGHBOR_COLUMNS = ["neighbor_previous", "neighbor_next", "neighbor_opposite"]


@dataclass
class BuildingifyResult:
    """Streets and surviving units of a run, ready to hand to a map layer.

    ``units`` keeps generation order: per street, positive side then negative side.
    """

    streets: list[Street]
    units: list[Unit]
    store: UnitStore
    bounding_box: BoundingBox
    removed_unit_ids: list[int] = field(default_factory=list)

    def street_collection(self) -> dict:
        """FeatureCollection of streets with their intersection mappings."""
        return {
            "type": "FeatureCollection",
            "features": [street.to_feature() for street in self.streets],
        }

    def unit_collection(self) -> dict:
        """FeatureCollection of units; neighbors that were removed are null."""
        return {
            "type": "FeatureCollection",
            "features": [
                unit.to_feature(self.store.resolved_neighbors(unit)) for unit in self.units
            ],
        }

    def streets_geodataframe(self):
        return features_to_geodataframe(self.street_collection()["features"])

    def units_geodataframe(self):
        return features_to_geodataframe(
            self.unit_collection()["features"], flatten={"neighbors": NEIGHBOR_COLUMNS}
        )

    def save_geopackage(self, path: str | Path) -> Path:
        """Write ``streets`` and ``units`` layers to a GeoPackage."""
        return save_geopackage(
            path, {"streets": self.streets_geodataframe(), "units": self.units_geodataframe()}
        )


def buildingify(
    bounding_box: Sequence[Sequence[float]] | BoundingBox,
    osm_data: dict,
    cfg: BuildingifyConfig | None = None,
) -> BuildingifyResult:
    """
    Generate streets and units for an area.

    Steps:
    1. Pick street features out of the data and link streets that share vertices
    2. Walk each street for anchor pairs inside the bounding box
    3. Build units on both sides of each street
    4. Remove units that cross a street

    Args:
        bounding_box: Two opposite [lat, lng] corners, or a BoundingBox
        osm_data: GeoJSON FeatureCollection with the area's features
        cfg: Run configuration, defaults to ``BuildingifyConfig()``

    Returns:
        BuildingifyResult with the streets and surviving units

    Raises:
        InvalidPointError: If a bounding box corner or street vertex is malformed

    Example:
        >>> result = buildingify([[43.30, -73.71], [43.31, -73.70]], osm_data)
        >>> units = result.unit_collection()
    """
    cfg = cfg or BuildingifyConfig()
    if not isinstance(bounding_box, BoundingBox):
        bounding_box = BoundingBox.from_corners(*bounding_box)

    street_features = get_street_features(osm_data, cfg.street_tag)
    streets = [Street.from_feature(i, feature) for i, feature in enumerate(street_features)]
    build_street_graph(streets)

    store = UnitStore()
    proposed_units: list[Unit] = []
    for street in streets:
        anchors = get_unit_anchors(street, bounding_box, cfg.unit_length_km, cfg.unit_buffer_km)
        new_units = generate_unit_features(
            anchors,
            street.id,
            store,
            proposed_units,
            street_buffer=cfg.street_buffer_km,
            house_depth=cfg.house_depth_km,
            check_overlaps=cfg.check_unit_overlaps,
        )
        proposed_units.extend(new_units)
    logger.info("Proposed %d units along %d streets", len(proposed_units), len(streets))

    units = proposed_units
    removed: list[int] = []
    if cfg.exclude_street_collisions:
        units = units_out_of_streets(proposed_units, streets)
        surviving = {unit.id for unit in units}
        removed = [unit.id for unit in proposed_units if unit.id not in surviving]
        for unit_id in removed:
            store.discard(unit_id)

    return BuildingifyResult(
        streets=streets,
        units=units,
        store=store,
        bounding_box=bounding_box,
        removed_unit_ids=removed,
    )
