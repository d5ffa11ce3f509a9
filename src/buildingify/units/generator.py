# src/buildingify/units/generator.py
"""Unit footprints on both sides of a street."""

from __future__ import annotations

import logging

from shapely.geometry import Polygon

from buildingify.config import MainConfig
from buildingify.core.definitions import NeighborSlot, Side
from buildingify.core.geodesy import bearing, destination
from buildingify.streets.anchors import AnchorPair
from buildingify.units.exclusion import polygons_overlap
from buildingify.units.models import Unit, UnitStore

logger = logging.getLogger(__name__)


def perpendicular_bearing(start: list[float], end: list[float], side: Side) -> float:
    """
    Heading perpendicular to the segment ``start``-``end`` toward one side.

    Bearings up to and including 90 degrees turn by +90 on the positive side,
    bearings above 90 turn by -90. The positive side is therefore not always
    on the same hand of the street.
    """
    angle = bearing(start, end)
    return angle + side * 90 if angle <= 90 else angle - side * 90


def unit_ring(
    anchor_pair: AnchorPair,
    heading: float,
    street_buffer: float = MainConfig.street_buffer_km,
    house_depth: float = MainConfig.house_depth_km,
) -> list[list[float]]:
    """Closed ring of a unit offset from an anchor pair along ``heading``."""
    anchor_a, anchor_b = anchor_pair
    ring = [
        destination(anchor_a, street_buffer, heading),
        destination(anchor_b, street_buffer, heading),
        destination(anchor_b, street_buffer + house_depth, heading),
        destination(anchor_a, street_buffer + house_depth, heading),
    ]
    ring.append(ring[0])
    return ring


def generate_unit_features(
    unit_anchors: list[AnchorPair],
    street_id: int,
    store: UnitStore,
    proposed_units: list[Unit],
    street_buffer: float = MainConfig.street_buffer_km,
    house_depth: float = MainConfig.house_depth_km,
    check_overlaps: bool = False,
) -> list[Unit]:
    """
    Build units on either side of a street, one per side per anchor pair.

    Sides are tried positive first. An accepted unit becomes the next neighbor
    of the last accepted unit on its side. When both sides of an anchor pair
    are accepted the two become each other's opposite neighbor.

    Args:
        unit_anchors: Anchor pairs of the street, in walking order
        street_id: Id of the street the units front onto
        store: Store that assigns ids and holds the units
        proposed_units: Units already accepted on other streets
        street_buffer: Distance from the street to the near edge of a unit, km
        house_depth: Depth of a unit, km
        check_overlaps: Reject units overlapping earlier ones

    Returns:
        New units, those of the positive side first, each side in walking order
    """
    unit_features: list[list[Unit]] = [[], []]

    for anchor_pair in unit_anchors:
        unit_pair: list[Unit | None] = [None, None]

        for side in (Side.POSITIVE, Side.NEGATIVE):
            heading = perpendicular_bearing(anchor_pair[0], anchor_pair[1], side)
            ring = unit_ring(anchor_pair, heading, street_buffer, house_depth)

            existing = (
                unit.polygon for unit in (*unit_features[0], *unit_features[1], *proposed_units)
            )
            if polygons_overlap(Polygon(ring), existing, enabled=check_overlaps):
                continue

            unit = store.add(street_id, ring, anchor_pair)

            same_side = unit_features[side.index]
            if same_side:
                store.link(unit, NeighborSlot.PREVIOUS, same_side[-1])

            if side is Side.NEGATIVE and unit_pair[0] is not None:
                store.link(unit, NeighborSlot.OPPOSITE, unit_pair[0])

            unit_pair[side.index] = unit

        for index, unit in enumerate(unit_pair):
            if unit is not None:
                unit_features[index].append(unit)

    units = unit_features[0] + unit_features[1]
    logger.debug(
        "Street %s: %d units from %d anchor pairs", street_id, len(units), len(unit_anchors)
    )
    return units
