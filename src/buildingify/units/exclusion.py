# src/buildingify/units/exclusion.py
"""Overlap and street-collision filters for proposed units."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from shapely.geometry import LineString, Polygon
from shapely.strtree import STRtree

from buildingify.streets.graph import Street
from buildingify.units.models import Unit

logger = logging.getLogger(__name__)


def polygons_overlap(
    candidate: Polygon, existing: Iterable[Polygon], enabled: bool = False
) -> bool:
    """
    Check whether a polygon shares area with any polygon in a collection.

    Unit-vs-unit overlap checking is a policy switch that is off by default.
    While disabled this always reports no overlap, which is how layouts have
    always been generated. Polygons that only touch along an edge or corner do
    not overlap.

    Args:
        candidate: Polygon being proposed
        existing: Polygons already proposed
        enabled: Whether to actually test for overlap

    Returns:
        True if ``candidate`` overlaps any member of ``existing``
    """
    if not enabled:
        return False

    for polygon in existing:
        if candidate.intersects(polygon) and not candidate.touches(polygon):
            return True
    return False


def units_out_of_streets(units: list[Unit], streets: Iterable[Street]) -> list[Unit]:
    """
    Get the units that do not cross any street.

    A unit is removed when a street's line meets its boundary. Every street is
    checked against the units still remaining, so a unit crossing several
    streets is removed once.

    Args:
        units: Proposed units, in generation order
        streets: Streets to test against

    Returns:
        Surviving units in their original order
    """
    remaining = list(units)

    for street in streets:
        if not remaining or len(street.coordinates) < 2:
            continue

        line = LineString(street.coordinates)
        boundaries = [unit.polygon.exterior for unit in remaining]
        tree = STRtree(boundaries)
        hits = set(tree.query(line, predicate="intersects").tolist())
        if hits:
            logger.debug("Street %s crosses %d units", street.id, len(hits))
        remaining = [unit for index, unit in enumerate(remaining) if index not in hits]

    logger.info("Street collisions removed %d of %d units", len(units) - len(remaining), len(units))
    return remaining
