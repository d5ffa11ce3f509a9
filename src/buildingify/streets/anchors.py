# src/buildingify/streets/anchors.py
"""Anchor points for units along a street."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from buildingify.config import MainConfig
from buildingify.core.coordinates import is_point_pair, reverse_axis_order
from buildingify.core.exceptions import InvalidPointError
from buildingify.core.geodesy import along
from buildingify.streets.graph import Street

logger = logging.getLogger(__name__)

AnchorPair = tuple[list[float], list[float]]


@dataclass(frozen=True)
class BoundingBox:
    """An axis-aligned lat/lng rectangle."""

    south: float
    west: float
    north: float
    east: float

    @classmethod
    def from_corners(cls, corner_a: Sequence[float], corner_b: Sequence[float]) -> BoundingBox:
        """
        Build a box from two opposite [lat, lng] corners given in any order.

        Raises:
            InvalidPointError: If either corner is not a coordinate pair
        """
        if not (is_point_pair(corner_a) and is_point_pair(corner_b)):
            raise InvalidPointError("Bounding box corners must be [lat, lng] pairs.")
        return cls(
            south=min(corner_a[0], corner_b[0]),
            west=min(corner_a[1], corner_b[1]),
            north=max(corner_a[0], corner_b[0]),
            east=max(corner_a[1], corner_b[1]),
        )

    def contains(self, lat_lng: Sequence[float]) -> bool:
        """Inclusive test for a point in display order [lat, lng]."""
        lat, lng = lat_lng
        return self.south <= lat <= self.north and self.west <= lng <= self.east


def get_unit_anchors(
    street: Street,
    bounding_box: BoundingBox,
    unit_length: float = MainConfig.unit_length_km,
    unit_buffer: float = MainConfig.unit_buffer_km,
) -> list[AnchorPair]:
    """
    Walk a street and collect anchor pairs for potential units.

    Pairs start at distance 0 and are ``unit_length`` long, separated by
    ``unit_buffer``. The walk stops as soon as a pair's end point is the
    street's final vertex; that pair is not used. Pairs with either point
    outside the bounding box are dropped.

    Args:
        street: Street to walk, coordinates in [lng, lat]
        bounding_box: Region the anchors must fall in
        unit_length: Length of each pair in kilometers
        unit_buffer: Gap between consecutive pairs in kilometers

    Returns:
        Accepted anchor pairs in [lng, lat], in walking order

    Raises:
        GeometryError: If the street has no coordinates
    """
    coordinates = street.coordinates
    anchors: list[AnchorPair] = []

    start_anchor = along(coordinates, 0)
    end_anchor = along(coordinates, unit_length)
    endpoint = street.endpoint
    distance_along = unit_length
    dropped = 0

    while end_anchor != endpoint:
        if bounding_box.contains(reverse_axis_order(start_anchor)) and bounding_box.contains(
            reverse_axis_order(end_anchor)
        ):
            anchors.append((start_anchor, end_anchor))
        else:
            dropped += 1

        start_anchor = along(coordinates, distance_along + unit_buffer)
        end_anchor = along(coordinates, distance_along + unit_buffer + unit_length)
        distance_along += unit_buffer + unit_length

    logger.debug(
        "Street %s: %d anchor pairs, %d outside bounding box", street.id, len(anchors), dropped
    )
    return anchors
