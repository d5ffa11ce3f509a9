"""Coordinate order and shape normalisation.

GeoJSON coordinates are [lng, lat] (geometric order) while map display APIs work
with [lat, lng] (display order). Units and streets are built in geometric order
and handed to consumers in display order, so conversions happen at the seams.
"""

from __future__ import annotations

from collections.abc import Sequence
from numbers import Real
from typing import Any

from buildingify.core.exceptions import InvalidPointError


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def is_point_pair(value: Any) -> bool:
    """Whether ``value`` is exactly a two-element numeric coordinate pair."""
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes)):
        return False
    if len(value) != 2:
        return False
    return _is_number(value[0]) and _is_number(value[1])


def normalize_point(point: Any) -> list[float]:
    """
    Return the raw [lng, lat] pair of a point given in any supported shape.

    Accepted shapes, checked in this order:
        - a labeled point: a mapping or object with numeric ``lat`` and ``lng``
        - a point feature: a mapping with ``geometry.coordinates`` holding a pair
        - a raw pair, returned as a list without reordering

    Args:
        point: The value describing the point

    Returns:
        Coordinate pair as a list

    Raises:
        InvalidPointError: If the value matches none of the shapes
    """
    if isinstance(point, dict):
        lat, lng = point.get("lat"), point.get("lng")
    else:
        lat, lng = getattr(point, "lat", None), getattr(point, "lng", None)
    if _is_number(lat) and _is_number(lng):
        return [lng, lat]

    if isinstance(point, dict):
        geometry = point.get("geometry")
        if isinstance(geometry, dict) and is_point_pair(geometry.get("coordinates")):
            return list(geometry["coordinates"])

    if is_point_pair(point):
        return list(point)

    raise InvalidPointError(
        "Invalid point: point must be a coordinate pair, a lat/lng point or a point feature."
    )


def reverse_axis_order(coordinates):
    """
    Swap the axis order of every coordinate pair in a nested structure.

    Works for points, lines, polygons and their multi variants. Nesting depth is
    preserved and the input is left untouched.

    Args:
        coordinates: GeoJSON style coordinates

    Returns:
        New coordinates with each innermost pair reversed
    """
    if not len(coordinates):
        return []
    if not _is_number(coordinates[0]):
        return [reverse_axis_order(inner) for inner in coordinates]
    return [coordinates[1], coordinates[0]]
