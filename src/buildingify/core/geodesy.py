"""Spherical geodesy on [lng, lat] coordinates.

Distances are in kilometers and bearings in degrees clockwise from north.
All formulas treat the earth as a sphere of radius ``EARTH_RADIUS_KM``.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from buildingify.core.definitions import EARTH_RADIUS_KM
from buildingify.core.exceptions import GeometryError


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Great-circle (haversine) distance between two points in kilometers."""
    lat1, lat2 = math.radians(a[1]), math.radians(b[1])
    dlat = math.radians(b[1] - a[1])
    dlon = math.radians(b[0] - a[0])

    h = math.sin(dlat / 2) ** 2 + math.sin(dlon / 2) ** 2 * math.cos(lat1) * math.cos(lat2)
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def bearing(start: Sequence[float], end: Sequence[float]) -> float:
    """Initial bearing from ``start`` to ``end``, in the range (-180, 180]."""
    lon1, lon2 = math.radians(start[0]), math.radians(end[0])
    lat1, lat2 = math.radians(start[1]), math.radians(end[1])

    y = math.sin(lon2 - lon1) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(lon2 - lon1)
    return math.degrees(math.atan2(y, x))


def destination(origin: Sequence[float], distance_km: float, bearing_deg: float) -> list[float]:
    """
    Project a point along a great circle.

    Args:
        origin: Starting point [lng, lat]
        distance_km: Distance to travel in kilometers
        bearing_deg: Heading in degrees clockwise from north

    Returns:
        Destination point [lng, lat]
    """
    lon1 = math.radians(origin[0])
    lat1 = math.radians(origin[1])
    heading = math.radians(bearing_deg)
    angular = distance_km / EARTH_RADIUS_KM

    lat2 = math.asin(
        math.sin(lat1) * math.cos(angular)
        + math.cos(lat1) * math.sin(angular) * math.cos(heading)
    )
    lon2 = lon1 + math.atan2(
        math.sin(heading) * math.sin(angular) * math.cos(lat1),
        math.cos(angular) - math.sin(lat1) * math.sin(lat2),
    )
    return [math.degrees(lon2), math.degrees(lat2)]


def line_length(coordinates: Sequence[Sequence[float]]) -> float:
    """Total length of a polyline in kilometers."""
    return sum(distance(coordinates[i], coordinates[i + 1]) for i in range(len(coordinates) - 1))


def along(coordinates: Sequence[Sequence[float]], distance_km: float) -> list[float]:
    """
    Point at a given distance along a polyline.

    When the distance lands exactly on a vertex that vertex is returned. When it
    falls inside a segment the point is projected back from the segment's far
    vertex. Distances at or beyond the end of the line yield the final vertex
    itself, so callers can detect the end of the walk by comparing against it.

    Args:
        coordinates: Polyline vertices [lng, lat]
        distance_km: Distance from the first vertex in kilometers

    Returns:
        Point [lng, lat]

    Raises:
        GeometryError: If the polyline has no vertices
    """
    if len(coordinates) == 0:
        raise GeometryError("Cannot walk along an empty line")

    last = len(coordinates) - 1
    travelled = 0.0
    for i, coord in enumerate(coordinates):
        if distance_km >= travelled and i == last:
            break
        if travelled >= distance_km:
            overshot = distance_km - travelled
            if not overshot:
                return list(coord)
            direction = bearing(coord, coordinates[i - 1]) - 180
            return destination(coord, overshot, direction)
        travelled += distance(coord, coordinates[i + 1])

    return list(coordinates[last])
