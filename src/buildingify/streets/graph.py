# src/buildingify/streets/graph.py
"""Street features and the street intersection graph."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from shapely.errors import GEOSException
from shapely.geometry import LineString

from buildingify.core.coordinates import normalize_point, reverse_axis_order
from buildingify.core.definitions import STREET_TAG
from buildingify.core.exceptions import GeometryError
from buildingify.core.intersections import find_coincident_points
from buildingify.utils.io import to_feature

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntersectionRecord:
    """A vertex shared by two streets.

    Attributes:
        coordinates: The shared vertex in display order [lat, lng]
        indices: Street id -> index of the vertex in that street's coordinates
    """

    coordinates: tuple[float, float]
    indices: dict[int, int]

    def to_dict(self) -> dict[str, Any]:
        return {
            "coordinates": list(self.coordinates),
            "indices": {str(street_id): index for street_id, index in self.indices.items()},
        }


@dataclass
class Street:
    """A street polyline with its intersections against other streets.

    ``coordinates`` are kept in geometric order [lng, lat], as read from GeoJSON.
    """

    id: int
    coordinates: list[list[float]]
    properties: dict[str, Any] = field(default_factory=dict)
    intersections: dict[int, list[IntersectionRecord]] = field(default_factory=dict)

    @classmethod
    def from_feature(cls, street_id: int, feature: dict) -> Street:
        return cls(
            id=street_id,
            coordinates=[list(coord) for coord in feature["geometry"]["coordinates"]],
            properties=dict(feature.get("properties") or {}),
        )

    @property
    def endpoint(self) -> list[float]:
        return self.coordinates[-1]

    def to_feature(self) -> dict:
        """GeoJSON feature carrying the intersection mapping as a property."""
        properties = dict(self.properties)
        properties["id"] = self.id
        properties["intersections"] = {
            str(other_id): [record.to_dict() for record in records]
            for other_id, records in self.intersections.items()
        }
        try:
            line = LineString(self.coordinates)
        except (GEOSException, ValueError) as e:
            raise GeometryError(f"Street {self.id} is not a valid line: {e}") from e
        return to_feature(line, properties)


def get_street_features(feature_collection: dict, tag: str = STREET_TAG) -> list[dict]:
    """
    Get all streets from GeoJSON data.

    Args:
        feature_collection: GeoJSON FeatureCollection, e.g. OSM data for the area
        tag: Property that marks a feature as a street

    Returns:
        LineString features carrying a truthy ``tag`` property, in input order
    """
    street_features = []
    for feature in feature_collection.get("features", []):
        geometry = feature.get("geometry") or {}
        properties = feature.get("properties") or {}
        if geometry.get("type") == "LineString" and properties.get(tag):
            street_features.append(feature)

    return street_features


def build_street_graph(streets: list[Street]) -> list[Street]:
    """
    Record every shared vertex between each pair of streets.

    Each unordered pair is compared once. When the pair shares at least one
    vertex, the same list of records is attached to both streets, keyed by the
    other street's id.

    Args:
        streets: Streets to link, updated in place

    Returns:
        The same list of streets

    Raises:
        InvalidPointError: If a street vertex cannot be read as a point
    """
    edges = 0
    for i, street in enumerate(streets):
        street_coords = [normalize_point(point) for point in street.coordinates]

        for other in streets[i + 1 :]:
            if other.id == street.id or other.id in street.intersections:
                continue

            other_coords = [normalize_point(point) for point in other.coordinates]
            matches = find_coincident_points(street_coords, other_coords, street.id, other.id)
            if not matches:
                continue

            records = [
                IntersectionRecord(tuple(reverse_axis_order(point)), indices)
                for point, indices in matches
            ]
            street.intersections[other.id] = records
            other.intersections[street.id] = records
            edges += 1
            logger.debug(
                "Streets %s and %s share %d vertices", street.id, other.id, len(records)
            )

    logger.info("Street graph: %d streets, %d intersecting pairs", len(streets), edges)
    return streets
