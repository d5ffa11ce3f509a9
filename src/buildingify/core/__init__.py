"""Core functionality for buildingify."""

from buildingify.core.coordinates import is_point_pair, normalize_point, reverse_axis_order
from buildingify.core.exceptions import (
    BuildingifyError,
    GeometryError,
    InvalidPointError,
    InvalidSequenceError,
    ValidationError,
)
from buildingify.core.intersections import find_coincident_points

__all__ = [
    "normalize_point",
    "reverse_axis_order",
    "is_point_pair",
    "find_coincident_points",
    "BuildingifyError",
    "InvalidPointError",
    "InvalidSequenceError",
    "GeometryError",
    "ValidationError",
]
