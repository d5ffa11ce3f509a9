# src/buildingify/streets/__init__.py
"""Street graph and anchor generation."""

from .anchors import BoundingBox, get_unit_anchors
from .graph import IntersectionRecord, Street, build_street_graph, get_street_features

__all__ = [
    "BoundingBox",
    "IntersectionRecord",
    "Street",
    "build_street_graph",
    "get_street_features",
    "get_unit_anchors",
]
