# src/buildingify/units/__init__.py
"""Unit footprint generation and filtering."""

from .exclusion import polygons_overlap, units_out_of_streets
from .generator import generate_unit_features, perpendicular_bearing, unit_ring
from .models import Unit, UnitStore

__all__ = [
    "Unit",
    "UnitStore",
    "generate_unit_features",
    "perpendicular_bearing",
    "polygons_overlap",
    "unit_ring",
    "units_out_of_streets",
]
