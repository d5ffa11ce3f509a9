# src/buildingify/config.py
from dataclasses import dataclass

from buildingify.core.definitions import STREET_TAG
from buildingify.core.exceptions import ValidationError


class MainConfig:
    """
    Default dimensions for unit generation along streets.

    Attributes:
        unit_length_km: Length of a unit's street frontage
        unit_buffer_km: Gap left between consecutive units on a street
        street_buffer_km: Distance from the street centerline to the near edge of a unit
        house_depth_km: Depth of a unit, measured away from the street

    Notes:
        - All dimensional values are in kilometers
        - Distances are measured on the sphere, see ``buildingify.core.geodesy``
    """

    unit_length_km: float = 14 / 1000
    unit_buffer_km: float = 3 / 1000
    street_buffer_km: float = 6 / 1000
    house_depth_km: float = 18 / 1000


@dataclass
class BuildingifyConfig:
    """Configuration for a buildingify run."""

    unit_length_km: float = MainConfig.unit_length_km
    unit_buffer_km: float = MainConfig.unit_buffer_km
    street_buffer_km: float = MainConfig.street_buffer_km
    house_depth_km: float = MainConfig.house_depth_km
    # Unit-vs-unit overlap rejection. Off by default: enabling it changes the layout.
    check_unit_overlaps: bool = False
    exclude_street_collisions: bool = True
    street_tag: str = STREET_TAG
    output_dir: str = "outputs/buildingify"

    def __post_init__(self):
        for name in ("unit_length_km", "street_buffer_km", "house_depth_km"):
            if getattr(self, name) <= 0:
                raise ValidationError(f"{name} must be positive, got {getattr(self, name)}")
        if self.unit_buffer_km < 0:
            raise ValidationError(f"unit_buffer_km must not be negative, got {self.unit_buffer_km}")
