"""Core definitions for buildingify.

This module contains enumeration types and constants shared by the street and
unit generation steps.

Classes:
    NeighborSlot: Positions in a unit's three-slot neighbor array.
    Side: The two sides of a street a unit can be placed on.
"""

from enum import IntEnum

# Mean earth radius in kilometers, as used by the haversine primitives.
EARTH_RADIUS_KM = 6371.0088

STREET_TAG = "highway"


class NeighborSlot(IntEnum):
    """Slots of a unit's neighbor array.

    Attributes:
        PREVIOUS: Preceding unit on the same side of the street.
        NEXT: Following unit on the same side of the street.
        OPPOSITE: Unit across the street built from the same anchor pair.
    """

    PREVIOUS = 0
    NEXT = 1
    OPPOSITE = 2


class Side(IntEnum):
    """Street sides, valued by the sign applied to the perpendicular heading.

    The positive side is always attempted first for an anchor pair.
    """

    POSITIVE = 1
    NEGATIVE = -1

    @property
    def index(self) -> int:
        """Position of the side in per-side lists."""
        return 0 if self is Side.POSITIVE else 1
