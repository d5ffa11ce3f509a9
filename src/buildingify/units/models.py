# src/buildingify/units/models.py
"""Unit footprints and the id-indexed store that links them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from shapely.geometry import Polygon

from buildingify.core.coordinates import reverse_axis_order
from buildingify.core.definitions import NeighborSlot
from buildingify.utils.io import to_feature


@dataclass
class Unit:
    """A rectangular building lot beside a street.

    Neighbors are stored as unit ids, indexed by ``NeighborSlot``, and resolved
    through a ``UnitStore``. ``ring`` is the closed five-point exterior in
    [lng, lat]; ``street_anchors`` are the anchor pair in [lat, lng].
    """

    id: int
    street_id: int
    ring: list[list[float]]
    street_anchors: list[list[float]]
    neighbors: list[int | None] = field(default_factory=lambda: [None, None, None])

    @property
    def polygon(self) -> Polygon:
        return Polygon(self.ring)

    def to_feature(self, neighbors: list[int | None] | None = None) -> dict:
        """GeoJSON feature; ``neighbors`` overrides the stored ids when given."""
        properties: dict[str, Any] = {
            "id": self.id,
            "street_id": self.street_id,
            "street_anchors": [list(anchor) for anchor in self.street_anchors],
            "neighbors": list(self.neighbors if neighbors is None else neighbors),
        }
        return to_feature(self.polygon, properties)


class UnitStore:
    """Units indexed by id.

    Removing a unit leaves references to it in other units' neighbor slots in
    place; lookups of a removed id return None.
    """

    def __init__(self):
        self._units: dict[int, Unit] = {}
        self._last_id = 0

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[Unit]:
        return iter(list(self._units.values()))

    def __contains__(self, unit_id: int) -> bool:
        return unit_id in self._units

    def add(self, street_id: int, ring: list[list[float]], anchor_pair) -> Unit:
        """Create and store a unit with the next sequential id."""
        self._last_id += 1
        unit = Unit(
            id=self._last_id,
            street_id=street_id,
            ring=ring,
            street_anchors=[reverse_axis_order(anchor) for anchor in anchor_pair],
        )
        self._units[unit.id] = unit
        return unit

    def get(self, unit_id: int | None) -> Unit | None:
        if unit_id is None:
            return None
        return self._units.get(unit_id)

    def discard(self, unit_id: int) -> None:
        self._units.pop(unit_id, None)

    def neighbor(self, unit: Unit, slot: NeighborSlot) -> Unit | None:
        """Resolve a neighbor slot, None when unset or no longer stored."""
        return self.get(unit.neighbors[slot])

    def link(self, unit: Unit, slot: NeighborSlot, other: Unit) -> None:
        """Point ``unit``'s slot at ``other`` and set the mirrored slot on ``other``."""
        mirrored = {
            NeighborSlot.PREVIOUS: NeighborSlot.NEXT,
            NeighborSlot.NEXT: NeighborSlot.PREVIOUS,
            NeighborSlot.OPPOSITE: NeighborSlot.OPPOSITE,
        }[slot]
        unit.neighbors[slot] = other.id
        other.neighbors[mirrored] = unit.id

    def resolved_neighbors(self, unit: Unit) -> list[int | None]:
        """Neighbor ids with removed units replaced by None."""
        return [
            neighbor_id if neighbor_id in self._units else None for neighbor_id in unit.neighbors
        ]
