"""Shared-vertex detection between coordinate sequences."""

from __future__ import annotations

from collections.abc import Hashable, Sequence

from buildingify.core.coordinates import is_point_pair
from buildingify.core.exceptions import InvalidSequenceError


def find_coincident_points(
    seq_a: Sequence,
    seq_b: Sequence,
    tag_a: Hashable | None = None,
    tag_b: Hashable | None = None,
) -> list:
    """
    Find every pair of positions at which two sequences hold the same point.

    Points are compared with exact equality. Inputs are expected to share
    vertices from the source data, so no tolerance is applied.

    Args:
        seq_a: First sequence of coordinate pairs
        seq_b: Second sequence of coordinate pairs
        tag_a: Identifier of ``seq_a``, used as a key in the index mapping
        tag_b: Identifier of ``seq_b``, used as a key in the index mapping

    Returns:
        One entry per matching (i, j), ordered by i then j. With both tags
        given an entry is ``(point, {tag_a: i, tag_b: j})``, otherwise the
        point alone.

    Raises:
        InvalidSequenceError: If any element of either sequence is not a pair
    """
    for element in (*seq_a, *seq_b):
        if not is_point_pair(element):
            raise InvalidSequenceError(
                "Every element of each sequence must be a coordinate pair."
            )

    with_indices = tag_a is not None and tag_b is not None
    matches = []
    for i, el_a in enumerate(seq_a):
        for j, el_b in enumerate(seq_b):
            if el_a[0] == el_b[0] and el_a[1] == el_b[1]:
                point = list(el_a)
                matches.append((point, {tag_a: i, tag_b: j}) if with_indices else point)

    return matches
