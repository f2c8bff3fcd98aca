"""Orientation of closed walks.

The lexicographically smallest vertex of a walk always lies on its outer
silhouette, so the turn made there tells which side of the walk the
enclosed face is on.
"""

from __future__ import annotations

from typing import Optional, Sequence

from ..core.model import DirectedEdge, House, Orientation
from ..geom.angles import increased_cos
from ..geom.vector import lexicographic_key

# Global parameters
INDETERMINATE_SCORE = 0.0  # Both boundary edges leave the pivot along the same ray
INWARD_MAX_SCORE = 2.0  # Sweeps up to half a turn keep the face inside the walk


def find_pivot(house: House, edges: Sequence[DirectedEdge]) -> Optional[int]:
    """Index of the non-repeated edge whose source vertex is lexicographically smallest."""
    pivot = None
    pivot_key = None
    for index, edge in enumerate(edges):
        if edge.repeated:
            continue
        key = lexicographic_key(house.nodes[edge.source])
        if pivot is None or key < pivot_key:
            pivot, pivot_key = index, key
    return pivot


def find_incoming(edges: Sequence[DirectedEdge], pivot: int) -> Optional[int]:
    """Index of the nearest earlier non-repeated edge that ends at the pivot's source.

    The walk is cyclic, so the scan wraps around past the first edge.
    """
    node_id = edges[pivot].source
    count = len(edges)
    for step in range(1, count):
        index = (pivot - step) % count
        edge = edges[index]
        if edge.repeated:
            continue
        if edge.target == node_id:
            return index
    return None


def classify(house: House, edges: Sequence[DirectedEdge]) -> Orientation:
    """Tell whether a closed walk encloses its face (inward) or wraps around it (outward).

    Args:
        house: House providing node coordinates.
        edges: Closed walk with repeated edges already flagged.

    Returns:
        The walk orientation; INDETERMINATE when the walk has no usable
        pivot or its two edges at the pivot are collinear and overlapping.
    """
    if not edges:
        return Orientation.INDETERMINATE

    pivot = find_pivot(house, edges)
    if pivot is None:
        return Orientation.INDETERMINATE
    incoming = find_incoming(edges, pivot)
    if incoming is None:
        return Orientation.INDETERMINATE

    pivot_edge = edges[pivot]
    score = increased_cos(
        house.nodes[pivot_edge.source],
        house.nodes[pivot_edge.target],
        house.nodes[edges[incoming].source],
    )

    if score == INDETERMINATE_SCORE:
        return Orientation.INDETERMINATE
    if score <= INWARD_MAX_SCORE:
        return Orientation.INWARD
    return Orientation.OUTWARD
