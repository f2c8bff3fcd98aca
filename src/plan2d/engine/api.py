"""Core API for reconstructing room boundaries.

This module wires the pipeline together: the walls of one room (or of all
rooms) are expanded into a directed edge graph, traced into closed walks,
classified by orientation and, when every room is processed at once,
matched back to the declared rooms.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from ..core.errors import RoomNotFound
from ..core.model import EntityId, House, Orientation, RoomBoundary, id_key
from ..core.topology import build_edge_graph
from .matcher import group_by_room, match_boundaries
from .orientation import classify
from .tracer import trace_walks

LOGGER = logging.getLogger(__name__)


def _all_room_walls(house: House) -> List[EntityId]:
    """Walls of every room, rooms in ascending id order."""
    wall_ids = []
    for room_id in sorted(house.rooms, key=id_key):
        wall_ids.extend(house.rooms[room_id].wall_ids)
    return wall_ids


def compute_room_boundaries(
    house: House,
    room_id: Optional[EntityId] = None,
    *,
    include_outward: bool = False,
) -> List[RoomBoundary]:
    """Reconstruct the closed boundaries enclosed by a room's walls.

    Args:
        house: The house to read; it is never modified.
        room_id: Room to decompose. When omitted, the walls of every room
            are decomposed together and each boundary is assigned to the
            first room (ascending id) whose walls contain it.
        include_outward: Also return walks classified as outward, i.e.
            exterior silhouettes and the outlines of enclosed obstacles.

    Returns:
        Boundaries in trace order. Empty when there are no walls to process.

    Raises:
        RoomNotFound: If ``room_id`` is given but not declared.
        InvalidHouse: If a processed wall or node does not exist.
        MalformedGraph: If the walls form loops sharing a single node in a
            way the tracer cannot separate.
    """
    if room_id is not None:
        if room_id not in house.rooms:
            raise RoomNotFound(room_id)
        wall_ids = list(house.rooms[room_id].wall_ids)
    else:
        wall_ids = _all_room_walls(house)

    if not wall_ids:
        LOGGER.debug("No walls to process for room %r", room_id)
        return []

    graph = build_edge_graph(house, wall_ids)
    walks = trace_walks(house, graph)

    boundaries = [
        RoomBoundary(room_id=room_id, edges=edges, orientation=classify(house, edges))
        for edges in walks
    ]

    if room_id is None:
        boundaries = match_boundaries(house, boundaries)

    if not include_outward:
        boundaries = [b for b in boundaries if b.orientation is not Orientation.OUTWARD]

    LOGGER.debug(
        "Room %r: %d walks traced, %d boundaries returned",
        room_id,
        len(walks),
        len(boundaries),
    )
    return boundaries


def room_boundary_map(
    house: House, include_outward: bool = False
) -> Dict[Optional[EntityId], List[RoomBoundary]]:
    """Group the boundaries of all rooms by matched room id (unmatched under None)."""
    return dict(group_by_room(compute_room_boundaries(house, include_outward=include_outward)))
