"""Assign traced walks to the declared rooms whose wall sets contain them."""

from __future__ import annotations

from dataclasses import replace
from typing import List, Mapping, Optional, Sequence, Tuple

from ..core.model import EntityId, House, RoomBoundary, id_key


def is_sorted_subset(inner: Sequence, outer: Sequence) -> bool:
    """Whether every item of ``inner`` appears in ``outer``.

    Both sequences must be sorted by ``id_key`` and free of duplicates; the
    check is a single merge pass over the two.
    """
    j = 0
    for item in inner:
        key = id_key(item)
        while j < len(outer) and id_key(outer[j]) < key:
            j += 1
        if j == len(outer) or outer[j] != item:
            return False
        j += 1
    return True


def room_wall_sets(house: House) -> List[Tuple[EntityId, Tuple[EntityId, ...]]]:
    """Sorted distinct wall ids of every room, rooms in ascending id order."""
    return [
        (room_id, tuple(sorted(set(house.rooms[room_id].wall_ids), key=id_key)))
        for room_id in sorted(house.rooms, key=id_key)
    ]


def match_room(
    wall_ids: Sequence[EntityId],
    wall_sets: Sequence[Tuple[EntityId, Tuple[EntityId, ...]]],
) -> Optional[EntityId]:
    """First room (in the given order) whose wall set contains ``wall_ids``."""
    walk_walls = tuple(sorted(set(wall_ids), key=id_key))
    if not walk_walls:
        return None
    for room_id, room_walls in wall_sets:
        if is_sorted_subset(walk_walls, room_walls):
            return room_id
    return None


def match_boundaries(house: House, boundaries: Sequence[RoomBoundary]) -> List[RoomBoundary]:
    """Return ``boundaries`` with ``room_id`` set from the declared rooms.

    Rooms are tried in ascending id order, so when several rooms contain a
    boundary the smallest room id wins. Boundaries no room contains keep a
    ``None`` room id.
    """
    wall_sets = room_wall_sets(house)
    return [
        replace(boundary, room_id=match_room(boundary.wall_ids, wall_sets))
        for boundary in boundaries
    ]


def group_by_room(boundaries: Sequence[RoomBoundary]) -> Mapping[Optional[EntityId], List[RoomBoundary]]:
    grouped = {}
    for boundary in boundaries:
        grouped.setdefault(boundary.room_id, []).append(boundary)
    return grouped
