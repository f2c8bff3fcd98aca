"""Core data models for 2D floor plans.

This module defines the plan graph (nodes, walls, holes, rooms and the house
that owns them) together with the derived types produced when room
boundaries are reconstructed from that graph.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Hashable, Optional, Tuple

EntityId = Hashable


def id_key(entity_id: EntityId) -> Tuple[bool, EntityId]:
    """Sort key putting integer ids before string ids.

    Loaders keep digit-only ids as ints and everything else as strings, so
    one house can mix both.
    """
    return isinstance(entity_id, str), entity_id


@dataclass(frozen=True)
class Point:
    """Represents a 2D point (or vector) in plan coordinates.

    Attributes:
        x: The x-coordinate of the point.
        y: The y-coordinate of the point.
    """

    x: float
    y: float


@dataclass(frozen=True)
class Node:
    """A labelled point of the plan graph.

    Attributes:
        id: Unique identifier for the node.
        point: Position of the node.
    """

    id: EntityId
    point: Point

    @property
    def x(self) -> float:
        return self.point.x

    @property
    def y(self) -> float:
        return self.point.y


@dataclass(frozen=True)
class Wall:
    """A straight wall between two nodes.

    Attributes:
        id: Unique identifier for the wall.
        start: ID of the node the wall starts at.
        end: ID of the node the wall ends at.
        thickness: Wall thickness, never negative.
        kind: Free-form type tag (e.g. "exterior", "partition").
    """

    id: EntityId
    start: EntityId
    end: EntityId
    thickness: float = 0.0
    kind: str = ""

    @property
    def is_valid(self) -> bool:
        """Whether the wall has two distinct endpoints and a non-negative thickness."""
        return (
            self.start is not None
            and self.end is not None
            and self.start != self.end
            and self.thickness >= 0
        )

    def endpoints(self, reversed: bool = False) -> Tuple[EntityId, EntityId]:
        """Return ``(source, target)`` node ids for the given traversal direction."""
        if reversed:
            return self.end, self.start
        return self.start, self.end


@dataclass(frozen=True)
class Hole:
    """An opening (door, window) placed along a wall.

    Attributes:
        id: Unique identifier for the hole.
        wall_id: ID of the wall hosting the opening.
        distance: Offset along the wall from its start node.
        width: Width of the opening.
        kind: Free-form type tag (e.g. "door", "window").
        direction: Free-form opening direction tag.
    """

    id: EntityId
    wall_id: EntityId
    distance: float
    width: float
    kind: str = ""
    direction: str = ""

    @property
    def is_valid(self) -> bool:
        return self.wall_id is not None and self.distance != 0 and self.width != 0


@dataclass(frozen=True)
class Room:
    """A declared room.

    The wall list is what the author believes encloses the room; it may
    contain several loops, repeated walls or open branches.

    Attributes:
        id: Unique identifier for the room.
        wall_ids: Tuple of wall IDs bounding the room.
        kind: Free-form type tag (e.g. "kitchen").
    """

    id: EntityId
    wall_ids: tuple[EntityId, ...]
    kind: str = ""


@dataclass(frozen=True)
class House:
    """Represents a complete floor plan.

    Attributes:
        nodes: Mapping of node ID to Node objects.
        walls: Mapping of wall ID to Wall objects.
        rooms: Mapping of room ID to Room objects.
        holes: Mapping of hole ID to Hole objects.
        name: Human-readable name of the plan.
    """

    nodes: Mapping[EntityId, Node]
    walls: Mapping[EntityId, Wall]
    rooms: Mapping[EntityId, Room] = field(default_factory=dict)
    holes: Mapping[EntityId, Hole] = field(default_factory=dict)
    name: str = ""


@dataclass(frozen=True)
class DirectedEdge:
    """A wall traversed in one direction.

    Two edges are the same edge when they share the wall and the direction;
    ``repeated`` is bookkeeping set on edges of a closed walk whose wall is
    walked more than once.
    """

    wall_id: EntityId
    reversed: bool
    source: EntityId
    target: EntityId
    repeated: bool = field(default=False, compare=False)

    @classmethod
    def along(cls, wall: Wall, reversed: bool = False) -> DirectedEdge:
        source, target = wall.endpoints(reversed)
        return cls(wall.id, reversed, source, target)


class Orientation(str, Enum):
    """Which side of a closed walk its interior lies on."""

    INWARD = "inward"
    OUTWARD = "outward"
    INDETERMINATE = "indeterminate"


@dataclass(frozen=True)
class RoomBoundary:
    """A closed walk of directed edges enclosing one face of the plan.

    Attributes:
        room_id: Owning room, or None when no declared room contains it.
        edges: The closed walk, in traversal order.
        orientation: Interior side of the walk.
    """

    room_id: Optional[EntityId]
    edges: Tuple[DirectedEdge, ...]
    orientation: Orientation

    @property
    def wall_ids(self) -> tuple[EntityId, ...]:
        return tuple(edge.wall_id for edge in self.edges)

    @property
    def node_ids(self) -> tuple[EntityId, ...]:
        """Vertex sequence of the walk; the closing vertex is not repeated."""
        return tuple(edge.source for edge in self.edges)

    @property
    def repeated_wall_ids(self) -> frozenset:
        return frozenset(edge.wall_id for edge in self.edges if edge.repeated)

    @property
    def is_closed(self) -> bool:
        if not self.edges:
            return False
        for prev, nxt in zip(self.edges, self.edges[1:] + self.edges[:1]):
            if prev.target != nxt.source:
                return False
        return True
