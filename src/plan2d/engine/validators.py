"""Referential-integrity checks for houses.

Boundary extraction assumes the house it is given is consistent: every wall
joins two distinct existing nodes and every room or hole references
existing walls. Loaders run these checks before handing a house over.
"""

from __future__ import annotations

from ..core.errors import InvalidHouse
from ..core.model import House


def validate_nodes(house: House) -> bool:
    """Validate that every node is stored under its own id."""
    return all(node.id == node_id for node_id, node in house.nodes.items())


def validate_walls(house: House) -> bool:
    """Validate wall invariants.

    This validator ensures that:
    - Each wall is stored under its own id
    - Start and end nodes are distinct and exist in the house
    - Thickness is not negative

    Args:
        house: The house to validate.

    Returns:
        True if all walls are valid, False otherwise.
    """
    for wall_id, wall in house.walls.items():
        if wall.id != wall_id or not wall.is_valid:
            return False
        if wall.start not in house.nodes or wall.end not in house.nodes:
            return False
    return True


def validate_rooms(house: House) -> bool:
    """Validate that every wall a room lists exists in the house."""
    for room_id, room in house.rooms.items():
        if room.id != room_id:
            return False
        if any(wall_id not in house.walls for wall_id in room.wall_ids):
            return False
    return True


def validate_holes(house: House) -> bool:
    """Validate that every hole has a size and sits on an existing wall."""
    for hole_id, hole in house.holes.items():
        if hole.id != hole_id or not hole.is_valid:
            return False
        if hole.wall_id not in house.walls:
            return False
    return True


def validate_house(house: House) -> bool:
    """Run all validators on the house.

    Args:
        house: The house to validate.

    Returns:
        True if all validations pass.

    Raises:
        InvalidHouse: If any validation fails, naming the failing check.
    """
    if not validate_nodes(house):
        raise InvalidHouse("Node validation failed: node stored under a foreign id")

    if not validate_walls(house):
        raise InvalidHouse(
            "Wall validation failed: walls must join two distinct existing nodes "
            "with non-negative thickness"
        )

    if not validate_rooms(house):
        raise InvalidHouse("Room validation failed: rooms reference undefined walls")

    if not validate_holes(house):
        raise InvalidHouse(
            "Hole validation failed: holes need a non-zero distance and width "
            "on a defined wall"
        )

    return True
