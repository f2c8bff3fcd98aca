"""plan2d - reconstruct room boundaries from 2D floor plan wall graphs."""

__version__ = "0.1.0"

from .core.errors import InvalidHouse, MalformedGraph, PlanError, RoomNotFound
from .core.model import (
    DirectedEdge,
    Hole,
    House,
    Node,
    Orientation,
    Point,
    Room,
    RoomBoundary,
    Wall,
)
from .engine.api import compute_room_boundaries, room_boundary_map

__all__ = [
    "DirectedEdge",
    "Hole",
    "House",
    "InvalidHouse",
    "MalformedGraph",
    "Node",
    "Orientation",
    "PlanError",
    "Point",
    "Room",
    "RoomBoundary",
    "RoomNotFound",
    "Wall",
    "compute_room_boundaries",
    "room_boundary_map",
]
