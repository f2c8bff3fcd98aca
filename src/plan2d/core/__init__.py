"""Core data models for floor plans."""

from .model import DirectedEdge, Hole, House, Node, Orientation, Point, Room, RoomBoundary, Wall
from .topology import build_edge_graph, build_wall_graph, dangling_walls

__all__ = [
    "DirectedEdge",
    "Hole",
    "House",
    "Node",
    "Orientation",
    "Point",
    "Room",
    "RoomBoundary",
    "Wall",
    "build_edge_graph",
    "build_wall_graph",
    "dangling_walls",
]
