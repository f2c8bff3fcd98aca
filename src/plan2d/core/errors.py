"""Exceptions raised while reconstructing room boundaries."""

from __future__ import annotations


class PlanError(Exception):
    """Base class for all plan2d errors."""

    pass


class InvalidHouse(PlanError, ValueError):
    """Raised when a house violates its referential-integrity invariants."""

    pass


class RoomNotFound(PlanError, KeyError):
    """Raised when an explicitly requested room is not declared in the house."""

    def __init__(self, room_id):
        super().__init__(room_id)
        self.room_id = room_id

    def __str__(self) -> str:
        return f"Room not found: {self.room_id!r}"


class MalformedGraph(PlanError):
    """Raised when a walk goes round two loops sharing only its start node.

    This happens when two enclosing loops touch at exactly one node; the
    wall graph is then topologically invalid for boundary extraction.
    Spurs hanging off the start node do not count as a second loop.
    """

    def __init__(self, node_id, edge, message: str | None = None):
        self.node_id = node_id
        self.edge = edge
        if message is None:
            message = (
                f"Walls form two loops sharing only node {node_id!r}; "
                f"the second one leaves through wall {edge.wall_id!r}"
            )
        super().__init__(message)
