"""Engine module for room boundary reconstruction.

This module provides the face tracer, the orientation classifier, the room
matcher and the API tying them together.
"""

from .api import compute_room_boundaries, room_boundary_map
from .validators import validate_house

__all__ = ["compute_room_boundaries", "room_boundary_map", "validate_house"]
