"""Geometry utilities for floor plans.

This module provides the vector arithmetic and angle metrics used to order
walls around a junction, and polygon helpers for reconstructed boundaries.
"""

from .angles import angle, increased_cos, increased_sin
from .polygon import boundary_area, boundary_outline, boundary_perimeter

__all__ = [
    "angle",
    "increased_sin",
    "increased_cos",
    "boundary_outline",
    "boundary_area",
    "boundary_perimeter",
]
