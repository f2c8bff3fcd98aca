"""Polygon geometry for reconstructed room boundaries.

This module turns closed walks into Shapely polygons and computes area and
perimeter from them.
"""

from __future__ import annotations

from typing import List, Optional

from shapely.geometry import Polygon

from ..core.model import House, Point, RoomBoundary

# Global parameters for algorithm sensitivity
EPSILON = 1e-9  # Tolerance for point matching
MIN_POLYGON_AREA = 1e-6  # Minimum area for valid polygons


def _points_equal(p1: Point, p2: Point, epsilon: float = EPSILON) -> bool:
    """Check if two points are equal within tolerance."""
    return abs(p1.x - p2.x) < epsilon and abs(p1.y - p2.y) < epsilon


def boundary_points(house: House, boundary: RoomBoundary, skip_repeated: bool = True) -> List[Point]:
    """Vertex positions of a boundary in walk order.

    Args:
        house: House providing node coordinates.
        boundary: The boundary to read.
        skip_repeated: Leave out edges walked twice (spurs, bridges), which
            enclose no area.

    Returns:
        Points of the walk without the closing duplicate.
    """
    points: List[Point] = []
    for edge in boundary.edges:
        if skip_repeated and edge.repeated:
            continue
        point = house.nodes[edge.source].point
        if points and _points_equal(points[-1], point):
            continue
        points.append(point)

    if len(points) > 1 and _points_equal(points[0], points[-1]):
        points.pop()
    return points


def boundary_signed_area(house: House, boundary: RoomBoundary) -> float:
    """Shoelace area of the full walk; positive when it runs counter-clockwise."""
    total = 0.0
    for edge in boundary.edges:
        a = house.nodes[edge.source].point
        b = house.nodes[edge.target].point
        total += a.x * b.y - b.x * a.y
    return total / 2.0


def boundary_outline(house: House, boundary: RoomBoundary) -> Optional[Polygon]:
    """Build the Shapely polygon enclosed by a boundary.

    Args:
        house: House providing node coordinates.
        boundary: The boundary to convert.

    Returns:
        A valid polygon, or None if the walk encloses no usable area.
    """
    points = boundary_points(house, boundary)
    if len(points) < 3:
        return None

    polygon = Polygon([(p.x, p.y) for p in points])

    # Walks that touch themselves give invalid rings; buffer(0) repairs them
    if not polygon.is_valid:
        polygon = polygon.buffer(0)

    if polygon.is_empty or not polygon.is_valid or polygon.area <= MIN_POLYGON_AREA:
        return None
    if polygon.geom_type != "Polygon":
        # Keep the largest part (main room boundary)
        polygon = max(polygon.geoms, key=lambda part: part.area)
    return polygon


def boundary_area(house: House, boundary: RoomBoundary) -> float:
    """Area enclosed by a boundary, or 0.0 if it encloses nothing."""
    polygon = boundary_outline(house, boundary)
    if polygon is None:
        return 0.0
    return polygon.area


def boundary_perimeter(house: House, boundary: RoomBoundary) -> float:
    """Length of the boundary outline, or 0.0 if it encloses nothing."""
    polygon = boundary_outline(house, boundary)
    if polygon is None:
        return 0.0
    return polygon.exterior.length
