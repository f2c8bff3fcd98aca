"""2D vector arithmetic shared by the angle metrics.

The helpers accept any object exposing ``x`` and ``y`` attributes (our own
``Point``, shapely points, simple named tuples) and keep whatever numeric
type those attributes carry, so the same code serves floats, ints or
``fractions.Fraction`` coordinates.
"""

from __future__ import annotations

import math
from typing import Protocol

from ..core.model import Point


class SupportsXY(Protocol):
    """Anything with planar ``x`` / ``y`` coordinates."""

    @property
    def x(self): ...

    @property
    def y(self): ...


def as_point(p: SupportsXY) -> Point:
    """Coerce an x/y object into a ``Point``."""
    if isinstance(p, Point):
        return p
    return Point(p.x, p.y)


def sub(a: SupportsXY, b: SupportsXY) -> Point:
    """Return the vector ``a - b``."""
    return Point(a.x - b.x, a.y - b.y)


def dot(a: SupportsXY, b: SupportsXY):
    """Similarity term ``Ax*Bx + Ay*By``."""
    return a.x * b.x + a.y * b.y


def cross(a: SupportsXY, b: SupportsXY):
    """Signed-area term ``Ax*By - Ay*Bx``; positive when b lies counter-clockwise of a."""
    return a.x * b.y - a.y * b.x


def length(v: SupportsXY) -> float:
    return math.sqrt(dot(v, v))


def normalize(v: SupportsXY) -> Point:
    """Scale ``v`` to unit length.

    Zero vectors and vectors that are already unit length come back unchanged.
    """
    n = length(v)
    if n == 0 or n == 1:
        return as_point(v)
    return Point(v.x / n, v.y / n)


def lexicographic_key(p: SupportsXY) -> tuple:
    """Sort key ordering points by x first, then y."""
    return (p.x, p.y)
