"""Angle-ordering metrics used when choosing the next wall at a junction.

Each metric takes an origin ``o`` and two further points ``a`` and ``b`` and
scores the counter-clockwise sweep from ray o->a to ray o->b. The scores are
monotonically increasing over [0, 360) degrees, so comparing two candidate
turns only needs a plain ``<``.

``increased_sin`` and ``increased_cos`` avoid inverse trigonometry: they map
the sweep onto [0, 4) by combining the signed-area term ``s`` and the
similarity term ``c`` of the normalised rays with a quadrant offset.
"""

from __future__ import annotations

import math

from .vector import SupportsXY, cross, dot, normalize, sub

FULL_TURN = 2.0 * math.pi


def _unit_terms(o: SupportsXY, a: SupportsXY, b: SupportsXY) -> tuple[float, float]:
    """Return ``(s, c)`` for the normalised rays o->a and o->b."""
    ray_a = normalize(sub(a, o))
    ray_b = normalize(sub(b, o))
    return cross(ray_a, ray_b), dot(ray_a, ray_b)


def angle(o: SupportsXY, a: SupportsXY, b: SupportsXY) -> float:
    """Exact counter-clockwise angle from o->a to o->b, in radians within [0, 2*pi)."""
    s, c = _unit_terms(o, a, b)
    # Rounding can push |c| a hair past 1 for (anti)parallel rays.
    theta = math.acos(max(-1.0, min(1.0, c)))
    if s < 0:
        theta = FULL_TURN - theta
    if theta >= FULL_TURN:
        theta = 0.0
    return theta


def increased_sin(o: SupportsXY, a: SupportsXY, b: SupportsXY) -> float:
    """Sine-based surrogate of :func:`angle` with range [0, 4).

    Quadrant I maps to ``s``, quadrants II and III to ``2 - s`` and
    quadrant IV to ``4 + s``.
    """
    s, c = _unit_terms(o, a, b)
    if c < 0:
        return 2 - s
    if s < 0:
        return 4 + s
    return s


def increased_cos(o: SupportsXY, a: SupportsXY, b: SupportsXY) -> float:
    """Cosine-based surrogate of :func:`angle` with range [0, 4).

    Sweeps up to 180 degrees map to ``1 - c`` (0..2), larger sweeps to
    ``3 + c`` (2..4).
    """
    s, c = _unit_terms(o, a, b)
    if s >= 0:
        return 1 - c
    return 3 + c
