"""
slime_sim module: world/geometry.py

Plane helpers shared by food and slimes:
- polar <-> cartesian conversion
- direction and distance between points
- toroidal wrap so entities leaving one edge re-enter at the other
- uniform spawn placement
"""

from __future__ import annotations
import math
import random
from typing import Tuple

Point = Tuple[float, float]


def polar_to_cartesian(magnitude: float, angle: float) -> Point:
    return (magnitude * math.cos(angle), magnitude * math.sin(angle))


def cartesian_to_polar(x: float, y: float) -> Point:
    """Returns (magnitude, angle)."""
    return (math.hypot(x, y), math.atan2(y, x))


def angle_between(a: Point, b: Point) -> float:
    """Direction (radians) from point a towards point b."""
    return math.atan2(b[1] - a[1], b[0] - a[0])


def distance(a: Point, b: Point) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def _wrap_axis(v: float, size: float) -> float:
    if 0.0 <= v < size:
        return v
    v = v % size
    # float modulo of a tiny negative value can round up to size itself
    if v >= size:
        v = 0.0
    return v


def wrap_around(x: float, y: float, w: float, h: float) -> Point:
    """
    Toroidal wrap into the half-open field [0, w) x [0, h).

    Positions already inside are returned untouched; anything at or past an
    edge re-enters from the opposite edge, carrying its overshoot.
    """
    return (_wrap_axis(x, w), _wrap_axis(y, h))


def random_point(rng: random.Random, w: float, h: float) -> Point:
    return wrap_around(rng.uniform(0.0, w), rng.uniform(0.0, h), w, h)
