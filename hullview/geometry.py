"""
Geometric predicates shared by both hull builders.

Points are plain ``(x, y)`` pairs. :class:`Point` is a named tuple, so bare
tuples work everywhere a Point is expected.
"""
from __future__ import annotations

import math
from enum import IntEnum
from typing import NamedTuple, Tuple


class Point(NamedTuple):
    x: float
    y: float


class Turn(IntEnum):
    # +ve - counterclockwise
    # -ve - clockwise
    # 0 - collinear
    LEFT = 1
    RIGHT = -1
    COLLINEAR = 0


class DegeneratePointSetError(ValueError):
    """Raised when three or more points do not span a polygon."""


def cross(a, b, c) -> float:
    """Signed doubled area of the triangle a, b, c (cross product of b-a and c-a)."""
    x1, y1, x2, y2, x3, y3 = *a, *b, *c
    return (x2 - x1) * (y3 - y1) - (y2 - y1) * (x3 - x1)


def orientation(a, b, c) -> Turn:
    d = cross(a, b, c)
    if d > 0:
        return Turn.LEFT
    elif d < 0:
        return Turn.RIGHT
    else:
        return Turn.COLLINEAR


def squared_distance(p1, p2) -> float:
    x1, y1, x2, y2 = *p1, *p2
    return (x2 - x1) ** 2 + (y2 - y1) ** 2


def turn_angle(prev, cur, candidate) -> float:
    """
    Angle used by the gift-wrapping sweep.

    ``prev -> cur`` is the incoming edge. The result is ``2*pi - acos(cos)``
    of the vectors ``cur - prev`` and ``cur - candidate``: a candidate straight
    ahead scores ``pi`` and the score grows as the turn gets sharper.

    Raises:
        ZeroDivisionError: if ``candidate`` or ``prev`` coincides with ``cur``.
    """
    ux, uy = cur[0] - prev[0], cur[1] - prev[1]
    vx, vy = cur[0] - candidate[0], cur[1] - candidate[1]
    dot = ux * vx + uy * vy
    module = math.hypot(ux, uy) * math.hypot(vx, vy)
    cos = max(-1.0, min(1.0, dot / module))
    return 2 * math.pi - math.acos(cos)


def order_by_x(p) -> Tuple[float, float]:
    """Sort key: x ascending, ties broken by y."""
    return (p[0], p[1])


def order_by_y_then_x(p) -> Tuple[float, float]:
    """Sort key: y ascending, ties broken by x."""
    return (p[1], p[0])
