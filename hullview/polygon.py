"""
What a builder hands to the renderer.

A hull is an ordered list of at least three vertices; the first vertex is
never repeated at the end. Closing the loop is the renderer's job.
"""
from __future__ import annotations

from typing import List, Sequence, Tuple

from hullview.geometry import Turn, orientation


def is_drawable(hull: Sequence) -> bool:
    return len(hull) >= 3


def closed_path(hull: Sequence) -> Tuple[List[float], List[float]]:
    """
    x and y coordinate lists of the closed outline (first vertex appended).
    Both lists are empty when the hull is not drawable.
    """
    if not is_drawable(hull):
        return [], []
    loop = list(hull) + [hull[0]]
    return [p[0] for p in loop], [p[1] for p in loop]


def is_convex(hull: Sequence) -> bool:
    """True if every vertex of the hull is a strict counter-clockwise turn."""
    if not is_drawable(hull):
        return False
    n = len(hull)
    return all(
        orientation(hull[i - 1], hull[i], hull[(i + 1) % n]) == Turn.LEFT
        for i in range(n)
    )


def contains(hull: Sequence, point) -> bool:
    """On-or-inside test against a counter-clockwise hull."""
    n = len(hull)
    return all(orientation(hull[i], hull[(i + 1) % n], point) != Turn.RIGHT for i in range(n))
