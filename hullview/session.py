"""
Session State
=============
Holds the clicked points and the selected algorithm for one running viewer.

The viewer reads from and writes to a single :class:`HullSession`; nothing
lives in module globals. The hull itself is never stored: every call to
:meth:`HullSession.compute_hull` rebuilds it from a copy of the points.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from hullview.geometry import DegeneratePointSetError, Point
from hullview.graham_scan import graham_scan
from hullview.jarvis_march import jarvis_march

logger = logging.getLogger(__name__)


class Algorithm(str, Enum):
    JARVIS = "Jarvis' March"
    GRAHAM = "Graham's Scan"


_BUILDERS = {
    Algorithm.JARVIS: jarvis_march,
    Algorithm.GRAHAM: graham_scan,
}


def compute_hull(points, algorithm: Algorithm) -> List[Point]:
    """
    Run the builder for ``algorithm`` on ``points``.

    Raises:
        ValueError: for an unknown algorithm.
        DegeneratePointSetError: propagated from the builder.
    """
    try:
        builder = _BUILDERS[Algorithm(algorithm)]
    except ValueError:
        raise ValueError(f"Unknown hull algorithm: {algorithm!r}") from None
    return builder(list(points))


@dataclass
class HullSession:
    points: List[Point] = field(default_factory=list)
    algorithm: Optional[Algorithm] = None
    status: str = ""

    def add_point(self, x: float, y: float) -> Point:
        point = Point(float(x), float(y))
        self.points.append(point)
        logger.debug("Point added: (%.4f, %.4f), total %d", point.x, point.y, len(self.points))
        return point

    def select(self, algorithm: Algorithm) -> None:
        """Switch the active builder. Only one is ever selected."""
        self.algorithm = Algorithm(algorithm)
        logger.info("Algorithm selected: %s", self.algorithm.value)

    def clear(self) -> None:
        self.points.clear()
        logger.info("Point set cleared.")

    def compute_hull(self) -> List[Point]:
        """
        Hull of the current points under the selected algorithm.

        Empty when no algorithm is selected, when there are fewer than three
        points, or when the points are degenerate (logged, not raised).
        """
        if self.algorithm is None:
            self.status = f"{len(self.points)} points, no algorithm selected"
            return []
        try:
            hull = compute_hull(self.points, self.algorithm)
        except DegeneratePointSetError as exc:
            logger.warning("%s: %s", self.algorithm.value, exc)
            self.status = f"{self.algorithm.value}: degenerate point set"
            return []
        self.status = f"{self.algorithm.value}: {len(self.points)} points, {len(hull)} hull vertices"
        return hull
