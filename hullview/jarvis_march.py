import logging

from hullview import config
from hullview.geometry import (
    DegeneratePointSetError,
    Point,
    Turn,
    order_by_y_then_x,
    orientation,
    squared_distance,
    turn_angle,
)

logger = logging.getLogger(__name__)


def _same_ray(origin, p, q):
    # p and q lie on one half-line starting at origin
    if orientation(origin, p, q) != Turn.COLLINEAR:
        return False
    return (p[0] - origin[0]) * (q[0] - origin[0]) + (p[1] - origin[1]) * (q[1] - origin[1]) > 0


def _select_next(prev, cur, points, pool):
    best = None
    best_angle = None
    for index in sorted(pool):
        candidate = points[index]
        if best is not None and _same_ray(cur, points[best], candidate):
            # collinear with the current best: only the farther one can be a vertex
            if squared_distance(cur, candidate) > squared_distance(cur, points[best]):
                best = index
            continue
        angle = turn_angle(prev, cur, candidate)
        if best is None or angle < best_angle:
            best, best_angle = index, angle
    return best


def gift_wrapping(points):
    """
    Jarvis' March. Returns the hull in counter-clockwise order starting at the
    lowest (then leftmost) point; collinear boundary points are left out.

    Returns an empty list for fewer than 3 points.

    Raises:
        DegeneratePointSetError: if the points are all collinear or coincident.
    """
    if len(points) < 3:
        return []

    # exact duplicates would give zero-length vectors in turn_angle
    unique = list(dict.fromkeys(Point(*p) for p in points))
    start = min(range(len(unique)), key=lambda i: order_by_y_then_x(unique[i]))
    on_hull = unique[start]

    seed = Point(on_hull.x - config.JARVIS_SEED_OFFSET, on_hull.y)
    hull = [on_hull]
    pool = set(range(len(unique))) - {start}

    prev, cur = seed, on_hull
    for step in range(len(unique)):
        if not pool:
            break
        index = _select_next(prev, cur, unique, pool)
        pool.discard(index)
        if index == start:  # Completed the loop
            logger.debug("Jarvis wrap closed after %d steps", step + 1)
            break
        hull.append(unique[index])
        if step == 0:
            pool.add(start)
        prev, cur = cur, unique[index]
    else:
        raise DegeneratePointSetError(f"degenerate point set: wrap did not close within {len(unique)} steps")

    if len(hull) < 3:
        raise DegeneratePointSetError(f"degenerate point set: {len(points)} points span no polygon")
    return hull


jarvis_march = gift_wrapping
