import logging

from hullview.geometry import DegeneratePointSetError, Point, Turn, order_by_x, orientation

logger = logging.getLogger(__name__)

# Monotone-chain form: sort by x, then sweep forward and backward


def _build_chain(points):
    chain = [Point(*points[0]), Point(*points[1])]
    for p in points[2:]:
        chain.append(Point(*p))
        # before_last is kept only if (before_before_last, before_last, last) is a strict left turn
        while len(chain) > 2 and orientation(chain[-3], chain[-2], chain[-1]) != Turn.LEFT:
            del chain[-2]
    return chain


def graham_scan(points):
    """
    Convex hull of ``points`` in counter-clockwise order, starting at the
    leftmost (then lowest) point. Collinear boundary points are left out.

    Returns an empty list for fewer than 3 points.

    Raises:
        DegeneratePointSetError: if the points are all collinear or coincident.
    """
    if len(points) < 3:
        return []

    ordered = sorted(points, key=order_by_x)

    lower = _build_chain(ordered)
    upper = _build_chain(ordered[::-1])
    logger.debug("Graham chains: lower=%d upper=%d", len(lower), len(upper))

    # both chains share their endpoints
    hull = lower + upper[1:-1]
    if len(hull) < 3:
        raise DegeneratePointSetError(f"degenerate point set: {len(points)} points span no polygon")
    return hull
