"""Convex hulls of clicked points with Graham's Scan and Jarvis' March."""
from hullview.geometry import DegeneratePointSetError, Point, Turn, orientation, turn_angle
from hullview.graham_scan import graham_scan
from hullview.jarvis_march import jarvis_march
from hullview.session import Algorithm, HullSession, compute_hull

__all__ = [
    "Algorithm",
    "DegeneratePointSetError",
    "HullSession",
    "Point",
    "Turn",
    "compute_hull",
    "graham_scan",
    "jarvis_march",
    "orientation",
    "turn_angle",
]
