"""
Distances along an ordered sequence of points
"""

__all__ = ['cumulative_distances', 'leg_distances', 'track_length']

from typing import Sequence

import numpy as np

from vincenty._const import DEFAULT_MAX_ITER, DEFAULT_TOL
from vincenty.config import SolverConfig
from vincenty.coordinates import GeoPoint
from vincenty.ellipsoid import Ellipsoid, WGS84
from vincenty.inverse import solve


def leg_distances(
    points: Sequence[GeoPoint],
    tol: float = DEFAULT_TOL,
    max_iter: int = DEFAULT_MAX_ITER,
    ellipsoid: Ellipsoid = WGS84,
) -> np.ndarray:
    """
    The distance of each leg between consecutive points, in meters.

    Args:
        points:
            An ordered sequence of GeoPoints

        tol: (Default 1e-12)
            Convergence threshold on lambda, in radians

        max_iter: (Default 200)
            The maximum number of iterations per leg

        ellipsoid: (Default WGS84)
            The reference ellipsoid

    Returns:
        (np.ndarray) an array of len(points) - 1 distances; empty for fewer than two points

    Raises:
        ConvergenceError:
            If any leg fails to converge
    """
    config = SolverConfig(tol, max_iter)
    if len(points) < 2:
        return np.zeros(0, dtype=float)

    return np.fromiter(
        (
            solve(start, end, config, ellipsoid, azimuths=False).distance
            for start, end in zip(points[:-1], points[1:])
        ),
        dtype=float,
        count=len(points) - 1,
    )


def cumulative_distances(points: Sequence[GeoPoint], **kwargs) -> np.ndarray:
    """
    The running distance travelled at each point, in meters, beginning with 0 at the first
    point. Accepts the same keyword arguments as leg_distances.
    """
    if len(points) == 0:
        return np.zeros(0, dtype=float)

    return np.concatenate(([0.], np.cumsum(leg_distances(points, **kwargs))))


def track_length(points: Sequence[GeoPoint], **kwargs) -> float:
    """The total distance along the points, in meters"""
    return float(np.sum(leg_distances(points, **kwargs)))
