"""
Vincenty's inverse solution: distance and azimuths between two points on an ellipsoid
"""

__all__ = ['InverseResult', 'distance', 'solve', 'solve_inverse', 'wrap2pi']

import math
from typing import NamedTuple, Optional

from vincenty._const import DEFAULT_MAX_ITER, DEFAULT_TOL, MIN_POSITIVE, ZERO_DISTANCE
from vincenty.config import SolverConfig
from vincenty.coordinates import GeoPoint
from vincenty.ellipsoid import Ellipsoid, WGS84
from vincenty.exceptions import ConvergenceError
from vincenty.utils.logging import LOGGER, warn_once

_TWO_PI = 2 * math.pi


class InverseResult(NamedTuple):
    """
    The solution to the inverse problem.

    Azimuths are in radians, clockwise from true north, within [0, 2pi). They are None
    when not requested and NaN when undefined (the points are numerically coincident).
    """
    distance: float
    initial_azimuth: Optional[float] = None
    final_azimuth: Optional[float] = None

    @property
    def initial_bearing_degrees(self) -> Optional[float]:
        """The initial azimuth (true track), in degrees"""
        if self.initial_azimuth is None:
            return None
        return math.degrees(self.initial_azimuth)

    @property
    def final_bearing_degrees(self) -> Optional[float]:
        """The final azimuth (true track), in degrees"""
        if self.final_azimuth is None:
            return None
        return math.degrees(self.final_azimuth)


def wrap2pi(angle: float) -> float:
    """
    Normalize an angle in radians into [0, 2pi).

    Uses true (floored) modulo so negative angles wrap correctly. Angles already within
    range are returned untouched.
    """
    if 0 <= angle < _TWO_PI:
        return angle

    return ((angle % _TWO_PI) + _TWO_PI) % _TWO_PI


def solve(
    x: GeoPoint,
    y: GeoPoint,
    config: Optional[SolverConfig] = None,
    ellipsoid: Ellipsoid = WGS84,
    azimuths: bool = True,
) -> InverseResult:
    """
    Solve the inverse geodesic problem between two points using Vincenty's formulae.

    Iterates on lambda, the longitude difference on the auxiliary sphere, until it changes
    by less than `config.tol` between rounds, then applies the series correction for the
    ellipsoidal distance.

    Args:
        x:
            The first point

        y:
            The second point

        config: (Default SolverConfig())
            The convergence tolerance and iteration cap

        ellipsoid: (Default WGS84)
            The reference ellipsoid

        azimuths: (Default True)
            Whether to compute the initial and final azimuths

    Returns:
        InverseResult

    Raises:
        ValueError:
            If either point is not a GeoPoint

        ConvergenceError:
            If lambda does not converge within `config.max_iter` iterations. Expected for
            nearly antipodal points.
    """
    if not isinstance(x, GeoPoint) or not isinstance(y, GeoPoint):
        raise ValueError(
            f'Expected two GeoPoints, received {type(x).__name__} and {type(y).__name__}'
        )

    config = config or SolverConfig()
    tol = config.tol

    # Shortcut for zero distance
    if x == y:
        if azimuths:
            return InverseResult(0.0, 0.0, 0.0)
        return InverseResult(0.0)

    f = ellipsoid.f

    u_x = math.atan((1 - f) * math.tan(x.latitude))
    sin_u_x, cos_u_x = math.sin(u_x), math.cos(u_x)

    u_y = math.atan((1 - f) * math.tan(y.latitude))
    sin_u_y, cos_u_y = math.sin(u_y), math.cos(u_y)

    l = y.longitude - x.longitude  # noqa: E741
    lam = l
    lam_prev = 0.0
    iterations = 0

    for iterations in range(1, config.max_iter + 1):
        sin_lam, cos_lam = math.sin(lam), math.cos(lam)

        q = cos_u_y * sin_lam
        p = cos_u_x * sin_u_y - sin_u_x * cos_u_y * cos_lam
        sin_sigma = math.sqrt(q * q + p * p)
        cos_sigma = sin_u_x * sin_u_y + cos_u_x * cos_u_y * cos_lam
        sigma = math.atan2(sin_sigma, cos_sigma)

        # Coincident or meridional
        if sin_sigma == 0.0:
            sin_sigma = MIN_POSITIVE

        sin_alpha = cos_u_x * cos_u_y * sin_lam / sin_sigma
        cos2_alpha = 1 - sin_alpha * sin_alpha

        # Both points on the equator
        try:
            cos_2sigma_m = cos_sigma - 2 * sin_u_x * sin_u_y / cos2_alpha
        except ZeroDivisionError:
            cos_2sigma_m = 0.0

        if math.isnan(cos_2sigma_m):
            cos_2sigma_m = 0.0

        C = f / 16 * cos2_alpha * (4 + f * (4 - 3 * cos2_alpha))
        lam_prev = lam
        lam = l + (1 - C) * f * sin_alpha * (
            sigma + C * sin_sigma * (
                cos_2sigma_m + C * cos_sigma * (-1 + 2 * cos_2sigma_m * cos_2sigma_m)
            )
        )

        if abs(lam - lam_prev) < tol:
            break

    eps = abs(lam - lam_prev)
    if not eps < tol:
        LOGGER.debug(
            'Lambda did not converge after %d iterations (eps=%r, tol=%r)',
            config.max_iter, eps, tol
        )
        raise ConvergenceError(config.max_iter, tol, eps)

    LOGGER.debug('Lambda converged after %d iterations (eps=%r)', iterations, eps)

    uu = cos2_alpha * ellipsoid.c2
    A = 1 + uu / 16384 * (4096 + uu * (-768 + uu * (320 - 175 * uu)))
    B = uu / 1024 * (256 + uu * (-128 + uu * (74 - 47 * uu)))
    delta_sigma = B * sin_sigma * (
        cos_2sigma_m + B / 4 * (
            cos_sigma * (-1 + 2 * cos_2sigma_m * cos_2sigma_m) -
            B / 6 * cos_2sigma_m * (-3 + 4 * sin_sigma * sin_sigma) *
            (-3 + 4 * cos_2sigma_m * cos_2sigma_m)
        )
    )

    dist = ellipsoid.b * A * (sigma - delta_sigma)

    if not azimuths:
        return InverseResult(dist)

    if dist < ZERO_DISTANCE:
        return InverseResult(dist, math.nan, math.nan)

    if abs(q * q + p * p) < MIN_POSITIVE:
        # Northbound and southbound meridians are not distinguished here
        warn_once(
            'Meridional path between exactly coincident or antipodal points; '
            'azimuths reported as 0 and pi (this warning will not repeat)'
        )
        return InverseResult(dist, 0.0, math.pi)

    initial = math.atan2(q, p)
    final = math.atan2(
        cos_u_x * sin_lam,
        -sin_u_x * cos_u_y + cos_u_x * sin_u_y * cos_lam
    )

    return InverseResult(dist, wrap2pi(initial), wrap2pi(final))


def distance(
    x: GeoPoint,
    y: GeoPoint,
    tol: float = DEFAULT_TOL,
    max_iter: int = DEFAULT_MAX_ITER,
    ellipsoid: Ellipsoid = WGS84,
) -> float:
    """
    The ellipsoidal distance between two points, in meters.

    Args:
        x:
            The first point

        y:
            The second point

        tol: (Default 1e-12)
            Convergence threshold on lambda, in radians

        max_iter: (Default 200)
            The maximum number of iterations

        ellipsoid: (Default WGS84)
            The reference ellipsoid

    Returns:
        (float) the distance in meters

    Raises:
        ConvergenceError:
            If the computation does not converge within `max_iter` iterations
    """
    return solve(x, y, SolverConfig(tol, max_iter), ellipsoid, azimuths=False).distance


def solve_inverse(
    x: GeoPoint,
    y: GeoPoint,
    tol: float = DEFAULT_TOL,
    max_iter: int = DEFAULT_MAX_ITER,
    ellipsoid: Ellipsoid = WGS84,
) -> InverseResult:
    """
    The ellipsoidal distance between two points along with the initial and final azimuths
    of the geodesic joining them.

    Same arguments as `distance`.

    Returns:
        InverseResult, unpackable as (distance, initial_azimuth, final_azimuth)
    """
    return solve(x, y, SolverConfig(tol, max_iter), ellipsoid, azimuths=True)
