"""
Constants declarations for vincenty
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening

# GRS80 Ellipsoid Constants
GRS80_A = 6378137.0
GRS80_F = 1 / 298.257222100882711

# Solver defaults
DEFAULT_TOL = 1e-12  # Convergence threshold on lambda (radians)
DEFAULT_MAX_ITER = 200

# Smallest positive (denormal) float
MIN_POSITIVE = 5e-324

# Distances below this (meters) have no defined azimuth; covers the same point
# reached through longitudes -pi and pi, which lands around 1e-9 m
ZERO_DISTANCE = 1e-6
