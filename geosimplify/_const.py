"""
Constants declarations for geosimplify
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_B = 6356752.3142  # Minor axis (meters)
WGS84_INVERSE_F = 298.257223563

# Vincenty iteration policy
VINCENTY_TOLERANCE = 1e-12  # radians
VINCENTY_MAX_ITERATIONS = 200

# Relative tolerance when checking a, b and f against each other
ELLIPSOID_RTOL = 1e-9
