"""Constants of the WGS84 ellipsoid model of the Earth.

See https://en.wikipedia.org/wiki/Earth_radius#Meridional for the radius of
curvature formulas that consume these values.
"""

import math

# Equatorial radius in kilometers
RE = 6378.137

# Flattening
FE = 1.0 / 298.257223563

# Squared eccentricity
E2 = FE * (2 - FE)

# Degrees to radians
RAD = math.pi / 180.0
