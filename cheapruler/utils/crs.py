"""Coordinate Reference System (CRS) constants used throughout cheapruler.

This module defines the CRS objects used when converting geometries into the
measurement space of a Ruler:
- LATLON_CRS: WGS84 geographic coordinates (EPSG:4326)
"""

from pyproj import CRS

# WGS84 latitude/longitude coordinate system (EPSG:4326)
# Every Point, Box, LineString and Polygon is expressed in this CRS
# Range: latitude [-90, 90], longitude [-180, 180]
LATLON_CRS = CRS(4326)
