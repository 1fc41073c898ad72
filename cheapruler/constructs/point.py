from __future__ import annotations

import math
from typing import Any, NamedTuple

from pyproj import CRS, Transformer
from pyproj.exceptions import ProjError
from shapely.geometry import Point as ShapelyPoint

from cheapruler.utils.crs import LATLON_CRS


class Point(NamedTuple):
    """
    Represents a single WGS84 location as a (longitude, latitude) pair in decimal degrees.

    A Point is an immutable value: two points are equal only when both components are
    exactly equal, there is no tolerance. Being a tuple, a Point also compares equal to
    a plain (x, y) tuple with the same components. The x axis is the one that wraps around at the
    antimeridian, so every Ruler measurement routes x differences through ``long_diff``
    while y differences use plain subtraction.

    Attributes:
        x: The longitude in decimal degrees
        y: The latitude in decimal degrees

    Examples:
        >>> from cheapruler.constructs.point import Point
        >>> # The White House, longitude first
        >>> p = Point(-77.036547, 38.897675)
        >>> p.lat, p.lon
        (38.897675, -77.036547)

        >>> # Or build it from latitude and longitude
        >>> Point.from_lat_lon(38.897675, -77.036547) == p
        True
    """

    x: float
    y: float

    @classmethod
    def from_lat_lon(cls, lat: float, lon: float) -> Point:
        """
        Create a point from latitude and longitude values, in that order.

        Args:
            lat: The latitude in decimal degrees (range: -90 to 90)
            lon: The longitude in decimal degrees (range: -180 to 180)

        Returns:
            A new Point with x = lon and y = lat
        """
        return cls(lon, lat)

    @classmethod
    def from_geom(cls, geom: ShapelyPoint) -> Point:
        """
        Create a point from a Shapely Point whose coordinates are in EPSG:4326.

        Args:
            geom: The Shapely Point, with x = longitude and y = latitude

        Returns:
            A new Point at the same location

        Raises:
            TypeError: If geom is not a Shapely Point
        """
        if not isinstance(geom, ShapelyPoint):
            raise TypeError(f"expected a shapely Point but got {type(geom).__name__}")
        return cls(geom.x, geom.y)

    @classmethod
    def from_crs(cls, x: float, y: float, crs: Any) -> Point:
        """
        Create a point from coordinates expressed in another coordinate reference system (CRS).

        The coordinates are reprojected into WGS84 (EPSG:4326) with pyproj so that they can be
        measured with a Ruler.

        Args:
            x: The x coordinate (easting in projected systems)
            y: The y coordinate (northing in projected systems)
            crs: The source CRS. Can be a pyproj.CRS object, an EPSG code as a string
                (e.g., 'EPSG:3857'), an integer EPSG code, or any CRS format that pyproj.CRS() accepts

        Returns:
            A new Point in decimal degrees

        Raises:
            ValueError: If the crs cannot be parsed, or if the transformation results in
                infinite coordinate values

        Examples:
            >>> # Web Mercator meters to degrees
            >>> p = Point.from_crs(-8238310.4, 4970241.3, 'EPSG:3857')
        """
        try:
            crs = CRS(crs)
        except ProjError as e:
            raise ValueError(f"Could not parse incoming `crs` parameter: {crs}") from e

        if crs == LATLON_CRS:
            return cls(x, y)

        transformer = Transformer.from_crs(crs, LATLON_CRS, always_xy=True)
        lon, lat = transformer.transform(x, y)

        if math.isinf(lon) or math.isinf(lat):
            raise ValueError(f"Unable to convert {crs} ({x}, {y}) -> {LATLON_CRS} ({lon}, {lat})")

        return cls(lon, lat)

    @property
    def lat(self) -> float:
        return self.y

    @property
    def lon(self) -> float:
        return self.x

    def to_geom(self) -> ShapelyPoint:
        """Convert this point into a Shapely Point."""
        return ShapelyPoint(self.x, self.y)
