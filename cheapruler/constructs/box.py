from __future__ import annotations

from typing import NamedTuple, Tuple

from shapely.geometry import Polygon as ShapelyPolygon
from shapely.geometry import box as shapely_box

from cheapruler.constructs.point import Point


class Box(NamedTuple):
    """
    An axis-aligned bounding rectangle in longitude/latitude space.

    Like Point, a Box compares equal to a plain tuple of the same two corners.

    Attributes:
        min: The south-west corner (smallest longitude and latitude)
        max: The north-east corner (largest longitude and latitude)

    Examples:
        >>> from cheapruler.constructs.box import Box
        >>> bbox = Box.from_bounds(30, 38, 40, 39)
        >>> bbox.min, bbox.max
        (Point(x=30, y=38), Point(x=40, y=39))
    """

    min: Point
    max: Point

    @classmethod
    def from_bounds(cls, minx: float, miny: float, maxx: float, maxy: float) -> Box:
        """
        Create a box from bounds given in the (minx, miny, maxx, maxy) order used by Shapely.
        """
        return cls(Point(minx, miny), Point(maxx, maxy))

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        return (self.min.x, self.min.y, self.max.x, self.max.y)

    def to_geom(self) -> ShapelyPolygon:
        """Convert this box into a rectangular Shapely Polygon."""
        return shapely_box(*self.bounds)
