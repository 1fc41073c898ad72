from typing import NamedTuple

from cheapruler.constructs.point import Point


class PointOnLine(NamedTuple):
    """
    The location on a line that is closest to some query point.

    This is the result of ``Ruler.point_on_line``.

    Attributes:
        point: The closest point on the line
        index: The index of the first point of the line segment that contains the closest point
        t: Where the closest point lies along that segment, from 0 (its start) to 1 (its end)
    """

    point: Point
    index: int
    t: float
