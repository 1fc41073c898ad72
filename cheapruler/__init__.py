from cheapruler.constructs.box import Box
from cheapruler.constructs.line import LinearRing, LineString
from cheapruler.constructs.point import Point
from cheapruler.constructs.point_on_line import PointOnLine
from cheapruler.constructs.polygon import Polygon
from cheapruler.constructs.unit import Unit
from cheapruler.ruler import Ruler
from cheapruler.utils.exceptions import InvalidArgument, RulerException

__all__ = [
    "Box",
    "InvalidArgument",
    "LineString",
    "LinearRing",
    "Point",
    "PointOnLine",
    "Polygon",
    "Ruler",
    "RulerException",
    "Unit",
]
