from __future__ import annotations

from collections.abc import Sequence
from typing import Iterable, Iterator, Tuple, Union

from shapely.geometry import LinearRing as ShapelyLinearRing
from shapely.geometry import LineString as ShapelyLineString

from cheapruler.constructs.point import Point

PointLike = Union[Point, Tuple[float, float]]


def _to_points(points: Iterable[PointLike]) -> Tuple[Point, ...]:
    return tuple(p if isinstance(p, Point) else Point(*p) for p in points)


class _PointSequence(Sequence):
    """Internal use: an immutable, tuple-backed sequence of points."""

    __slots__ = ("_points",)

    _points: Tuple[Point, ...]

    def __init__(self, points: Iterable[PointLike] = ()):
        self._points = _to_points(points)

    def __getitem__(self, i):
        if isinstance(i, slice):
            return type(self)(self._points[i])
        return self._points[i]

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._points == other._points

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._points))

    def __repr__(self):
        return f"{type(self).__name__}({list(self._points)})"

    @property
    def points(self) -> Tuple[Point, ...]:
        return self._points


class LineString(_PointSequence):
    """
    A polyline: an ordered sequence of points where each point is connected to the next.

    A LineString is immutable and may be empty. It accepts any iterable of Point objects or
    (longitude, latitude) pairs.

    Examples:
        >>> from cheapruler.constructs.line import LineString
        >>> line = LineString([(-77.031669, 38.878605), (-77.029609, 38.881946)])
        >>> len(line)
        2
        >>> line[0]
        Point(x=-77.031669, y=38.878605)
    """

    __slots__ = ()

    @classmethod
    def from_geom(cls, geom: ShapelyLineString) -> LineString:
        """
        Create a line from a Shapely LineString whose coordinates are in EPSG:4326.

        Raises:
            TypeError: If geom is not a Shapely LineString
        """
        if not isinstance(geom, ShapelyLineString):
            raise TypeError(f"expected a shapely LineString but got {type(geom).__name__}")
        return cls((x, y) for x, y, *_ in geom.coords)

    def __add__(self, other: LineString) -> LineString:
        if not isinstance(other, LineString):
            return NotImplemented
        return LineString(self._points + other._points)

    def to_geom(self) -> ShapelyLineString:
        """Convert this line into a Shapely LineString."""
        return ShapelyLineString(self._points)


class LinearRing(_PointSequence):
    """
    A closed ring of points: the last point is implicitly connected back to the first.

    Rings are only used as polygon boundaries. The closing point may be repeated explicitly
    or left out; both give the same area.
    """

    __slots__ = ()

    @classmethod
    def from_geom(cls, geom: ShapelyLinearRing) -> LinearRing:
        """
        Create a ring from a Shapely LinearRing whose coordinates are in EPSG:4326.

        Raises:
            TypeError: If geom is not a Shapely LinearRing
        """
        if not isinstance(geom, ShapelyLinearRing):
            raise TypeError(f"expected a shapely LinearRing but got {type(geom).__name__}")
        return cls((x, y) for x, y, *_ in geom.coords)

    def to_geom(self) -> ShapelyLinearRing:
        """Convert this ring into a Shapely LinearRing."""
        return ShapelyLinearRing(self._points)
