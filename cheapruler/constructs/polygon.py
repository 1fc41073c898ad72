from __future__ import annotations

from collections.abc import Sequence
from typing import Iterable, Iterator, Tuple, Union

from shapely.geometry import Polygon as ShapelyPolygon

from cheapruler.constructs.line import LinearRing, PointLike

RingLike = Union[LinearRing, Iterable[PointLike]]


class Polygon(Sequence):
    """
    A polygon as an ordered sequence of linear rings.

    Ring 0 is the outer boundary and every following ring is a hole, whose area is
    subtracted from the outer ring's area by ``Ruler.area``.

    Examples:
        >>> from cheapruler.constructs.polygon import Polygon
        >>> square = [(0, 0), (0.01, 0), (0.01, 0.01), (0, 0.01)]
        >>> hole = [(0.004, 0.004), (0.006, 0.004), (0.006, 0.006), (0.004, 0.006)]
        >>> poly = Polygon([square, hole])
        >>> len(poly)
        2
    """

    __slots__ = ("_rings",)

    _rings: Tuple[LinearRing, ...]

    def __init__(self, rings: Iterable[RingLike] = ()):
        self._rings = tuple(r if isinstance(r, LinearRing) else LinearRing(r) for r in rings)

    def __getitem__(self, i):
        if isinstance(i, slice):
            return Polygon(self._rings[i])
        return self._rings[i]

    def __len__(self) -> int:
        return len(self._rings)

    def __iter__(self) -> Iterator[LinearRing]:
        return iter(self._rings)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return self._rings == other._rings

    def __hash__(self) -> int:
        return hash(self._rings)

    def __repr__(self):
        return f"Polygon({list(self._rings)})"

    @property
    def exterior(self) -> LinearRing:
        """The outer boundary (ring 0)."""
        return self._rings[0]

    @property
    def interiors(self) -> Tuple[LinearRing, ...]:
        """The holes (every ring after the first)."""
        return self._rings[1:]

    @classmethod
    def from_geom(cls, geom: ShapelyPolygon) -> Polygon:
        """
        Create a polygon from a Shapely Polygon whose coordinates are in EPSG:4326.

        The Shapely exterior becomes ring 0 and its interiors become the holes, in order.

        Raises:
            TypeError: If geom is not a Shapely Polygon
        """
        if not isinstance(geom, ShapelyPolygon):
            raise TypeError(f"expected a shapely Polygon but got {type(geom).__name__}")
        if geom.is_empty:
            return cls()
        rings = [geom.exterior, *geom.interiors]
        return cls(LinearRing.from_geom(r) for r in rings)

    def to_geom(self) -> ShapelyPolygon:
        """Convert this polygon into a Shapely Polygon with holes."""
        if not self._rings:
            return ShapelyPolygon()
        return ShapelyPolygon(self.exterior.points, [r.points for r in self.interiors])
