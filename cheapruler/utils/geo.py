import logging
import math

from cheapruler.constructs.point import Point
from cheapruler.utils.exceptions import InvalidArgument
from cheapruler.utils.wgs84 import RAD

log = logging.getLogger(__name__)

MAX_TILE_ZOOM = 32


def long_diff(a: float, b: float) -> float:
    """
    Compute the shortest signed difference between two longitudes.

    The result is the IEEE remainder of ``a - b`` with respect to 360, so it always
    lies in [-180, 180] and stays correct across the antimeridian.

    Args:
        a: The first longitude in decimal degrees
        b: The second longitude in decimal degrees

    Returns:
        The signed difference ``a - b`` wrapped into [-180, 180]

    Examples:
        >>> long_diff(179.0, -179.0)
        -2.0
        >>> long_diff(-179.0, 179.0)
        2.0
    """
    return math.remainder(a - b, 360.0)


def interpolate(a: Point, b: Point, t: float) -> Point:
    """
    Linearly interpolate between two points, taking the short way around the antimeridian.

    The parameter is not clamped: values outside [0, 1] extrapolate along the same line.

    Args:
        a: The start point (returned for t = 0)
        b: The end point (reached for t = 1)
        t: The fraction of the way from a to b

    Returns:
        The interpolated point
    """
    dx = long_diff(b.x, a.x)
    dy = b.y - a.y
    return Point(a.x + dx * t, a.y + dy * t)


def tile_to_latitude(y: int, z: int) -> float:
    """
    Compute the latitude of the center of a Web Mercator tile row.

    Rows past the south edge of the map (y >= 2**z) are not rejected: their latitude
    runs past -85 degrees and reaches -90 once the hyperbolic sine overflows.

    Args:
        y: The tile row, counted from the north edge of the map
        z: The zoom level, in the range [0, 32)

    Returns:
        The latitude in decimal degrees of the middle of row ``y``

    Raises:
        InvalidArgument: If y is negative or z is outside [0, 32)

    Examples:
        >>> round(tile_to_latitude(0, 0), 6)
        0.0
    """
    if y < 0:
        log.debug(f"rejecting tile row y={y}")
        raise InvalidArgument(f"y must be non-negative but got {y}")
    if z < 0 or z >= MAX_TILE_ZOOM:
        log.debug(f"rejecting tile zoom z={z}")
        raise InvalidArgument(f"z must be in the range [0, {MAX_TILE_ZOOM}) but got {z}")

    n = math.pi * (1.0 - 2.0 * (y + 0.5) / (1 << z))
    try:
        return math.atan(math.sinh(n)) / RAD
    except OverflowError:
        return math.copysign(90.0, n)
