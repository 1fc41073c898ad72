"""
# Ruler Example

An example of using a Ruler to measure a short walk through downtown Washington DC
"""


def main():
    from cheapruler import Point, Ruler, Unit

    """
    First, we build a ruler.
    A ruler is only accurate near one latitude, so we pick the latitude of the area we care about.
    Everything the ruler measures comes out in the unit we pass here, meters in this case.
    """

    ruler = Ruler.from_latitude(38.89, Unit.METERS)

    """
    If you are working with map tiles, you can also build a ruler straight from a tile row and zoom level.
    Both rulers below are good for the same area:
    """

    tile_ruler = Ruler.from_tile(y=12536, z=15, unit=Unit.METERS)
    print(f"kx: {ruler.kx:.3f} vs {tile_ruler.kx:.3f} meters per degree of longitude")

    """
    Points are (longitude, latitude) pairs, the same order Shapely uses.
    Let's measure the distance and bearing between the White House and the Washington Monument:
    """

    white_house = Point(-77.036547, 38.897675)
    monument = Point(-77.035237, 38.889484)

    print(f"distance: {ruler.distance(white_house, monument):.1f} m")
    print(f"bearing: {ruler.bearing(white_house, monument):.1f} degrees")

    """
    Now let's build a walk as a line and measure it.
    Lines can be made from Point objects or plain (longitude, latitude) tuples:
    """

    from cheapruler import LineString

    walk = LineString(
        [
            white_house,
            (-77.036500, 38.893900),
            (-77.032400, 38.893800),
            monument,
            (-77.050200, 38.889300),
        ]
    )
    length = ruler.line_length(walk)
    print(f"walk length: {length:.1f} m")

    """
    We can find the spot halfway along the walk, and cut out the middle part of the walk:
    """

    halfway = ruler.along(walk, length / 2)
    middle = ruler.line_slice_along(length * 0.25, length * 0.75, walk)
    print(f"halfway point: {halfway}")
    print(f"middle half: {ruler.line_length(middle):.1f} m over {len(middle)} points")

    """
    Snapping a point to the walk tells us which segment it is closest to and how far along that segment it is:
    """

    snapped = ruler.point_on_line(walk, Point(-77.034000, 38.892000))
    print(f"snapped to segment {snapped.index} at t={snapped.t:.2f}: {snapped.point}")

    """
    Finally, a bounding box 100 meters around the monument can be used to filter points cheaply:
    """

    box = ruler.buffer_point(monument, 100)
    print(f"white house inside box: {Ruler.inside_bbox(white_house, box)}")
    print(f"monument inside box: {Ruler.inside_bbox(monument, box)}")


if __name__ == "__main__":
    main()
