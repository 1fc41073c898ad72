from unittest import TestCase

from cheapruler.constructs.point import Point
from cheapruler.utils.exceptions import InvalidArgument, RulerException
from cheapruler.utils.geo import interpolate, long_diff, tile_to_latitude


class TestLongDiff(TestCase):
    def test_plain_difference(self):
        self.assertEqual(long_diff(10.0, 4.0), 6.0)
        self.assertEqual(long_diff(4.0, 10.0), -6.0)

    def test_wraps_at_antimeridian(self):
        self.assertAlmostEqual(long_diff(179.0, -179.0), -2.0)
        self.assertAlmostEqual(long_diff(-179.0, 179.0), 2.0)
        # halfway cases round to the even multiple of 360
        self.assertEqual(long_diff(540.0, 0.0), -180.0)

    def test_result_is_within_half_circle(self):
        for a in range(-720, 721, 45):
            for b in (-180.0, -90.0, 0.0, 33.3, 180.0):
                with self.subTest(a=a, b=b):
                    d = long_diff(a, b)
                    self.assertGreaterEqual(d, -180.0)
                    self.assertLessEqual(d, 180.0)


class TestInterpolate(TestCase):
    def test_midpoint(self):
        self.assertEqual(interpolate(Point(0.0, 0.0), Point(2.0, 4.0), 0.5), Point(1.0, 2.0))

    def test_takes_the_short_way_across_antimeridian(self):
        mid = interpolate(Point(179.0, 10.0), Point(-179.0, 12.0), 0.5)

        self.assertAlmostEqual(mid.x, 180.0)
        self.assertAlmostEqual(mid.y, 11.0)

    def test_extrapolates(self):
        self.assertEqual(interpolate(Point(0.0, 0.0), Point(1.0, 1.0), -1.0), Point(-1.0, -1.0))


class TestTileToLatitude(TestCase):
    def test_whole_world_tile(self):
        self.assertEqual(tile_to_latitude(0, 0), 0.0)

    def test_hemispheres(self):
        north = tile_to_latitude(0, 1)
        south = tile_to_latitude(1, 1)

        self.assertAlmostEqual(north, 66.5133, places=2)
        self.assertAlmostEqual(south, -north)

    def test_rejects_negative_row(self):
        with self.assertRaises(InvalidArgument):
            tile_to_latitude(-1, 3)

    def test_rejects_zoom_out_of_range(self):
        for z in (-1, 32, 33):
            with self.subTest(z=z):
                with self.assertRaises(RulerException):
                    tile_to_latitude(0, z)

    def test_rows_past_the_map_edge_reach_the_pole(self):
        self.assertEqual(tile_to_latitude(1000, 0), -90.0)
        self.assertLess(tile_to_latitude(1, 0), -85.0)
