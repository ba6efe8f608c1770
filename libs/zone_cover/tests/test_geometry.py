import math
import unittest

import numpy as np
from zone_cover import Point, Circle, Cover


class TestGeometry(unittest.TestCase):

    def test_circle_contains_boundary(self):
        circle = Circle(Point(0.0, 0.0), 5.0)
        self.assertTrue(circle.contains_point(Point(3.0, 4.0)))
        self.assertTrue(circle.contains_point(Point(0.0, 0.0)))
        self.assertFalse(circle.contains_point(Point(3.0, 4.1)))

    def test_distance_and_area(self):
        circle = Circle(Point(1.0, 1.0), 2.0)
        self.assertAlmostEqual(circle.distance_to_point(Point(1.0, 4.0)), 1.0)
        self.assertAlmostEqual(circle.distance_to_point(Point(1.0, 1.0)), -2.0)
        self.assertAlmostEqual(circle.area(), 4 * math.pi)

    def test_cover_bounds(self):
        cover = Cover(circles=[Circle(Point(0.0, 0.0), 1.0), Circle(Point(10.0, -5.0), 1.0)])
        min_bounds, max_bounds = cover.bounds()
        np.testing.assert_allclose(min_bounds, [-1.0, -6.0])
        np.testing.assert_allclose(max_bounds, [11.0, 1.0])

    def test_empty_cover(self):
        cover = Cover()
        self.assertEqual(len(cover), 0)
        self.assertEqual(list(cover), [])
        self.assertFalse(cover.contains_point(Point(0.0, 0.0)))
        self.assertTrue(cover.covers_all([]))
        np.testing.assert_allclose(cover.bounds()[0], [0.0, 0.0])
        self.assertEqual(cover.total_area(), 0)

    def test_cover_membership(self):
        cover = Cover(circles=[Circle(Point(0.0, 0.0), 1.0)],
                      assignments=[np.array([0, 1])])
        self.assertTrue(cover.covers_all([Point(0.5, 0.5), Point(-1.0, 0.0)]))
        self.assertFalse(cover.covers_all([Point(0.5, 0.5), Point(2.0, 0.0)]))
        self.assertEqual(cover.coverage_counts(), [2])


if __name__ == '__main__':
    unittest.main()
