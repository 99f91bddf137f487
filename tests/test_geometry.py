import math
import random
import unittest

from circle_pong.geometry import (
    TWO_PI,
    angular_difference,
    distance,
    is_covered,
    normalize_angle,
    reflect,
    signed_angle_difference,
    unit_normal,
)

SAMPLE_ANGLES = [0.0, 1.0, -1.0, math.pi, -math.pi, TWO_PI, -TWO_PI, 7.5, -7.5,
                 1e6, -1e6, -1e-17, 123.456, TWO_PI - 1e-12]


class NormalizeAngleTests(unittest.TestCase):
    def test_result_in_range(self):
        for a in SAMPLE_ANGLES:
            n = normalize_angle(a)
            self.assertGreaterEqual(n, 0.0, a)
            self.assertLess(n, TWO_PI, a)

    def test_idempotent(self):
        for a in SAMPLE_ANGLES:
            n = normalize_angle(a)
            self.assertEqual(normalize_angle(n), n)

    def test_negative_wraps_forward(self):
        self.assertAlmostEqual(normalize_angle(-math.pi / 2), 3 * math.pi / 2)
        self.assertAlmostEqual(normalize_angle(-0.2), TWO_PI - 0.2)

    def test_far_outside_range(self):
        self.assertAlmostEqual(normalize_angle(10 * TWO_PI + 0.5), 0.5)
        self.assertAlmostEqual(normalize_angle(-10 * TWO_PI + 0.5), 0.5)


class AngularDifferenceTests(unittest.TestCase):
    def test_symmetric_and_bounded(self):
        rng = random.Random(3)
        pairs = [(a, b) for a in SAMPLE_ANGLES for b in SAMPLE_ANGLES]
        pairs += [(rng.uniform(-50, 50), rng.uniform(-50, 50)) for _ in range(200)]
        for a, b in pairs:
            d = angular_difference(a, b)
            self.assertEqual(d, angular_difference(b, a))
            self.assertGreaterEqual(d, 0.0)
            self.assertLessEqual(d, math.pi)

    def test_wraparound_takes_short_way(self):
        self.assertAlmostEqual(angular_difference(0.1, TWO_PI - 0.1), 0.2)
        self.assertAlmostEqual(angular_difference(0.0, math.pi), math.pi)

    def test_signed_difference(self):
        self.assertAlmostEqual(signed_angle_difference(0.1, TWO_PI - 0.1), 0.2)
        self.assertAlmostEqual(signed_angle_difference(TWO_PI - 0.1, 0.1), -0.2)
        self.assertAlmostEqual(signed_angle_difference(1.0, 0.0), 1.0)
        self.assertAlmostEqual(signed_angle_difference(-1.0, 0.0), -1.0)


class VectorTests(unittest.TestCase):
    def test_distance(self):
        self.assertEqual(distance(3.0, 4.0), 5.0)
        self.assertEqual(distance(0.0, 0.0), 0.0)

    def test_unit_normal(self):
        nx, ny = unit_normal(3.0, 4.0)
        self.assertAlmostEqual(nx, 0.6)
        self.assertAlmostEqual(ny, 0.8)

    def test_unit_normal_of_origin_is_none(self):
        self.assertIsNone(unit_normal(0.0, 0.0))

    def test_reflect_flips_normal_component(self):
        self.assertEqual(reflect(0.3, 0.2, 1.0, 0.0), (-0.3, 0.2))

    def test_reflection_law(self):
        rng = random.Random(11)
        for _ in range(100):
            vx, vy = rng.uniform(-2, 2), rng.uniform(-2, 2)
            theta = rng.uniform(0, TWO_PI)
            nx, ny = math.cos(theta), math.sin(theta)
            rx, ry = reflect(vx, vy, nx, ny)
            self.assertAlmostEqual(rx * nx + ry * ny, -(vx * nx + vy * ny))
            self.assertAlmostEqual(math.hypot(rx, ry), math.hypot(vx, vy))


class CoverageTests(unittest.TestCase):
    def test_exact_paddle_angle_is_covered(self):
        self.assertTrue(is_covered(1.25, 1.25, 0.5))
        self.assertTrue(is_covered(0.0, 0.0, 0.01))

    def test_upper_edge_is_inclusive(self):
        self.assertTrue(is_covered(1.5, 1.0, 0.5))
        self.assertTrue(is_covered(0.5, 0.0, 0.5))

    def test_outside_is_not_covered(self):
        self.assertFalse(is_covered(math.atan2(0.2, 0.3), 0.0, 0.5))
        self.assertFalse(is_covered(math.pi, 0.0, 0.5))

    def test_covered_across_zero(self):
        self.assertTrue(is_covered(TWO_PI - 0.3, 0.0, 0.5))
        self.assertTrue(is_covered(0.2, TWO_PI - 0.2, 0.5))


if __name__ == "__main__":
    unittest.main()
