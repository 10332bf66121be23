"""
test_spherical_coordinates
==========================

Tests the azimuth/elevation conversions in the spherical_coordinates module.

Test Cases
__________
"""

from unittest import TestCase

import warnings

import numpy as np

from rotkit.utilities import spherical_coordinates as sc


class TestAzelToCartesian(TestCase):

    def test_azel_to_cartesian(self):

        cases = [((0, 0), [0, 0, 1]),
                 ((0, 90), [1, 0, 0]),
                 ((90, 90), [0, 1, 0]),
                 ((180, 90), [-1, 0, 0]),
                 ((-90, 90), [0, -1, 0]),
                 ((37, 180), [0, 0, -1]),
                 ((45, 45), [0.5, 0.5, np.sqrt(2) / 2])]

        for (azimuth, elevation), solu in cases:

            with self.subTest(azimuth=azimuth, elevation=elevation):

                unit = sc.azel_to_cartesian(azimuth, elevation)

                np.testing.assert_array_almost_equal(unit, solu)
                self.assertAlmostEqual(np.linalg.norm(unit), 1.0)


class TestCartesianToAzel(TestCase):

    def test_cartesian_to_azel(self):

        azel = sc.cartesian_to_azel([0, 0, 1])

        self.assertIsInstance(azel, sc.AzimuthElevation)
        self.assertAlmostEqual(azel.azimuth, 0)
        self.assertAlmostEqual(azel.elevation, 0)

        azel = sc.cartesian_to_azel([0, -2, 0])

        self.assertAlmostEqual(azel.azimuth, -90)
        self.assertAlmostEqual(azel.elevation, 90)

        # non-unit input
        azimuth, elevation = sc.cartesian_to_azel([3, 3, -3 * np.sqrt(2)])

        self.assertAlmostEqual(azimuth, 45)
        self.assertAlmostEqual(elevation, 135)

    def test_clipping(self):

        # z squared is subnormal here so the computed z/r lands just above 1
        azimuth, elevation = sc.cartesian_to_azel([0, 0, 1e-160])

        self.assertFalse(np.isnan(elevation))
        self.assertAlmostEqual(elevation, 0)
        self.assertAlmostEqual(azimuth, 0)

        azimuth, elevation = sc.cartesian_to_azel([0, 0, -1e-160])

        self.assertAlmostEqual(elevation, 180)

    def test_tiny_vectors(self):

        with warnings.catch_warnings():
            warnings.simplefilter('ignore', RuntimeWarning)

            # the norm underflows to 0 but the direction is still along +z
            azimuth, elevation = sc.cartesian_to_azel([0, 0, 1e-200])

            self.assertEqual(elevation, 0)
            self.assertEqual(azimuth, 0)

            # a zero vector has no direction
            azimuth, elevation = sc.cartesian_to_azel([0, 0, 0])

            self.assertTrue(np.isnan(elevation))

    def test_round_trip(self):

        for azimuth in np.linspace(-180, 180, 13):

            for elevation in np.linspace(5, 175, 9):

                with self.subTest(azimuth=azimuth, elevation=elevation):

                    result = sc.cartesian_to_azel(sc.azel_to_cartesian(azimuth, elevation))

                    # -180 and 180 are the same direction
                    self.assertAlmostEqual(np.cos(np.deg2rad(result.azimuth - azimuth)), 1.0)
                    self.assertAlmostEqual(result.elevation, elevation)

    def test_bad_inputs(self):

        with self.assertRaises(ValueError):
            sc.cartesian_to_azel([1, 0])

        with self.assertRaises(ValueError):
            sc.cartesian_to_azel(np.eye(3))
