from unittest import TestCase

import numpy as np

from rotkit import rotations as rt


SRT3D2 = np.sqrt(3) / 2


class TestRotX(TestCase):

    def test_rot_x(self):

        cases = [(np.pi, [[1, 0, 0], [0, -1, 0], [0, 0, -1]]),
                 (np.pi / 2, [[1, 0, 0], [0, 0, -1], [0, 1, 0]]),
                 (np.pi / 3, [[1, 0, 0], [0, 0.5, -SRT3D2], [0, SRT3D2, 0.5]]),
                 (0, np.eye(3)),
                 (-np.pi / 2, [[1, 0, 0], [0, 0, 1], [0, -1, 0]]),
                 (-np.pi / 3, [[1, 0, 0], [0, 0.5, SRT3D2], [0, -SRT3D2, 0.5]])]

        for angle, solu in cases:

            with self.subTest(angle=angle):

                np.testing.assert_almost_equal(rt.rot_x(angle), solu)


class TestRotY(TestCase):

    def test_rot_y(self):

        cases = [(np.pi, [[-1, 0, 0], [0, 1, 0], [0, 0, -1]]),
                 (np.pi / 2, [[0, 0, 1], [0, 1, 0], [-1, 0, 0]]),
                 (np.pi / 3, [[0.5, 0, SRT3D2], [0, 1, 0], [-SRT3D2, 0, 0.5]]),
                 (0, np.eye(3)),
                 (-np.pi / 2, [[0, 0, -1], [0, 1, 0], [1, 0, 0]]),
                 (-np.pi / 3, [[0.5, 0, -SRT3D2], [0, 1, 0], [SRT3D2, 0, 0.5]])]

        for angle, solu in cases:

            with self.subTest(angle=angle):

                np.testing.assert_almost_equal(rt.rot_y(angle), solu)


class TestRotZ(TestCase):

    def test_rot_z(self):

        cases = [(np.pi, [[-1, 0, 0], [0, -1, 0], [0, 0, 1]]),
                 (np.pi / 2, [[0, -1, 0], [1, 0, 0], [0, 0, 1]]),
                 (np.pi / 3, [[0.5, -SRT3D2, 0], [SRT3D2, 0.5, 0], [0, 0, 1]]),
                 (0, np.eye(3)),
                 (-np.pi / 2, [[0, 1, 0], [-1, 0, 0], [0, 0, 1]]),
                 (-np.pi / 3, [[0.5, SRT3D2, 0], [-SRT3D2, 0.5, 0], [0, 0, 1]])]

        for angle, solu in cases:

            with self.subTest(angle=angle):

                np.testing.assert_almost_equal(rt.rot_z(angle), solu)
