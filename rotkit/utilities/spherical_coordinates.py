"""
This module contains helper functions for transforming between azimuth/elevation spherical directions and cartesian
unit vectors.

Throughout, the elevation is the polar angle measured from the +z axis (so 0 is +z and 180 is -z) and the azimuth is
measured in the xy plane from the +x axis towards +y.  All angles are in degrees.
"""

import numpy as np

from rotkit._typing import ARRAY_LIKE, DOUBLE_ARRAY
from rotkit.rotations.core._helpers import _check_vector_array_and_shape
from rotkit.rotations.types import AzimuthElevation


def azel_to_cartesian(azimuth: float, elevation: float) -> DOUBLE_ARRAY:
    r"""
    This utility converts an azimuth/elevation pair in degrees into a unit vector.

    The conversion to a unit vector is given by:

    .. math::
        \hat{\mathbf{x}}=\left[\begin{array}{c}\text{sin}(e)\text{cos}(a)\\
        \text{sin}(e)\text{sin}(a)\\
        \text{cos}(e)\end{array}\right]

    where :math:`a` is the azimuth and :math:`e` is the elevation (polar angle).

    :param azimuth: The azimuth in units of degrees
    :param elevation: The elevation (polar angle from +z) in units of degrees
    :return: A length 3 unit vector
    """

    azimuth = np.deg2rad(azimuth)
    elevation = np.deg2rad(elevation)

    return np.array([np.sin(elevation) * np.cos(azimuth),
                     np.sin(elevation) * np.sin(azimuth),
                     np.cos(elevation)])


def cartesian_to_azel(vector: ARRAY_LIKE) -> AzimuthElevation:
    r"""
    This function converts a vector into an azimuth/elevation pair in degrees.

    .. math::

        e = \text{cos}^{-1}\left(\frac{z}{\left\|\mathbf{x}\right\|}\right) \\
        a = \text{tan}^{-1}\left(\frac{y}{x}\right)

    The vector does not need to be of unit length.  The ratio fed to the inverse cosine is clipped to [-1, 1] so
    rounding can't produce NaN.  This also covers tiny vectors whose norm underflows (for instance ``[0, 0, 1e-200]``
    gives an elevation of 0).  The azimuth is returned in [-180, 180] and the elevation in [0, 180].

    A zero vector has no direction and results in a NaN elevation.

    :param vector: The vector to convert
    :return: The azimuth and elevation in units of degrees
    :raises ValueError: If the vector is not length 3
    """

    vector = _check_vector_array_and_shape(vector)

    # get the length of the vector
    radius = np.linalg.norm(vector)

    # keep the cosine of the elevation in range before inverting it
    cos_elevation = np.clip(vector[2] / radius, -1.0, 1.0)

    elevation = np.rad2deg(np.arccos(cos_elevation))
    azimuth = np.rad2deg(np.arctan2(vector[1], vector[0]))

    return AzimuthElevation(float(azimuth), float(elevation))
