"""
Immutable value types returned by the rotation and direction kernels.

These are plain named tuples so results can be unpacked directly, for instance ``theta, phi, psi =
rotation_to_euler(matrix)``.
"""

from typing import NamedTuple

from rotkit._typing import DOUBLE_ARRAY


class AxisAngle(NamedTuple):
    """
    A unit rotation axis and the angle to rotate about it in units of radians.
    """

    axis: DOUBLE_ARRAY
    angle: float


class EulerAngles(NamedTuple):
    """
    Euler angles in degrees interpreted as the rotation ``rot_x(theta) @ rot_y(phi) @ rot_z(psi)``.
    """

    theta: float
    phi: float
    psi: float


class AzimuthElevation(NamedTuple):
    """
    A spherical direction in degrees.

    The elevation is the polar angle measured from +z and the azimuth is measured in the xy plane from +x.
    """

    azimuth: float
    elevation: float


class LocalFrame(NamedTuple):
    """
    A right-handed orthonormal basis where ``cross(u, v) == normal``.
    """

    u: DOUBLE_ARRAY
    v: DOUBLE_ARRAY
    normal: DOUBLE_ARRAY
