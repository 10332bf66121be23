# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Core conversion routines for rotation representations

This module contains the routines converting between axis-angle, quaternion, rotation matrix and euler angle
representations.  All routines are implemented on numpy arrays (or array like objects) and handle a single rotation
per call.
"""

import warnings

import numpy as np

from rotkit._typing import ARRAY_LIKE, DOUBLE_ARRAY

from rotkit.rotations.core._helpers import (_check_matrix_array_and_shape, _check_quaternion_array_and_shape,
                                            _check_vector_array_and_shape, DegenerateGeometryWarning,
                                            GIMBAL_LOCK_TOLERANCE)
from rotkit.rotations.core.elementals import rot_x, rot_y, rot_z
from rotkit.rotations.types import AxisAngle, EulerAngles


__all__ = ['axisangle_to_quaternion', 'quaternion_to_rotation', 'axisangle_to_rotation',
           'rotation_matrix_around_z', 'euler_to_rotation', 'rotation_to_euler']


def _split_axis_angle(axis: ARRAY_LIKE | AxisAngle, angle: float | None) -> tuple[DOUBLE_ARRAY, float]:
    """
    Interprets the accepted axis-angle forms: an axis and an angle, an :class:`.AxisAngle`, or a flat
    ``[x, y, z, angle]`` buffer.
    """

    # separate axis and angle
    if angle is not None:
        return _check_vector_array_and_shape(axis), float(angle)

    # a named axis-angle pair
    if isinstance(axis, AxisAngle):
        return _check_vector_array_and_shape(axis.axis), float(axis.angle)

    if np.shape(axis) != (4,):
        raise ValueError('When no angle is given the axis must be a 4 element [x, y, z, angle] sequence')

    # a flat [x, y, z, angle] buffer
    flat = np.asarray(axis, dtype=np.float64)

    return flat[:3].copy(), float(flat[3])


def axisangle_to_quaternion(axis: ARRAY_LIKE | AxisAngle, angle: float | None = None) -> DOUBLE_ARRAY:
    r"""
    This function converts a unit rotation axis and an angle into a rotation quaternion of the form
    :math:`[q_x, q_y, q_z, q_s]`.

    .. math::
        \mathbf{q} = \left[\begin{array}{c} \text{sin}(\frac{\theta}{2})\hat{\mathbf{x}} \\
        \text{cos}(\frac{\theta}{2})\end{array}\right]

    The axis is used as given, so it must already be of unit length for the result to be a unit quaternion.

    If ``angle`` is ``None`` then ``axis`` is interpreted either as an :class:`.AxisAngle` or as a flat 4 element
    sequence ``[x, y, z, angle]``.

    :param axis: The unit rotation axis (or the full axis-angle when ``angle`` is ``None``)
    :param angle: The rotation angle in units of radians
    :return: The rotation quaternion as a length 4 array
    :raises ValueError: If the inputs are not the expected shape
    """

    # get the axis and angle from whichever form was given
    axis, angle = _split_axis_angle(axis, angle)

    # the quaternion is built from the half angle
    half_angle = angle / 2

    # form the vector and scalar portions and return
    return np.hstack([axis * np.sin(half_angle), np.cos(half_angle)])


def quaternion_to_rotation(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a unit rotation quaternion ``[x, y, z, w]`` into its equivalent 3x3 rotation matrix.

    .. math::
        \mathbf{T} = \left[\begin{array}{ccc}
        1-2(q_2^2+q_3^2) & 2(q_1q_2-q_3q_4) & 2(q_1q_3+q_2q_4) \\
        2(q_1q_2+q_3q_4) & 1-2(q_1^2+q_3^2) & 2(q_2q_3-q_1q_4) \\
        2(q_1q_3-q_2q_4) & 2(q_2q_3+q_1q_4) & 1-2(q_1^2+q_2^2) \end{array}\right]

    No normalization is performed, so a non-unit quaternion gives a matrix that is not orthonormal.  For example::

        >>> from rotkit.rotations import quaternion_to_rotation
        >>> from numpy import sqrt
        >>> quaternion_to_rotation([0, 0, sqrt(2)/2, sqrt(2)/2])
        array([[ 0., -1.,  0.],
               [ 1.,  0.,  0.],
               [ 0.,  0.,  1.]])

    :param quaternion: The rotation quaternion to convert
    :return: The 3x3 rotation matrix
    :raises ValueError: If the quaternion does not have 4 elements
    """

    # retrieve the elements of the quaternion
    q1, q2, q3, q4 = _check_quaternion_array_and_shape(quaternion)

    # compute the squares of the vector portion
    q1_2 = q1 * q1
    q2_2 = q2 * q2
    q3_2 = q3 * q3

    # compute the cross terms
    q12 = q1 * q2
    q13 = q1 * q3
    q14 = q1 * q4
    q23 = q2 * q3
    q24 = q2 * q4
    q34 = q3 * q4

    # form and return the rotation matrix
    return np.array([[1 - 2 * (q2_2 + q3_2), 2 * (q12 - q34), 2 * (q13 + q24)],
                     [2 * (q12 + q34), 1 - 2 * (q1_2 + q3_2), 2 * (q23 - q14)],
                     [2 * (q13 - q24), 2 * (q23 + q14), 1 - 2 * (q1_2 + q2_2)]])


def axisangle_to_rotation(axis: ARRAY_LIKE | AxisAngle, angle: float | None = None) -> DOUBLE_ARRAY:
    """
    This function converts a unit rotation axis and an angle in radians into a 3x3 rotation matrix.

    This is :func:`axisangle_to_quaternion` followed by :func:`quaternion_to_rotation`; see those functions for the
    accepted inputs.

    :param axis: The unit rotation axis (or the full axis-angle when ``angle`` is ``None``)
    :param angle: The rotation angle in units of radians
    :return: The 3x3 rotation matrix
    """

    # go through the quaternion
    return quaternion_to_rotation(axisangle_to_quaternion(axis, angle))


def rotation_matrix_around_z(angle: float) -> DOUBLE_ARRAY:
    """
    This function forms the counter-clockwise rotation in the xy plane, leaving z fixed.

    :param angle: The in-plane angle in units of degrees
    :return: The 3x3 rotation matrix
    """

    # convert to radians and form the elementary z rotation
    return rot_z(np.deg2rad(angle))


def euler_to_rotation(theta: float, phi: float, psi: float) -> DOUBLE_ARRAY:
    r"""
    This function converts euler angles in degrees into a rotation matrix.

    The rotation is formed as

    .. math::
        \mathbf{T} = \mathbf{R}_x(\theta)\mathbf{R}_y(\phi)\mathbf{R}_z(\psi)

    using :func:`.rot_x`, :func:`.rot_y`, and :func:`.rot_z`, multiplied left to right.  Because matrix
    multiplication does not commute this order defines the euler convention for the whole package.

    :param theta: The angle about the x axis in degrees
    :param phi: The angle about the y axis in degrees
    :param psi: The angle about the z axis in degrees
    :return: The 3x3 rotation matrix
    """

    # compose the elementary rotations in x, y, z order
    return rot_x(np.deg2rad(theta)) @ rot_y(np.deg2rad(phi)) @ rot_z(np.deg2rad(psi))


def rotation_to_euler(matrix: ARRAY_LIKE) -> EulerAngles:
    r"""
    This function extracts the euler angles in degrees from a rotation matrix built as in :func:`euler_to_rotation`.

    The angles are found (before negation and conversion to degrees) from

    .. math::
        \theta = \text{atan2}(t_{12}, t_{22}) \\
        \phi = \text{atan2}\left(-t_{02}, \sqrt{t_{00}^2+t_{01}^2}\right) \\
        \psi = \text{atan2}\left(\text{sin}(\theta)t_{20}-\text{cos}(\theta)t_{10},
        \text{cos}(\theta)t_{11}-\text{sin}(\theta)t_{21}\right)

    where :math:`t_{ij}` is the 0 indexed row, column element of the matrix.  For :math:`|\phi|<90` degrees and
    angles in :math:`(-180, 180]` this exactly inverts :func:`euler_to_rotation`.

    Gimbal lock (:math:`\phi=\pm 90` degrees) is not resolved.  When :math:`\text{cos}(\phi)` is below
    ``GIMBAL_LOCK_TOLERANCE`` a :class:`.DegenerateGeometryWarning` is issued and the formula result is returned as is.

    :param matrix: The 3x3 rotation matrix (or its 9 element row-major flattening)
    :return: The euler angles in degrees
    :raises ValueError: If the matrix is not 3x3
    """

    # ensure we have a 3x3 matrix
    matrix = _check_matrix_array_and_shape(matrix)

    # get the rotation about x
    theta = np.arctan2(matrix[1, 2], matrix[2, 2])

    # compute the cosine of phi from the first row
    cphi = np.sqrt(matrix[0, 0] ** 2 + matrix[0, 1] ** 2)

    # check for gimbal lock
    if cphi < GIMBAL_LOCK_TOLERANCE:
        warnings.warn('The rotation matrix is at gimbal lock (phi = +/-90 degrees).  '
                      'The extracted theta and psi are not unique.', DegenerateGeometryWarning)

    # get the rotation about y
    phi = np.arctan2(-matrix[0, 2], cphi)

    # compute the sine and cosine of theta
    stheta = np.sin(theta)
    ctheta = np.cos(theta)

    # get the rotation about z
    psi = np.arctan2(stheta * matrix[2, 0] - ctheta * matrix[1, 0],
                     ctheta * matrix[1, 1] - stheta * matrix[2, 1])

    # negate and convert to degrees
    return EulerAngles(float(-np.rad2deg(theta)), float(-np.rad2deg(phi)), float(-np.rad2deg(psi)))
