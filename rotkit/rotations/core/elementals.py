
import numpy as np

from rotkit._typing import DOUBLE_ARRAY


__all__ = ["rot_x", "rot_y", "rot_z"]


def rot_x(theta: float) -> DOUBLE_ARRAY:
    r"""
    This function forms the right handed rotation about the x axis by angle theta.

    .. math::
        \mathbf{R}_x(\theta)=\left[\begin{array}{ccc} 1 & 0 & 0 \\
        0 & \text{cos}(\theta) & -\text{sin}(\theta) \\
        0 & \text{sin}(\theta) & \text{cos}(\theta) \end{array}\right]

    For example::

        >>> from rotkit.rotations import rot_x
        >>> rot_x(0.5)
        array([[ 1.        ,  0.        ,  0.        ],
               [ 0.        ,  0.87758256, -0.47942554],
               [ 0.        ,  0.47942554,  0.87758256]])

    :param theta: The angle to rotate by in units of radians
    :return: The 3x3 rotation matrix
    """

    # compute the cosine and sine of theta
    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    # form and return the matrix
    return np.array([[1.0, 0.0, 0.0],
                     [0.0, ctheta, -stheta],
                     [0.0, stheta, ctheta]])


def rot_y(theta: float) -> DOUBLE_ARRAY:
    r"""
    This function forms the right handed rotation about the y axis by angle theta.

    .. math::
        \mathbf{R}_y(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & 0 & \text{sin}(\theta) \\
        0 & 1 & 0 \\
        -\text{sin}(\theta) & 0 & \text{cos}(\theta) \end{array}\right]

    :param theta: The angle to rotate by in units of radians
    :return: The 3x3 rotation matrix
    """

    # compute the cosine and sine of theta
    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    # form and return the matrix
    return np.array([[ctheta, 0.0, stheta],
                     [0.0, 1.0, 0.0],
                     [-stheta, 0.0, ctheta]])


def rot_z(theta: float) -> DOUBLE_ARRAY:
    r"""
    This function forms the right handed rotation about the z axis by angle theta.

    .. math::
        \mathbf{R}_z(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & -\text{sin}(\theta) & 0 \\
        \text{sin}(\theta) & \text{cos}(\theta) & 0 \\
        0 & 0 & 1 \end{array}\right]

    :param theta: The angle to rotate by in units of radians
    :return: The 3x3 rotation matrix
    """

    # compute the cosine and sine of theta
    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    # form and return the matrix
    return np.array([[ctheta, -stheta, 0.0],
                     [stheta, ctheta, 0.0],
                     [0.0, 0.0, 1.0]])
