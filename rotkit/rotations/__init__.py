r"""
This package defines routines for converting between rotation and direction representations, for aligning one
direction with another, and for building a local orthonormal frame about a normal.

The representations used in this package are described as follows:

.. _rotation-representation-table:

=================  =====================================================================================================
Representation     Description
=================  =====================================================================================================
axis-angle         A unit 3 element rotation axis :math:`\hat{\mathbf{x}}` and an angle :math:`\theta` in radians to
                   rotate about it.  Either passed as separate ``axis, angle`` arguments, as an :class:`.AxisAngle`,
                   or as a flat 4 element sequence ``[x, y, z, angle]``.
quaternion         A 4 element rotation quaternion of the form
                   :math:`\mathbf{q}=\left[\begin{array}{c} q_x \\ q_y \\ q_z \\ q_s\end{array}\right]=
                   \left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
                   \text{cos}(\frac{\theta}{2})\end{array}\right]`.
rotation matrix    A :math:`3\times 3` orthonormal matrix with determinant 1.  Inputs may also be given as the 9
                   element row-major flattening, and ``matrix.ravel()`` gives that flattening for outputs.
euler angles       Three angles :math:`(\theta, \phi, \psi)` in degrees forming the rotation
                   :math:`\mathbf{T}=\mathbf{R}_x(\theta)\mathbf{R}_y(\phi)\mathbf{R}_z(\psi)`.
=================  =====================================================================================================

Angles crossing the axis-angle and quaternion boundaries are in radians.  Every other angle in the package (euler,
planar and spherical) is in degrees.

Two configurations are known to be unresolved by the closed form kernels: antiparallel normals in
:func:`.rotate_normal_to_normal` and gimbal lock in :func:`.rotation_to_euler`.  Both issue a
:class:`.DegenerateGeometryWarning` rather than raising or altering the result.
"""

import rotkit.rotations.core
import rotkit.rotations.frames
import rotkit.rotations.types

from rotkit.rotations.core import *
from rotkit.rotations.frames import rotate_normal_to_normal, construct_local_coordinate_frame
from rotkit.rotations.types import AxisAngle, EulerAngles, AzimuthElevation, LocalFrame

__all__ = ['axisangle_to_quaternion', 'quaternion_to_rotation', 'axisangle_to_rotation',
           'rotation_matrix_around_z', 'euler_to_rotation', 'rotation_to_euler',
           'rot_x', 'rot_y', 'rot_z',
           'DegenerateGeometryWarning', 'CANONICAL_X', 'CANONICAL_Y', 'CANONICAL_Z',
           'ALIGNMENT_TOLERANCE', 'REFERENCE_SWITCH_THRESHOLD', 'GIMBAL_LOCK_TOLERANCE',
           'rotate_normal_to_normal', 'construct_local_coordinate_frame',
           'AxisAngle', 'EulerAngles', 'AzimuthElevation', 'LocalFrame']
