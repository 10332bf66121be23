"""
This module contains the closed form kernels for rotation calculations. It has no dependencies on the other rotation
modules to avoid circular imports.  All functions here are pure and can be used as building blocks for the higher
level frame routines.
"""

import rotkit.rotations.core.conversions
import rotkit.rotations.core.elementals

from rotkit.rotations.core.conversions import (axisangle_to_quaternion, quaternion_to_rotation, axisangle_to_rotation,
                                               rotation_matrix_around_z, euler_to_rotation, rotation_to_euler)

from rotkit.rotations.core.elementals import rot_x, rot_y, rot_z

from rotkit.rotations.core._helpers import (DegenerateGeometryWarning, CANONICAL_X, CANONICAL_Y, CANONICAL_Z,
                                            ALIGNMENT_TOLERANCE, REFERENCE_SWITCH_THRESHOLD, GIMBAL_LOCK_TOLERANCE)

__all__ = ['axisangle_to_quaternion', 'quaternion_to_rotation', 'axisangle_to_rotation',
           'rotation_matrix_around_z', 'euler_to_rotation', 'rotation_to_euler',
           'rot_x', 'rot_y', 'rot_z',
           'DegenerateGeometryWarning', 'CANONICAL_X', 'CANONICAL_Y', 'CANONICAL_Z',
           'ALIGNMENT_TOLERANCE', 'REFERENCE_SWITCH_THRESHOLD', 'GIMBAL_LOCK_TOLERANCE']
