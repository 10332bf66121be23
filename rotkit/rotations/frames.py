import warnings

import numpy as np

from rotkit.rotations.core._helpers import (_check_vector_array_and_shape, _normalize, _cross_normalized,
                                            DegenerateGeometryWarning, ALIGNMENT_TOLERANCE,
                                            REFERENCE_SWITCH_THRESHOLD, CANONICAL_X, CANONICAL_Y, CANONICAL_Z)
from rotkit.rotations.core.conversions import axisangle_to_rotation
from rotkit.rotations.types import AxisAngle, LocalFrame

from rotkit._typing import ARRAY_LIKE, DOUBLE_ARRAY


__all__ = ['rotate_normal_to_normal', 'construct_local_coordinate_frame']


def rotate_normal_to_normal(normal_a: ARRAY_LIKE, normal_b: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Compute the minimal rotation matrix that rotates direction ``normal_a`` onto direction ``normal_b``.

    Both inputs are normalized first.  If they are already aligned (``1 - dot < ALIGNMENT_TOLERANCE``) the identity is
    returned.  Otherwise the rotation is about ``cross(normal_a, normal_b)`` by ``arccos(dot)``.

    Antiparallel inputs are not resolved: the cross product vanishes and the result is NaN.  A
    :class:`.DegenerateGeometryWarning` is issued in that case.

    :param normal_a: The direction to rotate from
    :param normal_b: The direction to rotate to
    :return: The 3x3 rotation matrix such that ``matrix @ normal_a`` is along ``normal_b``
    :raises ValueError: If either input is not a 3 vector
    """

    unit_a = _normalize(_check_vector_array_and_shape(normal_a))
    unit_b = _normalize(_check_vector_array_and_shape(normal_b))

    dot_ab = np.dot(unit_a, unit_b)

    if 1 - dot_ab < ALIGNMENT_TOLERANCE:
        return axisangle_to_rotation(AxisAngle(np.array(CANONICAL_Z), 0.0))

    if 1 + dot_ab < ALIGNMENT_TOLERANCE:
        warnings.warn('The normals are antiparallel so the rotation axis is undefined.', DegenerateGeometryWarning)

    return axisangle_to_rotation(AxisAngle(_cross_normalized(unit_a, unit_b), np.arccos(dot_ab)))


def construct_local_coordinate_frame(z_normal: ARRAY_LIKE, out_u: DOUBLE_ARRAY | None = None,
                                     out_v: DOUBLE_ARRAY | None = None) -> LocalFrame:
    """
    Build two unit vectors ``u`` and ``v`` so that ``(u, v, z_normal)`` is a right-handed orthonormal basis.

    The frame is built by crossing the normal with +x.  If the normal is within ``REFERENCE_SWITCH_THRESHOLD`` of
    being parallel to +x (in absolute dot product) +y is used instead, which keeps the cross products well
    conditioned.

    ``z_normal`` should be a unit vector.  It is used as given.

    If ``out_u`` and/or ``out_v`` are given they are filled in place (and returned in the frame).  These buffers must
    be float64 arrays of shape (3,) and may not share memory with each other or with ``z_normal``.

    :param z_normal: The unit normal of the frame
    :param out_u: Optional length 3 float array to receive ``u``
    :param out_v: Optional length 3 float array to receive ``v``
    :return: The local frame ``(u, v, normal)``
    :raises ValueError: If ``z_normal`` is not a 3 vector
    """

    buffers = [buffer for buffer in (z_normal, out_u, out_v) if isinstance(buffer, np.ndarray)]

    for index, first in enumerate(buffers):
        for second in buffers[index + 1:]:
            assert not np.shares_memory(first, second), 'overlapping buffers are not allowed'

    for out in (out_u, out_v):
        if out is not None:
            assert isinstance(out, np.ndarray) and out.dtype == np.float64 and out.shape == (3,), \
                'output buffers must be float64 arrays of shape (3,)'

    normal = _check_vector_array_and_shape(z_normal)

    if abs(np.dot(normal, CANONICAL_X)) > REFERENCE_SWITCH_THRESHOLD:
        u = _cross_normalized(CANONICAL_Y, normal)
        v = _cross_normalized(normal, u)
    else:
        v = _cross_normalized(normal, CANONICAL_X)
        u = _cross_normalized(v, normal)

    if out_u is not None:
        out_u[:] = u
        u = out_u

    if out_v is not None:
        out_v[:] = v
        v = out_v

    return LocalFrame(u, v, normal)
