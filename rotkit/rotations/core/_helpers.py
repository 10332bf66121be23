
import numpy as np

from rotkit._typing import ARRAY_LIKE, DOUBLE_ARRAY


ALIGNMENT_TOLERANCE: float = 1e-10
"""
Two unit normals with ``1 - dot < ALIGNMENT_TOLERANCE`` are treated as already aligned (and with
``1 + dot < ALIGNMENT_TOLERANCE`` as antiparallel).
"""

REFERENCE_SWITCH_THRESHOLD: float = 0.8
"""
When ``|dot(normal, +x)|`` exceeds this value the local frame is built from +y instead of +x.
"""

GIMBAL_LOCK_TOLERANCE: float = 1e-8
"""
Euler extraction reports gimbal lock when ``cos(phi)`` drops below this value.
"""


class DegenerateGeometryWarning(UserWarning):
    """
    Issued when an input lands in a geometric configuration that the closed form kernels do not resolve (antiparallel
    normals, gimbal lock).  The kernel result is still returned unmodified.
    """


def _canonical_axis(index: int) -> DOUBLE_ARRAY:
    axis = np.zeros(3)
    axis[index] = 1.0
    axis.flags.writeable = False
    return axis


CANONICAL_X: DOUBLE_ARRAY = _canonical_axis(0)
CANONICAL_Y: DOUBLE_ARRAY = _canonical_axis(1)
CANONICAL_Z: DOUBLE_ARRAY = _canonical_axis(2)


def _check_array_and_shape(input: ARRAY_LIKE, shape: tuple[int, ...], name: str) -> DOUBLE_ARRAY:
    in_shape = np.shape(input)

    if in_shape != shape:
        raise ValueError(f'The {name} must have shape {shape}, got {in_shape}')

    return np.array(input, dtype=np.float64)


def _check_vector_array_and_shape(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(vector, (3,), 'vector')


def _check_quaternion_array_and_shape(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(quaternion, (4,), 'quaternion')


def _check_matrix_array_and_shape(matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    # flat row-major buffers of 9 are accepted as well
    if np.shape(matrix) == (9,):
        return np.array(matrix, dtype=np.float64).reshape(3, 3)

    return _check_array_and_shape(matrix, (3, 3), 'rotation matrix')


def _normalize(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Returns the vector scaled to unit L2 length.

    A zero vector is not guarded against and produces NaN.
    """

    vector = np.asanyarray(vector, dtype=np.float64)

    return vector / np.linalg.norm(vector)


def _cross_normalized(a: ARRAY_LIKE, b: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _normalize(np.cross(a, b))
