# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
rotkit: conversions between rotation and direction representations.

The :mod:`rotkit.rotations` package holds the rotation kernels (axis-angle, quaternion, rotation matrix, euler angles,
normal alignment and local frames) and :mod:`rotkit.utilities.spherical_coordinates` holds the azimuth/elevation
conversions.
"""

import warnings

from rotkit.rotations.core._helpers import DegenerateGeometryWarning

import rotkit.rotations
import rotkit.utilities


warnings.filterwarnings("default", category=DegenerateGeometryWarning)


__all__ = ['DegenerateGeometryWarning', 'rotations', 'utilities']
