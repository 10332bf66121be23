# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This package provides utility routines for working with directions outside of the rotation kernels.

Currently this is the :mod:`.spherical_coordinates` module, converting between azimuth/elevation bearings and
cartesian unit vectors.
"""

import rotkit.utilities.spherical_coordinates

from rotkit.utilities.spherical_coordinates import azel_to_cartesian, cartesian_to_azel

__all__ = ['azel_to_cartesian', 'cartesian_to_azel']
