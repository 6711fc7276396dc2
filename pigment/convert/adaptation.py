# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Chromatic adaptation (Bradford).

Moves XYZ coordinates from one reference white to another:

    M = M_A^-1 · diag(ρ_dest / ρ_source) · M_A

where ρ are the cone responses (M_A · white) of the two whites. The
composed 3x3 matrix is built once per call and applied to the color.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pigment.schema.formats import CieXyz, is_default_white

logger = logging.getLogger(__name__)


# Bradford cone-response matrix
BRADFORD = np.array([
    [0.8951, 0.2664, -0.1614],
    [-0.7502, 1.7135, 0.0367],
    [0.0389, -0.0685, 1.0296],
], dtype=np.float64)

BRADFORD_INV = np.linalg.inv(BRADFORD)


def adaptation_matrix(source_white: ArrayLike, dest_white: ArrayLike) -> NDArray[np.float64]:
    """
    Build the 3x3 Bradford matrix taking source_white to dest_white.

    Args:
        source_white: XYZ of the white the color is currently relative to
        dest_white: XYZ of the white to adapt to

    Returns:
        Matrix M such that M @ xyz is the adapted color
    """
    source_cone = BRADFORD @ np.asarray(source_white, dtype=np.float64)
    dest_cone = BRADFORD @ np.asarray(dest_white, dtype=np.float64)
    return BRADFORD_INV @ np.diag(dest_cone / source_cone) @ BRADFORD


def adapt_xyz(
    xyz: ArrayLike,
    source_white: ArrayLike,
    dest_white: ArrayLike,
) -> NDArray[np.float64]:
    """Adapt XYZ values of shape (..., 3) between two reference whites."""
    matrix = adaptation_matrix(source_white, dest_white)
    return np.einsum('...j,ij->...i', np.asarray(xyz, dtype=np.float64), matrix)


def chromatic_adaptation(xyz: CieXyz, dest_white: CieXyz) -> CieXyz:
    """
    Adapt a CieXyz value to a new reference white.

    The source white is the value's own reference white (D65 when none is
    attached). Only the coordinates of dest_white are used.

    Returns:
        New CieXyz referenced to dest_white (None when dest_white is D65)
    """
    dest = (dest_white.x, dest_white.y, dest_white.z)
    logger.debug("Adapting XYZ from white %s to %s", xyz.white, dest)

    adapted = adapt_xyz(xyz.channels, xyz.white, dest)
    return CieXyz(*adapted, reference_white=None if is_default_white(dest) else dest)


def xyz_in_default_white(xyz: CieXyz) -> NDArray[np.float64]:
    """Coordinates of xyz expressed against D65, adapting only if needed."""
    if xyz.has_default_white:
        return np.asarray(xyz.channels, dtype=np.float64)
    return np.asarray(chromatic_adaptation(xyz, CieXyz.default_white()).channels, dtype=np.float64)
