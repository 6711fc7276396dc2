# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Conversion core for pigment.

Pairwise conversions live in one module per target family (grayscale,
rgb, cylindrical, cie); the engine routes any pair through them.
All operations are pure and never fail for valid format tags.
"""

from pigment.convert.adaptation import (
    adapt_xyz,
    adaptation_matrix,
    chromatic_adaptation,
)
from pigment.convert.colorspace import gamma_compress, gamma_expand, luminance
from pigment.convert.engine import (
    MAX_HOPS,
    conversion_path,
    convert,
    convert_value,
    next_hop,
)

__all__ = [
    # Engine
    "convert",
    "convert_value",
    "conversion_path",
    "next_hop",
    "MAX_HOPS",
    # Chromatic adaptation
    "chromatic_adaptation",
    "adaptation_matrix",
    "adapt_xyz",
    # Transfer function and luminance
    "gamma_compress",
    "gamma_expand",
    "luminance",
]
