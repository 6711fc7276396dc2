# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Conversions into CIE XYZ and CIE L*a*b*.

RGB sources are taken to linear light (sRGB is gamma-expanded) and mapped
through the sRGB/D65 matrix, so the result is relative to the default
white and carries no reference_white. XYZ ↔ Lab keeps whatever reference
white the source carries.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pigment.convert.colorspace import (
    clamp_unit,
    gamma_expand,
    lab_to_xyz,
    linear_rgb_to_xyz,
    to_unit,
    xyz_to_lab,
)
from pigment.schema.formats import U8_MAX, CieLab, CieXyz, Rgb, RgbaF, RgbF, Srgb, SrgbF


def _xyz(linear: ArrayLike) -> CieXyz:
    return CieXyz(*linear_rgb_to_xyz(linear))


def _lab(linear: ArrayLike) -> CieLab:
    return CieLab(*xyz_to_lab(linear_rgb_to_xyz(linear)))


# =============================================================================
# RGB → CIE XYZ
# =============================================================================


def rgb_to_ciexyz(color: Rgb) -> CieXyz:
    """Rgb is already linear; no gamma expansion."""
    return _xyz(to_unit(color.channels, U8_MAX))


def srgb_to_ciexyz(color: Srgb) -> CieXyz:
    return _xyz(gamma_expand(to_unit(color.channels, U8_MAX)))


def rgbf_to_ciexyz(color: RgbF) -> CieXyz:
    return _xyz(clamp_unit(color.channels))


def srgbf_to_ciexyz(color: SrgbF) -> CieXyz:
    return _xyz(gamma_expand(color.channels))


def rgbaf_to_ciexyz(color: RgbaF) -> CieXyz:
    return _xyz(color.channels[:3])


# =============================================================================
# RGB → CIE L*a*b*
# =============================================================================


def rgb_to_cielab(color: Rgb) -> CieLab:
    return _lab(to_unit(color.channels, U8_MAX))


def srgb_to_cielab(color: Srgb) -> CieLab:
    return _lab(gamma_expand(to_unit(color.channels, U8_MAX)))


def rgbf_to_cielab(color: RgbF) -> CieLab:
    return _lab(clamp_unit(color.channels))


def srgbf_to_cielab(color: SrgbF) -> CieLab:
    return _lab(gamma_expand(color.channels))


def rgbaf_to_cielab(color: RgbaF) -> CieLab:
    return _lab(color.channels[:3])


# =============================================================================
# CIE XYZ ↔ CIE L*a*b*
# =============================================================================


def ciexyz_to_cielab(color: CieXyz) -> CieLab:
    """Lab relative to the value's own white, which is carried over."""
    return CieLab(*xyz_to_lab(color.channels, color.white), reference_white=color.reference_white)


def cielab_to_ciexyz(color: CieLab) -> CieXyz:
    return CieXyz(*lab_to_xyz(color.channels, color.white), reference_white=color.reference_white)
