# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Conversions into the grayscale formats (Gray8, Gray16, GrayF).

Luminance is always taken in linear light with Rec. 709 weights, so
gamma-encoded sources are expanded first. Integer targets clamp and round.
"""

from __future__ import annotations

from pigment.convert.adaptation import xyz_in_default_white
from pigment.convert.cie import cielab_to_ciexyz
from pigment.convert.colorspace import (
    clamp_unit,
    gamma_expand,
    lab_relative_luminance,
    luminance,
    quantize,
    to_unit,
)
from pigment.schema.formats import (
    U8_MAX,
    U16_MAX,
    CieLab,
    CieXyz,
    Gray8,
    Gray16,
    GrayF,
    Rgb,
    Rgb48,
    Rgba,
    Rgba64,
    RgbaF,
    RgbF,
    Srgb,
    SrgbF,
)


def _rgb_luminance(color, maximum: int) -> float:
    """Unit luminance of an integer RGB(A) value; alpha is ignored."""
    return luminance(to_unit(color.channels[:3], maximum))


def _float_luminance(color) -> float:
    return luminance(color.channels[:3])


# =============================================================================
# Grayscale → Grayscale
# =============================================================================


def gray8_to_gray16(color: Gray8) -> Gray16:
    return Gray16(color.luminance * 257)


def gray8_to_grayf(color: Gray8) -> GrayF:
    return GrayF(color.luminance / U8_MAX)


def gray16_to_gray8(color: Gray16) -> Gray8:
    return Gray8(quantize(color.luminance / U16_MAX, U8_MAX))


def gray16_to_grayf(color: Gray16) -> GrayF:
    return GrayF(color.luminance / U16_MAX)


def grayf_to_gray8(color: GrayF) -> Gray8:
    return Gray8(quantize(color.luminance, U8_MAX))


def grayf_to_gray16(color: GrayF) -> Gray16:
    return Gray16(quantize(color.luminance, U16_MAX))


# =============================================================================
# RGB Family → Grayscale
# =============================================================================


def rgb_to_gray8(color: Rgb) -> Gray8:
    return Gray8(quantize(_rgb_luminance(color, U8_MAX), U8_MAX))


def rgb_to_gray16(color: Rgb) -> Gray16:
    return Gray16(quantize(_rgb_luminance(color, U8_MAX), U16_MAX))


def rgb_to_grayf(color: Rgb) -> GrayF:
    return GrayF(_rgb_luminance(color, U8_MAX))


def srgb_to_grayf(color: Srgb) -> GrayF:
    """Expand each channel to linear light, then weight."""
    return GrayF(luminance(gamma_expand(to_unit(color.channels, U8_MAX))))


def rgb48_to_gray16(color: Rgb48) -> Gray16:
    return Gray16(quantize(_rgb_luminance(color, U16_MAX), U16_MAX))


def rgb48_to_grayf(color: Rgb48) -> GrayF:
    return GrayF(_rgb_luminance(color, U16_MAX))


def rgba_to_gray8(color: Rgba) -> Gray8:
    return Gray8(quantize(_rgb_luminance(color, U8_MAX), U8_MAX))


def rgba_to_gray16(color: Rgba) -> Gray16:
    return Gray16(quantize(_rgb_luminance(color, U8_MAX), U16_MAX))


def rgba_to_grayf(color: Rgba) -> GrayF:
    return GrayF(_rgb_luminance(color, U8_MAX))


def rgba64_to_gray16(color: Rgba64) -> Gray16:
    return Gray16(quantize(_rgb_luminance(color, U16_MAX), U16_MAX))


def rgba64_to_grayf(color: Rgba64) -> GrayF:
    return GrayF(_rgb_luminance(color, U16_MAX))


def rgbf_to_gray8(color: RgbF) -> Gray8:
    return Gray8(quantize(_float_luminance(color), U8_MAX))


def rgbf_to_gray16(color: RgbF) -> Gray16:
    return Gray16(quantize(_float_luminance(color), U16_MAX))


def rgbf_to_grayf(color: RgbF) -> GrayF:
    """Unclamped: out-of-range RGB gives out-of-range luminance."""
    return GrayF(_float_luminance(color))


def srgbf_to_grayf(color: SrgbF) -> GrayF:
    return GrayF(luminance(gamma_expand(color.channels)))


def rgbaf_to_gray8(color: RgbaF) -> Gray8:
    return Gray8(quantize(_float_luminance(color), U8_MAX))


def rgbaf_to_gray16(color: RgbaF) -> Gray16:
    return Gray16(quantize(_float_luminance(color), U16_MAX))


def rgbaf_to_grayf(color: RgbaF) -> GrayF:
    return GrayF(_float_luminance(color))


# =============================================================================
# CIE → Grayscale
# =============================================================================


def ciexyz_to_grayf(color: CieXyz) -> GrayF:
    """Luminance is Y once the value is expressed against D65."""
    return GrayF(xyz_in_default_white(color)[1])


def cielab_to_grayf(color: CieLab) -> GrayF:
    """
    Luminance from L* alone when the white is D65.

    Y = (Y / Y_ref) * Y_ref, clamped to [0, 1]; a* and b* do not
    contribute. Any other white goes through XYZ so the result matches
    the CieXyz route.
    """
    if not color.has_default_white:
        return ciexyz_to_grayf(cielab_to_ciexyz(color))
    relative = lab_relative_luminance(color.l)
    return GrayF(clamp_unit(relative * color.white[1]))
