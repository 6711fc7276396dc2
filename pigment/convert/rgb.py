# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Conversions into the RGB family.

Targets: Rgb, Srgb, Rgb48, Rgba, Rgba64, RgbF, SrgbF, RgbaF.

Rules shared by every function here:
- Linear targets take linear light; Srgb / SrgbF targets gamma-compress it
- Integer targets clamp to [0, 1] before scaling and round half up
- Float targets keep out-of-range values (RgbaF clamps on construction)
- Alpha is dropped when the target has none and set to opaque when the
  source has none
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pigment.convert.adaptation import xyz_in_default_white
from pigment.convert.colorspace import (
    clamp_unit,
    gamma_compress,
    gamma_expand,
    hsl_to_rgb as hsl_to_linear,
    hsv_to_rgb as hsv_to_linear,
    quantize,
    to_unit,
    xyz_to_linear_rgb,
)
from pigment.schema.formats import (
    U8_MAX,
    U16_MAX,
    CieXyz,
    Gray8,
    Gray16,
    GrayF,
    Hsl,
    Hsv,
    Rgb,
    Rgb48,
    Rgba,
    Rgba64,
    RgbaF,
    RgbF,
    Srgb,
    SrgbF,
)

# 8-bit to 16-bit sample scale (65535 / 255)
_U8_TO_U16 = 257


# =============================================================================
# Target Builders
# =============================================================================


def _rgb(linear: ArrayLike) -> Rgb:
    return Rgb(*quantize(linear, U8_MAX))


def _srgb(linear: ArrayLike) -> Srgb:
    return Srgb(*quantize(gamma_compress(clamp_unit(linear)), U8_MAX))


def _rgb48(linear: ArrayLike) -> Rgb48:
    return Rgb48(*quantize(linear, U16_MAX))


def _rgba(linear: ArrayLike, alpha: float = 1.0) -> Rgba:
    return Rgba(*quantize(linear, U8_MAX), quantize(alpha, U8_MAX))


def _rgba64(linear: ArrayLike, alpha: float = 1.0) -> Rgba64:
    return Rgba64(*quantize(linear, U16_MAX), quantize(alpha, U16_MAX))


def _rgbf(linear: ArrayLike) -> RgbF:
    return RgbF(*linear)


def _srgbf(linear: ArrayLike) -> SrgbF:
    return SrgbF(*gamma_compress(linear))


def _rgbaf(linear: ArrayLike, alpha: float = 1.0) -> RgbaF:
    return RgbaF(*linear, alpha)


def _gray(value: float) -> tuple[float, float, float]:
    return (value, value, value)


# =============================================================================
# Grayscale → RGB
# =============================================================================


def gray8_to_rgb(color: Gray8) -> Rgb:
    return Rgb(*_gray(color.luminance))


def gray8_to_rgba(color: Gray8) -> Rgba:
    return Rgba(*_gray(color.luminance), U8_MAX)


def gray16_to_rgb(color: Gray16) -> Rgb:
    return _rgb(_gray(color.luminance / U16_MAX))


def gray16_to_rgb48(color: Gray16) -> Rgb48:
    return Rgb48(*_gray(color.luminance))


def gray16_to_rgba64(color: Gray16) -> Rgba64:
    return Rgba64(*_gray(color.luminance), U16_MAX)


def gray16_to_rgbf(color: Gray16) -> RgbF:
    return _rgbf(_gray(color.luminance / U16_MAX))


def gray16_to_rgbaf(color: Gray16) -> RgbaF:
    return _rgbaf(_gray(color.luminance / U16_MAX))


def grayf_to_rgb(color: GrayF) -> Rgb:
    return _rgb(_gray(color.luminance))


def grayf_to_srgb(color: GrayF) -> Srgb:
    return _srgb(_gray(color.luminance))


def grayf_to_rgb48(color: GrayF) -> Rgb48:
    return _rgb48(_gray(color.luminance))


def grayf_to_rgba(color: GrayF) -> Rgba:
    return _rgba(_gray(color.luminance))


def grayf_to_rgba64(color: GrayF) -> Rgba64:
    return _rgba64(_gray(color.luminance))


def grayf_to_rgbf(color: GrayF) -> RgbF:
    return _rgbf(_gray(color.luminance))


def grayf_to_srgbf(color: GrayF) -> SrgbF:
    return _srgbf(_gray(color.luminance))


def grayf_to_rgbaf(color: GrayF) -> RgbaF:
    return _rgbaf(_gray(color.luminance))


# =============================================================================
# Rgb → RGB
# =============================================================================


def rgb_to_srgb(color: Rgb) -> Srgb:
    return _srgb(to_unit(color.channels, U8_MAX))


def rgb_to_rgb48(color: Rgb) -> Rgb48:
    return Rgb48(*(c * _U8_TO_U16 for c in color.channels))


def rgb_to_rgba(color: Rgb) -> Rgba:
    return Rgba(*color.channels, U8_MAX)


def rgb_to_rgba64(color: Rgb) -> Rgba64:
    return Rgba64(*(c * _U8_TO_U16 for c in color.channels), U16_MAX)


def rgb_to_rgbf(color: Rgb) -> RgbF:
    return _rgbf(to_unit(color.channels, U8_MAX))


def rgb_to_srgbf(color: Rgb) -> SrgbF:
    return _srgbf(to_unit(color.channels, U8_MAX))


def rgb_to_rgbaf(color: Rgb) -> RgbaF:
    return _rgbaf(to_unit(color.channels, U8_MAX))


# =============================================================================
# Srgb / SrgbF → RGB
# =============================================================================


def srgb_to_rgb(color: Srgb) -> Rgb:
    return _rgb(gamma_expand(to_unit(color.channels, U8_MAX)))


def srgb_to_rgbf(color: Srgb) -> RgbF:
    return _rgbf(gamma_expand(to_unit(color.channels, U8_MAX)))


def srgb_to_srgbf(color: Srgb) -> SrgbF:
    """Both are gamma-encoded; only the sample domain changes."""
    return SrgbF(*to_unit(color.channels, U8_MAX))


def srgbf_to_rgb(color: SrgbF) -> Rgb:
    return _rgb(gamma_expand(clamp_unit(color.channels)))


def srgbf_to_srgb(color: SrgbF) -> Srgb:
    return Srgb(*quantize(color.channels, U8_MAX))


def srgbf_to_rgbf(color: SrgbF) -> RgbF:
    return _rgbf(gamma_expand(color.channels))


# =============================================================================
# 16-bit → RGB
# =============================================================================


def rgb48_to_rgb(color: Rgb48) -> Rgb:
    return _rgb(to_unit(color.channels, U16_MAX))


def rgb48_to_rgbf(color: Rgb48) -> RgbF:
    return _rgbf(to_unit(color.channels, U16_MAX))


def rgb48_to_rgba64(color: Rgb48) -> Rgba64:
    return Rgba64(*color.channels, U16_MAX)


def rgba64_to_rgb48(color: Rgba64) -> Rgb48:
    return Rgb48(*color.channels[:3])


def rgba64_to_rgba(color: Rgba64) -> Rgba:
    return Rgba(*quantize(to_unit(color.channels, U16_MAX), U8_MAX))


def rgba64_to_rgbf(color: Rgba64) -> RgbF:
    return _rgbf(to_unit(color.channels[:3], U16_MAX))


def rgba64_to_rgbaf(color: Rgba64) -> RgbaF:
    return RgbaF(*to_unit(color.channels, U16_MAX))


# =============================================================================
# Rgba → RGB
# =============================================================================


def rgba_to_rgb(color: Rgba) -> Rgb:
    return Rgb(*color.channels[:3])


def rgba_to_rgbf(color: Rgba) -> RgbF:
    return _rgbf(to_unit(color.channels[:3], U8_MAX))


def rgba_to_rgba64(color: Rgba) -> Rgba64:
    return Rgba64(*(c * _U8_TO_U16 for c in color.channels))


def rgba_to_rgbaf(color: Rgba) -> RgbaF:
    return RgbaF(*to_unit(color.channels, U8_MAX))


# =============================================================================
# RgbF → RGB
# =============================================================================


def rgbf_to_rgb(color: RgbF) -> Rgb:
    return _rgb(color.channels)


def rgbf_to_srgb(color: RgbF) -> Srgb:
    return _srgb(color.channels)


def rgbf_to_rgb48(color: RgbF) -> Rgb48:
    return _rgb48(color.channels)


def rgbf_to_rgba(color: RgbF) -> Rgba:
    return _rgba(color.channels)


def rgbf_to_rgba64(color: RgbF) -> Rgba64:
    return _rgba64(color.channels)


def rgbf_to_srgbf(color: RgbF) -> SrgbF:
    """Unclamped; negative light stays on the linear segment."""
    return _srgbf(color.channels)


def rgbf_to_rgbaf(color: RgbF) -> RgbaF:
    return _rgbaf(color.channels)


# =============================================================================
# RgbaF → RGB
# =============================================================================


def rgbaf_to_rgb(color: RgbaF) -> Rgb:
    return _rgb(color.channels[:3])


def rgbaf_to_srgb(color: RgbaF) -> Srgb:
    return _srgb(color.channels[:3])


def rgbaf_to_rgb48(color: RgbaF) -> Rgb48:
    return _rgb48(color.channels[:3])


def rgbaf_to_rgba(color: RgbaF) -> Rgba:
    return _rgba(color.channels[:3], color.a)


def rgbaf_to_rgba64(color: RgbaF) -> Rgba64:
    return _rgba64(color.channels[:3], color.a)


def rgbaf_to_rgbf(color: RgbaF) -> RgbF:
    return _rgbf(color.channels[:3])


def rgbaf_to_srgbf(color: RgbaF) -> SrgbF:
    return _srgbf(color.channels[:3])


# =============================================================================
# HSV / HSL → RGB
# =============================================================================


def hsv_to_rgb(color: Hsv) -> Rgb:
    return _rgb(hsv_to_linear(color.channels))


def hsv_to_srgb(color: Hsv) -> Srgb:
    return _srgb(hsv_to_linear(color.channels))


def hsv_to_rgbf(color: Hsv) -> RgbF:
    return _rgbf(hsv_to_linear(color.channels))


def hsv_to_srgbf(color: Hsv) -> SrgbF:
    return _srgbf(hsv_to_linear(color.channels))


def hsl_to_rgb(color: Hsl) -> Rgb:
    return _rgb(hsl_to_linear(color.channels))


def hsl_to_srgb(color: Hsl) -> Srgb:
    return _srgb(hsl_to_linear(color.channels))


def hsl_to_rgbf(color: Hsl) -> RgbF:
    return _rgbf(hsl_to_linear(color.channels))


def hsl_to_srgbf(color: Hsl) -> SrgbF:
    return _srgbf(hsl_to_linear(color.channels))


# =============================================================================
# CieXyz → RGB
# =============================================================================


def _xyz_linear(color: CieXyz):
    """Linear RGB of an XYZ value, adapted to D65 first if needed."""
    return xyz_to_linear_rgb(xyz_in_default_white(color))


def ciexyz_to_rgb(color: CieXyz) -> Rgb:
    return _rgb(_xyz_linear(color))


def ciexyz_to_srgb(color: CieXyz) -> Srgb:
    return _srgb(_xyz_linear(color))


def ciexyz_to_rgbf(color: CieXyz) -> RgbF:
    """Unclamped; out-of-gamut colors keep negative or >1 channels."""
    return _rgbf(_xyz_linear(color))


def ciexyz_to_srgbf(color: CieXyz) -> SrgbF:
    return _srgbf(_xyz_linear(color))


def ciexyz_to_rgba(color: CieXyz) -> Rgba:
    return _rgba(_xyz_linear(color))
