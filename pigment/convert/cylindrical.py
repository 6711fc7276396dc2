# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Conversions into HSV and HSL.

Both are defined over linear RGB: sRGB sources are gamma-expanded before
the hue/chroma decomposition. Float sources are clamped to [0, 1] first.
"""

from __future__ import annotations

from pigment.convert import colorspace
from pigment.convert.colorspace import clamp_unit, gamma_expand, to_unit
from pigment.schema.formats import U8_MAX, Hsl, Hsv, Rgb, RgbaF, RgbF, Srgb, SrgbF


def rgb_to_hsv(color: Rgb) -> Hsv:
    return Hsv(*colorspace.rgb_to_hsv(to_unit(color.channels, U8_MAX)))


def rgb_to_hsl(color: Rgb) -> Hsl:
    return Hsl(*colorspace.rgb_to_hsl(to_unit(color.channels, U8_MAX)))


def srgb_to_hsv(color: Srgb) -> Hsv:
    return Hsv(*colorspace.rgb_to_hsv(gamma_expand(to_unit(color.channels, U8_MAX))))


def srgb_to_hsl(color: Srgb) -> Hsl:
    return Hsl(*colorspace.rgb_to_hsl(gamma_expand(to_unit(color.channels, U8_MAX))))


def rgbf_to_hsv(color: RgbF) -> Hsv:
    return Hsv(*colorspace.rgb_to_hsv(clamp_unit(color.channels)))


def rgbf_to_hsl(color: RgbF) -> Hsl:
    return Hsl(*colorspace.rgb_to_hsl(clamp_unit(color.channels)))


def srgbf_to_hsv(color: SrgbF) -> Hsv:
    return Hsv(*colorspace.rgb_to_hsv(gamma_expand(clamp_unit(color.channels))))


def srgbf_to_hsl(color: SrgbF) -> Hsl:
    return Hsl(*colorspace.rgb_to_hsl(gamma_expand(clamp_unit(color.channels))))


def rgbaf_to_hsv(color: RgbaF) -> Hsv:
    """Alpha is dropped."""
    return Hsv(*colorspace.rgb_to_hsv(color.channels[:3]))


def rgbaf_to_hsl(color: RgbaF) -> Hsl:
    return Hsl(*colorspace.rgb_to_hsl(color.channels[:3]))


def hsv_to_hsl(color: Hsv) -> Hsl:
    return Hsl(*colorspace.hsv_to_hsl(color.channels))


def hsl_to_hsv(color: Hsl) -> Hsv:
    return Hsv(*colorspace.hsl_to_hsv(color.channels))
