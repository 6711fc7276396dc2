# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Schema definitions for color values.

All types in this module are immutable (frozen dataclasses).
Conversions and decoding always produce new values.
"""

from pigment.schema.color import Color
from pigment.schema.formats import (
    D65_WHITE,
    FORMAT_CLASSES,
    U8_MAX,
    U16_MAX,
    CieLab,
    CieXyz,
    ColorFormat,
    FormatName,
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
    bytes_per_pixel_for,
    format_class,
    is_default_white,
)

__all__ = [
    # Constants
    "D65_WHITE",
    "U8_MAX",
    "U16_MAX",
    # Capability and registry
    "ColorFormat",
    "FormatName",
    "FORMAT_CLASSES",
    "format_class",
    "bytes_per_pixel_for",
    "is_default_white",
    # Grayscale
    "Gray8",
    "Gray16",
    "GrayF",
    # RGB family
    "Rgb",
    "Srgb",
    "Rgb48",
    "Rgba",
    "Rgba64",
    "RgbF",
    "SrgbF",
    "RgbaF",
    # Cylindrical
    "Hsv",
    "Hsl",
    # CIE
    "CieXyz",
    "CieLab",
    # Union
    "Color",
]
