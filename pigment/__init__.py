# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
pigment -- Colorimetric conversion engine.

A closed catalog of color formats (grayscale, linear and gamma-encoded
RGB, RGB with alpha, HSV/HSL, CIE XYZ/Lab), conversion from any format to
any other, and a bit-exact byte encoding for each.

Quick start::

    from pigment import Color, FormatName, Rgb

    red = Color(Rgb(255, 0, 0))
    red.convert(FormatName.HSV)      # Color(value=Hsv(h=0.0, s=1.0, v=1.0))
    red.to_raw_parts()               # (FormatName.RGB, b'\\xff\\x00\\x00')
"""

from __future__ import annotations

__version__ = "1.0.0"

from pigment.convert import chromatic_adaptation, convert
from pigment.exceptions import ByteLengthError, PigmentError
from pigment.runtime import ByteOrder, CodecConfig
from pigment.schema import (
    D65_WHITE,
    CieLab,
    CieXyz,
    Color,
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
)

__all__ = [
    # Core API
    "Color",
    "FormatName",
    "convert",
    "chromatic_adaptation",
    # Formats
    "ColorFormat",
    "Gray8",
    "Gray16",
    "GrayF",
    "Rgb",
    "Srgb",
    "Rgb48",
    "Rgba",
    "Rgba64",
    "RgbF",
    "SrgbF",
    "RgbaF",
    "Hsv",
    "Hsl",
    "CieXyz",
    "CieLab",
    "D65_WHITE",
    "bytes_per_pixel_for",
    # Encoding
    "ByteOrder",
    "CodecConfig",
    # Errors
    "PigmentError",
    "ByteLengthError",
    # Version
    "__version__",
]
