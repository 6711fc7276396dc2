# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Conversion engine.

Any format converts to any other by walking an explicit graph:

1. DIRECT_CONVERSIONS lists, per source, the targets it has a closed-form
   conversion to.
2. When the target is not among them, the value is first converted to the
   source's hub (CANONICAL_HUBS, or a per-target choice in HUB_OVERRIDES)
   and dispatch restarts from there.

Rgb, RgbF and RgbaF convert directly to every other format. Every other
source reaches one of them, GrayF or CieXyz in one step, and GrayF and
CieXyz fall back to RgbF, so every route is at most MAX_HOPS steps and
never revisits a format.

Usage::

    from pigment import Color, FormatName, Rgb
    from pigment.convert import convert

    convert(Color(Rgb(255, 0, 0)), FormatName.HSV)
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from pigment.convert import cie, cylindrical, grayscale, rgb
from pigment.schema.color import Color
from pigment.schema.formats import ColorFormat, FormatName

logger = logging.getLogger(__name__)

Conversion = Callable[[ColorFormat], ColorFormat]

# Upper bound on conversion steps for any (source, target) pair
MAX_HOPS = 3

F = FormatName


# =============================================================================
# Direct Conversions
# =============================================================================

DIRECT_CONVERSIONS: dict[FormatName, dict[FormatName, Conversion]] = {
    F.GRAY8: {
        F.GRAY16: grayscale.gray8_to_gray16,
        F.GRAYF: grayscale.gray8_to_grayf,
        F.RGB: rgb.gray8_to_rgb,
        F.RGBA: rgb.gray8_to_rgba,
    },
    F.GRAY16: {
        F.GRAY8: grayscale.gray16_to_gray8,
        F.GRAYF: grayscale.gray16_to_grayf,
        F.RGB: rgb.gray16_to_rgb,
        F.RGB48: rgb.gray16_to_rgb48,
        F.RGBA64: rgb.gray16_to_rgba64,
        F.RGBF: rgb.gray16_to_rgbf,
        F.RGBAF: rgb.gray16_to_rgbaf,
    },
    F.GRAYF: {
        F.GRAY8: grayscale.grayf_to_gray8,
        F.GRAY16: grayscale.grayf_to_gray16,
        F.RGB: rgb.grayf_to_rgb,
        F.SRGB: rgb.grayf_to_srgb,
        F.RGB48: rgb.grayf_to_rgb48,
        F.RGBA: rgb.grayf_to_rgba,
        F.RGBA64: rgb.grayf_to_rgba64,
        F.RGBF: rgb.grayf_to_rgbf,
        F.SRGBF: rgb.grayf_to_srgbf,
        F.RGBAF: rgb.grayf_to_rgbaf,
    },
    F.RGB: {
        F.GRAY8: grayscale.rgb_to_gray8,
        F.GRAY16: grayscale.rgb_to_gray16,
        F.GRAYF: grayscale.rgb_to_grayf,
        F.SRGB: rgb.rgb_to_srgb,
        F.RGB48: rgb.rgb_to_rgb48,
        F.RGBA: rgb.rgb_to_rgba,
        F.RGBA64: rgb.rgb_to_rgba64,
        F.RGBF: rgb.rgb_to_rgbf,
        F.SRGBF: rgb.rgb_to_srgbf,
        F.RGBAF: rgb.rgb_to_rgbaf,
        F.HSV: cylindrical.rgb_to_hsv,
        F.HSL: cylindrical.rgb_to_hsl,
        F.CIEXYZ: cie.rgb_to_ciexyz,
        F.CIELAB: cie.rgb_to_cielab,
    },
    F.SRGB: {
        F.GRAYF: grayscale.srgb_to_grayf,
        F.RGB: rgb.srgb_to_rgb,
        F.RGBF: rgb.srgb_to_rgbf,
        F.SRGBF: rgb.srgb_to_srgbf,
        F.HSV: cylindrical.srgb_to_hsv,
        F.HSL: cylindrical.srgb_to_hsl,
        F.CIEXYZ: cie.srgb_to_ciexyz,
        F.CIELAB: cie.srgb_to_cielab,
    },
    F.RGB48: {
        F.GRAY16: grayscale.rgb48_to_gray16,
        F.GRAYF: grayscale.rgb48_to_grayf,
        F.RGB: rgb.rgb48_to_rgb,
        F.RGBF: rgb.rgb48_to_rgbf,
        F.RGBA64: rgb.rgb48_to_rgba64,
    },
    F.RGBA: {
        F.GRAY8: grayscale.rgba_to_gray8,
        F.GRAY16: grayscale.rgba_to_gray16,
        F.GRAYF: grayscale.rgba_to_grayf,
        F.RGB: rgb.rgba_to_rgb,
        F.RGBF: rgb.rgba_to_rgbf,
        F.RGBA64: rgb.rgba_to_rgba64,
        F.RGBAF: rgb.rgba_to_rgbaf,
    },
    F.RGBA64: {
        F.GRAY16: grayscale.rgba64_to_gray16,
        F.GRAYF: grayscale.rgba64_to_grayf,
        F.RGB48: rgb.rgba64_to_rgb48,
        F.RGBA: rgb.rgba64_to_rgba,
        F.RGBF: rgb.rgba64_to_rgbf,
        F.RGBAF: rgb.rgba64_to_rgbaf,
    },
    F.RGBF: {
        F.GRAY8: grayscale.rgbf_to_gray8,
        F.GRAY16: grayscale.rgbf_to_gray16,
        F.GRAYF: grayscale.rgbf_to_grayf,
        F.RGB: rgb.rgbf_to_rgb,
        F.SRGB: rgb.rgbf_to_srgb,
        F.RGB48: rgb.rgbf_to_rgb48,
        F.RGBA: rgb.rgbf_to_rgba,
        F.RGBA64: rgb.rgbf_to_rgba64,
        F.SRGBF: rgb.rgbf_to_srgbf,
        F.RGBAF: rgb.rgbf_to_rgbaf,
        F.HSV: cylindrical.rgbf_to_hsv,
        F.HSL: cylindrical.rgbf_to_hsl,
        F.CIEXYZ: cie.rgbf_to_ciexyz,
        F.CIELAB: cie.rgbf_to_cielab,
    },
    F.SRGBF: {
        F.GRAYF: grayscale.srgbf_to_grayf,
        F.RGB: rgb.srgbf_to_rgb,
        F.SRGB: rgb.srgbf_to_srgb,
        F.RGBF: rgb.srgbf_to_rgbf,
        F.HSV: cylindrical.srgbf_to_hsv,
        F.HSL: cylindrical.srgbf_to_hsl,
        F.CIEXYZ: cie.srgbf_to_ciexyz,
        F.CIELAB: cie.srgbf_to_cielab,
    },
    F.RGBAF: {
        F.GRAY8: grayscale.rgbaf_to_gray8,
        F.GRAY16: grayscale.rgbaf_to_gray16,
        F.GRAYF: grayscale.rgbaf_to_grayf,
        F.RGB: rgb.rgbaf_to_rgb,
        F.SRGB: rgb.rgbaf_to_srgb,
        F.RGB48: rgb.rgbaf_to_rgb48,
        F.RGBA: rgb.rgbaf_to_rgba,
        F.RGBA64: rgb.rgbaf_to_rgba64,
        F.RGBF: rgb.rgbaf_to_rgbf,
        F.SRGBF: rgb.rgbaf_to_srgbf,
        F.HSV: cylindrical.rgbaf_to_hsv,
        F.HSL: cylindrical.rgbaf_to_hsl,
        F.CIEXYZ: cie.rgbaf_to_ciexyz,
        F.CIELAB: cie.rgbaf_to_cielab,
    },
    F.HSV: {
        F.RGB: rgb.hsv_to_rgb,
        F.SRGB: rgb.hsv_to_srgb,
        F.RGBF: rgb.hsv_to_rgbf,
        F.SRGBF: rgb.hsv_to_srgbf,
        F.HSL: cylindrical.hsv_to_hsl,
    },
    F.HSL: {
        F.RGB: rgb.hsl_to_rgb,
        F.SRGB: rgb.hsl_to_srgb,
        F.RGBF: rgb.hsl_to_rgbf,
        F.SRGBF: rgb.hsl_to_srgbf,
        F.HSV: cylindrical.hsl_to_hsv,
    },
    F.CIEXYZ: {
        F.GRAYF: grayscale.ciexyz_to_grayf,
        F.RGB: rgb.ciexyz_to_rgb,
        F.SRGB: rgb.ciexyz_to_srgb,
        F.RGBF: rgb.ciexyz_to_rgbf,
        F.SRGBF: rgb.ciexyz_to_srgbf,
        F.RGBA: rgb.ciexyz_to_rgba,
        F.CIELAB: cie.ciexyz_to_cielab,
    },
    F.CIELAB: {
        F.GRAYF: grayscale.cielab_to_grayf,
        F.CIEXYZ: cie.cielab_to_ciexyz,
    },
}


# =============================================================================
# Hubs
# =============================================================================

# Where a source goes when it has no direct conversion to the target.
# None marks a source that converts directly to everything.
CANONICAL_HUBS: dict[FormatName, Optional[FormatName]] = {
    F.GRAY8: F.GRAYF,
    F.GRAY16: F.GRAYF,
    F.GRAYF: F.RGBF,
    F.RGB: None,
    F.SRGB: F.RGB,
    F.RGB48: F.RGBF,
    F.RGBA: F.RGB,
    F.RGBA64: F.RGBF,
    F.RGBF: None,
    F.SRGBF: F.RGBF,
    F.RGBAF: None,
    F.HSV: F.RGBF,
    F.HSL: F.RGBF,
    F.CIEXYZ: F.RGBF,
    F.CIELAB: F.CIEXYZ,
}

# Per-target hub choices that keep more precision than the default hub
HUB_OVERRIDES: dict[FormatName, dict[FormatName, FormatName]] = {
    # Integer gray targets take luminance from linear light via GrayF.
    # Srgb reaches RgbaF through float RgbF instead of 8-bit Rgb, and
    # SrgbF reaches Rgba through Rgb, which shares its 8-bit depth.
    F.SRGB: {F.GRAY8: F.GRAYF, F.GRAY16: F.GRAYF, F.RGBAF: F.RGBF},
    F.SRGBF: {F.GRAY8: F.GRAYF, F.GRAY16: F.GRAYF, F.RGBA: F.RGB},
    # Keep 16-bit precision on the way to alpha formats
    F.RGB48: {F.RGBA: F.RGBA64, F.RGBAF: F.RGBA64},
    # Integer gray targets take luminance from Y via GrayF, not from RGB
    F.CIEXYZ: {F.GRAY8: F.GRAYF, F.GRAY16: F.GRAYF},
    F.CIELAB: {F.GRAY8: F.GRAYF, F.GRAY16: F.GRAYF},
}


# =============================================================================
# Routing
# =============================================================================


def next_hop(source: FormatName, target: FormatName) -> FormatName:
    """
    Format to convert to next on the way from source to target.

    Returns target itself when a direct conversion exists.
    """
    if target in DIRECT_CONVERSIONS[source]:
        return target
    hub = HUB_OVERRIDES.get(source, {}).get(target, CANONICAL_HUBS[source])
    if hub is None:
        raise RuntimeError(f"{source.value} has no conversion to {target.value}")
    return hub


def conversion_path(source: FormatName, target: FormatName) -> tuple[FormatName, ...]:
    """
    Formats visited converting source to target, source excluded.

    Empty for same-format conversion. The last element is always target.

    Raises:
        RuntimeError: If the routing tables would revisit a format or
            exceed MAX_HOPS (a table error, not an input error)
    """
    path: list[FormatName] = []
    visited = {source}
    current = source
    while current != target:
        step = next_hop(current, target)
        if step in visited or len(path) == MAX_HOPS:
            raise RuntimeError(
                f"Routing {source.value} -> {target.value} does not terminate: "
                f"{' -> '.join(f.value for f in (source, *path, step))}"
            )
        path.append(step)
        visited.add(step)
        current = step
    return tuple(path)


def convert_value(value: ColorFormat, to: FormatName) -> ColorFormat:
    """Convert a bare format value to another format."""
    source = value.format_name()
    if source == to:
        return value

    logger.debug("Converting %s to %s", source.value, to.value)
    current = value
    for step in conversion_path(source, to):
        logger.debug("  -> %s", step.value)
        current = DIRECT_CONVERSIONS[current.format_name()][step](current)
    return current


def convert(color: Color, to: FormatName) -> Color:
    """
    Convert a Color to another format.

    Same-format conversion returns the color unchanged. Conversion never
    fails; out-of-range values are clamped into the target's domain.

    Args:
        color: Color to convert
        to: Target format

    Returns:
        New Color wrapping a value of the target format
    """
    if color.format_name() == to:
        return color
    return Color(convert_value(color.value, to))
