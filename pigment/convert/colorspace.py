# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Colorimetric primitives.

Conversion chains used by the pairwise conversions:
- sRGB (encoded) ↔ linear RGB ↔ CIE XYZ ↔ CIE L*a*b*
- linear RGB ↔ HSV / HSL
- linear RGB → luminance

Every function takes array-likes of shape (..., 3) (or (...) for scalar
channels) and returns float64 arrays, so the same code serves a single
color and a batch.

References:
- sRGB transfer function: IEC 61966-2-1
- RGB/XYZ matrices and CIE constants: http://www.brucelindbloom.com
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pigment.schema.formats import D65_WHITE


# =============================================================================
# Sample Domains
# =============================================================================


def to_unit(values: ArrayLike, maximum: float) -> NDArray[np.float64]:
    """Scale integer samples in [0, maximum] to [0, 1]."""
    return np.asarray(values, dtype=np.float64) / maximum


def quantize(unit: ArrayLike, maximum: int):
    """
    Scale unit values to integer samples in [0, maximum].

    Values are clamped to [0, 1] first and rounded half up, so 1.0 - 1e-16
    still maps to maximum.

    Returns:
        int for scalar input, list of int otherwise
    """
    unit = np.clip(np.asarray(unit, dtype=np.float64), 0.0, 1.0)
    return np.floor(unit * maximum + 0.5).astype(np.int64).tolist()


def clamp_unit(values: ArrayLike) -> NDArray[np.float64]:
    return np.clip(np.asarray(values, dtype=np.float64), 0.0, 1.0)


# =============================================================================
# sRGB Transfer Function
# =============================================================================


def gamma_expand(encoded: ArrayLike) -> NDArray[np.float64]:
    """
    Convert gamma-encoded sRGB values to linear light.

    sRGB uses a piecewise curve:
    - For values <= 0.04045: value / 12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4

    Out-of-range input is not clipped.
    """
    encoded = np.asarray(encoded, dtype=np.float64)
    # The power branch never sees values below the breakpoint
    curve_input = np.maximum(encoded, 0.04045)
    return np.where(
        encoded <= 0.04045,
        encoded / 12.92,
        np.power((curve_input + 0.055) / 1.055, 2.4),
    )


def gamma_compress(linear: ArrayLike) -> NDArray[np.float64]:
    """
    Convert linear light to gamma-encoded sRGB values.

    Inverse of gamma_expand; breakpoint 0.0031308. Out-of-range input is
    not clipped.
    """
    linear = np.asarray(linear, dtype=np.float64)
    curve_input = np.maximum(linear, 0.0031308)
    return np.where(
        linear <= 0.0031308,
        linear * 12.92,
        1.055 * np.power(curve_input, 1.0 / 2.4) - 0.055,
    )


# =============================================================================
# Luminance
# =============================================================================

# Rec. 709 luma coefficients for linear RGB
REC709_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)


def luminance(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Relative luminance of linear RGB.

    Works in whatever sample domain the input uses: 0-255 in gives
    0-255 out, unit in gives unit out.
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,j->...', rgb, REC709_WEIGHTS)


# =============================================================================
# Linear RGB ↔ CIE XYZ
# =============================================================================

# Linear sRGB primaries to XYZ, D65 white
RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)

XYZ_TO_RGB = np.linalg.inv(RGB_TO_XYZ)


def linear_rgb_to_xyz(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert linear RGB to CIE XYZ (D65).

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with XYZ values
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, RGB_TO_XYZ)


def xyz_to_linear_rgb(xyz: ArrayLike) -> NDArray[np.float64]:
    """
    Convert CIE XYZ (D65) to linear RGB.

    Out-of-gamut colors produce channels outside [0, 1]; callers clamp.
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    return np.einsum('...j,ij->...i', xyz, XYZ_TO_RGB)


# =============================================================================
# CIE XYZ ↔ CIE L*a*b*
# =============================================================================

# CIE standard: actual values are 216/24389 and 24389/27
CIE_EPSILON = 0.008856
CIE_KAPPA = 903.3


def xyz_to_lab(xyz: ArrayLike, white: ArrayLike = D65_WHITE) -> NDArray[np.float64]:
    """
    Convert CIE XYZ to L*a*b* relative to a reference white.

    Args:
        xyz: Array of shape (..., 3)
        white: XYZ of the reference white

    Returns:
        Array of shape (..., 3) with (L*, a*, b*)
    """
    ratios = np.asarray(xyz, dtype=np.float64) / np.asarray(white, dtype=np.float64)
    f = np.where(
        ratios > CIE_EPSILON,
        np.cbrt(ratios),
        (CIE_KAPPA * ratios + 16.0) / 116.0,
    )
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    return np.stack([
        116.0 * fy - 16.0,
        500.0 * (fx - fy),
        200.0 * (fy - fz),
    ], axis=-1)


def lab_to_xyz(lab: ArrayLike, white: ArrayLike = D65_WHITE) -> NDArray[np.float64]:
    """
    Convert L*a*b* to CIE XYZ relative to a reference white.

    Inverse of xyz_to_lab. X and Z pick their branch from f^3 > epsilon,
    Y from L* > kappa * epsilon.
    """
    lab = np.asarray(lab, dtype=np.float64)
    L, a, b = lab[..., 0], lab[..., 1], lab[..., 2]

    fy = (L + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0

    xr = np.where(fx ** 3 > CIE_EPSILON, fx ** 3, (116.0 * fx - 16.0) / CIE_KAPPA)
    yr = np.where(L > CIE_KAPPA * CIE_EPSILON, fy ** 3, L / CIE_KAPPA)
    zr = np.where(fz ** 3 > CIE_EPSILON, fz ** 3, (116.0 * fz - 16.0) / CIE_KAPPA)

    return np.stack([xr, yr, zr], axis=-1) * np.asarray(white, dtype=np.float64)


def lab_relative_luminance(lightness: ArrayLike) -> NDArray[np.float64]:
    """Y / Y_ref for an L* value (the Y branch of lab_to_xyz)."""
    L = np.asarray(lightness, dtype=np.float64)
    return np.where(
        L > CIE_KAPPA * CIE_EPSILON,
        ((L + 16.0) / 116.0) ** 3,
        L / CIE_KAPPA,
    )


# =============================================================================
# Linear RGB ↔ HSV / HSL
# =============================================================================


def _hue(r, g, b, maximum, chroma) -> NDArray[np.float64]:
    """Hue in degrees [0, 360); 0 for achromatic input."""
    # Avoid dividing by zero; achromatic hue is overwritten below
    safe = np.where(chroma > 0, chroma, 1.0)
    sector = np.where(
        maximum == r,
        ((g - b) / safe) % 6.0,
        np.where(maximum == g, (b - r) / safe + 2.0, (r - g) / safe + 4.0),
    )
    hue = (60.0 * sector) % 360.0
    return np.where(chroma > 0, hue, 0.0)


def _sector_rgb(hue, chroma, offset) -> NDArray[np.float64]:
    """
    Place chroma on the RGB cube by hue sector.

    Args:
        hue: Hue in degrees, any range (wrapped modulo 360)
        chroma: Chroma C
        offset: Lightness match m, added to every channel

    Returns:
        Array of shape (..., 3) with linear RGB
    """
    h = (np.asarray(hue, dtype=np.float64) % 360.0) / 60.0
    # Tiny negative hues wrap to exactly 360
    h = np.where(h >= 6.0, h - 6.0, h)
    sector = np.floor(h)
    x = chroma * (1.0 - np.abs(h % 2.0 - 1.0))
    zero = np.zeros_like(x)

    r = np.where((sector == 0) | (sector == 5), chroma,
                 np.where((sector == 1) | (sector == 4), x, zero))
    g = np.where((sector == 1) | (sector == 2), chroma,
                 np.where((sector == 0) | (sector == 3), x, zero))
    b = np.where((sector == 3) | (sector == 4), chroma,
                 np.where((sector == 2) | (sector == 5), x, zero))

    return np.stack([r + offset, g + offset, b + offset], axis=-1)


def rgb_to_hsv(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert linear RGB in [0, 1] to HSV.

    Returns:
        Array of shape (..., 3) with (H degrees, S, V); S = 0 when V = 0
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    v = np.max(rgb, axis=-1)
    chroma = v - np.min(rgb, axis=-1)

    h = _hue(r, g, b, v, chroma)
    s = np.where(v > 0, chroma / np.where(v > 0, v, 1.0), 0.0)
    return np.stack([h, s, v], axis=-1)


def hsv_to_rgb(hsv: ArrayLike) -> NDArray[np.float64]:
    """Convert HSV to linear RGB. C = S * V, m = V - C."""
    hsv = np.asarray(hsv, dtype=np.float64)
    h, s, v = hsv[..., 0], hsv[..., 1], hsv[..., 2]
    chroma = s * v
    return _sector_rgb(h, chroma, v - chroma)


def rgb_to_hsl(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert linear RGB in [0, 1] to HSL.

    Returns:
        Array of shape (..., 3) with (H degrees, S, L); S = 0 when the
        color is achromatic or L is 0 or 1
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    maximum = np.max(rgb, axis=-1)
    minimum = np.min(rgb, axis=-1)
    chroma = maximum - minimum
    lightness = (maximum + minimum) / 2.0

    h = _hue(r, g, b, maximum, chroma)
    denominator = 1.0 - np.abs(2.0 * lightness - 1.0)
    defined = (chroma > 0) & (denominator > 0)
    s = np.where(defined, chroma / np.where(defined, denominator, 1.0), 0.0)
    return np.stack([h, s, lightness], axis=-1)


def hsl_to_rgb(hsl: ArrayLike) -> NDArray[np.float64]:
    """Convert HSL to linear RGB. C = (1 - |2L - 1|) * S, m = L - C/2."""
    hsl = np.asarray(hsl, dtype=np.float64)
    h, s, lightness = hsl[..., 0], hsl[..., 1], hsl[..., 2]
    chroma = (1.0 - np.abs(2.0 * lightness - 1.0)) * s
    return _sector_rgb(h, chroma, lightness - chroma / 2.0)


def hsv_to_hsl(hsv: ArrayLike) -> NDArray[np.float64]:
    """
    Convert HSV to HSL without passing through RGB.

    L = V * (1 - S/2); S_L = (V - L) / min(L, 1 - L), or 0 when L is 0 or 1.
    """
    hsv = np.asarray(hsv, dtype=np.float64)
    h, s, v = hsv[..., 0], hsv[..., 1], hsv[..., 2]
    lightness = v * (1.0 - s / 2.0)
    span = np.minimum(lightness, 1.0 - lightness)
    s_l = np.where(span > 0, (v - lightness) / np.where(span > 0, span, 1.0), 0.0)
    return np.stack([h, s_l, lightness], axis=-1)


def hsl_to_hsv(hsl: ArrayLike) -> NDArray[np.float64]:
    """
    Convert HSL to HSV without passing through RGB.

    V = L + S * min(L, 1 - L); S_V = 2 * (1 - L/V), or 0 when V is 0.
    """
    hsl = np.asarray(hsl, dtype=np.float64)
    h, s, lightness = hsl[..., 0], hsl[..., 1], hsl[..., 2]
    v = lightness + s * np.minimum(lightness, 1.0 - lightness)
    s_v = np.where(v > 0, 2.0 * (1.0 - lightness / np.where(v > 0, v, 1.0)), 0.0)
    return np.stack([h, s_v, v], axis=-1)
