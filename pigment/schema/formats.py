# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Format value types -- the closed catalog of color representations.

Design principles:
- Immutable: every format is a frozen dataclass
- Self-contained: a value owns only its own channels (plus, for the CIE
  formats, an optional reference white)
- Bit-exact: decode(encode(v)) == v for every constructible value

Construction never fails for numeric input:
- Integer channels are clamped to the storage range and truncated to int
  (NaN becomes 0)
- Float channels are rounded to float32, the precision they are stored at
- RgbaF additionally clamps its channels to [0, 1]; the other float
  formats keep out-of-range values and leave clamping to conversions

Catalog:

    Format   Channels      Storage      Meaning
    Gray8    luminance     uint8        linear luminance
    Gray16   luminance     uint16       linear luminance
    GrayF    luminance     float32      linear luminance, unit range
    Rgb      r g b         uint8        linear light
    Srgb     r g b         uint8        gamma-encoded
    Rgb48    r g b         uint16       linear light
    RgbF     r g b         float32      linear light
    SrgbF    r g b         float32      gamma-encoded
    Rgba     r g b a       uint8        linear + straight alpha
    Rgba64   r g b a       uint16       linear + straight alpha
    RgbaF    r g b a       float32      linear + straight alpha, clamped
    Hsv      h s v         float32      hue in degrees over linear RGB
    Hsl      h s l         float32      hue in degrees over linear RGB
    CieXyz   x y z [+ref]  float32      CIE 1931 XYZ
    CieLab   l a b [+ref]  float32      CIE L*a*b*
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import ClassVar, Optional, Sequence

import numpy as np

from pigment.exceptions import ByteLengthError
from pigment.runtime.serializers import CodecConfig, pack_channels, unpack_channels


# =============================================================================
# Constants
# =============================================================================

U8_MAX = 255
U16_MAX = 65535

# sRGB's reference white (D65, 2° observer), Y normalised to 1
D65_WHITE: tuple[float, float, float] = (0.95047, 1.0, 1.08883)

# Tolerance for deciding whether a stored (float32) white is D65
_WHITE_ATOL = 1e-6


class FormatName(Enum):
    """Tag of every format in the catalog."""

    GRAY8 = "Gray8"
    GRAY16 = "Gray16"
    GRAYF = "GrayF"
    RGB = "Rgb"
    SRGB = "Srgb"
    RGB48 = "Rgb48"
    RGBA = "Rgba"
    RGBA64 = "Rgba64"
    RGBF = "RgbF"
    SRGBF = "SrgbF"
    RGBAF = "RgbaF"
    HSV = "Hsv"
    HSL = "Hsl"
    CIEXYZ = "CieXyz"
    CIELAB = "CieLab"


def _float32(value: float) -> float:
    return float(np.float32(value))


def is_default_white(white: Sequence[float]) -> bool:
    """True if an XYZ white triplet is D65 (to float32 precision)."""
    return bool(np.allclose(white, D65_WHITE, rtol=0.0, atol=_WHITE_ATOL))


# =============================================================================
# Format Capability
# =============================================================================


class ColorFormat:
    """
    Capability shared by every format value.

    Subclasses describe themselves with three class attributes:
        _format: Tag in FormatName
        _dtype: numpy scalar type of one stored channel
        _channel_names: Channel field names in encoding order
    """

    __slots__ = ()

    _format: ClassVar[FormatName]
    _dtype: ClassVar[type]
    _channel_names: ClassVar[tuple[str, ...]]

    @classmethod
    def channel_count(cls) -> int:
        """Number of channels (reference white excluded)."""
        return len(cls._channel_names)

    @classmethod
    def format_name(cls) -> FormatName:
        return cls._format

    @classmethod
    def bytes_per_pixel(cls) -> int:
        """Byte footprint of the short encoding (no reference white)."""
        return cls.channel_count() * np.dtype(cls._dtype).itemsize

    @classmethod
    def byte_lengths(cls) -> tuple[int, ...]:
        """Every buffer length from_bytes accepts."""
        return (cls.bytes_per_pixel(),)

    @property
    def channels(self) -> tuple:
        """Channel values in declaration order."""
        return tuple(getattr(self, name) for name in self._channel_names)

    def _encoded_values(self) -> tuple:
        return self.channels

    @classmethod
    def _from_decoded(cls, values: tuple) -> ColorFormat:
        return cls(*values)

    def to_bytes(self, config: Optional[CodecConfig] = None) -> bytes:
        """
        Encode channels as fixed-width values in declaration order.

        Args:
            config: Codec configuration; native byte order by default

        Returns:
            bytes_per_pixel() bytes (twice that for a CIE value carrying
            a reference white)
        """
        return pack_channels(self._encoded_values(), self._dtype, config)

    def as_bytes(self, config: Optional[CodecConfig] = None) -> bytes:
        """Alias of to_bytes."""
        return self.to_bytes(config)

    @classmethod
    def from_bytes(cls, data: bytes, config: Optional[CodecConfig] = None) -> ColorFormat:
        """
        Decode a value produced by to_bytes.

        Raises:
            ByteLengthError: If len(data) is not one of byte_lengths()
        """
        data = bytes(data)
        if len(data) not in cls.byte_lengths():
            raise ByteLengthError(cls.__name__, cls.byte_lengths(), len(data))
        return cls._from_decoded(unpack_channels(data, cls._dtype, config))

    def to_raw_parts(self, config: Optional[CodecConfig] = None) -> tuple[FormatName, bytes]:
        """Format-agnostic (tag, bytes) pair."""
        return self.format_name(), self.to_bytes(config)


class _IntegerFormat(ColorFormat):
    """Format whose channels are unsigned integers in [0, _maximum]."""

    __slots__ = ()

    _maximum: ClassVar[int]

    def __post_init__(self) -> None:
        for name in self._channel_names:
            # Clamp as float first so inf and NaN cannot reach int()
            value = np.clip(np.nan_to_num(float(getattr(self, name)), nan=0.0), 0, self._maximum)
            object.__setattr__(self, name, int(value))


class _FloatFormat(ColorFormat):
    """Format whose channels are stored as float32."""

    __slots__ = ()

    _dtype = np.float32
    _bounds: ClassVar[Optional[tuple[float, float]]] = None

    def __post_init__(self) -> None:
        self._coerce_channels()

    def _coerce_channels(self) -> None:
        for name in self._channel_names:
            value = float(getattr(self, name))
            if self._bounds is not None:
                low, high = self._bounds
                value = min(max(value, low), high)
            object.__setattr__(self, name, _float32(value))


class _CieFormat(_FloatFormat):
    """
    CIE format carrying an optional reference white.

    reference_white is None for the default D65 white. A stored triplet is
    always expressed in default-white terms (see CieXyz.with_reference_white).
    """

    __slots__ = ()

    def __post_init__(self) -> None:
        self._coerce_channels()
        white = self.reference_white
        if white is not None:
            if len(white) != 3:
                raise ValueError(f"reference_white must have 3 components, got {len(white)}")
            object.__setattr__(self, "reference_white", tuple(_float32(c) for c in white))

    @classmethod
    def byte_lengths(cls) -> tuple[int, ...]:
        return (cls.bytes_per_pixel(), 2 * cls.bytes_per_pixel())

    def _encoded_values(self) -> tuple:
        if self.reference_white is None:
            return self.channels
        return self.channels + self.reference_white

    @classmethod
    def _from_decoded(cls, values: tuple) -> ColorFormat:
        count = cls.channel_count()
        return cls(*values[:count], reference_white=values[count:] or None)

    @property
    def white(self) -> tuple[float, float, float]:
        """Effective reference white (attached or D65)."""
        if self.reference_white is None:
            return D65_WHITE
        return self.reference_white

    @property
    def has_default_white(self) -> bool:
        """True if the effective reference white is D65."""
        return is_default_white(self.white)


# =============================================================================
# Grayscale
# =============================================================================


@dataclass(frozen=True, slots=True)
class Gray8(_IntegerFormat):
    """8-bit linear luminance."""

    luminance: int = 0

    _format = FormatName.GRAY8
    _dtype = np.uint8
    _maximum = U8_MAX
    _channel_names = ("luminance",)


@dataclass(frozen=True, slots=True)
class Gray16(_IntegerFormat):
    """16-bit linear luminance."""

    luminance: int = 0

    _format = FormatName.GRAY16
    _dtype = np.uint16
    _maximum = U16_MAX
    _channel_names = ("luminance",)


@dataclass(frozen=True, slots=True)
class GrayF(_FloatFormat):
    """Floating linear luminance, nominally in [0, 1]."""

    luminance: float = 0.0

    _format = FormatName.GRAYF
    _channel_names = ("luminance",)


# =============================================================================
# RGB Family
# =============================================================================


@dataclass(frozen=True, slots=True)
class Rgb(_IntegerFormat):
    """8-bit linear-light RGB."""

    r: int = 0
    g: int = 0
    b: int = 0

    _format = FormatName.RGB
    _dtype = np.uint8
    _maximum = U8_MAX
    _channel_names = ("r", "g", "b")


@dataclass(frozen=True, slots=True)
class Srgb(_IntegerFormat):
    """8-bit gamma-encoded sRGB."""

    r: int = 0
    g: int = 0
    b: int = 0

    _format = FormatName.SRGB
    _dtype = np.uint8
    _maximum = U8_MAX
    _channel_names = ("r", "g", "b")


@dataclass(frozen=True, slots=True)
class Rgb48(_IntegerFormat):
    """16-bit-per-channel linear-light RGB."""

    r: int = 0
    g: int = 0
    b: int = 0

    _format = FormatName.RGB48
    _dtype = np.uint16
    _maximum = U16_MAX
    _channel_names = ("r", "g", "b")


@dataclass(frozen=True, slots=True)
class RgbF(_FloatFormat):
    """
    Floating linear-light RGB.

    Nominal range is [0, 1] but values outside it are kept as-is; they are
    clamped only when converted into a bounded format.
    """

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    _format = FormatName.RGBF
    _channel_names = ("r", "g", "b")


@dataclass(frozen=True, slots=True)
class SrgbF(_FloatFormat):
    """Floating gamma-encoded sRGB, nominally in [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    _format = FormatName.SRGBF
    _channel_names = ("r", "g", "b")


@dataclass(frozen=True, slots=True)
class Rgba(_IntegerFormat):
    """8-bit linear RGB with straight alpha."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    _format = FormatName.RGBA
    _dtype = np.uint8
    _maximum = U8_MAX
    _channel_names = ("r", "g", "b", "a")


@dataclass(frozen=True, slots=True)
class Rgba64(_IntegerFormat):
    """16-bit-per-channel linear RGB with straight alpha."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    _format = FormatName.RGBA64
    _dtype = np.uint16
    _maximum = U16_MAX
    _channel_names = ("r", "g", "b", "a")


@dataclass(frozen=True, slots=True)
class RgbaF(_FloatFormat):
    """Floating linear RGB with straight alpha; every channel clamped to [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    _format = FormatName.RGBAF
    _bounds = (0.0, 1.0)
    _channel_names = ("r", "g", "b", "a")


# =============================================================================
# Cylindrical
# =============================================================================


@dataclass(frozen=True, slots=True)
class Hsv(_FloatFormat):
    """
    Hue / saturation / value over linear RGB.

    Attributes:
        h: Hue in degrees, [0, 360)
        s: Saturation, [0, 1]
        v: Value (max channel), [0, 1]
    """

    h: float = 0.0
    s: float = 0.0
    v: float = 0.0

    _format = FormatName.HSV
    _channel_names = ("h", "s", "v")


@dataclass(frozen=True, slots=True)
class Hsl(_FloatFormat):
    """
    Hue / saturation / lightness over linear RGB.

    Attributes:
        h: Hue in degrees, [0, 360)
        s: Saturation, [0, 1]
        l: Lightness (mid-range of channels), [0, 1]
    """

    h: float = 0.0
    s: float = 0.0
    l: float = 0.0  # noqa: E741

    _format = FormatName.HSL
    _channel_names = ("h", "s", "l")


# =============================================================================
# CIE
# =============================================================================


@dataclass(frozen=True, slots=True)
class CieXyz(_CieFormat):
    """
    CIE 1931 XYZ tristimulus values.

    Attributes:
        x, y, z: Tristimulus values, Y of the reference white = 1
        reference_white: XYZ of the reference white in D65 terms, or None
            for D65 itself
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    reference_white: Optional[tuple[float, float, float]] = None

    _format = FormatName.CIEXYZ
    _channel_names = ("x", "y", "z")

    @classmethod
    def default_white(cls) -> CieXyz:
        """The D65 white point as an XYZ value."""
        return cls(*D65_WHITE)

    def with_reference_white(self, white: CieXyz) -> CieXyz:
        """
        Attach a reference white without changing the coordinates.

        A white that is itself referenced to a non-default white is first
        adapted to D65, so the stored triplet is always in D65 terms.
        """
        return replace(self, reference_white=_normalized_white(white))

    def adjust_to_reference_white(self, white: CieXyz) -> CieXyz:
        """Bradford-adapt the coordinates to a new reference white."""
        from pigment.convert.adaptation import chromatic_adaptation

        return chromatic_adaptation(self, CieXyz(*_normalized_white(white)))


@dataclass(frozen=True, slots=True)
class CieLab(_CieFormat):
    """
    CIE L*a*b* relative to a reference white.

    Attributes:
        l: Lightness L*, 0 = black, 100 = reference white
        a: Green (-) to red (+) axis
        b: Blue (-) to yellow (+) axis
        reference_white: XYZ of the reference white in D65 terms, or None
            for D65 itself
    """

    l: float = 0.0  # noqa: E741
    a: float = 0.0
    b: float = 0.0
    reference_white: Optional[tuple[float, float, float]] = None

    _format = FormatName.CIELAB
    _channel_names = ("l", "a", "b")

    def with_reference_white(self, white: CieXyz) -> CieLab:
        """Attach a reference white without changing the coordinates."""
        return replace(self, reference_white=_normalized_white(white))

    def adapt_to_reference_white(self, white: CieXyz) -> CieLab:
        """Re-express this color relative to another reference white (via XYZ)."""
        from pigment.convert.cie import cielab_to_ciexyz, ciexyz_to_cielab

        adapted = cielab_to_ciexyz(self).adjust_to_reference_white(white)
        return ciexyz_to_cielab(adapted)


def _normalized_white(white: CieXyz) -> tuple[float, float, float]:
    """XYZ of a white point expressed against D65."""
    if not white.has_default_white:
        from pigment.convert.adaptation import chromatic_adaptation

        white = chromatic_adaptation(white, CieXyz.default_white())
    return (white.x, white.y, white.z)


# =============================================================================
# Registry
# =============================================================================

FORMAT_CLASSES: dict[FormatName, type[ColorFormat]] = {
    cls.format_name(): cls
    for cls in (
        Gray8, Gray16, GrayF,
        Rgb, Srgb, Rgb48, Rgba, Rgba64, RgbF, SrgbF, RgbaF,
        Hsv, Hsl,
        CieXyz, CieLab,
    )
}


def format_class(name: FormatName | str) -> type[ColorFormat]:
    """Look up a format class by tag or tag value (e.g. "Rgb")."""
    return FORMAT_CLASSES[FormatName(name)]


def bytes_per_pixel_for(name: FormatName | str) -> int:
    """Short-form byte footprint of a format, by tag."""
    return format_class(name).bytes_per_pixel()
