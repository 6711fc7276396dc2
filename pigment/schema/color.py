# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Color -- closed tagged union over the format catalog.

A Color wraps exactly one format value. Its tag is the payload's own
format_name(), so tag and payload cannot disagree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from pigment.runtime.serializers import CodecConfig
from pigment.schema.formats import ColorFormat, FormatName, Rgb, format_class


@dataclass(frozen=True, slots=True)
class Color:
    """
    A color in any supported format.

    Attributes:
        value: The wrapped format value (Rgb(0, 0, 0) by default)
    """

    value: ColorFormat = field(default_factory=Rgb)

    def __post_init__(self) -> None:
        if not isinstance(self.value, ColorFormat):
            raise TypeError(
                f"Color must wrap a format value, got {type(self.value).__name__}"
            )

    def format_name(self) -> FormatName:
        return self.value.format_name()

    def channel_count(self) -> int:
        return self.value.channel_count()

    def bytes_per_pixel(self) -> int:
        return self.value.bytes_per_pixel()

    def to_bytes(self, config: Optional[CodecConfig] = None) -> bytes:
        return self.value.to_bytes(config)

    def as_bytes(self, config: Optional[CodecConfig] = None) -> bytes:
        return self.value.as_bytes(config)

    def to_raw_parts(self, config: Optional[CodecConfig] = None) -> tuple[FormatName, bytes]:
        """(format tag, encoded bytes) -- the format-agnostic storage unit."""
        return self.value.to_raw_parts(config)

    @classmethod
    def from_raw_parts(
        cls,
        name: FormatName | str,
        data: bytes,
        config: Optional[CodecConfig] = None,
    ) -> Color:
        """
        Rebuild a Color from to_raw_parts() output.

        Args:
            name: Format tag, or its string value (e.g. "Rgb")
            data: Encoded bytes
            config: Codec configuration used when encoding

        Raises:
            ByteLengthError: If data does not fit the named format
            ValueError: If name is not a known format
        """
        return cls(format_class(name).from_bytes(data, config))

    def convert(self, to: FormatName) -> Color:
        """Convert to another format (see pigment.convert.engine)."""
        from pigment.convert.engine import convert

        return convert(self, to)
