# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Byte codec for format values.

The codec is deliberately dumb: it turns channel tuples into fixed-width
bytes and back. Footprint checks and error reporting live on the format
types themselves.
"""

from pigment.runtime.serializers.base import ByteOrder, CodecConfig
from pigment.runtime.serializers.channels import pack_channels, unpack_channels

__all__ = [
    # Configuration
    "ByteOrder",
    "CodecConfig",
    # Packing
    "pack_channels",
    "unpack_channels",
]
