# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Runtime support for pigment.

Holds the byte codec used by every format's to_bytes / from_bytes.
The codec never interprets channel values.
"""

from pigment.runtime.serializers import (
    ByteOrder,
    CodecConfig,
    pack_channels,
    unpack_channels,
)

__all__ = [
    "ByteOrder",
    "CodecConfig",
    "pack_channels",
    "unpack_channels",
]
