# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""Base types for the byte codec."""

from dataclasses import dataclass
from enum import Enum


class ByteOrder(Enum):
    """Byte order used when packing multi-byte channels."""

    NATIVE = "="
    LITTLE = "<"
    BIG = ">"


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for encoding and decoding format values."""

    # Native order matches the in-memory layout of the running machine.
    # Pin LITTLE or BIG when bytes cross machine boundaries.
    byte_order: ByteOrder = ByteOrder.NATIVE
