# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Channel packing.

Channels are written as fixed-width numpy scalars, concatenated in
declaration order. Decoding does not validate length; callers check the
footprint first so they can report which format was being decoded.
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
from numpy.typing import DTypeLike

from pigment.runtime.serializers.base import ByteOrder, CodecConfig


def _ordered_dtype(dtype: DTypeLike, byte_order: ByteOrder) -> np.dtype:
    return np.dtype(dtype).newbyteorder(byte_order.value)


def pack_channels(
    values: Sequence[float],
    dtype: DTypeLike,
    config: Optional[CodecConfig] = None,
) -> bytes:
    """
    Pack channel values into bytes.

    Args:
        values: Channel values, already inside the dtype's range
        dtype: numpy scalar type of one channel (uint8, uint16, float32)
        config: Codec configuration (byte order)

    Returns:
        len(values) * itemsize bytes
    """
    cfg = config or CodecConfig()
    return np.asarray(values, dtype=_ordered_dtype(dtype, cfg.byte_order)).tobytes()


def unpack_channels(
    data: bytes,
    dtype: DTypeLike,
    config: Optional[CodecConfig] = None,
) -> tuple:
    """Unpack bytes into a tuple of Python ints or floats."""
    cfg = config or CodecConfig()
    return tuple(np.frombuffer(data, dtype=_ordered_dtype(dtype, cfg.byte_order)).tolist())
