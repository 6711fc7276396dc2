# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""Exceptions raised by pigment."""

from __future__ import annotations


class PigmentError(Exception):
    """Base class for all pigment errors."""


class ByteLengthError(PigmentError, ValueError):
    """
    Raised when a byte buffer does not match a format's footprint.

    Attributes:
        type_name: Name of the format that was being decoded
        expected: Every byte length the format accepts
        actual: Length of the buffer that was provided
    """

    def __init__(self, type_name: str, expected: tuple[int, ...], actual: int) -> None:
        self.type_name = type_name
        self.expected = tuple(expected)
        self.actual = actual
        super().__init__(
            f"Cannot decode {type_name}: expected {self._describe_expected()} "
            f"byte(s), got {actual}"
        )

    def _describe_expected(self) -> str:
        if len(self.expected) == 1:
            return f"exactly {self.expected[0]}"
        head = ", ".join(str(n) for n in self.expected[:-1])
        return f"either {head} or {self.expected[-1]}"
