"""
Leading-ones analysis of byte strings.

A byte string is read as a big-endian bitstring, most significant bit of
byte 0 first. The overlay derives two values from it:

    strength  = number of leading one-bits
    remainder = the bits after that run and its terminating zero,
                shifted left so the first surviving bit is bit 0

Example (two bytes):

    11111111 00010000
    ^^^^^^^^ ^          run of 8 ones, then the zero terminator (9 bits)
              0010000   survivors, re-aligned -> 00100000

The scan is clamped to the buffer: an all-ones input yields a count of
`8 * len(data)` and an empty remainder.
"""

from __future__ import annotations

from typing import Final

__all__ = [
    "invert",
    "leading_ones",
    "strip_ones",
]

BYTE_MASK: Final = 0xFF
"""Mask for one byte; XOR with it flips all eight bits."""


def _byte_leading_ones(byte: int) -> int:
    """Count the leading one-bits of a single byte (0..8)."""
    return 8 - (byte ^ BYTE_MASK).bit_length()


def invert(data: bytes) -> bytes:
    """Flip every bit of `data`."""
    return bytes(byte ^ BYTE_MASK for byte in data)


def leading_ones(data: bytes) -> int:
    """
    Count the leading one-bits of `data`.

    Args:
        data: Bytes to scan, most significant bit first.

    Returns:
        Number of one-bits before the first zero bit, at most `8 * len(data)`.
    """
    count = 0
    for byte in data:
        ones = _byte_leading_ones(byte)
        count += ones
        # A zero bit inside this byte ends the run.
        if ones != 8:
            break
    return count


def strip_ones(data: bytes) -> tuple[int, bytes]:
    """
    Strip the leading-ones run and its terminating zero bit.

    Bit `count + 1` of `data` becomes bit 0 of the remainder. Bytes consumed
    entirely by the strip are dropped; the last byte is zero-filled on the
    right.

    Args:
        data: Bytes to strip.

    Returns:
        Tuple of (leading ones count, re-aligned remainder). The remainder
        has `len(data) - (count + 1) // 8` bytes.
    """
    count = leading_ones(data)
    strip = count + 1
    shift = strip % 8
    remainder = bytearray(data[strip // 8 :])

    # Already byte aligned.
    if shift == 0 or not remainder:
        return count, bytes(remainder)

    carry = 8 - shift
    for i in range(len(remainder) - 1):
        remainder[i] = ((remainder[i] << shift) & BYTE_MASK) | (remainder[i + 1] >> carry)
    remainder[-1] = (remainder[-1] << shift) & BYTE_MASK

    return count, bytes(remainder)
