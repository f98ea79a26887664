"""
Address and subnet packing.

A node's IPv6 address is built from its bit-inverted public key:

    [ prefix ][ ones ][ remainder ......................... ]
      |         |       bits after the leading-ones run
      |         number of leading one-bits (one byte)
      routing prefix, last bit 0 for an address, 1 for a subnet

A subnet only keeps the first 8 bytes, giving a `/64` with a zeroed host part.

References:
    - https://github.com/yggdrasil-network/yggdrasil-go/blob/master/src/address/address.go
"""

from __future__ import annotations

from typing import Final

from ygg_keys.types import Bytes16, EntropyExhaustedError, PrefixLengthError

from .bits import strip_ones

__all__ = [
    "ADDRESS_MARKER_MASK",
    "IP_PREFIX",
    "MAX_ADDRESS_PREFIX_LENGTH",
    "MAX_SUBNET_PREFIX_LENGTH",
    "SUBNET_MARKER_BIT",
    "SUBNET_PREFIX_LENGTH",
    "derive_address_bytes",
]

IP_PREFIX: Final[bytes] = b"\x02"
"""Routing prefix of the overlay, the `200::/7` block."""

ADDRESS_MARKER_MASK: Final = 0xFE
"""AND-ed into the last prefix byte of an address."""

SUBNET_MARKER_BIT: Final = 0x01
"""OR-ed into the last prefix byte of a subnet."""

MAX_ADDRESS_PREFIX_LENGTH: Final = 14
"""Largest address prefix in bytes (a /112)."""

MAX_SUBNET_PREFIX_LENGTH: Final = 6
"""Largest subnet prefix in bytes (a /48)."""

SUBNET_PREFIX_LENGTH: Final = 64
"""Network length of a node's subnet in bits."""


def derive_address_bytes(prefix: bytes, net: bool, inverted_public_key: bytes) -> Bytes16:
    """
    Pack prefix, leading-ones count and remaining entropy into 16 bytes.

    Args:
        prefix: Routing prefix, 1 to 14 bytes (1 to 6 for a subnet).
        net: True for the subnet layout, False for the address layout.
        inverted_public_key: The node's public key with every bit flipped.

    Returns:
        The 16 address bytes. For a subnet, bytes 8 to 15 are zero.

    Raises:
        PrefixLengthError: If the prefix is empty or too long for the layout.
        EntropyExhaustedError: If the stripped key is too short to fill the layout.
    """
    maximum = MAX_SUBNET_PREFIX_LENGTH if net else MAX_ADDRESS_PREFIX_LENGTH
    if not 1 <= len(prefix) <= maximum:
        raise PrefixLengthError(len(prefix), maximum, net=net)

    buffer = bytearray(Bytes16.LENGTH)
    buffer[: len(prefix)] = prefix

    # The low bit of the prefix tells addresses and subnets apart.
    if net:
        buffer[len(prefix) - 1] |= SUBNET_MARKER_BIT
    else:
        buffer[len(prefix) - 1] &= ADDRESS_MARKER_MASK

    ones, remainder = strip_ones(inverted_public_key)
    buffer[len(prefix)] = ones & 0xFF

    start = len(prefix) + 1
    end = 8 if net else 16
    needed = end - start
    if len(remainder) < needed:
        raise EntropyExhaustedError(needed, len(remainder))
    buffer[start:end] = remainder[:needed]

    return Bytes16(buffer)
