"""
Yggdrasil node identity module.

Provides Ed25519 keypair import/export and the derivation of a node's
strength, IPv6 address and `/64` subnet from its public key.

The derivation works on the bit-inverted public key:
- Strength: length of its leading-ones run
- Address: routing prefix, that length, then the bits after the run
"""

from .address import IP_PREFIX, derive_address_bytes
from .bits import invert, leading_ones, strip_ones
from .codec import decode_pair
from .keys import NodeIdentity, PublicKey, SecretKey
from .summary import IdentitySummary

__all__ = [
    "NodeIdentity",
    "SecretKey",
    "PublicKey",
    "IdentitySummary",
    "IP_PREFIX",
    "decode_pair",
    "derive_address_bytes",
    "invert",
    "leading_ones",
    "strip_ones",
]
