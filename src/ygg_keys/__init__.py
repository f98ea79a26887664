"""Yggdrasil node identities: Ed25519 keys, strength and IPv6 address derivation."""

from .identity import IP_PREFIX, IdentitySummary, NodeIdentity, PublicKey, SecretKey

__all__ = [
    "IP_PREFIX",
    "IdentitySummary",
    "NodeIdentity",
    "PublicKey",
    "SecretKey",
]
