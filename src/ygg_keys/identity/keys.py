"""
Ed25519 node identity for the Yggdrasil overlay.

A node is identified by its Ed25519 signing key. The public key is also
the source of the node's strength and of its IPv6 address and subnet,
so everything routable about a node follows from the keypair.

References:
    - https://github.com/yggdrasil-network/yggdrasil-go/blob/master/src/address/address.go
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass, field
from ipaddress import IPv6Address, IPv6Network

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import ed25519

from ygg_keys.types import Bytes16, InvalidSigningKeyError

from .address import IP_PREFIX, SUBNET_PREFIX_LENGTH, derive_address_bytes
from .bits import invert, leading_ones
from .codec import PublicKey, SecretKey, decode_pair
from .summary import IdentitySummary

__all__ = [
    "NodeIdentity",
    "PublicKey",
    "SecretKey",
]

logger = logging.getLogger(__name__)


def _load_secret(secret: bytes) -> ed25519.Ed25519PrivateKey:
    try:
        return ed25519.Ed25519PrivateKey.from_private_bytes(bytes(secret))
    except ValueError as e:
        raise InvalidSigningKeyError(e) from e


def _check_public(public: bytes) -> PublicKey:
    try:
        ed25519.Ed25519PublicKey.from_public_bytes(bytes(public))
    except ValueError as e:
        raise InvalidSigningKeyError(e) from e
    return PublicKey(public)


@dataclass(frozen=True, slots=True)
class NodeIdentity:
    """
    Ed25519 keypair identifying a node.

    Derived values (strength, address, subnet) are computed on demand.

    Attributes:
        secret: The 32-byte secret seed.
        public: The 32-byte public key.
    """

    secret: SecretKey = field(repr=False)
    public: PublicKey

    @classmethod
    def generate(cls, randbytes: Callable[[int], bytes] = os.urandom) -> NodeIdentity:
        """
        Generate a new random identity.

        Args:
            randbytes: Cryptographically secure source returning `n` random bytes.

        Returns:
            A fresh identity.
        """
        secret = SecretKey(randbytes(SecretKey.LENGTH))
        public = _load_secret(secret).public_key().public_bytes_raw()
        logger.debug("Generated identity with public key %s", public.hex())
        return cls(secret=secret, public=PublicKey(public))

    @classmethod
    def from_keys(cls, secret: bytes, public: bytes | None = None) -> NodeIdentity:
        """
        Build an identity from raw key bytes.

        Args:
            secret: 32-byte secret seed.
            public: Optional 32-byte public key. Derived from `secret` if missing.

        Returns:
            The identity.

        Raises:
            InvalidSigningKeyError: If the signature library rejects either key.
        """
        private_key = _load_secret(secret)
        if public is None:
            public = private_key.public_key().public_bytes_raw()
            logger.debug("Derived public key %s from secret", public.hex())
        return cls(secret=SecretKey(secret), public=_check_public(public))

    @classmethod
    def from_hex(cls, secret_hex: str, public_hex: str | None = None) -> NodeIdentity:
        """
        Parse a hex encoded keypair.

        - The secret is required: 32 bytes of seed, or 64 bytes of seed
          followed by the public key.
        - The public key is optional. If it is missing and not embedded in
          the secret, it is derived from the seed.
        - If the secret embeds a public key and another one is passed, the
          two must agree.

        Args:
            secret_hex: Hex of the secret seed, or of the seed and public key joined.
            public_hex: Optional hex of the public key.

        Returns:
            The identity.

        Raises:
            KeyDecodeError: If the strings are malformed, inconsistent, or
                rejected by the signature library.
        """
        secret, public = decode_pair(secret_hex, public_hex)
        return cls.from_keys(secret, public)

    def to_hex_split(self) -> tuple[str, str]:
        """Hex-encode the secret and public keys into a string each."""
        return self.secret.hex(), self.public.hex()

    def to_hex_joined(self) -> str:
        """Hex-encode the keypair into a combined string, secret first."""
        secret, public = self.to_hex_split()
        return secret + public

    def sign(self, message: bytes) -> bytes:
        """
        Sign a message with Ed25519.

        Returns:
            64-byte signature.
        """
        return _load_secret(self.secret).sign(message)

    def verify(self, message: bytes, signature: bytes) -> bool:
        """
        Verify an Ed25519 signature made by this identity.

        Returns:
            True if signature is valid, False otherwise.
        """
        public_key = ed25519.Ed25519PublicKey.from_public_bytes(bytes(self.public))
        try:
            public_key.verify(signature, message)
            return True
        except InvalidSignature:
            return False

    def strength(self) -> int:
        """
        The strength is the number of leading one-bits of the inverted public key.

        Between 0 and 256; higher is stronger.
        """
        return leading_ones(invert(self.public))

    def address_bytes_with_prefix(self, prefix: bytes) -> Bytes16:
        """Calculate the raw address bytes under the given routing prefix."""
        return derive_address_bytes(prefix, False, invert(self.public))

    def subnet_bytes_with_prefix(self, prefix: bytes) -> Bytes16:
        """Calculate the raw `/64` subnet bytes under the given routing prefix."""
        return derive_address_bytes(prefix, True, invert(self.public))

    def address_with_prefix(self, prefix: bytes) -> IPv6Address:
        """Calculate the address for this identity with the given IP prefix."""
        return IPv6Address(bytes(self.address_bytes_with_prefix(prefix)))

    def subnet_with_prefix(self, prefix: bytes) -> IPv6Network:
        """Calculate the `/64` subnet for this identity with the given IP prefix."""
        network = IPv6Address(bytes(self.subnet_bytes_with_prefix(prefix)))
        return IPv6Network((network, SUBNET_PREFIX_LENGTH))

    def address(self) -> IPv6Address:
        """Calculate the address for this identity with the default IP prefix."""
        return self.address_with_prefix(IP_PREFIX)

    def subnet(self) -> IPv6Network:
        """Calculate the `/64` subnet for this identity with the default IP prefix."""
        return self.subnet_with_prefix(IP_PREFIX)

    def summary(self) -> IdentitySummary:
        """Collect keys and derived values for display or export."""
        return IdentitySummary(
            secret_key=self.secret,
            public_key=self.public,
            strength=self.strength(),
            address=self.address(),
            subnet=self.subnet(),
        )
