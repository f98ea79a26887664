"""
Hex import of Ed25519 keypairs.

Yggdrasil stores a node's signing key as hex. The secret string carries
either the 32-byte seed alone or the 64-byte `seed || public` pair, the
way Go's `ed25519.PrivateKey` serializes it. A separate public key string
may accompany either form.
"""

from __future__ import annotations

from ygg_keys.types import (
    Bytes32,
    Bytes64,
    ConflictingPublicKeysError,
    HexDecodeError,
    WrongKeyLengthError,
)

__all__ = [
    "PublicKey",
    "SecretKey",
    "decode_pair",
]


class SecretKey(Bytes32):
    """32-byte Ed25519 secret seed."""


class PublicKey(Bytes32):
    """32-byte Ed25519 public key."""


def _decode_hex(value: str) -> bytes:
    try:
        return bytes.fromhex(value)
    except ValueError as e:
        raise HexDecodeError(e) from e


def decode_pair(
    secret_hex: str, public_hex: str | None = None
) -> tuple[SecretKey, PublicKey | None]:
    """
    Split one or two hex strings into 32-byte secret and public halves.

    Accepted inputs:

    - `secret_hex` with 64 bytes and `public_hex` given: the public halves
      must match; the embedded one is returned. Only the first 32 bytes of
      `public_hex` are compared.
    - `secret_hex` with 64 bytes alone: the embedded public half is returned.
    - `secret_hex` with 32 bytes and `public_hex` with exactly 32 bytes.
    - `secret_hex` with 32 bytes alone: the public half is `None` and must
      be derived by the caller.

    Args:
        secret_hex: Hex of the secret seed, or of the seed and public key joined.
        public_hex: Optional hex of the public key.

    Returns:
        Tuple of (secret, public or None).

    Raises:
        HexDecodeError: If either string is not valid hex.
        WrongKeyLengthError: If a string decodes to an unsupported length.
        ConflictingPublicKeysError: If the two public keys differ.
    """
    secret_bytes = _decode_hex(secret_hex)

    embedded: PublicKey | None
    if len(secret_bytes) == Bytes64.LENGTH:
        pair = Bytes64(secret_bytes)
        secret, embedded = SecretKey(pair[:32]), PublicKey(pair[32:])
    elif len(secret_bytes) == Bytes32.LENGTH:
        secret, embedded = SecretKey(secret_bytes), None
    else:
        raise WrongKeyLengthError("secret", len(secret_bytes))

    if public_hex is None:
        return secret, embedded

    public_bytes = _decode_hex(public_hex)

    if embedded is not None:
        if len(public_bytes) < Bytes32.LENGTH:
            raise WrongKeyLengthError("public", len(public_bytes))
        if public_bytes[:32] != embedded:
            raise ConflictingPublicKeysError()
        return secret, embedded

    if len(public_bytes) != Bytes32.LENGTH:
        raise WrongKeyLengthError("public", len(public_bytes))
    return secret, PublicKey(public_bytes)
