"""Serializable view of a node identity."""

from ipaddress import IPv6Address, IPv6Network

from ygg_keys.types import StrictBaseModel

from .codec import PublicKey, SecretKey


class IdentitySummary(StrictBaseModel):
    """Everything an operator needs to configure or recognize a node."""

    secret_key: SecretKey
    """The 32-byte secret seed, serialized as hex."""

    public_key: PublicKey
    """The 32-byte public key, serialized as hex."""

    strength: int
    """Leading one-bits of the inverted public key."""

    address: IPv6Address
    """The node's address in the overlay."""

    subnet: IPv6Network
    """The `/64` routed to the node."""
