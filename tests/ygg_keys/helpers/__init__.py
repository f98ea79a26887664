"""
Key vectors shared by the ygg_keys tests.

The keys come from nodes of the live network, so the derived values
double as interoperability checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from ipaddress import IPv6Address, IPv6Network


@dataclass(frozen=True)
class KeyVector:
    """A keypair with the values the overlay derives from it."""

    secret_hex: str
    public_hex: str
    strength: int
    address: IPv6Address
    subnet: IPv6Network

    @property
    def pair_hex(self) -> str:
        """Secret and public key joined, the yggdrasil-go config format."""
        return self.secret_hex + self.public_hex


STRONG_KEY = KeyVector(
    secret_hex="c752e88db1771790f6476bfd39b7f5664e4e02818455b8e9657ff063061e3049",
    public_hex="00000305eb7f19cb4506f937494ea2ebcf58e346604c0cf76be5f67271fd9a97",
    strength=22,
    address=IPv6Address("216:7d0a:4073:1a5d:7c83:645b:58ae:8a18"),
    subnet=IPv6Network("316:7d0a:4073:1a5d::/64"),
)

WEAK_KEY = KeyVector(
    secret_hex="de1f6a91c14d6e8e9a204e4926c75d4d114500a422041a8c603054dc43605e6a",
    public_hex="40a40d9fc1a8727994b54c8e416329e9f71596a97d2912be80daf5bf20da4a3d",
    strength=1,
    address=IPv6Address("201:fd6f:c980:f95e:3619:ad2a:cdc6:fa73"),
    subnet=IPv6Network("301:fd6f:c980:f95e::/64"),
)

ALL_KEYS = (STRONG_KEY, WEAK_KEY)
"""Every known keypair."""
