"""
Shared pytest fixtures for all ygg_keys tests.

Import these fixtures automatically via pytest discovery.
"""

from __future__ import annotations

import pytest

from ygg_keys.identity import NodeIdentity
from tests.ygg_keys.helpers import ALL_KEYS, KeyVector


@pytest.fixture(params=ALL_KEYS, ids=["strong", "weak"])
def key_vector(request: pytest.FixtureRequest) -> KeyVector:
    """Each known keypair in turn."""
    return request.param


@pytest.fixture
def known_identity(key_vector: KeyVector) -> NodeIdentity:
    """Identity loaded from a known keypair."""
    return NodeIdentity.from_hex(key_vector.secret_hex, key_vector.public_hex)


@pytest.fixture
def generated_identity() -> NodeIdentity:
    """Fresh random identity."""
    return NodeIdentity.generate()
