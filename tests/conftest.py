"""
eip5564 Test Fixtures
"""

import pytest

from eip5564.core.types import PrivateKey, PublicKey
from eip5564.crypto.curve import get_curve
from eip5564.crypto.entropy import DeterministicRandomSource
from eip5564.protocol.keys import StealthKeys

from vectors import (
    META_ADDRESS,
    SPENDING_PRIVATE_KEY,
    SPENDING_PUBLIC_KEY,
    VIEWING_PRIVATE_KEY,
    VIEWING_PUBLIC_KEY,
)


@pytest.fixture
def curve():
    """secp256k1 operations."""
    return get_curve()


@pytest.fixture
def spending_private_key() -> PrivateKey:
    return PrivateKey.from_hex(SPENDING_PRIVATE_KEY)


@pytest.fixture
def viewing_private_key() -> PrivateKey:
    return PrivateKey.from_hex(VIEWING_PRIVATE_KEY)


@pytest.fixture
def spending_public_key() -> PublicKey:
    return PublicKey.from_hex(SPENDING_PUBLIC_KEY)


@pytest.fixture
def viewing_public_key() -> PublicKey:
    return PublicKey.from_hex(VIEWING_PUBLIC_KEY)


@pytest.fixture
def meta_address() -> str:
    return META_ADDRESS


@pytest.fixture
def recipient_keys(spending_private_key, viewing_private_key) -> StealthKeys:
    """Recipient keys from the reference vector."""
    return StealthKeys.from_private_keys(spending_private_key, viewing_private_key)


@pytest.fixture
def random_source() -> DeterministicRandomSource:
    """Reproducible entropy for tests."""
    return DeterministicRandomSource(b"eip5564 test seed")
