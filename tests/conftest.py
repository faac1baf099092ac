"""
zkscrypto Test Fixtures
"""

import pytest

from zkscrypto.config import CryptoConfig, get_config, set_config
from zkscrypto.core.types import PrivateKey, PublicKey
from zkscrypto.crypto.params import CryptoParams, get_params


@pytest.fixture(autouse=True)
def default_config():
    """Run every test with the default configuration."""
    previous = get_config()
    set_config(CryptoConfig())
    yield
    set_config(previous)


@pytest.fixture(scope="session")
def params() -> CryptoParams:
    """Process-wide curve and hash parameters."""
    return get_params()


@pytest.fixture
def seed_ones() -> bytes:
    """32 bytes of 0x01."""
    return bytes([0x01] * 32)


@pytest.fixture
def private_key(seed_ones) -> PrivateKey:
    """Private key derived from the 0x01 seed."""
    return PrivateKey.from_seed(seed_ones)


@pytest.fixture
def public_key(private_key) -> PublicKey:
    """Public key of the 0x01 seed."""
    return private_key.public_key()


@pytest.fixture
def other_private_key() -> PrivateKey:
    """Private key derived from a second seed."""
    return PrivateKey.from_seed(bytes([0x02] * 32))
