"""Local pytest configuration shared by the package tests."""

import pytest

from ethereum_tx_base_types import TestPrivateKey
from ethereum_tx_forks import ChainRules


@pytest.fixture
def default_chain_rules() -> ChainRules:
    """Return chain rules for the default chain and hard-fork."""
    return ChainRules()


@pytest.fixture
def private_key() -> bytes:
    """Return the 32-byte private key of the test account."""
    return TestPrivateKey.to_bytes(32, "big")
