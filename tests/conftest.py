"""
Pytest fixtures for the ethval test suite.

Provides:
- Isolation of the process-wide arithmetic settings and logging state
- Common sample values in each denomination
"""

import pytest

from ethval import EthValue, Unit
from ethval.config import reset_settings
from ethval.logging_config import reset_logging


@pytest.fixture(autouse=True)
def _isolate_global_state():
    """Every test starts from default settings and unconfigured logging."""
    reset_settings()
    reset_logging()
    yield
    reset_settings()
    reset_logging()


@pytest.fixture
def one_eth() -> EthValue:
    return EthValue.of(1, Unit.ETH)


@pytest.fixture
def one_eth_in_gwei() -> EthValue:
    return EthValue.of("1000000000", Unit.GWEI)


@pytest.fixture
def one_eth_in_wei() -> EthValue:
    return EthValue.of("1000000000000000000")
