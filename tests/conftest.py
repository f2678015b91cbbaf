# tests/conftest.py
import pytest

from failchain.config import FailChainConfig, set_config, reset_config


@pytest.fixture(autouse=True)
def default_failchain_config():
    # Keep a user's ~/.failchain/config.yml out of the tests
    set_config(FailChainConfig.default())
    yield
    reset_config()
