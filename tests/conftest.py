"""Pytest hooks and fixtures."""

import pytest

from starkscript.config import access
from starkscript.signer import PresignedSigner
from starkscript.transport.mock import ScriptedTransport

ACCOUNT_ADDRESS = 0x123
CONTRACT_ADDRESS = "0x0456"


@pytest.fixture
def transport() -> ScriptedTransport:
    return ScriptedTransport()


@pytest.fixture
def signer() -> PresignedSigner:
    return PresignedSigner(ACCOUNT_ADDRESS, signature=(0x1, 0x2), nonce=7)


@pytest.fixture
def contract_address() -> str:
    return CONTRACT_ADDRESS


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """Keep host RPC settings out of tests."""
    for name in ("RPC_URL", "STARKSCRIPT_RPC__URL", "STARKSCRIPT_LOG__LEVEL", "STARKSCRIPT_LOG__FILE_ENABLED"):
        monkeypatch.delenv(name, raising=False)
    access.clear_config_cache()
    yield
    access.clear_config_cache()
