"""
Test bootstrap:
- Add src/ to sys.path so the package imports without installation
- Shared byte fixtures
"""
import sys
import pathlib

import pytest

SRC = pathlib.Path(__file__).resolve().parent.parent / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def key_hash() -> bytes:
    """A 28-byte key hash."""
    return bytes(range(28))


@pytest.fixture
def pool_hash() -> bytes:
    """A 28-byte pool key hash."""
    return bytes(range(100, 128))


@pytest.fixture
def tx_id() -> bytes:
    """A 32-byte transaction id."""
    return bytes(range(32, 64))


@pytest.fixture
def reward_account(key_hash) -> bytes:
    """Mainnet reward account (header 0xe1) for key_hash."""
    return b"\xe1" + key_hash


@pytest.fixture
def enterprise_address(key_hash) -> bytes:
    """Mainnet enterprise address (header 0x61) for key_hash."""
    return b"\x61" + key_hash
