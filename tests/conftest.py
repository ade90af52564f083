"""Shared pytest fixtures for exchain-deploy tests."""

from pathlib import Path

import pytest

# Well-known development mnemonic, never funded on a public chain
TEST_MNEMONIC = "test test test test test test test test test test test junk"
TEST_ADDRESS_0 = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
TEST_ADDRESS_1 = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"


@pytest.fixture
def test_mnemonic() -> str:
    """Return the development mnemonic."""
    return TEST_MNEMONIC


@pytest.fixture
def mnemonic_dir(tmp_path: Path) -> Path:
    """Create a directory with a whitespace-padded .mnemonic file."""
    (tmp_path / ".mnemonic").write_text(f"  {TEST_MNEMONIC}  \n", encoding="utf8")
    return tmp_path


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """Return a directory without a .mnemonic file."""
    directory = tmp_path / "no_secret"
    directory.mkdir()
    return directory


@pytest.fixture
def test_addresses() -> list:
    """Return the first two addresses derived from the development mnemonic."""
    return [TEST_ADDRESS_0, TEST_ADDRESS_1]
