"""Unit tests for mnemonic file loading."""

from pathlib import Path

import pytest

from exchain_deploy.exceptions import DeployConfigError, MnemonicNotFoundError
from exchain_deploy.utils import get_file_content, get_mnemonic


class TestGetMnemonic:
    """Test the get_mnemonic function."""

    def test_strips_surrounding_whitespace(self, tmp_path: Path):
        """Test that padding and trailing newline are removed."""
        words = " ".join(f"word{i}" for i in range(1, 13))
        secret = tmp_path / ".mnemonic"
        secret.write_text(f"  {words}  \n")

        assert get_mnemonic(secret) == words

    def test_keeps_inner_spacing(self, tmp_path: Path):
        """Test that only leading/trailing whitespace is stripped."""
        secret = tmp_path / ".mnemonic"
        secret.write_text("\t one  two \n")

        assert get_mnemonic(secret) == "one  two"

    def test_accepts_string_path(self, mnemonic_dir: Path, test_mnemonic: str):
        """Test that the path can be given as a string."""
        assert get_mnemonic(str(mnemonic_dir / ".mnemonic")) == test_mnemonic

    def test_empty_file_returns_empty_string(self, tmp_path: Path):
        """Test that no validation is performed on read."""
        secret = tmp_path / ".mnemonic"
        secret.write_text(" \n")

        assert get_mnemonic(secret) == ""

    def test_missing_file_raises_mnemonic_not_found(self, empty_dir: Path):
        """Test that a missing file raises MnemonicNotFoundError."""
        with pytest.raises(MnemonicNotFoundError):
            get_mnemonic(empty_dir / ".mnemonic")

    def test_missing_file_catchable_as_file_not_found(self, empty_dir: Path):
        """Test that the error is still a file-not-found condition."""
        with pytest.raises(FileNotFoundError):
            get_mnemonic(empty_dir / ".mnemonic")

    def test_missing_file_catchable_as_deploy_config_error(self, empty_dir: Path):
        with pytest.raises(DeployConfigError):
            get_mnemonic(empty_dir / ".mnemonic")


class TestGetFileContent:
    """Test the get_file_content function."""

    def test_returns_content_and_name(self, tmp_path: Path):
        path = tmp_path / "Token.sol"
        path.write_text("pragma solidity 0.8.4;")

        content, name = get_file_content(path)

        assert content == "pragma solidity 0.8.4;"
        assert name == "Token.sol"
