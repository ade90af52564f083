"""Custom exception classes for exchain-deploy."""


class DeployConfigError(Exception):
    """Base exception for deployment configuration errors."""

    pass


class MnemonicNotFoundError(DeployConfigError, FileNotFoundError):
    """Raised when the mnemonic file is missing."""

    pass


class InvalidMnemonicError(DeployConfigError, ValueError):
    """Raised when a mnemonic is empty or not a valid BIP39 phrase."""

    pass


class NetworkNotFoundError(DeployConfigError, ValueError):
    """Raised when requested network is not configured."""

    pass


class AccountNotFoundError(DeployConfigError, ValueError):
    """Raised when signing is requested for an address the provider does not hold."""

    pass
