"""
exchain-deploy: deployment configuration for OKExChain smart contracts
"""

from importlib.metadata import PackageNotFoundError, version

from exchain_deploy.deployment import CONFIG, build_config
from exchain_deploy.exceptions import (
    AccountNotFoundError,
    DeployConfigError,
    InvalidMnemonicError,
    MnemonicNotFoundError,
    NetworkNotFoundError,
)
from exchain_deploy.types import CompilerDescriptor, DeploymentConfig, NetworkDescriptor
from exchain_deploy.utils import get_mnemonic
from exchain_deploy.wallet import HDWalletProvider

try:
    __version__ = version("exchain-deploy")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "CONFIG",
    "build_config",
    "get_mnemonic",
    "HDWalletProvider",
    "DeploymentConfig",
    "NetworkDescriptor",
    "CompilerDescriptor",
    "DeployConfigError",
    "MnemonicNotFoundError",
    "InvalidMnemonicError",
    "NetworkNotFoundError",
    "AccountNotFoundError",
]
