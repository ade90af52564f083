"""Data types for exchain-deploy configuration."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping

from exchain_deploy.exceptions import NetworkNotFoundError


@dataclass(frozen=True)
class NetworkDescriptor:
    """Connection parameters for one target network."""

    name: str
    provider: Callable[[], Any]  # zero-argument factory, returns HDWalletProvider
    gas_price: int  # wei
    network_id: int
    timeout_blocks: int
    skip_dry_run: bool
    rpc_url: str

    def as_dict(self) -> Dict[str, Any]:
        """
        Get the descriptor in the form deploy tooling expects.

        Returns:
            Dictionary with provider, gasPrice, network_id, timeoutBlocks, skipDryRun
        """
        return {
            "provider": self.provider,
            "gasPrice": self.gas_price,
            "network_id": self.network_id,
            "timeoutBlocks": self.timeout_blocks,
            "skipDryRun": self.skip_dry_run,
        }


@dataclass(frozen=True)
class CompilerDescriptor:
    """Compiler version and optimizer settings."""

    name: str
    version: str  # semver, e.g. "0.8.4"
    optimizer_enabled: bool
    optimizer_runs: int

    @property
    def settings(self) -> Dict[str, Any]:
        return {
            "optimizer": {
                "enabled": self.optimizer_enabled,
                "runs": self.optimizer_runs,
            }
        }

    def as_dict(self) -> Dict[str, Any]:
        return {"version": self.version, "settings": self.settings}


@dataclass(frozen=True)
class DeploymentConfig:
    """Networks and compilers available to the deploy tool."""

    networks: Mapping[str, NetworkDescriptor] = field(default_factory=dict)
    compilers: Mapping[str, CompilerDescriptor] = field(default_factory=dict)

    def __post_init__(self):
        # Frozen dataclass: bypass __setattr__ to wrap the mappings read-only
        object.__setattr__(self, "networks", MappingProxyType(dict(self.networks)))
        object.__setattr__(self, "compilers", MappingProxyType(dict(self.compilers)))

    def network(self, name: str) -> NetworkDescriptor:
        """
        Get a network descriptor by name.

        Args:
            name: Network name, e.g. "okexchain"

        Returns:
            NetworkDescriptor

        Raises:
            NetworkNotFoundError: If network is not configured
        """
        if name not in self.networks:
            raise NetworkNotFoundError(f"Network '{name}' not found in config")
        return self.networks[name]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "networks": {name: n.as_dict() for name, n in self.networks.items()},
            "compilers": {name: c.as_dict() for name, c in self.compilers.items()},
        }
