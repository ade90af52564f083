"""Networks and compilers handed to the deploy tool."""

from pathlib import Path
from typing import Union

from loguru import logger

import exchain_deploy.config as config
from exchain_deploy.types import CompilerDescriptor, DeploymentConfig, NetworkDescriptor
from exchain_deploy.utils import get_mnemonic
from exchain_deploy.wallet import HDWalletProvider


def build_config(base_dir: Union[Path, str] = config.DIR) -> DeploymentConfig:
    """
    Build the deployment configuration.

    The mnemonic file is not read here; each network's `provider` factory reads
    it on every call.

    Args:
        base_dir: Directory holding the .mnemonic file

    Returns:
        DeploymentConfig with the okexchain network and the solc compiler
    """
    mnemonic_path = Path(base_dir) / config.MNEMONIC_PATH.name

    def okexchain_provider() -> HDWalletProvider:
        logger.debug("Provider requested for network 'okexchain'.")
        return HDWalletProvider(
            mnemonic=get_mnemonic(mnemonic_path),
            provider_or_url=config.OKEXCHAIN_RPC_URL,
        )

    okexchain = NetworkDescriptor(
        name="okexchain",
        provider=okexchain_provider,
        gas_price=config.OKEXCHAIN_GAS_PRICE,
        network_id=config.OKEXCHAIN_NETWORK_ID,
        timeout_blocks=config.OKEXCHAIN_TIMEOUT_BLOCKS,
        skip_dry_run=config.OKEXCHAIN_SKIP_DRY_RUN,
        rpc_url=config.OKEXCHAIN_RPC_URL,
    )

    solc = CompilerDescriptor(
        name="solc",
        version=config.SOL_COMPILER_V,
        optimizer_enabled=config.SOL_OPTIMIZER_ENABLED,
        optimizer_runs=config.SOL_OPTIMIZER_RUNS,
    )

    return DeploymentConfig(networks={okexchain.name: okexchain}, compilers={solc.name: solc})


CONFIG = build_config()
