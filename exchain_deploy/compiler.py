"""solc helpers driven by a CompilerDescriptor."""

from typing import Any, Dict, List, Optional

from loguru import logger
from packaging.version import Version

from exchain_deploy.types import CompilerDescriptor
from exchain_deploy.utils import get_solc_version

DEFAULT_OUTPUT_SELECTION: List[str] = ["metadata", "evm.bytecode", "abi"]


def standard_json_settings(
    compiler: CompilerDescriptor, output_values: Optional[List[str]] = None
) -> Dict[str, Any]:
    """
    Build the `settings` block of a solc standard-JSON input.

    Args:
        compiler: Compiler descriptor
        output_values: Outputs to select for every contract
                       (defaults to metadata, bytecode and abi)

    Returns:
        Dictionary with optimizer and outputSelection entries
    """
    if output_values is None:
        output_values = DEFAULT_OUTPUT_SELECTION

    settings = compiler.settings
    settings["outputSelection"] = {"*": {"*": list(output_values)}}
    return settings


def install_compiler(compiler: CompilerDescriptor) -> Version:
    """
    Make sure the solc version named by the descriptor is installed.

    Returns:
        Installed solc version
    """
    version = get_solc_version(compiler.version)
    logger.info(f"solc {version} ready for '{compiler.name}'.")
    return version
