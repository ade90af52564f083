from pathlib import Path
from typing import Tuple, Union

import solcx
from loguru import logger
from packaging.version import Version

import exchain_deploy.config as config
from exchain_deploy.exceptions import MnemonicNotFoundError


def get_solc_version(version: str = config.SOL_COMPILER_V) -> Version:
    """Installed solc matching `version`, installing it when missing."""
    for v in solcx.get_installed_solc_versions():
        if str(v) == version:
            return v
    logger.info(f"Install solc {version}.")
    return solcx.install_solc(version)


def get_file_content(path_from_root: Path) -> Tuple[str, str]:
    with open(path_from_root.absolute().as_posix(), "r", encoding='utf8') as file:
        raw_content = file.read()
        return raw_content, path_from_root.name


def get_mnemonic(path: Union[Path, str] = config.MNEMONIC_PATH) -> str:
    """
    Read the mnemonic phrase from file.

    Args:
        path: Path to the mnemonic file (defaults to .mnemonic beside the package)

    Returns:
        File content with leading/trailing whitespace stripped.
        The phrase is not validated here.

    Raises:
        MnemonicNotFoundError: If the file does not exist
    """
    path = Path(path)
    try:
        content, _ = get_file_content(path)
    except FileNotFoundError as e:
        raise MnemonicNotFoundError(f"Mnemonic file not found at {path}") from e
    logger.debug(f"Load mnemonic from {path}.")
    return content.strip()
