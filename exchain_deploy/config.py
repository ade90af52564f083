import os
from pathlib import Path

import dotenv

dotenv.load_dotenv()

DIR: Path = Path(__file__).resolve().parent
MNEMONIC_PATH: Path = DIR / ".mnemonic"

NODE_TIMEOUT: int = int(os.environ.get("NODE_TIMEOUT", 20))
GETH_POA: bool = os.environ.get("GETH_POA", "false").lower() in ("1", "true", "yes")

LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")
LOG_PATH: str = os.environ.get("LOG_PATH", "log/wallet.log")

OKEXCHAIN_RPC_URL: str = "https://exchainrpc.okex.org"
OKEXCHAIN_NETWORK_ID: int = 66
OKEXCHAIN_GAS_PRICE: int = 1_000_000_000  # 1 gwei
OKEXCHAIN_TIMEOUT_BLOCKS: int = 200
OKEXCHAIN_SKIP_DRY_RUN: bool = True

SOL_COMPILER_V: str = "0.8.4"
SOL_OPTIMIZER_ENABLED: bool = True
SOL_OPTIMIZER_RUNS: int = 200

DEFAULT_DERIVATION_PATH: str = "m/44'/60'/0'/0/"
