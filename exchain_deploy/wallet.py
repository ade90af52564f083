from typing import Any, Dict, List, Optional, Union

from eth_account import Account
from eth_account.datastructures import SignedTransaction
from eth_account.signers.local import LocalAccount
from eth_utils import ValidationError
from hexbytes import HexBytes
from loguru import logger
from web3 import Web3, HTTPProvider
from web3.middleware import ExtraDataToPOAMiddleware, SignAndSendRawMiddlewareBuilder
from web3.providers import BaseProvider

import exchain_deploy.config as config
from exchain_deploy.exceptions import AccountNotFoundError, InvalidMnemonicError


logger.add(
        config.LOG_PATH,
        format="{time} | {level} | {message}",
        level=config.LOG_LEVEL,
    )

Account.enable_unaudited_hdwallet_features()


class HDWalletProvider:
    """Web3 connection that signs with accounts derived from a mnemonic."""

    def __init__(
            self,
            mnemonic: str,
            provider_or_url: Union[str, BaseProvider],
            address_index: int = 0,
            number_of_addresses: int = 1,
            derivation_path: str = config.DEFAULT_DERIVATION_PATH,
    ):
        """Derives the accounts and initializes the `web3` object.

        Args:
            mnemonic (str): BIP39 seed phrase
            provider_or_url (str | BaseProvider): RPC url or a ready `web3` provider instance
            address_index (int): first derivation index
            number_of_addresses (int): how many consecutive accounts to derive
            derivation_path (str): BIP44 path prefix, the index is appended to it
        """
        if address_index < 0:
            raise ValueError(f"address_index must be >= 0, got {address_index}")
        if number_of_addresses < 1:
            raise ValueError(f"number_of_addresses must be >= 1, got {number_of_addresses}")

        self._wallets = self._derive_wallets(
            mnemonic, derivation_path, address_index, number_of_addresses)

        if isinstance(provider_or_url, str):
            rpc_provider = HTTPProvider(
                endpoint_uri=provider_or_url,
                request_kwargs={
                    "timeout": config.NODE_TIMEOUT
                }
            )
        else:
            rpc_provider = provider_or_url

        self.web3 = Web3(rpc_provider)

        # If running in a network with PoA consensus, inject the middleware
        if config.GETH_POA:
            self.web3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)

        self.web3.middleware_onion.inject(
            SignAndSendRawMiddlewareBuilder.build(list(self._wallets.values())), layer=0)
        self.web3.eth.default_account = self.accounts[0]

        logger.info(f"HD wallet provider ready with {len(self._wallets)} account(s), "
                    f"first: {self.accounts[0]}.")

    @staticmethod
    def _derive_wallets(mnemonic: str, derivation_path: str, start: int, count: int
                        ) -> Dict[str, LocalAccount]:
        if not mnemonic:
            raise InvalidMnemonicError("Mnemonic invalid or undefined")

        wallets = {}
        for index in range(start, start + count):
            try:
                wallet = Account.from_mnemonic(mnemonic, account_path=f"{derivation_path}{index}")
            except (ValueError, ValidationError) as e:
                raise InvalidMnemonicError("Mnemonic invalid or undefined") from e
            wallets[wallet.address] = wallet
            logger.debug(f"Derive account {derivation_path}{index}: {wallet.address}.")
        return wallets

    @property
    def accounts(self) -> List[str]:
        return list(self._wallets.keys())

    def get_address(self, idx: int = 0) -> str:
        return self.accounts[idx]

    def get_addresses(self) -> List[str]:
        return self.accounts

    def _wallet_for(self, address: Optional[str]) -> LocalAccount:
        if address is None:
            return self._wallets[self.accounts[0]]
        try:
            checksummed = Web3.to_checksum_address(address)
        except ValueError as e:
            raise AccountNotFoundError(f"Account {address} is not a valid address") from e
        if checksummed not in self._wallets:
            raise AccountNotFoundError(f"Account {address} is not held by this provider")
        return self._wallets[checksummed]

    def sign_transaction(self, transaction: Dict[str, Any]) -> SignedTransaction:
        """Sign locally with the account named in `from` (the first account if absent)."""

        wallet = self._wallet_for(transaction.get("from"))
        transaction = {k: v for k, v in transaction.items() if k != "from"}
        return wallet.sign_transaction(transaction)

    def send_transaction(self, transaction: Dict[str, Any]) -> HexBytes:
        """Submit through the RPC endpoint, the middleware signs it locally."""

        transaction = dict(transaction)
        transaction["from"] = self._wallet_for(transaction.get("from")).address
        txn_hash = self.web3.eth.send_transaction(transaction)
        logger.info(f"Send transaction from {transaction['from']}: {txn_hash.hex()}.")
        return txn_hash

    def __repr__(self) -> str:
        return f"HDWalletProvider(accounts={self.accounts!r})"
