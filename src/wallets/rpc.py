"""JSON-RPC wallet provider (EIP-1193 style ``eth_requestAccounts``)."""
from __future__ import annotations

import logging
from typing import Any

from ..config import NetworkConfig, WalletConfig
from ..exceptions import WalletConnectionError
from ..rpc import post_json_rpc

logger = logging.getLogger(__name__)


class JsonRpcWallet:
    """Wallet reachable over JSON-RPC, bound to a url and chain id.

    The wallet may block on a user-facing consent prompt before answering
    ``eth_requestAccounts``.
    """

    def __init__(
        self, config: WalletConfig, network: NetworkConfig, timeout: float | None = None
    ) -> None:
        self.url = config.url or network.rpc_url
        self.chain_id = network.chain_id
        self.timeout = timeout

    async def _request(self, method: str, params: list[Any]) -> Any:
        try:
            result = await post_json_rpc(self.url, method, params, self.timeout)
        except Exception as e:
            raise WalletConnectionError(
                f"Wallet request {method} to {self.url} failed: {e}"
            ) from e

        if not isinstance(result, dict):
            raise WalletConnectionError(f"Wallet returned malformed response: {result!r}")
        if "error" in result:
            raise WalletConnectionError(f"Wallet rejected {method}: {result['error']}")
        return result.get("result")

    async def request_accounts(self) -> list[str]:
        """Ask the wallet for account access on the configured chain."""
        chain_id = await self._request("eth_chainId", [])
        try:
            remote_chain_id = int(chain_id, 16)
        except (TypeError, ValueError):
            raise WalletConnectionError(
                f"Wallet returned malformed chain id: {chain_id!r}"
            ) from None
        if remote_chain_id != self.chain_id:
            raise WalletConnectionError(
                f"Wallet is on chain {remote_chain_id}, expected {self.chain_id}"
            )

        try:
            accounts = await self._request("eth_requestAccounts", [])
        except WalletConnectionError as e:
            raise WalletConnectionError(
                f"{e} (nodes without unlocked accounts refuse this; "
                "use wallet.provider: static for read-only runs)"
            ) from e
        if not isinstance(accounts, list):
            raise WalletConnectionError(f"Wallet returned malformed accounts: {accounts!r}")
        logger.debug("Wallet at %s returned %d account(s)", self.url, len(accounts))
        return accounts
