"""Wallet provider backed by a configured address."""
from __future__ import annotations

from ..config import WalletConfig
from ..exceptions import WalletConnectionError


class StaticWallet:
    """Return a single preconfigured account (e.g. from ``${WALLET_ADDRESS}``)."""

    def __init__(self, config: WalletConfig) -> None:
        self.address = config.address

    async def request_accounts(self) -> list[str]:
        if not self.address:
            raise WalletConnectionError("No wallet address configured")
        return [self.address]
