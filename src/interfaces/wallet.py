"""Wallet provider protocol — account access abstraction."""
from typing import Protocol


class WalletProvider(Protocol):
    """Abstract interface for requesting account access from a wallet."""

    async def request_accounts(self) -> list[str]: ...
