"""Wallet connection: providers plus primary-account selection."""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from ..addresses import normalize_address
from ..config import AppConfig
from ..exceptions import ValidationError, WalletConnectionError
from ..interfaces.wallet import WalletProvider
from .rpc import JsonRpcWallet
from .static import StaticWallet

logger = logging.getLogger(__name__)

# Registry of wallet provider factories keyed by provider name.
_WALLET_FACTORIES: dict[str, Any] = {
    "rpc": lambda cfg: JsonRpcWallet(cfg.wallet, cfg.network, cfg.rpc_timeout),
    "static": lambda cfg: StaticWallet(cfg.wallet),
}


def build_wallet(config: AppConfig) -> WalletProvider:
    factory = _WALLET_FACTORIES.get(config.wallet.provider)
    if factory is None:
        raise ValidationError(f"Unknown wallet provider '{config.wallet.provider}'")
    return factory(config)


def select_primary(accounts: Sequence[Any]) -> str:
    """Pick the first account and normalize it. Fails if ``accounts`` is empty."""
    if not accounts:
        raise WalletConnectionError("Wallet returned no accounts")
    try:
        return normalize_address(accounts[0])
    except ValidationError as e:
        raise WalletConnectionError(f"Wallet returned a malformed account: {e}") from e


async def connect(provider: WalletProvider) -> str:
    """Request account access and return the primary address."""
    accounts = await provider.request_accounts()
    address = select_primary(accounts)
    logger.info("Connected wallet %s", address)
    return address


__all__ = [
    "JsonRpcWallet",
    "StaticWallet",
    "build_wallet",
    "connect",
    "select_primary",
]
