"""Data models — all frozen (immutable)."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Block:
    """Header fields of a block as read from the node."""

    number: int
    timestamp: int
    gas_used: int
    gas_limit: int


@dataclass(frozen=True)
class NetworkSnapshot:
    """Chain state at the latest block."""

    chain_id: int
    network: str
    block_number: int
    timestamp: int
    gas_used: int
    gas_limit: int
    gas_price: int
    block_url: str


@dataclass(frozen=True)
class AddressReport:
    """Balance, nonce and code presence for one address."""

    address: str
    balance_wei: int
    balance_eth: str
    nonce: int
    is_contract: bool
    explorer_url: str


@dataclass(frozen=True)
class RawCallResult:
    """Outcome of an unstructured ``eth_call``.

    ``value`` is ``None`` when the call returned nothing, reverted, or
    returned bytes that do not read as an unsigned integer.
    """

    value: int | None = None

    @property
    def has_data(self) -> bool:
        return self.value is not None
