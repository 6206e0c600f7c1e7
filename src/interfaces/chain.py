"""Chain reader protocol — read-only RPC abstraction."""
from typing import Protocol

from ..models import Block, RawCallResult


class ChainReader(Protocol):
    """Abstract interface for independent, stateless chain reads."""

    async def get_latest_block(self) -> Block: ...

    async def get_gas_price(self) -> int: ...

    async def get_balance(self, address: str) -> int: ...

    async def get_transaction_count(self, address: str) -> int: ...

    async def get_code(self, address: str) -> bool: ...

    async def call(self, to: str, data: str) -> RawCallResult: ...
