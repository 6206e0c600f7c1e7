"""EVM JSON-RPC client for read-only chain queries."""
from __future__ import annotations

import logging
from typing import Any

from ...config import NetworkConfig
from ...exceptions import ReadError, RpcResponseError
from ...models import Block, RawCallResult
from ...rpc import post_json_rpc

logger = logging.getLogger(__name__)

_EMPTY_PAYLOADS = ("", "0x")


def _to_int(value: Any, operation: str, target: str = "") -> int:
    """Decode a hex quantity, raising ReadError on malformed input."""
    if not isinstance(value, str):
        raise ReadError(operation, target, f"expected hex quantity, got {value!r}")
    try:
        return int(value, 16)
    except ValueError:
        raise ReadError(operation, target, f"malformed hex quantity {value!r}") from None


class EvmClient:
    """Stateless JSON-RPC reader bound to a single node endpoint.

    Every method is an independent, idempotent read; callers may run any
    subset of them concurrently. Failures raise :class:`ReadError` and are
    never retried.
    """

    def __init__(self, network: NetworkConfig, timeout: float | None = None) -> None:
        self.rpc_url = network.rpc_url
        self.timeout = timeout

    async def rpc_call(
        self, method: str, params: list[Any], target: str = ""
    ) -> Any:
        """POST one JSON-RPC request and return its ``result`` field."""
        try:
            result = await post_json_rpc(self.rpc_url, method, params, self.timeout)
        except Exception as e:
            logger.debug("RPC %s against %s failed: %s", method, self.rpc_url, e)
            raise ReadError(method, target, str(e) or type(e).__name__) from e

        if not isinstance(result, dict):
            raise ReadError(method, target, f"malformed response {result!r}")
        if "error" in result:
            error = result["error"] or {}
            if isinstance(error, dict):
                raise RpcResponseError(
                    method, target, error.get("code"), error.get("message", "")
                )
            raise RpcResponseError(method, target, None, str(error))
        if "result" not in result:
            raise ReadError(method, target, "response has no result")

        return result["result"]

    async def get_latest_block(self) -> Block:
        """Get number, timestamp and gas figures of the latest block."""
        op = "eth_getBlockByNumber"
        raw = await self.rpc_call(op, ["latest", False], target="latest")
        if not isinstance(raw, dict):
            raise ReadError(op, "latest", f"malformed block {raw!r}")
        return Block(
            number=_to_int(raw.get("number"), op, "latest"),
            timestamp=_to_int(raw.get("timestamp"), op, "latest"),
            gas_used=_to_int(raw.get("gasUsed"), op, "latest"),
            gas_limit=_to_int(raw.get("gasLimit"), op, "latest"),
        )

    async def get_gas_price(self) -> int:
        raw = await self.rpc_call("eth_gasPrice", [])
        return _to_int(raw, "eth_gasPrice")

    async def get_balance(self, address: str) -> int:
        """Get balance in wei."""
        raw = await self.rpc_call("eth_getBalance", [address, "latest"], target=address)
        return _to_int(raw, "eth_getBalance", address)

    async def get_transaction_count(self, address: str) -> int:
        raw = await self.rpc_call(
            "eth_getTransactionCount", [address, "latest"], target=address
        )
        return _to_int(raw, "eth_getTransactionCount", address)

    async def get_code(self, address: str) -> bool:
        """Return whether bytecode is deployed at ``address``."""
        raw = await self.rpc_call("eth_getCode", [address, "latest"], target=address)
        if not isinstance(raw, str):
            raise ReadError("eth_getCode", address, f"malformed bytecode {raw!r}")
        return raw not in _EMPTY_PAYLOADS

    async def call(self, to: str, data: str) -> RawCallResult:
        """Issue a raw ``eth_call`` and read the return data as a uint.

        Empty output, a revert, or output that is not hex all mean "no
        data". Transport failures and node-side errors (rate limiting,
        internal errors) still raise :class:`ReadError`.
        """
        target = f"{to}:{data}"
        try:
            raw = await self.rpc_call(
                "eth_call", [{"to": to, "data": data}, "latest"], target=target
            )
        except RpcResponseError as e:
            if not e.is_revert:
                raise
            logger.debug("eth_call to %s reverted: %s", to, e)
            return RawCallResult()

        if not isinstance(raw, str) or raw in _EMPTY_PAYLOADS:
            return RawCallResult()
        try:
            return RawCallResult(int(raw, 16))
        except ValueError:
            logger.debug("eth_call to %s returned undecodable data %r", to, raw)
            return RawCallResult()
