"""Error taxonomy for the chain inspector."""
from __future__ import annotations


class InspectorError(Exception):
    """Base class for every failure the inspector reports."""


class ValidationError(InspectorError):
    """Raised when an address or configuration value is malformed."""


class WalletConnectionError(InspectorError):
    """Raised when the wallet provider rejects or fails an account request."""


class ReadError(InspectorError):
    """Raised when an RPC read fails at the transport or response level."""

    def __init__(self, operation: str, target: str = "", message: str = "") -> None:
        self.operation = operation
        self.target = target
        detail = f"{operation}({target})" if target else operation
        super().__init__(f"{detail} failed: {message}" if message else f"{detail} failed")

    def __repr__(self) -> str:
        return f"ReadError(operation={self.operation!r}, target={self.target!r}, message={str(self)!r})"


class RpcResponseError(ReadError):
    """The node answered with a JSON-RPC error object (revert, unsupported method)."""

    def __init__(
        self, operation: str, target: str = "", code: int | None = None, message: str = ""
    ) -> None:
        self.code = code
        self.rpc_message = message
        super().__init__(operation, target, f"RPC error {code}: {message}")

    @property
    def is_revert(self) -> bool:
        """Execution reverted (EIP-1474 code 3, or geth's -32000 with a revert message)."""
        return self.code == 3 or "revert" in (self.rpc_message or "").lower()
