"""JSON-RPC transport shared by the chain reader and the wallet provider."""
from .transport import post_json_rpc

__all__ = ["post_json_rpc"]
