"""Single JSON-RPC POST over aiohttp."""
from __future__ import annotations

import ssl
from typing import Any

import aiohttp
import certifi


async def post_json_rpc(
    url: str, method: str, params: list[Any], timeout: float | None = None
) -> Any:
    """POST one JSON-RPC request and return the decoded response body.

    Non-200 HTTP statuses (rate limiting, gateway errors) raise
    ``RuntimeError`` before the body is read. Callers wrap transport
    failures in their own error type.
    """
    payload = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}

    ssl_context = ssl.create_default_context(cafile=certifi.where())

    connector = aiohttp.TCPConnector(ssl=ssl_context)
    async with aiohttp.ClientSession(connector=connector) as session:
        async with session.post(
            url,
            json=payload,
            timeout=aiohttp.ClientTimeout(total=timeout),
        ) as response:
            if response.status != 200:
                raise RuntimeError(f"HTTP {response.status}")
            return await response.json(content_type=None)
