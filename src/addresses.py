"""EVM address validation and checksum normalization."""
from __future__ import annotations

from typing import Any

from eth_utils import (
    is_checksum_address,
    is_checksum_formatted_address,
    is_hex_address,
    to_checksum_address,
)

from .exceptions import ValidationError


def is_valid_address(value: Any) -> bool:
    """20-byte hex string; mixed-case input must carry a valid EIP-55 checksum."""
    if not isinstance(value, str) or not is_hex_address(value):
        return False
    if is_checksum_formatted_address(value):
        return is_checksum_address(value)
    return True


def normalize_address(value: Any) -> str:
    """Return the EIP-55 checksummed form of ``value``.

    Lowercase and uppercase hex are accepted as-is; mixed-case input must
    carry a valid checksum. Anything else raises :class:`ValidationError`.
    Normalizing an already normalized address returns it unchanged.
    """
    if not is_valid_address(value):
        raise ValidationError(f"Invalid address: {value!r}")
    return to_checksum_address(value)
