"""Unit tests for address validation and normalization."""
from __future__ import annotations

import pytest

from src.addresses import is_valid_address, normalize_address
from src.exceptions import ValidationError

CHECKSUMMED = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"


class TestNormalizeAddress:
    def test_lowercase_is_checksummed(self) -> None:
        assert normalize_address(CHECKSUMMED.lower()) == CHECKSUMMED

    def test_idempotent(self) -> None:
        once = normalize_address(CHECKSUMMED.lower())
        assert normalize_address(once) == once

    @pytest.mark.parametrize(
        "value",
        [
            "0x5aaeb6053F3E94C9b9A09f33669435E7Ef1BeAeD",  # bad checksum
            "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAeD",  # one flipped letter
            "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeA",  # too short
            "0xZZZeb6053F3E94C9b9A09f33669435E7Ef1BeAeD",
            "",
            None,
            123,
        ],
    )
    def test_rejects_malformed(self, value: object) -> None:
        with pytest.raises(ValidationError, match="Invalid address"):
            normalize_address(value)

    def test_bad_checksum_is_not_repaired(self) -> None:
        flipped = CHECKSUMMED[:-1] + CHECKSUMMED[-1].upper()
        with pytest.raises(ValidationError):
            normalize_address(flipped)

    def test_uppercase_accepted(self) -> None:
        assert normalize_address("0x" + CHECKSUMMED[2:].upper()) == CHECKSUMMED


class TestIsValidAddress:
    def test_valid(self) -> None:
        assert is_valid_address(CHECKSUMMED)

    def test_invalid(self) -> None:
        assert not is_valid_address("not-an-address")
        assert not is_valid_address(b"\x00" * 20)

    def test_mixed_case_requires_checksum(self) -> None:
        assert is_valid_address(CHECKSUMMED.lower())
        assert not is_valid_address(CHECKSUMMED[:-1] + "D")
