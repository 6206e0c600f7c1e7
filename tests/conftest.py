"""Shared test fixtures and sample data."""
from __future__ import annotations

import io
import textwrap
from pathlib import Path

import pytest

from src.config import AppConfig, NetworkConfig, ProbeConfig, WalletConfig
from src.exceptions import ReadError
from src.models import Block, RawCallResult
from src.presenter import Presenter

# EIP-55 reference vectors
WALLET_ADDR = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
PROBE_1 = "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359"
PROBE_2 = "0xdbF03B407c01E7cD3CBea99509d93f8DDDC8C6FB"
PROBE_3 = "0xD1220A0cf47c7B9Be7A2E6BA89F429762e7b9aDb"

ONE_ETHER = 10**18


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_network() -> NetworkConfig:
    return NetworkConfig(
        label="Base Sepolia",
        chain_id=84532,
        rpc_url="https://rpc.example.com",
        explorer_url="https://explorer.example.com",
    )


@pytest.fixture()
def sample_app_config(sample_network: NetworkConfig) -> AppConfig:
    return AppConfig(
        network=sample_network,
        wallet=WalletConfig(provider="static", address=WALLET_ADDR),
        probes=ProbeConfig(
            addresses=(PROBE_1, PROBE_2, PROBE_3),
            selector="0x18160ddd",
            selector_label="totalSupply()",
        ),
    )


SAMPLE_YAML = textwrap.dedent("""\
    network:
      label: Base Sepolia
      chain_id: 84532
      rpc_url: "https://rpc.example.com"
      explorer_url: "https://explorer.example.com/"
    wallet:
      provider: static
      address: "0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed"
    probes:
      addresses:
        - "0xfb6916095ca1df60bb79ce92ce3ea74c37c5d359"
        - "0xdbF03B407c01E7cD3CBea99509d93f8DDDC8C6FB"
      selector: "0x18160DDD"
      selector_label: totalSupply()
    rpc_timeout: 15
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file


# ---------------------------------------------------------------------------
# Fakes for the reader, wallet and output streams
# ---------------------------------------------------------------------------


class FakeReader:
    """In-memory ChainReader; ``fail`` maps (operation, target) to an exception."""

    def __init__(
        self,
        balances: dict[str, int] | None = None,
        nonces: dict[str, int] | None = None,
        code: dict[str, bool] | None = None,
        call_result: RawCallResult | None = None,
        fail: dict[tuple[str, str], Exception] | None = None,
    ) -> None:
        self.block = Block(number=1234, timestamp=1700000000, gas_used=21000, gas_limit=30000000)
        self.gas_price = 1_000_000
        self.balances = balances or {}
        self.nonces = nonces or {}
        self.code = code or {}
        self.call_result = call_result or RawCallResult()
        self.fail = fail or {}
        self.calls: list[tuple[str, str]] = []

    def _record(self, op: str, target: str = "") -> None:
        self.calls.append((op, target))
        if (op, target) in self.fail:
            raise self.fail[(op, target)]

    async def get_latest_block(self) -> Block:
        self._record("block")
        return self.block

    async def get_gas_price(self) -> int:
        self._record("gas_price")
        return self.gas_price

    async def get_balance(self, address: str) -> int:
        self._record("balance", address)
        return self.balances.get(address, 0)

    async def get_transaction_count(self, address: str) -> int:
        self._record("nonce", address)
        return self.nonces.get(address, 0)

    async def get_code(self, address: str) -> bool:
        self._record("code", address)
        return self.code.get(address, False)

    async def call(self, to: str, data: str) -> RawCallResult:
        self._record("call", to)
        return self.call_result


class FakeWallet:
    def __init__(self, accounts: list[str] | None = None, error: Exception | None = None) -> None:
        self.accounts = accounts if accounts is not None else [WALLET_ADDR]
        self.error = error

    async def request_accounts(self) -> list[str]:
        if self.error:
            raise self.error
        return self.accounts


@pytest.fixture()
def fake_reader() -> FakeReader:
    return FakeReader(
        balances={WALLET_ADDR: ONE_ETHER, PROBE_1: 5 * 10**17},
        nonces={WALLET_ADDR: 7},
        code={PROBE_1: True},
    )


@pytest.fixture()
def fake_wallet() -> FakeWallet:
    return FakeWallet()


@pytest.fixture()
def streams() -> tuple[io.StringIO, io.StringIO]:
    return io.StringIO(), io.StringIO()


@pytest.fixture()
def presenter(streams: tuple[io.StringIO, io.StringIO]) -> Presenter:
    out, err = streams
    return Presenter(out=out, err=err)


def read_error(op: str, target: str = "") -> ReadError:
    return ReadError(op, target, "node unreachable")
