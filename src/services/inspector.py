"""Read-only chain inspection workflow — connect, gather, probe, report."""
from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone

from ..addresses import normalize_address
from ..chains.evm import EvmClient
from ..config import AppConfig
from ..interfaces.chain import ChainReader
from ..interfaces.wallet import WalletProvider
from ..models import AddressReport, NetworkSnapshot, RawCallResult
from ..presenter import Presenter
from ..reports import build_address_report, build_snapshot, explorer_code_url
from ..wallets import build_wallet, connect

logger = logging.getLogger(__name__)

NO_DATA = "no data / not supported"


class Inspector:
    """Runs one read-only inspection pass and renders it through a Presenter."""

    def __init__(
        self,
        config: AppConfig,
        reader: ChainReader | None = None,
        wallet: WalletProvider | None = None,
        presenter: Presenter | None = None,
    ) -> None:
        self._config = config
        self._network = config.network
        self._reader: ChainReader = reader or EvmClient(config.network, config.rpc_timeout)
        self._wallet: WalletProvider = wallet or build_wallet(config)
        self._presenter = presenter or Presenter()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def network_snapshot(self) -> NetworkSnapshot:
        block, gas_price = await asyncio.gather(
            self._reader.get_latest_block(),
            self._reader.get_gas_price(),
        )
        return build_snapshot(block, gas_price, self._network)

    async def inspect_address(self, address: str) -> AddressReport:
        balance, nonce, has_code = await asyncio.gather(
            self._reader.get_balance(address),
            self._reader.get_transaction_count(address),
            self._reader.get_code(address),
        )
        return build_address_report(address, balance, nonce, has_code, self._network)

    async def read_uint256(self, contract: str, selector: str) -> RawCallResult:
        """Raw ``eth_call`` of a bare 4-byte selector, read as a uint."""
        return await self._reader.call(contract, selector[:10])

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    @staticmethod
    def _now_iso() -> str:
        return datetime.now(timezone.utc).isoformat(timespec="milliseconds")

    def _render_boot(self) -> None:
        net = self._network
        self._presenter.write(f"[{self._now_iso()}] Aether boot (read-only)")
        self._presenter.write(f"Network: {net.label} | chainId: {net.chain_id}")
        self._presenter.write(f"RPC: {net.rpc_url}")
        self._presenter.write(f"Explorer: {net.explorer_url}")

    def _render_wallet(self, report: AddressReport) -> None:
        self._presenter.render(
            "Wallet context",
            [
                f"Address: {report.address}",
                f"Balance: {report.balance_eth} {self._network.native_symbol}",
                f"Tx count: {report.nonce}",
                f"Contract: {'yes' if report.is_contract else 'no'}",
                f"Explorer: {report.explorer_url}",
            ],
        )

    def _render_snapshot(self, snap: NetworkSnapshot) -> None:
        self._presenter.render(
            "Network snapshot",
            [
                f"Latest block: {snap.block_number}",
                f"Timestamp: {snap.timestamp}",
                f"Gas used / limit: {snap.gas_used} / {snap.gas_limit}",
                f"Gas price: {snap.gas_price}",
                f"Block link: {snap.block_url}",
            ],
        )

    def _render_probe(self, report: AddressReport) -> None:
        self._presenter.render(
            "Testnet contract probe",
            [
                f"Address: {report.address}",
                f"Has code: {'yes' if report.is_contract else 'no'}",
                f"Balance: {report.balance_eth} {self._network.native_symbol}",
                f"Explorer: {report.explorer_url}",
                f"Code tab: {explorer_code_url(self._network, report.address)}",
            ],
        )

    def _render_selector(self, target: str, result: RawCallResult) -> None:
        probes = self._config.probes
        self._presenter.render(
            "Optional read-only selector check",
            [
                f"Target: {target}",
                f"Selector: {probes.selector} ({probes.selector_label})",
                f"Result: {result.value if result.has_data else NO_DATA}",
                "Note: this is a raw eth_call; no ABI required.",
            ],
        )

    # ------------------------------------------------------------------
    # Workflows
    # ------------------------------------------------------------------

    async def inspect(self) -> None:
        """Full pass; any failure propagates to the caller."""
        wallet = await connect(self._wallet)

        snap, wallet_report = await asyncio.gather(
            self.network_snapshot(),
            self.inspect_address(wallet),
        )
        self._render_wallet(wallet_report)
        self._render_snapshot(snap)

        # Sequential so reports render in listed order.
        targets = self._config.probes.addresses
        for address in targets:
            logger.debug("Probing %s", address)
            self._render_probe(await self.inspect_address(address))

        result = await self.read_uint256(targets[0], self._config.probes.selector)
        self._render_selector(targets[0], result)

        self._presenter.render(
            "Done",
            [
                "Read-only session completed.",
                "No transactions were signed or broadcast.",
            ],
        )

    async def run(self) -> int:
        """Boot, inspect, and return the process exit code."""
        self._render_boot()
        return await self._guarded(self.inspect())

    async def run_snapshot(self) -> int:
        self._render_boot()

        async def _snapshot() -> None:
            self._render_snapshot(await self.network_snapshot())

        return await self._guarded(_snapshot())

    async def run_address(self, address: str) -> int:
        self._render_boot()

        async def _address() -> None:
            self._render_probe(await self.inspect_address(normalize_address(address)))

        return await self._guarded(_address())

    async def _guarded(self, workflow) -> int:
        try:
            await workflow
        except Exception as e:
            logger.debug("Inspection aborted", exc_info=True)
            self._presenter.error(f"Fatal error: {e}")
            return 1
        return 0
