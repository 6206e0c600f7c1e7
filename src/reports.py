"""Report builders — pure functions turning raw reads into report models."""
from __future__ import annotations

from .config import NetworkConfig
from .models import AddressReport, Block, NetworkSnapshot

ETHER_DECIMALS = 18


def format_units(value: int, decimals: int) -> str:
    """Exact fixed-point rendering of an integer amount, trailing zeros stripped.

    >>> format_units(1_500_000, 6)
    '1.5'
    """
    sign = "-" if value < 0 else ""
    whole, fraction = divmod(abs(value), 10**decimals)
    frac_str = str(fraction).rjust(decimals, "0").rstrip("0")
    if frac_str:
        return f"{sign}{whole}.{frac_str}"
    return f"{sign}{whole}"


def format_ether(wei: int) -> str:
    return format_units(wei, ETHER_DECIMALS)


def explorer_block_url(network: NetworkConfig, block_number: int) -> str:
    return f"{network.explorer_url}/block/{block_number}"


def explorer_address_url(network: NetworkConfig, address: str) -> str:
    return f"{network.explorer_url}/address/{address}"


def explorer_code_url(network: NetworkConfig, address: str) -> str:
    return f"{explorer_address_url(network, address)}#code"


def build_snapshot(block: Block, gas_price: int, network: NetworkConfig) -> NetworkSnapshot:
    return NetworkSnapshot(
        chain_id=network.chain_id,
        network=network.label,
        block_number=block.number,
        timestamp=block.timestamp,
        gas_used=block.gas_used,
        gas_limit=block.gas_limit,
        gas_price=gas_price,
        block_url=explorer_block_url(network, block.number),
    )


def build_address_report(
    address: str,
    balance: int,
    nonce: int,
    has_code: bool,
    network: NetworkConfig,
) -> AddressReport:
    return AddressReport(
        address=address,
        balance_wei=balance,
        balance_eth=format_ether(balance),
        nonce=nonce,
        is_contract=has_code,
        explorer_url=explorer_address_url(network, address),
    )
