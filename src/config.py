"""Configuration loader — reads config.yaml, interpolates env vars, validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from .addresses import normalize_address
from .exceptions import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yaml"

# Lowercase so they validate without a checksum; normalized on load.
DEFAULT_PROBE_ADDRESSES: tuple[str, ...] = (
    "0x7ca1b2d3e4f5061728394abcdef0123456789abc",
    "0x19f0a3bc4de567890123456789abcdef01234567",
    "0xb4cd3ef0123456789abcdef019f0a3bc4de56789",
)

WALLET_PROVIDERS = ("rpc", "static")

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NetworkConfig:
    label: str = "Base Sepolia"
    chain_id: int = 84532
    rpc_url: str = "https://sepolia.base.org"
    explorer_url: str = "https://sepolia.basescan.org"
    native_symbol: str = "ETH"


@dataclass(frozen=True)
class WalletConfig:
    provider: str = "rpc"
    url: str = ""
    address: str = ""


@dataclass(frozen=True)
class ProbeConfig:
    addresses: tuple[str, ...] = DEFAULT_PROBE_ADDRESSES
    selector: str = "0x18160ddd"
    selector_label: str = "totalSupply()"


@dataclass(frozen=True)
class AppConfig:
    network: NetworkConfig = field(default_factory=NetworkConfig)
    wallet: WalletConfig = field(default_factory=WalletConfig)
    probes: ProbeConfig = field(default_factory=ProbeConfig)
    rpc_timeout: float | None = None


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# YAML → dataclass builders
# ---------------------------------------------------------------------------


def _build_network(raw: dict[str, Any]) -> NetworkConfig:
    defaults = NetworkConfig()
    return NetworkConfig(
        label=raw.get("label", defaults.label),
        chain_id=int(raw.get("chain_id", defaults.chain_id)),
        rpc_url=raw.get("rpc_url", defaults.rpc_url),
        explorer_url=str(raw.get("explorer_url", defaults.explorer_url)).rstrip("/"),
        native_symbol=raw.get("native_symbol", defaults.native_symbol),
    )


def _build_wallet(raw: dict[str, Any]) -> WalletConfig:
    return WalletConfig(
        provider=raw.get("provider", "rpc"),
        url=raw.get("url", "") or "",
        address=raw.get("address", "") or "",
    )


def _build_probes(raw: dict[str, Any]) -> ProbeConfig:
    defaults = ProbeConfig()
    addresses = tuple(normalize_address(a) for a in raw.get("addresses", defaults.addresses))
    return ProbeConfig(
        addresses=addresses,
        selector=str(raw.get("selector", defaults.selector)).lower(),
        selector_label=raw.get("selector_label", defaults.selector_label),
    )


def _build_timeout(raw: Any) -> float | None:
    if raw is None or raw == "":
        return None
    return float(raw)


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    return AppConfig(
        network=_build_network(raw.get("network") or {}),
        wallet=_build_wallet(raw.get("wallet") or {}),
        probes=_build_probes(raw.get("probes") or {}),
        rpc_timeout=_build_timeout(raw.get("rpc_timeout")),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration from YAML + .env.

    Args:
        config_path: Path to config.yaml. When omitted, ``config.yaml`` in
            the project root is used if present, otherwise the built-in
            Base Sepolia defaults apply.
    """
    load_dotenv()

    if config_path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            cfg = _build_app_config({})
            _validate(cfg)
            logger.debug("No config file found, using built-in defaults")
            return cfg
        config_path = DEFAULT_CONFIG_PATH
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    cfg = _build_app_config(raw)

    _validate(cfg)
    logger.info("Configuration loaded from %s", config_path)
    return cfg


def _validate(cfg: AppConfig) -> None:
    """Raise on invalid configuration."""
    if cfg.network.chain_id <= 0:
        raise ValidationError(f"Invalid chain id: {cfg.network.chain_id}")
    if not cfg.network.rpc_url:
        raise ValidationError("Network has no rpc_url")

    if cfg.wallet.provider not in WALLET_PROVIDERS:
        raise ValidationError(f"Unknown wallet provider '{cfg.wallet.provider}'")
    if cfg.wallet.provider == "static":
        if not cfg.wallet.address:
            raise ValidationError("Static wallet provider has no address")
        normalize_address(cfg.wallet.address)

    if not cfg.probes.addresses:
        raise ValidationError("At least one probe address must be configured")
    if not re.fullmatch(r"0x[0-9a-f]{8}", cfg.probes.selector):
        raise ValidationError(
            f"Selector must be exactly 4 bytes of hex: {cfg.probes.selector!r}"
        )

    if cfg.rpc_timeout is not None and cfg.rpc_timeout <= 0:
        raise ValidationError(f"rpc_timeout must be positive: {cfg.rpc_timeout}")
