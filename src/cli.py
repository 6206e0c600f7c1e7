"""Command-line interface for the chain inspector."""
from __future__ import annotations

import argparse
import asyncio
import sys

from .config import load_config
from .logging_setup import configure_logging
from .services import Inspector


_WALLET_HELP = (
    "Wallet: the default \"rpc\" provider sends eth_requestAccounts to the network "
    "RPC node (or wallet.url). Public nodes such as https://sepolia.base.org do not "
    "hold accounts and refuse it, so the run command fails against them. For a "
    "read-only inspection set wallet.provider: static and wallet.address: "
    "${WALLET_ADDRESS} as in config.example.yaml."
)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="aether",
        description="Read-only Base Sepolia chain inspector",
        epilog=_WALLET_HELP,
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: config.yaml in project root, if present)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("run", help="Full inspection: wallet, network, probes (default)")
    sub.add_parser("snapshot", help="Network snapshot only")

    address_parser = sub.add_parser("address", help="Inspect a single address")
    address_parser.add_argument("address", help="Address to inspect")

    return parser


async def _run(args: argparse.Namespace) -> int:
    """Execute the selected command and return the exit code."""
    configure_logging(args.log_level)
    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        return 1
    inspector = Inspector(config)

    if args.command == "snapshot":
        return await inspector.run_snapshot()
    if args.command == "address":
        return await inspector.run_address(args.address)
    return await inspector.run()


def main(argv: list[str] | None = None) -> None:
    """Entry point."""
    args = build_parser().parse_args(argv)
    sys.exit(asyncio.run(_run(args)))
