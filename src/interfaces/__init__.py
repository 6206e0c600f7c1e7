"""Protocol interfaces for the chain inspector."""
from .chain import ChainReader
from .wallet import WalletProvider

__all__ = ["ChainReader", "WalletProvider"]
