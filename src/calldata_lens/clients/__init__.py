"""Network clients used to obtain calldata."""

from .rpc import fetch_transaction_input

__all__ = ["fetch_transaction_input"]
