"""Calldata extraction from raw transactions."""

from .raw_tx import parse_raw_transaction

__all__ = ["parse_raw_transaction"]
