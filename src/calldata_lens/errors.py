"""Error types raised by the calldata-lens collaborators."""

from typing import Optional


class CalldataLensError(Exception):
    """Base class for every error raised by calldata-lens."""


class InvalidCalldataError(CalldataLensError, ValueError):
    """Calldata is not an even-length hex string carrying a 4-byte selector."""


class SignatureLookupError(CalldataLensError):
    """The signature directory could not be queried."""

    def __init__(self, message: str, selector: str = "", status_code: Optional[int] = None):
        super().__init__(message)
        self.selector = selector
        self.status_code = status_code


class DecodingError(CalldataLensError):
    """Arguments could not be decoded against the chosen signature."""


class TransactionFetchError(CalldataLensError):
    """A mined transaction could not be fetched from the RPC endpoint."""


class AbiError(CalldataLensError):
    """A contract ABI could not be loaded."""
