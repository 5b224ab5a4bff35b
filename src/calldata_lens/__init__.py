"""
calldata-lens: decode and annotate ABI-encoded calldata without an ABI.

The two cores are the layout analyzer (which bytes belong to which parameter)
and the signature resolver (which of several directory signatures is meant).
"""

from .config import Settings
from .errors import (
    AbiError,
    CalldataLensError,
    DecodingError,
    InvalidCalldataError,
    SignatureLookupError,
    TransactionFetchError,
)
from .layout import Parameter, Segment, compute_segments
from .signatures import (
    FourByteDirectory,
    SignatureCandidate,
    SignatureHistory,
    SignatureResolver,
    resolve_signature,
    score_signature,
)
from .workflow import CalldataDecoder, DecodeResult

__version__ = "0.1.0"

__all__ = [
    "AbiError",
    "CalldataDecoder",
    "CalldataLensError",
    "DecodeResult",
    "DecodingError",
    "FourByteDirectory",
    "InvalidCalldataError",
    "Parameter",
    "Segment",
    "Settings",
    "SignatureCandidate",
    "SignatureHistory",
    "SignatureLookupError",
    "SignatureResolver",
    "TransactionFetchError",
    "compute_segments",
    "resolve_signature",
    "score_signature",
]
