"""Signature lookup, history and disambiguation for 4-byte selectors."""

from .models import SignatureCandidate, SignatureResolution, SignatureSelection
from .text import (
    canonical_signature,
    function_name,
    parameter_name,
    parameter_type,
    split_parameters,
)
from .patterns import DEFAULT_PROTOCOL_PATTERNS, ProtocolPattern
from .resolver import SignatureResolver, resolve_signature, score_signature
from .directory import FourByteDirectory
from .history import SignatureHistory

__all__ = [
    "DEFAULT_PROTOCOL_PATTERNS",
    "FourByteDirectory",
    "ProtocolPattern",
    "SignatureCandidate",
    "SignatureHistory",
    "SignatureResolution",
    "SignatureResolver",
    "SignatureSelection",
    "canonical_signature",
    "function_name",
    "parameter_name",
    "parameter_type",
    "resolve_signature",
    "score_signature",
    "split_parameters",
]
