"""Calldata normalisation and argument decoding."""

from .calldata import (
    calldata_tail,
    extract_selector,
    normalize_calldata,
    normalize_selector,
    split_raw_words,
)
from .decoder import convert_decoded_value, decode_arguments, signature_parameters
from .abi import ContractABI, abi_function_signature, load_abi

__all__ = [
    "ContractABI",
    "abi_function_signature",
    "calldata_tail",
    "convert_decoded_value",
    "decode_arguments",
    "extract_selector",
    "load_abi",
    "normalize_calldata",
    "normalize_selector",
    "signature_parameters",
    "split_raw_words",
]
