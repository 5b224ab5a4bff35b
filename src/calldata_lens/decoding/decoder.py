"""Decode calldata arguments against a textual function signature."""

import logging
from typing import Any, List, Optional

from web3 import Web3

from ..errors import DecodingError
from ..layout.models import Parameter
from ..signatures.text import parameter_name, parameter_type, split_parameters
from .calldata import calldata_tail

logger = logging.getLogger(__name__)

_w3 = Web3()


def convert_decoded_value(value: Any) -> Any:
    """
    Recursively convert codec output into display-friendly Python values.

    - bytes -> 0x hex strings
    - tuples (structs) and arrays -> lists, converted element-wise
    - ints, bools, str and checksummed addresses are kept
    """
    if isinstance(value, (bytes, bytearray)):
        return '0x' + bytes(value).hex()
    if isinstance(value, (list, tuple)):
        return [convert_decoded_value(item) for item in value]
    return value


def signature_parameters(signature: str) -> List[Parameter]:
    """Parameters of a signature with no values; unnamed ones become `param<index>`."""
    parameters = []
    for index, raw in enumerate(split_parameters(signature)):
        parameters.append(Parameter(
            name=parameter_name(raw) or f"param{index}",
            type=parameter_type(raw),
        ))
    return parameters


def decode_arguments(signature: str, calldata: str, w3: Optional[Web3] = None) -> List[Parameter]:
    """
    Decode the calldata tail with the types of `signature`.

    Args:
        signature: Text signature, e.g. "transfer(address to,uint256)"
        calldata: Full calldata including the selector
        w3: Web3 instance whose codec to use

    Returns:
        One Parameter per signature argument, in encoding order

    Raises:
        DecodingError: if the tail does not decode with these types
    """
    codec = (w3 or _w3).codec
    declared = signature_parameters(signature)
    types = [p.type for p in declared]

    try:
        tail = bytes.fromhex(calldata_tail(calldata))
        values = codec.decode(types, tail)
    except Exception as e:
        raise DecodingError(f"Failed to decode arguments for {signature}: {e}") from e

    decoded = [
        Parameter(name=p.name, type=p.type, value=convert_decoded_value(v))
        for p, v in zip(declared, values)
    ]
    logger.debug(f"Decoded {len(decoded)} argument(s) for {signature}")
    return decoded
