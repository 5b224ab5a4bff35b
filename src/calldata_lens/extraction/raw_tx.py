"""
Pull calldata out of signed raw transactions.

Supports legacy (with or without EIP-155), EIP-2930 (type 1) and EIP-1559
(type 2) envelopes.
"""

import logging
from typing import Any, Dict, Optional

import rlp
from eth_utils import to_hex

logger = logging.getLogger(__name__)

# Positions of (chain_id, to, value, data) in each RLP field list; None = absent.
_FIELD_POSITIONS = {
    'legacy': (None, 3, 4, 5),
    'eip2930': (0, 4, 5, 6),
    'eip1559': (0, 5, 6, 7),
}
_TYPED_ENVELOPES = {0x01: 'eip2930', 0x02: 'eip1559'}


def _as_int(field: bytes) -> int:
    return int.from_bytes(field, byteorder='big') if field else 0


def _legacy_chain_id(fields: list) -> Optional[int]:
    v = _as_int(fields[6]) if len(fields) > 6 else 0
    return (v - 35) // 2 if v >= 37 else None


def parse_raw_transaction(raw_tx_hex: str) -> Optional[Dict[str, Any]]:
    """
    Parse a signed raw transaction.

    Args:
        raw_tx_hex: Raw transaction hex, with or without 0x prefix

    Returns:
        {'to', 'value', 'input', 'selector', 'chain_id', 'type'} or None if
        the transaction cannot be parsed
    """
    try:
        if raw_tx_hex.startswith('0x'):
            raw_tx_hex = raw_tx_hex[2:]
        tx_bytes = bytes.fromhex(raw_tx_hex)

        # EIP-2718: a first byte <= 0x7f marks a typed envelope
        if tx_bytes[0] <= 0x7f:
            tx_type = _TYPED_ENVELOPES.get(tx_bytes[0])
            if tx_type is None:
                logger.warning(f"Unknown transaction type: {tx_bytes[0]}")
                return None
            fields = rlp.decode(tx_bytes[1:])
        else:
            tx_type = 'legacy'
            fields = rlp.decode(tx_bytes)

        chain_pos, to_pos, value_pos, data_pos = _FIELD_POSITIONS[tx_type]
        input_data = to_hex(fields[data_pos]) if fields[data_pos] else '0x'

        result = {
            'to': to_hex(fields[to_pos]) if fields[to_pos] else None,
            'value': _as_int(fields[value_pos]),
            'input': input_data,
            'selector': input_data[:10],
            'chain_id': _as_int(fields[chain_pos]) if chain_pos is not None else _legacy_chain_id(fields),
            'type': tx_type,
        }
        logger.debug(f"Parsed {tx_type} TX: to={result['to']}, selector={result['selector']}")
        return result

    except Exception as e:
        logger.error(f"Failed to parse raw transaction: {e}")
        logger.debug(f"Raw TX: {raw_tx_hex[:100]}...")
        return None
