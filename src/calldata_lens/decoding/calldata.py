"""Calldata string handling: normalisation, selector and tail extraction."""

import re
from typing import List

from ..errors import InvalidCalldataError
from ..layout.types import HEAD_SLOT_WIDTH, SELECTOR_HEX_WIDTH


_HEX = re.compile(r"^[0-9a-f]*$")


def normalize_calldata(calldata: str) -> str:
    """
    Return calldata as lowercase `0x`-prefixed hex.

    Raises:
        InvalidCalldataError: if it is not even-length hex holding at least a selector
    """
    cleaned = "".join((calldata or "").split()).lower()
    if cleaned.startswith("0x"):
        cleaned = cleaned[2:]

    if not _HEX.match(cleaned):
        raise InvalidCalldataError("Calldata must contain only hexadecimal characters")
    if len(cleaned) % 2:
        raise InvalidCalldataError("Calldata must have an even number of hex characters")
    if len(cleaned) < 8:
        raise InvalidCalldataError("Calldata must contain at least a 4-byte function selector")

    return "0x" + cleaned


def normalize_selector(selector: str) -> str:
    """`a9059cbb...`, `0xA9059CBB` and full calldata all map to `0xa9059cbb`."""
    selector = selector.strip().lower()
    if selector.startswith("0x"):
        selector = selector[2:]
    return "0x" + selector[:8]


def extract_selector(calldata: str) -> str:
    return normalize_calldata(calldata)[:SELECTOR_HEX_WIDTH]


def calldata_tail(calldata: str) -> str:
    """Hex after the selector, without any prefix."""
    return normalize_calldata(calldata)[SELECTOR_HEX_WIDTH:]


def split_raw_words(tail_hex: str) -> List[str]:
    """Split a tail into 32-byte words; a trailing partial word is kept as-is."""
    return [tail_hex[i:i + HEAD_SLOT_WIDTH] for i in range(0, len(tail_hex), HEAD_SLOT_WIDTH)]
