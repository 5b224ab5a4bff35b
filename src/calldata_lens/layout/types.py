"""ABI type classification and the fixed head-slot rules of the encoding."""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

SELECTOR_HEX_WIDTH = 10  # "0x" + 4 bytes
HEAD_SLOT_WIDTH = 64  # 32 bytes
PAYLOAD_ADJUSTMENT = 8  # 4 bytes

_STATIC_TYPES = (
    ["address", "bool"]
    + [f"uint{bits}" for bits in (256, 128, 64, 32, 16, 8)]
    + [f"int{bits}" for bits in (256, 128, 64, 32, 16, 8)]
    + [f"bytes{size}" for size in (32, 16, 8, 4, 2, 1)]
)

STATIC_TYPE_LENGTHS: Mapping[str, int] = MappingProxyType(
    {abi_type: HEAD_SLOT_WIDTH for abi_type in _STATIC_TYPES}
)

_ARRAY_SUFFIX = re.compile(r"\[\d*\]$")


@dataclass(frozen=True)
class LayoutRules:
    """Immutable configuration of the layout analyzer."""
    static_lengths: Mapping[str, int] = field(default_factory=lambda: STATIC_TYPE_LENGTHS)
    slot_width: int = HEAD_SLOT_WIDTH
    payload_adjustment: int = PAYLOAD_ADJUSTMENT


DEFAULT_LAYOUT_RULES = LayoutRules()


def is_dynamic_type(abi_type: str) -> bool:
    """
    Whether a type is encoded out of line behind an offset pointer.

    Only `string`, `bytes` and variable-length arrays count. Fixed-size arrays
    such as `string[3]` are treated as static even when their element type is
    dynamic.
    """
    if abi_type in ("string", "bytes"):
        return True
    return abi_type.endswith("[]")


def base_type(abi_type: str) -> str:
    """Strip one trailing array suffix, e.g. `uint256[3]` -> `uint256`."""
    return _ARRAY_SUFFIX.sub("", abi_type)


def static_length(abi_type: str, rules: LayoutRules = DEFAULT_LAYOUT_RULES) -> int:
    """Hex width of a static value; unknown types take one head slot."""
    return rules.static_lengths.get(base_type(abi_type), rules.slot_width)
