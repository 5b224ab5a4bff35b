"""Helpers for textual function signatures such as `transfer(address to,uint256)`."""

import re
from typing import List, Optional

_DATA_LOCATIONS = {"calldata", "memory", "storage", "payable", "indexed"}
_TYPE_TOKEN = re.compile(r"^(\(.*\)(?:\[\d*\])*|[^\s]+)\s*(.*)$", re.DOTALL)


def function_name(signature: str) -> str:
    return signature.split("(", 1)[0].strip()


def _parameter_block(signature: str) -> str:
    start = signature.find("(")
    end = signature.rfind(")")
    if start < 0 or end <= start:
        return ""
    return signature[start + 1:end]


def split_parameters(signature: str) -> List[str]:
    """
    Split the parameter list on top-level commas.

    Commas inside tuple types are kept, e.g. `f((address,uint256),bool)` gives
    `["(address,uint256)", "bool"]`.
    """
    block = _parameter_block(signature)
    if not block.strip():
        return []

    parts = []
    depth = 0
    current = []
    for char in block:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        if char == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    parts.append("".join(current).strip())
    return parts


def parameter_type(parameter: str) -> str:
    """Type part of one parameter, with any names stripped from tuple components."""
    parameter = parameter.strip()
    match = _TYPE_TOKEN.match(parameter)
    if not match:
        return parameter
    abi_type = match.group(1)
    if abi_type.startswith("("):
        closing = abi_type.rfind(")")
        inner = ",".join(parameter_type(p) for p in split_parameters(abi_type[:closing + 1]))
        return f"({inner}){abi_type[closing + 1:]}"
    return abi_type


def parameter_name(parameter: str) -> Optional[str]:
    """Declared name of one parameter, or None when it is a bare type."""
    match = _TYPE_TOKEN.match(parameter.strip())
    if not match:
        return None
    tokens = [t for t in match.group(2).split() if t not in _DATA_LOCATIONS]
    return tokens[-1] if tokens else None


def canonical_signature(signature: str) -> str:
    """`name(type,...)` with parameter names, data locations and whitespace removed."""
    types = ",".join(parameter_type(p) for p in split_parameters(signature))
    return f"{function_name(signature)}({types})"
