"""Well-known protocol signatures that make a candidate more plausible."""

import re
from dataclasses import dataclass, field
from typing import Pattern, Tuple


@dataclass(frozen=True)
class ProtocolPattern:
    pattern: Pattern[str]
    score: float
    label: str = field(default="")

    def matches(self, canonical: str) -> bool:
        return self.pattern.search(canonical) is not None


def _pattern(expression: str, score: float, label: str) -> ProtocolPattern:
    return ProtocolPattern(re.compile(expression), score, label)


# Scanned in order; the first match wins, so order is part of the behaviour.
DEFAULT_PROTOCOL_PATTERNS: Tuple[ProtocolPattern, ...] = (
    # ERC-20
    _pattern(r"transfer\(address,uint256\)", 10, "ERC-20 transfer"),
    _pattern(r"transferFrom\(address,address,uint256\)", 10, "ERC-20 transferFrom"),
    _pattern(r"approve\(address,uint256\)", 10, "ERC-20 approve"),
    _pattern(r"balanceOf\(address\)", 10, "ERC-20 balanceOf"),
    # ERC-721
    _pattern(r"safeTransferFrom\(address,address,uint256\)", 9, "ERC-721 safeTransferFrom"),
    _pattern(r"transferFrom\(address,address,uint256\)", 9, "ERC-721 transferFrom"),
    _pattern(r"ownerOf\(uint256\)", 9, "ERC-721 ownerOf"),
    # AMM routers
    _pattern(r"swapExactTokensForTokens", 8, "AMM swapExactTokensForTokens"),
    _pattern(r"swapTokensForExactTokens", 8, "AMM swapTokensForExactTokens"),
    _pattern(r"addLiquidity", 8, "AMM addLiquidity"),
    # ERC-1155
    _pattern(r"safeTransferFrom\(address,address,uint256,uint256,bytes\)", 9, "ERC-1155 safeTransferFrom"),
    _pattern(r"safeBatchTransferFrom\(address,address,uint256\[\],uint256\[\],bytes\)", 9,
             "ERC-1155 safeBatchTransferFrom"),
)
