"""Builders shared by the test modules."""

from typing import List, Optional

from calldata_lens.signatures import SignatureCandidate

TRANSFER_SELECTOR = "0xa9059cbb"
RECIPIENT = "0x" + "11" * 20


def word(value: int) -> str:
    """One 32-byte big-endian slot as 64 hex characters."""
    return format(value, "064x")


def padded(data: bytes) -> str:
    """Hex of `data` right-padded with zeros to a slot boundary."""
    text = data.hex()
    return text + "0" * (-len(text) % 64)


def candidate(text_signature: str, selector: str = TRANSFER_SELECTOR) -> SignatureCandidate:
    return SignatureCandidate(text_signature=text_signature, hex_signature=selector)


class FakeDirectory:
    """In-memory stand-in for the 4byte directory."""

    def __init__(self, signatures: Optional[dict] = None, error: Optional[Exception] = None):
        self.signatures = signatures or {}
        self.error = error
        self.calls: List[str] = []

    def lookup(self, selector: str) -> List[SignatureCandidate]:
        self.calls.append(selector)
        if self.error is not None:
            raise self.error
        return [candidate(text, selector) for text in self.signatures.get(selector, [])]


ERC20_ABI = [
    {
        "type": "event",
        "name": "Transfer",
        "inputs": [
            {"name": "from", "type": "address", "indexed": True},
            {"name": "to", "type": "address", "indexed": True},
            {"name": "value", "type": "uint256", "indexed": False},
        ],
    },
    {
        "type": "function",
        "name": "transfer",
        "stateMutability": "nonpayable",
        "inputs": [{"name": "to", "type": "address"}, {"name": "amount", "type": "uint256"}],
        "outputs": [{"name": "", "type": "bool"}],
    },
    {
        "type": "function",
        "name": "approve",
        "stateMutability": "nonpayable",
        "inputs": [{"name": "", "type": "address"}, {"name": "", "type": "uint256"}],
        "outputs": [{"name": "", "type": "bool"}],
    },
    {
        "type": "function",
        "name": "post",
        "stateMutability": "nonpayable",
        "inputs": [{"name": "to", "type": "address"}, {"name": "note", "type": "string"}],
        "outputs": [],
    },
]
