"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from calldata_lens.signatures import SignatureHistory

from .helpers import RECIPIENT, TRANSFER_SELECTOR, word


@pytest.fixture
def transfer_calldata() -> str:
    """transfer(0x1111..., 100)"""
    return TRANSFER_SELECTOR + word(int(RECIPIENT, 16)) + word(100)


@pytest.fixture
def history(tmp_path: Path) -> SignatureHistory:
    return SignatureHistory(tmp_path / "history.json")
