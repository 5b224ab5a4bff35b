"""
Local record of which signature the user confirmed for each selector.

Stored as a small JSON object keyed by `0x`-prefixed selector:

    {"0xa9059cbb": {"hex_signature": "0xa9059cbb",
                    "selected_signature": "transfer(address,uint256)",
                    "last_used": 1700000000.0}}
"""

import json
import logging
import time
from pathlib import Path
from typing import Dict, List, Optional

from ..decoding.calldata import normalize_selector
from .models import SignatureSelection

logger = logging.getLogger(__name__)


class SignatureHistory:
    """JSON-file backed selector -> selected signature store."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _load(self) -> Dict[str, SignatureSelection]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read signature history {self.path}: {e}")
            return {}

        if not isinstance(raw, dict):
            logger.error(f"Signature history {self.path} must contain a JSON object")
            return {}

        records = {}
        for selector, record in raw.items():
            try:
                records[selector] = SignatureSelection.model_validate(record)
            except ValueError as e:
                logger.warning(f"Skipping invalid history entry for {selector}: {e}")
        return records

    def _store(self, records: Dict[str, SignatureSelection]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump({k: v.model_dump() for k, v in records.items()}, f, indent=2)

    def get_last_selected(self, selector: str) -> Optional[str]:
        """Signature previously confirmed for `selector`, if any."""
        record = self._load().get(normalize_selector(selector))
        return record.selected_signature if record else None

    def save_selection(self, selector: str, signature: str) -> SignatureSelection:
        selector = normalize_selector(selector)
        records = self._load()
        record = SignatureSelection(
            hex_signature=selector,
            selected_signature=signature,
            last_used=time.time(),
        )
        records[selector] = record
        self._store(records)
        logger.info(f"✓ Remembered {signature} for {selector}")
        return record

    def all_history(self, limit: int = 100) -> List[SignatureSelection]:
        """Most recently used selections first."""
        records = sorted(self._load().values(), key=lambda r: r.last_used, reverse=True)
        return records[:limit]
