"""
Configuration for calldata-lens.

Values come from the environment (a .env file is honoured by the CLI through
python-dotenv). Command-line arguments override these, which override defaults.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

DEFAULT_FOURBYTE_API_URL = "https://www.4byte.directory/api/v1"
DEFAULT_SIGNATURE_CACHE_TTL = 6 * 60 * 60
DEFAULT_REQUEST_TIMEOUT = 10.0
DEFAULT_HISTORY_FILE = Path.home() / ".calldata_lens" / "signature_history.json"


def _env_number(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using default {default}")
        return default


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    fourbyte_api_url: str = DEFAULT_FOURBYTE_API_URL
    signature_cache_ttl: float = DEFAULT_SIGNATURE_CACHE_TTL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    history_file: Path = DEFAULT_HISTORY_FILE
    rpc_url: Optional[str] = None
    abi_file: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables, falling back to defaults."""
        history_file = os.getenv("SIGNATURE_HISTORY_FILE")
        abi_file = os.getenv("ABI_FILE")
        return cls(
            fourbyte_api_url=(os.getenv("FOURBYTE_API_URL") or DEFAULT_FOURBYTE_API_URL).rstrip("/"),
            signature_cache_ttl=_env_number("SIGNATURE_CACHE_TTL", DEFAULT_SIGNATURE_CACHE_TTL),
            request_timeout=_env_number("REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT),
            history_file=Path(history_file).expanduser() if history_file else DEFAULT_HISTORY_FILE,
            rpc_url=os.getenv("RPC_URL") or None,
            abi_file=Path(abi_file).expanduser() if abi_file else None,
        )
