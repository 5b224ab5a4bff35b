"""JSON export of decode results."""

import json
import logging
from pathlib import Path

from ..workflow import DecodeResult

logger = logging.getLogger(__name__)


def save_json_results(result: DecodeResult, json_output: Path):
    """
    Save a decode result to a JSON file.

    Args:
        result: Decode result
        json_output: Path to JSON output file
    """
    logger.info(f"Saving JSON results to {json_output}")
    Path(json_output).parent.mkdir(parents=True, exist_ok=True)
    with open(json_output, 'w') as f:
        json.dump(result.model_dump(mode='json'), f, indent=2)
