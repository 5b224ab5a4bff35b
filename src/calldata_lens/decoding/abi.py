"""
Contract ABI handling for decoding with a known interface.

Finds the ABI function whose selector matches the calldata and turns it into a
named text signature the argument decoder understands.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from eth_utils import keccak

from ..errors import AbiError
from .calldata import normalize_selector

logger = logging.getLogger(__name__)


class ContractABI:
    """
    Class to interact with contract ABI.
    Handles function selector calculation and ABI lookups.
    """

    def __init__(self, abi: list):
        """
        Initialize with an ABI.

        Args:
            abi: Contract ABI as a list of dictionaries
        """
        self.abi = abi

    @staticmethod
    def _function_signature_to_selector(signature: str) -> str:
        """
        Convert a function signature to a function selector.

        Args:
            signature: Function signature (e.g., "transfer(address,uint256)")

        Returns:
            Function selector as hex string (e.g., "0xa9059cbb")
        """
        return "0x" + keccak(text=signature).hex()[:8]

    def _param_abi_type_to_str(self, param: dict) -> str:
        """
        Recursively convert ABI input types into signature strings.

        Args:
            param: Parameter definition from ABI

        Returns:
            Type string for signature (e.g., "address", "(uint256,address)[]")
        """
        abi_type = param["type"]
        if abi_type.startswith("tuple"):
            inner = ",".join(
                self._param_abi_type_to_str(p) for p in param.get("components", [])
            )
            return f"({inner})" + abi_type[len("tuple"):]
        return abi_type

    def functions(self) -> List[dict]:
        return [item for item in self.abi if item.get("type", "function") == "function" and "name" in item]

    def find_function_by_selector(self, selector: str) -> dict:
        """
        Find function by selector in ABI.

        Args:
            selector: Function selector, or full calldata

        Returns:
            Dictionary with function metadata, empty when no function matches:
            - name: Function name
            - param_names: List of parameter names ("" when unnamed)
            - signature: Canonical signature used for the selector
            - named_signature: Signature carrying parameter names
            - selector: Function selector
        """
        selector = normalize_selector(selector)
        for item in self.functions():
            inputs = item.get("inputs", [])
            types = [self._param_abi_type_to_str(p) for p in inputs]
            signature = f"{item['name']}({','.join(types)})"

            if self._function_signature_to_selector(signature) != selector:
                continue

            names = [p.get("name") or "" for p in inputs]
            named = ",".join(f"{t} {n}" if n else t for t, n in zip(types, names))
            return {
                "name": item["name"],
                "param_names": names,
                "signature": signature,
                "named_signature": f"{item['name']}({named})",
                "selector": selector,
            }
        return {}


def load_abi(source: Union[str, Path, list, dict]) -> ContractABI:
    """
    Load an ABI from a JSON file path or from already parsed JSON.

    Accepts a bare ABI list or an artifact object with an "abi" key.

    Raises:
        AbiError: if the file cannot be read or holds no ABI list
    """
    data = source
    if isinstance(source, (str, Path)):
        try:
            with open(source, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise AbiError(f"Failed to load ABI from {source}: {e}") from e

    if isinstance(data, dict):
        data = data.get("abi")
    if not isinstance(data, list):
        raise AbiError("ABI must be a JSON list (or an object with an 'abi' list)")

    abi = ContractABI(data)
    logger.info(f"Loaded ABI with {len(abi.functions())} function(s)")
    return abi


def abi_function_signature(abi: ContractABI, selector: str) -> Optional[str]:
    """Named signature of the ABI function matching `selector`, if any."""
    return abi.find_function_by_selector(selector).get("named_signature")
