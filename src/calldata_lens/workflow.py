"""
End-to-end calldata decoding.

1. Look up candidate signatures for the selector
2. Read the user's previous choice for that selector
3. Resolve one signature
4. Decode the arguments against it
5. Compute the byte layout of the arguments

With a contract ABI at hand, steps 1-3 are replaced by picking the ABI
function whose selector matches.
"""

import logging
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .decoding.abi import ContractABI, abi_function_signature
from .decoding.calldata import normalize_calldata, split_raw_words
from .decoding.decoder import decode_arguments
from .errors import DecodingError, SignatureLookupError
from .layout.analyzer import compute_segments
from .layout.models import Parameter, Segment
from .layout.types import DEFAULT_LAYOUT_RULES, SELECTOR_HEX_WIDTH, LayoutRules
from .signatures.history import SignatureHistory
from .signatures.resolver import SignatureResolver
from .signatures.text import function_name

logger = logging.getLogger(__name__)

UNKNOWN_FUNCTION = "Unknown Function"
SIGNATURE_NOT_FOUND = "Function signature not found in 4byte directory"
FUNCTION_NOT_IN_ABI = "Function selector not found in the provided ABI"


class DecodeResult(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    calldata: str
    selector: str
    function_name: str = UNKNOWN_FUNCTION
    function_signature: Optional[str] = None
    parameters: List[Parameter] = Field(default_factory=list)
    possible_signatures: List[str] = Field(default_factory=list)
    selected_signature_index: Optional[int] = None
    resolution_reason: Optional[str] = None
    segments: List[Segment] = Field(default_factory=list)
    raw_words: List[str] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def tail(self) -> str:
        return self.calldata[SELECTOR_HEX_WIDTH:]

    @property
    def ok(self) -> bool:
        return self.error is None


class CalldataDecoder:
    """Decodes calldata without an ABI, using a signature directory."""

    def __init__(
        self,
        directory: Any,
        history: Optional[SignatureHistory] = None,
        resolver: Optional[SignatureResolver] = None,
        layout_rules: LayoutRules = DEFAULT_LAYOUT_RULES,
    ):
        """
        Args:
            directory: Object with `lookup(selector) -> List[SignatureCandidate]`
            history: Store of previously confirmed signatures (optional)
            resolver: Candidate ranking (defaults to the built-in heuristics)
            layout_rules: Slot rules for the layout analyzer
        """
        self.directory = directory
        self.history = history
        self.resolver = resolver or SignatureResolver()
        self.layout_rules = layout_rules

    def _prior_selection(self, selector: str) -> Optional[str]:
        if self.history is None:
            return None
        return self.history.get_last_selected(selector)

    def confirm_selection(self, selector: str, signature: str):
        """Remember `signature` as the user's choice for `selector`."""
        if self.history is None:
            logger.warning("No signature history configured, selection not saved")
            return None
        try:
            return self.history.save_selection(selector, signature)
        except OSError as e:
            logger.warning(f"✗ Could not save signature history {self.history.path}: {e}")
            return None

    def decode(self, calldata: str, signature: Optional[str] = None) -> DecodeResult:
        """
        Decode calldata.

        Args:
            calldata: Hex calldata, with or without 0x prefix
            signature: Use this signature instead of resolving one; it is also
                remembered for the selector

        Returns:
            DecodeResult; problems after input validation are reported in
            `error` rather than raised

        Raises:
            InvalidCalldataError: if `calldata` is not valid hex with a selector
        """
        calldata = normalize_calldata(calldata)
        selector = calldata[:SELECTOR_HEX_WIDTH]
        result = DecodeResult(calldata=calldata, selector=selector)

        try:
            candidates = self.directory.lookup(selector)
        except SignatureLookupError as e:
            logger.error(f"Signature lookup failed for {selector}: {e}")
            if signature is None:
                result.error = str(e)
                return result
            candidates = []

        result.possible_signatures = [c.text_signature for c in candidates]

        if signature is not None:
            result.function_signature = signature
            if signature in result.possible_signatures:
                result.selected_signature_index = result.possible_signatures.index(signature)
            result.resolution_reason = "explicit"
            self.confirm_selection(selector, signature)
        elif not candidates:
            logger.warning(f"No signatures found for {selector}")
            result.error = SIGNATURE_NOT_FOUND
            return result
        else:
            resolution = self.resolver.resolve(
                candidates, selector, calldata, self._prior_selection(selector)
            )
            result.function_signature = resolution.best_signature
            result.selected_signature_index = resolution.index
            result.resolution_reason = resolution.reason

        return self._decode_arguments(result)

    def decode_with_abi(self, calldata: str, abi: ContractABI) -> DecodeResult:
        """
        Decode calldata against a known contract ABI instead of the directory.

        The ABI function whose selector matches is used, with its parameter
        names. Nothing is looked up or remembered.

        Raises:
            InvalidCalldataError: if `calldata` is not valid hex with a selector
        """
        calldata = normalize_calldata(calldata)
        selector = calldata[:SELECTOR_HEX_WIDTH]
        result = DecodeResult(calldata=calldata, selector=selector)

        signature = abi_function_signature(abi, selector)
        if signature is None:
            logger.warning(f"No ABI function matches {selector}")
            result.error = FUNCTION_NOT_IN_ABI
            return result

        result.function_signature = signature
        result.resolution_reason = "abi"
        return self._decode_arguments(result)

    def _decode_arguments(self, result: DecodeResult) -> DecodeResult:
        result.function_name = function_name(result.function_signature)

        try:
            result.parameters = decode_arguments(result.function_signature, result.calldata)
        except DecodingError as e:
            logger.warning(f"Decoding with {result.function_signature} failed, showing raw words: {e}")
            result.error = str(e)
            result.raw_words = split_raw_words(result.tail)
            return result

        result.segments = compute_segments(result.parameters, result.tail, self.layout_rules)
        return result
