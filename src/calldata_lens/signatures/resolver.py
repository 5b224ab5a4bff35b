"""
Pick the most plausible text signature for an ambiguous selector.

A 4-byte selector often maps to several signatures in public directories.
Candidates are ranked by a cheap heuristic over the signature text and the
calldata length; a signature the user confirmed earlier for the same selector
always wins.
"""

import logging
import re
from typing import Optional, Sequence, Tuple

from ..layout.types import HEAD_SLOT_WIDTH, SELECTOR_HEX_WIDTH
from .models import SignatureCandidate, SignatureResolution
from .patterns import DEFAULT_PROTOCOL_PATTERNS, ProtocolPattern
from .text import canonical_signature

logger = logging.getLogger(__name__)


COMPLEXITY_PENALTY = 0.5
NAMED_PARAMETER_BONUS = 0.5
SPECIFIC_TYPE_BONUS = 0.2
CLOSE_LENGTH_BONUS = 3
NEAR_LENGTH_BONUS = 1

_SPECIFIC_TYPE = re.compile(r"uint\d+|int\d+|bytes\d+")


def _raw_parameters(signature: str) -> list:
    if "(" not in signature:
        return []
    block = signature[signature.find("(") + 1:signature.rfind(")")]
    if not block.strip():
        return []
    return [p.strip() for p in block.split(",")]


def _length_bonus(parameter_count: int, calldata: str) -> float:
    """Reward signatures whose head size is close to the actual tail size."""
    if not calldata or len(calldata) <= SELECTOR_HEX_WIDTH:
        return 0
    actual = len(calldata) - SELECTOR_HEX_WIDTH
    # Dynamic parameters only count their offset slot here.
    estimated = parameter_count * HEAD_SLOT_WIDTH
    ratio = abs(estimated - actual) / estimated if estimated > 0 else 1

    if ratio < 0.25:
        return CLOSE_LENGTH_BONUS
    if ratio < 0.5:
        return NEAR_LENGTH_BONUS
    return 0


class SignatureResolver:
    """Scores candidate signatures; `patterns` is scanned first-match-wins."""

    def __init__(self, patterns: Sequence[ProtocolPattern] = DEFAULT_PROTOCOL_PATTERNS):
        self.patterns: Tuple[ProtocolPattern, ...] = tuple(patterns)

    def protocol_bonus(self, signature: str) -> float:
        canonical = canonical_signature(signature)
        for protocol in self.patterns:
            if protocol.matches(canonical):
                return protocol.score
        return 0

    def score(self, signature: str, calldata: str) -> float:
        """
        Plausibility of `signature` for `calldata`; only meaningful relative to
        other candidates scored in the same call.
        """
        params = _raw_parameters(signature)
        score = self.protocol_bonus(signature)
        score -= COMPLEXITY_PENALTY * len(params)
        score += _length_bonus(len(params), calldata)
        score += NAMED_PARAMETER_BONUS * sum(1 for p in params if " " in p)
        for param in params:
            if _SPECIFIC_TYPE.search(param.split(" ")[0]):
                score += SPECIFIC_TYPE_BONUS
        return score

    def resolve(
        self,
        candidates: Sequence[SignatureCandidate],
        selector: str,
        calldata: str,
        prior_selection: Optional[str] = None,
    ) -> SignatureResolution:
        """
        Choose one candidate.

        Args:
            candidates: Directory results for the selector, non-empty
            selector: 0x-prefixed 4-byte selector
            calldata: Full 0x-prefixed calldata
            prior_selection: Text signature previously confirmed for the selector

        Returns:
            The chosen signature and its index in `candidates`
        """
        if not candidates:
            raise ValueError(f"No candidate signatures to resolve for {selector}")

        if len(candidates) == 1:
            return SignatureResolution(best_signature=candidates[0].text_signature, index=0, reason="single")

        if prior_selection:
            for index, candidate in enumerate(candidates):
                if candidate.text_signature == prior_selection:
                    logger.info(f"Using previously selected signature for {selector}: {prior_selection}")
                    return SignatureResolution(best_signature=prior_selection, index=index, reason="history")
            logger.debug(f"Previous selection {prior_selection} for {selector} is no longer a candidate")

        best_index = 0
        best_score = float("-inf")
        for index, candidate in enumerate(candidates):
            score = self.score(candidate.text_signature, calldata)
            logger.debug(f"Score {score:.2f} for {candidate.text_signature}")
            if score > best_score:
                best_index, best_score = index, score

        best = candidates[best_index].text_signature
        logger.info(f"Best match for {selector} among {len(candidates)} candidates: {best} (score {best_score:.2f})")
        return SignatureResolution(best_signature=best, index=best_index, score=best_score, reason="score")


_default_resolver = SignatureResolver()


def score_signature(signature: str, calldata: str) -> float:
    return _default_resolver.score(signature, calldata)


def resolve_signature(
    candidates: Sequence[SignatureCandidate],
    selector: str,
    calldata: str,
    prior_selection: Optional[str] = None,
) -> SignatureResolution:
    return _default_resolver.resolve(candidates, selector, calldata, prior_selection)
