"""
4byte directory client.

Looks up the text signatures registered for a 4-byte selector. Successful
lookups are cached in-process for a few hours since the directory only ever
grows slowly.
"""

import logging
import time
from typing import Callable, Dict, Iterable, List, Optional, Tuple

import requests

from ..config import DEFAULT_FOURBYTE_API_URL, DEFAULT_REQUEST_TIMEOUT, DEFAULT_SIGNATURE_CACHE_TTL
from ..decoding.calldata import normalize_selector
from ..errors import SignatureLookupError
from .models import SignatureCandidate

logger = logging.getLogger(__name__)


class FourByteDirectory:
    """Selector -> candidate signatures, backed by 4byte.directory."""

    def __init__(
        self,
        base_url: str = DEFAULT_FOURBYTE_API_URL,
        cache_ttl: float = DEFAULT_SIGNATURE_CACHE_TTL,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            base_url: API root, e.g. https://www.4byte.directory/api/v1
            cache_ttl: Seconds a successful lookup stays cached
            timeout: HTTP timeout in seconds
            clock: Monotonic time source
        """
        self.base_url = base_url.rstrip("/")
        self.cache_ttl = cache_ttl
        self.timeout = timeout
        self.clock = clock
        self._cache: Dict[str, Tuple[float, List[SignatureCandidate]]] = {}

    def _cached(self, selector: str) -> Optional[List[SignatureCandidate]]:
        entry = self._cache.get(selector)
        if entry is None:
            return None
        stored_at, candidates = entry
        if self.clock() - stored_at > self.cache_ttl:
            del self._cache[selector]
            return None
        return candidates

    def _fetch(self, selector: str) -> List[SignatureCandidate]:
        url = f"{self.base_url}/signatures/"
        try:
            response = requests.get(url, params={"hex_signature": selector}, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise SignatureLookupError(
                f"Signature directory returned HTTP {status} for {selector}", selector, status
            ) from e
        except ValueError as e:
            raise SignatureLookupError(f"Invalid response from signature directory for {selector}: {e}", selector) from e
        except requests.RequestException as e:
            raise SignatureLookupError(f"Failed to reach signature directory: {e}", selector) from e

        results = data.get("results") or [] if isinstance(data, dict) else []
        candidates = []
        for result in results:
            try:
                candidates.append(SignatureCandidate.model_validate(result))
            except ValueError as e:
                logger.debug(f"Skipping malformed directory entry {result!r}: {e}")
        return candidates

    def lookup(self, selector: str) -> List[SignatureCandidate]:
        """
        Candidate signatures for a selector, in directory order.

        Raises:
            SignatureLookupError: if the directory cannot be queried
        """
        selector = normalize_selector(selector)
        cached = self._cached(selector)
        if cached is not None:
            logger.debug(f"Signature cache hit for {selector}")
            return list(cached)

        candidates = self._fetch(selector)
        self._cache[selector] = (self.clock(), candidates)
        logger.info(f"Found {len(candidates)} candidate signature(s) for {selector}")
        return list(candidates)

    def lookup_many(self, selectors: Iterable[str]) -> Dict[str, List[SignatureCandidate]]:
        """Look up several selectors; failed lookups map to an empty list."""
        results: Dict[str, List[SignatureCandidate]] = {}
        for selector in dict.fromkeys(normalize_selector(s) for s in selectors):
            try:
                results[selector] = self.lookup(selector)
            except SignatureLookupError as e:
                logger.warning(f"✗ Lookup failed for {selector}: {e}")
                results[selector] = []
        return results

    def clear_cache(self):
        self._cache.clear()
