"""Turn logical segments into printable calldata chunks."""

import json
from typing import Any, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from .models import Segment
from .types import SELECTOR_HEX_WIDTH


class CalldataChunk(BaseModel):
    """A slice of the calldata text, annotated by the segment that owns it (if any)."""
    model_config = ConfigDict(frozen=True)

    start: int
    end: int
    text: str
    role: str
    segment: Optional[Segment] = None


def segment_role(segment: Segment) -> str:
    """Classify a segment for colouring; the order of checks matters."""
    abi_type = segment.type
    if segment.is_offset:
        return "offset"
    if "address" in abi_type:
        return "address"
    if "uint" in abi_type or "int" in abi_type:
        return "integer"
    if "bool" in abi_type:
        return "bool"
    if segment.is_dynamic or "string" in abi_type or "bytes" in abi_type:
        return "dynamic"
    if "[" in abi_type:
        return "array"
    return "other"


def _json_default(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    return str(value)


def format_tooltip_value(value: Any) -> str:
    """Format a decoded value for display next to its segment."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    if isinstance(value, (dict, list, tuple)):
        try:
            return json.dumps(value, indent=2, default=_json_default)
        except (TypeError, ValueError):
            return str(value)
    return str(value)


def render_chunks(segments: Sequence[Segment], tail_hex: str, base: int = 0) -> List[CalldataChunk]:
    """
    Slice the tail into annotated and unannotated chunks.

    Each segment is intersected with [0, len(tail_hex)) and with whatever an
    earlier chunk has not already shown; uncovered hex becomes a `raw` chunk.
    The chunk texts concatenate back to `tail_hex`. `base` shifts the reported
    positions, e.g. past a selector.
    """
    chunks: List[CalldataChunk] = []
    tail_length = len(tail_hex)
    cursor = 0

    def emit(start: int, end: int, role: str, segment: Optional[Segment] = None):
        chunks.append(CalldataChunk(
            start=base + start,
            end=base + end,
            text=tail_hex[start:end],
            role=role,
            segment=segment,
        ))

    for segment in sorted(segments, key=lambda s: s.start):
        start = max(segment.start, cursor, 0)
        end = min(segment.end, tail_length)
        if start >= end:
            continue
        if start > cursor:
            emit(cursor, start, "raw")
        emit(start, end, segment_role(segment), segment)
        cursor = end

    if cursor < tail_length:
        emit(cursor, tail_length, "raw")

    return chunks


def render_calldata(calldata: str, segments: Sequence[Segment]) -> List[CalldataChunk]:
    """Chunks for a full `0x`-prefixed calldata string, selector first."""
    selector = calldata[:SELECTOR_HEX_WIDTH]
    chunks = [CalldataChunk(start=0, end=len(selector), text=selector, role="selector")]
    chunks.extend(render_chunks(segments, calldata[SELECTOR_HEX_WIDTH:], base=SELECTOR_HEX_WIDTH))
    return chunks
