"""Layout analysis: which calldata bytes belong to which parameter."""

from .analyzer import compute_segments
from .models import Parameter, Segment
from .rendering import (
    CalldataChunk,
    format_tooltip_value,
    render_calldata,
    render_chunks,
    segment_role,
)
from .types import (
    DEFAULT_LAYOUT_RULES,
    HEAD_SLOT_WIDTH,
    SELECTOR_HEX_WIDTH,
    STATIC_TYPE_LENGTHS,
    LayoutRules,
    is_dynamic_type,
    static_length,
)

__all__ = [
    "CalldataChunk",
    "DEFAULT_LAYOUT_RULES",
    "HEAD_SLOT_WIDTH",
    "LayoutRules",
    "Parameter",
    "SELECTOR_HEX_WIDTH",
    "STATIC_TYPE_LENGTHS",
    "Segment",
    "compute_segments",
    "format_tooltip_value",
    "is_dynamic_type",
    "render_calldata",
    "render_chunks",
    "segment_role",
    "static_length",
]
