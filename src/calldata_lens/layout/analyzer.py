"""
Byte-range reconstruction for ABI-encoded calldata.

Given the decoded parameters of a function call and the hex tail of its
calldata (everything after the 4-byte selector), work out which hex characters
belong to which parameter. Static values sit in fixed 32-byte head slots;
dynamic values (`string`, `bytes`, `T[]`) leave an offset pointer in their head
slot and keep the payload further down the tail.

Offsets are hex-character positions into the tail, never byte positions.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from .models import Parameter, Segment
from .types import DEFAULT_LAYOUT_RULES, LayoutRules, is_dynamic_type, static_length

logger = logging.getLogger(__name__)


def _read_word(tail_hex: str, position: int, width: int) -> int:
    """
    Read one big-endian slot from the tail.

    Raises ValueError when the slot is not fully inside the tail or is not hex.
    """
    if position < 0 or position + width > len(tail_hex):
        raise ValueError(f"slot [{position}, {position + width}) outside tail of length {len(tail_hex)}")
    return int(tail_hex[position:position + width], 16)


def _static_segment(param: Parameter, position: int, rules: LayoutRules) -> Segment:
    return Segment(
        start=position,
        end=position + static_length(param.type, rules),
        type=param.type,
        name=param.name,
        value=param.value,
    )


def _payload_length(param: Parameter, tail_hex: str, payload_start: int, rules: LayoutRules) -> int:
    """
    Hex width of a dynamic payload.

    For `string`/`bytes` this is the length word plus the value padded to the
    next slot boundary. Arrays are not walked element by element and get a
    single slot.
    """
    width = rules.slot_width
    if param.type not in ("string", "bytes"):
        return width

    try:
        byte_length = _read_word(tail_hex, payload_start, width)
    except ValueError as e:
        logger.debug(f"Could not read length of {param.name} at {payload_start}: {e}")
        return width

    padded_slots = -(-byte_length * 2 // width)
    return width + padded_slots * width


def _dynamic_segments(
    param: Parameter,
    position: int,
    tail_hex: str,
    rules: LayoutRules,
) -> Tuple[Segment, Optional[Segment]]:
    """Build the pointer segment and, when the pointer is readable, the payload segment."""
    width = rules.slot_width
    try:
        offset_value = _read_word(tail_hex, position, width)
    except ValueError as e:
        logger.debug(f"Unreadable offset for {param.name} at {position}: {e}")
        return _static_segment(param, position, rules), None

    pointer = Segment(
        start=position,
        end=position + width,
        type=f"{param.type} offset",
        name=f"{param.name} offset",
        value=offset_value,
        is_offset=True,
        offset_value=offset_value,
    )

    # Offsets are counted from a point 4 bytes ahead of where this tail starts.
    payload_start = offset_value * 2 - rules.payload_adjustment
    payload = Segment(
        start=payload_start,
        end=payload_start + _payload_length(param, tail_hex, payload_start, rules),
        type=param.type,
        name=param.name,
        value=param.value,
        is_dynamic=True,
    )
    return pointer, payload


def _static_layout(parameters: Sequence[Parameter], rules: LayoutRules) -> List[Segment]:
    segments = []
    position = 0
    for param in parameters:
        segment = _static_segment(param, position, rules)
        segments.append(segment)
        position = segment.end
    return segments


def _mixed_layout(parameters: Sequence[Parameter], tail_hex: str, rules: LayoutRules) -> List[Segment]:
    head_segments = []
    payload_segments = []
    position = 0

    for param in parameters:
        if is_dynamic_type(param.type):
            pointer, payload = _dynamic_segments(param, position, tail_hex, rules)
            head_segments.append(pointer)
            if payload is not None:
                payload_segments.append(payload)
        else:
            head_segments.append(_static_segment(param, position, rules))

        # Every parameter owns exactly one head slot, value or pointer.
        position += rules.slot_width

    return sorted(head_segments + payload_segments, key=lambda segment: segment.start)


def compute_segments(
    parameters: Optional[Sequence[Parameter]],
    tail_hex: str,
    rules: LayoutRules = DEFAULT_LAYOUT_RULES,
) -> List[Segment]:
    """
    Compute the segments covered by each parameter in the calldata tail.

    Args:
        parameters: Decoded parameters in encoding order
        tail_hex: Calldata after the selector, hex digits only (no 0x)
        rules: Slot widths and static-length table

    Returns:
        Segments sorted by start offset. Ranges are logical and may run past
        the end of `tail_hex`; callers clip them before slicing text.
    """
    if not parameters:
        return []

    if not any(is_dynamic_type(param.type) for param in parameters):
        return _static_layout(parameters, rules)

    segments = _mixed_layout(parameters, tail_hex, rules)
    logger.debug(f"Computed {len(segments)} segments for {len(parameters)} parameters")
    return segments
