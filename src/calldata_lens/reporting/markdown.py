"""Markdown rendering of a decode result."""

from typing import List

from ..layout.rendering import format_tooltip_value, render_calldata
from ..workflow import DecodeResult

ROLE_MARKERS = {
    'selector': '🟥',
    'offset': '🟨',
    'address': '🟦',
    'integer': '🟩',
    'bool': '🟪',
    'dynamic': '🟧',
    'array': '🟫',
    'other': '⬜',
    'raw': '  ',
}


def _escape(text: str) -> str:
    return text.replace('|', '\\|').replace('\n', '<br>')


def _candidates_section(result: DecodeResult) -> List[str]:
    if not result.possible_signatures:
        return []
    lines = ["### Candidate Signatures", ""]
    for index, candidate in enumerate(result.possible_signatures):
        marker = "**→**" if index == result.selected_signature_index else "-"
        lines.append(f"{marker} `{candidate}`")
    lines.append("")
    return lines


def _parameters_section(result: DecodeResult) -> List[str]:
    if not result.parameters:
        return []
    lines = [
        "### Parameters",
        "",
        "| # | Name | Type | Value |",
        "|---|------|------|-------|",
    ]
    for index, param in enumerate(result.parameters):
        value = _escape(format_tooltip_value(param.value))
        lines.append(f"| {index} | `{param.name}` | `{param.type}` | {value} |")
    lines.append("")
    return lines


def _layout_section(result: DecodeResult) -> List[str]:
    lines = ["### Calldata Layout", "", "```"]
    if result.raw_words:
        lines.append(f"{ROLE_MARKERS['selector']} {result.selector}  selector")
        for index, word in enumerate(result.raw_words):
            lines.append(f"{ROLE_MARKERS['raw']} {word}  word {index}")
    else:
        for chunk in render_calldata(result.calldata, result.segments):
            label = chunk.role
            if chunk.segment is not None:
                label = f"{chunk.segment.name} ({chunk.segment.type}) {chunk.segment.length // 2} bytes"
            lines.append(f"{ROLE_MARKERS.get(chunk.role, '  ')} [{chunk.start:>5}:{chunk.end:<5}] {chunk.text}  {label}")
    lines.extend(["```", ""])
    return lines


def format_decode_report(result: DecodeResult) -> str:
    lines = [
        f"## {result.function_name}",
        "",
        f"**Selector:** `{result.selector}`  ",
        f"**Signature:** `{result.function_signature or 'unknown'}`",
        "",
    ]
    if result.error:
        lines.extend([f"> ⚠️ {result.error}", ""])

    lines.extend(_candidates_section(result))
    lines.extend(_parameters_section(result))
    if result.function_signature:
        lines.extend(_layout_section(result))
    return "\n".join(lines)
