"""Tests for Markdown and JSON output."""

import json

import pytest

from calldata_lens.reporting import format_decode_report, save_json_results
from calldata_lens.workflow import CalldataDecoder

from .helpers import TRANSFER_SELECTOR, FakeDirectory

TRANSFER = "transfer(address,uint256)"


@pytest.fixture
def result(transfer_calldata):
    directory = FakeDirectory({TRANSFER_SELECTOR: ["many_msg_babbage(bytes1)", TRANSFER]})
    return CalldataDecoder(directory).decode(transfer_calldata)


@pytest.mark.unit
def test_markdown_report(result):
    report = format_decode_report(result)

    assert report.startswith("## transfer")
    assert f"`{TRANSFER_SELECTOR}`" in report
    assert f"**→** `{TRANSFER}`" in report
    assert "- `many_msg_babbage(bytes1)`" in report
    assert "| 1 | `param1` | `uint256` | 100 |" in report
    assert "param0 (address) 32 bytes" in report
    assert "selector" in report


@pytest.mark.unit
def test_markdown_report_for_missing_signature(transfer_calldata):
    result = CalldataDecoder(FakeDirectory()).decode(transfer_calldata)

    report = format_decode_report(result)

    assert "## Unknown Function" in report
    assert "Function signature not found" in report
    assert "### Calldata Layout" not in report


@pytest.mark.unit
def test_markdown_report_shows_raw_words_on_decode_failure():
    directory = FakeDirectory({"0x12345678": ["f(uint256,uint256)"]})
    result = CalldataDecoder(directory).decode("0x12345678" + "ab" * 40)

    report = format_decode_report(result)

    assert "word 0" in report
    assert "word 1" in report


@pytest.mark.unit
def test_save_json_results(result, tmp_path):
    output = tmp_path / "out" / "result.json"

    save_json_results(result, output)

    data = json.loads(output.read_text())
    assert data["function_signature"] == TRANSFER
    assert data["selected_signature_index"] == 1
    assert [s["start"] for s in data["segments"]] == [0, 64]
    assert data["parameters"][1]["value"] == 100
