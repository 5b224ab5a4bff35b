"""Tests for the signature plausibility heuristic."""

import pytest

from calldata_lens.signatures import DEFAULT_PROTOCOL_PATTERNS, SignatureResolver, score_signature

from .helpers import TRANSFER_SELECTOR, word


@pytest.mark.unit
def test_erc20_transfer_without_calldata():
    # +10 protocol, -1.0 for two parameters, +0.2 for uint256
    assert score_signature("transfer(address,uint256)", "") == pytest.approx(9.2)


@pytest.mark.unit
def test_empty_parameter_list_has_no_penalty():
    assert score_signature("foo()", TRANSFER_SELECTOR) == pytest.approx(0)


@pytest.mark.unit
def test_protocol_match_ignores_parameter_names():
    # 10 - 1.0 + 2 * 0.5 named + 0.2 specific
    assert score_signature("transfer(address to,uint256 amount)", "") == pytest.approx(10.2)


@pytest.mark.unit
def test_exact_length_match_bonus(transfer_calldata):
    assert score_signature("transfer(address,uint256)", transfer_calldata) == pytest.approx(12.2)


@pytest.mark.unit
def test_near_length_match_bonus():
    # 128 estimated vs 96 actual is exactly 25% off: only the smaller bonus
    calldata = "0x12345678" + "0" * 96
    assert score_signature("f(uint256,uint256)", calldata) == pytest.approx(-1.0 + 1 + 0.4)


@pytest.mark.unit
def test_far_length_gets_no_bonus():
    calldata = "0x12345678" + "0" * 192
    assert score_signature("f(uint256,uint256)", calldata) == pytest.approx(-1.0 + 0.4)


@pytest.mark.unit
def test_dynamic_parameters_count_one_slot():
    calldata = "0x12345678" + word(0x20) + word(3) + "ab" * 32
    # one parameter estimated at 64 vs 192 actual: no length bonus
    assert score_signature("f(string)", calldata) == pytest.approx(-0.5)


@pytest.mark.unit
def test_specific_type_bonus():
    assert score_signature("f(uint,bytes)", "") == pytest.approx(-1.0)
    assert score_signature("f(uint8,bytes4,int16)", "") == pytest.approx(-1.5 + 0.6)


@pytest.mark.unit
def test_first_matching_pattern_wins():
    # transferFrom matches both the ERC-20 (10) and ERC-721 (9) entries
    assert score_signature("transferFrom(address,address,uint256)", "") == pytest.approx(10 - 1.5 + 0.2)

    reordered = SignatureResolver(patterns=tuple(reversed(DEFAULT_PROTOCOL_PATTERNS)))
    assert reordered.score("transferFrom(address,address,uint256)", "") == pytest.approx(9 - 1.5 + 0.2)


@pytest.mark.unit
def test_erc1155_batch_transfer():
    signature = "safeBatchTransferFrom(address,address,uint256[],uint256[],bytes)"
    assert SignatureResolver().protocol_bonus(signature) == 9


@pytest.mark.unit
def test_custom_patterns_can_be_empty():
    resolver = SignatureResolver(patterns=())
    assert resolver.protocol_bonus("transfer(address,uint256)") == 0
