"""Tests for decoding against a contract ABI."""

import json

import pytest
from eth_utils import keccak

from calldata_lens.decoding import ContractABI, abi_function_signature, load_abi
from calldata_lens.errors import AbiError

from .helpers import ERC20_ABI, TRANSFER_SELECTOR


def selector_of(signature: str) -> str:
    return "0x" + keccak(text=signature).hex()[:8]


class TestFindFunction:

    @pytest.mark.unit
    def test_matches_selector_with_names(self):
        function = ContractABI(ERC20_ABI).find_function_by_selector(TRANSFER_SELECTOR)

        assert function["name"] == "transfer"
        assert function["param_names"] == ["to", "amount"]
        assert function["signature"] == "transfer(address,uint256)"
        assert function["named_signature"] == "transfer(address to,uint256 amount)"
        assert function["selector"] == TRANSFER_SELECTOR

    @pytest.mark.unit
    def test_accepts_full_calldata_and_uppercase(self):
        abi = ContractABI(ERC20_ABI)

        assert abi_function_signature(abi, "0X095EA7B3" + "00" * 64) == "approve(address,uint256)"

    @pytest.mark.unit
    def test_unknown_selector(self):
        abi = ContractABI(ERC20_ABI)

        assert abi.find_function_by_selector("0xdeadbeef") == {}
        assert abi_function_signature(abi, "0xdeadbeef") is None

    @pytest.mark.unit
    def test_events_are_not_functions(self):
        names = [f["name"] for f in ContractABI(ERC20_ABI).functions()]

        assert names == ["transfer", "approve", "post"]

    @pytest.mark.unit
    def test_tuple_inputs(self):
        abi = ContractABI([{
            "type": "function",
            "name": "fill",
            "inputs": [
                {"name": "orders", "type": "tuple[]", "components": [
                    {"name": "maker", "type": "address"},
                    {"name": "amount", "type": "uint256"},
                ]},
                {"name": "signature", "type": "bytes"},
            ],
        }])

        function = abi.find_function_by_selector(selector_of("fill((address,uint256)[],bytes)"))

        assert function["signature"] == "fill((address,uint256)[],bytes)"
        assert function["named_signature"] == "fill((address,uint256)[] orders,bytes signature)"


class TestLoadAbi:

    @pytest.mark.unit
    def test_load_list_file(self, tmp_path):
        path = tmp_path / "erc20.json"
        path.write_text(json.dumps(ERC20_ABI))

        assert load_abi(path).abi == ERC20_ABI

    @pytest.mark.unit
    def test_load_artifact_object(self, tmp_path):
        path = tmp_path / "Token.json"
        path.write_text(json.dumps({"contractName": "Token", "abi": ERC20_ABI}))

        assert load_abi(str(path)).abi == ERC20_ABI

    @pytest.mark.unit
    def test_load_parsed_json(self):
        assert load_abi(ERC20_ABI).abi == ERC20_ABI

    @pytest.mark.unit
    def test_missing_file(self, tmp_path):
        with pytest.raises(AbiError):
            load_abi(tmp_path / "missing.json")

    @pytest.mark.unit
    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{")

        with pytest.raises(AbiError):
            load_abi(path)

    @pytest.mark.unit
    def test_object_without_abi(self):
        with pytest.raises(AbiError):
            load_abi({"bytecode": "0x"})
