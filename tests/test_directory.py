"""Tests for the 4byte directory client."""

from unittest.mock import Mock, patch

import pytest
import requests

from calldata_lens.errors import SignatureLookupError
from calldata_lens.signatures import FourByteDirectory

DIRECTORY_PAYLOAD = {
    "count": 2,
    "next": None,
    "previous": None,
    "results": [
        {
            "id": 145,
            "created_at": "2016-07-09T03:58:28.234977Z",
            "text_signature": "transfer(address,uint256)",
            "hex_signature": "0xa9059cbb",
            "bytes_signature": "©\u0005\u009c»",
        },
        {
            "id": 31780,
            "created_at": "2018-05-12T01:12:14.218917Z",
            "text_signature": "many_msg_babbage(bytes1)",
            "hex_signature": "0xa9059cbb",
            "bytes_signature": "©\u0005\u009c»",
        },
    ],
}


def ok_response(payload):
    response = Mock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def directory(clock):
    return FourByteDirectory(base_url="https://dir.test/api/v1/", cache_ttl=60, timeout=3, clock=clock)


@pytest.mark.unit
def test_lookup_maps_results(directory):
    with patch("calldata_lens.signatures.directory.requests.get", return_value=ok_response(DIRECTORY_PAYLOAD)) as get:
        candidates = directory.lookup("A9059CBB000000")

    get.assert_called_once_with(
        "https://dir.test/api/v1/signatures/", params={"hex_signature": "0xa9059cbb"}, timeout=3
    )
    assert [c.text_signature for c in candidates] == ["transfer(address,uint256)", "many_msg_babbage(bytes1)"]
    assert candidates[0].id == 145
    assert candidates[0].hex_signature == "0xa9059cbb"


@pytest.mark.unit
def test_lookup_is_cached_until_ttl_expires(directory, clock):
    with patch("calldata_lens.signatures.directory.requests.get", return_value=ok_response(DIRECTORY_PAYLOAD)) as get:
        directory.lookup("0xa9059cbb")
        clock.now += 59
        directory.lookup("0xa9059cbb")
        assert get.call_count == 1

        clock.now += 2
        directory.lookup("0xa9059cbb")
        assert get.call_count == 2


@pytest.mark.unit
def test_clear_cache_forces_a_new_request(directory):
    with patch("calldata_lens.signatures.directory.requests.get", return_value=ok_response(DIRECTORY_PAYLOAD)) as get:
        directory.lookup("0xa9059cbb")
        directory.clear_cache()
        directory.lookup("0xa9059cbb")

    assert get.call_count == 2


@pytest.mark.unit
def test_empty_results(directory):
    with patch("calldata_lens.signatures.directory.requests.get", return_value=ok_response({"results": []})):
        assert directory.lookup("0xdeadbeef") == []


@pytest.mark.unit
def test_network_error_raises_lookup_error(directory):
    with patch("calldata_lens.signatures.directory.requests.get", side_effect=requests.ConnectionError("down")):
        with pytest.raises(SignatureLookupError) as exc_info:
            directory.lookup("0xa9059cbb")
    assert exc_info.value.selector == "0xa9059cbb"


@pytest.mark.unit
def test_http_error_carries_status(directory):
    response = Mock()
    response.status_code = 502
    response.raise_for_status.side_effect = requests.HTTPError("bad gateway", response=response)

    with patch("calldata_lens.signatures.directory.requests.get", return_value=response):
        with pytest.raises(SignatureLookupError) as exc_info:
            directory.lookup("0xa9059cbb")
    assert exc_info.value.status_code == 502


@pytest.mark.unit
def test_invalid_json_raises_lookup_error(directory):
    response = Mock()
    response.raise_for_status.return_value = None
    response.json.side_effect = ValueError("not json")

    with patch("calldata_lens.signatures.directory.requests.get", return_value=response):
        with pytest.raises(SignatureLookupError):
            directory.lookup("0xa9059cbb")


@pytest.mark.unit
def test_failures_are_not_cached(directory):
    with patch("calldata_lens.signatures.directory.requests.get", side_effect=requests.Timeout("slow")):
        with pytest.raises(SignatureLookupError):
            directory.lookup("0xa9059cbb")

    with patch("calldata_lens.signatures.directory.requests.get", return_value=ok_response(DIRECTORY_PAYLOAD)):
        assert len(directory.lookup("0xa9059cbb")) == 2


@pytest.mark.unit
def test_lookup_many_deduplicates_and_tolerates_failures(directory):
    def fake_get(url, params, timeout):
        if params["hex_signature"] == "0xdeadbeef":
            raise requests.ConnectionError("down")
        return ok_response(DIRECTORY_PAYLOAD)

    with patch("calldata_lens.signatures.directory.requests.get", side_effect=fake_get) as get:
        results = directory.lookup_many(["0xa9059cbb", "a9059cbb", "0xdeadbeef"])

    assert get.call_count == 2
    assert len(results["0xa9059cbb"]) == 2
    assert results["0xdeadbeef"] == []
