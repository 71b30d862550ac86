"""
Tests for the JSON value codec
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import pytest

from seam_jsonrpc.rpc.errors import DecodeError, ErrorKind
from seam_jsonrpc.utils.serialization import decode, decode_as, encode


@dataclass
class BlockHeader:
    hash: str
    height: int
    previous: Optional[str] = None


class TestEncodeDecode:
    """Test JSON encoding and decoding"""

    def test_type_fidelity(self):
        """Integers, floats, booleans and null keep their type"""
        value = [1, 1.0, True, None, "1", {"k": [False, 0]}]
        decoded = decode(encode(value))
        assert decoded == value
        assert [type(v) for v in decoded] == [int, float, bool, type(None), str, dict]

    def test_compact_utf8(self):
        assert encode({"a": "é"}) == '{"a":"é"}'.encode("utf-8")

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), object(), {1, 2}])
    def test_unencodable(self, value):
        with pytest.raises(DecodeError) as excinfo:
            encode([value])
        assert excinfo.value.kind is ErrorKind.DECODE

    @pytest.mark.parametrize("data", [b"", b"{", b"Infinity", b"\x80abc"])
    def test_undecodable(self, data):
        with pytest.raises(DecodeError):
            decode(data)


class TestDecodeAs:
    """Test decoding JSON values into Python types"""

    def test_generic_containers(self):
        assert decode_as({"a": [1, 2]}, Dict[str, List[int]]) == {"a": [1, 2]}

    def test_dataclass(self):
        header = decode_as({"hash": "00ab", "height": 7}, BlockHeader)
        assert header == BlockHeader(hash="00ab", height=7)

    def test_mismatch(self):
        with pytest.raises(DecodeError, match="Cannot decode"):
            decode_as({"hash": "00ab"}, BlockHeader)

    def test_array_into_tuple(self):
        assert decode_as([1, "a"], Tuple[int, str]) == (1, "a")

    def test_integer_into_float(self):
        assert decode_as(2, float) == 2.0

    @pytest.mark.parametrize("value, into", [
        ("12", int),
        (True, int),
        (1.0, int),
        ("1.5", float),
        (0, bool),
        (12, str),
        ({"hash": "00ab", "height": "7"}, BlockHeader),
    ])
    def test_scalars_not_converted(self, value, into):
        """Values of another JSON type are rejected rather than converted"""
        with pytest.raises(DecodeError):
            decode_as(value, into)
