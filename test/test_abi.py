#!/usr/bin/env python3
"""Tests for the generic ABI tuple codec and byte helpers."""

import pytest
from hexbytes import HexBytes

from ens_resolver.exceptions import DecodeError, EnsResolutionError, UnsupportedChainError
from ens_resolver.utils.abi import decode_tuple, encode_tuple
from ens_resolver.utils.encoding import to_bytes_safe, to_hex_lower


class TestDecodeTuple:
    """Tests for decode_tuple()."""

    def test_static_and_dynamic_fields(self):
        """Test decoding a mixed static/dynamic tuple."""
        data = encode_tuple(["uint256", "string[]", "bytes4"], [7, ["a", "bc"], b"\x01\x02\x03\x04"])
        assert decode_tuple(data, ["uint256", "string[]", "bytes4"]) == (
            7,
            ("a", "bc"),
            b"\x01\x02\x03\x04",
        )

    def test_insufficient_data(self):
        """Test that short data raises DecodeError with details."""
        with pytest.raises(DecodeError) as exc_info:
            decode_tuple(b"\x00" * 3, ["address", "bytes"])

        assert exc_info.value.details == {"types": ["address", "bytes"], "length": 3}
        assert exc_info.value.__cause__ is not None

    def test_offset_out_of_range(self):
        """Test that a dynamic offset past the end raises DecodeError."""
        data = (1024).to_bytes(32, "big")
        with pytest.raises(DecodeError):
            decode_tuple(data, ["bytes"])

    def test_invalid_utf8_string(self):
        """Test that non UTF-8 string payloads raise DecodeError."""
        data = encode_tuple(["bytes"], [b"\xff\xfe"])
        with pytest.raises(DecodeError):
            decode_tuple(data, ["string"])


class TestEncodeTuple:
    """Tests for encode_tuple()."""

    def test_bad_value(self):
        """Test that values not matching the types raise ValueError."""
        with pytest.raises(ValueError, match="Cannot encode"):
            encode_tuple(["bytes4"], [b"\x01" * 5])


class TestEncodingHelpers:
    """Tests for byte conversion helpers."""

    @pytest.mark.parametrize(
        "value",
        [b"\xab\xcd", bytearray(b"\xab\xcd"), HexBytes("0xabcd"), "0xabcd", "abcd"],
    )
    def test_to_bytes_safe(self, value):
        """Test every accepted input form converts to bytes."""
        result = to_bytes_safe(value)
        assert result == b"\xab\xcd"
        assert type(result) is bytes

    def test_to_bytes_safe_bad_hex(self):
        """Test that invalid hex text raises ValueError."""
        with pytest.raises(ValueError):
            to_bytes_safe("0xnothex")

    def test_to_bytes_safe_bad_type(self):
        """Test that unsupported types raise TypeError."""
        with pytest.raises(TypeError):
            to_bytes_safe(42)

    @pytest.mark.parametrize(
        "value,expected",
        [
            (b"\xAB", "0xab"),
            ("0xABcd", "0xabcd"),
            ("ABCD", "0xabcd"),
        ],
    )
    def test_to_hex_lower(self, value, expected):
        """Test lowercase hex rendering."""
        assert to_hex_lower(value) == expected


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_unsupported_chain(self):
        """Test UnsupportedChainError carries the chain id."""
        error = UnsupportedChainError(999999)

        assert isinstance(error, EnsResolutionError)
        assert isinstance(error, ValueError)
        assert error.to_dict() == {
            "error_type": "UnsupportedChainError",
            "message": "Unable to resolve ENS registry contract for network id: 999999",
            "details": {"chain_id": 999999},
        }

    def test_repr(self):
        """Test the exception repr."""
        assert repr(DecodeError("bad")) == "DecodeError(message='bad')"
