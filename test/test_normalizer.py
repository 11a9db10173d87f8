#!/usr/bin/env python3
"""Tests for ENS name normalisation."""

from unittest.mock import patch

import idna
import pytest

from ens_resolver.exceptions import EnsResolutionError, InvalidNameError
from ens_resolver.normalizer import normalize


class TestNormalize:
    """Tests for normalize()."""

    def test_lowercases(self):
        """Test that names are lowercased."""
        assert normalize("Vitalik.ETH") == "vitalik.eth"

    def test_ascii_unchanged(self):
        """Test that an already normalised name is returned as is."""
        assert normalize("foo.eth") == "foo.eth"

    @pytest.mark.parametrize("name", ["", "."])
    def test_root_name(self, name):
        """Test that the root name normalises to the empty string."""
        assert normalize(name) == ""

    def test_punycode(self):
        """Test that non-ASCII labels are Punycode encoded."""
        assert normalize("bücher.eth") == "xn--bcher-kva.eth"

    def test_uts46_mapping(self):
        """Test that uppercase non-ASCII is mapped before encoding."""
        assert normalize("BÜCHER.eth") == "xn--bcher-kva.eth"

    def test_trailing_dot_kept(self):
        """Test that a trailing dot survives normalisation."""
        assert normalize("eth.") == "eth."

    def test_idempotent(self):
        """Test that normalisation is a fixed point after one application."""
        once = normalize("Bücher.ETH")
        assert normalize(once) == once

    @pytest.mark.parametrize(
        "name",
        [
            "foo..eth",  # empty label
            "foo_bar.eth",  # not allowed by STD3 rules
            "foo bar.eth",  # whitespace
            "a" * 64 + ".eth",  # label too long
            "-foo.eth",  # leading hyphen
        ],
    )
    def test_invalid_names(self, name):
        """Test that names rejected by IDNA raise InvalidNameError."""
        with pytest.raises(InvalidNameError, match="Invalid ENS name provided"):
            normalize(name)

    def test_error_is_value_error(self):
        """Test that InvalidNameError can be caught as ValueError."""
        with pytest.raises(ValueError):
            normalize("foo..eth")

    def test_error_details(self):
        """Test that the error records the rejected name."""
        with pytest.raises(EnsResolutionError) as exc_info:
            normalize("foo..eth")
        assert exc_info.value.details["name"] == "foo..eth"
        assert exc_info.value.__cause__ is not None

    @patch("ens_resolver.normalizer.idna.encode")
    def test_library_rejection_is_invalid_name(self, mock_encode):
        """Test that any IDNAError from the library maps to InvalidNameError."""
        mock_encode.side_effect = idna.IDNAError("rejected")

        with pytest.raises(InvalidNameError):
            normalize("anything.eth")

        mock_encode.assert_called_once_with("anything", uts46=True, std3_rules=True)

    def test_long_name_not_capped(self):
        """Test that names past the 253 character DNS hostname cap are accepted."""
        name = ".".join(["ABCDEFGHIJ"] * 30)

        assert len(name) > 253
        assert normalize(name) == name.lower()

    def test_labels_encoded_separately(self):
        """Test that each label is mapped and Punycode encoded on its own."""
        assert normalize("Bücher." * 40 + "eth") == "xn--bcher-kva." * 40 + "eth"
