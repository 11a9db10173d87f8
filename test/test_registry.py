#!/usr/bin/env python3
"""Tests for the ENS registry table."""

import pytest

from ens_resolver.exceptions import UnsupportedChainError
from ens_resolver.registry import (
    ENS_REGISTRY_ADDRESS,
    REGISTRY_ADDRESSES,
    ChainId,
    check_registry_table,
    resolve_registry,
    supported_chain_ids,
)

MAINNET_REGISTRY = "0x00000000000C2E074eC69A0dFb2997BA6C7d2e1e"


class TestResolveRegistry:
    """Tests for resolve_registry()."""

    def test_mainnet(self):
        """Test that chain 1 resolves to the published mainnet registry."""
        assert resolve_registry(1) == MAINNET_REGISTRY

    @pytest.mark.parametrize("chain_id", [1, 5, 17000, 11155111])
    def test_supported_chains(self, chain_id):
        """Test every supported chain resolves."""
        assert resolve_registry(chain_id) == ENS_REGISTRY_ADDRESS

    def test_accepts_enum(self):
        """Test that ChainId members work as keys."""
        assert resolve_registry(ChainId.SEPOLIA) == MAINNET_REGISTRY

    @pytest.mark.parametrize("chain_id", [999999, 0, 137, -1])
    def test_unsupported_chain(self, chain_id):
        """Test that unknown chains raise instead of defaulting to mainnet."""
        with pytest.raises(UnsupportedChainError) as exc_info:
            resolve_registry(chain_id)

        assert exc_info.value.chain_id == chain_id
        assert str(chain_id) in str(exc_info.value)

    def test_supported_chain_ids(self):
        """Test the sorted allow-list."""
        assert supported_chain_ids() == [1, 5, 17000, 11155111]


class TestCheckRegistryTable:
    """Tests for the import-time table check."""

    def test_shipped_table_is_complete(self):
        """Test that the shipped table passes its own check."""
        check_registry_table(REGISTRY_ADDRESSES)
        assert set(REGISTRY_ADDRESSES) == set(ChainId)

    def test_missing_chain(self):
        """Test that a table missing a ChainId is rejected."""
        with pytest.raises(RuntimeError, match="missing chains: GOERLI, HOLESKY, SEPOLIA"):
            check_registry_table({ChainId.MAINNET: MAINNET_REGISTRY})

    def test_unchecksummed_address(self):
        """Test that lowercase addresses are rejected."""
        table = {chain: MAINNET_REGISTRY for chain in ChainId}
        table[ChainId.HOLESKY] = MAINNET_REGISTRY.lower()

        with pytest.raises(RuntimeError, match="not checksummed"):
            check_registry_table(table)

    def test_table_is_read_only(self):
        """Test that the table cannot be modified at runtime."""
        with pytest.raises(TypeError):
            REGISTRY_ADDRESSES[999999] = MAINNET_REGISTRY
