"""
ENS registry contract addresses.

The registry is deployed at a fixed address per network. Lookups are
total only over the supported chains; an unknown chain id is an error and
never falls back to mainnet.
"""

import logging
from enum import IntEnum
from types import MappingProxyType

from eth_typing import ChecksumAddress
from web3 import Web3

from .exceptions import UnsupportedChainError

logger = logging.getLogger(__name__)


class ChainId(IntEnum):
    """Chains with a known ENS registry deployment."""
    MAINNET = 1
    GOERLI = 5
    HOLESKY = 17000
    SEPOLIA = 11155111


ENS_REGISTRY_ADDRESS = ChecksumAddress("0x00000000000C2E074eC69A0dFb2997BA6C7d2e1e")

REGISTRY_ADDRESSES: MappingProxyType[int, ChecksumAddress] = MappingProxyType({
    ChainId.MAINNET: ENS_REGISTRY_ADDRESS,
    ChainId.GOERLI: ENS_REGISTRY_ADDRESS,
    ChainId.HOLESKY: ENS_REGISTRY_ADDRESS,
    ChainId.SEPOLIA: ENS_REGISTRY_ADDRESS,
})


def check_registry_table(table=REGISTRY_ADDRESSES) -> None:
    """
    Verify the registry table covers every ChainId with a checksummed address.

    Raises:
        RuntimeError: If a chain is missing or an address is malformed
    """
    missing = [chain.name for chain in ChainId if chain not in table]
    if missing:
        raise RuntimeError(f"ENS registry table missing chains: {', '.join(missing)}")

    for chain_id, address in table.items():
        if not Web3.is_checksum_address(address):
            raise RuntimeError(
                f"ENS registry address for chain {chain_id} is not checksummed: {address}"
            )


check_registry_table()


def supported_chain_ids() -> list[int]:
    """Return the sorted list of chain ids with a registry."""
    return sorted(int(chain_id) for chain_id in REGISTRY_ADDRESSES)


def resolve_registry(chain_id: int) -> ChecksumAddress:
    """
    Return the ENS registry address for a chain.

    Args:
        chain_id: EIP-155 chain id

    Returns:
        Checksummed registry contract address

    Raises:
        UnsupportedChainError: If the chain has no known registry
    """
    try:
        return REGISTRY_ADDRESSES[chain_id]
    except KeyError:
        logger.warning(f"No ENS registry for chain id {chain_id}")
        raise UnsupportedChainError(chain_id) from None
