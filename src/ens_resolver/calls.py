"""
Calldata for the registry and resolver calls used during ENS resolution.

Only the encoding lives here; executing the eth_call is the caller's job.
Record type selectors follow EIP-137, wildcard resolution follows ENSIP-10.
"""

import logging

from eth_typing import ChecksumAddress
from web3 import Web3

from .namehash import dns_encode, namehash
from .utils.abi import decode_tuple, encode_tuple

logger = logging.getLogger(__name__)


def function_selector(signature: str) -> bytes:
    """Return the 4-byte selector of a canonical function signature."""
    return bytes(Web3.keccak(text=signature))[:4]


# Record type interfaces supported by resolvers (EIP-137)
ADDR_SELECTOR: bytes = bytes.fromhex("3b3b57de")  # addr(bytes32)
NAME_SELECTOR: bytes = bytes.fromhex("691f3431")  # name(bytes32)
ABI_SELECTOR: bytes = bytes.fromhex("2203ab56")  # ABI(bytes32,uint256)
PUB_KEY_SELECTOR: bytes = bytes.fromhex("c8690233")  # pubkey(bytes32)

# resolve(bytes,bytes), advertised through supportsInterface (ENSIP-10)
ENSIP10_INTERFACE_ID: bytes = bytes.fromhex("9061b923")

RESOLVER_SELECTOR: bytes = function_selector("resolver(bytes32)")
SUPPORTS_INTERFACE_SELECTOR: bytes = function_selector("supportsInterface(bytes4)")
RESOLVE_WITH_PROOF_SELECTOR: bytes = function_selector("resolveWithProof(bytes,bytes)")


def _node(node: bytes) -> bytes:
    if len(node) != 32:
        raise ValueError(f"Node must be 32 bytes, got {len(node)}")
    return bytes(node)


def encode_resolver_call(node: bytes) -> bytes:
    """Registry resolver(bytes32 node)."""
    return RESOLVER_SELECTOR + encode_tuple(["bytes32"], [_node(node)])


def encode_addr_call(node: bytes) -> bytes:
    """Resolver addr(bytes32 node)."""
    return ADDR_SELECTOR + encode_tuple(["bytes32"], [_node(node)])


def encode_name_call(node: bytes) -> bytes:
    """Resolver name(bytes32 node), used for reverse records."""
    return NAME_SELECTOR + encode_tuple(["bytes32"], [_node(node)])


def encode_supports_interface_call(interface_id: bytes) -> bytes:
    """ERC-165 supportsInterface(bytes4 interfaceID)."""
    if len(interface_id) != 4:
        raise ValueError(f"Interface id must be 4 bytes, got {len(interface_id)}")
    return SUPPORTS_INTERFACE_SELECTOR + encode_tuple(["bytes4"], [bytes(interface_id)])


def encode_resolve_call(name: str, data: bytes | None = None) -> bytes:
    """
    ENSIP-10 resolve(bytes name, bytes data).

    Args:
        name: ENS name; DNS encoded after normalisation
        data: Inner resolver call, defaults to addr(namehash(name))

    Raises:
        InvalidNameError: If the name cannot be normalised
    """
    if data is None:
        data = encode_addr_call(namehash(name))
    return ENSIP10_INTERFACE_ID + encode_tuple(["bytes", "bytes"], [dns_encode(name), bytes(data)])


def encode_resolve_with_proof_call(response: bytes, extra_data: bytes) -> bytes:
    """Offchain resolver resolveWithProof(bytes response, bytes extraData)."""
    return RESOLVE_WITH_PROOF_SELECTOR + encode_tuple(
        ["bytes", "bytes"], [bytes(response), bytes(extra_data)]
    )


def decode_address_result(data: bytes) -> ChecksumAddress:
    """
    Decode a single address return value.

    Raises:
        DecodeError: If data is not an ABI-encoded address
    """
    (address,) = decode_tuple(data, ["address"])
    return Web3.to_checksum_address(address)


def decode_bytes_result(data: bytes) -> bytes:
    """
    Decode a single dynamic bytes return value, e.g. from resolve().

    Raises:
        DecodeError: If data is not ABI-encoded bytes
    """
    (value,) = decode_tuple(data, ["bytes"])
    return bytes(value)
