"""
ENS resolution primitives.

Name normalisation, namehash, DNS wire encoding, registry lookup and the
EIP-3668 OffchainLookup codec. Everything here is pure; callers perform
the eth_call and gateway round trips.
"""

from .calls import (
    ENSIP10_INTERFACE_ID,
    decode_address_result,
    decode_bytes_result,
    encode_addr_call,
    encode_name_call,
    encode_resolve_call,
    encode_resolve_with_proof_call,
    encode_resolver_call,
    encode_supports_interface_call,
    function_selector,
)
from .config import ResolverConfig
from .exceptions import DecodeError, EnsResolutionError, InvalidNameError, UnsupportedChainError
from .gateway import (
    build_gateway_request,
    check_lookup_depth,
    check_lookup_sender,
    gateway_requests,
    parse_gateway_response,
)
from .models import GatewayRequest, OffchainLookup
from .namehash import dns_decode, dns_encode, labelhash, namehash, namehash_hex
from .normalizer import normalize
from .offchain_lookup import (
    CCIP_READ_SELECTOR,
    decode_offchain_lookup,
    decode_revert,
    encode_offchain_lookup,
    encode_revert,
    matches_selector,
)
from .registry import ChainId, resolve_registry, supported_chain_ids
from .utils.name_utils import (
    EMPTY_ADDRESS,
    is_empty_address,
    is_valid_ens_name,
    parent_name,
    reverse_name,
)

__all__ = [
    "CCIP_READ_SELECTOR",
    "EMPTY_ADDRESS",
    "ENSIP10_INTERFACE_ID",
    "ChainId",
    "DecodeError",
    "EnsResolutionError",
    "GatewayRequest",
    "InvalidNameError",
    "OffchainLookup",
    "ResolverConfig",
    "UnsupportedChainError",
    "build_gateway_request",
    "check_lookup_depth",
    "check_lookup_sender",
    "decode_address_result",
    "decode_bytes_result",
    "decode_offchain_lookup",
    "decode_revert",
    "dns_decode",
    "dns_encode",
    "encode_addr_call",
    "encode_name_call",
    "encode_offchain_lookup",
    "encode_resolve_call",
    "encode_resolve_with_proof_call",
    "encode_resolver_call",
    "encode_revert",
    "encode_supports_interface_call",
    "function_selector",
    "gateway_requests",
    "is_empty_address",
    "is_valid_ens_name",
    "labelhash",
    "matches_selector",
    "namehash",
    "namehash_hex",
    "normalize",
    "parent_name",
    "parse_gateway_response",
    "resolve_registry",
    "reverse_name",
    "supported_chain_ids",
]
__version__ = "0.1.0"
