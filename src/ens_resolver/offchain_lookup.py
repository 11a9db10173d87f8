"""
EIP-3668 (CCIP-Read) OffchainLookup codec.

A resolver that cannot answer on-chain reverts with
OffchainLookup(address sender, string[] urls, bytes callData,
bytes4 callbackFunction, bytes extraData). The revert data is the 4-byte
error selector followed by the ABI-encoded tuple.
"""

import logging
from typing import Union

from hexbytes import HexBytes

from .exceptions import DecodeError
from .models import OFFCHAIN_LOOKUP_TYPES, OffchainLookup
from .utils.abi import decode_tuple
from .utils.encoding import to_bytes_safe

logger = logging.getLogger(__name__)

# bytes4(keccak256("OffchainLookup(address,string[],bytes,bytes4,bytes)"))
CCIP_READ_SELECTOR: bytes = bytes.fromhex("556f1830")

RevertData = Union[HexBytes, bytes, str]


def matches_selector(revert_data: RevertData | None) -> bool:
    """
    Check whether revert data carries the OffchainLookup error selector.

    Args:
        revert_data: Raw revert bytes or 0x-prefixed hex text

    Returns:
        True iff the first 4 bytes equal 0x556f1830
    """
    if revert_data is None:
        return False
    try:
        data = to_bytes_safe(revert_data)
    except (TypeError, ValueError):
        return False
    return len(data) >= 4 and data[:4] == CCIP_READ_SELECTOR


def decode_offchain_lookup(body: bytes) -> OffchainLookup:
    """
    Decode the ABI tuple of an OffchainLookup, with the selector already stripped.

    Raises:
        DecodeError: If body is not a valid (address,string[],bytes,bytes4,bytes) tuple
    """
    sender, urls, call_data, callback_function, extra_data = decode_tuple(
        body, OFFCHAIN_LOOKUP_TYPES
    )
    try:
        return OffchainLookup(
            sender=sender,
            urls=tuple(urls),
            call_data=call_data,
            callback_function=callback_function,
            extra_data=extra_data,
        )
    except ValueError as e:
        raise DecodeError(f"Invalid OffchainLookup fields: {e}") from e


def decode_revert(revert_data: RevertData) -> OffchainLookup:
    """
    Decode full revert data (selector + tuple) into an OffchainLookup.

    Raises:
        DecodeError: If the selector does not match or the tuple is malformed
    """
    if not matches_selector(revert_data):
        raise DecodeError("Revert data does not carry the OffchainLookup selector")

    lookup = decode_offchain_lookup(to_bytes_safe(revert_data)[4:])
    logger.debug(f"Decoded {lookup}")
    return lookup


def encode_offchain_lookup(lookup: OffchainLookup) -> bytes:
    """ABI-encode a lookup's tuple body, without the selector."""
    return lookup.encode()


def encode_revert(lookup: OffchainLookup) -> bytes:
    """Encode a lookup as revert data: selector followed by the tuple."""
    return CCIP_READ_SELECTOR + lookup.encode()
