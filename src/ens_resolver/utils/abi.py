"""
Generic ABI tuple codec.

Thin layer over eth_abi that turns every decoding failure into a
DecodeError, so that named structures can be decoded without per-call
offset arithmetic.
"""

import logging
from collections.abc import Sequence
from typing import Any

from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError, EncodingError

from ..exceptions import DecodeError

logger = logging.getLogger(__name__)


def decode_tuple(data: bytes, types: Sequence[str]) -> tuple[Any, ...]:
    """
    Decode an ABI-encoded tuple.

    Decoding is all-or-nothing: either every field is returned or
    DecodeError is raised.

    Args:
        data: ABI-encoded head and tail, without any function selector
        types: ABI type strings in declared order, e.g. ['address', 'bytes']

    Returns:
        Tuple of decoded values in declared order

    Raises:
        DecodeError: If data does not match the requested tuple shape
    """
    try:
        return tuple(decode(list(types), bytes(data), strict=True))
    except (DecodingError, ValueError, TypeError, OverflowError) as e:
        logger.debug(f"ABI decode of ({','.join(types)}) failed on {len(data)} bytes: {e}")
        raise DecodeError(
            f"Data does not match ABI tuple ({','.join(types)}): {e}",
            {"types": list(types), "length": len(data)},
        ) from e


def encode_tuple(types: Sequence[str], values: Sequence[Any]) -> bytes:
    """
    ABI-encode values as a tuple of the given types.

    Raises:
        ValueError: If the values cannot be encoded as the given types
    """
    try:
        return encode(list(types), list(values))
    except EncodingError as e:
        raise ValueError(f"Cannot encode values as ({','.join(types)}): {e}") from e
