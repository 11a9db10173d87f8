"""
Byte conversion helpers shared by the codec modules.

Contract calls hand back revert data either as raw bytes, HexBytes or
0x-prefixed hex text depending on the provider; these helpers give the
codecs a single bytes view of it.
"""

from typing import Union

from hexbytes import HexBytes
from web3 import Web3


def to_bytes_safe(value: Union[HexBytes, bytes, bytearray, str]) -> bytes:
    """
    Safely convert value to bytes, handling HexBytes, bytes, and hex strings.

    Args:
        value: Value to convert (HexBytes, bytes, or hex string)

    Returns:
        Bytes representation

    Raises:
        ValueError: If a string value is not valid hex
    """
    if isinstance(value, HexBytes):
        return bytes(value)
    elif isinstance(value, (bytes, bytearray)):
        return bytes(value)
    elif isinstance(value, str):
        return Web3.to_bytes(hexstr=value)
    raise TypeError(f"Cannot convert {type(value).__name__} to bytes")


def to_hex_lower(value: Union[HexBytes, bytes, str]) -> str:
    """Return a lowercase 0x-prefixed hex string for bytes or an address."""
    if isinstance(value, str):
        hex_str = value if value.startswith(("0x", "0X")) else f"0x{value}"
        return "0x" + hex_str[2:].lower()
    return "0x" + bytes(value).hex()
