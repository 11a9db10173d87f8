#!/usr/bin/env python3
"""Data models for ENS offchain resolution.

This module provides immutable data classes for the EIP-3668 OffchainLookup
revert payload and for the gateway requests derived from it.
"""

from dataclasses import dataclass
from typing import Any

from web3 import Web3

from .utils.abi import encode_tuple

# (sender, urls, callData, callbackFunction, extraData)
OFFCHAIN_LOOKUP_TYPES: tuple[str, ...] = ("address", "string[]", "bytes", "bytes4", "bytes")


@dataclass(frozen=True, slots=True)
class OffchainLookup:
    """Decoded OffchainLookup(address,string[],bytes,bytes4,bytes) revert.

    Equality is by value across all five fields.

    Attributes:
        sender: Contract that raised the lookup; the `to` of the callback call
        urls: Gateway URL templates in priority order
        call_data: Payload to send to the gateway
        callback_function: 4-byte selector to call with the gateway response
        extra_data: Context passed back unmodified to the callback
    """

    sender: str
    urls: tuple[str, ...]
    call_data: bytes
    callback_function: bytes
    extra_data: bytes

    def __post_init__(self) -> None:
        """Validate fields and normalise the sender to checksum format."""
        if not Web3.is_address(self.sender):
            raise ValueError(f"Invalid sender address: {self.sender}")

        if len(self.callback_function) != 4:
            raise ValueError(
                f"Callback function must be 4 bytes, got {len(self.callback_function)}"
            )

        # Use object.__setattr__ since dataclass is frozen
        object.__setattr__(self, "sender", Web3.to_checksum_address(self.sender))
        object.__setattr__(self, "urls", tuple(self.urls))
        object.__setattr__(self, "call_data", bytes(self.call_data))
        object.__setattr__(self, "callback_function", bytes(self.callback_function))
        object.__setattr__(self, "extra_data", bytes(self.extra_data))

    def __str__(self) -> str:
        """Human-readable string representation."""
        return (
            f"OffchainLookup(sender={self.sender[:10]}..., "
            f"urls={len(self.urls)}, "
            f"callback=0x{self.callback_function.hex()})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "sender": self.sender,
            "urls": list(self.urls),
            "call_data": Web3.to_hex(self.call_data),
            "callback_function": Web3.to_hex(self.callback_function),
            "extra_data": Web3.to_hex(self.extra_data),
        }

    def encode(self) -> bytes:
        """ABI-encode the lookup as a tuple, without the error selector."""
        return encode_tuple(
            OFFCHAIN_LOOKUP_TYPES,
            [
                self.sender,
                list(self.urls),
                self.call_data,
                self.callback_function,
                self.extra_data,
            ],
        )

    def callback_call_data(self, response: bytes) -> bytes:
        """Build the callback invocation for a gateway response.

        Returns:
            callback_function || abi.encode(bytes response, bytes extra_data),
            to be sent to `sender`
        """
        return self.callback_function + encode_tuple(
            ("bytes", "bytes"), [bytes(response), self.extra_data]
        )


@dataclass(frozen=True, slots=True)
class GatewayRequest:
    """An HTTP request to a CCIP-Read gateway, built but not sent.

    Attributes:
        method: "GET" when the URL template carries {data}, else "POST"
        url: URL with {sender} and {data} substituted
        body: JSON body for POST requests, None for GET
        timeout: Seconds the caller should wait for the gateway, None for no limit
    """

    method: str
    url: str
    body: dict[str, str] | None = None
    timeout: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "method": self.method,
            "url": self.url,
            "body": self.body,
            "timeout": self.timeout,
        }
