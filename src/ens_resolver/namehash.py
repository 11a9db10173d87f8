"""
ENS namehash and DNS wire encoding.

namehash("") = 0x00 * 32
namehash("eth") = keccak256(namehash("") + keccak256("eth"))
namehash("foo.eth") = keccak256(namehash("eth") + keccak256("foo"))
"""

import logging

from web3 import Web3

from .exceptions import DecodeError, InvalidNameError
from .normalizer import normalize

logger = logging.getLogger(__name__)

EMPTY_NODE: bytes = b"\x00" * 32
MAX_LABEL_LENGTH: int = 255


def _labels(normalized_name: str) -> list[str]:
    """Split a normalised name, dropping trailing empty labels."""
    labels = normalized_name.split(".")
    while labels and not labels[-1]:
        labels.pop()
    return labels


def labelhash(label: str) -> bytes:
    """Return keccak256 of the label's UTF-8 bytes."""
    return bytes(Web3.keccak(text=label))


def namehash(name: str) -> bytes:
    """
    Compute the ENS namehash of a name.

    The hash chain is folded from the root (rightmost label) down to the
    leftmost label, so namehash("sub.example.eth") builds on
    namehash("example.eth").

    Args:
        name: ENS name, normalised before hashing

    Returns:
        32-byte namehash

    Raises:
        InvalidNameError: If the name cannot be normalised
    """
    node = EMPTY_NODE
    for label in reversed(_labels(normalize(name))):
        node = bytes(Web3.keccak(node + labelhash(label)))
    return node


def namehash_hex(name: str) -> str:
    """Same as namehash() as a 0x-prefixed hex string."""
    return Web3.to_hex(namehash(name))


def dns_encode(name: str) -> bytes:
    """
    DNS wire-encode a name.

    Example: 'alice.khaalisplit.eth' -> b'\\x05alice\\x0bkhaalisplit\\x03eth\\x00'

    Raises:
        InvalidNameError: If the name cannot be normalised or a label is
            longer than 255 bytes
    """
    encoded = bytearray()
    for label in normalize(name).split("."):
        if not label:
            break
        label_bytes = label.encode("utf-8")
        # IDNA already caps labels at 63; this guards the one-byte length prefix
        if len(label_bytes) > MAX_LABEL_LENGTH:
            raise InvalidNameError(
                f"Label exceeds {MAX_LABEL_LENGTH} bytes in name: {name}",
                {"name": name, "label_length": len(label_bytes)},
            )
        encoded.append(len(label_bytes))
        encoded += label_bytes
    encoded.append(0)
    return bytes(encoded)


def dns_decode(dns_name: bytes) -> str:
    """
    Decode a DNS-encoded name into a dotted string.

    Raises:
        DecodeError: If a length prefix runs past the end of the buffer or
            the zero terminator is missing
    """
    labels = []
    i = 0
    while i < len(dns_name):
        length = dns_name[i]
        i += 1
        if length == 0:
            return ".".join(labels)
        if i + length > len(dns_name):
            raise DecodeError(
                f"Label at offset {i - 1} overruns buffer of {len(dns_name)} bytes",
                {"offset": i - 1, "length": length},
            )
        try:
            labels.append(dns_name[i:i + length].decode("utf-8"))
        except UnicodeDecodeError as e:
            raise DecodeError(f"Label at offset {i - 1} is not valid UTF-8") from e
        i += length
    raise DecodeError("DNS-encoded name is missing its zero terminator")
