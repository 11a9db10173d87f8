"""Helpers for ENS names and addresses around resolution."""

from web3 import Web3

from ..exceptions import InvalidNameError

EMPTY_ADDRESS = "0x0000000000000000000000000000000000000000"
REVERSE_NAME_SUFFIX = ".addr.reverse"


def is_empty_address(address: str | None) -> bool:
    """True for None, "" and the zero address."""
    if not address:
        return True
    return address.lower() == EMPTY_ADDRESS


def parent_name(name: str | None) -> str | None:
    """
    Return the name with its leftmost label removed.

    Used to walk up the tree when the registry has no resolver for a name.
    Returns None for the root and for single-label names.
    """
    ens_name = (name or "").strip()
    if ens_name == "." or "." not in ens_name:
        return None
    return ens_name[ens_name.index(".") + 1:]


def reverse_name(address: str) -> str:
    """
    Return the reverse-resolution name of an address (<hex>.addr.reverse).

    Raises:
        InvalidNameError: If address is not a valid address
    """
    if not Web3.is_address(address):
        raise InvalidNameError(f"Address is invalid: {address}", {"address": address})
    return address.lower().removeprefix("0x") + REVERSE_NAME_SUFFIX


def is_valid_ens_name(value: str | None) -> bool:
    """A value is treated as an ENS name if it has a dot or is not an address."""
    return value is not None and ("." in value or not Web3.is_address(value))
