"""
ENS name normalisation.

Names are mapped with UTS-46 (STD3 ASCII rules) and converted to their
ASCII-compatible form before hashing or DNS encoding.
"""

import logging

import idna

from .exceptions import InvalidNameError

logger = logging.getLogger(__name__)

# Inputs that denote the root name (no labels)
_ROOT_NAMES = frozenset({"", "."})


def normalize(name: str) -> str:
    """
    Normalise an ENS name to lowercase ASCII-compatible form.

    Labels needing it are Punycode encoded (``xn--``). The root name
    (``""`` or ``"."``) normalises to ``""``.

    Args:
        name: User supplied ENS name, e.g. "Vitalik.ETH"

    Returns:
        Normalised name, e.g. "vitalik.eth"

    Raises:
        InvalidNameError: If the IDNA profile rejects the name
    """
    if name in _ROOT_NAMES:
        return ""

    labels = name.split(".")
    trailing_dot = labels[-1] == ""
    if trailing_dot:
        labels.pop()

    # Labels are encoded one at a time: ENS names have no overall length cap
    try:
        encoded = [
            idna.encode(label, uts46=True, std3_rules=True).decode("ascii")
            for label in labels
        ]
    except (idna.IDNAError, UnicodeError) as e:
        logger.debug(f"IDNA rejected {name!r}: {e}")
        raise InvalidNameError(
            f"Invalid ENS name provided: {name}", {"name": name, "reason": str(e)}
        ) from e

    normalized = ".".join(encoded).lower()
    return normalized + "." if trailing_dot else normalized
