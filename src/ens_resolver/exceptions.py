"""
Exception classes for ENS resolution.

All errors are local and deterministic: retrying with the same input
cannot change the outcome, so callers should surface them rather than retry.
"""

from typing import Any


class EnsResolutionError(Exception):
    """Base exception for all ENS resolution errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class InvalidNameError(EnsResolutionError, ValueError):
    """Raised when a name cannot be normalised or a label is too long."""


class UnsupportedChainError(EnsResolutionError, ValueError):
    """Raised when no ENS registry is known for a chain id."""

    def __init__(self, chain_id: int) -> None:
        self.chain_id = chain_id
        super().__init__(
            f"Unable to resolve ENS registry contract for network id: {chain_id}",
            {"chain_id": chain_id},
        )


class DecodeError(EnsResolutionError, ValueError):
    """Raised when ABI, DNS wire or gateway payloads are malformed."""
