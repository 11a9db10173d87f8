#!/usr/bin/env python3
"""Configuration management for ENS resolution.

This module provides a type-safe configuration dataclass with validation.
Configuration is loaded from environment variables with sensible defaults.
"""

import logging
import os
from dataclasses import dataclass

from eth_typing import ChecksumAddress

from .exceptions import UnsupportedChainError
from .registry import ChainId, resolve_registry, supported_chain_ids

# Get logger for this module
logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Configuration for ENS resolution clients.

    Attributes:
        chain_id: Chain whose ENS registry is used
        lookup_limit: Maximum number of chained OffchainLookup reverts to follow
        gateway_timeout: Per-URL timeout for gateway fetches, in seconds
    """

    chain_id: int = ChainId.MAINNET
    lookup_limit: int = 4
    gateway_timeout: int = 10

    def __post_init__(self) -> None:
        """Validate resolver configuration."""
        # Validate chain against the registry table
        try:
            resolve_registry(self.chain_id)
        except UnsupportedChainError:
            raise ValueError(
                f"Unsupported chain id: {self.chain_id}. "
                f"Supported chain ids: {', '.join(map(str, supported_chain_ids()))}"
            ) from None

        # Validate lookup limit
        if self.lookup_limit <= 0:
            raise ValueError(f"Lookup limit must be positive, got {self.lookup_limit}")
        if self.lookup_limit > 10:
            raise ValueError(f"Lookup limit too high (max 10), got {self.lookup_limit}")

        # Validate gateway timeout
        if self.gateway_timeout <= 0:
            raise ValueError(f"Gateway timeout must be positive, got {self.gateway_timeout}")
        if self.gateway_timeout > 120:
            raise ValueError(f"Gateway timeout too long (max 120s), got {self.gateway_timeout}")

    @property
    def registry_address(self) -> ChecksumAddress:
        """ENS registry address for the configured chain."""
        return resolve_registry(self.chain_id)

    @classmethod
    def from_env(cls) -> "ResolverConfig":
        """Load configuration from environment variables.

        Returns:
            ResolverConfig instance with loaded values

        Raises:
            ValueError: If environment variables are not integers or out of range
        """
        values = {}
        for env_var, default in (
            ("ENS_CHAIN_ID", "1"),
            ("ENS_LOOKUP_LIMIT", "4"),
            ("ENS_GATEWAY_TIMEOUT", "10"),
        ):
            raw = os.environ.get(env_var, default)
            try:
                values[env_var] = int(raw)
            except ValueError:
                raise ValueError(f"{env_var} must be an integer, got {raw!r}") from None

        return cls(
            chain_id=values["ENS_CHAIN_ID"],
            lookup_limit=values["ENS_LOOKUP_LIMIT"],
            gateway_timeout=values["ENS_GATEWAY_TIMEOUT"],
        )

    def log_config(self) -> None:
        """Log the configuration in a readable format for debugging."""
        logger.info("=" * 60)
        logger.info("ENS Resolver Configuration")
        logger.info("=" * 60)
        logger.info(f"  Chain ID: {self.chain_id}")
        logger.info(f"  Registry: {self.registry_address}")
        logger.info(f"  Lookup Limit: {self.lookup_limit}")
        logger.info(f"  Gateway Timeout: {self.gateway_timeout} seconds")
        logger.info("=" * 60)
