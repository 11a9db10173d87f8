#!/usr/bin/env python3
"""Command line entry point for the ENS resolution primitives.

Each subcommand runs one pure operation and prints its result; nothing
here touches the network.
"""

import argparse
import json
import logging
import os
import sys

from .config import ResolverConfig
from .exceptions import EnsResolutionError
from .gateway import gateway_requests
from .namehash import dns_encode, namehash_hex
from .normalizer import normalize
from .offchain_lookup import decode_revert
from .registry import resolve_registry

# Get logger for this module
logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level as string (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    log_level: int = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per operation."""
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        prog="ens-resolver",
        description="ENS namehash, DNS encoding, registry lookup and CCIP-Read decoding",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Environment Variables:
  ENS_CHAIN_ID          - Chain used by 'registry' when --chain-id is omitted (default: 1)
  ENS_LOOKUP_LIMIT      - Maximum chained offchain lookups (default: 4)
  ENS_GATEWAY_TIMEOUT   - Gateway fetch timeout in seconds (default: 10)
  LOG_LEVEL             - Logging level (can be overridden with --log-level)
        """
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("LOG_LEVEL", "WARNING"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level (default: WARNING)"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for command, help_text in (
        ("normalize", "Print the normalised form of a name"),
        ("namehash", "Print the namehash of a name"),
        ("dns-encode", "Print the DNS wire encoding of a name"),
    ):
        sub = subparsers.add_parser(command, help=help_text)
        sub.add_argument("name", help="ENS name, e.g. vitalik.eth")

    registry = subparsers.add_parser("registry", help="Print the ENS registry address for a chain")
    registry.add_argument("--chain-id", type=int, default=None, help="Chain id (default: ENS_CHAIN_ID)")

    for command, help_text in (
        ("decode-lookup", "Decode OffchainLookup revert data"),
        ("gateway-requests", "Print the gateway requests for OffchainLookup revert data"),
    ):
        sub = subparsers.add_parser(command, help=help_text)
        sub.add_argument("revert_data", help="0x-prefixed revert data, selector included")

    return parser


def run(args: argparse.Namespace) -> str:
    """Execute the selected subcommand and return its output."""
    match args.command:
        case "normalize":
            return normalize(args.name)
        case "namehash":
            return namehash_hex(args.name)
        case "dns-encode":
            return "0x" + dns_encode(args.name).hex()
        case "registry":
            if args.chain_id is not None:
                return resolve_registry(args.chain_id)
            config = ResolverConfig.from_env()
            config.log_config()
            return config.registry_address
        case "decode-lookup":
            return json.dumps(decode_revert(args.revert_data).to_dict(), indent=2)
        case "gateway-requests":
            lookup = decode_revert(args.revert_data)
            requests = gateway_requests(lookup, ResolverConfig.from_env())
            return json.dumps([request.to_dict() for request in requests], indent=2)
        case _:
            raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the ens-resolver command.

    Returns:
        Process exit code
    """
    args: argparse.Namespace = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        print(run(args))
    except EnsResolutionError as e:
        logger.error(f"{e.__class__.__name__}: {e.message}")
        return 1
    except ValueError as e:
        logger.error(f"Configuration Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
