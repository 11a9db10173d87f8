"""
CCIP-Read gateway request construction.

Builds the HTTP requests a client sends to the gateway URLs of an
OffchainLookup and parses the gateway's reply. Requests carry the
configured gateway timeout, and chained lookups are bounded by the
configured lookup limit; sending the requests belongs to the caller.
"""

import json
import logging
from typing import Union

from web3 import Web3

from .config import ResolverConfig
from .exceptions import DecodeError, EnsResolutionError
from .models import GatewayRequest, OffchainLookup
from .utils.encoding import to_bytes_safe, to_hex_lower

logger = logging.getLogger(__name__)

SENDER_PLACEHOLDER = "{sender}"
DATA_PLACEHOLDER = "{data}"


def build_gateway_request(
    url_template: str, sender: str, call_data: bytes, timeout: int | None = None
) -> GatewayRequest:
    """
    Build the request for one gateway URL template.

    `{sender}` and `{data}` are replaced with lowercase 0x hex. Templates
    carrying `{data}` are fetched with GET; all others are POSTed a JSON
    body with the same two fields.

    Args:
        url_template: Gateway URL from OffchainLookup.urls
        sender: OffchainLookup.sender
        call_data: OffchainLookup.call_data
        timeout: Gateway timeout in seconds, carried on the request

    Returns:
        GatewayRequest ready to be sent by the caller

    Raises:
        ValueError: If sender is not a valid address
    """
    if not sender or not Web3.is_address(sender):
        raise ValueError(f"Sender address is null or not valid: {sender}")

    sender_hex = to_hex_lower(sender)
    data_hex = to_hex_lower(call_data)
    url = url_template.replace(SENDER_PLACEHOLDER, sender_hex).replace(DATA_PLACEHOLDER, data_hex)

    if DATA_PLACEHOLDER in url_template:
        return GatewayRequest(method="GET", url=url, timeout=timeout)
    return GatewayRequest(
        method="POST",
        url=url,
        body={"data": data_hex, "sender": sender_hex},
        timeout=timeout,
    )


def gateway_requests(
    lookup: OffchainLookup, config: ResolverConfig | None = None
) -> list[GatewayRequest]:
    """Build one request per gateway URL, in the lookup's priority order.

    Each request carries config.gateway_timeout (default configuration when
    config is None).
    """
    config = config or ResolverConfig()
    requests = [
        build_gateway_request(url, lookup.sender, lookup.call_data, config.gateway_timeout)
        for url in lookup.urls
    ]
    if not requests:
        logger.warning(f"{lookup} provides no gateway URLs")
    return requests


def parse_gateway_response(body: Union[str, bytes]) -> bytes:
    """
    Extract the response bytes from a gateway's JSON reply ({"data": "0x..."}).

    Raises:
        DecodeError: If the body is not JSON, lacks "data" or carries bad hex
    """
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"Gateway response is not valid JSON: {e}") from e

    match payload:
        case {"data": str() as data}:
            pass
        case _:
            raise DecodeError("Gateway response has no 'data' string field")

    try:
        return to_bytes_safe(data)
    except ValueError as e:
        raise DecodeError(f"Gateway response data is not valid hex: {data!r}") from e


def check_lookup_sender(lookup: OffchainLookup, resolver_address: str) -> None:
    """
    Ensure the lookup was raised by the resolver that was called.

    Raises:
        EnsResolutionError: If the lookup came from a nested call
    """
    if not Web3.is_address(resolver_address) or (
        Web3.to_checksum_address(resolver_address) != lookup.sender
    ):
        raise EnsResolutionError(
            "Cannot handle OffchainLookup raised inside nested call",
            {"sender": lookup.sender, "resolver": resolver_address},
        )


def check_lookup_depth(depth: int, config: ResolverConfig | None = None) -> None:
    """
    Ensure a chain of OffchainLookup reverts stays within config.lookup_limit.

    A callback may itself revert with another OffchainLookup; callers pass
    the number of lookups already followed before handling the next one.

    Raises:
        EnsResolutionError: If depth has reached the configured limit
    """
    config = config or ResolverConfig()
    if depth >= config.lookup_limit:
        logger.warning(f"Giving up after {depth} chained offchain lookups")
        raise EnsResolutionError(
            "Lookup calls is out of limit.",
            {"depth": depth, "lookup_limit": config.lookup_limit},
        )
