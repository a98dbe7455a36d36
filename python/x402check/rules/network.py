"""
Location: python/x402check/rules/network.py

Summary:
    Network and asset rules. A network must be CAIP-2; an unknown but
    well-formed network, and an asset missing from the registry, are
    warnings only.
"""

from typing import Any

from ..errors import ErrorCode, ValidationIssue, make_error, make_warning
from ..registries import (
    get_canonical_network,
    is_known_asset,
    is_known_network,
    is_valid_caip2,
)


def validate_network(entry: dict[str, Any], path: str) -> list[ValidationIssue]:
    """
    Check an entry's network identifier.

    A legacy simple name such as "base" is rejected with a fix naming its
    CAIP-2 form; other malformed values get no fix.

    Args:
        entry: Accepts entry
        path: Field path of the entry

    Returns:
        INVALID_NETWORK_FORMAT error, UNKNOWN_NETWORK warning, or nothing
    """
    network = entry.get("network")
    if not network:
        return []

    field = f"{path}.network"
    if not is_valid_caip2(network):
        canonical = get_canonical_network(network)
        fix = f"Use '{canonical}' instead of '{network}'" if canonical else None
        return [make_error(ErrorCode.INVALID_NETWORK_FORMAT, field, fix=fix)]

    if not is_known_network(network):
        return [make_warning(
            ErrorCode.UNKNOWN_NETWORK,
            field,
            message=f"Network {network} is not in the known registry -- "
                    "config may still work but cannot be fully validated",
        )]
    return []


def validate_asset(entry: dict[str, Any], path: str) -> list[ValidationIssue]:
    """Warn when an asset is not registered for the entry's network."""
    asset = entry.get("asset")
    network = entry.get("network")
    if not asset or not is_valid_caip2(network):
        return []

    if not isinstance(asset, str) or not is_known_asset(network, asset):
        return [make_warning(ErrorCode.UNKNOWN_ASSET, f"{path}.asset")]
    return []
