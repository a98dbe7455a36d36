"""
Location: python/x402check/normalize.py

Summary:
    Maps v1 and v2 configs onto the canonical v2 shape. Also converts the
    versionless flat format of early x402 SDKs on request.

Usage:
    The orchestrator calls normalize() after detection and runs every
    field rule against its output. normalize() never mutates its input:
    it always returns a new dict with a new accepts list.

Example:
    from x402check.normalize import normalize

    normalize({
        "x402Version": 1,
        "accepts": [{"scheme": "exact", "maxAmountRequired": "1000", ...}],
    })
    # {"x402Version": 2, "accepts": [{"scheme": "exact", "amount": "1000", ...}]}
"""

from typing import Any, Optional

from typing_extensions import assert_never

from .detection import detect, is_flat_legacy_config, is_record, parse_input
from .registries import get_canonical_network
from .types import CANONICAL_VERSION


# (canonical key, v1 key) for fields copied from each v1 accepts entry
_V1_ENTRY_FIELDS = (
    ("scheme", "scheme"),
    ("network", "network"),
    ("amount", "maxAmountRequired"),
    ("asset", "asset"),
    ("payTo", "payTo"),
    ("maxTimeoutSeconds", "maxTimeoutSeconds"),
    ("extra", "extra"),
)


def normalize(value: Any) -> Optional[dict[str, Any]]:
    """
    Normalize a config to the canonical v2 shape.

    Args:
        value: JSON string or parsed config

    Returns:
        New canonical dict, or None for manifests, unknown formats and
        unparsable input
    """
    parsed, issue = parse_input(value)
    if issue is not None:
        return None

    fmt = detect(parsed)
    if fmt == "v2":
        return _normalize_v2(parsed)
    elif fmt == "v1":
        return _normalize_v1(parsed)
    elif fmt == "manifest" or fmt == "unknown":
        return None
    else:
        assert_never(fmt)


def _copy_top_level(config: dict[str, Any], result: dict[str, Any]) -> None:
    for key in ("error", "extensions"):
        if key in config:
            result[key] = config[key]


def _normalize_v2(config: dict[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {
        "x402Version": CANONICAL_VERSION,
        "accepts": list(config["accepts"]),
    }
    if "resource" in config:
        result["resource"] = config["resource"]
    _copy_top_level(config, result)
    return result


def _normalize_v1(config: dict[str, Any]) -> dict[str, Any]:
    """Rename maxAmountRequired to amount and lift the first entry resource."""
    resource = None
    accepts = []

    for entry in config["accepts"]:
        if not is_record(entry):
            accepts.append(entry)
            continue

        if resource is None and is_record(entry.get("resource")):
            resource = entry["resource"]

        mapped = {}
        for canonical_key, v1_key in _V1_ENTRY_FIELDS:
            if v1_key in entry:
                mapped[canonical_key] = entry[v1_key]
        accepts.append(mapped)

    result: dict[str, Any] = {
        "x402Version": CANONICAL_VERSION,
        "accepts": accepts,
    }
    if resource is None and "resource" in config:
        resource = config["resource"]
    if resource is not None:
        result["resource"] = resource
    _copy_top_level(config, result)
    return result


def _first_present(mapping: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if mapping.get(key) is not None:
            return mapping[key]
    return ""


def _flat_entry(payment: dict[str, Any]) -> dict[str, Any]:
    raw_network = _first_present(payment, "network", "chain")
    entry = {
        "scheme": "exact",
        "network": get_canonical_network(raw_network) or raw_network,
        "amount": _first_present(payment, "amount", "minAmount"),
        "asset": _first_present(payment, "currency", "asset"),
        "payTo": _first_present(payment, "payTo", "address"),
    }
    for key in ("maxTimeoutSeconds", "extra"):
        if key in payment:
            entry[key] = payment[key]
    return entry


def normalize_flat_legacy(value: Any) -> Optional[dict[str, Any]]:
    """
    Convert a versionless flat config to the canonical v2 shape.

    Field aliases accepted per payment: payTo/address, amount/minAmount,
    network/chain, currency/asset. Simple chain names such as "base" are
    mapped to CAIP-2; unrecognized names are kept as written. A payments
    array yields one accepts entry per object in it.

    Args:
        value: JSON string or parsed config

    Returns:
        New canonical dict, or None if the input is not a flat config
    """
    parsed, issue = parse_input(value)
    if issue is not None or not is_flat_legacy_config(parsed):
        return None

    if isinstance(parsed.get("payments"), list):
        accepts = [
            _flat_entry(payment)
            for payment in parsed["payments"]
            if is_record(payment)
        ]
    else:
        accepts = [_flat_entry(parsed)]

    result: dict[str, Any] = {
        "x402Version": CANONICAL_VERSION,
        "accepts": accepts,
    }
    if "extensions" in parsed:
        result["extensions"] = parsed["extensions"]
    return result
