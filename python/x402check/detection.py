"""
Location: python/x402check/detection.py

Summary:
    Input parsing, structural type guards and format detection.

Usage:
    detect() classifies a JSON string or parsed value as "manifest", "v2",
    "v1" or "unknown". The manifest guard runs first because a manifest
    may carry x402Version: 2 at its top level and would otherwise be
    mistaken for a v2 config.

Example:
    from x402check.detection import detect

    detect('{"x402Version": 2, "accepts": []}')   # "v2"
    detect({"endpoints": {}})                     # "manifest"
    detect({"payTo": "0x...", "amount": "1"})     # "unknown"
"""

import json
from typing import Any, Optional

from .errors import ErrorCode, ValidationIssue, make_error
from .types import CANONICAL_VERSION, LEGACY_VERSION, ConfigFormat


def parse_input(value: Any) -> tuple[Any, Optional[ValidationIssue]]:
    """
    Parse JSON text, passing already-parsed values through unchanged.

    Args:
        value: JSON string or any parsed value

    Returns:
        (parsed, None) on success, (None, INVALID_JSON issue) when a string
        is not valid JSON
    """
    if isinstance(value, (str, bytes, bytearray)):
        try:
            return json.loads(value), None
        except (ValueError, RecursionError) as e:
            return None, make_error(
                ErrorCode.INVALID_JSON,
                "$",
                fix=f"Fix the JSON syntax error: {e}",
            )
    return value, None


def is_record(value: Any) -> bool:
    """True for JSON objects (dicts); arrays and primitives are not records."""
    return isinstance(value, dict)


def has_accepts_array(value: Any) -> bool:
    """True when value is an object whose accepts field is an array."""
    return is_record(value) and isinstance(value.get("accepts"), list)


def _version_equals(value: Any, expected: int) -> bool:
    # bool is an int subclass; true must not read as version 1
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return value == expected


def is_manifest_config(value: Any) -> bool:
    """
    True when value has an endpoints object whose every value is an object
    with an accepts array. An empty endpoints object qualifies.
    """
    if not is_record(value):
        return False
    endpoints = value.get("endpoints")
    if not is_record(endpoints):
        return False
    return all(has_accepts_array(entry) for entry in endpoints.values())


def is_v2_config(value: Any) -> bool:
    """True for an accepts array with x402Version 2."""
    return has_accepts_array(value) and _version_equals(
        value.get("x402Version"), CANONICAL_VERSION
    )


def is_v1_config(value: Any) -> bool:
    """True for an accepts array with x402Version 1."""
    return has_accepts_array(value) and _version_equals(
        value.get("x402Version"), LEGACY_VERSION
    )


def is_flat_legacy_config(value: Any) -> bool:
    """
    True for the versionless flat format of early x402 SDKs: either a
    payments array, or top-level payment fields plus a network/chain field.
    """
    if not is_record(value) or has_accepts_array(value):
        return False

    if isinstance(value.get("payments"), list):
        return True

    has_payment_field = any(
        key in value for key in ("payTo", "address", "amount", "minAmount")
    )
    has_network_field = "network" in value or "chain" in value
    return has_payment_field and has_network_field


def detect(value: Any) -> ConfigFormat:
    """
    Classify an input by its structure.

    Args:
        value: JSON string or parsed value

    Returns:
        "manifest", "v2", "v1" or "unknown"; unparsable JSON and
        non-object values are "unknown"
    """
    parsed, issue = parse_input(value)
    if issue is not None or not is_record(parsed):
        return "unknown"

    if is_manifest_config(parsed):
        return "manifest"
    if is_v2_config(parsed):
        return "v2"
    if is_v1_config(parsed):
        return "v1"
    return "unknown"
