"""
Location: python/x402check/rules/version.py

Summary:
    x402Version check on a normalized config. normalize() always writes 2,
    so this only fires for hand-built configs.
"""

from typing import Any

from ..errors import ErrorCode, ValidationIssue, make_error
from ..types import CANONICAL_VERSION, LEGACY_VERSION, ConfigFormat


def validate_version(config: dict[str, Any], fmt: ConfigFormat = "v2") -> list[ValidationIssue]:
    """
    Check that x402Version is 2 (or 1 when the detected format is v1).

    Args:
        config: Normalized config
        fmt: Detected format of the original input

    Returns:
        MISSING_VERSION or INVALID_VERSION error, or nothing
    """
    if "x402Version" not in config:
        return [make_error(
            ErrorCode.MISSING_VERSION,
            "x402Version",
            fix=f"Add x402Version: {CANONICAL_VERSION}",
        )]

    version = config["x402Version"]
    allowed = {CANONICAL_VERSION}
    if fmt == "v1":
        allowed.add(LEGACY_VERSION)

    if (
        isinstance(version, bool)
        or not isinstance(version, (int, float))
        or version not in allowed
    ):
        return [make_error(
            ErrorCode.INVALID_VERSION,
            "x402Version",
            fix=f"Set x402Version to {CANONICAL_VERSION}",
        )]
    return []
