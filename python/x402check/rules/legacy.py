"""
Location: python/x402check/rules/legacy.py

Summary:
    Flags configs that were written in the x402 v1 format.
"""

from ..errors import ErrorCode, ValidationIssue, make_warning
from ..types import ConfigFormat


def validate_legacy(fmt: ConfigFormat) -> list[ValidationIssue]:
    """Return a LEGACY_FORMAT warning when the input was v1."""
    if fmt != "v1":
        return []
    return [make_warning(
        ErrorCode.LEGACY_FORMAT,
        "$",
        fix="Upgrade to x402Version: 2 and use amount instead of maxAmountRequired",
    )]
