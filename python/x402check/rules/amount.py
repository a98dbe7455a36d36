"""
Location: python/x402check/rules/amount.py

Summary:
    Amount and timeout rules for a single accepts entry. Amounts are
    atomic-unit integers written as strings; timeouts are positive whole
    seconds.
"""

import re
from typing import Any

from ..errors import ErrorCode, ValidationIssue, make_error, make_warning


AMOUNT_PATTERN = re.compile(r"[0-9]+")


def validate_amount(entry: dict[str, Any], path: str) -> list[ValidationIssue]:
    """
    Check that amount is a non-zero decimal integer string.

    A missing amount is left to validate_fields().

    Args:
        entry: Accepts entry
        path: Field path of the entry

    Returns:
        INVALID_AMOUNT or ZERO_AMOUNT error, or nothing
    """
    amount = entry.get("amount")
    if not amount:
        return []

    field = f"{path}.amount"
    if not isinstance(amount, str):
        return [make_error(
            ErrorCode.INVALID_AMOUNT,
            field,
            fix=f'Encode the amount as a string: "{amount}"',
        )]

    if not AMOUNT_PATTERN.fullmatch(amount):
        return [make_error(
            ErrorCode.INVALID_AMOUNT,
            field,
            fix="Use atomic units with digits only, e.g. 1000000 for 1 USDC (6 decimals)",
        )]

    if not amount.lstrip("0"):
        return [make_error(ErrorCode.ZERO_AMOUNT, field)]
    return []


def validate_timeout(entry: dict[str, Any], path: str) -> list[ValidationIssue]:
    """
    Check maxTimeoutSeconds.

    Absent gives a MISSING_MAX_TIMEOUT warning. Anything other than a
    positive whole number (strings, zero, negatives, fractions, booleans)
    is an INVALID_TIMEOUT error.
    """
    field = f"{path}.maxTimeoutSeconds"
    if entry.get("maxTimeoutSeconds") is None:
        return [make_warning(
            ErrorCode.MISSING_MAX_TIMEOUT,
            field,
            fix="Add maxTimeoutSeconds, e.g. 60",
        )]

    timeout = entry["maxTimeoutSeconds"]
    is_whole = (
        not isinstance(timeout, bool)
        and (
            isinstance(timeout, int)
            or (isinstance(timeout, float) and timeout.is_integer())
        )
    )
    if not is_whole or timeout <= 0:
        return [make_error(
            ErrorCode.INVALID_TIMEOUT,
            field,
            fix="Use a positive integer number of seconds, e.g. 60",
        )]
    return []
