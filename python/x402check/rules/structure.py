"""
Location: python/x402check/rules/structure.py

Summary:
    The terminal structural checks: the input must parse as JSON, be an
    object, and match a known config format. When any of these fails no
    other rule runs.
"""

from typing import Any, NamedTuple, Optional

from ..detection import detect, is_record, parse_input
from ..errors import ErrorCode, ValidationIssue, make_error
from ..types import ConfigFormat


class StructureResult(NamedTuple):
    """Parsed input, its detected format, and any terminal issue."""
    parsed: Optional[dict[str, Any]]
    format: ConfigFormat
    issues: list[ValidationIssue]


def validate_structure(value: Any) -> StructureResult:
    """
    Parse and classify an input.

    Args:
        value: JSON string or parsed value

    Returns:
        StructureResult; issues holds at most one of INVALID_JSON,
        NOT_OBJECT or UNKNOWN_FORMAT
    """
    parsed, issue = parse_input(value)
    if issue is not None:
        return StructureResult(None, "unknown", [issue])

    if not is_record(parsed):
        kind = "an array" if isinstance(parsed, list) else type(parsed).__name__
        if parsed is None:
            kind = "null"
        return StructureResult(None, "unknown", [make_error(
            ErrorCode.NOT_OBJECT,
            "$",
            fix=f"Wrap the config in a JSON object (got {kind})",
        )])

    fmt = detect(parsed)
    if fmt == "unknown":
        return StructureResult(parsed, fmt, [make_error(
            ErrorCode.UNKNOWN_FORMAT,
            "$",
            fix="Add x402Version: 2 and an accepts array of payment options",
        )])
    if fmt == "manifest":
        return StructureResult(parsed, fmt, [make_error(
            ErrorCode.UNKNOWN_FORMAT,
            "$",
            message="Input is a multi-endpoint manifest, not a single config",
            fix="Validate manifests with validate_manifest()",
        )])

    return StructureResult(parsed, fmt, [])
