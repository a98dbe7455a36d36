"""
Location: python/x402check/rules/extensions.py

Summary:
    Shape checks for the two ways a config can describe how to call the
    paid endpoint: extensions.bazaar (info.input / info.output / schema)
    and per-entry accepts[i].outputSchema (input / output). Every issue
    here is a warning.

Usage:
    validate_bazaar() takes the normalized config. validate_output_schema()
    and validate_missing_schema() take the parsed input, because v1
    normalization does not carry outputSchema across.
"""

from typing import Any, Optional

from ..detection import is_record
from ..errors import ErrorCode, ValidationIssue, make_warning


# Keys that mark an object as a JSON Schema document
JSON_SCHEMA_KEYS = frozenset({
    "$schema", "$ref", "$id", "type", "properties", "items",
    "required", "enum", "oneOf", "anyOf", "allOf", "const",
})

_INPUT_REQUIRED = ("type", "method")


def _check_input(
    block: Any,
    field: str,
    code: ErrorCode,
    label: str,
) -> list[ValidationIssue]:
    if not is_record(block):
        return [make_warning(
            code,
            field,
            message=f"{label} is missing",
            fix=f'Add {label}: {{"type": "http", "method": "GET"}}',
        )]
    return [
        make_warning(
            code,
            field,
            message=f"{label} is missing {key}",
            fix=f"Add {label}.{key}",
        )
        for key in _INPUT_REQUIRED
        if not block.get(key)
    ]


def _bazaar(config: dict[str, Any]) -> Optional[Any]:
    extensions = config.get("extensions")
    if is_record(extensions) and "bazaar" in extensions:
        return extensions["bazaar"]
    return None


def validate_bazaar(config: dict[str, Any]) -> list[ValidationIssue]:
    """
    Check the bazaar discovery extension, if present.

    Args:
        config: Normalized config

    Returns:
        Warnings naming each missing or malformed part
    """
    bazaar = _bazaar(config)
    if bazaar is None:
        return []

    if not is_record(bazaar):
        return [make_warning(
            ErrorCode.INVALID_BAZAAR_INFO,
            "extensions.bazaar",
            message="extensions.bazaar must be an object",
        )]

    issues: list[ValidationIssue] = []

    info = bazaar.get("info")
    if not is_record(info):
        issues.append(make_warning(
            ErrorCode.INVALID_BAZAAR_INFO,
            "extensions.bazaar.info",
            message="extensions.bazaar.info is missing",
            fix="Add info with input and output descriptions",
        ))
    else:
        issues.extend(_check_input(
            info.get("input"),
            "extensions.bazaar.info.input",
            ErrorCode.INVALID_BAZAAR_INFO_INPUT,
            "extensions.bazaar.info.input",
        ))
        if not is_record(info.get("output")):
            issues.append(make_warning(
                ErrorCode.INVALID_BAZAAR_INFO,
                "extensions.bazaar.info.output",
                message="extensions.bazaar.info.output is missing",
                fix="Describe the response in info.output",
            ))

    schema = bazaar.get("schema")
    if not is_record(schema) or not JSON_SCHEMA_KEYS.intersection(schema):
        issues.append(make_warning(
            ErrorCode.INVALID_BAZAAR_SCHEMA,
            "extensions.bazaar.schema",
            fix="Add a JSON Schema describing info, e.g. {\"type\": \"object\", \"properties\": {...}}",
        ))

    return issues


def _output_schemas(parsed: Any):
    accepts = parsed.get("accepts") if is_record(parsed) else None
    if not isinstance(accepts, list):
        return
    for index, entry in enumerate(accepts):
        if is_record(entry) and "outputSchema" in entry:
            yield index, entry["outputSchema"]


def validate_output_schema(parsed: Any) -> list[ValidationIssue]:
    """
    Check accepts[i].outputSchema on every entry that declares one.

    Args:
        parsed: The parsed (not normalized) config

    Returns:
        Warnings for each malformed outputSchema
    """
    issues: list[ValidationIssue] = []

    for index, output_schema in _output_schemas(parsed):
        field = f"accepts[{index}].outputSchema"
        if not is_record(output_schema):
            issues.append(make_warning(
                ErrorCode.INVALID_OUTPUT_SCHEMA,
                field,
                message="outputSchema must be an object",
            ))
            continue

        issues.extend(_check_input(
            output_schema.get("input"),
            f"{field}.input",
            ErrorCode.INVALID_OUTPUT_SCHEMA_INPUT,
            "outputSchema.input",
        ))
        if not is_record(output_schema.get("output")):
            issues.append(make_warning(
                ErrorCode.INVALID_OUTPUT_SCHEMA,
                f"{field}.output",
                message="outputSchema.output is missing",
                fix="Describe the response in outputSchema.output",
            ))

    return issues


def validate_missing_schema(config: dict[str, Any], parsed: Any) -> list[ValidationIssue]:
    """Recommend an input schema when neither bazaar nor outputSchema is declared."""
    if _bazaar(config) is not None or any(True for _ in _output_schemas(parsed)):
        return []
    return [make_warning(
        ErrorCode.MISSING_INPUT_SCHEMA,
        "extensions",
        fix="Add extensions.bazaar with info.input so agents can discover how to call this endpoint",
    )]
