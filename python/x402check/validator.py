"""
Location: python/x402check/validator.py

Summary:
    The validation orchestrator. Runs structure, version, accepts,
    per-entry, resource, legacy and extension rules in that order and
    folds their issues into one ValidationResult.

Usage:
    The main entry point for a single config. Only the three structural
    failures (invalid JSON, not an object, unknown format) stop
    evaluation; every other rule always runs.

Example:
    from x402check.validator import validate

    result = validate(config_json)
    strict = validate(config_json, {"strict": True})
    assert strict.warnings == []
"""

from typing import Any, Mapping, Optional, Union

from .addresses import validate_address
from .detection import is_record
from .errors import ValidationIssue
from .normalize import normalize
from .rules import (
    validate_accepts,
    validate_amount,
    validate_asset,
    validate_bazaar,
    validate_fields,
    validate_legacy,
    validate_missing_schema,
    validate_network,
    validate_output_schema,
    validate_resource,
    validate_structure,
    validate_timeout,
    validate_version,
)
from .types import ValidationOptions, ValidationResult


OptionsLike = Union[ValidationOptions, Mapping[str, Any], None]


def resolve_options(options: OptionsLike) -> ValidationOptions:
    """Accept a ValidationOptions, a plain mapping, or None."""
    if options is None:
        return ValidationOptions()
    if isinstance(options, ValidationOptions):
        return options
    return ValidationOptions.model_validate(options)


def _validate_entry(entry: dict[str, Any], path: str) -> list[ValidationIssue]:
    issues = []
    issues.extend(validate_fields(entry, path))
    issues.extend(validate_amount(entry, path))
    issues.extend(validate_timeout(entry, path))
    issues.extend(validate_network(entry, path))
    issues.extend(validate_asset(entry, path))

    pay_to = entry.get("payTo")
    network = entry.get("network")
    if pay_to and isinstance(network, str) and network:
        issues.extend(validate_address(pay_to, network, f"{path}.payTo"))
    return issues


def apply_strict(
    errors: list[ValidationIssue],
    warnings: list[ValidationIssue],
) -> tuple[list[ValidationIssue], list[ValidationIssue]]:
    """Re-tag every warning as an error and append it to errors."""
    promoted = [w.model_copy(update={"severity": "error"}) for w in warnings]
    return errors + promoted, []


def validate(value: Any, options: OptionsLike = None) -> ValidationResult:
    """
    Validate a single x402 config.

    Args:
        value: JSON string or parsed config (v2 or v1)
        options: ValidationOptions or a mapping such as {"strict": True}

    Returns:
        ValidationResult; valid is True iff there are no errors
    """
    opts = resolve_options(options)

    structure = validate_structure(value)
    if structure.issues:
        return ValidationResult(
            valid=False,
            version=structure.format,
            errors=structure.issues,
            warnings=[],
            normalized=None,
        )

    parsed, fmt = structure.parsed, structure.format
    normalized = normalize(parsed)

    issues: list[ValidationIssue] = []
    issues.extend(validate_version(normalized, fmt))
    issues.extend(validate_accepts(normalized))

    accepts = normalized.get("accepts")
    if isinstance(accepts, list):
        for index, entry in enumerate(accepts):
            if is_record(entry):
                issues.extend(_validate_entry(entry, f"accepts[{index}]"))

    issues.extend(validate_resource(normalized))
    issues.extend(validate_legacy(fmt))
    issues.extend(validate_bazaar(normalized))
    issues.extend(validate_output_schema(parsed))
    issues.extend(validate_missing_schema(normalized, parsed))

    errors = [issue for issue in issues if issue.severity == "error"]
    warnings = [issue for issue in issues if issue.severity == "warning"]

    if opts.strict:
        errors, warnings = apply_strict(errors, warnings)

    return ValidationResult(
        valid=not errors,
        version=fmt,
        errors=errors,
        warnings=warnings,
        normalized=normalized,
    )
