"""
Location: python/x402check/manifest.py

Summary:
    Validation of multi-endpoint manifests. Each endpoint goes through the
    single-config orchestrator, with every field path rewritten to
    endpoints["<id>"].<path>; then manifest-wide checks run:
      - duplicate resource URLs, mixed mainnet/testnet networks and
        duplicate bazaar routes (warnings)
      - bazaar method/shape contradictions, e.g. a GET with a body (errors)

Usage:
    validate_manifest() never raises. Any unexpected failure is logged
    and returned as a single INVALID_ENDPOINTS error.

Example:
    from x402check.manifest import validate_manifest

    result = validate_manifest({"endpoints": {"weather": weather_config}})
    for endpoint_id, endpoint_result in result.endpoint_results.items():
        print(endpoint_id, endpoint_result.valid)
"""

import json
import logging
from typing import Any, Optional

from .detection import is_record, parse_input
from .errors import ErrorCode, ValidationIssue, make_error, make_warning
from .registries import get_network_info
from .types import ManifestValidationResult, ValidationResult
from .validator import validate
from .wild_manifest import normalize_wild_manifest

logger = logging.getLogger(__name__)


BODY_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


def endpoint_path(endpoint_id: str) -> str:
    """Bracket-quoted field path for an endpoint id, with JSON escaping."""
    return f"endpoints[{json.dumps(endpoint_id, ensure_ascii=False)}]"


def prefix_issue(issue: ValidationIssue, prefix: str) -> ValidationIssue:
    """Re-path an issue under prefix; the root path '$' becomes prefix itself."""
    field = prefix if issue.field == "$" else f"{prefix}.{issue.field}"
    return issue.model_copy(update={"field": field})


def _prefix_result(result: ValidationResult, prefix: str) -> ValidationResult:
    return result.model_copy(update={
        "errors": [prefix_issue(issue, prefix) for issue in result.errors],
        "warnings": [prefix_issue(issue, prefix) for issue in result.warnings],
    })


def _effective_config(config: Any, result: ValidationResult) -> dict[str, Any]:
    # v1 endpoints only expose a top-level resource after normalization
    if result.normalized is not None:
        return result.normalized
    return config if is_record(config) else {}


def _resource_url(config: dict[str, Any]) -> Optional[str]:
    resource = config.get("resource")
    url = resource.get("url") if is_record(resource) else None
    return url if isinstance(url, str) and url else None


def _bazaar_input(config: dict[str, Any]) -> Optional[dict[str, Any]]:
    extensions = config.get("extensions")
    bazaar = extensions.get("bazaar") if is_record(extensions) else None
    info = bazaar.get("info") if is_record(bazaar) else None
    block = info.get("input") if is_record(info) else None
    return block if is_record(block) else None


def _bazaar_method(config: dict[str, Any]) -> Optional[str]:
    block = _bazaar_input(config)
    method = block.get("method") if block is not None else None
    return method.upper() if isinstance(method, str) and method else None


def _count(keys: list[str]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for key in keys:
        counts[key] = counts.get(key, 0) + 1
    return counts


def check_duplicate_urls(configs: list[dict[str, Any]]) -> list[ValidationIssue]:
    """One warning per resource URL shared by more than one endpoint."""
    urls = [url for url in map(_resource_url, configs) if url is not None]
    return [
        make_warning(
            ErrorCode.DUPLICATE_ENDPOINT_URL,
            "endpoints",
            message=f"{count} endpoints share the same URL: {url}",
            fix="Ensure each endpoint has a unique URL, or use different HTTP methods if intentional",
        )
        for url, count in _count(urls).items()
        if count > 1
    ]


def check_mixed_networks(configs: list[dict[str, Any]]) -> list[ValidationIssue]:
    """
    Warn when known mainnet and known testnet networks appear together.

    Networks missing from the registry are ignored.
    """
    mainnets: list[str] = []
    testnets: list[str] = []
    seen: set[str] = set()

    for config in configs:
        accepts = config.get("accepts")
        if not isinstance(accepts, list):
            continue
        for entry in accepts:
            network = entry.get("network") if is_record(entry) else None
            if not isinstance(network, str) or network in seen:
                continue
            seen.add(network)
            info = get_network_info(network)
            if info is not None:
                (testnets if info.testnet else mainnets).append(info.name)

    if not (mainnets and testnets):
        return []
    return [make_warning(
        ErrorCode.MIXED_NETWORKS,
        "endpoints",
        message=(
            "Manifest mixes mainnet and testnet networks "
            f"(mainnet: {', '.join(mainnets)}; testnet: {', '.join(testnets)})"
        ),
        fix="Consider separating mainnet and testnet manifests for clarity and safety",
    )]


def check_duplicate_bazaar_routes(configs: list[dict[str, Any]]) -> list[ValidationIssue]:
    """One warning per bazaar method + resource URL declared more than once."""
    routes = []
    for config in configs:
        method = _bazaar_method(config)
        url = _resource_url(config)
        if method and url:
            routes.append(f"{method} {url}")

    return [
        make_warning(
            ErrorCode.DUPLICATE_BAZAAR_ROUTE,
            "extensions.bazaar",
            message=f"{count} endpoints share the same HTTP method + path: {route}",
            fix="Ensure each bazaar endpoint has a unique method+path combination",
        )
        for route, count in _count(routes).items()
        if count > 1
    ]


def check_bazaar_method_shape(config: dict[str, Any], endpoint_id: str) -> list[ValidationIssue]:
    """
    Reject bazaar inputs whose shape contradicts their method.

    GET must declare queryParams and no body; POST, PUT, PATCH and DELETE
    must declare a body and no queryParams. Method matching ignores case.
    """
    block = _bazaar_input(config)
    method = _bazaar_method(config)
    if block is None or method is None:
        return []

    prefix = f"{endpoint_path(endpoint_id)}.extensions.bazaar.info.input"
    issues = []

    if method == "GET":
        if "body" in block:
            issues.append(make_error(
                ErrorCode.BAZAAR_GET_WITH_BODY,
                f"{prefix}.body",
                fix="Remove body field and use queryParams for GET requests, or change method to POST",
            ))
        if "queryParams" not in block:
            issues.append(make_error(
                ErrorCode.BAZAAR_GET_MISSING_QUERY_PARAMS,
                f"{prefix}.queryParams",
                fix="Add queryParams field with JSON Schema describing query parameters",
            ))
    elif method in BODY_METHODS:
        if "queryParams" in block:
            issues.append(make_error(
                ErrorCode.BAZAAR_POST_WITH_QUERY_PARAMS,
                f"{prefix}.queryParams",
                fix=f"Remove queryParams field and use body for {method} requests, or change method to GET",
            ))
        if "body" not in block:
            issues.append(make_error(
                ErrorCode.BAZAAR_POST_MISSING_BODY,
                f"{prefix}.body",
                fix="Add body field with JSON Schema describing request body",
            ))

    return issues


def validate_manifest(value: Any) -> ManifestValidationResult:
    """
    Validate a manifest of independently payable endpoints.

    Documents without an endpoints object are first passed through
    normalize_wild_manifest(); its warnings are reported at manifest level.

    Args:
        value: JSON string or parsed manifest

    Returns:
        ManifestValidationResult. valid is True when every endpoint is valid
        and there are no manifest-level errors; an empty endpoints object is
        valid.
    """
    try:
        return _run_manifest_validation(value)
    except Exception as e:
        logger.exception("Unexpected error while validating manifest")
        return ManifestValidationResult(
            valid=False,
            errors=[make_error(
                ErrorCode.INVALID_ENDPOINTS,
                "endpoints",
                message=f"Unexpected manifest validation error: {e}",
            )],
            warnings=[],
            endpoint_results={},
            normalized=value if is_record(value) else None,
        )


def _run_manifest_validation(value: Any) -> ManifestValidationResult:
    manifest, issue = parse_input(value)
    if issue is not None:
        return ManifestValidationResult(valid=False, errors=[issue])

    warnings: list[ValidationIssue] = []
    if is_record(manifest) and not is_record(manifest.get("endpoints")):
        wild = normalize_wild_manifest(manifest)
        if wild is not None:
            manifest = wild.manifest
            warnings.extend(wild.warnings)

    if not is_record(manifest) or not is_record(manifest.get("endpoints")):
        return ManifestValidationResult(
            valid=False,
            errors=[make_error(
                ErrorCode.MISSING_ENDPOINTS,
                "endpoints",
                fix="Add endpoints object with at least one endpoint configuration",
            )],
            normalized=manifest if is_record(manifest) else None,
        )

    endpoints = manifest["endpoints"]
    if not endpoints:
        return ManifestValidationResult(
            valid=True,
            warnings=warnings,
            normalized=manifest,
        )

    endpoint_results: dict[str, ValidationResult] = {}
    configs: list[dict[str, Any]] = []
    errors: list[ValidationIssue] = []

    for endpoint_id, config in endpoints.items():
        result = validate(config)
        endpoint_results[endpoint_id] = _prefix_result(result, endpoint_path(endpoint_id))
        configs.append(_effective_config(config, result))

    warnings.extend(check_duplicate_urls(configs))
    warnings.extend(check_mixed_networks(configs))
    warnings.extend(check_duplicate_bazaar_routes(configs))

    for endpoint_id, config in zip(endpoints, configs):
        errors.extend(check_bazaar_method_shape(config, endpoint_id))

    valid = all(result.valid for result in endpoint_results.values()) and not errors
    return ManifestValidationResult(
        valid=valid,
        errors=errors,
        warnings=warnings,
        endpoint_results=endpoint_results,
        normalized=manifest,
    )
