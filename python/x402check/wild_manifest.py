"""
Location: python/x402check/wild_manifest.py

Summary:
    Best-effort conversion of non-standard multi-endpoint documents into
    the canonical manifest shape ({"endpoints": {<id>: <config>}}).

Usage:
    validate_manifest() tries this when its input has no endpoints object.
    Two layouts are recognized, in order:
      - array-style: an array of configs under paymentEndpoints, payments,
        configs or endpoints (first matching field wins)
      - nested-style: object-valued keys holding configs directly, or one
        level further down (ids become "<group>-<key>")
    Every conversion emits a warning describing what was done. Entries are
    copied as-is: amounts, addresses, networks and assets are never touched.

Example:
    from x402check.wild_manifest import normalize_wild_manifest

    result = normalize_wild_manifest({
        "payments": [{"x402Version": 2, "accepts": [...],
                      "resource": {"url": "https://api.example.com/weather"}}],
    })
    list(result.manifest["endpoints"])  # ["weather"]
"""

import logging
import re
from typing import Any, Optional
from urllib.parse import urlsplit

from .detection import has_accepts_array, is_record, parse_input
from .errors import ErrorCode, ValidationIssue, make_warning
from .types import WildManifestResult

logger = logging.getLogger(__name__)


ARRAY_FIELDS = ("paymentEndpoints", "payments", "configs", "endpoints")

_SERVICE_TEXT_FIELDS = ("name", "description", "version", "url")
_CONTACT_FIELDS = ("name", "email", "url")
_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+", re.IGNORECASE)


def generate_stable_endpoint_id(
    config: dict[str, Any],
    index: int,
    existing_ids: set[str],
) -> str:
    """
    Derive an endpoint id from the config's resource URL path.

    'https://api.example.com/v1/Weather' gives 'v1-weather'. Configs
    without a usable absolute URL get 'endpoint-<index>'. Collisions are
    resolved with -2, -3, ... suffixes. The chosen id is added to
    existing_ids.

    Args:
        config: Endpoint config
        index: Position of the config in its source array
        existing_ids: Ids already taken

    Returns:
        A unique id
    """
    base_id = f"endpoint-{index}"

    resource = config.get("resource")
    url = resource.get("url") if is_record(resource) else None
    if isinstance(url, str):
        try:
            parts = urlsplit(url)
        except ValueError:
            parts = None
        if parts is not None and parts.scheme and parts.netloc:
            slug = _NON_ALPHANUMERIC.sub("-", parts.path.strip("/")).lower()
            if slug:
                base_id = slug

    final_id = base_id
    collision = 2
    while final_id in existing_ids:
        final_id = f"{base_id}-{collision}"
        collision += 1

    existing_ids.add(final_id)
    return final_id


def _collect_array_endpoints(
    document: dict[str, Any],
) -> tuple[dict[str, Any], Optional[str]]:
    for field_name in ARRAY_FIELDS:
        items = document.get(field_name)
        if not isinstance(items, list):
            continue

        endpoints: dict[str, Any] = {}
        existing_ids: set[str] = set()
        for index, item in enumerate(items):
            if is_record(item):
                endpoint_id = generate_stable_endpoint_id(item, index, existing_ids)
                endpoints[endpoint_id] = dict(item)

        if endpoints:
            return endpoints, field_name
    return {}, None


def _collect_nested_endpoints(document: dict[str, Any]) -> dict[str, Any]:
    groups = [(key, value) for key, value in document.items() if is_record(value)]

    endpoints = {
        key: dict(value) for key, value in groups if has_accepts_array(value)
    }
    if endpoints:
        return endpoints

    for group_key, group in groups:
        for nested_key, nested in group.items():
            if has_accepts_array(nested):
                endpoints[f"{group_key}-{nested_key}"] = dict(nested)
    return endpoints


def _extract_service(document: dict[str, Any]) -> dict[str, Any]:
    service: dict[str, Any] = {}
    source = document.get("service")
    if not is_record(source):
        return service

    for key in _SERVICE_TEXT_FIELDS:
        if isinstance(source.get(key), str):
            service[key] = source[key]

    contact = source.get("contact")
    if is_record(contact):
        service["contact"] = {
            key: contact[key]
            for key in _CONTACT_FIELDS
            if isinstance(contact.get(key), str)
        }
    return service


def normalize_wild_manifest(value: Any) -> Optional[WildManifestResult]:
    """
    Convert a non-standard manifest into the endpoints shape.

    Args:
        value: JSON string or parsed document

    Returns:
        WildManifestResult with the converted manifest and one warning per
        transformation, or None when the input already has an endpoints
        object, is a single config, or matches no known layout
    """
    document, issue = parse_input(value)
    if issue is not None or not is_record(document):
        return None
    if is_record(document.get("endpoints")) or has_accepts_array(document):
        return None

    warnings: list[ValidationIssue] = []

    endpoints, array_field = _collect_array_endpoints(document)
    if array_field is not None:
        warnings.append(make_warning(ErrorCode.WILD_MANIFEST_ARRAY_FORMAT, array_field))
    else:
        endpoints = _collect_nested_endpoints(document)
        if not endpoints:
            return None
        warnings.append(make_warning(ErrorCode.WILD_MANIFEST_NESTED_FORMAT, "endpoints"))

    manifest: dict[str, Any] = {}
    service = _extract_service(document)

    promoted_name = False
    for key in _SERVICE_TEXT_FIELDS:
        top_level = document.get(key)
        if isinstance(top_level, str) and not service.get(key):
            service[key] = top_level
            promoted_name = promoted_name or key == "name"

    contact = document.get("contact")
    if "contact" not in service and is_record(contact):
        service["contact"] = {
            key: contact[key]
            for key in _CONTACT_FIELDS
            if isinstance(contact.get(key), str)
        }

    if service or is_record(document.get("service")):
        manifest["service"] = service
    manifest["endpoints"] = endpoints

    if promoted_name:
        warnings.append(make_warning(
            ErrorCode.WILD_MANIFEST_NAME_PROMOTED,
            "service.name",
            fix="Move name into a service object",
        ))

    if is_record(document.get("extensions")):
        manifest["extensions"] = document["extensions"]

    logger.debug(
        "Converted wild manifest with %d endpoint(s) (%s)",
        len(endpoints),
        array_field or "nested",
    )
    return WildManifestResult(manifest=manifest, warnings=warnings)
