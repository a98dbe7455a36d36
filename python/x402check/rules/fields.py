"""
Location: python/x402check/rules/fields.py

Summary:
    Shape rules: the accepts array, the required fields of each accepts
    entry, and the top-level resource URL.
"""

import re
from typing import Any
from urllib.parse import urlsplit

from ..detection import is_record
from ..errors import ErrorCode, ValidationIssue, make_error, make_warning


REQUIRED_ENTRY_FIELDS = (
    ("scheme", ErrorCode.MISSING_SCHEME),
    ("network", ErrorCode.MISSING_NETWORK),
    ("amount", ErrorCode.MISSING_AMOUNT),
    ("asset", ErrorCode.MISSING_ASSET),
    ("payTo", ErrorCode.MISSING_PAY_TO),
)

_URL_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+.-]*")


def validate_accepts(config: dict[str, Any]) -> list[ValidationIssue]:
    """
    Check that accepts is present, is an array, and is not empty.

    Non-object entries are reported individually as INVALID_ACCEPTS.
    """
    if "accepts" not in config:
        return [make_error(ErrorCode.MISSING_ACCEPTS, "accepts")]

    accepts = config["accepts"]
    if not isinstance(accepts, list):
        return [make_error(ErrorCode.INVALID_ACCEPTS, "accepts")]
    if not accepts:
        return [make_error(
            ErrorCode.EMPTY_ACCEPTS,
            "accepts",
            fix="Add at least one payment option to accepts",
        )]

    return [
        make_error(
            ErrorCode.INVALID_ACCEPTS,
            f"accepts[{index}]",
            message=f"accepts[{index}] must be an object",
        )
        for index, entry in enumerate(accepts)
        if not is_record(entry)
    ]


def validate_fields(entry: dict[str, Any], path: str) -> list[ValidationIssue]:
    """
    Report each missing or empty required field of one accepts entry.

    Args:
        entry: Accepts entry
        path: Field path of the entry, e.g. 'accepts[0]'

    Returns:
        One error per missing field
    """
    return [
        make_error(code, f"{path}.{key}")
        for key, code in REQUIRED_ENTRY_FIELDS
        if not entry.get(key)
    ]


def is_valid_url(value: Any) -> bool:
    """True for absolute URLs with a well-formed scheme."""
    if not isinstance(value, str):
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return bool(parts.scheme) and _URL_SCHEME.fullmatch(parts.scheme) is not None


def validate_resource(config: dict[str, Any]) -> list[ValidationIssue]:
    """
    Check the top-level resource URL.

    An absent resource and an empty URL both produce MISSING_RESOURCE; a
    URL that does not parse produces INVALID_URL. Both are warnings.
    """
    resource = config.get("resource")
    if not is_record(resource):
        return [make_warning(
            ErrorCode.MISSING_RESOURCE,
            "resource",
            fix="Add resource.url so clients know which endpoint they are paying for",
        )]

    url = resource.get("url")
    if url is None or url == "":
        return [make_warning(
            ErrorCode.MISSING_RESOURCE,
            "resource.url",
            fix="Add resource.url so clients know which endpoint they are paying for",
        )]

    if not is_valid_url(url):
        return [make_warning(
            ErrorCode.INVALID_URL,
            "resource.url",
            message=f"Resource URL is not a valid URL: {url!r}",
            fix="Use an absolute URL such as https://api.example.com/resource",
        )]
    return []
