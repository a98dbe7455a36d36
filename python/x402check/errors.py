"""
Location: python/x402check/errors.py

Summary:
    The closed vocabulary of issue codes, the message registered for each
    code, and the ValidationIssue record every rule emits.

Usage:
    Rule functions build issues through make_error() and make_warning(),
    which fill in the registered message unless a more specific one is
    given. ERROR_MESSAGES must hold exactly one entry per ErrorCode.

Example:
    from x402check.errors import ErrorCode, make_error

    issue = make_error(ErrorCode.MISSING_AMOUNT, "accepts[0].amount")
    issue.message  # "Missing required field: amount"
"""

from enum import Enum
from types import MappingProxyType
from typing import Literal, Mapping, Optional

from pydantic import BaseModel


Severity = Literal["error", "warning"]


class ErrorCode(str, Enum):
    """Stable issue codes. Values equal their names so they serialize as-is."""

    # Structure
    INVALID_JSON = "INVALID_JSON"
    NOT_OBJECT = "NOT_OBJECT"
    UNKNOWN_FORMAT = "UNKNOWN_FORMAT"

    # Version
    MISSING_VERSION = "MISSING_VERSION"
    INVALID_VERSION = "INVALID_VERSION"

    # Accepts
    MISSING_ACCEPTS = "MISSING_ACCEPTS"
    EMPTY_ACCEPTS = "EMPTY_ACCEPTS"
    INVALID_ACCEPTS = "INVALID_ACCEPTS"

    # Fields
    MISSING_SCHEME = "MISSING_SCHEME"
    MISSING_NETWORK = "MISSING_NETWORK"
    INVALID_NETWORK_FORMAT = "INVALID_NETWORK_FORMAT"
    MISSING_AMOUNT = "MISSING_AMOUNT"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    ZERO_AMOUNT = "ZERO_AMOUNT"
    MISSING_ASSET = "MISSING_ASSET"
    MISSING_PAY_TO = "MISSING_PAY_TO"
    MISSING_RESOURCE = "MISSING_RESOURCE"
    INVALID_URL = "INVALID_URL"
    INVALID_TIMEOUT = "INVALID_TIMEOUT"

    # Addresses
    INVALID_EVM_ADDRESS = "INVALID_EVM_ADDRESS"
    BAD_EVM_CHECKSUM = "BAD_EVM_CHECKSUM"
    NO_EVM_CHECKSUM = "NO_EVM_CHECKSUM"
    INVALID_SOLANA_ADDRESS = "INVALID_SOLANA_ADDRESS"
    INVALID_STACKS_ADDRESS = "INVALID_STACKS_ADDRESS"
    STACKS_NETWORK_MISMATCH = "STACKS_NETWORK_MISMATCH"

    # Advisories
    UNKNOWN_NETWORK = "UNKNOWN_NETWORK"
    UNKNOWN_ASSET = "UNKNOWN_ASSET"
    LEGACY_FORMAT = "LEGACY_FORMAT"
    MISSING_MAX_TIMEOUT = "MISSING_MAX_TIMEOUT"

    # Extensions
    INVALID_BAZAAR_INFO = "INVALID_BAZAAR_INFO"
    INVALID_BAZAAR_INFO_INPUT = "INVALID_BAZAAR_INFO_INPUT"
    INVALID_BAZAAR_SCHEMA = "INVALID_BAZAAR_SCHEMA"
    INVALID_OUTPUT_SCHEMA = "INVALID_OUTPUT_SCHEMA"
    INVALID_OUTPUT_SCHEMA_INPUT = "INVALID_OUTPUT_SCHEMA_INPUT"
    MISSING_INPUT_SCHEMA = "MISSING_INPUT_SCHEMA"

    # Manifest
    MISSING_ENDPOINTS = "MISSING_ENDPOINTS"
    INVALID_ENDPOINTS = "INVALID_ENDPOINTS"
    WILD_MANIFEST_ARRAY_FORMAT = "WILD_MANIFEST_ARRAY_FORMAT"
    WILD_MANIFEST_NESTED_FORMAT = "WILD_MANIFEST_NESTED_FORMAT"
    WILD_MANIFEST_NAME_PROMOTED = "WILD_MANIFEST_NAME_PROMOTED"
    DUPLICATE_ENDPOINT_URL = "DUPLICATE_ENDPOINT_URL"
    MIXED_NETWORKS = "MIXED_NETWORKS"
    DUPLICATE_BAZAAR_ROUTE = "DUPLICATE_BAZAAR_ROUTE"
    BAZAAR_GET_WITH_BODY = "BAZAAR_GET_WITH_BODY"
    BAZAAR_GET_MISSING_QUERY_PARAMS = "BAZAAR_GET_MISSING_QUERY_PARAMS"
    BAZAAR_POST_WITH_QUERY_PARAMS = "BAZAAR_POST_WITH_QUERY_PARAMS"
    BAZAAR_POST_MISSING_BODY = "BAZAAR_POST_MISSING_BODY"


ERROR_MESSAGES: Mapping[ErrorCode, str] = MappingProxyType({
    ErrorCode.INVALID_JSON: "Input is not valid JSON",
    ErrorCode.NOT_OBJECT: "Input must be an object",
    ErrorCode.UNKNOWN_FORMAT: "Config format could not be detected",
    ErrorCode.MISSING_VERSION: "Missing required field: x402Version",
    ErrorCode.INVALID_VERSION: "Invalid x402Version value (must be 2, or 1 for legacy configs)",
    ErrorCode.MISSING_ACCEPTS: "Missing required field: accepts",
    ErrorCode.EMPTY_ACCEPTS: "accepts array cannot be empty",
    ErrorCode.INVALID_ACCEPTS: "accepts must be an array of payment option objects",
    ErrorCode.MISSING_SCHEME: "Missing required field: scheme",
    ErrorCode.MISSING_NETWORK: "Missing required field: network",
    ErrorCode.INVALID_NETWORK_FORMAT: (
        "Network must use CAIP-2 format (namespace:reference), e.g. eip155:8453"
    ),
    ErrorCode.MISSING_AMOUNT: "Missing required field: amount",
    ErrorCode.INVALID_AMOUNT: "Amount must be a numeric string in atomic units",
    ErrorCode.ZERO_AMOUNT: "Amount must be greater than zero",
    ErrorCode.MISSING_ASSET: "Missing required field: asset",
    ErrorCode.MISSING_PAY_TO: "Missing required field: payTo",
    ErrorCode.MISSING_RESOURCE: "Missing resource URL",
    ErrorCode.INVALID_URL: "Resource URL is not a valid URL",
    ErrorCode.INVALID_TIMEOUT: "maxTimeoutSeconds must be a positive integer",
    ErrorCode.INVALID_EVM_ADDRESS: "Invalid EVM address format",
    ErrorCode.BAD_EVM_CHECKSUM: "EVM address has invalid checksum",
    ErrorCode.NO_EVM_CHECKSUM: "EVM address is all-lowercase and has no checksum protection",
    ErrorCode.INVALID_SOLANA_ADDRESS: "Invalid Solana address format",
    ErrorCode.INVALID_STACKS_ADDRESS: "Invalid Stacks address format",
    ErrorCode.STACKS_NETWORK_MISMATCH: "Stacks address version does not match the network",
    ErrorCode.UNKNOWN_NETWORK: (
        "Network is not in the known registry -- config may still work "
        "but cannot be fully validated"
    ),
    ErrorCode.UNKNOWN_ASSET: (
        "Asset is not in the known registry -- config may still work "
        "but cannot be fully validated"
    ),
    ErrorCode.LEGACY_FORMAT: "Config uses x402 v1 format -- consider upgrading to v2",
    ErrorCode.MISSING_MAX_TIMEOUT: "Consider adding maxTimeoutSeconds for better security",
    ErrorCode.INVALID_BAZAAR_INFO: "extensions.bazaar is missing or has an invalid info block",
    ErrorCode.INVALID_BAZAAR_INFO_INPUT: "extensions.bazaar.info.input must declare type and method",
    ErrorCode.INVALID_BAZAAR_SCHEMA: "extensions.bazaar.schema must be a JSON Schema object",
    ErrorCode.INVALID_OUTPUT_SCHEMA: "outputSchema is missing or has an invalid shape",
    ErrorCode.INVALID_OUTPUT_SCHEMA_INPUT: "outputSchema.input must declare type and method",
    ErrorCode.MISSING_INPUT_SCHEMA: (
        "No input schema declared -- agents cannot discover how to call this endpoint"
    ),
    ErrorCode.MISSING_ENDPOINTS: "Manifest must have an endpoints object",
    ErrorCode.INVALID_ENDPOINTS: "Manifest endpoints could not be validated",
    ErrorCode.WILD_MANIFEST_ARRAY_FORMAT: (
        "Manifest uses a non-standard array of endpoints -- converted to an endpoints object"
    ),
    ErrorCode.WILD_MANIFEST_NESTED_FORMAT: (
        "Manifest uses non-standard nested endpoint groups -- converted to an endpoints object"
    ),
    ErrorCode.WILD_MANIFEST_NAME_PROMOTED: (
        "Top-level name was promoted to service.name"
    ),
    ErrorCode.DUPLICATE_ENDPOINT_URL: "Multiple endpoints share the same resource URL",
    ErrorCode.MIXED_NETWORKS: "Manifest mixes mainnet and testnet networks",
    ErrorCode.DUPLICATE_BAZAAR_ROUTE: "Multiple endpoints declare the same HTTP method and path",
    ErrorCode.BAZAAR_GET_WITH_BODY: "GET endpoints must not declare a request body",
    ErrorCode.BAZAAR_GET_MISSING_QUERY_PARAMS: "GET endpoints should declare queryParams",
    ErrorCode.BAZAAR_POST_WITH_QUERY_PARAMS: (
        "POST/PUT/PATCH/DELETE endpoints must not declare queryParams"
    ),
    ErrorCode.BAZAAR_POST_MISSING_BODY: "POST/PUT/PATCH/DELETE endpoints must declare a body",
})


class ValidationIssue(BaseModel):
    """
    A single problem found in a config.

    Attributes:
        code: Stable issue code
        field: Path to the offending value, e.g. 'accepts[0].amount' or
               'endpoints["weather"].accepts[0].payTo'; '$' is the root
        message: Human-readable description
        severity: "error" invalidates the config, "warning" is advisory
        fix: Suggested remedy, omitted when none can be computed
    """
    code: ErrorCode
    field: str
    message: str
    severity: Severity
    fix: Optional[str] = None

    model_config = {"populate_by_name": True, "frozen": True}


def make_error(
    code: ErrorCode,
    field: str,
    message: Optional[str] = None,
    fix: Optional[str] = None,
) -> ValidationIssue:
    """Build an error issue, defaulting to the registered message."""
    return ValidationIssue(
        code=code,
        field=field,
        message=message or ERROR_MESSAGES[code],
        severity="error",
        fix=fix,
    )


def make_warning(
    code: ErrorCode,
    field: str,
    message: Optional[str] = None,
    fix: Optional[str] = None,
) -> ValidationIssue:
    """Build a warning issue, defaulting to the registered message."""
    return ValidationIssue(
        code=code,
        field=field,
        message=message or ERROR_MESSAGES[code],
        severity="warning",
        fix=fix,
    )
