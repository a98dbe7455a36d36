"""
Location: python/x402check/types.py

Summary:
    Config shapes and result models for x402check. Config documents stay
    plain JSON dicts (the TypedDicts below describe them); results are
    frozen pydantic models with camelCase aliases matching the JSON shape
    other x402 tooling expects.

Usage:
    Returned by validator.validate(), manifest.validate_manifest(),
    extraction.extract_config() and check.check().
    result.model_dump(by_alias=True) gives the camelCase wire form.

Example:
    from x402check import validate

    result = validate('{"x402Version": 2, "accepts": [...]}')
    if not result.valid:
        for issue in result.errors:
            print(issue.field, issue.message)
"""

from typing import Any, Literal, Optional, TypedDict

from pydantic import BaseModel, Field

from .errors import ValidationIssue


ConfigFormat = Literal["manifest", "v2", "v1", "unknown"]
ExtractionSource = Literal["body", "header"]

CANONICAL_VERSION = 2
LEGACY_VERSION = 1


class Resource(TypedDict, total=False):
    url: str
    method: str
    headers: dict[str, str]
    body: Any


class AcceptsEntry(TypedDict, total=False):
    scheme: str
    network: str
    amount: str
    asset: str
    payTo: str
    maxTimeoutSeconds: int
    extra: dict[str, Any]


class NormalizedConfig(TypedDict, total=False):
    x402Version: int
    accepts: list[AcceptsEntry]
    resource: Resource
    error: str
    extensions: dict[str, Any]


class ServiceMetadata(TypedDict, total=False):
    name: str
    description: str
    version: str
    url: str
    contact: dict[str, str]


class ManifestConfig(TypedDict, total=False):
    x402Version: int
    service: ServiceMetadata
    endpoints: dict[str, NormalizedConfig]
    extensions: dict[str, Any]


class ValidationOptions(BaseModel):
    """
    Options for validate() and check().

    Attributes:
        strict: Promote every warning to an error
    """
    strict: bool = False

    model_config = {"frozen": True}


class ValidationResult(BaseModel):
    """
    Outcome of validating a single config.

    Attributes:
        valid: True iff errors is empty
        version: Detected format of the input
        errors: Issues with severity "error", in rule order
        warnings: Issues with severity "warning", in rule order
        normalized: Canonical v2 form, None only when the input could not
                    be parsed or its format was not recognized
    """
    valid: bool
    version: ConfigFormat
    errors: list[ValidationIssue] = Field(default_factory=list)
    warnings: list[ValidationIssue] = Field(default_factory=list)
    normalized: Optional[dict[str, Any]] = None

    model_config = {"populate_by_name": True, "frozen": True}


class ManifestValidationResult(BaseModel):
    """
    Outcome of validating a multi-endpoint manifest.

    Attributes:
        valid: Every endpoint is valid and there are no manifest-level errors
        errors: Manifest-level errors
        warnings: Manifest-level warnings (never affect validity)
        endpoint_results: Per-endpoint results, field paths prefixed with
                          endpoints["<id>"]
        normalized: The manifest that was validated, after any wild-format
                    conversion
    """
    valid: bool
    errors: list[ValidationIssue] = Field(default_factory=list)
    warnings: list[ValidationIssue] = Field(default_factory=list)
    endpoint_results: dict[str, ValidationResult] = Field(
        default_factory=dict, alias="endpointResults"
    )
    normalized: Optional[dict[str, Any]] = None

    model_config = {"populate_by_name": True, "frozen": True}


class WildManifestResult(BaseModel):
    """A non-standard manifest converted to the endpoints shape."""
    manifest: dict[str, Any]
    warnings: list[ValidationIssue] = Field(default_factory=list)

    model_config = {"populate_by_name": True, "frozen": True}


class ExtractionResult(BaseModel):
    """Config pulled out of an HTTP response, or the reason none was found."""
    config: Optional[dict[str, Any]] = None
    source: Optional[ExtractionSource] = None
    error: Optional[str] = None

    model_config = {"populate_by_name": True, "frozen": True}


class CheckSummary(BaseModel):
    """
    Human-oriented view of one accepts entry.

    Attributes:
        index: Position in the accepts array
        network: Raw network identifier
        network_name: Registry display name, or the raw identifier if unknown
        network_type: Registry chain family, None if unknown
        asset: Raw asset identifier
        asset_symbol: Registry symbol, None if unknown
        asset_decimals: Registry decimals, None if unknown
        scheme: Payment scheme
        pay_to: Payee address
        amount: Amount in atomic units, as declared
        display_amount: Amount in whole tokens, None if amount is not numeric
    """
    index: int
    network: str
    network_name: str = Field(alias="networkName")
    network_type: Optional[str] = Field(default=None, alias="networkType")
    asset: str
    asset_symbol: Optional[str] = Field(default=None, alias="assetSymbol")
    asset_decimals: Optional[int] = Field(default=None, alias="assetDecimals")
    scheme: str
    pay_to: str = Field(alias="payTo")
    amount: str
    display_amount: Optional[str] = Field(default=None, alias="displayAmount")

    model_config = {"populate_by_name": True, "frozen": True}


class CheckResult(BaseModel):
    """Extraction, validation and summary of one HTTP response."""
    extracted: bool
    source: Optional[ExtractionSource] = None
    extraction_error: Optional[str] = Field(default=None, alias="extractionError")
    valid: bool
    version: ConfigFormat
    errors: list[ValidationIssue] = Field(default_factory=list)
    warnings: list[ValidationIssue] = Field(default_factory=list)
    normalized: Optional[dict[str, Any]] = None
    summary: list[CheckSummary] = Field(default_factory=list)
    raw: Optional[dict[str, Any]] = None

    model_config = {"populate_by_name": True, "frozen": True}
