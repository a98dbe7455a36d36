"""
Location: python/x402check/__init__.py

Summary:
    Main package initialization for x402check. Exports the validation
    entry points, result models, registries and address validators.

Usage:
    from x402check import check, validate, validate_manifest

    # Or import specific modules
    from x402check.crypto import keccak256, to_checksum_address
    from x402check.rules import validate_amount

Version: 0.3.1
"""

from .addresses import (
    validate_address,
    validate_evm_address,
    validate_solana_address,
    validate_stacks_address,
)
from .check import build_summary, check, format_display_amount
from .detection import (
    detect,
    is_flat_legacy_config,
    is_manifest_config,
    is_v1_config,
    is_v2_config,
    parse_input,
)
from .errors import ERROR_MESSAGES, ErrorCode, ValidationIssue
from .extraction import X402_HEADERS, extract_config
from .manifest import validate_manifest
from .normalize import normalize, normalize_flat_legacy
from .registries import (
    KNOWN_ASSETS,
    KNOWN_NETWORKS,
    SIMPLE_NAME_TO_CAIP2,
    AssetInfo,
    NetworkInfo,
    get_asset_info,
    get_canonical_network,
    get_network_info,
    get_networks_by_namespace,
    is_known_asset,
    is_known_network,
    is_valid_caip2,
)
from .types import (
    CheckResult,
    CheckSummary,
    ConfigFormat,
    ExtractionResult,
    ManifestValidationResult,
    ValidationOptions,
    ValidationResult,
    WildManifestResult,
)
from .validator import validate
from .wild_manifest import generate_stable_endpoint_id, normalize_wild_manifest

__version__ = "0.3.1"
VERSION = __version__

__all__ = [
    # Entry points
    "check",
    "validate",
    "validate_manifest",
    "extract_config",
    "build_summary",
    "format_display_amount",
    # Detection and normalization
    "detect",
    "parse_input",
    "is_manifest_config",
    "is_v2_config",
    "is_v1_config",
    "is_flat_legacy_config",
    "normalize",
    "normalize_flat_legacy",
    "normalize_wild_manifest",
    "generate_stable_endpoint_id",
    # Address validators
    "validate_address",
    "validate_evm_address",
    "validate_solana_address",
    "validate_stacks_address",
    # Issues
    "ErrorCode",
    "ERROR_MESSAGES",
    "ValidationIssue",
    # Result types
    "ValidationOptions",
    "ValidationResult",
    "ManifestValidationResult",
    "WildManifestResult",
    "ExtractionResult",
    "CheckResult",
    "CheckSummary",
    "ConfigFormat",
    # Registries
    "KNOWN_NETWORKS",
    "KNOWN_ASSETS",
    "SIMPLE_NAME_TO_CAIP2",
    "NetworkInfo",
    "AssetInfo",
    "get_network_info",
    "get_networks_by_namespace",
    "get_asset_info",
    "get_canonical_network",
    "is_known_network",
    "is_known_asset",
    "is_valid_caip2",
    # Transport
    "X402_HEADERS",
    "VERSION",
]
