"""
Location: python/x402check/rules/__init__.py

Summary:
    Independent rule functions, each inspecting one concern and returning
    a list of ValidationIssue. validator.validate() runs them in order.

Usage:
    from x402check.rules import validate_amount, validate_network
"""

from .amount import validate_amount, validate_timeout
from .extensions import validate_bazaar, validate_missing_schema, validate_output_schema
from .fields import is_valid_url, validate_accepts, validate_fields, validate_resource
from .legacy import validate_legacy
from .network import validate_asset, validate_network
from .structure import StructureResult, validate_structure
from .version import validate_version

__all__ = [
    "StructureResult",
    "validate_structure",
    "validate_version",
    "validate_accepts",
    "validate_fields",
    "validate_resource",
    "is_valid_url",
    "validate_amount",
    "validate_timeout",
    "validate_network",
    "validate_asset",
    "validate_legacy",
    "validate_bazaar",
    "validate_output_schema",
    "validate_missing_schema",
]
