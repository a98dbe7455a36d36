"""
Location: python/x402check/addresses.py

Summary:
    Per-family payee address validators (EVM, Solana, Stacks) and the
    validate_address() dispatcher that routes on the CAIP-2 namespace.

Usage:
    Called by the orchestrator for every accepts entry's payTo. Each
    validator returns a list of issues; an empty list means valid.
    Stellar and Aptos addresses are accepted as-is, and namespaces that
    are unknown or unparsable produce no issues.

Example:
    from x402check.addresses import validate_address

    issues = validate_address(
        "0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed",
        "eip155:8453",
        "accepts[0].payTo",
    )
    # [NO_EVM_CHECKSUM warning suggesting 0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed]
"""

import re

from .crypto.base58 import Base58DecodeError, decode_base58
from .crypto.c32check import (
    STACKS_MAINNET_VERSIONS,
    STACKS_TESTNET_VERSIONS,
    C32DecodeError,
    c32_address_decode,
)
from .crypto.eip55 import is_valid_checksum, to_checksum_address
from .errors import ErrorCode, ValidationIssue, make_error, make_warning
from .registries import STACKS_MAINNET, STACKS_TESTNET, get_network_namespace


EVM_ADDRESS_PATTERN = re.compile(r"0x[0-9a-fA-F]{40}")
SOLANA_ADDRESS_PATTERN = re.compile(r"[1-9A-HJ-NP-Za-km-z]{32,44}")
STACKS_PREFIX_PATTERN = re.compile(r"S[PMTN]", re.IGNORECASE)

SOLANA_PUBKEY_LENGTH = 32


def validate_evm_address(address: str, field: str) -> list[ValidationIssue]:
    """
    Validate an EVM address and its EIP-55 checksum.

    All-lowercase addresses get a warning because they carry no checksum;
    all-uppercase hex is accepted silently. Mixed case must match the
    checksum exactly.

    Args:
        address: Address to check
        field: Field path for any issue raised

    Returns:
        List of issues (empty when valid)
    """
    if not isinstance(address, str) or not EVM_ADDRESS_PATTERN.fullmatch(address):
        return [make_error(
            ErrorCode.INVALID_EVM_ADDRESS,
            field,
            fix="Format: 0x followed by 40 hex digits (0-9, a-f, A-F)",
        )]

    hex_part = address[2:]
    if hex_part == hex_part.lower():
        return [make_warning(
            ErrorCode.NO_EVM_CHECKSUM,
            field,
            fix=f"Use checksummed address to detect typos: {to_checksum_address(address)}",
        )]

    if hex_part == hex_part.upper():
        return []

    if not is_valid_checksum(address):
        return [make_warning(
            ErrorCode.BAD_EVM_CHECKSUM,
            field,
            message="EVM address has invalid checksum -- it may contain a typo",
            fix=f"Expected: {to_checksum_address(address)}",
        )]

    return []


def validate_solana_address(address: str, field: str) -> list[ValidationIssue]:
    """
    Validate a Solana address: 32-44 Base58 characters decoding to a
    32-byte public key.
    """
    if not isinstance(address, str) or not SOLANA_ADDRESS_PATTERN.fullmatch(address):
        return [make_error(
            ErrorCode.INVALID_SOLANA_ADDRESS,
            field,
            fix="Solana addresses are 32-44 Base58 characters (no 0, O, I, or l)",
        )]

    try:
        decoded = decode_base58(address)
    except Base58DecodeError as e:
        return [make_error(ErrorCode.INVALID_SOLANA_ADDRESS, field, message=str(e))]

    if len(decoded) != SOLANA_PUBKEY_LENGTH:
        return [make_error(
            ErrorCode.INVALID_SOLANA_ADDRESS,
            field,
            message=(
                f"Solana address must decode to {SOLANA_PUBKEY_LENGTH} bytes, "
                f"got {len(decoded)}"
            ),
        )]

    return []


def validate_stacks_address(
    address: str,
    network: str,
    field: str,
) -> list[ValidationIssue]:
    """
    Validate a Stacks address against its network.

    A contract principal suffix ('SP....my-contract') is stripped before
    decoding. On stacks:1 the version byte must be a mainnet one (SP/SM),
    on stacks:2147483648 a testnet one (ST/SN); a version from the other
    network is reported as STACKS_NETWORK_MISMATCH.

    Args:
        address: Stacks principal
        network: CAIP-2 identifier in the stacks namespace
        field: Field path for any issue raised

    Returns:
        List of issues (empty when valid)
    """
    if not isinstance(address, str):
        address = ""
    principal = address.split(".", 1)[0]

    if not STACKS_PREFIX_PATTERN.match(principal):
        return [make_error(
            ErrorCode.INVALID_STACKS_ADDRESS,
            field,
            message="Invalid Stacks address format",
            fix="Stacks addresses start with SP, SM, ST, or SN",
        )]

    try:
        version, _ = c32_address_decode(principal)
    except C32DecodeError:
        return [make_error(
            ErrorCode.INVALID_STACKS_ADDRESS,
            field,
            message="Invalid Stacks address checksum. Double-check the address for typos.",
        )]

    if network == STACKS_MAINNET and version in STACKS_TESTNET_VERSIONS:
        return [make_error(
            ErrorCode.STACKS_NETWORK_MISMATCH,
            field,
            message=(
                "This is a Stacks testnet address but the network is set "
                f"to mainnet ({STACKS_MAINNET})"
            ),
            fix=(
                f"Use {STACKS_TESTNET} for testnet addresses, "
                "or use a mainnet address (SP/SM prefix)"
            ),
        )]

    if network == STACKS_TESTNET and version in STACKS_MAINNET_VERSIONS:
        return [make_error(
            ErrorCode.STACKS_NETWORK_MISMATCH,
            field,
            message=(
                "This is a Stacks mainnet address but the network is set "
                f"to testnet ({STACKS_TESTNET})"
            ),
            fix=(
                f"Use {STACKS_MAINNET} for mainnet addresses, "
                "or use a testnet address (ST/SN prefix)"
            ),
        )]

    if version not in STACKS_MAINNET_VERSIONS | STACKS_TESTNET_VERSIONS:
        return [make_error(
            ErrorCode.INVALID_STACKS_ADDRESS,
            field,
            message="Unrecognized Stacks address version",
        )]

    return []


def validate_address(address: str, network: str, field: str) -> list[ValidationIssue]:
    """
    Validate a payee address for the chain family named by network.

    Args:
        address: Payee address
        network: CAIP-2 identifier the address is declared for
        field: Field path for any issue raised

    Returns:
        Issues from the family validator; empty for stellar, aptos,
        unknown namespaces and malformed network identifiers
    """
    namespace = get_network_namespace(network)

    if namespace == "eip155":
        return validate_evm_address(address, field)
    if namespace == "solana":
        return validate_solana_address(address, field)
    if namespace == "stacks":
        return validate_stacks_address(address, network, field)

    # stellar, aptos and anything unrecognized are not checked
    return []
