"""
Location: python/x402check/crypto/eip55.py

Summary:
    EIP-55 mixed-case checksum helpers for EVM addresses, backed by
    eth_utils.

Usage:
    Used by addresses.py to suggest the checksummed form of lowercase
    addresses and to verify mixed-case ones. Callers check the
    0x + 40 hex digit shape first; eth_utils raises ValueError otherwise.

Example:
    from x402check.crypto.eip55 import to_checksum_address

    to_checksum_address("0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed")
    # "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
"""

from eth_utils import to_checksum_address as _eth_to_checksum_address


def to_checksum_address(address: str) -> str:
    """
    Compute the EIP-55 checksummed form of an address.

    Args:
        address: 0x-prefixed 40 hex digit address in any case

    Returns:
        The checksummed address
    """
    return str(_eth_to_checksum_address(address))


def is_valid_checksum(address: str) -> bool:
    """Return True when the address exactly matches its EIP-55 form."""
    return address == to_checksum_address(address)
