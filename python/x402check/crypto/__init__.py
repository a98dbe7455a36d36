"""
Location: python/x402check/crypto/__init__.py

Summary:
    Primitive codecs used by the address validators: Base58 decoding,
    Keccak-256 hashing, EIP-55 mixed-case checksums and c32check decoding
    for Stacks addresses.

Usage:
    from x402check.crypto import decode_base58, keccak256, to_checksum_address
"""

from .base58 import Base58DecodeError, decode_base58
from .c32check import (
    C32DecodeError,
    c32_address_decode,
    c32_decode,
    c32_normalize,
)
from .eip55 import is_valid_checksum, to_checksum_address
from .keccak import keccak256

__all__ = [
    "Base58DecodeError",
    "decode_base58",
    "C32DecodeError",
    "c32_address_decode",
    "c32_decode",
    "c32_normalize",
    "is_valid_checksum",
    "to_checksum_address",
    "keccak256",
]
