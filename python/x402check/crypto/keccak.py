"""
Location: python/x402check/crypto/keccak.py

Summary:
    Keccak-256 hashing with the original (pre-NIST) padding, the variant
    Ethereum uses. Not interchangeable with hashlib.sha3_256.

Example:
    from x402check.crypto.keccak import keccak256

    keccak256("")  # "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
"""

from typing import Union

from eth_utils import keccak


def keccak256(data: Union[str, bytes]) -> str:
    """
    Hash data with Keccak-256.

    Args:
        data: Text (UTF-8 encoded before hashing) or raw bytes

    Returns:
        Lowercase hex digest without 0x prefix
    """
    if isinstance(data, str):
        digest = keccak(text=data)
    else:
        digest = keccak(primitive=bytes(data))
    return digest.hex()
