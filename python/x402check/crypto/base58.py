"""
Location: python/x402check/crypto/base58.py

Summary:
    Base58 decoding (Bitcoin alphabet) as used by Solana addresses.

Usage:
    Used by addresses.py to check that a Solana address decodes to a
    32-byte public key.

Example:
    from x402check.crypto.base58 import decode_base58

    decode_base58("11111111111111111111111111111111")  # 32 zero bytes
"""

BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_BASE58_INDEX = {char: index for index, char in enumerate(BASE58_ALPHABET)}


class Base58DecodeError(ValueError):
    """Raised when a string contains characters outside the Base58 alphabet."""
    pass


def decode_base58(value: str) -> bytes:
    """
    Decode a Base58 string to bytes.

    Each leading '1' character maps to one leading zero byte, so
    '1' * 32 decodes to 32 zero bytes.

    Args:
        value: Base58-encoded string

    Returns:
        Decoded bytes (empty for empty input)

    Raises:
        Base58DecodeError: If the string contains 0, O, I, l or any other
            character outside the alphabet
    """
    if not value:
        return b""

    num = 0
    for position, char in enumerate(value):
        digit = _BASE58_INDEX.get(char)
        if digit is None:
            raise Base58DecodeError(
                f"Invalid Base58 character {char!r} at position {position}"
            )
        num = num * 58 + digit

    body = num.to_bytes((num.bit_length() + 7) // 8, "big") if num else b""
    leading_zeros = len(value) - len(value.lstrip("1"))
    return b"\x00" * leading_zeros + body
