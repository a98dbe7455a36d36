"""
Location: python/x402check/crypto/c32check.py

Summary:
    c32check decoding for Stacks addresses. An address is 'S', a c32
    version character, then the c32 encoding of hash160 + 4-byte checksum
    where checksum = sha256(sha256(version || hash160))[:4].

Usage:
    Used by addresses.py to verify Stacks address checksums and read the
    version byte that distinguishes mainnet from testnet.

Example:
    from x402check.crypto.c32check import c32_address_decode

    version, hash160 = c32_address_decode("SP2J6ZY48GV1EZ5V2V5RB9MP66SW86PYKKNRV9EJ7")
    # version == 22 (mainnet single-sig)
"""

import hashlib

C32_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
_C32_INDEX = {char: index for index, char in enumerate(C32_ALPHABET)}

# Stacks address version bytes
STACKS_MAINNET_VERSIONS = frozenset({22, 20})  # SP single-sig, SM multi-sig
STACKS_TESTNET_VERSIONS = frozenset({26, 21})  # ST single-sig, SN multi-sig


class C32DecodeError(ValueError):
    """Raised when a c32 or c32check string is malformed or fails its checksum."""
    pass


def c32_normalize(value: str) -> str:
    """Uppercase and map the ambiguous characters O, L and I to 0, 1, 1."""
    return value.upper().replace("O", "0").replace("L", "1").replace("I", "1")


def c32_decode(value: str) -> bytes:
    """
    Decode a c32 string to bytes.

    Every leading '0' character contributes one leading zero byte; the
    remainder is decoded as a base-32 big-endian integer.

    Args:
        value: c32-encoded string

    Returns:
        Decoded bytes

    Raises:
        C32DecodeError: If the string contains characters outside the alphabet
    """
    normalized = c32_normalize(value)

    num = 0
    for char in normalized:
        digit = _C32_INDEX.get(char)
        if digit is None:
            raise C32DecodeError(f"Not a c32-encoded string: {value!r}")
        num = num * 32 + digit

    body = num.to_bytes((num.bit_length() + 7) // 8, "big") if num else b""
    leading_zeros = len(normalized) - len(normalized.lstrip("0"))
    return b"\x00" * leading_zeros + body


def _c32_checksum(data: bytes) -> bytes:
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()[:4]


def c32_check_decode(value: str) -> tuple[int, bytes]:
    """
    Decode a c32check string (version character followed by c32 data).

    Returns:
        Tuple of (version byte, payload without checksum)

    Raises:
        C32DecodeError: On a bad alphabet, truncated data or checksum mismatch
    """
    normalized = c32_normalize(value)
    if not normalized:
        raise C32DecodeError("Invalid c32check string: empty")

    version = _C32_INDEX.get(normalized[0])
    if version is None:
        raise C32DecodeError(
            f"Invalid c32check string: bad version character {normalized[0]!r}"
        )

    data = c32_decode(normalized[1:])
    if len(data) < 4:
        raise C32DecodeError("Invalid c32check string: too short")

    payload, checksum = data[:-4], data[-4:]
    if _c32_checksum(bytes([version]) + payload) != checksum:
        raise C32DecodeError("Invalid c32check string: checksum mismatch")
    return version, payload


def c32_address_decode(address: str) -> tuple[int, bytes]:
    """
    Decode a Stacks address into its version byte and hash160.

    Args:
        address: Stacks address without any contract-name suffix

    Returns:
        Tuple of (version byte, 20-byte hash160)

    Raises:
        C32DecodeError: If the address is too short, lacks the 'S' prefix,
            or fails c32check decoding
    """
    if len(address) <= 5:
        raise C32DecodeError("Invalid c32 address: invalid length")
    if address[0] != "S":
        raise C32DecodeError('Invalid c32 address: must start with "S"')
    return c32_check_decode(address[1:])
