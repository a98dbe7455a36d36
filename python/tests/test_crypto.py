"""
Tests for x402check.crypto package.

Tests Base58 decoding, Keccak-256, EIP-55 checksums and c32check decoding
against reference vectors.
"""

import hashlib

import pytest

from x402check.crypto import (
    Base58DecodeError,
    C32DecodeError,
    c32_address_decode,
    c32_decode,
    c32_normalize,
    decode_base58,
    is_valid_checksum,
    keccak256,
    to_checksum_address,
)


class TestDecodeBase58:
    """Tests for decode_base58 function."""

    def test_all_ones_decodes_to_32_zero_bytes(self):
        """Test the Solana system program address decodes to 32 zero bytes."""
        decoded = decode_base58("1" * 32)
        assert decoded == b"\x00" * 32

    def test_preserves_leading_zero_bytes(self):
        """Test each leading '1' becomes one zero byte."""
        decoded = decode_base58("111abc")
        assert decoded[:3] == b"\x00\x00\x00"
        assert decoded[3] != 0

    def test_decodes_known_string(self):
        """Test the classic 'Hello World!' vector."""
        assert decode_base58("2NEpo7TZRRrLZSi2U") == b"Hello World!"

    def test_empty_string(self):
        """Test empty input yields empty bytes."""
        assert decode_base58("") == b""

    @pytest.mark.parametrize("char", ["0", "O", "I", "l"])
    def test_rejects_excluded_characters(self, char):
        """Test characters outside the alphabet raise."""
        with pytest.raises(ValueError, match="Invalid Base58"):
            decode_base58(f"abc{char}def")

    def test_error_is_base58_decode_error(self):
        """Test the raised error type and reported position."""
        with pytest.raises(Base58DecodeError, match="position 0"):
            decode_base58("0OIl")

    def test_matches_fixture_vectors(self, crypto_vectors):
        """Test decoding against the shared vectors."""
        for vector in crypto_vectors["base58"]:
            assert decode_base58(vector["input"]).hex() == vector["hex"]


class TestKeccak256:
    """Tests for keccak256 function."""

    def test_empty_string_digest(self):
        """Test the reference digest of the empty string."""
        assert keccak256("") == (
            "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
        )

    def test_differs_from_sha3(self):
        """Test Keccak-256 is not NIST SHA3-256."""
        assert keccak256("") != hashlib.sha3_256(b"").hexdigest()

    def test_hello_world(self):
        """Test a second known digest."""
        assert keccak256("hello world") == (
            "47173285a8d7341e5e972fc677286384f802f8ef42a5ec5f03bbfa254cb01fad"
        )

    def test_bytes_and_text_agree(self):
        """Test text is hashed as its UTF-8 bytes."""
        assert keccak256(b"hello world") == keccak256("hello world")

    def test_matches_fixture_vectors(self, crypto_vectors):
        """Test hashing against the shared vectors."""
        for vector in crypto_vectors["keccak256"]:
            assert keccak256(vector["input"]) == vector["digest"]


class TestEip55:
    """Tests for EIP-55 checksum helpers."""

    def test_reference_vector(self):
        """Test the canonical EIP-55 example."""
        assert to_checksum_address("0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed") == (
            "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
        )

    def test_fixture_vectors_round_trip_from_lowercase(self, crypto_vectors):
        """Test every vector is reproduced from its lowercase form."""
        for address in crypto_vectors["eip55"]:
            assert to_checksum_address(address.lower()) == address

    def test_input_case_is_ignored(self):
        """Test uppercase input yields the same checksum."""
        upper = "0x" + "5aaeb6053f3e94c9b9a09f33669435e7ef1beaed".upper()
        assert to_checksum_address(upper) == "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"

    def test_is_valid_checksum(self):
        """Test checksum verification."""
        assert is_valid_checksum("0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed") is True
        assert is_valid_checksum("0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAeD") is False
        assert is_valid_checksum("0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed") is False


class TestC32:
    """Tests for c32 and c32check decoding."""

    def test_normalize(self):
        """Test case folding and ambiguous character mapping."""
        assert c32_normalize("sp2oli") == "SP2011"

    def test_decode_small_values(self):
        """Test single and two character decoding."""
        assert c32_decode("") == b""
        assert c32_decode("1") == b"\x01"
        assert c32_decode("10") == b"\x20"
        assert c32_decode("0") == b"\x00"
        assert c32_decode("001") == b"\x00\x00\x01"

    def test_decode_rejects_bad_character(self):
        """Test 'U' is not part of the c32 alphabet."""
        with pytest.raises(C32DecodeError):
            c32_decode("ABU")

    @pytest.mark.parametrize("address,version", [
        ("SP2J6ZY48GV1EZ5V2V5RB9MP66SW86PYKKNRV9EJ7", 22),
        ("SM2J6ZY48GV1EZ5V2V5RB9MP66SW86PYKKQVX8X0G", 20),
        ("ST000000000000000000002AMW42H", 26),
        ("SN000000000000000000003YDHWKJ", 21),
    ])
    def test_address_versions(self, address, version):
        """Test version bytes of mainnet and testnet addresses."""
        decoded_version, hash160 = c32_address_decode(address)
        assert decoded_version == version
        assert len(hash160) == 20

    def test_zero_hash160(self):
        """Test the all-zero testnet vector decodes to a zero hash160."""
        _, hash160 = c32_address_decode("ST000000000000000000002AMW42H")
        assert hash160 == b"\x00" * 20

    def test_checksum_mismatch(self):
        """Test a corrupted final character fails the checksum."""
        with pytest.raises(C32DecodeError, match="checksum"):
            c32_address_decode("SP2J6ZY48GV1EZ5V2V5RB9MP66SW86PYKKNRV9EJX")

    def test_rejects_short_address(self):
        """Test addresses of five characters or fewer."""
        with pytest.raises(C32DecodeError, match="length"):
            c32_address_decode("SP2J6")

    def test_rejects_missing_s_prefix(self):
        """Test the address must start with S."""
        with pytest.raises(C32DecodeError, match="must start with"):
            c32_address_decode("XP2J6ZY48GV1EZ5V2V5RB9MP66SW86PYKKNRV9EJ7")

    def test_matches_fixture_vectors(self, crypto_vectors):
        """Test decoding against the shared vectors."""
        for vector in crypto_vectors["c32check"]:
            version, hash160 = c32_address_decode(vector["address"])
            assert version == vector["version"]
            if "hash160" in vector:
                assert hash160.hex() == vector["hash160"]
