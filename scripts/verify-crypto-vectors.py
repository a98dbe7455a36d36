#!/usr/bin/env python3
"""
Verify the codec implementations against reference vectors.
Run with: python scripts/verify-crypto-vectors.py (after pip install -e .)

Checks Keccak-256 (including that it is not SHA3-256), EIP-55 checksums,
Base58 decoding and c32check decoding against fixtures/crypto-vectors.json.

IMPORTANT: This is a RELEASE GATE requirement. Address validation depends
on these codecs being bit-exact.
"""
import json
import sys
from pathlib import Path

from x402check.crypto import (
    c32_address_decode,
    decode_base58,
    keccak256,
    to_checksum_address,
)


def check(name: str, expected, actual) -> bool:
    """
    Print a PASS/FAIL line for one vector.

    Returns:
        True if expected == actual
    """
    if expected == actual:
        print(f'[PASS] {name}')
        return True
    print(f'[FAIL] {name}')
    print(f'     Expected: {expected}')
    print(f'     Actual:   {actual}')
    return False


def main() -> int:
    """
    Main verification function.

    Returns:
        0 if all vectors pass, 1 if any fail
    """
    fixtures_path = Path(__file__).parent.parent / 'fixtures' / 'crypto-vectors.json'

    if not fixtures_path.exists():
        print(f'ERROR: Fixtures file not found at {fixtures_path}')
        return 1

    with open(fixtures_path, encoding='utf-8') as f:
        data = json.load(f)

    results = []

    print('Verifying codecs against reference vectors...\n')

    for vector in data['keccak256']:
        digest = keccak256(vector['input'])
        results.append(check(f"keccak256: {vector['name']}", vector['digest'], digest))
        if 'sha3_256' in vector:
            results.append(check(
                f"keccak256 differs from SHA3-256: {vector['name']}",
                True,
                digest != vector['sha3_256'],
            ))

    for address in data['eip55']:
        results.append(check(
            f'eip55: {address}',
            address,
            to_checksum_address(address.lower()),
        ))

    for vector in data['base58']:
        results.append(check(
            f"base58: {vector['name']}",
            vector['hex'],
            decode_base58(vector['input']).hex(),
        ))

    for vector in data['c32check']:
        version, hash160 = c32_address_decode(vector['address'])
        results.append(check(f"c32check version: {vector['address']}", vector['version'], version))
        if 'hash160' in vector:
            results.append(check(
                f"c32check hash160: {vector['address']}",
                vector['hash160'],
                hash160.hex(),
            ))

    passed = sum(results)
    failed = len(results) - passed

    print(f'\n{"=" * 50}')
    print(f'Results: {passed} passed, {failed} failed')

    if failed > 0:
        print('\nVERIFICATION FAILED - Release gate not passed!')
        return 1

    print('\nVERIFICATION PASSED - codecs match the reference vectors.')
    return 0


if __name__ == '__main__':
    sys.exit(main())
