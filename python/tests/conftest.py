"""
Shared pytest fixtures for x402check tests.

This module provides common fixtures used across all test files,
including sample v1/v2 configs, manifests and the codec reference vectors.
"""

import json
from pathlib import Path

import pytest


BASE_USDC = "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913"
BASE_SEPOLIA_USDC = "0x036CbD53842c5426634e7929541eC2318f3dCF7e"
CHECKSUMMED_PAY_TO = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
SOLANA_MAINNET = "solana:5eykt4UsFv8P8NJdTREpY1vzqKqZKvdp"
SOLANA_USDC = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
SOLANA_PAY_TO = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"


@pytest.fixture
def bazaar_extension():
    """Complete bazaar discovery extension for a GET endpoint."""
    return {
        "bazaar": {
            "info": {
                "input": {
                    "type": "http",
                    "method": "GET",
                    "queryParams": {"city": "London"},
                },
                "output": {"type": "json", "example": {"temp": 12}},
            },
            "schema": {
                "$schema": "https://json-schema.org/draft/2020-12/schema",
                "type": "object",
                "properties": {"input": {"type": "object"}},
            },
        }
    }


@pytest.fixture
def valid_v2_config(bazaar_extension):
    """v2 config on Base that passes with no errors and no warnings."""
    return {
        "x402Version": 2,
        "accepts": [
            {
                "scheme": "exact",
                "network": "eip155:8453",
                "amount": "1000000",
                "asset": BASE_USDC,
                "payTo": CHECKSUMMED_PAY_TO,
                "maxTimeoutSeconds": 60,
                "extra": {"name": "USD Coin", "version": "2"},
            }
        ],
        "resource": {"url": "https://api.example.com/weather", "method": "GET"},
        "extensions": bazaar_extension,
    }


@pytest.fixture
def valid_v1_config():
    """Legacy v1 config with a per-entry resource."""
    return {
        "x402Version": 1,
        "accepts": [
            {
                "scheme": "exact",
                "network": "eip155:84532",
                "maxAmountRequired": "500000",
                "asset": BASE_SEPOLIA_USDC,
                "payTo": CHECKSUMMED_PAY_TO,
                "maxTimeoutSeconds": 30,
                "resource": {"url": "https://api.example.com/v1/data"},
                "extra": {"name": "USDC", "version": "2"},
            }
        ],
        "error": "Payment required",
    }


@pytest.fixture
def solana_config():
    """v2 config paying USDC on Solana mainnet."""
    return {
        "x402Version": 2,
        "accepts": [
            {
                "scheme": "exact",
                "network": SOLANA_MAINNET,
                "amount": "2500000",
                "asset": SOLANA_USDC,
                "payTo": SOLANA_PAY_TO,
                "maxTimeoutSeconds": 60,
            }
        ],
        "resource": {"url": "https://api.example.com/solana"},
    }


@pytest.fixture
def make_endpoint():
    """Factory for manifest endpoint configs."""
    def _make(url, network="eip155:8453", amount="1000000", extensions=None):
        config = {
            "x402Version": 2,
            "accepts": [
                {
                    "scheme": "exact",
                    "network": network,
                    "amount": amount,
                    "asset": BASE_USDC,
                    "payTo": CHECKSUMMED_PAY_TO,
                    "maxTimeoutSeconds": 60,
                }
            ],
            "resource": {"url": url},
        }
        if extensions is not None:
            config["extensions"] = extensions
        return config
    return _make


@pytest.fixture
def sample_manifest(make_endpoint):
    """Manifest with two endpoints on Base."""
    return {
        "service": {"name": "Weather API", "version": "1.0.0"},
        "endpoints": {
            "weather": make_endpoint("https://api.example.com/weather"),
            "forecast": make_endpoint("https://api.example.com/forecast", amount="2000000"),
        },
    }


@pytest.fixture
def crypto_vectors():
    """Load the codec reference vectors from fixtures."""
    vectors_path = Path(__file__).parent.parent.parent / "fixtures" / "crypto-vectors.json"
    with open(vectors_path, encoding="utf-8") as f:
        return json.load(f)
