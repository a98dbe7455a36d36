"""
Location: python/x402check/registries.py

Summary:
    Static registries of known networks (CAIP-2), known assets per network,
    and legacy simple chain names. Built once at import time and exposed as
    read-only mappings.

Usage:
    Used by the network/asset rules to tell known identifiers from merely
    well-formed ones, by the address dispatcher to route by namespace, and
    by check.py to resolve display names for the summary.

Example:
    from x402check.registries import get_canonical_network, get_network_info

    get_canonical_network("base")          # "eip155:8453"
    get_network_info("eip155:8453").name   # "Base"
"""

import re
from types import MappingProxyType
from typing import Literal, Mapping, Optional

from pydantic import BaseModel


NetworkType = Literal["evm", "solana", "stellar", "aptos", "stacks"]

CAIP2_PATTERN = re.compile(r"^[-a-z0-9]{3,8}:[-_a-zA-Z0-9]{1,32}$")

SOLANA_MAINNET = "solana:5eykt4UsFv8P8NJdTREpY1vzqKqZKvdp"
SOLANA_DEVNET = "solana:EtWTRABZaYq6iMfeYKouRu166VU2xqa1"
SOLANA_TESTNET = "solana:4uhcVJyU9pJkvQyS88uRDiswHXSCkY3z"
STACKS_MAINNET = "stacks:1"
STACKS_TESTNET = "stacks:2147483648"


class NetworkInfo(BaseModel):
    """Display metadata for a known network."""
    name: str
    type: NetworkType
    testnet: bool

    model_config = {"frozen": True}


class AssetInfo(BaseModel):
    """
    A known token on a specific network.

    Attributes:
        symbol: Ticker symbol, e.g. "USDC"
        name: Full token name
        decimals: Number of decimals between atomic units and whole tokens
    """
    symbol: str
    name: str
    decimals: int

    model_config = {"frozen": True}


KNOWN_NETWORKS: Mapping[str, NetworkInfo] = MappingProxyType({
    # EVM
    "eip155:8453": NetworkInfo(name="Base", type="evm", testnet=False),
    "eip155:84532": NetworkInfo(name="Base Sepolia", type="evm", testnet=True),
    "eip155:43114": NetworkInfo(name="Avalanche C-Chain", type="evm", testnet=False),
    "eip155:43113": NetworkInfo(name="Avalanche Fuji", type="evm", testnet=True),
    # Solana
    SOLANA_MAINNET: NetworkInfo(name="Solana Mainnet", type="solana", testnet=False),
    SOLANA_DEVNET: NetworkInfo(name="Solana Devnet", type="solana", testnet=True),
    SOLANA_TESTNET: NetworkInfo(name="Solana Testnet", type="solana", testnet=True),
    # Stacks
    STACKS_MAINNET: NetworkInfo(name="Stacks", type="stacks", testnet=False),
    STACKS_TESTNET: NetworkInfo(name="Stacks Testnet", type="stacks", testnet=True),
    # Stellar
    "stellar:pubnet": NetworkInfo(name="Stellar", type="stellar", testnet=False),
    "stellar:testnet": NetworkInfo(name="Stellar Testnet", type="stellar", testnet=True),
    # Aptos
    "aptos:1": NetworkInfo(name="Aptos", type="aptos", testnet=False),
    "aptos:2": NetworkInfo(name="Aptos Testnet", type="aptos", testnet=True),
})

_USDC = AssetInfo(symbol="USDC", name="USD Coin", decimals=6)

# EVM asset addresses are stored lowercase; lookups fold case for eip155 only
KNOWN_ASSETS: Mapping[str, Mapping[str, AssetInfo]] = MappingProxyType({
    "eip155:8453": MappingProxyType({
        "0x833589fcd6edb6e08f4c7c32d4f71b54bda02913": _USDC,
    }),
    "eip155:84532": MappingProxyType({
        "0x036cbd53842c5426634e7929541ec2318f3dcf7e": _USDC,
    }),
    "eip155:43114": MappingProxyType({
        "0xb97ef9ef8734c71904d8002f8b6bc66dd9c48a6e": _USDC,
    }),
    "eip155:43113": MappingProxyType({
        "0x5425890298aed601595a70ab815c96711a31bc65": _USDC,
    }),
    SOLANA_MAINNET: MappingProxyType({
        "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v": _USDC,
    }),
    SOLANA_DEVNET: MappingProxyType({
        "4zMMC9srt5Ri5X14GAgXhaHii3GnPAEERYPJgZJDncDU": _USDC,
    }),
})

# Legacy simple chain names -> CAIP-2 (keys lowercase)
SIMPLE_NAME_TO_CAIP2: Mapping[str, str] = MappingProxyType({
    "base": "eip155:8453",
    "base-sepolia": "eip155:84532",
    "base_sepolia": "eip155:84532",
    "avalanche": "eip155:43114",
    "avalanche-fuji": "eip155:43113",
    "solana": SOLANA_MAINNET,
    "solana-devnet": SOLANA_DEVNET,
    "solana-testnet": SOLANA_TESTNET,
    "stacks": STACKS_MAINNET,
    "stacks-mainnet": STACKS_MAINNET,
    "stacks-testnet": STACKS_TESTNET,
    "stellar": "stellar:pubnet",
    "stellar-testnet": "stellar:testnet",
    "aptos": "aptos:1",
})


def is_valid_caip2(value: object) -> bool:
    """Return True when value is a syntactically valid CAIP-2 identifier."""
    return isinstance(value, str) and CAIP2_PATTERN.fullmatch(value) is not None


def get_network_namespace(network: str) -> Optional[str]:
    """Return the namespace part of a valid CAIP-2 identifier, else None."""
    if not is_valid_caip2(network):
        return None
    return network.split(":", 1)[0]


def get_network_info(network: str) -> Optional[NetworkInfo]:
    """Look up display metadata for a CAIP-2 identifier."""
    return KNOWN_NETWORKS.get(network)


def is_known_network(network: str) -> bool:
    """Return True when the network is in the registry."""
    return network in KNOWN_NETWORKS


def get_networks_by_namespace(namespace: str) -> list[tuple[str, NetworkInfo]]:
    """
    List the known networks in one namespace.

    Args:
        namespace: CAIP-2 namespace, e.g. "eip155"

    Returns:
        (caip2, info) pairs in registry order
    """
    prefix = f"{namespace}:"
    return [
        (caip2, info)
        for caip2, info in KNOWN_NETWORKS.items()
        if caip2.startswith(prefix)
    ]


def _asset_key(network: str, address: str) -> str:
    if network.startswith("eip155:"):
        return address.lower()
    return address


def get_asset_info(network: str, address: str) -> Optional[AssetInfo]:
    """
    Look up a known asset.

    EVM addresses are matched case-insensitively; every other family is
    matched exactly.

    Args:
        network: CAIP-2 identifier
        address: Token address or mint

    Returns:
        AssetInfo or None when unknown
    """
    assets = KNOWN_ASSETS.get(network)
    if assets is None:
        return None
    return assets.get(_asset_key(network, address))


def is_known_asset(network: str, address: str) -> bool:
    """Return True when the asset is in the registry for that network."""
    return get_asset_info(network, address) is not None


def get_canonical_network(name: str) -> Optional[str]:
    """
    Map a legacy simple chain name to its CAIP-2 identifier.

    Lookup is case-insensitive ("Base" and "BASE" both map to eip155:8453).
    """
    if not isinstance(name, str):
        return None
    return SIMPLE_NAME_TO_CAIP2.get(name.lower())
