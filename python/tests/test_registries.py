"""
Tests for x402check.registries module.

Tests CAIP-2 parsing, network/asset lookup and simple-name mapping.
"""

import pytest

from x402check.registries import (
    KNOWN_ASSETS,
    KNOWN_NETWORKS,
    SIMPLE_NAME_TO_CAIP2,
    get_asset_info,
    get_canonical_network,
    get_network_info,
    get_network_namespace,
    get_networks_by_namespace,
    is_known_asset,
    is_known_network,
    is_valid_caip2,
)


class TestCaip2:
    """Tests for CAIP-2 syntax checks."""

    @pytest.mark.parametrize("value", [
        "eip155:8453",
        "solana:5eykt4UsFv8P8NJdTREpY1vzqKqZKvdp",
        "stacks:2147483648",
        "cosmos:cosmoshub-4",
    ])
    def test_valid_identifiers(self, value):
        """Test well-formed identifiers, known or not."""
        assert is_valid_caip2(value) is True

    @pytest.mark.parametrize("value", [
        "base",
        "eip155:",
        ":8453",
        "EIP155:8453",
        "ab:1",
        "eip155:8453\n",
        "eip155:" + "1" * 33,
        123,
        None,
    ])
    def test_invalid_identifiers(self, value):
        """Test malformed identifiers and non-strings."""
        assert is_valid_caip2(value) is False

    def test_namespace(self):
        """Test namespace extraction."""
        assert get_network_namespace("eip155:8453") == "eip155"
        assert get_network_namespace("base") is None


class TestNetworks:
    """Tests for the network registry."""

    def test_base(self):
        """Test Base mainnet metadata."""
        info = get_network_info("eip155:8453")
        assert info.name == "Base"
        assert info.type == "evm"
        assert info.testnet is False

    def test_solana_mainnet_name(self):
        """Test Solana mainnet display name."""
        info = get_network_info("solana:5eykt4UsFv8P8NJdTREpY1vzqKqZKvdp")
        assert info.name == "Solana Mainnet"
        assert info.type == "solana"

    def test_stacks_testnet(self):
        """Test Stacks testnet is flagged as a testnet."""
        assert get_network_info("stacks:2147483648").testnet is True

    def test_unknown_network(self):
        """Test well-formed but unknown networks."""
        assert get_network_info("eip155:999999") is None
        assert is_known_network("eip155:999999") is False
        assert is_known_network("aptos:1") is True

    def test_by_namespace(self):
        """Test listing networks of one namespace."""
        evm = dict(get_networks_by_namespace("eip155"))
        assert set(evm) == {"eip155:8453", "eip155:84532", "eip155:43114", "eip155:43113"}
        assert get_networks_by_namespace("cosmos") == []

    def test_registry_is_read_only(self):
        """Test the registry cannot be mutated."""
        with pytest.raises(TypeError):
            KNOWN_NETWORKS["eip155:1"] = KNOWN_NETWORKS["eip155:8453"]


class TestAssets:
    """Tests for the asset registry."""

    def test_evm_lookup_ignores_case(self):
        """Test EVM addresses match regardless of case."""
        checksummed = "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913"
        info = get_asset_info("eip155:8453", checksummed)
        assert info.symbol == "USDC"
        assert info.decimals == 6
        assert is_known_asset("eip155:8453", checksummed.lower()) is True

    def test_solana_lookup_is_exact(self):
        """Test Solana mints are case-sensitive."""
        mint = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
        network = "solana:5eykt4UsFv8P8NJdTREpY1vzqKqZKvdp"
        assert is_known_asset(network, mint) is True
        assert is_known_asset(network, mint.lower()) is False

    def test_asset_on_wrong_network(self):
        """Test an asset is only known on its own network."""
        assert is_known_asset("eip155:84532", "0x833589fcd6edb6e08f4c7c32d4f71b54bda02913") is False

    def test_unknown_network_has_no_assets(self):
        """Test lookups on networks without assets."""
        assert get_asset_info("stellar:pubnet", "USDC") is None

    def test_asset_networks_are_known(self):
        """Test every asset network is in the network registry."""
        for network in KNOWN_ASSETS:
            assert is_known_network(network)


class TestSimpleNames:
    """Tests for legacy simple chain names."""

    @pytest.mark.parametrize("name,expected", [
        ("base", "eip155:8453"),
        ("Base", "eip155:8453"),
        ("BASE-SEPOLIA", "eip155:84532"),
        ("base_sepolia", "eip155:84532"),
        ("solana", "solana:5eykt4UsFv8P8NJdTREpY1vzqKqZKvdp"),
        ("stacks-testnet", "stacks:2147483648"),
    ])
    def test_mapping(self, name, expected):
        """Test case-insensitive name mapping."""
        assert get_canonical_network(name) == expected

    def test_unknown_name(self):
        """Test unknown names and non-strings map to None."""
        assert get_canonical_network("ethereum-classic") is None
        assert get_canonical_network(None) is None

    def test_every_name_maps_to_known_network(self):
        """Test no alias points outside the registry."""
        for caip2 in SIMPLE_NAME_TO_CAIP2.values():
            assert is_known_network(caip2)
