"""
Tests for x402check.normalize module.

Tests v1/v2 normalization and the flat legacy conversion.
"""

import copy

from x402check.normalize import normalize, normalize_flat_legacy


class TestNormalize:
    """Tests for normalize function."""

    def test_v2_copies_fields(self, valid_v2_config):
        """Test v2 configs keep accepts, resource and extensions."""
        result = normalize(valid_v2_config)
        assert result["x402Version"] == 2
        assert result["accepts"] == valid_v2_config["accepts"]
        assert result["resource"] == valid_v2_config["resource"]
        assert result["extensions"] == valid_v2_config["extensions"]

    def test_v2_returns_new_containers(self, valid_v2_config):
        """Test the result and its accepts list are fresh objects."""
        result = normalize(valid_v2_config)
        assert result is not valid_v2_config
        assert result["accepts"] is not valid_v2_config["accepts"]

    def test_idempotent(self, valid_v1_config, valid_v2_config):
        """Test normalizing a normalized config gives an equal, new dict."""
        for config in (valid_v1_config, valid_v2_config):
            once = normalize(config)
            twice = normalize(once)
            assert twice == once
            assert twice is not once
            assert twice["accepts"] is not once["accepts"]

    def test_does_not_mutate_input(self, valid_v1_config):
        """Test the input is unchanged after normalization."""
        before = copy.deepcopy(valid_v1_config)
        normalize(valid_v1_config)
        assert valid_v1_config == before

    def test_v1_maps_fields(self, valid_v1_config):
        """Test maxAmountRequired becomes amount and resource is lifted."""
        result = normalize(valid_v1_config)
        assert result["x402Version"] == 2
        entry = result["accepts"][0]
        assert entry["amount"] == "500000"
        assert "maxAmountRequired" not in entry
        assert "resource" not in entry
        assert entry["maxTimeoutSeconds"] == 30
        assert entry["extra"] == {"name": "USDC", "version": "2"}
        assert result["resource"] == {"url": "https://api.example.com/v1/data"}
        assert result["error"] == "Payment required"

    def test_v1_first_resource_wins(self):
        """Test only the first entry's resource is lifted."""
        config = {
            "x402Version": 1,
            "accepts": [
                {"scheme": "exact", "resource": {"url": "https://a.example.com"}},
                {"scheme": "exact", "resource": {"url": "https://b.example.com"}},
            ],
        }
        assert normalize(config)["resource"] == {"url": "https://a.example.com"}

    def test_v1_top_level_resource_fallback(self):
        """Test a top-level resource is used when no entry has one."""
        config = {
            "x402Version": 1,
            "accepts": [{"scheme": "exact"}],
            "resource": {"url": "https://api.example.com"},
        }
        assert normalize(config)["resource"] == {"url": "https://api.example.com"}

    def test_v1_omits_absent_optional_fields(self):
        """Test fields missing from the entry are not invented."""
        config = {"x402Version": 1, "accepts": [{"scheme": "exact", "network": "eip155:8453"}]}
        assert normalize(config)["accepts"] == [{"scheme": "exact", "network": "eip155:8453"}]

    def test_json_string(self):
        """Test JSON text input."""
        result = normalize('{"x402Version": 2, "accepts": []}')
        assert result == {"x402Version": 2, "accepts": []}

    def test_unsupported_inputs(self, sample_manifest):
        """Test manifests, unknown shapes and bad JSON give None."""
        assert normalize(sample_manifest) is None
        assert normalize({"payTo": "0xabc"}) is None
        assert normalize("{oops") is None
        assert normalize([]) is None


class TestNormalizeFlatLegacy:
    """Tests for normalize_flat_legacy function."""

    def test_top_level_fields(self):
        """Test aliases and simple chain names are converted."""
        result = normalize_flat_legacy({
            "address": "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
            "minAmount": "1000",
            "chain": "Base",
            "currency": "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913",
        })
        assert result == {
            "x402Version": 2,
            "accepts": [{
                "scheme": "exact",
                "network": "eip155:8453",
                "amount": "1000",
                "asset": "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913",
                "payTo": "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
            }],
        }

    def test_unknown_chain_kept(self):
        """Test unrecognized chain names are kept as written."""
        result = normalize_flat_legacy({"payTo": "x", "amount": "1", "network": "moonbeam"})
        assert result["accepts"][0]["network"] == "moonbeam"

    def test_payments_array(self):
        """Test each payment object becomes one accepts entry."""
        result = normalize_flat_legacy({
            "payments": [
                {"payTo": "a", "amount": "1", "network": "base"},
                "skip-me",
                {"payTo": "b", "amount": "2", "network": "solana", "maxTimeoutSeconds": 30},
            ],
        })
        accepts = result["accepts"]
        assert len(accepts) == 2
        assert accepts[0]["payTo"] == "a"
        assert accepts[1]["network"] == "solana:5eykt4UsFv8P8NJdTREpY1vzqKqZKvdp"
        assert accepts[1]["maxTimeoutSeconds"] == 30

    def test_not_flat(self, valid_v2_config):
        """Test configs with an accepts array are not flat."""
        assert normalize_flat_legacy(valid_v2_config) is None
        assert normalize_flat_legacy("nope") is None
