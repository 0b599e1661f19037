# =============================================================================
# test_config.py - Assembler Configuration Tests
# =============================================================================

import pytest

from hack_sdk.config import AssemblerConfig, DEFAULT_CONFIG


class TestAssemblerConfig:
    """Test defaults and environment overrides."""

    def test_defaults_match_hack_memory_map(self):
        assert DEFAULT_CONFIG.variable_base == 16
        assert DEFAULT_CONFIG.screen_base == 16384
        assert DEFAULT_CONFIG.max_address == 32767
        assert DEFAULT_CONFIG.hack_suffix == ".hack"

    def test_from_env_without_overrides(self, monkeypatch):
        for name in ("HACK_VARIABLE_BASE", "HACK_SCREEN_BASE", "HACK_MAX_ADDRESS"):
            monkeypatch.delenv(name, raising=False)
        assert AssemblerConfig.from_env() == DEFAULT_CONFIG

    def test_from_env_overrides(self, monkeypatch):
        monkeypatch.setenv("HACK_VARIABLE_BASE", "32")
        monkeypatch.setenv("HACK_SCREEN_BASE", "8192")
        config = AssemblerConfig.from_env()
        assert config.variable_base == 32
        assert config.screen_base == 8192

    def test_from_env_rejects_garbage(self, monkeypatch):
        monkeypatch.setenv("HACK_MAX_ADDRESS", "lots")
        with pytest.raises(ValueError):
            AssemblerConfig.from_env()

    def test_is_immutable(self):
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.variable_base = 0

    @pytest.mark.parametrize("max_address", [32768, 70000, -1])
    def test_rejects_address_limit_outside_word(self, max_address):
        with pytest.raises(ValueError):
            AssemblerConfig(max_address=max_address)

    def test_smaller_address_limit_allowed(self):
        assert AssemblerConfig(max_address=1023).max_address == 1023

    def test_from_env_rejects_oversized_limit(self, monkeypatch):
        monkeypatch.setenv("HACK_MAX_ADDRESS", "70000")
        with pytest.raises(ValueError):
            AssemblerConfig.from_env()
