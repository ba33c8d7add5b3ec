# =============================================================================
# test_config.py - Configuration Tests
# =============================================================================
# Tests for environment-derived defaults and explicit overrides.
# =============================================================================

import pytest

from y86asm.assembler import Assembler
from y86asm.config import AssemblerConfig, get_default_config, set_default_config
from y86asm.errors import UnrecognizedLineError


class TestFromEnv:
    """Test reading configuration from environment variables."""

    def test_defaults(self):
        config = AssemblerConfig.from_env()
        assert config.strict is False
        assert config.check_overlaps is False
        assert config.listing_suffix == ".yo"

    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_true_values(self, monkeypatch, value):
        monkeypatch.setenv("Y86ASM_STRICT", value)
        assert AssemblerConfig.from_env().strict is True

    @pytest.mark.parametrize("value", ["0", "false", "No", "off"])
    def test_false_values(self, monkeypatch, value):
        monkeypatch.setenv("Y86ASM_CHECK_OVERLAPS", value)
        assert AssemblerConfig.from_env().check_overlaps is False

    def test_invalid_value_ignored(self, monkeypatch):
        monkeypatch.setenv("Y86ASM_STRICT", "maybe")
        assert AssemblerConfig.from_env().strict is False

    def test_check_overlaps(self, monkeypatch):
        monkeypatch.setenv("Y86ASM_CHECK_OVERLAPS", "true")
        config = AssemblerConfig.from_env()
        assert config.check_overlaps is True
        assert config.strict is False


class TestDefaultConfig:
    """Test the cached process-wide configuration."""

    def test_cached(self):
        assert get_default_config() is get_default_config()

    def test_set_default(self):
        config = AssemblerConfig(strict=True)
        set_default_config(config)
        assert get_default_config() is config

    def test_reset_rereads_environment(self, monkeypatch):
        assert get_default_config().strict is False
        monkeypatch.setenv("Y86ASM_STRICT", "1")
        set_default_config(None)
        assert get_default_config().strict is True


class TestAssemblerConfig:
    """Test how the Assembler combines configuration sources."""

    def test_uses_default_config(self, monkeypatch):
        monkeypatch.setenv("Y86ASM_STRICT", "1")
        with pytest.raises(UnrecognizedLineError):
            Assembler().assemble_string("bogus")

    def test_keyword_overrides_environment(self, monkeypatch):
        monkeypatch.setenv("Y86ASM_STRICT", "1")
        asm = Assembler(strict=False)
        assert asm.assemble_string("bogus\nhalt") == ["0x0:    00"]

    def test_keyword_overrides_config(self):
        asm = Assembler(config=AssemblerConfig(strict=True, check_overlaps=True),
                        check_overlaps=False)
        assert asm.config.strict is True
        assert asm.config.check_overlaps is False

    def test_config_not_mutated(self):
        base = AssemblerConfig()
        Assembler(config=base, strict=True)
        assert base.strict is False
