"""Tests for configuration validation with Pydantic."""

import pytest
import yaml
from pydantic import ValidationError

from toprompt.domain.config import DEFAULT_MAX_FILE_SIZE, AppConfig, LimitsConfig, OutputConfig
from toprompt.infrastructure.config.config_manager import ConfigManager, ConfigurationError


class TestLimitsConfigValidation:
    """Tests for LimitsConfig validation."""

    def test_default_is_five_mib(self):
        """Test default file size limit"""
        assert LimitsConfig().max_file_size == 5 * 1024 * 1024 == DEFAULT_MAX_FILE_SIZE

    def test_max_file_size_zero_allowed(self):
        """Test zero is the lowest accepted limit"""
        assert LimitsConfig(max_file_size=0).max_file_size == 0

    def test_max_file_size_negative(self):
        """Test max_file_size must not be negative"""
        with pytest.raises(ValidationError, match="max_file_size"):
            LimitsConfig(max_file_size=-1)


class TestAppConfigValidation:
    """Tests for AppConfig validation."""

    def test_defaults(self):
        """Test default configuration"""
        config = AppConfig()
        assert config.output == OutputConfig(copy_to_clipboard=False, summary=True)

    def test_unknown_section_rejected(self):
        """Test unknown top-level keys are rejected"""
        with pytest.raises(ValidationError, match="network"):
            AppConfig(network={"enabled": True})


class TestConfigManager:
    """Tests for ConfigManager loading."""

    def test_load_from_file(self, tmp_path, monkeypatch):
        """Test values from YAML override defaults"""
        monkeypatch.delenv("TOPROMPT_MAX_FILE_SIZE", raising=False)
        config_file = tmp_path / ".toprompt.yml"
        config_file.write_text(
            yaml.safe_dump({"limits": {"max_file_size": 1024}, "output": {"summary": False}}),
            encoding="utf-8",
        )

        manager = ConfigManager(config_path=config_file)

        assert manager.get_limits_config().max_file_size == 1024
        assert manager.get_output_config().summary is False
        assert manager.get_output_config().copy_to_clipboard is False

    def test_string_path_accepted(self, tmp_path):
        """Test config path may be given as a string"""
        config_file = tmp_path / ".toprompt.yml"
        config_file.write_text("output:\n  copy_to_clipboard: true\n", encoding="utf-8")
        assert ConfigManager(config_path=str(config_file)).get_output_config().copy_to_clipboard is True

    def test_search_from_cwd(self, tmp_path, monkeypatch):
        """Test config file is found in a parent directory"""
        (tmp_path / ".toprompt.yml").write_text("limits:\n  max_file_size: 10\n", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        monkeypatch.delenv("TOPROMPT_MAX_FILE_SIZE", raising=False)

        assert ConfigManager().get_limits_config().max_file_size == 10

    def test_env_override(self, tmp_path, monkeypatch):
        """Test TOPROMPT_MAX_FILE_SIZE overrides the file"""
        config_file = tmp_path / ".toprompt.yml"
        config_file.write_text("limits:\n  max_file_size: 10\n", encoding="utf-8")
        monkeypatch.setenv("TOPROMPT_MAX_FILE_SIZE", "2048")

        assert ConfigManager(config_path=config_file).get_limits_config().max_file_size == 2048

    def test_invalid_value_reports_field(self, tmp_path, monkeypatch):
        """Test validation errors name the offending field"""
        config_file = tmp_path / ".toprompt.yml"
        config_file.write_text("limits:\n  max_file_size: -5\n", encoding="utf-8")
        monkeypatch.delenv("TOPROMPT_MAX_FILE_SIZE", raising=False)

        with pytest.raises(ConfigurationError, match="limits.max_file_size"):
            ConfigManager(config_path=config_file)

    def test_invalid_yaml(self, tmp_path):
        """Test malformed YAML raises ConfigurationError"""
        config_file = tmp_path / ".toprompt.yml"
        config_file.write_text("limits: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Failed to load config"):
            ConfigManager(config_path=config_file)

    def test_non_mapping_yaml(self, tmp_path):
        """Test a top-level list is rejected"""
        config_file = tmp_path / ".toprompt.yml"
        config_file.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="mapping"):
            ConfigManager(config_path=config_file)
