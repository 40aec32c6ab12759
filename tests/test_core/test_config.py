"""Tests for configuration system."""

import os

import pytest

from after.core.config import AfterConfig, find_config_file, load_config
from after.core.exceptions import ConfigError, ConfigNotFoundError


class TestAfterConfig:
    """Tests for AfterConfig class."""

    def test_empty_config(self):
        config = AfterConfig()
        assert config.defaults == {}
        assert config.output_format == "iso"
        assert config.utc is False
        assert config.source_path is None

    def test_values(self):
        config = AfterConfig(defaults={"format": "%H:%M", "utc": True})
        assert config.output_format == "%H:%M"
        assert config.utc is True

    def test_invalid_utc(self):
        config = AfterConfig(defaults={"utc": "yes"})
        with pytest.raises(ConfigError, match="defaults.utc"):
            config.utc

    def test_invalid_format(self):
        config = AfterConfig(defaults={"format": ""})
        with pytest.raises(ConfigError, match="defaults.format"):
            config.output_format


class TestLoadConfig:
    """Tests for config loading."""

    def test_load_config_from_file(self, sample_config):
        config = load_config(sample_config)

        assert config.output_format == "timestamp"
        assert config.utc is True
        assert config.source_path == sample_config

    def test_load_config_without_file(self, temp_dir, isolated_home):
        old_cwd = os.getcwd()
        os.chdir(temp_dir)
        try:
            config = load_config()
            assert config == AfterConfig()
        finally:
            os.chdir(old_cwd)

    def test_load_from_pyproject(self, temp_dir):
        pyproject = temp_dir / "pyproject.toml"
        pyproject.write_text('[tool.after.defaults]\nformat = "%Y"\n')

        config = load_config(pyproject)
        assert config.output_format == "%Y"

    def test_missing_explicit_path(self, temp_dir):
        with pytest.raises(ConfigNotFoundError):
            load_config(temp_dir / "missing.toml")

    def test_invalid_toml(self, temp_dir):
        bad = temp_dir / "after.toml"
        bad.write_text("[defaults\nformat = \n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(bad)

    def test_defaults_must_be_table(self, temp_dir):
        bad = temp_dir / "after.toml"
        bad.write_text('defaults = "iso"\n')
        with pytest.raises(ConfigError, match="must be a table"):
            load_config(bad)


class TestFindConfigFile:
    """Tests for config file discovery."""

    def test_find_config_in_current_dir(self, temp_dir):
        config_file = temp_dir / "after.toml"
        config_file.write_text('[defaults]\nformat = "iso"\n')

        old_cwd = os.getcwd()
        os.chdir(temp_dir)
        try:
            assert find_config_file() == config_file
        finally:
            os.chdir(old_cwd)

    def test_find_config_in_pyproject(self, temp_dir):
        pyproject = temp_dir / "pyproject.toml"
        pyproject.write_text('[tool.after]\n[tool.after.defaults]\nutc = true\n')

        old_cwd = os.getcwd()
        os.chdir(temp_dir)
        try:
            assert find_config_file() == pyproject
        finally:
            os.chdir(old_cwd)

    def test_find_user_config(self, temp_dir, isolated_home):
        user_config = isolated_home / ".config" / "after" / "config.toml"
        user_config.parent.mkdir(parents=True)
        user_config.write_text("[defaults]\nutc = true\n")

        old_cwd = os.getcwd()
        os.chdir(temp_dir)
        try:
            assert find_config_file() == user_config
        finally:
            os.chdir(old_cwd)
