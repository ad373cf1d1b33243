"""Tests for gastos.config."""

import stat

import pytest

from gastos.config import (
    Settings,
    create_default_config,
    get_config_path,
    load_config,
    load_settings,
    save_config,
    settings_from_config,
)
from gastos.domain.categories import BUILTIN_CATEGORIES
from gastos.errors import ConfigError


class TestConfigFile:
    """Tests for reading and writing the config file."""

    def test_default_config_round_trip(self, tmp_path) -> None:
        """Should write a config that loads back to default settings."""
        path = tmp_path / "gastos" / "config.toml"
        create_default_config(path)

        assert load_settings(path) == Settings()

    def test_permissions(self, tmp_path) -> None:
        """Should create the file readable by the owner only."""
        path = tmp_path / "config.toml"
        save_config({"currency_symbol": "$"}, path)

        assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_xdg_path(self, tmp_path, monkeypatch) -> None:
        """Should respect XDG_CONFIG_HOME."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_config_path() == tmp_path / "gastos" / "config.toml"

    def test_missing_file_gives_defaults(self, tmp_path) -> None:
        """Should fall back to defaults without a config file."""
        assert load_settings(tmp_path / "missing.toml") == Settings()

    def test_invalid_toml(self, tmp_path) -> None:
        """Should raise ConfigError for broken TOML."""
        path = tmp_path / "config.toml"
        path.write_text("currency_symbol = ")

        with pytest.raises(ConfigError):
            load_settings(path)

    def test_load_config_raw(self, tmp_path) -> None:
        """Should return the raw dictionary."""
        path = tmp_path / "config.toml"
        save_config({"default_payer": "Gabi"}, path)

        assert load_config(path) == {"default_payer": "Gabi"}


class TestSettingsFromConfig:
    """Tests for settings_from_config."""

    def test_partial_config_uses_defaults(self) -> None:
        """Should fill missing keys from defaults."""
        settings = settings_from_config({"default_payer": "Gabi", "unknown_categories": "reject"})

        assert settings.default_payer == "Gabi"
        assert settings.unknown_categories == "reject"
        assert settings.builtin_categories == BUILTIN_CATEGORIES
        assert settings.currency_symbol == "$"

    def test_custom_builtins(self) -> None:
        """Should clean configured built-in categories."""
        settings = settings_from_config({"builtin_categories": ["Food", " Food", "Rent"]})

        assert settings.builtin_categories == ("Food", "Rent")

    @pytest.mark.parametrize(
        "config",
        [
            {"unknown_categories": "maybe"},
            {"builtin_categories": "Food"},
            {"builtin_categories": ["Food", 3]},
            {"payer_colors": ["blue"]},
            {"default_payer": "  "},
        ],
    )
    def test_invalid_values(self, config) -> None:
        """Should raise ConfigError for unusable values."""
        with pytest.raises(ConfigError):
            settings_from_config(config)
