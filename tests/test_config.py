"""Tests for outlay.config."""

import stat
from pathlib import Path

import pytest

from outlay.config import (
    DEFAULT_CATEGORIES,
    Settings,
    create_default_config,
    get_config_path,
    load_config,
    load_settings,
    parse_settings,
    save_config,
)
from outlay.errors import ConfigError


class TestConfigFile:
    """Tests for reading and writing the TOML file."""

    def test_config_path_follows_xdg(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_config_path() == tmp_path / "outlay" / "config.toml"

    def test_default_config_round_trips(self, tmp_path: Path) -> None:
        """The generated file should load back to the default settings."""
        path = tmp_path / "outlay" / "config.toml"

        create_default_config(path)

        assert load_config(path)["display"]["currency_symbol"] == "KES"
        assert load_settings(path) == Settings()

    def test_saved_file_is_private(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"

        save_config({"display": {"currency_symbol": "USD"}}, path)

        assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        assert load_settings(tmp_path / "absent.toml") == Settings()

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text("[display\ncurrency_symbol = ")

        with pytest.raises(ConfigError, match="Invalid config file"):
            load_settings(path)


class TestParseSettings:
    """Tests for parse_settings."""

    def test_empty_config_uses_defaults(self) -> None:
        settings = parse_settings({})

        assert settings.currency_symbol == "KES"
        assert settings.db_path is None
        assert settings.log_level == "WARNING"
        assert settings.seed_categories == DEFAULT_CATEGORIES

    def test_values_are_read(self, tmp_path: Path) -> None:
        settings = parse_settings(
            {
                "display": {"currency_symbol": "USD"},
                "database": {"path": str(tmp_path / "spend.db")},
                "logging": {"level": "debug"},
                "seed": {"categories": ["Rent", "Food"]},
            }
        )

        assert settings.currency_symbol == "USD"
        assert settings.db_path == tmp_path / "spend.db"
        assert settings.log_level == "DEBUG"
        assert settings.seed_categories == ("Rent", "Food")

    def test_blank_database_path_means_default(self) -> None:
        assert parse_settings({"database": {"path": ""}}).db_path is None

    @pytest.mark.parametrize(
        "config",
        [
            {"display": "KES"},
            {"display": {"currency_symbol": 5}},
            {"logging": {"level": "LOUD"}},
            {"seed": {"categories": "Food"}},
            {"seed": {"categories": ["Food", 1]}},
        ],
    )
    def test_wrong_types_rejected(self, config: dict) -> None:
        """Values of the wrong type should be a ConfigError, not a crash later."""
        with pytest.raises(ConfigError):
            parse_settings(config)
