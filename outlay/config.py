"""Configuration file management for outlay."""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w

from outlay.errors import ConfigError

DEFAULT_CATEGORIES = ("Food", "Transport", "Bills", "Shopping", "Entertainment")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Effective configuration, with defaults for anything not set."""

    currency_symbol: str = "KES"
    db_path: Path | None = None
    log_level: str = "WARNING"
    seed_categories: tuple[str, ...] = field(default=DEFAULT_CATEGORIES)


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "outlay" / "config.toml"


def default_config() -> dict[str, Any]:
    defaults = Settings()
    return {
        "display": {"currency_symbol": defaults.currency_symbol},
        "database": {"path": ""},
        "logging": {"level": defaults.log_level},
        "seed": {"categories": list(defaults.seed_categories)},
    }


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    save_config(default_config(), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def _section(config: dict[str, Any], name: str) -> dict[str, Any]:
    section = config.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table")
    return section


def _string(section: dict[str, Any], key: str, default: str, where: str) -> str:
    value = section.get(key, default)
    if not isinstance(value, str):
        raise ConfigError(f"{where}.{key} must be a string")
    return value


def parse_settings(config: dict[str, Any]) -> Settings:
    """Build Settings from a raw config dictionary.

    Raises:
        ConfigError: If a value has the wrong type or an unknown log level.
    """
    defaults = Settings()

    symbol = _string(_section(config, "display"), "currency_symbol", defaults.currency_symbol, "display")

    raw_path = _string(_section(config, "database"), "path", "", "database")
    db_path = Path(raw_path).expanduser() if raw_path else None

    level = _string(_section(config, "logging"), "level", defaults.log_level, "logging").upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"logging.level must be one of {', '.join(LOG_LEVELS)}")

    names = _section(config, "seed").get("categories", list(defaults.seed_categories))
    if not isinstance(names, list) or not all(isinstance(name, str) for name in names):
        raise ConfigError("seed.categories must be a list of strings")

    return Settings(
        currency_symbol=symbol,
        db_path=db_path,
        log_level=level,
        seed_categories=tuple(names),
    )


def load_settings(config_path: Path | None = None) -> Settings:
    """Load effective settings, falling back to defaults when no config file exists.

    Args:
        config_path: Path to config file. If None, uses default location.

    Raises:
        ConfigError: If the file exists but is invalid.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        return Settings()
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid config file: {e}") from e
    return parse_settings(config)
