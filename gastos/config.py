"""Configuration file management for gastos."""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w

from gastos.domain.categories import (
    BUILTIN_CATEGORIES,
    UNKNOWN_CATEGORY_POLICIES,
    UnknownCategoryPolicy,
    dedupe_labels,
)
from gastos.domain.models import CategoryName, Payer
from gastos.errors import ConfigError

DEFAULT_PAYER_COLORS: dict[str, str] = {
    "Tomi": "blue",
    "Gabi": "magenta",
}


@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    currency_symbol: str = "$"
    default_payer: Payer = Payer("Tomi")
    unknown_categories: UnknownCategoryPolicy = "accept"
    builtin_categories: tuple[CategoryName, ...] = BUILTIN_CATEGORIES
    payer_colors: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_PAYER_COLORS))


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
    return get_xdg_config_home() / "gastos" / "config.toml"


def default_config() -> dict[str, Any]:
    """Default configuration written by `gastos init`."""
    return {
        "currency_symbol": "$",
        "default_payer": "Tomi",
        "unknown_categories": "accept",
        "builtin_categories": list(BUILTIN_CATEGORIES),
        "payer_colors": dict(DEFAULT_PAYER_COLORS),
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


def settings_from_config(config: dict[str, Any]) -> Settings:
    """Build Settings from a raw configuration dictionary.

    Missing keys fall back to defaults.

    Raises:
        ConfigError: If a value has the wrong type or an unknown policy is set.
    """
    defaults = Settings()

    policy = config.get("unknown_categories", defaults.unknown_categories)
    if policy not in UNKNOWN_CATEGORY_POLICIES:
        choices = ", ".join(UNKNOWN_CATEGORY_POLICIES)
        raise ConfigError(f"unknown_categories must be one of {choices}, got {policy!r}")

    builtin_raw = config.get("builtin_categories", list(defaults.builtin_categories))
    if not isinstance(builtin_raw, list) or not all(isinstance(label, str) for label in builtin_raw):
        raise ConfigError("builtin_categories must be a list of strings")
    builtin = dedupe_labels(builtin_raw)

    payer_colors = config.get("payer_colors", defaults.payer_colors)
    if not isinstance(payer_colors, dict):
        raise ConfigError("payer_colors must be a table of payer = colour")

    default_payer = str(config.get("default_payer", defaults.default_payer)).strip()
    if not default_payer:
        raise ConfigError("default_payer must not be empty")

    return Settings(
        currency_symbol=str(config.get("currency_symbol", defaults.currency_symbol)),
        default_payer=Payer(default_payer),
        unknown_categories=policy,
        builtin_categories=builtin,
        payer_colors={str(k): str(v) for k, v in payer_colors.items()},
    )


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings, using defaults when the config file doesn't exist.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Settings for the session.

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        return Settings()
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid config file: {e}") from e

    return settings_from_config(config)
