"""Configuration file management for pagecal."""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from pagecal.domain.models import DEFAULT_MAX_YEAR, DEFAULT_MIN_YEAR, SelectionMode, YearSpan


@dataclass(frozen=True)
class CalendarConfig:
    """Immutable picker settings read from the config file."""

    min_year: int = DEFAULT_MIN_YEAR
    max_year: int = DEFAULT_MAX_YEAR
    mode: SelectionMode = SelectionMode.SINGLE_DATE

    @property
    def span(self) -> YearSpan:
        return YearSpan(self.min_year, self.max_year)


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
    return get_xdg_config_home() / "pagecal" / "config.toml"


def default_config() -> dict[str, Any]:
    return {
        "min_year": DEFAULT_MIN_YEAR,
        "max_year": DEFAULT_MAX_YEAR,
        "mode": SelectionMode.SINGLE_DATE.value,
    }


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)
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

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def parse_calendar_config(config: dict[str, Any]) -> CalendarConfig:
    """Build picker settings from a config dictionary.

    Missing keys fall back to defaults.

    Raises:
        ValueError: If a value has the wrong type, the mode is unknown,
            or min_year is after max_year.
    """
    defaults = default_config()
    min_year = config.get("min_year", defaults["min_year"])
    max_year = config.get("max_year", defaults["max_year"])
    for key, value in (("min_year", min_year), ("max_year", max_year)):
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"{key} must be an integer, got {value!r}")

    try:
        mode = SelectionMode(config.get("mode", defaults["mode"]))
    except ValueError as e:
        raise ValueError(f"Unknown selection mode: {config.get('mode')!r}") from e

    # YearSpan rejects an inverted span
    YearSpan(min_year, max_year)
    return CalendarConfig(min_year=min_year, max_year=max_year, mode=mode)


def load_calendar_config(config_path: Path | None = None) -> CalendarConfig:
    """Load picker settings, using defaults when the config file is missing.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        CalendarConfig with validated settings.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        return CalendarConfig()
    return parse_calendar_config(config)
