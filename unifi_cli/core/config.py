"""
Configuration Management.

Two layers:
- YAML settings (config/settings/*.yaml) for non-secret application values
- Environment variables / .env for secrets (the UniFi API key)

Usage:
    from unifi_cli.core.config import get_app_config, get_settings

    name = get_app_config().application["name"]
    api_key = get_settings().unifi_key
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

SETTINGS_DIR = Path(__file__).resolve().parent.parent / "config" / "settings"


class Settings(BaseSettings):
    """Secrets read from the environment (or a local .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    unifi_key: str = ""


class AppConfig:
    """Non-secret settings loaded from the YAML files in config/settings."""

    def __init__(self, settings_dir: Path | None = None):
        self.settings_dir = settings_dir or SETTINGS_DIR
        self.application = load_yaml_config("application.yaml", self.settings_dir)
        self.logging = load_yaml_config("logging.yaml", self.settings_dir)


def get_settings_dir() -> Path:
    """Return the directory holding the YAML settings files."""
    return SETTINGS_DIR


def load_yaml_config(filename: str, settings_dir: Path | None = None) -> dict[str, Any]:
    """
    Load one YAML settings file.

    Args:
        filename: File name inside the settings directory (e.g. application.yaml)
        settings_dir: Override for the settings directory

    Returns:
        Parsed mapping (empty dict for an empty file)

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = (settings_dir or get_settings_dir()) / filename
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with path.open(encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


_app_config: AppConfig | None = None
_settings: Settings | None = None


def get_app_config() -> AppConfig:
    """Get the YAML application config, loading it on first use."""
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config


def get_settings() -> Settings:
    """Get the environment-backed secrets, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_config_cache() -> None:
    """Drop cached config so the next call re-reads files and environment."""
    global _app_config, _settings
    _app_config = None
    _settings = None
