"""Configuration loading and derived settings."""

from .config import Config, ConfigError
from .paths import ENV_CONFIG_FILE, default_config_path, default_log_file

__all__ = ["Config", "ConfigError", "ENV_CONFIG_FILE", "default_config_path", "default_log_file"]
