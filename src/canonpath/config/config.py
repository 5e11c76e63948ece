"""Configuration management for canonpath."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from canonpath.config.file_ops import write_text_file
from canonpath.config.paths import default_config_path
from canonpath.platform.logging import logger
from canonpath.shared.policies import CurrentDirPolicy

_LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class ConfigError(ValueError):
    """Raised when the configuration file cannot be parsed or holds invalid values."""

    def __init__(self, config_file: Path | None, reason: str) -> None:
        self.config_file: Path | None = config_file
        self.reason: str = reason
        where = f" '{config_file}'" if config_file is not None else ""
        super().__init__(f"Invalid configuration{where}: {reason}")


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # How "." inside a path is treated: "reject" or "elide"
    current_dir_policy: CurrentDirPolicy = CurrentDirPolicy.REJECT

    # Log file path (CLI only)
    log_file: Path | None = _path_field()

    # Console log level (CLI only)
    log_level: str = "INFO"

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Normalize raw TOML values.

        String paths become ``Path`` objects (fields flagged by ``_path_field``),
        the policy string becomes a ``CurrentDirPolicy``, and the log level is
        upper-cased and checked.

        Raises:
            ConfigError: If the policy or log level is not recognised.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        if not isinstance(self.current_dir_policy, CurrentDirPolicy):
            try:
                self.current_dir_policy = CurrentDirPolicy.from_user_input(str(self.current_dir_policy))
            except ValueError as e:
                raise ConfigError(None, str(e)) from e

        level = str(self.log_level).strip().upper()
        if level not in _LOG_LEVELS:
            raise ConfigError(None, f"Unsupported log level '{self.log_level}'")
        self.log_level = level

    @property
    def log_level_number(self) -> int:
        """The ``logging`` module constant for ``log_level``."""
        return logging.getLevelNamesMapping()[self.log_level]

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to file.

        Args:
            target: Destination file. Defaults to ``default_config_path()``.

        Returns:
            Path: The file that was written.
        """
        config_dict = asdict(self)

        # Convert Path and enum objects to strings for serialization
        for key, value in config_dict.items():
            if isinstance(value, CurrentDirPolicy):
                config_dict[key] = value.value
            elif isinstance(value, Path):
                config_dict[key] = str(value)

        target = target or default_config_path()
        try:
            write_text_file(target, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# canonpath configuration file")
        lines.append("")

        lines.append("# How a '.' component inside a path is treated")
        lines.append('#   "reject": any "." is an error (default)')
        lines.append('#   "elide":  "." after the first component is dropped')
        lines.append(
            f"current_dir_policy = {self._format_toml_value(config['current_dir_policy'])}"
        )
        lines.append("")

        lines.append("# Log file path for the command line tool (optional)")
        lines.append('# Example: log_file = "/path/to/logs/canonpath.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Console log level for the command line tool")
        lines.append(f"log_level = {self._format_toml_value(config['log_level'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            return f'"{str(value)}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults; nothing is written.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file is not valid TOML or holds invalid values.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        if not config_file.exists():
            logger.debug("No configuration at %s, using defaults", config_file)
            instance = cls()
            cls._instance = instance
            cls._loaded_from = None
            return instance

        try:
            with open(config_file, "rb") as f:
                config_dict = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            logger.error("Failed to load configuration: %s", e)
            raise ConfigError(config_file, str(e)) from e

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
        config_dict = {key: value for key, value in config_dict.items() if key in known}

        try:
            instance = cls(**config_dict)
        except ConfigError as e:
            logger.error("Failed to load configuration: %s", e.reason)
            raise ConfigError(config_file, e.reason) from e

        logger.info("Configuration loaded from %s", config_file)
        cls._instance = instance
        cls._loaded_from = config_file
        return instance


__all__ = ["Config", "ConfigError"]
