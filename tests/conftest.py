"""Shared pytest fixtures isolating configuration and logging state."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from canonpath.config.config import Config
from canonpath.config.paths import ENV_CONFIG_FILE
from canonpath.platform.logging import LOGGER_NAME


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Location of the configuration file used by the current test.

    The file does not exist until a test writes it.
    """

    return tmp_path / "config" / "canonpath.toml"


@pytest.fixture(autouse=True)
def config_runtime_env(config_file: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Point configuration at a temporary file and reset the singleton around a test run."""

    monkeypatch.setenv(ENV_CONFIG_FILE, str(config_file))

    original_instance = Config._instance  # pyright: ignore[reportPrivateUsage]
    original_loaded_from = Config._loaded_from  # pyright: ignore[reportPrivateUsage]
    Config._instance = None  # pyright: ignore[reportPrivateUsage]
    Config._loaded_from = None  # pyright: ignore[reportPrivateUsage]

    try:
        yield None
    finally:
        Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
        Config._loaded_from = original_loaded_from  # pyright: ignore[reportPrivateUsage]


@pytest.fixture(autouse=True)
def restore_logger_handlers() -> Iterator[None]:
    """Undo handler changes made by ``setup_logger`` during a test."""

    logger = logging.getLogger(LOGGER_NAME)
    original_handlers = list(logger.handlers)
    original_level = logger.level

    try:
        yield None
    finally:
        for handler in list(logger.handlers):
            if handler not in original_handlers:
                handler.close()
        logger.handlers[:] = original_handlers
        logger.setLevel(original_level)


@pytest.fixture
def write_config(config_file: Path):
    """Return a helper that writes TOML text to the test configuration file."""

    def _write(content: str) -> Path:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        _ = config_file.write_text(content, encoding="utf-8")
        return config_file

    return _write
