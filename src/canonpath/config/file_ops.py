"""Utility helpers for configuration file persistence."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def write_text_file(path: Path, content: str) -> None:
    """Replace ``path`` with ``content`` in one step, creating parent directories.

    The text is written to a temporary sibling which then replaces ``path``.
    """

    path.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            _ = handle.write(content)
        os.replace(temp_name, path)
    except BaseException:
        Path(temp_name).unlink(missing_ok=True)
        raise


__all__ = ["write_text_file"]
