"""src/canonpath/ui/cli/models.py
What: Shared UI-facing data structures for CLI presentation layers.
Why: Provide lightweight value objects without introducing import cycles.
"""

from __future__ import annotations

from dataclasses import dataclass

from canonpath.features.path import FilePathBuf, FilePathError


@dataclass(slots=True, frozen=True)
class CheckResult:
    """Outcome of checking one command line path."""

    source: str
    canonical: FilePathBuf | None = None
    error: FilePathError | None = None

    @property
    def success(self) -> bool:
        return self.error is None


__all__ = ["CheckResult"]
