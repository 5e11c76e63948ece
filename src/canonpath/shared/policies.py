"""Policy values read by both the configuration loader and the path engine."""

from __future__ import annotations

from enum import Enum
from typing import Final


class CurrentDirPolicy(str, Enum):
    """How a ``.`` component inside a path is treated."""

    REJECT = "reject"
    ELIDE = "elide"

    @staticmethod
    def from_user_input(value: str) -> "CurrentDirPolicy":
        """Translate raw config or CLI input into the matching policy."""

        normalized = value.strip().lower()
        for policy in CurrentDirPolicy:
            if policy.value == normalized:
                return policy
        valid: Final[str] = ", ".join(p.value for p in CurrentDirPolicy)
        msg = f"Unsupported current directory policy '{value}'. Valid options: {valid}"
        raise ValueError(msg)


__all__ = ["CurrentDirPolicy"]
