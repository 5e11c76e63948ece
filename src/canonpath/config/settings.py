"""Where: src/canonpath/config/settings.py
What: Runtime settings derived from the persisted configuration.
Why: Give the command line layer resolved values; the path engine never reads them.
Assumptions: - The configuration singleton is loaded lazily, on first use.
Trade-offs: - An explicit argument always wins over the configured value.
"""

from __future__ import annotations

from canonpath.config.config import Config
from canonpath.shared.policies import CurrentDirPolicy


def current_dir_policy() -> CurrentDirPolicy:
    """The configured treatment of ``.`` components."""
    return Config.load().current_dir_policy


def resolve_current_dir_policy(policy: CurrentDirPolicy | None = None) -> CurrentDirPolicy:
    """Return ``policy`` if given, else the configured one."""
    if policy is not None:
        return policy
    return current_dir_policy()


__all__ = ["current_dir_policy", "resolve_current_dir_policy"]
