"""Tests for settings derived from the configuration."""

from __future__ import annotations

from canonpath.config.settings import current_dir_policy, resolve_current_dir_policy
from canonpath.shared.policies import CurrentDirPolicy


def test_default_policy_is_reject() -> None:
    assert current_dir_policy() is CurrentDirPolicy.REJECT
    assert resolve_current_dir_policy() is CurrentDirPolicy.REJECT


def test_configured_policy(write_config) -> None:
    _ = write_config('current_dir_policy = "elide"\n')

    assert resolve_current_dir_policy() is CurrentDirPolicy.ELIDE


def test_explicit_policy_wins(write_config) -> None:
    _ = write_config('current_dir_policy = "elide"\n')

    assert resolve_current_dir_policy(CurrentDirPolicy.REJECT) is CurrentDirPolicy.REJECT


def test_policy_from_user_input() -> None:
    assert CurrentDirPolicy.from_user_input("  Elide ") is CurrentDirPolicy.ELIDE
