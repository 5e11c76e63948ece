"""Shared value objects used across layers."""

from .policies import CurrentDirPolicy

__all__ = ["CurrentDirPolicy"]
