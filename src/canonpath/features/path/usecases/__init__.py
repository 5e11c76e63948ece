"""
Summary: Export the path validation use cases.
Why: Keep the public entry points importable without reaching into modules.
"""

from .validation import is_valid_path, validate_and_canonicalize

__all__ = ["is_valid_path", "validate_and_canonicalize"]
