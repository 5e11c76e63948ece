"""
Summary: Entry points that validate a native path and report rejections.
Why: Callers need one call that canonicalizes or raises a typed error, with rejections logged.
"""

from __future__ import annotations

from canonpath.platform.logging import logger
from canonpath.shared.policies import CurrentDirPolicy

from ..domain.errors import FilePathError
from ..domain.file_path import FilePathBuf
from ..domain.native import NativePath


def validate_and_canonicalize(
    native_path: NativePath,
    *,
    current_dir_policy: CurrentDirPolicy = CurrentDirPolicy.REJECT,
) -> FilePathBuf:
    """Validate ``native_path`` and return its canonical form.

    Args:
        native_path: Raw path as ``str``, ``bytes`` or a path-like object.
        current_dir_policy: Treatment of ``.`` after the first component.
            Defaults to rejecting it.

    Returns:
        FilePathBuf: The path with components joined by single ``/``.

    Raises:
        FilePathError: The first problem found in the path.
    """
    try:
        path = FilePathBuf(native_path, current_dir_policy=current_dir_policy)
    except FilePathError as e:
        logger.debug("Rejected path %r: %s", native_path, e)
        raise
    logger.debug("Canonicalized %r as %r", native_path, path.as_str())
    return path


def is_valid_path(
    native_path: NativePath,
    *,
    current_dir_policy: CurrentDirPolicy = CurrentDirPolicy.REJECT,
) -> bool:
    """Check whether ``native_path`` would be accepted."""
    try:
        _ = validate_and_canonicalize(native_path, current_dir_policy=current_dir_policy)
    except FilePathError:
        return False
    return True


__all__ = ["is_valid_path", "validate_and_canonicalize"]
