"""
Summary: Decompose a native path, validate every component, and join the canonical form.
Why: A single left-to-right walk decides acceptance and builds the canonical string.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from canonpath.shared.policies import CurrentDirPolicy

from .component import validate_normal_component
from .constants import MAX_PATH_LEN, SEPARATOR, utf8_length
from .errors import (
    CurrentDirectoryError,
    EmptyComponentError,
    EmptyPathError,
    InvalidUTF8Error,
    ParentDirectoryError,
    PathTooLongError,
    PrefixedPathError,
    RootDirectoryError,
)
from .native import NativeComponentKind, NativePath, decode_component, native_components


@final
@dataclass(frozen=True, slots=True)
class Decomposition:
    """Validated components of a path and their canonical length in bytes."""

    components: tuple[str, ...]
    length: int


def canonical_components(
    path: NativePath,
    *,
    current_dir_policy: CurrentDirPolicy = CurrentDirPolicy.REJECT,
    base_length: int = 0,
) -> Decomposition:
    """Validate ``path`` and return its canonical components.

    Args:
        path: Raw native path.
        current_dir_policy: Whether ``.`` after the first component is an error
            or is skipped. A leading ``.`` is always an error.
        base_length: Canonical length already accumulated elsewhere (a builder
            buffer); the components are counted as if appended to it.

    Returns:
        Decomposition: Validated components in order (none if ``path`` has
        none) and the canonical length including ``base_length``.

    Raises:
        FilePathError: The first problem found, scanning left to right.
    """
    accepted: list[str] = []
    length = base_length

    for index, native in enumerate(native_components(path)):
        kind = native.kind

        if kind is NativeComponentKind.PREFIX:
            raise PrefixedPathError()
        if kind is NativeComponentKind.ROOT_DIR:
            raise RootDirectoryError()
        if kind is NativeComponentKind.CUR_DIR:
            if index == 0 or current_dir_policy is CurrentDirPolicy.REJECT:
                raise CurrentDirectoryError(tuple(accepted))
            continue
        if kind is NativeComponentKind.PARENT_DIR:
            raise ParentDirectoryError(tuple(accepted))

        try:
            component = decode_component(native.raw)
        except UnicodeError as exc:
            raise InvalidUTF8Error(tuple(accepted)) from exc

        if not component:
            raise EmptyComponentError(tuple(accepted))

        validate_normal_component(component, lambda: (*accepted, component))

        if accepted or length:
            length += 1
        length += utf8_length(component)
        if length > MAX_PATH_LEN:
            raise PathTooLongError(length)

        accepted.append(component)

    return Decomposition(tuple(accepted), length)


def canonicalize(
    path: NativePath,
    *,
    current_dir_policy: CurrentDirPolicy = CurrentDirPolicy.REJECT,
) -> str:
    """Return the canonical string form of ``path``.

    Raises:
        EmptyPathError: If ``path`` has no normal components.
        FilePathError: Any other validation failure.
    """
    decomposition = canonical_components(path, current_dir_policy=current_dir_policy)
    if not decomposition.components:
        raise EmptyPathError()
    return SEPARATOR.join(decomposition.components)


__all__ = ["Decomposition", "canonical_components", "canonicalize"]
