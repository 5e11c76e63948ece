"""
Summary: Incremental construction of canonical paths from validated pieces.
Why: Callers assembling a path piece by piece need the same limits enforced on the total.
"""

from __future__ import annotations

from typing import final

from canonpath.shared.policies import CurrentDirPolicy

from .canonicalizer import canonical_components
from .constants import MAX_PATH_LEN, SEPARATOR, utf8_length
from .errors import EmptyPathError, PathTooLongError
from .file_path import FilePathBuf
from .native import NativePath


@final
class FilePathBuilder:
    """Mutable buffer of validated components.

    Not meant to be shared between threads.
    """

    __slots__ = ("_components", "_length")

    def __init__(self) -> None:
        self._components: list[str] = []
        self._length: int = 0

    def __len__(self) -> int:
        """Length in bytes of the path built so far."""
        return self._length

    def is_empty(self) -> bool:
        return not self._components

    def push(
        self,
        path: NativePath,
        *,
        current_dir_policy: CurrentDirPolicy = CurrentDirPolicy.REJECT,
    ) -> None:
        """Validate ``path`` and append its components.

        The total length, including what is already buffered, is checked
        against ``MAX_PATH_LEN``. Nothing is appended if validation fails.

        Raises:
            EmptyPathError: If ``path`` has no components.
            FilePathError: If ``path`` is invalid or the result would be too long.
        """
        decomposition = canonical_components(
            path,
            current_dir_policy=current_dir_policy,
            base_length=self._length,
        )
        if not decomposition.components:
            raise EmptyPathError()
        self._components.extend(decomposition.components)
        self._length = decomposition.length

    def extend_validated(self, path: FilePathBuf) -> None:
        """Append an already validated path without re-checking its components.

        Raises:
            PathTooLongError: If the result would exceed ``MAX_PATH_LEN``.
        """
        length = self._length + path.byte_length
        if self._components:
            length += 1
        if length > MAX_PATH_LEN:
            raise PathTooLongError(length)
        self._length = length
        self._components.extend(path.components())

    def pop(self) -> bool:
        """Remove the last component.

        Returns:
            bool: ``True`` if a component was removed.
        """
        if not self._components:
            return False
        component = self._components.pop()
        self._length -= utf8_length(component)
        if self._components:
            self._length -= 1
        return True

    def clear(self) -> None:
        self._components.clear()
        self._length = 0

    def as_str(self) -> str:
        return SEPARATOR.join(self._components)

    def build(self) -> FilePathBuf | None:
        """Return the built path, or ``None`` if nothing was pushed."""
        if not self._components:
            return None
        return FilePathBuf._from_validated(self.as_str())

    def __repr__(self) -> str:
        return f"FilePathBuilder({self.as_str()!r})"


__all__ = ["FilePathBuilder"]
