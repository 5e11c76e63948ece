"""
Summary: Validated relative path values with componentwise equality and hashing.
Why: Holding a path that passed validation lets callers skip re-checking it.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass
from itertools import zip_longest
from pathlib import PurePosixPath
from typing import TYPE_CHECKING, Self, cast, final

from typing_extensions import override

from canonpath.shared.policies import CurrentDirPolicy

from .canonicalizer import canonical_components
from .component import split_stem_extension
from .constants import SEPARATOR, utf8_length
from .errors import EmptyPathError
from .native import NativeComponentKind, NativePath, native_components

if TYPE_CHECKING:
    from .builder import FilePathBuilder


def _source_text(path: NativePath) -> str:
    raw = os.fspath(path)
    if isinstance(raw, bytes):
        return raw.decode("utf-8")
    return raw


class FilePath:
    """Non-empty, relative, UTF-8 file path that passed validation.

    The source string is kept as given, so it may still use backslashes,
    repeated separators, or (under the ``elide`` policy) inner ``.``
    components. Comparison and hashing work on the components, leaf to root,
    so ``FilePath("foo//bar")`` equals ``FilePath("foo/bar")``.
    """

    __slots__ = ("_path",)

    _path: str

    def __init__(
        self,
        path: NativePath,
        *,
        current_dir_policy: CurrentDirPolicy = CurrentDirPolicy.REJECT,
    ) -> None:
        """Validate ``path``.

        Args:
            path: Raw native path (``str``, ``bytes`` or path-like).
            current_dir_policy: Treatment of ``.`` after the first component.

        Raises:
            FilePathError: If ``path`` is not a valid file path.
        """
        decomposition = canonical_components(
            path, current_dir_policy=current_dir_policy
        )
        if not decomposition.components:
            raise EmptyPathError()
        self._path = _source_text(path)

    @classmethod
    def _from_validated(cls, text: str) -> Self:
        """Wrap ``text`` that already passed validation."""
        instance = cls.__new__(cls)
        instance._path = text
        return instance

    def as_str(self) -> str:
        return self._path

    @property
    def byte_length(self) -> int:
        """Length in bytes of the (source) string. Always > 0."""
        return utf8_length(self._path)

    def components(self) -> Iterator[str]:
        """Iterate the components, root to leaf."""
        for native in native_components(self._path):
            # Only normal components and elided "." survive validation.
            if native.kind is NativeComponentKind.NORMAL:
                yield cast(str, native.raw)

    def reversed_components(self) -> Iterator[str]:
        """Iterate the components, leaf to root."""
        return reversed(list(self.components()))

    @property
    def file_name(self) -> str:
        """The last component, e.g. ``"baz.txt"`` for ``"foo/bar/baz.txt"``."""
        return next(self.reversed_components())

    @property
    def file_stem(self) -> str | None:
        """The file name without its extension.

        ``None`` for names such as ``".txt"``; see ``split_stem_extension``.
        """
        file_name = self.file_name
        split = split_stem_extension(file_name)
        return file_name if split is None else split.stem

    @property
    def extension(self) -> str | None:
        split = split_stem_extension(self.file_name)
        return None if split is None else split.extension

    def as_posix_path(self) -> PurePosixPath:
        return PurePosixPath(*self.components())

    def to_owned(self) -> "FilePathBuf":
        """Re-join the components with a single separator."""
        return FilePathBuf._from_validated(SEPARATOR.join(self.components()))

    def __fspath__(self) -> str:
        """The canonical text, as held by ``to_owned()``."""
        return SEPARATOR.join(self.components())

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilePath):
            return NotImplemented
        if self._path == other._path:
            return True
        return all(
            left == right
            for left, right in zip_longest(self.reversed_components(), other.reversed_components())
        )

    @override
    def __hash__(self) -> int:
        return hash(tuple(self.components()))

    @override
    def __str__(self) -> str:
        return self._path

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._path!r})"


@final
class FilePathBuf(FilePath):
    """Canonical form of a ``FilePath``.

    Components are joined with a single ``/`` and nothing else, e.g.
    ``"textures/props/barrels/red_barrel.png"``. Two ``FilePathBuf`` values
    are equal exactly when their strings are equal.
    """

    __slots__ = ()

    def __init__(
        self,
        path: NativePath,
        *,
        current_dir_policy: CurrentDirPolicy = CurrentDirPolicy.REJECT,
    ) -> None:
        """Validate and canonicalize ``path``.

        Raises:
            FilePathError: If ``path`` is not a valid file path.
        """
        decomposition = canonical_components(
            path, current_dir_policy=current_dir_policy
        )
        if not decomposition.components:
            raise EmptyPathError()
        self._path = SEPARATOR.join(decomposition.components)

    @override
    def components(self) -> Iterator[str]:
        return iter(self._path.split(SEPARATOR))

    @override
    def reversed_components(self) -> Iterator[str]:
        return reversed(self._path.split(SEPARATOR))

    @property
    @override
    def file_name(self) -> str:
        return self._path.rpartition(SEPARATOR)[2]

    @override
    def as_posix_path(self) -> PurePosixPath:
        return PurePosixPath(self._path)

    @override
    def to_owned(self) -> "FilePathBuf":
        return self

    def to_builder(self) -> "FilePathBuilder":
        """Start a builder holding this path."""
        from .builder import FilePathBuilder

        builder = FilePathBuilder()
        builder.extend_validated(self)
        return builder

    @override
    def __fspath__(self) -> str:
        return self._path

    @override
    def __eq__(self, other: object) -> bool:
        if isinstance(other, FilePathBuf):
            return self._path == other._path
        return super().__eq__(other)

    @override
    def __hash__(self) -> int:
        return hash(tuple(self._path.split(SEPARATOR)))


@final
@dataclass(frozen=True, slots=True)
class PathAndName:
    """A path split into its parent path and its last component.

    ``"foo/bar/baz.txt"`` -> ``PathAndName(FilePathBuf("foo/bar"), "baz.txt")``.
    """

    path: FilePathBuf
    name: str


def split_path_and_name(path: FilePath) -> PathAndName | None:
    """Split ``path`` on its last separator.

    Returns:
        PathAndName | None: ``None`` if ``path`` has a single component.
    """
    canonical = path.to_owned().as_str()
    parent, separator, name = canonical.rpartition(SEPARATOR)
    if not separator:
        return None
    return PathAndName(path=FilePathBuf._from_validated(parent), name=name)


__all__ = ["FilePath", "FilePathBuf", "PathAndName", "split_path_and_name"]
