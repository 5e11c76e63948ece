"""
Summary: Typed errors raised when a candidate path or component is rejected.
Why: Callers branch on the error kind and read the offending location, length, or character.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, final

from typing_extensions import override

from .constants import SEPARATOR


class FilePathErrorKind(str, Enum):
    """Every reason a path can be rejected."""

    PREFIXED_PATH = "prefixed_path"
    ROOT_DIRECTORY = "root_directory"
    CURRENT_DIRECTORY = "current_directory"
    PARENT_DIRECTORY = "parent_directory"
    EMPTY_COMPONENT = "empty_component"
    COMPONENT_TOO_LONG = "component_too_long"
    INVALID_CHARACTER = "invalid_character"
    COMPONENT_ENDS_WITH_A_PERIOD = "component_ends_with_a_period"
    COMPONENT_ENDS_WITH_A_SPACE = "component_ends_with_a_space"
    RESERVED_NAME = "reserved_name"
    INVALID_UTF8 = "invalid_utf8"
    EMPTY_PATH = "empty_path"
    PATH_TOO_LONG = "path_too_long"


class FilePathError(ValueError):
    """Base class for all path validation failures.

    Two errors compare equal when they have the same kind and carry the same
    data, which keeps assertions in tests short.
    """

    kind: ClassVar[FilePathErrorKind]

    def _key(self) -> tuple[object, ...]:
        return ()

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilePathError):
            return NotImplemented
        return type(self) is type(other) and self._key() == other._key()

    @override
    def __hash__(self) -> int:
        return hash((type(self), self._key()))


class LocatedFilePathError(FilePathError):
    """A failure tied to a position inside the path.

    Attributes:
        components: Components of the input up to the failure. Depending on the
            kind, the failing component itself is the last element.
    """

    message: ClassVar[str] = "is invalid"

    def __init__(self, components: tuple[str, ...] = ()) -> None:
        self.components: tuple[str, ...] = tuple(components)
        super().__init__(self._render())

    @property
    def location(self) -> str:
        """The failure location rendered as a path string."""
        return SEPARATOR.join(self.components)

    def _render(self) -> str:
        return f"path component at {self.location!r} {self.message}"

    @override
    def _key(self) -> tuple[object, ...]:
        return (self.components,)


@final
class PrefixedPathError(FilePathError):
    """Path starts with a drive or UNC prefix."""

    kind = FilePathErrorKind.PREFIXED_PATH

    def __init__(self) -> None:
        super().__init__("path contains a prefix")


@final
class RootDirectoryError(FilePathError):
    """Path starts with a separator."""

    kind = FilePathErrorKind.ROOT_DIRECTORY

    def __init__(self) -> None:
        super().__init__("path contains a root directory")


@final
class CurrentDirectoryError(LocatedFilePathError):
    kind = FilePathErrorKind.CURRENT_DIRECTORY
    message = "contains a current directory component"


@final
class ParentDirectoryError(LocatedFilePathError):
    kind = FilePathErrorKind.PARENT_DIRECTORY
    message = "contains a parent directory component"


@final
class EmptyComponentError(LocatedFilePathError):
    kind = FilePathErrorKind.EMPTY_COMPONENT
    message = "is empty"


@final
class InvalidUTF8Error(LocatedFilePathError):
    kind = FilePathErrorKind.INVALID_UTF8
    message = "contains invalid UTF-8"


@final
class ComponentEndsWithAPeriodError(LocatedFilePathError):
    kind = FilePathErrorKind.COMPONENT_ENDS_WITH_A_PERIOD
    message = "ends with a period"


@final
class ComponentEndsWithASpaceError(LocatedFilePathError):
    kind = FilePathErrorKind.COMPONENT_ENDS_WITH_A_SPACE
    message = "ends with a space"


@final
class ReservedNameError(LocatedFilePathError):
    kind = FilePathErrorKind.RESERVED_NAME
    message = "contains a reserved name"


@final
class ComponentTooLongError(LocatedFilePathError):
    """Component is longer than ``MAX_COMPONENT_LEN`` bytes.

    Attributes:
        length: UTF-8 length of the component in bytes.
    """

    kind = FilePathErrorKind.COMPONENT_TOO_LONG

    def __init__(self, components: tuple[str, ...], length: int) -> None:
        self.length: int = length
        super().__init__(components)

    @override
    def _render(self) -> str:
        return f"path component at {self.location!r} is too long ({self.length} bytes)"

    @override
    def _key(self) -> tuple[object, ...]:
        return (self.components, self.length)


@final
class InvalidCharacterError(LocatedFilePathError):
    """Component contains a forbidden or control character.

    Attributes:
        character: The first offending character.
    """

    kind = FilePathErrorKind.INVALID_CHARACTER

    def __init__(self, components: tuple[str, ...], character: str) -> None:
        self.character: str = character
        super().__init__(components)

    @override
    def _render(self) -> str:
        return (
            f"path component at {self.location!r} contains an invalid character "
            f"({self.character!r})"
        )

    @override
    def _key(self) -> tuple[object, ...]:
        return (self.components, self.character)


@final
class EmptyPathError(FilePathError):
    kind = FilePathErrorKind.EMPTY_PATH

    def __init__(self) -> None:
        super().__init__("empty paths are not allowed")


@final
class PathTooLongError(FilePathError):
    """Canonical path is longer than ``MAX_PATH_LEN`` bytes.

    Attributes:
        length: Canonical length in bytes at the point the limit was exceeded.
    """

    kind = FilePathErrorKind.PATH_TOO_LONG

    def __init__(self, length: int) -> None:
        self.length: int = length
        super().__init__(f"path is too long ({length} bytes)")

    @override
    def _key(self) -> tuple[object, ...]:
        return (self.length,)


__all__ = [
    "ComponentEndsWithAPeriodError",
    "ComponentEndsWithASpaceError",
    "ComponentTooLongError",
    "CurrentDirectoryError",
    "EmptyComponentError",
    "EmptyPathError",
    "FilePathError",
    "FilePathErrorKind",
    "InvalidCharacterError",
    "InvalidUTF8Error",
    "LocatedFilePathError",
    "ParentDirectoryError",
    "PathTooLongError",
    "PrefixedPathError",
    "ReservedNameError",
    "RootDirectoryError",
]
