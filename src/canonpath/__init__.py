"""Validated, canonical relative file paths.

Paths are checked against the rules of the most restrictive common file
systems (Windows reserved names, forbidden characters, length limits) and
joined with ``/``::

    >>> from canonpath import validate_and_canonicalize
    >>> str(validate_and_canonicalize("textures\\\\props//barrel.png"))
    'textures/props/barrel.png'
"""

from canonpath.features.path.domain.builder import FilePathBuilder
from canonpath.features.path.domain.component import (
    StemAndExtension,
    is_valid_component,
    split_stem_extension,
    validate_component,
)
from canonpath.features.path.domain.constants import (
    FORBIDDEN_CHARACTERS,
    MAX_COMPONENT_LEN,
    MAX_NUM_COMPONENTS,
    MAX_PATH_LEN,
    RESERVED_NAMES,
    SEPARATOR,
)
from canonpath.features.path.domain.errors import (
    ComponentEndsWithAPeriodError,
    ComponentEndsWithASpaceError,
    ComponentTooLongError,
    CurrentDirectoryError,
    EmptyComponentError,
    EmptyPathError,
    FilePathError,
    FilePathErrorKind,
    InvalidCharacterError,
    InvalidUTF8Error,
    LocatedFilePathError,
    ParentDirectoryError,
    PathTooLongError,
    PrefixedPathError,
    ReservedNameError,
    RootDirectoryError,
)
from canonpath.features.path.domain.file_path import FilePath, FilePathBuf, PathAndName, split_path_and_name
from canonpath.features.path.domain.native import NativePath
from canonpath.features.path.domain.reserved_names import ReservedNameMatch, find_reserved_name, split_at_reserved_name
from canonpath.features.path.usecases.validation import is_valid_path, validate_and_canonicalize
from canonpath.shared.policies import CurrentDirPolicy

__version__ = "0.1.0"

__all__ = [
    "CurrentDirPolicy",
    "FORBIDDEN_CHARACTERS",
    "MAX_COMPONENT_LEN",
    "MAX_NUM_COMPONENTS",
    "MAX_PATH_LEN",
    "RESERVED_NAMES",
    "SEPARATOR",
    "ComponentEndsWithAPeriodError",
    "ComponentEndsWithASpaceError",
    "ComponentTooLongError",
    "CurrentDirectoryError",
    "EmptyComponentError",
    "EmptyPathError",
    "FilePath",
    "FilePathBuf",
    "FilePathBuilder",
    "FilePathError",
    "FilePathErrorKind",
    "InvalidCharacterError",
    "InvalidUTF8Error",
    "LocatedFilePathError",
    "NativePath",
    "ParentDirectoryError",
    "PathAndName",
    "PathTooLongError",
    "PrefixedPathError",
    "ReservedNameError",
    "ReservedNameMatch",
    "RootDirectoryError",
    "StemAndExtension",
    "find_reserved_name",
    "is_valid_component",
    "is_valid_path",
    "split_at_reserved_name",
    "split_path_and_name",
    "split_stem_extension",
    "validate_and_canonicalize",
    "validate_component",
]
