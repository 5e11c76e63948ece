"""
Summary: Export the path feature's value objects, validators, errors and use cases.
Why: Provide a stable import surface for the CLI, library users and tests.
"""

from .domain.builder import FilePathBuilder
from .domain.component import (
    StemAndExtension,
    is_valid_component,
    split_stem_extension,
    validate_component,
)
from .domain.constants import (
    FORBIDDEN_CHARACTERS,
    MAX_COMPONENT_LEN,
    MAX_NUM_COMPONENTS,
    MAX_PATH_LEN,
    RESERVED_NAMES,
    SEPARATOR,
)
from .domain.errors import (
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
from .domain.file_path import FilePath, FilePathBuf, PathAndName, split_path_and_name
from .domain.native import NativePath
from .domain.reserved_names import ReservedNameMatch, find_reserved_name, split_at_reserved_name
from .usecases.validation import is_valid_path, validate_and_canonicalize

__all__ = [
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
