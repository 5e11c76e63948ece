"""
Summary: Validation and stem/extension splitting for a single path component.
Why: Every normal component of a path must be legal on its own before it is joined.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import final

from .constants import CURRENT_DIR, MAX_COMPONENT_LEN, PARENT_DIR, is_forbidden_character, utf8_length
from .errors import (
    ComponentEndsWithAPeriodError,
    ComponentEndsWithASpaceError,
    ComponentTooLongError,
    CurrentDirectoryError,
    EmptyComponentError,
    FilePathError,
    InvalidCharacterError,
    InvalidUTF8Error,
    ParentDirectoryError,
    ReservedNameError,
)
from .reserved_names import ReservedNameMatch, ReservedNameMatcher

LocationFactory = Callable[[], tuple[str, ...]]


def validate_normal_component(component: str, location: LocationFactory) -> None:
    """Check one non-empty component, raising the first applicable error.

    Checks run in a fixed order: byte length, trailing period, trailing space,
    invalid characters, reserved names. Characters are scanned once; the same
    pass feeds the reserved name matcher until it reports a match.

    Args:
        component: Non-empty component text.
        location: Produces the error location; only called on failure.

    Raises:
        FilePathError: The first rule the component violates.
    """
    length = utf8_length(component)
    if length > MAX_COMPONENT_LEN:
        raise ComponentTooLongError(location(), length)

    if component.endswith("."):
        raise ComponentEndsWithAPeriodError(location())

    if component.endswith(" "):
        raise ComponentEndsWithASpaceError(location())

    matcher = ReservedNameMatcher(component)
    reserved: ReservedNameMatch | None = None
    for index, char in enumerate(component):
        if is_forbidden_character(char):
            raise InvalidCharacterError(location(), char)
        if reserved is None:
            reserved = matcher.feed(index, char)

    if reserved is None:
        reserved = matcher.finish()

    if reserved is not None and reserved.is_reserved_file_name():
        raise ReservedNameError(location())


def validate_component(component: str) -> None:
    """Validate a standalone component.

    Raises:
        EmptyComponentError: If ``component`` is empty.
        InvalidUTF8Error: If ``component`` cannot be encoded as UTF-8.
        CurrentDirectoryError | ParentDirectoryError: For ``"."`` / ``".."``.
        FilePathError: Any other component rule violation.
    """
    if not component:
        raise EmptyComponentError(())
    if component == CURRENT_DIR:
        raise CurrentDirectoryError(())
    if component == PARENT_DIR:
        raise ParentDirectoryError(())
    try:
        validate_normal_component(component, lambda: (component,))
    except UnicodeEncodeError as exc:
        raise InvalidUTF8Error(()) from exc


def is_valid_component(component: str) -> bool:
    """Return True if ``component`` is a legal, non-structural path component."""
    try:
        validate_component(component)
    except FilePathError:
        return False
    return True


@final
@dataclass(frozen=True, slots=True)
class StemAndExtension:
    """A component split on its last period.

    ``stem`` is ``None`` for names like ``".gitignore"``.
    """

    stem: str | None
    extension: str


def split_stem_extension(component: str) -> StemAndExtension | None:
    """Split ``component`` into file stem and extension.

    Anything after the last period is the extension, including for names that
    start with a period, unlike ``pathlib``.

    Examples:
        ``".txt"`` -> ``StemAndExtension(None, "txt")``
        ``"foo.bar.txt"`` -> ``StemAndExtension("foo.bar", "txt")``
        ``"foo"`` -> ``None``
        ``"foo."`` -> ``None`` (not a valid component anyway)
    """
    stem, period, extension = component.rpartition(".")
    if not period or not extension:
        return None
    return StemAndExtension(stem=stem or None, extension=extension)


__all__ = [
    "LocationFactory",
    "StemAndExtension",
    "is_valid_component",
    "split_stem_extension",
    "validate_component",
    "validate_normal_component",
]
