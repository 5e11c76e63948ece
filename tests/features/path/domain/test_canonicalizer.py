"""
Summary: Check acceptance, canonical output and error precedence for whole paths.
Why: The left-to-right walk must reject the first problem with its exact location.
"""

from __future__ import annotations

import pytest

from canonpath.features.path.domain.canonicalizer import canonical_components, canonicalize
from canonpath.features.path.domain.constants import MAX_NUM_COMPONENTS, MAX_PATH_LEN
from canonpath.features.path.domain.errors import (
    ComponentEndsWithAPeriodError,
    ComponentEndsWithASpaceError,
    ComponentTooLongError,
    CurrentDirectoryError,
    EmptyPathError,
    FilePathError,
    InvalidCharacterError,
    InvalidUTF8Error,
    ParentDirectoryError,
    PathTooLongError,
    PrefixedPathError,
    ReservedNameError,
    RootDirectoryError,
)
from canonpath.shared.policies import CurrentDirPolicy


class TestCanonicalize:
    """Accepted inputs and their canonical strings."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("foo", "foo"),
            ("foo/bar", "foo/bar"),
            ("foo\\bar", "foo/bar"),
            ("foo/bar//Baz\\BILL\\", "foo/bar/Baz/BILL"),
            ("textures\\props\\barrels\\red_barrel.png", "textures/props/barrels/red_barrel.png"),
            (b"foo\\bar", "foo/bar"),
            ("日本/語.txt", "日本/語.txt"),
        ],
    )
    def test_accepted(self, path: str | bytes, expected: str) -> None:
        assert canonicalize(path) == expected

    def test_idempotent(self) -> None:
        once = canonicalize("a\\\\b//c\\")

        assert canonicalize(once) == once

    def test_elide_drops_inner_current_dir(self) -> None:
        assert (
            canonicalize("foo/./bar//Baz\\BILL\\", current_dir_policy=CurrentDirPolicy.ELIDE)
            == "foo/bar/Baz/BILL"
        )

    def test_elide_drops_trailing_current_dir(self) -> None:
        assert canonicalize("foo/.", current_dir_policy=CurrentDirPolicy.ELIDE) == "foo"

    def test_empty_path(self) -> None:
        with pytest.raises(EmptyPathError):
            _ = canonicalize("")

    def test_single_separator_is_a_root(self) -> None:
        with pytest.raises(RootDirectoryError):
            _ = canonicalize("/")

    def test_double_leading_separator_is_a_prefix(self) -> None:
        with pytest.raises(PrefixedPathError):
            _ = canonicalize("//")


class TestRejections:
    """The first error found and where it is reported."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/foo", RootDirectoryError()),
            ("\\foo", RootDirectoryError()),
            ("C:foo", PrefixedPathError()),
            ("C:\\foo", PrefixedPathError()),
            ("//server/share/foo", PrefixedPathError()),
            ("./foo", CurrentDirectoryError(())),
            (".", CurrentDirectoryError(())),
            ("foo/./bar", CurrentDirectoryError(("foo",))),
            ("foo/../bar", ParentDirectoryError(("foo",))),
            ("..", ParentDirectoryError(())),
            ("foo/bar./baz", ComponentEndsWithAPeriodError(("foo", "bar."))),
            ("foo/bar /baz", ComponentEndsWithASpaceError(("foo", "bar "))),
            ("foo/b:ar", InvalidCharacterError(("foo", "b:ar"), ":")),
            ("foo/NUL.txt", ReservedNameError(("foo", "NUL.txt"))),
            ("a/b/con", ReservedNameError(("a", "b", "con"))),
            (b"foo/\xff/bar", InvalidUTF8Error(("foo",))),
            ("foo/\udcff", InvalidUTF8Error(("foo",))),
        ],
    )
    def test_rejected(self, path: str | bytes, expected: FilePathError) -> None:
        with pytest.raises(FilePathError) as exc_info:
            _ = canonicalize(path)

        assert exc_info.value == expected
        assert exc_info.value.kind is expected.kind

    def test_leading_current_dir_is_rejected_when_eliding(self) -> None:
        with pytest.raises(CurrentDirectoryError) as exc_info:
            _ = canonicalize("./foo", current_dir_policy=CurrentDirPolicy.ELIDE)

        assert exc_info.value.components == ()

    def test_reject_policy_rejects_inner_current_dir(self) -> None:
        with pytest.raises(CurrentDirectoryError) as exc_info:
            _ = canonicalize("foo/./bar//Baz\\BILL\\")

        assert exc_info.value.location == "foo"

    def test_parent_dir_is_rejected_when_eliding(self) -> None:
        with pytest.raises(ParentDirectoryError):
            _ = canonicalize("foo/../bar", current_dir_policy=CurrentDirPolicy.ELIDE)

    def test_first_problem_wins(self) -> None:
        with pytest.raises(ParentDirectoryError):
            _ = canonicalize("foo/../NUL/bar:")

    def test_component_error_location_uses_canonical_separators(self) -> None:
        with pytest.raises(ComponentTooLongError) as exc_info:
            _ = canonicalize("foo\\\\bar\\" + "x" * 300)

        assert exc_info.value.location == "foo/bar/" + "x" * 300
        assert exc_info.value.length == 300

    def test_error_messages(self) -> None:
        with pytest.raises(ParentDirectoryError) as exc_info:
            _ = canonicalize("foo/bar/..")

        assert str(exc_info.value) == "path component at 'foo/bar' contains a parent directory component"


class TestPathLength:
    """Limits on the total canonical length."""

    def test_maximum_length_is_accepted(self) -> None:
        path = "a/" * 32767 + "a"

        decomposition = canonical_components(path)

        assert decomposition.length == MAX_PATH_LEN
        assert len(decomposition.components) == 32768

    def test_one_byte_over_is_rejected(self) -> None:
        with pytest.raises(PathTooLongError) as exc_info:
            _ = canonicalize("a/" * 32767 + "aa")

        assert exc_info.value.length == MAX_PATH_LEN + 1

    def test_length_counts_canonical_separators_only(self) -> None:
        # Doubled separators shrink to one in the canonical form.
        path = "a//" * 32767 + "a"

        assert len(canonicalize(path)) == MAX_PATH_LEN

    def test_base_length_is_included(self) -> None:
        decomposition = canonical_components("bar", base_length=3)

        assert decomposition.length == 7

    def test_base_length_can_overflow(self) -> None:
        with pytest.raises(PathTooLongError) as exc_info:
            _ = canonical_components("a", base_length=MAX_PATH_LEN)

        assert exc_info.value.length == MAX_PATH_LEN + 2

    def test_component_count_bound(self) -> None:
        assert MAX_NUM_COMPONENTS == MAX_PATH_LEN // 2
