"""
Summary: Cover the validated path values, their accessors, equality and hashing.
Why: Differently formatted spellings of one path must behave as one value.
"""

from __future__ import annotations

from pathlib import PurePosixPath

import pytest

from canonpath.features.path.domain.errors import (
    CurrentDirectoryError,
    EmptyPathError,
    ParentDirectoryError,
    ReservedNameError,
)
from canonpath.features.path.domain.file_path import (
    FilePath,
    FilePathBuf,
    PathAndName,
    split_path_and_name,
)
from canonpath.shared.policies import CurrentDirPolicy


class TestFilePath:
    """Borrowed-style paths that keep their source text."""

    def test_keeps_source_text(self) -> None:
        path = FilePath("foo\\bar//baz.txt")

        assert path.as_str() == "foo\\bar//baz.txt"
        assert str(path) == "foo\\bar//baz.txt"
        assert list(path.components()) == ["foo", "bar", "baz.txt"]
        assert list(path.reversed_components()) == ["baz.txt", "bar", "foo"]

    def test_bytes_are_decoded(self) -> None:
        path = FilePath(b"caf\xc3\xa9/menu")

        assert path.as_str() == "café/menu"
        assert path.byte_length == 10

    def test_rejects_invalid_paths(self) -> None:
        with pytest.raises(ParentDirectoryError):
            _ = FilePath("foo/../bar")
        with pytest.raises(EmptyPathError):
            _ = FilePath("")

    def test_elided_current_dir_is_skipped(self) -> None:
        path = FilePath("foo/./bar", current_dir_policy=CurrentDirPolicy.ELIDE)

        assert path.as_str() == "foo/./bar"
        assert list(path.components()) == ["foo", "bar"]
        assert path.to_owned().as_str() == "foo/bar"

    def test_file_name_accessors(self) -> None:
        path = FilePath("assets\\archive.tar.gz")

        assert path.file_name == "archive.tar.gz"
        assert path.file_stem == "archive.tar"
        assert path.extension == "gz"

    def test_file_name_without_extension(self) -> None:
        path = FilePath("bin/tool")

        assert path.file_stem == "tool"
        assert path.extension is None

    def test_dot_file(self) -> None:
        path = FilePath("repo/.gitignore")

        assert path.file_stem is None
        assert path.extension == "gitignore"

    def test_as_posix_path(self) -> None:
        assert FilePath("a\\b").as_posix_path() == PurePosixPath("a/b")

    def test_repr(self) -> None:
        assert repr(FilePath("a\\b")) == "FilePath('a\\\\b')"


class TestFilePathBuf:
    """Canonical paths."""

    def test_canonical_form(self) -> None:
        path = FilePathBuf("foo/bar//Baz\\BILL\\")

        assert path.as_str() == "foo/bar/Baz/BILL"
        assert path.byte_length == len("foo/bar/Baz/BILL")
        assert path.file_name == "BILL"

    def test_round_trip(self) -> None:
        path = FilePathBuf("a\\b\\c.txt")

        assert FilePathBuf(path.as_str()) == path
        assert FilePathBuf(path) == path
        assert path.to_owned() is path

    def test_fspath(self) -> None:
        import os

        assert os.fspath(FilePathBuf("a\\b")) == "a/b"

    def test_reserved_name(self) -> None:
        with pytest.raises(ReservedNameError) as exc_info:
            _ = FilePathBuf("logs/COM1.log")

        assert exc_info.value.location == "logs/COM1.log"

    def test_default_policy_rejects_inner_current_dir(self) -> None:
        with pytest.raises(CurrentDirectoryError):
            _ = FilePathBuf("foo/./bar//Baz\\BILL\\")

    def test_elide_policy(self) -> None:
        path = FilePathBuf("foo/./bar//Baz\\BILL\\", current_dir_policy=CurrentDirPolicy.ELIDE)

        assert path == FilePathBuf("foo/bar/Baz/BILL")

    def test_configuration_file_is_not_consulted(self, write_config) -> None:
        _ = write_config('current_dir_policy = "elide"\n')

        with pytest.raises(CurrentDirectoryError):
            _ = FilePathBuf("foo/./bar")
        with pytest.raises(CurrentDirectoryError):
            _ = FilePath("foo/./bar")

    def test_borrowed_path_is_path_like(self) -> None:
        import os

        borrowed = FilePath("foo/./bar", current_dir_policy=CurrentDirPolicy.ELIDE)

        assert os.fspath(borrowed) == "foo/bar"
        assert FilePathBuf(borrowed) == FilePathBuf("foo/bar")


class TestEqualityAndHashing:
    """Componentwise comparison across both types."""

    @pytest.mark.parametrize(
        "spelling",
        ["foo/bar/Baz/BILL", "foo/bar//Baz\\BILL\\", "foo\\bar\\Baz\\BILL", "foo//bar/Baz/BILL/"],
    )
    def test_spellings_are_equal(self, spelling: str) -> None:
        canonical = FilePathBuf("foo/bar/Baz/BILL")
        borrowed = FilePath(spelling)

        assert borrowed == canonical
        assert canonical == borrowed
        assert hash(borrowed) == hash(canonical)
        assert borrowed.to_owned() == canonical

    def test_set_membership(self) -> None:
        paths = {FilePath("a\\b"), FilePathBuf("a/b"), FilePath("a//b")}

        assert len(paths) == 1

    @pytest.mark.parametrize(
        ("left", "right"),
        [("a/b", "b"), ("b", "a/b"), ("a/b", "a/c"), ("a/b", "A/b")],
    )
    def test_different_paths(self, left: str, right: str) -> None:
        assert FilePath(left) != FilePath(right)
        assert FilePathBuf(left) != FilePathBuf(right)

    def test_not_equal_to_strings(self) -> None:
        assert FilePathBuf("a/b") != "a/b"


class TestSplitPathAndName:
    """Parent/leaf split."""

    def test_split(self) -> None:
        assert split_path_and_name(FilePath("foo\\bar\\baz.txt")) == PathAndName(
            path=FilePathBuf("foo/bar"), name="baz.txt"
        )

    def test_single_component(self) -> None:
        assert split_path_and_name(FilePathBuf("baz.txt")) is None
