"""Tests for splitting raw platform paths into tagged components."""

from __future__ import annotations

from pathlib import PurePosixPath

import pytest

from canonpath.features.path.domain.native import (
    NativeComponent,
    NativeComponentKind as Kind,
    NativePath,
    decode_component,
    native_components,
)


def _kinds(path: NativePath) -> list[tuple[Kind, str | bytes]]:
    return [(component.kind, component.raw) for component in native_components(path)]


def test_both_separators_split_components() -> None:
    assert _kinds("foo\\bar/baz") == [
        (Kind.NORMAL, "foo"),
        (Kind.NORMAL, "bar"),
        (Kind.NORMAL, "baz"),
    ]


def test_repeated_and_trailing_separators_are_ignored() -> None:
    assert _kinds("foo//bar\\\\") == [(Kind.NORMAL, "foo"), (Kind.NORMAL, "bar")]


def test_structural_components_are_tagged() -> None:
    assert _kinds("./a/../b/.") == [
        (Kind.CUR_DIR, "."),
        (Kind.NORMAL, "a"),
        (Kind.PARENT_DIR, ".."),
        (Kind.NORMAL, "b"),
        (Kind.CUR_DIR, "."),
    ]


def test_dots_inside_names_are_normal() -> None:
    assert _kinds("...") == [(Kind.NORMAL, "...")]


@pytest.mark.parametrize("path", ["/foo", "\\foo"])
def test_leading_separator_is_a_root(path: str) -> None:
    components = list(native_components(path))

    assert components[0].kind is Kind.ROOT_DIR
    assert components[1] == NativeComponent(Kind.NORMAL, "foo")


@pytest.mark.parametrize("path", ["C:foo", "c:\\foo", "//server/share/foo", "\\\\?\\C:\\foo"])
def test_drive_and_unc_prefixes(path: str) -> None:
    first = next(native_components(path))

    assert first.kind is Kind.PREFIX


def test_bytes_keep_their_type() -> None:
    assert _kinds(b"foo\\..") == [(Kind.NORMAL, b"foo"), (Kind.PARENT_DIR, b"..")]


def test_path_like_input() -> None:
    assert _kinds(PurePosixPath("foo/bar")) == [(Kind.NORMAL, "foo"), (Kind.NORMAL, "bar")]


def test_empty_path_has_no_components() -> None:
    assert _kinds("") == []


def test_decode_component() -> None:
    assert decode_component(b"caf\xc3\xa9") == "café"
    assert decode_component("plain") == "plain"

    with pytest.raises(UnicodeError):
        _ = decode_component(b"\xff")
    with pytest.raises(UnicodeError):
        _ = decode_component("\udcff")
