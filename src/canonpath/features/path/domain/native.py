"""
Summary: Lazy splitting of raw platform paths into tagged components.
Why: Structural parts (prefix, root, ".", "..") must be told apart from names before validation.
"""

from __future__ import annotations

import ntpath
import os
import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Final, final

from .constants import CURRENT_DIR, NATIVE_SEPARATORS, PARENT_DIR

NativePath = str | bytes | os.PathLike[str] | os.PathLike[bytes]

_STR_PIECE: Final[re.Pattern[str]] = re.compile(r"[^/\\]+")
_BYTES_PIECE: Final[re.Pattern[bytes]] = re.compile(rb"[^/\\]+")
_STR_SEPARATORS: Final[tuple[str, ...]] = tuple(sorted(NATIVE_SEPARATORS))
_BYTES_SEPARATORS: Final[tuple[bytes, ...]] = tuple(sep.encode() for sep in _STR_SEPARATORS)


class NativeComponentKind(Enum):
    """What a piece of a native path stands for."""

    PREFIX = "prefix"
    ROOT_DIR = "root_dir"
    CUR_DIR = "cur_dir"
    PARENT_DIR = "parent_dir"
    NORMAL = "normal"


@final
@dataclass(frozen=True, slots=True)
class NativeComponent:
    """One piece of a native path.

    ``raw`` keeps the input type, so a component of a ``bytes`` path is
    ``bytes`` and still needs decoding.
    """

    kind: NativeComponentKind
    raw: str | bytes


def native_components(path: NativePath) -> Iterator[NativeComponent]:
    """Yield the components of ``path`` in order.

    Both ``/`` and ``\\`` separate components on every host. Repeated and
    trailing separators produce no empty components. A drive or UNC prefix is
    yielded as a single ``PREFIX`` component; a separator directly after it (or
    at the very start) is a ``ROOT_DIR``.

    Args:
        path: A ``str``, ``bytes`` or path-like object.

    Yields:
        NativeComponent: Tagged components, left to right.
    """
    raw = os.fspath(path)

    drive, rest = ntpath.splitdrive(raw)
    if drive:
        yield NativeComponent(NativeComponentKind.PREFIX, drive)

    if isinstance(rest, bytes):
        pieces: Iterator[re.Match[str]] | Iterator[re.Match[bytes]] = _BYTES_PIECE.finditer(rest)
        is_rooted = rest.startswith(_BYTES_SEPARATORS)
        current, parent = CURRENT_DIR.encode(), PARENT_DIR.encode()
    else:
        pieces = _STR_PIECE.finditer(rest)
        is_rooted = rest.startswith(_STR_SEPARATORS)
        current, parent = CURRENT_DIR, PARENT_DIR

    if is_rooted:
        yield NativeComponent(NativeComponentKind.ROOT_DIR, rest[:1])

    for match in pieces:
        piece = match.group()
        if piece == current:
            yield NativeComponent(NativeComponentKind.CUR_DIR, piece)
        elif piece == parent:
            yield NativeComponent(NativeComponentKind.PARENT_DIR, piece)
        else:
            yield NativeComponent(NativeComponentKind.NORMAL, piece)


def decode_component(raw: str | bytes) -> str:
    """Return the component as UTF-8 clean text.

    Raises:
        UnicodeError: If ``raw`` is not valid UTF-8 or holds lone surrogates
            (undecodable bytes smuggled in by ``os.fsdecode``).
    """
    if isinstance(raw, bytes):
        return raw.decode("utf-8")
    _ = raw.encode("utf-8")
    return raw


__all__ = [
    "NativeComponent",
    "NativeComponentKind",
    "NativePath",
    "decode_component",
    "native_components",
]
