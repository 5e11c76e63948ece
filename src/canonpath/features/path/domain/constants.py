"""
Summary: Limits, separator, and character sets that define a canonical file path.
Why: Keep the wire contract of the path format in one importable place.
"""

from typing import Final

# The only separator used by canonical paths.
SEPARATOR: Final[str] = "/"

# Separators recognised when splitting native input (forward and back slash).
NATIVE_SEPARATORS: Final[frozenset[str]] = frozenset({"/", "\\"})

# Maximum component length in bytes (UTF-8 encoded).
MAX_COMPONENT_LEN: Final[int] = 0xFF

# Maximum total path length in bytes (UTF-8 encoded), separators included.
MAX_PATH_LEN: Final[int] = 0xFFFF

# "a/a/a/ab" has 8 bytes and 4 components.
MAX_NUM_COMPONENTS: Final[int] = MAX_PATH_LEN // 2

CURRENT_DIR: Final[str] = "."
PARENT_DIR: Final[str] = ".."

FORBIDDEN_CHARACTERS: Final[frozenset[str]] = frozenset('\\/:*?"<>|')

RESERVED_NAMES: Final[tuple[str, ...]] = (
    "AUX",
    "CON",
    "PRN",
    "NUL",
    *(f"COM{digit}" for digit in range(10)),
    *(f"LPT{digit}" for digit in range(10)),
    "CONIN$",
    "CONOUT$",
)


def is_forbidden_character(char: str) -> bool:
    """Return True for path-illegal punctuation and ASCII control characters."""
    return char in FORBIDDEN_CHARACTERS or char <= "\x1f" or char == "\x7f"


def utf8_length(text: str) -> int:
    """Length of ``text`` in bytes when encoded as UTF-8.

    Raises:
        UnicodeEncodeError: If ``text`` holds lone surrogates.
    """
    return len(text.encode("utf-8"))


__all__ = [
    "CURRENT_DIR",
    "FORBIDDEN_CHARACTERS",
    "MAX_COMPONENT_LEN",
    "MAX_NUM_COMPONENTS",
    "MAX_PATH_LEN",
    "NATIVE_SEPARATORS",
    "PARENT_DIR",
    "RESERVED_NAMES",
    "SEPARATOR",
    "is_forbidden_character",
    "utf8_length",
]
