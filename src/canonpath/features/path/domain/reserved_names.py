"""
Summary: Single-pass automaton that finds reserved device names inside a path component.
Why: Reserved names may be embedded anywhere and must be found without backtracking.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Final, final


class MatchState(Enum):
    """Progress through one reserved name; the name is the matched prefix."""

    A = auto()
    AU = auto()
    N = auto()
    NU = auto()
    P = auto()
    PR = auto()
    C = auto()
    CO = auto()
    CON = auto()
    COM = auto()
    CONI = auto()
    CONIN = auto()
    CONO = auto()
    CONOU = auto()
    CONOUT = auto()
    L = auto()
    LP = auto()
    LPT = auto()


# The first character of every reserved name selects exactly one family.
_START: Final[dict[str, MatchState]] = {
    "a": MatchState.A,
    "n": MatchState.N,
    "p": MatchState.P,
    "c": MatchState.C,
    "l": MatchState.L,
}

_ADVANCE: Final[dict[tuple[MatchState, str], MatchState]] = {
    (MatchState.A, "u"): MatchState.AU,
    (MatchState.N, "u"): MatchState.NU,
    (MatchState.P, "r"): MatchState.PR,
    (MatchState.C, "o"): MatchState.CO,
    (MatchState.CO, "n"): MatchState.CON,
    (MatchState.CO, "m"): MatchState.COM,
    (MatchState.CON, "i"): MatchState.CONI,
    (MatchState.CON, "o"): MatchState.CONO,
    (MatchState.CONI, "n"): MatchState.CONIN,
    (MatchState.CONO, "u"): MatchState.CONOU,
    (MatchState.CONOU, "t"): MatchState.CONOUT,
    (MatchState.L, "p"): MatchState.LP,
    (MatchState.LP, "t"): MatchState.LPT,
}

# Completing transitions mapped to how many characters back the match starts.
_COMPLETE: Final[dict[tuple[MatchState, str], int]] = {
    (MatchState.AU, "x"): 2,
    (MatchState.NU, "l"): 2,
    (MatchState.PR, "n"): 2,
    (MatchState.CONIN, "$"): 5,
    (MatchState.CONOUT, "$"): 6,
    **{(MatchState.COM, digit): 3 for digit in "0123456789"},
    **{(MatchState.LPT, digit): 3 for digit in "0123456789"},
}


@final
@dataclass(frozen=True, slots=True)
class ReservedNameMatch:
    """Location of a reserved name inside a component.

    Attributes:
        component: The scanned component.
        start: Index of the first matched character.
        end: Index one past the last matched character.
    """

    component: str
    start: int
    end: int

    @property
    def before(self) -> str:
        return self.component[: self.start]

    @property
    def name(self) -> str:
        return self.component[self.start : self.end]

    @property
    def after(self) -> str:
        return self.component[self.end :]

    def is_reserved_file_name(self) -> bool:
        """Whether the match makes the whole component a reserved file name.

        That is the case when only whitespace precedes the name and nothing, or
        an extension, follows it (``"NUL"``, ``" AUX"``, ``"CON .txt"``).
        """
        before = self.before.rstrip()
        after = self.after.lstrip()
        return not before and (not after or after.startswith("."))


@final
class ReservedNameMatcher:
    """Streaming matcher fed one character at a time.

    At most one candidate is tracked. When a character fails to continue the
    candidate it is re-evaluated as the start of a new one. ``CON`` is the only
    name that is also the prefix of other names (``CONIN$``, ``CONOUT$``), so it
    is reported one character late, or by ``finish()`` at the end of input.
    """

    __slots__ = ("_component", "_state", "_last_index")

    def __init__(self, component: str) -> None:
        self._component: str = component
        self._state: MatchState | None = None
        self._last_index: int = 0

    def feed(self, index: int, char: str) -> ReservedNameMatch | None:
        """Consume the character at ``index``; return a match once one completes."""
        self._last_index = index

        if not char.isascii():
            self._state = None
            return None

        char = char.lower()
        state = self._state

        if state is None:
            self._state = _START.get(char)
            return None

        advanced = _ADVANCE.get((state, char))
        if advanced is not None:
            self._state = advanced
            return None

        start_offset = _COMPLETE.get((state, char))
        if start_offset is not None:
            self._state = None
            return ReservedNameMatch(self._component, index - start_offset, index + 1)

        if state is MatchState.CON:
            # "CON" followed by something that is not an "IN$"/"OUT$" extension.
            self._state = None
            return ReservedNameMatch(self._component, index - 3, index)

        self._state = _START.get(char)
        return None

    def finish(self) -> ReservedNameMatch | None:
        """Report a trailing ``CON`` once all characters have been fed."""
        state = self._state
        self._state = None
        if state is MatchState.CON:
            end = self._last_index + 1
            return ReservedNameMatch(self._component, end - 3, end)
        return None


def find_reserved_name(component: str) -> ReservedNameMatch | None:
    """Find the first reserved device name embedded in ``component``.

    Args:
        component: A single path component.

    Returns:
        ReservedNameMatch | None: The first match by end position, or ``None``.
    """
    matcher = ReservedNameMatcher(component)
    for index, char in enumerate(component):
        match = matcher.feed(index, char)
        if match is not None:
            return match
    return matcher.finish()


def split_at_reserved_name(component: str) -> tuple[str, str] | None:
    """Like ``str.partition`` on the first reserved name, without the name itself.

    The halves are returned untrimmed, e.g. ``". PRnt"`` -> ``(". ", "t")``.
    """
    match = find_reserved_name(component)
    if match is None:
        return None
    return match.before, match.after


__all__ = [
    "MatchState",
    "ReservedNameMatch",
    "ReservedNameMatcher",
    "find_reserved_name",
    "split_at_reserved_name",
]
