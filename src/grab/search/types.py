"""Shared data structures for the search subsystem."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator


class SearchMode(Enum):
    """Enumerate the output strategies, in dispatch precedence order."""

    COUNT = auto()
    INVERT = auto()
    AFTER_CONTEXT = auto()
    BEFORE_CONTEXT = auto()
    BOTH_CONTEXT = auto()
    PLAIN = auto()

    @property
    def uses_context(self) -> bool:
        """Return True for the windowed modes that need the whole stream in memory."""
        return self in (SearchMode.AFTER_CONTEXT, SearchMode.BEFORE_CONTEXT, SearchMode.BOTH_CONTEXT)


@dataclass(frozen=True)
class Line:
    """A line of input text and its 0-based position in the source."""

    index: int
    text: str

    @property
    def number(self) -> int:
        """Return the 1-based line number used for display."""
        return self.index + 1


@dataclass(frozen=True)
class MatchSpan:
    """One match occurrence within a line."""

    start: int
    end: int
    text: str

    @property
    def is_empty(self) -> bool:
        """Return True for zero-width matches."""
        return self.start == self.end


@dataclass(frozen=True)
class MatchGroup:
    """One context window: the ordered ``(line_index, text)`` entries around its anchor(s).

    Unmerged groups have exactly one anchor. Groups built with window merging
    may carry several.
    """

    anchors: tuple[int, ...]
    entries: tuple[tuple[int, str], ...] = field(default_factory=tuple)

    @property
    def anchor(self) -> int:
        """Return the first anchor line index of the group."""
        return self.anchors[0]

    @property
    def indices(self) -> list[int]:
        """Return the line indices contained in the group, in order."""
        return [index for index, _ in self.entries]

    def __iter__(self) -> Iterator[tuple[int, str]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class SearchReport:
    """Summary of one completed search run.

    ``selected_lines`` is the number of lines chosen by the mode: matching lines
    for count, plain and context modes, non-matching lines for invert mode.
    """

    mode: SearchMode
    selected_lines: int
    lines_written: int
    groups: int = 0
