"""Search subsystem exposed to the public API."""

from __future__ import annotations

import io
from typing import Iterable

from grab.options.search import SearchOptions
from grab.search.matcher import PatternMatcher, compile_pattern
from grab.search.service import SearchService, select_mode
from grab.search.source import LineSource
from grab.search.types import Line, MatchGroup, MatchSpan, SearchMode, SearchReport


def search_lines(
    pattern: str,
    lines: Iterable[str],
    *,
    options: SearchOptions | None = None,
) -> str:
    """Run a search over in-memory lines and return the rendered output."""
    buffer = io.StringIO()
    SearchService(pattern, options=options).run(lines, buffer)
    return buffer.getvalue()


def count_matches(pattern: str, lines: Iterable[str], *, ignore_case: bool = False) -> int:
    """Return the number of lines in ``lines`` that match ``pattern``."""
    matcher = compile_pattern(pattern, ignore_case=ignore_case)
    return sum(1 for line in lines if matcher.is_match(line))


__all__ = [
    "Line",
    "LineSource",
    "MatchGroup",
    "MatchSpan",
    "PatternMatcher",
    "SearchMode",
    "SearchReport",
    "SearchService",
    "compile_pattern",
    "count_matches",
    "search_lines",
    "select_mode",
]
