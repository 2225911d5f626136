#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Regular-expression matching and line classification.

The matcher wraps a compiled :mod:`re` pattern. Case sensitivity is fixed
when the matcher is built; there is no per-call override.
"""

from __future__ import annotations

import logging
import re

from grab.exceptions import PatternSyntaxError
from grab.search.types import Line, MatchSpan

logger = logging.getLogger(__name__)


class PatternMatcher:
    """Compiled search pattern.

    Parameters
    ----------
    pattern : str
        Regular expression to search for
    ignore_case : bool, default False
        Compile the pattern case-insensitively

    Raises
    ------
    PatternSyntaxError
        If ``pattern`` is not a valid regular expression

    """

    def __init__(self, pattern: str, ignore_case: bool = False) -> None:
        """Compile ``pattern``."""
        self.pattern = pattern
        self.ignore_case = ignore_case
        flags = re.IGNORECASE if ignore_case else 0
        try:
            self._regex = re.compile(pattern, flags)
        except re.error as exc:
            raise PatternSyntaxError(pattern, original_error=exc) from exc
        logger.debug("Compiled pattern %r (ignore_case=%s)", pattern, ignore_case)

    def __repr__(self) -> str:
        return f"PatternMatcher({self.pattern!r}, ignore_case={self.ignore_case})"

    def find(self, text: str) -> list[MatchSpan]:
        """Return every non-overlapping match in ``text``, left to right.

        Zero-width matches are included so that a pattern which only matches
        the empty string still marks the line as matching.
        """
        return [MatchSpan(m.start(), m.end(), m.group(0)) for m in self._regex.finditer(text)]

    def is_match(self, text: str) -> bool:
        """Return True if the pattern occurs anywhere in ``text``."""
        return self._regex.search(text) is not None

    def classify(self, line: Line | str) -> list[MatchSpan]:
        """Return the spans for a line; the line matches iff the list is non-empty."""
        text = line.text if isinstance(line, Line) else line
        return self.find(text)


def compile_pattern(pattern: str, ignore_case: bool = False) -> PatternMatcher:
    """Build a :class:`PatternMatcher`, raising :class:`PatternSyntaxError` on bad input."""
    return PatternMatcher(pattern, ignore_case=ignore_case)
