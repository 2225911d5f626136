#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Rendering of search results to a text stream.

The renderer accepts a flat sequence of ``(index, text)`` entries (plain and
inverted modes), a list of context groups, or a single count. Each entry is
written as one newline-terminated line, optionally prefixed with its 1-based
line number. The stream is flushed exactly once, at the end of the pass, even
when the pass is aborted by an error.
"""

from __future__ import annotations

import logging
from typing import Iterable, TextIO

from grab.constants import LINE_NUMBER_SEPARATOR
from grab.exceptions import OutputWriteError
from grab.options.search import SearchOptions
from grab.search.highlight import HighlightCategory, highlight
from grab.search.types import MatchGroup

logger = logging.getLogger(__name__)


class Renderer:
    """Write rendered lines to ``stream`` according to ``options``.

    Parameters
    ----------
    stream : TextIO
        Destination for rendered output, usually ``sys.stdout``
    options : SearchOptions
        Supplies ``line_number``, ``colorize`` and ``group_separator``

    """

    def __init__(self, stream: TextIO, options: SearchOptions) -> None:
        """Bind the renderer to an output stream."""
        self.stream = stream
        self.options = options
        self.lines_written = 0

    @property
    def target_name(self) -> str:
        """Name of the output stream, used in error messages."""
        return str(getattr(self.stream, "name", "<output>"))

    def format_line(self, index: int, text: str) -> str:
        """Return ``text`` with the line-number prefix applied when enabled."""
        if not self.options.line_number:
            return text
        number = str(index + 1)
        if self.options.colorize:
            number = highlight(HighlightCategory.LINE_NUMBER, number)
        return f"{number}{LINE_NUMBER_SEPARATOR}{text}"

    def format_separator(self) -> str:
        """Return the group separator, highlighted when colorize is on."""
        separator = self.options.group_separator
        if self.options.colorize:
            return highlight(HighlightCategory.SEPARATOR, separator)
        return separator

    def render_lines(self, entries: Iterable[tuple[int, str]]) -> int:
        """Write a flat sequence of entries and return how many were written.

        ``entries`` may be a lazy iterator; lines are written as they arrive.
        """
        written = 0
        try:
            for index, text in entries:
                self._write(self.format_line(index, text))
                written += 1
        finally:
            self._flush()
        return written

    def render_groups(self, groups: Iterable[MatchGroup]) -> int:
        """Write context groups, with a separator before every group but the first."""
        written = 0
        try:
            for position, group in enumerate(groups):
                if position > 0:
                    self._write(self.format_separator())
                for index, text in group:
                    self._write(self.format_line(index, text))
                    written += 1
        finally:
            self._flush()
        return written

    def render_count(self, count: int) -> int:
        """Write the match count as a single decimal line."""
        try:
            self._write(str(count))
        finally:
            self._flush()
        return 1

    def _write(self, line: str) -> None:
        try:
            self.stream.write(line + "\n")
        except OSError as exc:
            raise OutputWriteError(self.target_name, original_error=exc) from exc
        self.lines_written += 1

    def _flush(self) -> None:
        try:
            self.stream.flush()
        except OSError as exc:
            raise OutputWriteError(self.target_name, original_error=exc) from exc
        logger.debug("Flushed %d lines to %s", self.lines_written, self.target_name)
