#  Copyright (c) 2025 Tom Villani, Ph.D.
"""High-level orchestration: pick an output mode and run it.

Mode precedence is fixed: count, then invert, then a context mode (after,
then before, then both), then plain listing. Count, invert and plain modes
consume the input in a single forward pass; context modes read the whole
input into memory first because windows look backwards and forwards.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Sequence, TextIO, Union

from grab.options.search import ContextKind, SearchOptions
from grab.search.context import assemble_groups
from grab.search.highlight import highlight_line
from grab.search.matcher import PatternMatcher
from grab.search.render import Renderer
from grab.search.source import LineSource
from grab.search.types import Line, MatchGroup, SearchMode, SearchReport

logger = logging.getLogger(__name__)

_CONTEXT_MODES = {
    ContextKind.AFTER: SearchMode.AFTER_CONTEXT,
    ContextKind.BEFORE: SearchMode.BEFORE_CONTEXT,
    ContextKind.BOTH: SearchMode.BOTH_CONTEXT,
}

LineInput = Union[LineSource, Iterable[str]]


def select_mode(options: SearchOptions) -> SearchMode:
    """Return the output mode implied by ``options``."""
    if options.count:
        return SearchMode.COUNT
    if options.invert_match:
        return SearchMode.INVERT
    context = options.resolve_context()
    if context.enabled:
        return _CONTEXT_MODES[context.kind]
    return SearchMode.PLAIN


def _iter_lines(lines: LineInput) -> Iterator[Line]:
    if isinstance(lines, LineSource):
        return lines.iter_lines()
    return (Line(index, text) for index, text in enumerate(lines))


class SearchService:
    """Service object coordinating classification, window assembly and rendering.

    Parameters
    ----------
    pattern : str
        Regular expression to search for
    options : SearchOptions, optional
        Output and matching configuration; defaults to plain listing

    Raises
    ------
    PatternSyntaxError
        If ``pattern`` does not compile

    """

    def __init__(self, pattern: str, options: SearchOptions | None = None) -> None:
        """Compile the pattern with the configured case sensitivity."""
        self.options = options or SearchOptions()
        self.matcher = PatternMatcher(pattern, ignore_case=self.options.ignore_case)

    @property
    def mode(self) -> SearchMode:
        """Return the output mode this service will run."""
        return select_mode(self.options)

    def count_matches(self, lines: LineInput) -> int:
        """Return the number of matching lines."""
        return sum(1 for line in _iter_lines(lines) if self.matcher.is_match(line.text))

    def iter_matches(self, lines: LineInput) -> Iterator[tuple[int, str]]:
        """Yield ``(index, text)`` for each matching line, highlighted when colorize is on."""
        for line in _iter_lines(lines):
            spans = self.matcher.classify(line)
            if not spans:
                continue
            text = highlight_line(line.text, spans) if self.options.colorize else line.text
            yield line.index, text

    def iter_non_matches(self, lines: LineInput) -> Iterator[tuple[int, str]]:
        """Yield ``(index, text)`` for each line that does not match."""
        for line in _iter_lines(lines):
            if not self.matcher.is_match(line.text):
                yield line.index, line.text

    def context_groups(self, lines: LineInput) -> list[MatchGroup]:
        """Materialize ``lines`` and assemble the context groups."""
        if isinstance(lines, LineSource):
            materialized: Sequence[str] = lines.read_all()
        elif isinstance(lines, Sequence):
            materialized = lines
        else:
            materialized = list(lines)
        return assemble_groups(
            materialized,
            self.matcher,
            self.options.resolve_context(),
            colorize=self.options.colorize,
        )

    def run(self, lines: LineInput, stream: TextIO) -> SearchReport:
        """Search ``lines`` and write the rendered output to ``stream``.

        Parameters
        ----------
        lines : LineSource or Iterable[str]
            Input lines; a LineSource is read lazily except in context modes
        stream : TextIO
            Output destination, flushed once when rendering ends

        Returns
        -------
        SearchReport
            Mode used, number of matching lines and number of lines written

        """
        mode = self.mode
        renderer = Renderer(stream, self.options)
        logger.debug("Running %s search for %r", mode.name.lower(), self.matcher.pattern)

        if mode is SearchMode.COUNT:
            matched = self.count_matches(lines)
            renderer.render_count(matched)
            return SearchReport(mode=mode, selected_lines=matched, lines_written=renderer.lines_written)

        if mode is SearchMode.INVERT:
            selected = renderer.render_lines(self.iter_non_matches(lines))
            return SearchReport(mode=mode, selected_lines=selected, lines_written=renderer.lines_written)

        if mode.uses_context:
            groups = self.context_groups(lines)
            renderer.render_groups(groups)
            matched = sum(len(group.anchors) for group in groups)
            return SearchReport(
                mode=mode, selected_lines=matched, lines_written=renderer.lines_written, groups=len(groups)
            )

        matched = renderer.render_lines(self.iter_matches(lines))
        return SearchReport(mode=mode, selected_lines=matched, lines_written=renderer.lines_written)
