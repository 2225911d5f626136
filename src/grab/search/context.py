#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Context-window assembly.

For every matching line (the anchor) a window of neighbouring line indices is
computed and turned into a :class:`~grab.search.types.MatchGroup`. Windows are
computed independently per anchor and are not merged, so overlapping windows
repeat lines in consecutive groups. The optional merge mode coalesces
overlapping or adjacent windows instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from grab.options.search import ContextConfig, ContextKind
from grab.search.highlight import highlight_line
from grab.search.matcher import PatternMatcher
from grab.search.types import MatchGroup, MatchSpan

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Anchor:
    """A matching line index and the spans found on it."""

    index: int
    spans: tuple[MatchSpan, ...]


def compute_window(anchor: int, kind: ContextKind, length: int) -> tuple[int, int]:
    """Return the inclusive ``(lo, hi)`` window of line indices for ``anchor``.

    The lower bound saturates at zero. The upper bound is not clipped here;
    indices past the end of the stream are skipped during assembly.
    """
    lo = anchor
    hi = anchor
    if kind in (ContextKind.BEFORE, ContextKind.BOTH):
        lo = max(0, anchor - length)
    if kind in (ContextKind.AFTER, ContextKind.BOTH):
        hi = anchor + length
    return lo, hi


def find_anchors(lines: Sequence[str], matcher: PatternMatcher) -> list[Anchor]:
    """Scan ``lines`` once and return the matching indices in ascending order."""
    anchors: list[Anchor] = []
    for index, text in enumerate(lines):
        spans = matcher.classify(text)
        if spans:
            anchors.append(Anchor(index, tuple(spans)))
    return anchors


def assemble_groups(
    lines: Sequence[str],
    matcher: PatternMatcher,
    config: ContextConfig,
    colorize: bool = False,
) -> list[MatchGroup]:
    """Build the ordered list of context groups for a fully materialized stream.

    Parameters
    ----------
    lines : Sequence[str]
        Every line of the input, indexable by 0-based position
    matcher : PatternMatcher
        Compiled pattern used to classify lines
    config : ContextConfig
        Window kind, window length and merge setting
    colorize : bool, default False
        Highlight the matches on anchor lines

    Returns
    -------
    list[MatchGroup]
        One group per anchor (or per merged run of windows), in anchor order

    """
    anchors = find_anchors(lines, matcher)
    logger.debug("Found %d matching lines out of %d", len(anchors), len(lines))
    if config.merge:
        return _assemble_merged(lines, anchors, config, colorize)

    last_index = len(lines) - 1
    groups: list[MatchGroup] = []
    for anchor in anchors:
        lo, hi = compute_window(anchor.index, config.kind, config.length)
        entries: list[tuple[int, str]] = []
        for index in range(lo, min(hi, last_index) + 1):
            if index == anchor.index and colorize:
                entries.append((index, highlight_line(lines[index], anchor.spans)))
            else:
                entries.append((index, lines[index]))
        groups.append(MatchGroup(anchors=(anchor.index,), entries=tuple(entries)))
    return groups


def _assemble_merged(
    lines: Sequence[str],
    anchors: list[Anchor],
    config: ContextConfig,
    colorize: bool,
) -> list[MatchGroup]:
    last_index = len(lines) - 1
    runs: list[tuple[int, int, list[Anchor]]] = []
    for anchor in anchors:
        lo, hi = compute_window(anchor.index, config.kind, config.length)
        hi = min(hi, last_index)
        if runs and lo <= runs[-1][1] + 1:
            prev_lo, prev_hi, members = runs[-1]
            members.append(anchor)
            runs[-1] = (prev_lo, max(prev_hi, hi), members)
        else:
            runs.append((lo, hi, [anchor]))

    groups: list[MatchGroup] = []
    for lo, hi, members in runs:
        spans_by_index = {anchor.index: anchor.spans for anchor in members}
        entries: list[tuple[int, str]] = []
        for index in range(lo, hi + 1):
            spans = spans_by_index.get(index)
            if spans is not None and colorize:
                entries.append((index, highlight_line(lines[index], spans)))
            else:
                entries.append((index, lines[index]))
        groups.append(MatchGroup(anchors=tuple(spans_by_index), entries=tuple(entries)))
    return groups
