"""ANSI highlighting for matches, line numbers and group separators.

Styles are rendered with :mod:`rich` using the standard 8-color system, so a
highlighted match looks like ``ESC[31m<text>ESC[0m``.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from rich.color import ColorSystem
from rich.style import Style

from grab.constants import HIGHLIGHT_COLORS
from grab.search.types import MatchSpan


class HighlightCategory(Enum):
    """What a piece of highlighted text represents."""

    MATCH = "match"
    LINE_NUMBER = "line-number"
    SEPARATOR = "separator"


_STYLES: dict[HighlightCategory, Style] = {
    category: Style(color=HIGHLIGHT_COLORS[category.value]) for category in HighlightCategory
}


def highlight(category: HighlightCategory | str, text: str) -> str:
    """Wrap ``text`` in the ANSI markup for ``category``."""
    return _STYLES[HighlightCategory(category)].render(text, color_system=ColorSystem.STANDARD)


def highlight_line(text: str, spans: Iterable[MatchSpan]) -> str:
    """Highlight every matched substring of ``text``.

    Substitution works on content, not offsets: each distinct matched string is
    replaced everywhere in the working copy the first time it is seen, and the
    working copy keeps the markup added by earlier substitutions. Two spans with
    the same text are therefore highlighted in one step, and a later matched
    string can also be found inside markup added earlier.
    """
    highlighted = text
    seen: set[str] = set()
    for span in spans:
        if span.is_empty or span.text in seen:
            continue
        seen.add(span.text)
        highlighted = highlighted.replace(span.text, highlight(HighlightCategory.MATCH, span.text))
    return highlighted
