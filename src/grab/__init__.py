"""grab: search for patterns and print the lines that match.

A line-oriented, grep-style search engine with match counting, inverted
selection, trailing/leading/symmetric context windows, line numbering and
ANSI highlighting of matches.

Examples
--------
Render matches with one line of trailing context::

    >>> from grab import SearchOptions, search_lines
    >>> print(search_lines("b", ["a", "b", "c b", "d"], options=SearchOptions(after_context=1)), end="")
    b
    c b
    ---
    c b
    d

"""

from grab.exceptions import (
    FileAccessError,
    FileError,
    FileNotFoundError,
    GrabError,
    InvalidContextLengthError,
    LineDecodingError,
    OutputWriteError,
    PatternSyntaxError,
    ValidationError,
)
from grab.options import ContextConfig, ContextKind, SearchOptions
from grab.search import (
    LineSource,
    MatchGroup,
    MatchSpan,
    PatternMatcher,
    SearchMode,
    SearchReport,
    SearchService,
    count_matches,
    search_lines,
)

__version__ = "1.0.0"

__all__ = [
    "ContextConfig",
    "ContextKind",
    "FileAccessError",
    "FileError",
    "FileNotFoundError",
    "GrabError",
    "InvalidContextLengthError",
    "LineDecodingError",
    "LineSource",
    "MatchGroup",
    "MatchSpan",
    "OutputWriteError",
    "PatternMatcher",
    "PatternSyntaxError",
    "SearchMode",
    "SearchOptions",
    "SearchReport",
    "SearchService",
    "ValidationError",
    "count_matches",
    "search_lines",
    "__version__",
]
