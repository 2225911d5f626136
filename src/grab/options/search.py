"""Configuration options for the search engine and renderer."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from enum import Enum

from grab.constants import DEFAULT_CONTEXT_LENGTH, DEFAULT_ENCODING, DEFAULT_GROUP_SEPARATOR
from grab.exceptions import InvalidContextLengthError, ValidationError
from grab.options.base import CloneFrozenMixin

CONTEXT_FIELDS = ("after_context", "before_context", "context")


class ContextKind(Enum):
    """Which neighbouring lines a context window covers."""

    NONE = "none"
    AFTER = "after"
    BEFORE = "before"
    BOTH = "both"


@dataclass(frozen=True)
class ContextConfig:
    """Resolved context window settings for one search run."""

    kind: ContextKind = ContextKind.NONE
    length: int = DEFAULT_CONTEXT_LENGTH
    group_separator: str = DEFAULT_GROUP_SEPARATOR
    merge: bool = False

    @property
    def enabled(self) -> bool:
        """Return True when a context window mode is selected."""
        return self.kind is not ContextKind.NONE


_CONTEXT_LENGTH_RE = re.compile(r"\+?[0-9]+")


def parse_context_length(value: str | int, parameter_name: str = "context") -> int:
    """Parse a context window size.

    Accepts ints and strings of decimal digits (an optional leading ``+`` is
    allowed). Anything else, including negative numbers, is rejected.

    Raises
    ------
    InvalidContextLengthError
        If ``value`` is not a non-negative integer

    """
    if isinstance(value, bool):
        raise InvalidContextLengthError(parameter_name, value)
    if isinstance(value, int):
        if value < 0:
            raise InvalidContextLengthError(parameter_name, value)
        return value
    if isinstance(value, str) and _CONTEXT_LENGTH_RE.fullmatch(value):
        return int(value)
    raise InvalidContextLengthError(parameter_name, value)


@dataclass(frozen=True)
class SearchOptions(CloneFrozenMixin):
    """Search and rendering toggles used by the CLI and the API.

    The context fields are independent so that a configuration layer may set
    several of them; :meth:`resolve_context` picks one deterministically
    (after, then before, then both).
    """

    ignore_case: bool = field(
        default=False,
        metadata={"help": "Ignore case distinctions in the pattern and the input lines", "importance": "core"},
    )
    count: bool = field(
        default=False,
        metadata={"help": "Suppress normal output and print the number of matching lines", "importance": "core"},
    )
    line_number: bool = field(
        default=False,
        metadata={"help": "Prefix each output line with its 1-based line number", "importance": "core"},
    )
    colorize: bool = field(
        default=False,
        metadata={"help": "Highlight matches, line numbers and group separators", "importance": "core"},
    )
    invert_match: bool = field(
        default=False,
        metadata={"help": "Select non-matching lines instead of matching ones", "importance": "core"},
    )
    after_context: int | None = field(
        default=None,
        metadata={"help": "Number of trailing context lines to print after each match", "type": int},
    )
    before_context: int | None = field(
        default=None,
        metadata={"help": "Number of leading context lines to print before each match", "type": int},
    )
    context: int | None = field(
        default=None,
        metadata={"help": "Number of context lines to print before and after each match", "type": int},
    )
    group_separator: str = field(
        default=DEFAULT_GROUP_SEPARATOR,
        metadata={"help": "Separator printed between context groups", "importance": "core"},
    )
    merge_groups: bool = field(
        default=False,
        metadata={
            "help": "Coalesce overlapping or adjacent context windows into a single group",
            "importance": "advanced",
        },
    )
    encoding: str = field(
        default=DEFAULT_ENCODING,
        metadata={"help": "Text encoding used to decode input lines", "importance": "advanced"},
    )
    strict_decoding: bool = field(
        default=False,
        metadata={
            "help": "Fail on lines that are not valid text instead of replacing bad bytes",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate field types and normalize context sizes to ints.

        Raises
        ------
        InvalidContextLengthError
            If any context size is not a non-negative integer.
        ValidationError
            If a flag is not a bool or a text setting is not a str.

        """
        for name in CONTEXT_FIELDS:
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, parse_context_length(value, name))

        for f in fields(self):
            if f.name in CONTEXT_FIELDS:
                continue
            expected = bool if isinstance(f.default, bool) else str
            value = getattr(self, f.name)
            if not isinstance(value, expected):
                raise ValidationError(
                    f"{f.name} must be a {expected.__name__}, got {type(value).__name__} {value!r}",
                    parameter_name=f.name,
                    parameter_value=value,
                )

    def resolve_context(self) -> ContextConfig:
        """Return the single context configuration in effect."""
        if self.after_context is not None:
            kind, length = ContextKind.AFTER, self.after_context
        elif self.before_context is not None:
            kind, length = ContextKind.BEFORE, self.before_context
        elif self.context is not None:
            kind, length = ContextKind.BOTH, self.context
        else:
            kind, length = ContextKind.NONE, 0
        return ContextConfig(kind=kind, length=length, group_separator=self.group_separator, merge=self.merge_groups)
