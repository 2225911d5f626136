"""Immutable option objects for grab."""

from grab.options.base import CloneFrozenMixin
from grab.options.search import ContextConfig, ContextKind, SearchOptions, parse_context_length

__all__ = ["CloneFrozenMixin", "ContextConfig", "ContextKind", "SearchOptions", "parse_context_length"]
