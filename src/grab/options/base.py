"""Base classes for grab options.

This module defines the immutable configuration foundation shared by the
search engine and the CLI.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def field_names(cls) -> set[str]:
        """Return the names of all dataclass fields on this options class."""
        return {f.name for f in fields(cls)}  # type: ignore[arg-type]

    def apply_mapping(self, values: Mapping[str, Any]) -> tuple[Self, list[str]]:
        """Apply known keys from ``values`` and report the ignored ones.

        Parameters
        ----------
        values : Mapping[str, Any]
            Candidate field values, typically loaded from a config file

        Returns
        -------
        tuple[Self, list[str]]
            The updated instance and the sorted list of unrecognized keys

        """
        known = self.field_names()
        accepted = {key: value for key, value in values.items() if key in known}
        ignored = sorted(key for key in values if key not in known)
        if not accepted:
            return self, ignored
        return self.create_updated(**accepted), ignored
