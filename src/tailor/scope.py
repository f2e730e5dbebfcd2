# topmark:header:start
#
#   project      : Tailor
#   file         : scope.py
#   file_relpath : src/tailor/scope.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scope contract consumed by resources and transformers.

A *scope* exposes the caller's already-resolved include/exclude policy for the
current nesting level. Parsing request strings such as ``"author,comments.user"``
into these sets happens elsewhere; this module only defines what the pipeline
reads.

Two views exist for includes and excludes:

- ``scoped=True``: names that apply at the current nesting level.
- ``scoped=False``: all names requested anywhere in the tree, flattened.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Scope(Protocol):
    """Read-only view of the include/exclude policy for one nesting level."""

    def get_includes(self, scoped: bool = True) -> frozenset[str]:
        """Return the requested relation names.

        Args:
            scoped (bool): If True, only names for the current level; else all names.

        Returns:
            frozenset[str]: The requested include names.
        """
        ...

    def get_excludes(self, scoped: bool = True) -> frozenset[str]:
        """Return the excluded field names.

        Args:
            scoped (bool): If True, only names for the current level; else all names.

        Returns:
            frozenset[str]: The excluded field names.
        """
        ...

    def filtered_excludes(self) -> frozenset[str]:
        """Return the field names to strip from the current level's mapping."""
        ...

    def get_null_default_value(self) -> Any:
        """Return the value used in place of an absent item or transform result."""
        ...


@dataclass(frozen=True, slots=True)
class StaticScope:
    """Scope backed by pre-resolved, immutable name sets.

    Attributes:
        includes (frozenset[str]): Include names at the current level.
        excludes (frozenset[str]): Exclude names at the current level.
        all_includes (frozenset[str]): Every include name in the request. Defaults
            to ``includes`` when left empty.
        all_excludes (frozenset[str]): Every exclude name in the request. Defaults
            to ``excludes`` when left empty.
        null_default (Any): Value returned for absent items.
    """

    includes: frozenset[str] = frozenset()
    excludes: frozenset[str] = frozenset()
    all_includes: frozenset[str] = frozenset()
    all_excludes: frozenset[str] = frozenset()
    null_default: Any = None
    _filtered: frozenset[str] | None = field(default=None, repr=False)

    @classmethod
    def of(
        cls,
        *,
        includes: Any = (),
        excludes: Any = (),
        all_includes: Any = (),
        all_excludes: Any = (),
        filtered_excludes: Any = None,
        null_default: Any = None,
    ) -> StaticScope:
        """Build a scope from any iterables of names.

        Args:
            includes (Any): Include names at the current level.
            excludes (Any): Exclude names at the current level.
            all_includes (Any): All include names; defaults to ``includes``.
            all_excludes (Any): All exclude names; defaults to ``excludes``.
            filtered_excludes (Any): Names to strip; defaults to ``excludes``.
            null_default (Any): Value returned for absent items.

        Returns:
            StaticScope: The frozen scope.
        """
        inc: frozenset[str] = frozenset(includes)
        exc: frozenset[str] = frozenset(excludes)
        return cls(
            includes=inc,
            excludes=exc,
            all_includes=frozenset(all_includes) or inc,
            all_excludes=frozenset(all_excludes) or exc,
            null_default=null_default,
            _filtered=None if filtered_excludes is None else frozenset(filtered_excludes),
        )

    def get_includes(self, scoped: bool = True) -> frozenset[str]:
        """Return include names for this level (``scoped``) or the whole request."""
        if scoped:
            return self.includes
        return self.all_includes or self.includes

    def get_excludes(self, scoped: bool = True) -> frozenset[str]:
        """Return exclude names for this level (``scoped``) or the whole request."""
        if scoped:
            return self.excludes
        return self.all_excludes or self.excludes

    def filtered_excludes(self) -> frozenset[str]:
        """Return the names stripped at this level (defaults to the scoped excludes)."""
        if self._filtered is None:
            return self.excludes
        return self._filtered

    def get_null_default_value(self) -> Any:
        """Return the configured null default."""
        return self.null_default
