# topmark:header:start
#
#   project      : Tailor
#   file         : contracts.py
#   file_relpath : src/tailor/transformers/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type contracts for transformers (resource-facing).

A transformer maps one domain item to a plain field mapping. Two capability
sets exist:

- **callback**: any callable
  ``(item, scoped_includes, scoped_excludes, all_includes, all_excludes)``
  returning a mapping, an opaque object, or ``None``. Callbacks cannot declare
  relations.
- **relational**: an object satisfying `RelationalTransformer`. It transforms
  items through ``transform(...)`` (same five arguments) and additionally
  declares relations that the caller may opt into.

Resources dispatch on the capability set an object satisfies (a structural
protocol check), never on a concrete base class.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol, Union, runtime_checkable

if TYPE_CHECKING:
    from tailor.scope import Scope

TransformerCallback = Callable[
    [Any, frozenset[str], frozenset[str], frozenset[str], frozenset[str]],
    Any,
]
"""Signature of a bare callback transformer."""


@runtime_checkable
class RelationalTransformer(Protocol):
    """Protocol for transformers that declare nested relations.

    Relation placeholders: a transformer may emit a key for every relation in
    ``get_available_includes()``. Keys for relations that were not requested
    (not in ``filter_includes(scope)``) are stripped by the resource; requested
    ones are replaced/merged with the output of ``process_includes``.
    """

    def transform(
        self,
        item: Any,
        scoped_includes: frozenset[str],
        scoped_excludes: frozenset[str],
        all_includes: frozenset[str],
        all_excludes: frozenset[str],
    ) -> Any:
        """Map ``item`` to a field mapping (or ``None`` when there is nothing to emit)."""
        ...

    def get_resource_key(self) -> str:
        """Return the identifier under which this transformer's output is nested."""
        ...

    def has_includes(self) -> bool:
        """Return whether this transformer declares any relation at all."""
        ...

    def get_available_includes(self) -> frozenset[str]:
        """Return the names of every relation this transformer can produce."""
        ...

    def filter_includes(self, scope: Scope) -> frozenset[str]:
        """Return the relation names that are both available and requested in ``scope``."""
        ...

    def process_includes(self, scope: Scope, item: Any) -> Sequence[Mapping[str, Any]]:
        """Transform each requested relation of ``item``.

        Depth-first and sequential: each returned mapping is fully processed
        (including its own nested relations) before the next one starts.

        Args:
            scope (Scope): The scope of the *parent* level.
            item (Any): The parent domain item.

        Returns:
            Sequence[Mapping[str, Any]]: One mapping per requested relation, in
                merge order.
        """
        ...


Transformer = Union[TransformerCallback, RelationalTransformer]
"""Either capability set accepted by resources."""
