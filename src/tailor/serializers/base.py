# topmark:header:start
#
#   project      : Tailor
#   file         : base.py
#   file_relpath : src/tailor/serializers/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serializer contract shared by every output encoding.

Every serializer turns the filtered tree produced by ``resource.process(scope)``
into its encoding and supports three follow-up operations on the rendered
output:

- `Serializer.scope_data`: nest a resource's tree under a relation name (used
  when the resource is itself a named relation of a parent);
- `Serializer.scope_root_key`: re-nest an already rendered payload one level
  deeper under an identifier;
- `Serializer.meta`: attach the resource's metadata next to the payload.

The flat `ArraySerializer` is the baseline: other encoders must render the
same tree and the same nesting/meta placement, only in a different encoding.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tailor.resources.base import Resource
    from tailor.scope import Scope


class Serializer(ABC):
    """Abstract base for output encoders."""

    @abstractmethod
    def data(self, resource: Resource, scope: Scope) -> Any:
        """Render ``resource.process(scope)`` in this encoding (no nesting).

        Args:
            resource (Resource): The resource to render.
            scope (Scope): The top-level scope.

        Returns:
            Any: The rendered output.
        """

    def scope_data(self, resource: Resource, scope: Scope, identifier: str) -> dict[str, Any]:
        """Nest the processed tree under the last dot-delimited segment of ``identifier``.

        An empty identifier falls back to the transformer's resource key.

        Args:
            resource (Resource): The resource to process.
            scope (Scope): The scope for the resource's level.
            identifier (str): Relation path such as ``"book.author"``.

        Returns:
            dict[str, Any]: ``{segment: processed_tree}``.
        """
        segment: str = identifier.rsplit(".", 1)[-1] or resource.get_transformer_resource_key()
        return {segment: resource.process(scope)}

    @abstractmethod
    def scope_root_key(self, rendered: Any, identifier: str) -> Any:
        """Re-nest the whole rendered payload under ``identifier``.

        Args:
            rendered (Any): Output previously returned by `data`.
            identifier (str): Wrapper name; empty means "leave unchanged".

        Returns:
            Any: The re-nested output (``rendered`` itself when ``identifier`` is empty).
        """

    @abstractmethod
    def meta(self, resource: Resource, scope: Scope, rendered: Any) -> Any:
        """Attach ``resource.get_meta()`` to the rendered output.

        Args:
            resource (Resource): The resource whose metadata is attached.
            scope (Scope): The top-level scope.
            rendered (Any): Output previously returned by `data` / `scope_root_key`.

        Returns:
            Any: The output with a metadata slot added; existing content is kept.
        """
