# topmark:header:start
#
#   project      : Tailor
#   file         : array.py
#   file_relpath : src/tailor/serializers/array.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Flat (identity) serializer: the filtered tree as plain dicts and lists.

This is the default encoding. Shapes:
  - data: the processed tree unchanged
  - scope_root_key: ``{identifier: rendered}``
  - meta: ``{**rendered, meta_key: meta}``; a non-mapping payload (e.g. a
    collection list) is first placed under ``"data"``
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from tailor.constants import DEFAULT_META_KEY, DEFAULT_RESOURCE_KEY
from tailor.serializers.base import Serializer

if TYPE_CHECKING:
    from tailor.resources.base import Resource
    from tailor.scope import Scope


class ArraySerializer(Serializer):
    """Identity encoder producing plain Python structures.

    Attributes:
        meta_key (str): Key under which metadata is attached.
    """

    def __init__(self, *, meta_key: str = DEFAULT_META_KEY) -> None:
        self.meta_key: str = meta_key

    def __repr__(self) -> str:
        return f"{type(self).__name__}(meta_key={self.meta_key!r})"

    def data(self, resource: Resource, scope: Scope) -> Any:
        """Return ``resource.process(scope)`` unchanged."""
        return resource.process(scope)

    def scope_root_key(self, rendered: Any, identifier: str) -> Any:
        """Return ``{identifier: rendered}``, or ``rendered`` when ``identifier`` is empty."""
        if not identifier:
            return rendered
        return {identifier: rendered}

    def meta(self, resource: Resource, scope: Scope, rendered: Any) -> Any:
        """Return a new mapping with the metadata added under ``meta_key``.

        Args:
            resource (Resource): The resource whose metadata is attached.
            scope (Scope): The top-level scope (unused).
            rendered (Any): The rendered payload.

        Returns:
            dict[str, Any]: The payload entries plus ``meta_key``.
        """
        payload: dict[str, Any]
        if isinstance(rendered, Mapping):
            payload = dict(rendered)
        else:
            payload = {DEFAULT_RESOURCE_KEY: rendered}
        payload[self.meta_key] = dict(resource.get_meta())
        return payload
