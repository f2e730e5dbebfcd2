# topmark:header:start
#
#   project      : Tailor
#   file         : base.py
#   file_relpath : src/tailor/resources/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Abstract resource and the per-item transformation pipeline.

A resource wraps domain data together with the transformer that maps it, the
serializer that will render it, and side-channel metadata. Concrete variants
(`Item`, `Collection`) decide how `process` walks the data; every variant
funnels each element through `Resource.process_item`:

1. absent item -> the scope's null default (transformer not invoked);
2. invoke the transformer; absent result -> the scope's null default;
3. strip ``scope.filtered_excludes()`` (plain mappings only);
4. bare callbacks stop here;
5. strip available-but-unrequested relation placeholders;
6. transformers without relations stop here;
7. merge ``process_includes`` results in order, later keys overwriting earlier ones;
8. return the merged mapping.

Merge order is a public contract: when two relations (or a relation and the
base mapping) produce the same key, the relation that comes *last* in the
sequence returned by ``process_includes`` wins.

Resources are built per request and are not meant to be shared between
threads; their mutable state (meta, callbacks) belongs to one caller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable

from tailor.config.logging import get_logger
from tailor.core.errors import MethodNotImplementedError
from tailor.transformers.dispatch import (
    invoke_transformer,
    is_relational,
    transformer_resource_key,
)

if TYPE_CHECKING:
    from tailor.config.logging import TailorLogger
    from tailor.scope import Scope
    from tailor.serializers.base import Serializer
    from tailor.transformers.contracts import Transformer

logger: TailorLogger = get_logger(__name__)

PostTransformationCallback = Callable[[Any, Any, "Resource"], Any]
"""Callback ``(transformed, original, resource) -> new transformed``."""


class Resource(ABC):
    """Unit of work wrapping data, its transformer, serializer and metadata.

    Attributes:
        data (Any): The domain item or collection; may be ``None``.
        transformer (Transformer): Callback or relational transformer.
        serializer (Serializer | None): Encoder used by `tailor.api.render`.
        meta (dict[str, Any]): Metadata attached to the rendered output.
        paging_data (Any): Optional pagination information (presence only).
    """

    def __init__(
        self,
        data: Any,
        transformer: Transformer,
        serializer: Serializer | None = None,
        *,
        meta: Mapping[str, Any] | None = None,
        paging_data: Any = None,
    ) -> None:
        """Initialize a Resource.

        Args:
            data: The domain item or collection to transform.
            transformer: The transformer mapping each item; required.
            serializer: The encoder used when rendering; optional for raw processing.
            meta: Initial metadata (copied).
            paging_data: Optional pagination information.

        Raises:
            TypeError: If ``transformer`` is None.
        """
        if transformer is None:
            raise TypeError(f"{type(self).__name__} requires a transformer")
        self.data: Any = data
        self.transformer: Transformer = transformer
        self.serializer: Serializer | None = serializer
        self.meta: dict[str, Any] = dict(meta) if meta else {}
        self.paging_data: Any = paging_data
        self._post_transformation_callbacks: list[PostTransformationCallback] = []

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(transformer={self.transformer!r}, "
            f"serializer={self.serializer!r}, meta_keys={sorted(self.meta)!r})"
        )

    # ------------------------------ Entry point ------------------------------

    @abstractmethod
    def process(self, scope: Scope) -> Any:
        """Return the fully filtered tree for this resource (no root wrapper).

        Concrete variants must override this method.

        Raises:
            MethodNotImplementedError: When reached through ``super().process()``.
        """
        raise MethodNotImplementedError(type(self).__name__, "process")

    # --------------------------- Item transformation ---------------------------

    def process_item(self, scope: Scope, item: Any) -> Any:
        """Transform one item under the include/exclude policy of ``scope``.

        Args:
            scope (Scope): The scope for the current nesting level.
            item (Any): The domain item; ``None`` means absent.

        Returns:
            Any: The filtered mapping, an opaque transformer result, or the
                scope's null default.
        """
        if item is None:
            return scope.get_null_default_value()

        transformed: Any = invoke_transformer(self.transformer, item, scope)
        if transformed is None:
            return scope.get_null_default_value()

        if not isinstance(transformed, Mapping):
            # Opaque objects are passed through untouched.
            logger.trace("%s: transformer returned opaque %s", self, type(transformed).__name__)
            return transformed

        result: dict[str, Any] = dict(transformed)
        _drop_keys(result, scope.filtered_excludes(), reason="excluded")

        if not is_relational(self.transformer):
            return result

        transformer = self.transformer
        requested: frozenset[str] = frozenset(transformer.filter_includes(scope))
        unrequested: set[str] = set(transformer.get_available_includes()) - requested
        _drop_keys(result, unrequested, reason="unrequested relation")

        if not transformer.has_includes():
            return result

        relations: list[Mapping[str, Any]] = list(transformer.process_includes(scope, item))
        for relation in relations:
            result.update(relation)
        logger.trace("%s: merged %d relation mapping(s)", type(self).__name__, len(relations))

        return result

    def apply_post_transformation_callbacks(self, transformed: Any, item: Any) -> Any:
        """Run the post-transformation callbacks in insertion order.

        Each callback receives ``(transformed, item, self)``; its return value
        is handed to the next callback and the last one's value is returned.

        Args:
            transformed (Any): Output of `process_item` for ``item``.
            item (Any): The original domain item.

        Returns:
            Any: The transformed value after all callbacks.
        """
        for callback in self._post_transformation_callbacks:
            transformed = callback(transformed, item, self)
        return transformed

    def transform_item(self, scope: Scope, item: Any) -> Any:
        """Process one item and apply the post-transformation callbacks.

        Absent items resolve to the null default without running the callbacks.
        """
        transformed: Any = self.process_item(scope, item)
        if item is None:
            return transformed
        return self.apply_post_transformation_callbacks(transformed, item)

    # ------------------------------- Metadata -------------------------------

    def get_meta(self) -> dict[str, Any]:
        """Return the metadata mapping (never None)."""
        return self.meta

    def add_meta(self, key: str, value: Any) -> Resource:
        """Insert or overwrite one metadata entry.

        Returns:
            Resource: ``self``, for chaining.
        """
        self.meta[key] = value
        return self

    def has_meta(self) -> bool:
        """Return True if at least one metadata entry is set."""
        return bool(self.meta)

    def has_paging_data(self) -> bool:
        """Return True if paging data is present."""
        return self.paging_data is not None

    def add_post_transformation_callback(self, callback: PostTransformationCallback) -> Resource:
        """Append a callback run once per item after transformation.

        Returns:
            Resource: ``self``, for chaining.
        """
        self._post_transformation_callbacks.append(callback)
        return self

    def get_post_transformation_callbacks(self) -> tuple[PostTransformationCallback, ...]:
        """Return the registered callbacks in invocation order."""
        return tuple(self._post_transformation_callbacks)

    def get_transformer_resource_key(self) -> str:
        """Return ``"data"`` for callbacks, else the transformer's resource key."""
        return transformer_resource_key(self.transformer)


def _drop_keys(mapping: dict[str, Any], keys: frozenset[str] | set[str], *, reason: str) -> None:
    """Delete ``keys`` from ``mapping``; missing keys are ignored."""
    dropped: list[str] = [key for key in keys if key in mapping]
    for key in dropped:
        del mapping[key]
    if dropped:
        logger.trace("Dropped %s key(s): %s", reason, sorted(dropped))
