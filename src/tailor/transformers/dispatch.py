# topmark:header:start
#
#   project      : Tailor
#   file         : dispatch.py
#   file_relpath : src/tailor/transformers/dispatch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Capability dispatch for the two transformer shapes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard

from tailor.constants import DEFAULT_RESOURCE_KEY
from tailor.transformers.contracts import RelationalTransformer

if TYPE_CHECKING:
    from tailor.scope import Scope
    from tailor.transformers.contracts import Transformer

# Capability set checked by `isinstance(..., RelationalTransformer)`
RELATIONAL_METHODS: tuple[str, ...] = (
    "transform",
    "get_resource_key",
    "has_includes",
    "get_available_includes",
    "filter_includes",
    "process_includes",
)


def is_relational(transformer: Transformer) -> TypeGuard[RelationalTransformer]:
    """Return True if ``transformer`` satisfies the relational capability set."""
    return isinstance(transformer, RelationalTransformer)


def invoke_transformer(transformer: Transformer, item: Any, scope: Scope) -> Any:
    """Run ``transformer`` on ``item`` with the include/exclude views of ``scope``.

    Args:
        transformer (Transformer): A callback or a relational transformer.
        item (Any): The domain item (never ``None`` here).
        scope (Scope): Current scope.

    Returns:
        Any: Whatever the transformer returned (mapping, opaque object or None).

    Raises:
        TypeError: If ``transformer`` is neither callable nor a complete
            relational transformer. The message names the missing methods.
    """
    args: tuple[Any, ...] = (
        item,
        scope.get_includes(scoped=True),
        scope.get_excludes(scoped=True),
        scope.get_includes(scoped=False),
        scope.get_excludes(scoped=False),
    )
    if is_relational(transformer):
        return transformer.transform(*args)
    if not callable(transformer):
        missing: list[str] = [
            name for name in RELATIONAL_METHODS if not callable(getattr(transformer, name, None))
        ]
        raise TypeError(
            f"{type(transformer).__name__} is not a callback and lacks the relational "
            f"transformer methods: {', '.join(missing)}"
        )
    return transformer(*args)


def transformer_resource_key(transformer: Transformer) -> str:
    """Return ``"data"`` for callbacks, else the transformer's own resource key."""
    if is_relational(transformer):
        return transformer.get_resource_key()
    return DEFAULT_RESOURCE_KEY
