# topmark:header:start
#
#   project      : Tailor
#   file         : api.py
#   file_relpath : src/tailor/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public entry points for rendering resources.

Typical usage:

    config = MutableConfig.from_defaults().freeze()
    resource = Item(user, user_transformer, make_serializer(OutputFormat.XML, config))
    scope = make_scope(config, includes={"profile"}, excludes={"password"})
    output = render(resource, scope, identifier="user")

`render` is synchronous and runs to completion. Errors raised by transformers
or scopes are not caught here.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

from tailor.config.logging import get_logger
from tailor.constants import PAGINATION_META_KEY
from tailor.core.errors import SerializerMissingError
from tailor.scope import StaticScope

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tailor.config.logging import TailorLogger
    from tailor.config.model import Config
    from tailor.resources.base import Resource
    from tailor.scope import Scope
    from tailor.serializers.base import Serializer

logger: TailorLogger = get_logger(__name__)


def render(resource: Resource, scope: Scope, *, identifier: str = "") -> Any:
    """Render ``resource`` with its serializer.

    Rendering has no side effects on ``resource``.

    Steps:
      1. when paging data is present and the caller did not set ``"pagination"``,
         metadata is taken from a copy of the resource carrying that entry;
      2. ``serializer.data(resource, scope)``;
      3. ``serializer.scope_root_key(rendered, identifier)``;
      4. ``serializer.meta(resource, scope, rendered)`` when the resource has metadata.

    Args:
        resource (Resource): The resource to render.
        scope (Scope): The top-level scope.
        identifier (str): Optional wrapper name for the whole payload.

    Returns:
        Any: The rendered output (type depends on the serializer).

    Raises:
        SerializerMissingError: If the resource has no serializer.
    """
    serializer: Serializer | None = resource.serializer
    if serializer is None:
        raise SerializerMissingError(f"{type(resource).__name__} has no serializer to render with")

    rendered: Any = serializer.data(resource, scope)
    rendered = serializer.scope_root_key(rendered, identifier)
    meta_source: Resource = _with_pagination_meta(resource)
    if meta_source.has_meta():
        rendered = serializer.meta(meta_source, scope, rendered)

    logger.debug("render: %r rendered with %r", type(resource).__name__, serializer)
    return rendered


def _with_pagination_meta(resource: Resource) -> Resource:
    """Return ``resource``, or a shallow copy whose meta also holds the paging data."""
    if not resource.has_paging_data() or PAGINATION_META_KEY in resource.get_meta():
        return resource
    annotated: Resource = copy.copy(resource)
    annotated.meta = {**resource.get_meta(), PAGINATION_META_KEY: resource.paging_data}
    return annotated


def make_scope(
    config: Config | None = None,
    *,
    includes: Iterable[str] = (),
    excludes: Iterable[str] = (),
    all_includes: Iterable[str] = (),
    all_excludes: Iterable[str] = (),
) -> StaticScope:
    """Build a `StaticScope` using the null default configured in ``config``.

    Args:
        config (Config | None): Runtime config; the null default is None without one.
        includes (Iterable[str]): Include names at the top level.
        excludes (Iterable[str]): Exclude names at the top level.
        all_includes (Iterable[str]): All include names; defaults to ``includes``.
        all_excludes (Iterable[str]): All exclude names; defaults to ``excludes``.

    Returns:
        StaticScope: The scope.
    """
    return StaticScope.of(
        includes=includes,
        excludes=excludes,
        all_includes=all_includes,
        all_excludes=all_excludes,
        null_default=None if config is None else config.null_default,
    )
