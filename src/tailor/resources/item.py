# topmark:header:start
#
#   project      : Tailor
#   file         : item.py
#   file_relpath : src/tailor/resources/item.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resource wrapping a single domain item."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tailor.resources.base import Resource

if TYPE_CHECKING:
    from tailor.scope import Scope


class Item(Resource):
    """A single item: `process` returns that item's filtered mapping."""

    def process(self, scope: Scope) -> Any:
        """Transform ``self.data`` and apply the post-transformation callbacks.

        Args:
            scope (Scope): The scope for the top level of this item.

        Returns:
            Any: The filtered mapping, or the scope's null default when the item
                (or the transformer output) is absent.
        """
        return self.transform_item(scope, self.data)
