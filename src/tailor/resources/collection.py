# topmark:header:start
#
#   project      : Tailor
#   file         : collection.py
#   file_relpath : src/tailor/resources/collection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resource wrapping an ordered collection of domain items.

Every element goes through the same per-item pipeline as an `Item`, in
collection order, sequentially. Paging data (if any) travels with the
resource and is attached to the metadata at render time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tailor.config.logging import get_logger
from tailor.resources.base import Resource

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tailor.config.logging import TailorLogger
    from tailor.scope import Scope

logger: TailorLogger = get_logger(__name__)


class Collection(Resource):
    """An ordered collection: `process` returns one result per element."""

    def process(self, scope: Scope) -> list[Any]:
        """Transform every element of ``self.data`` in order.

        Args:
            scope (Scope): The scope applied to each element.

        Returns:
            list[Any]: One entry per element. An absent collection yields ``[]``;
                absent elements yield the scope's null default in place.
        """
        if self.data is None:
            return []
        items: Iterable[Any] = self.data
        results: list[Any] = [self.transform_item(scope, item) for item in items]
        logger.debug("Collection: processed %d item(s)", len(results))
        return results
