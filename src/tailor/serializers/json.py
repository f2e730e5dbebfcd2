# topmark:header:start
#
#   project      : Tailor
#   file         : json.py
#   file_relpath : src/tailor/serializers/json.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON serializer: the flat tree encoded as a JSON document.

Shapes follow [`ArraySerializer`][tailor.serializers.array.ArraySerializer];
the follow-up operations decode the emitted text, edit the decoded tree and
encode it again, so every intermediate output is a complete JSON document.

Conventions:
- Pretty-printed with ``indent=2``.
- ``json.dumps()`` does not append a trailing newline.
- Payloads are normalized first (`Path`, `Enum`, ``to_dict()``, sets/tuples).
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from tailor.core.payloads import normalize_payload
from tailor.serializers.array import ArraySerializer

if TYPE_CHECKING:
    from tailor.resources.base import Resource
    from tailor.scope import Scope


def serialize_json_object(obj: object) -> str:
    """Serialize an object to pretty-printed JSON (no trailing newline).

    Args:
        obj: The object to serialize.

    Returns:
        A pretty-printed JSON string.
    """
    return json.dumps(normalize_payload(obj), indent=2)


class JsonSerializer(ArraySerializer):
    """Encoder producing JSON text."""

    def data(self, resource: Resource, scope: Scope) -> str:
        """Return the processed tree as JSON text."""
        return serialize_json_object(super().data(resource, scope))

    def scope_root_key(self, rendered: str, identifier: str) -> str:
        """Re-nest the decoded document under ``identifier`` and re-encode it."""
        if not identifier:
            return rendered
        return serialize_json_object(super().scope_root_key(json.loads(rendered), identifier))

    def meta(self, resource: Resource, scope: Scope, rendered: str) -> str:
        """Attach metadata to the decoded document and re-encode it."""
        return serialize_json_object(super().meta(resource, scope, json.loads(rendered)))
