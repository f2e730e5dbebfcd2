# topmark:header:start
#
#   project      : Tailor
#   file         : __init__.py
#   file_relpath : src/tailor/resources/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resources: data plus transformer, serializer and metadata."""

from __future__ import annotations

from tailor.resources.base import PostTransformationCallback, Resource
from tailor.resources.collection import Collection
from tailor.resources.item import Item

__all__ = [
    "Collection",
    "Item",
    "PostTransformationCallback",
    "Resource",
]
