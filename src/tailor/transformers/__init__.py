# topmark:header:start
#
#   project      : Tailor
#   file         : __init__.py
#   file_relpath : src/tailor/transformers/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Transformer contracts and capability dispatch."""

from __future__ import annotations

from tailor.transformers.contracts import (
    RelationalTransformer,
    Transformer,
    TransformerCallback,
)
from tailor.transformers.dispatch import (
    invoke_transformer,
    is_relational,
    transformer_resource_key,
)

__all__ = [
    "RelationalTransformer",
    "Transformer",
    "TransformerCallback",
    "invoke_transformer",
    "is_relational",
    "transformer_resource_key",
]
